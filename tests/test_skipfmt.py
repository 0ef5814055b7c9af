import pytest

from labkit.skipfmt import skip_fmt4, skip_fmt4_bits, skip_fmt4_table

_SPACE_COUNTS = list(range(3, 19)) + [22, 26, 30, 62, 94, 126]

STAGES = [
    (b'{\n"key":1}', 1, 2),
    (b'{\r "key":1}', 1, 3),
    (b'{\r\t\t"key":1}', 1, 4),
] + [(b"{\n" + b" " * k + b'"key":1}', 1, 2 + k) for k in _SPACE_COUNTS]


@pytest.mark.parametrize("src, off, exp", STAGES)
def test_stages(src, off, exp):
    assert skip_fmt4(src, off) == (exp, False)
    assert skip_fmt4_table(src, off) == (exp, False)
    assert skip_fmt4_bits(src, off) == (exp, False)


def test_longest_stage():
    src, off, exp = STAGES[-1]
    assert exp == 128
    assert skip_fmt4_bits(src, off) == (128, False)


def test_all_whitespace_reaches_end():
    src = b" \t\r\n  \n"
    assert skip_fmt4(src, 0) == (7, True)
    assert skip_fmt4_table(src, 0) == (7, True)
    assert skip_fmt4_bits(src, 0) == (7, True)


def test_non_whitespace_start():
    assert skip_fmt4(b"abc", 0) == (0, False)
    assert skip_fmt4_table(b"abc", 0) == (0, False)
    assert skip_fmt4_bits(b"abc", 0) == (0, False)


def test_mixed_whitespace_long_run():
    src = b"x" + b" \t\n\r" * 9 + b"y"
    expected = (len(src) - 1, False)
    assert skip_fmt4(src, 1) == expected
    assert skip_fmt4_table(src, 1) == expected
    assert skip_fmt4_bits(src, 1) == expected


@pytest.mark.parametrize("k", range(1, 12))
def test_strategies_agree_on_odd_lengths(k):
    src = b"[" + b"\n" * k + b"]"
    assert skip_fmt4(src, 1) == (k + 1, False)
    assert skip_fmt4_table(src, 1) == (k + 1, False)
    assert skip_fmt4_bits(src, 1) == (k + 1, False)


def test_empty_input_raises():
    with pytest.raises(IndexError):
        skip_fmt4(b"", 0)
    with pytest.raises(IndexError):
        skip_fmt4_table(b"", 0)
    with pytest.raises(IndexError):
        skip_fmt4_bits(b"", 0)


def test_generic_offset_past_end_raises():
    with pytest.raises(IndexError):
        skip_fmt4(b"  ", 2)


def test_offset_at_end():
    assert skip_fmt4_table(b"ab", 2) == (2, True)
    assert skip_fmt4_bits(b"ab", 2) == (2, True)