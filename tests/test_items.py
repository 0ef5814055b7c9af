import pytest

from labkit.items import Item, calc, main


def test_round_trip():
    item = Item(header=0xDEADBEEF, payload=2**63 + 5)
    assert Item.unmarshal(item.marshal()) == item


def test_wire_layout_little_endian():
    assert Item(1, 2).marshal() == b"\x01\x00\x00\x00\x02\x00\x00\x00\x00\x00\x00\x00"


def test_size_matches_encoding():
    item = Item(7, 9)
    assert len(item.marshal()) == item.size()


def test_marshal_into_leaves_tail():
    item = Item(3, 4)
    buffer = bytearray(b"\xaa" * (item.size() + 4))
    written = item.marshal_into(buffer)
    assert written == item.size()
    assert bytes(buffer[:written]) == item.marshal()
    assert bytes(buffer[written:]) == b"\xaa" * 4


def test_marshal_into_short_buffer():
    with pytest.raises(ValueError):
        Item(1, 1).marshal_into(bytearray(11))


def test_unmarshal_short_data():
    with pytest.raises(ValueError):
        Item.unmarshal(b"\x00" * 11)


def test_unmarshal_ignores_trailing_bytes():
    item = Item(10, 20)
    assert Item.unmarshal(item.marshal() + b"extra") == item


@pytest.mark.parametrize("header, payload", [(2**32, 0), (-1, 0), (0, 2**64), (0, -1)])
def test_out_of_range(header, payload):
    with pytest.raises(ValueError):
        Item(header, payload)


def test_calc_accepts_and_rejects():
    class Both:
        def foo(self, value):
            pass

        def bar(self, value):
            pass

    class FooOnly:
        def foo(self, value):
            pass

    assert calc(Both()) is None
    with pytest.raises(TypeError, match="incompatible"):
        calc(FooOnly())


def test_calc_rejects_plain_value():
    with pytest.raises(TypeError, match="incompatible"):
        calc(42)


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["incompatible", "incompatible", "<nil>"]