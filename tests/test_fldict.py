import pytest

from labkit.fldict import build_dictionaries, main

HEADER = b"h1\nh2\nh3\n"


def _dataset(tmp_path, with_reverse=True):
    data = tmp_path / "data"
    data.mkdir()
    (data / "French_English.txt").write_bytes(HEADER + b"chien|dog\n")
    if with_reverse:
        (data / "English_French.txt").write_bytes(HEADER + b"cat|chat\n")
    return data


def test_build_writes_language_and_english(tmp_path):
    data = _dataset(tmp_path)
    out = tmp_path / "out"
    written = build_dictionaries(data, out)
    assert (out / "French.txt").read_bytes() == b"chat\nchien\n"
    assert (out / "English.txt").read_bytes() == b"cat\ndog\n"
    assert sorted(p.name for p in written) == ["English.txt", "French.txt"]


def test_missing_reverse_file_skips_language(tmp_path):
    data = _dataset(tmp_path, with_reverse=False)
    out = tmp_path / "out"
    build_dictionaries(data, out)
    assert not (out / "French.txt").exists()
    assert (out / "English.txt").read_bytes() == b"dog\n"


def test_files_without_pair_name_are_ignored(tmp_path):
    data = tmp_path / "data"
    data.mkdir()
    (data / "plain.txt").write_bytes(HEADER + b"a|b\n")
    out = tmp_path / "out"
    build_dictionaries(data, out)
    assert (out / "English.txt").read_bytes() == b""


def test_empty_dataset_parameter(tmp_path):
    with pytest.raises(ValueError):
        build_dictionaries("", tmp_path)


def test_dataset_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        build_dictionaries(tmp_path / "nope", tmp_path / "out")


def test_dataset_is_file(tmp_path):
    f = tmp_path / "file.txt"
    f.write_text("x")
    with pytest.raises(NotADirectoryError):
        build_dictionaries(f, tmp_path / "out")


def test_dataset_without_text_files(tmp_path):
    data = tmp_path / "data"
    data.mkdir()
    with pytest.raises(FileNotFoundError):
        build_dictionaries(data, tmp_path / "out")


def test_destination_is_file(tmp_path):
    data = _dataset(tmp_path)
    dest = tmp_path / "dest"
    dest.write_text("x")
    with pytest.raises(NotADirectoryError):
        build_dictionaries(data, dest)


def test_main_success_and_failure(tmp_path):
    data = _dataset(tmp_path)
    out = tmp_path / "out"
    assert main(["--dataset", str(data), "--destination", str(out)]) == 0
    assert (out / "French.txt").exists()
    assert main([]) == 1