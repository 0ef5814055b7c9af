import pytest

from labkit.weighted_files import SOURCE, WEIGHTS, FileEntry, format_files, main, sort_files


def test_sort_orders_by_weight():
    files = sort_files(SOURCE, WEIGHTS)
    assert [f.weight for f in files] == sorted(WEIGHTS.values())
    assert files[0].key == "regionDataset"
    assert files[-1].key == "buildingDataset"
    assert {f.key: f.filename for f in files} == SOURCE


def test_unknown_key_gets_zero_weight():
    files = sort_files({"extra": "path/x", "roadDataset": "path/to/file4"}, WEIGHTS)
    assert files[0] == FileEntry("extra", "path/x", 0)
    assert files[1].weight == WEIGHTS["roadDataset"]


def test_format_files_lines():
    text = format_files(sort_files(SOURCE, WEIGHTS))
    lines = text.splitlines()
    assert lines[0] == "0. regionDataset: path/to/file0"
    assert lines[-1] == "8. buildingDataset: path/to/file8"
    assert len(lines) == len(SOURCE)
    assert text.endswith("\n")


def test_format_files_empty_raises():
    with pytest.raises(IndexError):
        format_files([])


def test_main_prints_sorted(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("files came in order:\n")
    after = out.split("files after sort\n", 1)[1]
    assert after.startswith("0. regionDataset: path/to/file0\n")