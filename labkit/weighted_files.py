"""Order named data files by a fixed weight table."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Mapping, Sequence

_DATASET_ORDER = (
    "region",
    "province",
    "municipality",
    "zipCode",
    "road",
    "address",
    "unit",
    "entryAddress",
    "building",
)

WEIGHTS: dict[str, int] = {
    f"{name}Dataset": weight for weight, name in enumerate(_DATASET_ORDER)
}

SOURCE: dict[str, str] = {
    f"{name}Dataset": f"path/to/file{number}" for number, name in enumerate(_DATASET_ORDER)
}


@dataclass(frozen=True)
class FileEntry:
    """A file key, its path and its weight."""

    key: str
    filename: str
    weight: int = 0

    def __str__(self) -> str:
        return f"{self.weight}. {self.key}: {self.filename}"


def sort_files(source: Mapping[str, str], weights: Mapping[str, int]) -> list[FileEntry]:
    """Pair each key with its path and weight (0 if unknown), lightest first."""
    files = [FileEntry(key, path, weights.get(key, 0)) for key, path in source.items()]
    return sorted(files, key=lambda entry: entry.weight)


def format_files(files: Sequence[FileEntry]) -> str:
    """Render one ``weight. key: path`` line per file."""
    if not files:
        raise IndexError("no files to format")
    return "".join(f"{entry}\n" for entry in files)


def main(argv: list[str] | None = None) -> int:
    """Print the example files before and after sorting."""
    argparse.ArgumentParser(description="Sort data files by weight.").parse_args(argv)
    print("files came in order:")
    for key, path in SOURCE.items():
        print(f"{key}: {path}")
    files = sort_files(SOURCE, WEIGHTS)
    print("\nfiles after sort")
    print(format_files(files))
    return 0