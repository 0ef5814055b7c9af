"""Build per-language word lists from a directory of bilingual dictionaries."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from labkit.dictrepo import Repo, scan

log = logging.getLogger(__name__)

ENGLISH = "English"


def _check_paths(dataset: str | Path, destination: str | Path) -> tuple[list[Path], Path]:
    if not str(dataset):
        raise ValueError("param --dataset is required")
    source = Path(dataset)
    if not source.exists():
        raise FileNotFoundError(f"dataset '{dataset}' doesn't exists")
    if not source.is_dir():
        raise NotADirectoryError(f"dataset '{dataset}' must be directory")
    files = sorted(source.glob("*.txt"))
    if not files:
        raise FileNotFoundError(f"cannot read files list in '{dataset}'")

    if not str(destination):
        raise ValueError(f"cannot create destination '{destination}'")
    target = Path(destination)
    if not target.exists():
        target.mkdir(parents=True)
    if not target.is_dir():
        raise NotADirectoryError(f"destination '{destination}' must be directory")
    return files, target


def build_dictionaries(dataset: str | Path, destination: str | Path) -> list[Path]:
    """Process every ``<Lang>_English.txt`` pair and return the files written.

    A language file is written only when its ``English_<Lang>.txt``
    counterpart exists; ``English.txt`` collects every English word.
    """
    files, target = _check_paths(dataset, destination)
    local, english = Repo(), Repo(ENGLISH)
    written: list[Path] = []

    for path in files:
        left, sep, right = path.stem.partition("_")
        if not sep:
            continue
        local.reset()
        if right != ENGLISH:
            continue
        local.language = left

        log.info("processing '%s' ...", path)
        try:
            scan(local, english, path, False)
        except OSError as exc:
            log.error("error: %s", exc)
            continue

        reverse = path.parent / f"{right}_{left}.txt"
        if not reverse.exists():
            continue
        log.info("processing '%s' ...", reverse)
        try:
            scan(local, english, reverse, True)
        except OSError as exc:
            log.error("error: %s", exc)

        out = target / f"{left}.txt"
        try:
            local.flush(out)
        except OSError as exc:
            log.error("error: %s", exc)
            continue
        written.append(out)

    out = target / f"{ENGLISH}.txt"
    try:
        english.flush(out)
    except OSError as exc:
        log.error("error: %s", exc)
    else:
        written.append(out)

    log.info("done")
    return written


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Build word lists from dictionaries.")
    parser.add_argument("--dataset", default="", help="path to dataset directory")
    parser.add_argument("--destination", default="", help="path to destination directory")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    try:
        build_dictionaries(args.dataset, args.destination)
    except (OSError, ValueError) as exc:
        log.error("%s", exc)
        return 1
    return 0