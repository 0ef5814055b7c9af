"""Attach writing scripts to languages and summarise script usage."""

from __future__ import annotations

import argparse
import csv
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Sequence

log = logging.getLogger(__name__)

_SCRIPT_COLUMN = 0
_LANGUAGE_COLUMN = 3


@dataclass
class Language:
    """A language record with the scripts it is written in."""

    name: str = ""
    native: str = ""
    iso639_1: str = ""
    iso639_3: str = ""
    weight: int = 0
    scripts: list[str] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Language":
        scripts = data.get("scripts")
        return cls(
            name=data.get("name", ""),
            native=data.get("native", ""),
            iso639_1=data.get("iso639_1", ""),
            iso639_3=data.get("iso639_3", ""),
            weight=int(data.get("weight", 0)),
            scripts=list(scripts) if scripts is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "native": self.native,
            "iso639_1": self.iso639_1,
            "iso639_3": self.iso639_3,
            "weight": self.weight,
            "scripts": self.scripts,
        }


@dataclass
class Script:
    """A script with the number of uses and the languages using it."""

    name: str
    weight: int = 0
    languages: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "weight": self.weight, "languages": self.languages}


def assign_scripts(languages: Sequence[Language], rows: Iterable[Sequence[str]]) -> None:
    """Append scripts from CSV rows to the matching languages.

    The script is in the first column and carries over to following rows
    that leave it empty; the language name is in the fourth column.
    """
    index = {language.name: language for language in languages}
    script = ""
    for row in rows:
        if len(row) <= _LANGUAGE_COLUMN:
            raise ValueError(f"row has {len(row)} fields, need {_LANGUAGE_COLUMN + 1}")
        if row[_SCRIPT_COLUMN]:
            script = row[_SCRIPT_COLUMN]
        name = row[_LANGUAGE_COLUMN]
        if not name:
            continue
        language = index.get(name)
        if language is not None:
            if language.scripts is None:
                language.scripts = []
            language.scripts.append(script)


def collect_scripts(languages: Iterable[Language]) -> list[Script]:
    """Count script uses across languages, most used first."""
    scripts: dict[str, Script] = {}
    for language in languages:
        for name in language.scripts or ():
            script = scripts.get(name)
            if script is None:
                scripts[name] = Script(name, 1, [language.name])
                continue
            script.weight += 1
            if language.name not in script.languages:
                script.languages.append(language.name)
    return sorted(scripts.values(), key=lambda s: s.weight, reverse=True)


def _dumps(obj: Any) -> str:
    text = json.dumps(obj, indent="\t", ensure_ascii=False)
    for char, escaped in (
        ("<", "\\u003c"),
        (">", "\\u003e"),
        ("&", "\\u0026"),
        ("\u2028", "\\u2028"),
        ("\u2029", "\\u2029"),
    ):
        text = text.replace(char, escaped)
    return text


def main(argv: list[str] | None = None) -> int:
    """Read origin.json and script.csv, write languages.json and scripts.json."""
    parser = argparse.ArgumentParser(description="Attach scripts to languages.")
    parser.add_argument("--workdir", default=".", help="directory holding the files")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    workdir = Path(args.workdir)
    try:
        raw = json.loads((workdir / "origin.json").read_text(encoding="utf-8"))
        languages = [Language.from_dict(item) for item in raw]
        with (workdir / "script.csv").open(newline="", encoding="utf-8") as fh:
            assign_scripts(languages, csv.reader(fh))
        (workdir / "languages.json").write_text(
            _dumps([language.to_dict() for language in languages]), encoding="utf-8"
        )
        scripts = collect_scripts(languages)
        (workdir / "scripts.json").write_text(
            _dumps([script.to_dict() for script in scripts]), encoding="utf-8"
        )
    except (OSError, ValueError) as exc:
        log.error("%s", exc)
        return 1
    return 0