"""Extract user-agent detection results from an HTML report table."""

from __future__ import annotations

import argparse
import json
import logging
import urllib.request
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Iterable, Mapping

from bs4 import BeautifulSoup

log = logging.getLogger(__name__)

_UA_COLUMN = 2
_DETAILS_COLUMN = 3

_JSON_ESCAPES = (
    ("<", "\\u003c"),
    (">", "\\u003e"),
    ("&", "\\u0026"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)


def _non_empty(obj: Any) -> dict[str, str]:
    return {f.name: getattr(obj, f.name) for f in fields(obj) if getattr(obj, f.name)}


@dataclass
class Client:
    """Client software detected from a user agent."""

    type: str = ""
    name: str = ""
    version: str = ""
    engine: str = ""
    engine_version: str = ""
    family: str = ""


@dataclass
class Device:
    """Device detected from a user agent."""

    type: str = ""
    brand: str = ""
    model: str = ""
    os: str = ""
    os_version: str = ""


@dataclass
class Tuple:
    """A user agent with its detected client and device."""

    user_agent: str = ""
    client: Client = field(default_factory=Client)
    device: Device = field(default_factory=Device)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form; empty client and device fields are left out."""
        return {
            "user_agent": self.user_agent,
            "client": _non_empty(self.client),
            "device": _non_empty(self.device),
        }


def load_config(path: str | Path) -> dict[str, Any]:
    """Read the JSON config holding ``source`` (a URL) and ``mapping`` (label to key)."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return {"source": data.get("source", ""), "mapping": dict(data.get("mapping") or {})}


def _text(elements: Iterable[Any]) -> str:
    return "".join(element.get_text() for element in elements)


def _apply(t: Tuple, key: str, value: str) -> None:
    if key == "device_type":
        t.device.type = value
    elif key == "model":
        t.device.model = value
    elif key == "vendor":
        t.device.brand = value
    elif key == "name":
        t.client.name = value
    elif key == "version":
        t.client.version = value
    elif key == "os_version":
        t.device.os_version = value
    elif key == "type":
        t.client.type = value
    elif key == "os":
        t.device.os = value


def parse_page(html: str | bytes, mapping: Mapping[str, str]) -> list[Tuple]:
    """Parse every ``tr.bg-warning`` row of ``html``.

    The third cell holds the user agent; the fourth holds label/value
    pairs whose labels are translated through ``mapping``. An unknown
    label raises :class:`KeyError`.
    """
    doc = BeautifulSoup(html, "html.parser")
    tuples: list[Tuple] = []
    for row in doc.select("tr.bg-warning"):
        t = Tuple()
        for column, cell in enumerate(row.select("td")):
            if column == _UA_COLUMN:
                t.user_agent = cell.get_text()
            elif column == _DETAILS_COLUMN:
                key = value = ""
                for block in cell.select("div"):
                    for position, inner in enumerate(block.select("div")):
                        if position == 0:
                            label = _text(inner.select("strong"))
                            if label not in mapping:
                                raise KeyError(label)
                            key = mapping[label]
                        elif position == 1:
                            value = _text(inner.select("span"))
                    _apply(t, key, value)
        tuples.append(t)
    return tuples


def _dumps(obj: Any) -> str:
    text = json.dumps(obj, ensure_ascii=False, separators=(",", ":"))
    for char, escaped in _JSON_ESCAPES:
        text = text.replace(char, escaped)
    return text


def dump_tuples(tuples: Iterable[Tuple]) -> bytes:
    """Encode tuples as a compact JSON array.

    With no tuples the result is the single byte ``]``, as the list is
    closed by overwriting its trailing separator.
    """
    buf = bytearray(b"[")
    for t in tuples:
        buf += _dumps(t.to_dict()).encode("utf-8")
        buf += b","
    buf[-1:] = b"]"
    return bytes(buf)


def main(argv: list[str] | None = None) -> int:
    """Fetch the configured page, parse it and write the tuples as JSON."""
    parser = argparse.ArgumentParser(description="Parse user-agent detection results.")
    parser.add_argument("--config", default="config/config.json", help="config file")
    parser.add_argument("--output", default="out/km.json", help="output file")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    try:
        conf = load_config(args.config)
        with urllib.request.urlopen(conf["source"]) as resp:
            if resp.status != 200:
                log.error("status code error: %d %s", resp.status, resp.reason)
                return 1
            html = resp.read()
        data = dump_tuples(parse_page(html, conf["mapping"]))
        Path(args.output).write_bytes(data)
    except (OSError, ValueError, KeyError) as exc:
        log.error("%s", exc)
        return 1
    return 0