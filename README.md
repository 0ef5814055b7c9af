# labkit

A collection of small, self-contained tools:

- **Byte scanning**: skip JSON-style formatting whitespace (`labkit.skipfmt`,
  `labkit.trimfmt`) and replace the lead byte of broken UTF-8 sequences
  (`labkit.strsan`).
- **Data containers**: a double-buffered cache that readers use while the
  other buffer is rebuilt (`labkit.rotate_cache`), a bounded queue that holds
  items back for a fixed delay before workers process them
  (`labkit.postponed_queue`), and a 12-byte binary record (`labkit.items`).
- **Data shaping**: build sorted, de-duplicated word lists out of bilingual
  dictionary dumps (`labkit.dictrepo`, `labkit.fldict`), attach writing
  scripts to a list of languages (`labkit.langrepo`), order files by weight
  (`labkit.weighted_files`), and turn an HTML table of user-agent detection
  results into JSON (`labkit.kmparser`).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Library use

Skipping whitespace from an offset; the result is the new offset and whether
the end of the input was reached:

```python
from labkit.skipfmt import skip_fmt4, skip_fmt4_table, skip_fmt4_bits

skip_fmt4(b'{\n"key":1}', 1)        # (2, False)
skip_fmt4_table(b'{\n"key":1}', 1)  # (2, False)
skip_fmt4_bits(b'{\n"key":1}', 1)   # (2, False)
```

The rotating cache writes into the idle buffer and serves reads from the
active one until `rotate()` swaps them:

```python
from labkit.rotate_cache import RotateCache

cache = RotateCache()
cache.set(0, "foo")
cache.rotate()
cache.get(0)          # "foo"
cache.reset_buffer()  # clears the idle buffer, reads are unaffected
```

Other entry points:

- `labkit.strsan.strsan(data, repl)`: return `data` with the lead byte of
  every invalid UTF-8 sequence set to `repl` (an int or a single byte).
- `labkit.trimfmt.FormatTrimmer`: several variants of whitespace skipping
  over one buffer (`trim_goto_v0`, `trim_goto_v1`, `trim_for_v0`,
  `trim_for_v1`, `trim_fj_v0`, `trim_fj_v1`).
- `labkit.copying.copy_record(x)` and `copy_scalar(x)`: copies of `Record`
  objects and of mutable byte buffers; other values are returned as they are.
- `labkit.items.Item`: a little-endian 32-bit header and 64-bit payload
  (`size`, `marshal`, `marshal_into`, `Item.unmarshal`); `calc(x)` raises
  `TypeError` unless `x` has the `foo` and `bar` methods of the `FooBar`
  protocol.
- `labkit.dictrepo.Repo`, `clean`, `scan`: the pieces behind the dictionary
  builder.
- `labkit.fldict.build_dictionaries(dataset, destination)`.
- `labkit.langrepo.Language`, `Script`, `assign_scripts` and `collect_scripts`.
- `labkit.weighted_files.FileEntry`, `sort_files` and `format_files`.
- `labkit.postponed_queue.PostponedQueue` (`enqueue`, `work`, `stop`, `close`).
- `labkit.kmparser.load_config`, `parse_page` and `dump_tuples`.

## Commands

| Command | What it does |
| --- | --- |
| `labkit-fldict --dataset DIR --destination DIR` | Reads `*.txt` dictionary dumps named `<Language>_English.txt`; for each with an `English_<Language>.txt` counterpart it writes a sorted word list `<Language>.txt`, and it writes all English words to `English.txt`. |
| `labkit-langrepo [--workdir DIR]` | Reads `origin.json` and `script.csv` (by default in the current directory); writes `languages.json` and `scripts.json`. |
| `labkit-weighted-files` | Prints a sample set of dataset files before and after ordering by weight. |
| `labkit-items` | Checks three sample objects against the `FooBar` protocol and prints the outcome. |
| `labkit-rotate-cache [--interval SECONDS] [--rounds N]` | Runs a reader against a rotating cache while it is rebuilt, logging any mismatch. |
| `labkit-postponed-queue [--delay SECONDS] [--settle SECONDS]` | Demonstrates four workers processing delayed items. |
| `labkit-kmparser [--config FILE] [--output FILE]` | Reads `config/config.json`, fetches the configured page and writes `out/km.json`. |