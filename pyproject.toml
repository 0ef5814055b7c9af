[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labkit"
version = "0.1.0"
description = "Small byte-scanning helpers, caches, queues and data-shaping tools for dictionaries, language lists and scraped tables"
requires-python = ">=3.10"
dependencies = [
    "beautifulsoup4",
]
keywords = [
    "whitespace",
    "utf-8",
    "sanitize",
    "cache",
    "queue",
    "dictionary",
    "scraping",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
labkit-fldict = "labkit.fldict:main"
labkit-langrepo = "labkit.langrepo:main"
labkit-weighted-files = "labkit.weighted_files:main"
labkit-items = "labkit.items:main"
labkit-rotate-cache = "labkit.rotate_cache:main"
labkit-postponed-queue = "labkit.postponed_queue:main"
labkit-kmparser = "labkit.kmparser:main"

[tool.hatch.build.targets.wheel]
packages = ["labkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
