"""Options for the no-override check and the JSON loader used by the CLI.

Config file shape (the section may also sit under a "no-override" key)::

    {
        "enabled": true,
        "bundles": ["utilities", "base"],
        "ignoreSelectors": [".js-", "/^\\.tooltipped-/"]
    }

Entries written as ``/body/flags`` become regular expressions; any other
string is matched as a literal substring.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from cssguard.validation.ignore import IgnorePattern, IgnoreSelectors

__all__ = [
    "DEFAULT_BUNDLES",
    "NoOverrideOptions",
    "ConfigError",
    "load_config",
    "parse_ignore_pattern",
]

DEFAULT_BUNDLES: tuple[str, ...] = ("utilities",)

_SECTION = "no-override"
_REGEX_LITERAL_RE = re.compile(r"/(?P<body>.+)/(?P<flags>[imsx]*)", re.DOTALL)
_FLAGS = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL, "x": re.VERBOSE}


class ConfigError(Exception):
    """Raised when a config file cannot be read or has the wrong shape."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


@dataclass(frozen=True)
class NoOverrideOptions:
    enabled: bool = False
    # Left unvalidated here: a malformed value is reported as a warning at run time.
    bundles: Any = DEFAULT_BUNDLES
    ignore_selectors: IgnoreSelectors = ()


def parse_ignore_pattern(raw: str) -> IgnorePattern:
    """Turn ``/body/flags`` into a compiled regex; leave other strings as-is."""
    match = _REGEX_LITERAL_RE.fullmatch(raw)
    if match is None:
        return raw
    flags = 0
    for flag in match.group("flags"):
        flags |= _FLAGS[flag]
    try:
        return re.compile(match.group("body"), flags)
    except re.error as exc:
        raise ConfigError(f"Invalid ignore pattern {raw!r}: {exc}") from exc


def load_config(path: Path) -> NoOverrideOptions:
    """Load no-override options from a JSON file."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}", path=str(path)) from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Config {path} is not valid UTF-8: {exc}", path=str(path)) from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config {path}: {exc}", path=str(path)) from exc

    if isinstance(data, dict) and isinstance(data.get(_SECTION), dict):
        data = data[_SECTION]
    if not isinstance(data, dict):
        raise ConfigError("Config must be a JSON object", path=str(path))
    return _apply(data, str(path))


def _apply(data: dict[str, Any], path: str) -> NoOverrideOptions:
    enabled = data.get("enabled", False)
    if not isinstance(enabled, bool):
        raise ConfigError("'enabled' must be true or false", path=path)

    bundles = data.get("bundles", list(DEFAULT_BUNDLES))
    if isinstance(bundles, list):
        bundles = tuple(bundles)

    raw_ignore = data.get("ignoreSelectors", [])
    if not isinstance(raw_ignore, list) or not all(isinstance(p, str) for p in raw_ignore):
        raise ConfigError("'ignoreSelectors' must be a list of strings", path=path)

    return NoOverrideOptions(
        enabled=enabled,
        bundles=bundles,
        ignore_selectors=tuple(parse_ignore_pattern(p) for p in raw_ignore),
    )
