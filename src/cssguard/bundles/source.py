"""Bundle data sources: where the immutable selector catalogs come from.

A source answers two questions: which bundles exist, and which selectors a
given bundle defines (in the order the bundle's statistics list them).
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Protocol

from cssguard.bundles.errors import BundleDataError

__all__ = ["BundleSource", "InMemoryBundleSource", "DistBundleSource"]

logger = logging.getLogger(__name__)


class BundleSource(Protocol):
    """Read-only access to bundle metadata and per-bundle selector lists."""

    def available_bundles(self) -> frozenset[str]: ...

    def selectors(self, bundle: str) -> list[str]: ...


class InMemoryBundleSource:
    """Bundle source backed by a mapping of bundle name to selector list."""

    def __init__(self, bundles: Mapping[str, Iterable[str]]) -> None:
        self._bundles = {name: list(selectors) for name, selectors in bundles.items()}

    def available_bundles(self) -> frozenset[str]:
        return frozenset(self._bundles)

    def selectors(self, bundle: str) -> list[str]:
        return list(self._bundles.get(bundle, []))


class DistBundleSource:
    """Bundle source reading a compiled CSS distribution directory.

    Layout::

        <root>/meta.json            {"bundles": {"utilities": {...}, ...}}
        <root>/stats/<bundle>.json  {"selectors": {"values": [".m-0", ...]}}

    Each file is read at most once per instance.
    """

    def __init__(self, root: Path) -> None:
        self._root = Path(root)
        self._available: frozenset[str] | None = None
        self._selectors: dict[str, list[str]] = {}

    @property
    def root(self) -> Path:
        return self._root

    def available_bundles(self) -> frozenset[str]:
        if self._available is None:
            meta = _read_json(self._root / "meta.json")
            bundles = meta.get("bundles") if isinstance(meta, dict) else None
            if not isinstance(bundles, dict):
                raise BundleDataError(
                    "meta.json must contain a 'bundles' object",
                    path=str(self._root / "meta.json"),
                )
            self._available = frozenset(bundles)
            logger.debug("Found %d bundle(s) in %s", len(self._available), self._root)
        return self._available

    def selectors(self, bundle: str) -> list[str]:
        if bundle not in self._selectors:
            path = self._root / "stats" / f"{bundle}.json"
            stats = _read_json(path)
            section = stats.get("selectors") if isinstance(stats, dict) else None
            values = section.get("values") if isinstance(section, dict) else None
            if not isinstance(values, list):
                raise BundleDataError(
                    f"Stats for bundle '{bundle}' have no selectors.values list",
                    path=str(path),
                )
            self._selectors[bundle] = [str(v) for v in values]
        return list(self._selectors[bundle])


def _read_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise BundleDataError(f"Cannot read {path}: {exc}", path=str(path)) from exc
    except UnicodeDecodeError as exc:
        raise BundleDataError(f"{path} is not valid UTF-8: {exc}", path=str(path)) from exc
    except json.JSONDecodeError as exc:
        raise BundleDataError(f"Invalid JSON in {path}: {exc}", path=str(path)) from exc
