"""ImmutabilityIndex: selectors and class tokens owned by configured bundles."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from cssguard.bundles.source import BundleSource
from cssguard.validation.selectors import extract_class_tokens

__all__ = ["ImmutabilityIndex"]

logger = logging.getLogger(__name__)


class ImmutabilityIndex:
    """Maps immutable selectors and class tokens to the bundle defining them.

    Built once per rule activation; read-only afterwards. When several
    configured bundles define the same selector or token, the bundle listed
    last owns it.
    """

    __slots__ = ("_selector_owner", "_class_owner", "_bundles")

    def __init__(
        self,
        selector_owner: Mapping[str, str] | None = None,
        class_owner: Mapping[str, str] | None = None,
        bundles: Iterable[str] = (),
    ) -> None:
        self._selector_owner = MappingProxyType(dict(selector_owner or {}))
        self._class_owner = MappingProxyType(dict(class_owner or {}))
        self._bundles = tuple(bundles)

    @classmethod
    def build(cls, bundles: Iterable[str], source: BundleSource) -> ImmutabilityIndex:
        """Index every selector of every available bundle in *bundles*, in order.

        Names the source does not know are skipped; reporting them is the
        job of the option check.
        """
        available = source.available_bundles()
        selector_owner: dict[str, str] = {}
        class_owner: dict[str, str] = {}
        used: list[str] = []

        for bundle in bundles:
            if not isinstance(bundle, str) or bundle not in available:
                logger.debug("Skipping unknown bundle %r", bundle)
                continue
            used.append(bundle)
            for selector in source.selectors(bundle):
                selector_owner[selector] = bundle
                for token in extract_class_tokens(selector):
                    class_owner[token] = bundle

        logger.debug(
            "Indexed %d selector(s) and %d class token(s) from %s",
            len(selector_owner),
            len(class_owner),
            used,
        )
        return cls(selector_owner, class_owner, used)

    @property
    def selector_owner(self) -> Mapping[str, str]:
        return self._selector_owner

    @property
    def class_owner(self) -> Mapping[str, str]:
        return self._class_owner

    @property
    def bundles(self) -> tuple[str, ...]:
        """Bundles that contributed to the index, in configured order."""
        return self._bundles

    def owner_of_selector(self, selector: str) -> str | None:
        return self._selector_owner.get(selector)

    def owner_of_class(self, token: str) -> str | None:
        return self._class_owner.get(token)

    def __len__(self) -> int:
        return len(self._selector_owner)

    def __repr__(self) -> str:
        return (
            f"ImmutabilityIndex(bundles={list(self._bundles)!r}, "
            f"selectors={len(self._selector_owner)}, classes={len(self._class_owner)})"
        )
