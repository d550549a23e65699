"""Bundle catalogs: sources of immutable selectors."""

from cssguard.bundles.errors import BundleDataError
from cssguard.bundles.source import BundleSource, DistBundleSource, InMemoryBundleSource

__all__ = [
    "BundleSource",
    "InMemoryBundleSource",
    "DistBundleSource",
    "BundleDataError",
]
