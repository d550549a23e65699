"""cssguard -- lint stylesheets against immutable selectors from shared CSS bundles."""

__version__ = "0.1.0"
