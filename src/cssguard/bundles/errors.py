"""Bundle data error types."""


class BundleDataError(Exception):
    """Raised when bundle metadata or statistics cannot be read."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)
