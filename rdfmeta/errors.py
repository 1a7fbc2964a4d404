from __future__ import annotations


class MalformedMetadataError(ValueError):
    """Raised when a metadata document lacks data the driver cannot do without."""

    def __init__(self, message: str, path: object = None):
        self.path = path
        if path is not None:
            message = f"{message} (in {path})"
        super().__init__(message)
