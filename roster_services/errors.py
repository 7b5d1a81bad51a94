class RosterLookupError(Exception):
    """Base exception for the roster lookup pipeline."""
    pass


class ValidationError(RosterLookupError):
    """Raised when the uploaded request is unusable (missing file, too large)."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(RosterLookupError):
    """Raised when the image yields nothing to look up."""
    pass


class UpstreamError(RosterLookupError):
    """Raised when an external dependency fails or returns unusable data."""
    pass


class StorageError(UpstreamError):
    """Custom exception for object storage errors."""
    pass


class TextDetectionError(UpstreamError):
    """Custom exception for OCR text detection errors."""
    pass


class StatsApiError(UpstreamError):
    """Custom exception for stats API errors."""
    pass
