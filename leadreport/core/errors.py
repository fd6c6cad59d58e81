"""Exceptions raised by the lead report package."""


class SourceRequestError(RuntimeError):
    """Raised when a record source cannot return a page."""

    def __init__(self, message: str, page: int | None = None) -> None:
        super().__init__(message)
        self.page = page


class ReportBuildError(RuntimeError):
    """Raised when a report cannot be assembled from fetched records."""
