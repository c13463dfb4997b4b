"""
Holdings data source errors.
"""


class HoldingsSourceError(Exception):
    """Raised when a data source cannot deliver a holdings payload."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
