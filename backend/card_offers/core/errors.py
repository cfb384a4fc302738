class DataLoadError(Exception):
    """
    Raised when a static table (catalog or offers) can't be turned into rows.
    Callers log it and fall back to an empty row set; users never see it.
    """

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class RetrievalFailure(DataLoadError):
    """Network error, non-2xx status, or missing file."""


class ParseFailure(DataLoadError):
    """Malformed delimited content."""
