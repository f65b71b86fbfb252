"""Custom exceptions for tagcorr."""


class TagCorrError(Exception):
    """Base exception for all tagcorr errors."""

    pass


class ConfigurationError(TagCorrError):
    """Configuration value or file is invalid."""

    pass


class DatasetError(TagCorrError):
    """Dataset discovery or loading failed."""

    pass


class DatasetFormatError(DatasetError):
    """Dataset file is missing a required column."""

    def __init__(self, path: str, missing: list[str]):
        """Initialize exception with file path and missing columns.

        Args:
            path: Path of the offending file.
            missing: Column names that were expected but not found.
        """
        self.path = path
        self.missing = missing
        super().__init__(f"Missing columns {', '.join(missing)} in {path}")
