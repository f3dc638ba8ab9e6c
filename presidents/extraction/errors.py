from typing import Sequence

from presidents.models.record import MIN_ROW_WIDTH


class ExtractionError(Exception):
    """Custom exception for table extraction errors."""

    pass


class NoDataSourceError(ExtractionError):
    """Exception raised when the document holds no table to read rows from."""

    pass


class MalformedRowError(ExtractionError):
    """Exception raised for rows missing the id or name link text."""

    def __init__(self, index: int, tokens: Sequence[str]):
        self.index = index
        self.tokens = list(tokens)
        super().__init__(
            f"Row {index} has {len(self.tokens)} link text(s), expected at least {MIN_ROW_WIDTH}: {self.tokens}"
        )
