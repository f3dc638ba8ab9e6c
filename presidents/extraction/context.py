from pathlib import Path
from typing import List, Union

from bs4 import BeautifulSoup
from bs4.element import Tag
from loguru import logger

from .errors import NoDataSourceError

HTML_PARSER = "html.parser"


class TableContext:
    """Read-only view over an already loaded page holding the presidents table.

    The caller owns the document; nothing here fetches or mutates it.
    """

    def __init__(self, document: BeautifulSoup):
        self.document = document

    @classmethod
    def from_html(cls, html: str) -> "TableContext":
        return cls(BeautifulSoup(html, HTML_PARSER))

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "TableContext":
        """Parses a saved copy of the page from disk."""
        path = Path(path)
        try:
            html = path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to read HTML from {path}: {e}")
            raise NoDataSourceError(f"Cannot read HTML file {path}") from e
        logger.debug(f"Loaded {len(html)} characters of HTML from {path}")
        return cls.from_html(html)

    def table(self) -> Tag:
        """Returns the first table body of the document."""
        tbody = self.document.find("tbody")
        if tbody is None:
            logger.error("No <tbody> element found in the document.")
            raise NoDataSourceError("Document contains no table body to read rows from")
        return tbody

    def rows(self) -> List[List[str]]:
        """Returns the link texts of every row, in document order."""
        rows = [
            [a.get_text() for a in tr.find_all("a")]
            for tr in self.table().find_all("tr")
        ]
        logger.debug(f"Collected {len(rows)} rows from table body")
        return rows
