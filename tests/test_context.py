"""Tests for reading rows out of a loaded page."""

import pytest

from presidents.extraction.context import TableContext
from presidents.extraction.errors import ExtractionError, NoDataSourceError


class TestTableContext:
    def test_rows_from_first_table_body_only(self, sample_context, president_rows):
        rows = sample_context.rows()
        assert rows[0] == []  # header row has no links
        assert rows[1:] == president_rows

    def test_table_returns_first_tbody(self, sample_context):
        assert sample_context.table().find("a").get_text() == "44"

    def test_missing_tbody(self):
        context = TableContext.from_html("<table><tr><td>no body</td></tr></table>")
        with pytest.raises(NoDataSourceError):
            context.rows()

    def test_no_data_source_is_an_extraction_error(self):
        assert issubclass(NoDataSourceError, ExtractionError)

    def test_from_file(self, sample_file, president_rows):
        context = TableContext.from_file(sample_file)
        assert context.rows()[1:] == president_rows

    def test_from_missing_file(self, tmp_path):
        with pytest.raises(NoDataSourceError):
            TableContext.from_file(tmp_path / "missing.html")

    def test_document_is_not_modified(self, sample_context):
        before = str(sample_context.document)
        sample_context.rows()
        sample_context.rows()
        assert str(sample_context.document) == before
