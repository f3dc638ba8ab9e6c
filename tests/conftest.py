"""Pytest configuration and fixtures for the presidents table tests."""

from pathlib import Path

import pytest

from presidents.extraction.context import TableContext


def president_row(number: str, name: str, party: str) -> str:
    return (
        "<tr>"
        f'<th><a href="#cite-{number}">{number}</a></th>'
        f'<td><a href="/wiki/File:{number}.jpg"></a></td>'
        f'<td><b><a href="/wiki/{name.replace(" ", "_")}">{name}</a></b>'
        f'<sup><a href="#note-{number}">[a]</a></sup></td>'
        f'<td><a href="#ref-{number}">[{number}]</a></td>'
        f'<td><a href="/wiki/{party}_Party">{party}</a></td>'
        "</tr>"
    )


SAMPLE_PAGE = (
    "<html><head><title>List of presidents of the United States</title></head><body>"
    '<table class="wikitable"><tbody>'
    "<tr><th>No.</th><th>Portrait</th><th>Name</th><th>Term</th><th>Party</th></tr>"
    + president_row("44", "Barack Obama", "Democratic")
    + president_row("45", "Donald Trump", "Republican")
    + president_row("46", "Joe Biden", "Democratic")
    + "</tbody></table>"
    '<table class="navbox"><tbody>'
    '<tr><td><a href="/wiki/Vice_President">Vice presidents</a></td></tr>'
    "</tbody></table>"
    "</body></html>"
)


@pytest.fixture
def sample_html() -> str:
    """Trimmed copy of the presidents table, header row included."""
    return SAMPLE_PAGE


@pytest.fixture
def sample_context(sample_html: str) -> TableContext:
    return TableContext.from_html(sample_html)


@pytest.fixture
def sample_file(tmp_path: Path, sample_html: str) -> Path:
    path = tmp_path / "presidents.html"
    path.write_text(sample_html, encoding="utf-8")
    return path


@pytest.fixture
def president_rows() -> list[list[str]]:
    """Link texts as they appear in table order (oldest first)."""
    return [
        ["44", "", "Barack Obama", "[a]", "[44]", "Democratic"],
        ["45", "", "Donald Trump", "[a]", "[45]", "Republican"],
        ["46", "", "Joe Biden", "[a]", "[46]", "Democratic"],
    ]
