from typing import Any, Dict, List, Optional, Sequence

from loguru import logger

from presidents.config.settings import settings
from presidents.models.enums import RowPolicy
from presidents.models.record import ROW_WIDTH, RawRow, Record
from .context import TableContext
from .errors import MalformedRowError

RECORD_SEPARATOR = "\n\n"


def parse_row(row: Sequence[str]) -> Record:
    """Maps the link texts of one row to its id/name record.

    Only positions 0 (id) and 2 (name) are kept. Short rows yield a record
    whose missing fields are None.
    """
    raw = RawRow.from_tokens(row)
    return Record(id=raw.id, name=raw.name)


def get_parsed_rows(
    table_rows: Sequence[Sequence[str]],
    policy: RowPolicy = RowPolicy.PERMISSIVE,
) -> List[Record]:
    """Parses every row in order, applying the malformed-row policy."""
    records: List[Record] = []
    for index, row in enumerate(table_rows):
        raw = RawRow.from_tokens(row)
        if raw.is_malformed:
            if policy == RowPolicy.STRICT:
                raise MalformedRowError(index, row)
            if policy == RowPolicy.SKIP:
                logger.warning(
                    f"Skipping row {index}: only {raw.width} link text(s) {list(row)}"
                )
                continue
        elif not raw.is_complete:
            logger.debug(f"Row {index} has {raw.width} of {ROW_WIDTH} expected link texts")
        records.append(parse_row(row))
    return records


def latest_records(records: Sequence[Record], amount: int) -> List[Record]:
    """Most recent first, truncated to ``amount`` (nothing for amount <= 0)."""
    if amount <= 0:
        return []
    return list(reversed(records))[:amount]


def format_records(records: Sequence[Record], amount: int) -> str:
    """Renders the last ``amount`` records, newest first, one block per record."""
    return RECORD_SEPARATOR.join(
        record.to_block() for record in latest_records(records, amount)
    )


class DataSet:
    """Parses and renders the U.S. presidents table of an already loaded page."""

    source: str = settings.source_url

    def __init__(self, context: TableContext, policy: Optional[RowPolicy] = None):
        self._context = context
        self.policy = RowPolicy(policy or settings.row_policy)

    @property
    def context(self) -> TableContext:
        return self._context

    @property
    def parsed(self) -> List[Record]:
        records = get_parsed_rows(self._context.rows(), self.policy)
        logger.info(f"Parsed {len(records)} records (policy: {self.policy.value})")
        return records

    def latest(self, amount: int) -> List[Record]:
        return latest_records(self.parsed, amount)

    def as_dicts(self, amount: int) -> List[Dict[str, Any]]:
        return [record.model_dump() for record in self.latest(amount)]

    def render(self, amount: int) -> str:
        return format_records(self.parsed, amount)
