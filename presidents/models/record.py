from typing import Iterator, NamedTuple, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

# Positional layout of the link texts found in one row of the presidents table
ROW_FIELDS = ("id", "icon", "name", "footnote", "source", "party")
ROW_WIDTH = len(ROW_FIELDS)
MIN_ROW_WIDTH = ROW_FIELDS.index("name") + 1


class RawRow(NamedTuple):
    """The link texts of one table row, mapped by position."""

    id: Optional[str] = None
    icon: Optional[str] = None
    name: Optional[str] = None
    footnote: Optional[str] = None
    source: Optional[str] = None
    party: Optional[str] = None
    width: int = 0

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> "RawRow":
        """Builds a RawRow, padding missing positions with None and dropping extras."""
        values = list(tokens[:ROW_WIDTH])
        width = len(values)
        values.extend([None] * (ROW_WIDTH - width))
        return cls(*values, width=width)

    @property
    def is_complete(self) -> bool:
        return self.width >= ROW_WIDTH

    @property
    def is_malformed(self) -> bool:
        return self.width < MIN_ROW_WIDTH


class Record(BaseModel):
    """The id/name projection of one president row."""

    model_config = ConfigDict(frozen=True)  # Make instances immutable

    id: Optional[str] = None
    name: Optional[str] = None

    def fields(self) -> Iterator[Tuple[str, str]]:
        """Yields (field, value) pairs in declaration order; absent values are empty."""
        for field_name in type(self).model_fields:
            value = getattr(self, field_name)
            yield field_name, "" if value is None else value

    def to_block(self) -> str:
        return "\n".join(f"{key} {value}" for key, value in self.fields())
