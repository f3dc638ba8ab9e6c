from enum import Enum


class RowPolicy(str, Enum):
    """How rows with fewer than the required link texts are handled."""

    PERMISSIVE = "permissive"  # keep, missing fields stay None
    SKIP = "skip"
    STRICT = "strict"
