"""Reference table record schemas.

Every record carries a `code` equal to its row index in its table, plus the
descriptive columns for that row. Records are frozen; worlds hold their own
copies and replace them (via `model_copy`) when edited.
"""

from enum import Enum
from typing import ClassVar, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, Field

R = TypeVar("R", bound="TableRecord")


class StarportClass(str, Enum):
    """Starport quality, best (A) to none (X)."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    X = "X"


class TableRecord(BaseModel):
    """Base for all reference table rows."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    # Descriptive column that identifies a row when rebuilding from JSON
    key_field: ClassVar[str] = ""

    code: int = Field(ge=0)

    def key(self) -> str:
        """Text of this record's identifying column."""
        value = getattr(self, self.key_field)
        return value.value if isinstance(value, Enum) else str(value)

    @classmethod
    def key_alias(cls) -> str:
        """Name of the identifying column as it appears in CSV and JSON."""
        return cls.model_fields[cls.key_field].alias or cls.key_field


class AtmoRecord(TableRecord):
    key_field: ClassVar[str] = "composition"

    composition: str


class TempRecord(TableRecord):
    key_field: ClassVar[str] = "kind"

    kind: str
    description: str


class HydroRecord(TableRecord):
    key_field: ClassVar[str] = "description"

    description: str


class PopRecord(TableRecord):
    key_field: ClassVar[str] = "inhabitants"

    inhabitants: str


class GovRecord(TableRecord):
    key_field: ClassVar[str] = "kind"

    kind: str
    description: str
    contraband: str


class FactionStrengthRecord(TableRecord):
    key_field: ClassVar[str] = "strength"

    strength: str


class CulturalDiffRecord(TableRecord):
    key_field: ClassVar[str] = "cultural_difference"

    cultural_difference: str
    description: str


class WorldTagRecord(TableRecord):
    key_field: ClassVar[str] = "tag"

    tag: str
    description: str


class LawRecord(TableRecord):
    key_field: ClassVar[str] = "banned_weapons"

    banned_weapons: str
    banned_armor: str


class StarportRecord(TableRecord):
    key_field: ClassVar[str] = "starport_class"

    starport_class: StarportClass = Field(alias="class")
    berthing_cost: int = Field(ge=0)
    fuel: str
    facilities: str


def safe_mutate(current: R, replacement: R, table: Sequence[R]) -> R:
    """Switch `current` to the row `replacement` without losing user edits.

    The replacement row is taken as-is, except that a `description` the user
    has changed away from the table default for `current` is carried over.

    Args:
        current: Record being replaced (possibly user-edited)
        replacement: Row to switch to
        table: Table both records come from

    Returns:
        New record with the replacement's code and columns
    """
    default = table[current.code]
    edited = getattr(current, "description", None)
    if edited is None or edited == getattr(default, "description", None):
        return replacement
    return replacement.model_copy(update={"description": edited})
