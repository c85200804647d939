"""Reference table store loaded from the bundled CSV assets."""

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple, Type, TypeVar

from pydantic import ValidationError

from ..models.records import (
    AtmoRecord,
    CulturalDiffRecord,
    FactionStrengthRecord,
    GovRecord,
    HydroRecord,
    LawRecord,
    PopRecord,
    StarportRecord,
    TableRecord,
    TempRecord,
    WorldTagRecord,
)
from ..utils.constants import TABLE_DIR
from ..utils.errors import AssetLoadError

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=TableRecord)


@dataclass(frozen=True)
class TableStore:
    """Immutable collection of every reference table.

    Each table is a tuple whose row `i` has `code == i`, so a clamped roll can
    be used directly as an index.
    """

    atmospheres: Tuple[AtmoRecord, ...]
    temperatures: Tuple[TempRecord, ...]
    hydrographics: Tuple[HydroRecord, ...]
    populations: Tuple[PopRecord, ...]
    governments: Tuple[GovRecord, ...]
    faction_strengths: Tuple[FactionStrengthRecord, ...]
    cultures: Tuple[CulturalDiffRecord, ...]
    world_tags: Tuple[WorldTagRecord, ...]
    law_levels: Tuple[LawRecord, ...]
    starports: Tuple[StarportRecord, ...]


# Table attribute -> (file name, record type)
TABLE_FILES = {
    "atmospheres": ("atmospheres.csv", AtmoRecord),
    "temperatures": ("temperatures.csv", TempRecord),
    "hydrographics": ("hydrographics.csv", HydroRecord),
    "populations": ("populations.csv", PopRecord),
    "governments": ("governments.csv", GovRecord),
    "faction_strengths": ("factions.csv", FactionStrengthRecord),
    "cultures": ("cultural_differences.csv", CulturalDiffRecord),
    "world_tags": ("world_tags.csv", WorldTagRecord),
    "law_levels": ("law_levels.csv", LawRecord),
    "starports": ("starports.csv", StarportRecord),
}


def load_table(path: Path, record_type: Type[R]) -> Tuple[R, ...]:
    """Load one CSV table, checking that every row's code matches its position.

    Args:
        path: CSV file with a header row
        record_type: Record schema for the rows

    Returns:
        Tuple of validated records

    Raises:
        AssetLoadError: If the file is missing, a row fails validation, a code
            is out of sequence, or the table is empty
    """
    try:
        with open(path, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
    except OSError as e:
        raise AssetLoadError(f"Could not read table {path}: {e}") from e

    table = []
    for index, row in enumerate(rows):
        try:
            record = record_type.model_validate(row)
        except ValidationError as e:
            raise AssetLoadError(f"Invalid row {index} in {path.name}: {e}") from e
        if record.code != index:
            raise AssetLoadError(
                f"Row {index} in {path.name} has code {record.code} (must equal its index)"
            )
        table.append(record)

    if not table:
        raise AssetLoadError(f"Table {path.name} has no rows")

    logger.debug(f"Loaded {len(table)} rows from {path.name}")
    return tuple(table)


def load_tables(directory: Optional[Path] = None) -> TableStore:
    """Load every reference table. Call once at startup and share the result.

    Args:
        directory: Directory holding the CSV files (defaults to the bundled tables)

    Returns:
        Fully loaded TableStore

    Raises:
        AssetLoadError: If any table fails to load
    """
    directory = Path(directory) if directory is not None else TABLE_DIR
    tables = {
        attr: load_table(directory / filename, record_type)
        for attr, (filename, record_type) in TABLE_FILES.items()
    }
    return TableStore(**tables)


def find_by_key(table: Sequence[R], key: str) -> Optional[R]:
    """Return the first row whose identifying column equals `key`."""
    return next((record for record in table if record.key() == key), None)
