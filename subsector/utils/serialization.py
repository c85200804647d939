"""Subsector serialization to/from JSON.

Worlds are keyed by their point's four-digit string ("0102"). Table records are
stored with every column so that hand edits to descriptions survive a round
trip; on load each record is matched back to its table row by its identifying
column, so a file stays loadable even if row codes are edited or go stale.
Travel and trade codes are always recomputed on load rather than trusted.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Sequence, Type, TypeVar

from pydantic import ValidationError

from ..engine.classification import resolve_derived
from ..engine.tables import TableStore, find_by_key
from ..models.point import Point
from ..models.records import TableRecord
from ..models.subsector import Subsector
from ..models.world import Faction, World, sorted_trade_codes
from .errors import SubsectorParseError

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=TableRecord)


def to_json(subsector: Subsector) -> str:
    """Serialize a subsector to a pretty-printed JSON string."""
    return json.dumps(_serialize_subsector(subsector), indent=2)


def from_json(text: str, tables: TableStore) -> Subsector:
    """Rebuild a subsector from a JSON string.

    Args:
        text: JSON produced by `to_json` (or a hand-edited copy of it)
        tables: Loaded reference tables used to resolve records

    Returns:
        Reconstructed Subsector with derived codes re-resolved

    Raises:
        SubsectorParseError: If the JSON is malformed, a point key is invalid,
            or a record does not match any table row
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SubsectorParseError(f"Invalid JSON: {e}") from e

    return _deserialize_subsector(data, tables)


def save_subsector(subsector: Subsector, filepath: str | Path) -> None:
    """Save a subsector to a JSON file.

    Example:
        save_subsector(subsector, "Spinward Reach.json")
    """
    path = Path(filepath)
    with open(path, "w", encoding="utf-8") as f:
        f.write(to_json(subsector))

    logger.info(f"Saved subsector {subsector.name} ({len(subsector)} worlds) to {path}")


def load_subsector(filepath: str | Path, tables: TableStore) -> Subsector:
    """Load a subsector from a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        SubsectorParseError: If the contents can't be parsed
    """
    path = Path(filepath)
    with open(path, encoding="utf-8") as f:
        subsector = from_json(f.read(), tables)

    logger.info(f"Loaded subsector {subsector.name} ({len(subsector)} worlds) from {path}")
    return subsector


def _serialize_subsector(subsector: Subsector) -> Dict[str, Any]:
    return {
        "name": subsector.name,
        "map": {str(point): _serialize_world(world) for point, world in subsector.items()},
    }


def _deserialize_subsector(data: Any, tables: TableStore) -> Subsector:
    if not isinstance(data, dict):
        raise SubsectorParseError("Subsector JSON must be an object")
    if "name" not in data or "map" not in data:
        raise SubsectorParseError("Subsector JSON requires 'name' and 'map'")
    if not isinstance(data["map"], dict):
        raise SubsectorParseError("Subsector 'map' must be an object keyed by point")

    worlds = {}
    for point_str, world_data in data["map"].items():
        point = Point.parse(point_str)
        if not point.in_bounds:
            raise SubsectorParseError(f"World location {point_str} is outside the subsector")
        if point in worlds:
            raise SubsectorParseError(f"World location {point_str} duplicates {point}")
        worlds[point] = _deserialize_world(world_data, point, tables)

    return Subsector(name=str(data["name"]), worlds=worlds)


def _serialize_record(record: TableRecord) -> Dict[str, Any]:
    return record.model_dump(mode="json", by_alias=True)


def _deserialize_record(data: Any, table: Sequence[R], field_name: str) -> R:
    """Match a stored record to its table row, keeping any edited columns.

    The stored code is used when it still points at a row with the same
    identifying text; otherwise the first row with that text wins.
    """
    if not isinstance(data, dict):
        raise SubsectorParseError(f"World {field_name} must be an object")

    record_type = type(table[0])
    alias = record_type.key_alias()
    if alias not in data:
        raise SubsectorParseError(f"World {field_name} is missing '{alias}'")
    key = str(data[alias])

    code = data.get("code")
    if isinstance(code, int) and 0 <= code < len(table) and table[code].key() == key:
        row = table[code]
    else:
        row = find_by_key(table, key)
    if row is None:
        raise SubsectorParseError(f"Unknown {field_name} {alias}: '{key}'")

    merged = {**row.model_dump(by_alias=True), **data, "code": row.code}
    try:
        return record_type.model_validate(merged)
    except ValidationError as e:
        raise SubsectorParseError(f"Invalid {field_name} '{key}': {e}") from e


def _serialize_faction(faction: Faction) -> Dict[str, Any]:
    return {
        "name": faction.name,
        "code": faction.strength_code,
        "strength": faction.strength,
        "government": _serialize_record(faction.government),
    }


def _deserialize_faction(data: Any, tables: TableStore) -> Faction:
    if not isinstance(data, dict):
        raise SubsectorParseError("Faction must be an object")

    key = str(data.get("strength"))
    code = data.get("code")
    strengths = tables.faction_strengths
    if isinstance(code, int) and 0 <= code < len(strengths) and strengths[code].strength == key:
        strength = strengths[code]
    else:
        strength = find_by_key(strengths, key)
    if strength is None:
        raise SubsectorParseError(f"Unknown faction strength: '{data.get('strength')}'")

    return Faction(
        name=str(data.get("name", "")),
        strength_code=strength.code,
        strength=strength.strength,
        government=_deserialize_record(data.get("government"), tables.governments, "faction government"),
    )


def _serialize_world(world: World) -> Dict[str, Any]:
    return {
        "name": world.name,
        "has_gas_giant": world.has_gas_giant,
        "size": world.size,
        "diameter": world.diameter,
        "atmosphere": _serialize_record(world.atmosphere),
        "temperature": _serialize_record(world.temperature),
        "hydrographics": _serialize_record(world.hydrographics),
        "population": _serialize_record(world.population),
        "unmodified_population": world.unmodified_population,
        "government": _serialize_record(world.government),
        "law_level": _serialize_record(world.law_level),
        "factions": [_serialize_faction(f) for f in world.factions],
        "culture": _serialize_record(world.culture),
        "world_tags": [_serialize_record(t) for t in world.world_tags],
        "starport": _serialize_record(world.starport),
        "tech_level": world.tech_level,
        "has_naval_base": world.has_naval_base,
        "has_scout_base": world.has_scout_base,
        "has_research_base": world.has_research_base,
        "has_tas": world.has_tas,
        "travel_code": world.travel_code.value,
        "trade_codes": [code.value for code in sorted_trade_codes(world.trade_codes)],
        "notes": world.notes,
    }


def _deserialize_world(data: Any, location: Point, tables: TableStore) -> World:
    """Rebuild a World stored at `location`.

    The location always comes from the map key, and travel and trade codes are
    re-resolved from the loaded fields.
    """
    if not isinstance(data, dict):
        raise SubsectorParseError(f"World at {location} must be an object")

    try:
        population = _deserialize_record(data["population"], tables.populations, "population")
        world = World(
            name=str(data["name"]),
            location=location,
            has_gas_giant=bool(data["has_gas_giant"]),
            size=int(data["size"]),
            diameter=int(data["diameter"]),
            atmosphere=_deserialize_record(data["atmosphere"], tables.atmospheres, "atmosphere"),
            temperature=_deserialize_record(data["temperature"], tables.temperatures, "temperature"),
            hydrographics=_deserialize_record(
                data["hydrographics"], tables.hydrographics, "hydrographics"
            ),
            population=population,
            # Older files did not store the unmodified roll
            unmodified_population=int(data.get("unmodified_population", population.code)),
            government=_deserialize_record(data["government"], tables.governments, "government"),
            law_level=_deserialize_record(data["law_level"], tables.law_levels, "law level"),
            factions=[_deserialize_faction(f, tables) for f in data.get("factions", [])],
            culture=_deserialize_record(data["culture"], tables.cultures, "culture"),
            world_tags=[
                _deserialize_record(t, tables.world_tags, "world tag") for t in data["world_tags"]
            ],
            starport=_deserialize_record(data["starport"], tables.starports, "starport"),
            tech_level=int(data["tech_level"]),
            has_naval_base=bool(data.get("has_naval_base", False)),
            has_scout_base=bool(data.get("has_scout_base", False)),
            has_research_base=bool(data.get("has_research_base", False)),
            has_tas=bool(data.get("has_tas", False)),
            notes=str(data.get("notes", "")),
        )
    except KeyError as e:
        raise SubsectorParseError(f"World at {location} is missing field {e}") from e
    except (TypeError, ValueError) as e:
        raise SubsectorParseError(f"Invalid world at {location}: {e}") from e

    return resolve_derived(world)
