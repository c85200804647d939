"""Text output for subsectors: profiles, tables and map previews."""

from .profile import (
    base_str,
    ehex,
    gravity_str,
    profile_str,
    starport_tl_str,
    trade_code_long_str,
    trade_code_str,
)
from .renderer import HexMarker, MapRenderer, describe_subsector
from .t5_table import UWP_REFERENCE, t5_table

__all__ = [
    "base_str",
    "ehex",
    "gravity_str",
    "profile_str",
    "starport_tl_str",
    "trade_code_long_str",
    "trade_code_str",
    "HexMarker",
    "MapRenderer",
    "describe_subsector",
    "UWP_REFERENCE",
    "t5_table",
]
