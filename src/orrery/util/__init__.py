__all__ = [
    "NUM_PLACES",
    "strip_units",
    "clamp_non_negative",
    "round_places",
    "format_value",
]

from .misc import (
    NUM_PLACES,
    strip_units,
    clamp_non_negative,
    round_places,
    format_value,
)
