"""Serialization — JSON-compatible schema for the persisted application state."""

from forgefit.serialization.state_json import (
    dumps_state,
    loads_state,
    profile_from_dict,
    profile_to_dict,
    state_from_dict,
    state_to_dict,
)

__all__ = [
    "dumps_state",
    "loads_state",
    "profile_from_dict",
    "profile_to_dict",
    "state_from_dict",
    "state_to_dict",
]
