"""Precedence checks over an ordered list of stations."""

from typing import Sequence

from models.station import WorkStation


def validate_level_order(stations: Sequence[WorkStation]) -> bool:
    """
    Check the tier ordering of adjacent stations.

    For every adjacent pair, the highest level in the earlier station must not
    exceed the lowest level in the later one. Steps of the same level may sit
    on either side of a boundary.
    """
    for current, following in zip(stations, stations[1:]):
        if current.is_empty() or following.is_empty():
            return False
        if current.max_level() > following.min_level():
            return False
    return True


def validate_sequence_order(stations: Sequence[WorkStation]) -> bool:
    """
    Stricter check that also compares sequence indices inside a shared tier.

    Exact search reorders steps within a tier, so a balanced line can fail this
    while still being valid; it is only used for diagnostics.
    """
    for current, following in zip(stations, stations[1:]):
        if current.is_empty() or following.is_empty():
            return False
        if current.last_sequence_key() >= following.first_sequence_key():
            return False
    return True
