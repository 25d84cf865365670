"""Color bloc states.

A state is either ``Uninitialized`` (nothing processed yet) or
``Resolved`` carrying the color flag. Both are immutable values.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Uninitialized:
    """No event has been processed yet."""


@dataclass(frozen=True)
class Resolved:
    """The last processed event settled the color."""

    is_blue: bool


ColorState = Union[Uninitialized, Resolved]

UNINITIALIZED = Uninitialized()


def display_is_blue(state: ColorState) -> bool:
    """Color to show for a state; blue until the first event resolves it."""
    if isinstance(state, Resolved):
        return state.is_blue
    return True
