"""Input events accepted by the color bloc."""

from enum import Enum


class ColorEvent(Enum):
    INITIALIZE = "initialize"
    SET_BLUE = "set_blue"
    SET_RED = "set_red"
