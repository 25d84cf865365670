import copy
import os
import sys

import pytest

# Ensure src/ is on path, as main.py does when run directly
SRC = os.path.join(os.path.dirname(os.path.dirname(__file__)), "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from config import DEFAULTS  # noqa: E402


@pytest.fixture
def config():
    cfg = copy.deepcopy(DEFAULTS)
    cfg["colors"] = {name: tuple(rgb) for name, rgb in cfg["colors"].items()}
    return cfg
