import os
import random
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture(autouse=True)
def _clean_maze_env(monkeypatch):
    monkeypatch.delenv("MAZE_LOG_JSON", raising=False)
    monkeypatch.setenv("MAZE_LOG_LEVEL", "warn")
    for key in ("MAZE_DIMENSION", "MAZE_HALF_SIZE", "MAZE_PERCENT", "MAZE_SEED", "MAZE_ENABLE_METRICS"):
        monkeypatch.delenv(key, raising=False)
