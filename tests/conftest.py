import sys
from pathlib import Path

import pytest

# Make 'src' importable without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))

from roguelike.config import Settings  # noqa: E402
from roguelike.engine.game_state import Game  # noqa: E402


@pytest.fixture
def settings():
    return Settings().validate()


@pytest.fixture
def game(settings):
    return Game.from_settings(settings)
