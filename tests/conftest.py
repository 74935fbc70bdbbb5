"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures shared by tests of multiple layers.
"""

from typing import Generator

import pytest

from gamingroom.services.game_service import GameService, reset_instance_for_tests


@pytest.fixture
def service() -> GameService:
    """A fresh registry, independent of the shared instance."""
    return GameService()


@pytest.fixture
def shared_instance_reset() -> Generator[None, None, None]:
    """Start and end with no shared registry, so tests touching get_instance() stay independent."""
    reset_instance_for_tests()
    try:
        yield
    finally:
        reset_instance_for_tests()
