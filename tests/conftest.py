import pytest
from raycaster.geometry.world import World

@pytest.fixture
def default_world():
    return World.default()
