import pytest


@pytest.fixture
def small_solutions():
    return ["abbey", "alley", "amity"]


@pytest.fixture
def words():
    return ["abbey", "abide", "alley", "amity", "amply", "apply", "crane",
            "eerie", "level", "scoop", "speed", "total", "stoal"]
