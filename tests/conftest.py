import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Ensure `src/` is on sys.path so tests can import `forest_fire.*`.

    This repo uses the common `src/` layout but is not necessarily installed as a package
    in the active environment. Plots are rendered off-screen.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))

    import matplotlib

    matplotlib.use("Agg")


@pytest.fixture
def sample_grid_size():
    """Provide a small grid size for tests."""
    return 8


@pytest.fixture
def params():
    """Parameters of the reference scenario."""
    from forest_fire.config import SimulationParameters

    return SimulationParameters(
        growth_probability=0.01,
        ignition_probability=0.0005,
        steps_per_tick=100,
        animate=False,
        seed="test",
    )


@pytest.fixture
def model(sample_grid_size, params):
    from forest_fire.model import ForestFireModel

    return ForestFireModel(grid_size=sample_grid_size, params=params)


@pytest.fixture
def forested_model(model):
    """Model whose grid is completely covered with trees."""
    for y in range(model.grid_size):
        for x in range(model.grid_size):
            model.grid.plant(x, y)
    return model
