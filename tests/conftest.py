"""Shared fixtures for radialgrid tests."""
import pytest
from canvas import Canvas
from config import BACKGROUND, RenderConfig


@pytest.fixture(scope="session")
def config():
    """Default 255x255 render configuration."""
    return RenderConfig()


@pytest.fixture
def blank(config):
    """Fresh white canvas of the default size."""
    return Canvas(config.width, config.height, BACKGROUND)


@pytest.fixture
def out_dir(tmp_path):
    d = tmp_path / "img"
    d.mkdir()
    return d
