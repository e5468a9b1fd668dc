import pytest
from pathlib import Path
from typing import Dict

from sectorfile.models import Color


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def test_cache_dir(tmp_path) -> Path:
    """Return a temporary directory for cache testing."""
    return tmp_path / 'cache'


@pytest.fixture
def sample_files(test_assets_dir) -> Dict[str, Path]:
    """Return the sample sector package files keyed by extension."""
    return {
        path.suffix.lstrip('.'): path
        for path in test_assets_dir.glob('sample.*')
    }


@pytest.fixture
def sample_texts(sample_files) -> Dict[str, str]:
    """Return the decoded content of the sample files keyed by extension."""
    return {
        ext: path.read_text(encoding='latin-1')
        for ext, path in sample_files.items()
    }


@pytest.fixture
def color_app() -> Color:
    return Color('COLOR_APP', 13158600)


