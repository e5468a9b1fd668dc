import os
import time

import pytest

from sectorfile.sources.cached import CachedSource


class MockSource(CachedSource):
    """Mock implementation of CachedSource counting its fetches."""

    def __init__(self, cache_dir):
        super().__init__(cache_dir)
        self.fetches = 0

    def fetch_test(self, param: str) -> str:
        """Test fetch method that returns a small sector file."""
        self.fetches += 1
        return f"[INFO]\n{param} Ørland\n"

    def fetch_index(self) -> str:
        self.fetches += 1
        return "ENOR.sct\nENOR.ese\n"


def test_cached_source_basic(test_cache_dir):
    """Test basic caching functionality."""
    source = MockSource(str(test_cache_dir))

    # First call should fetch
    result1 = source.get_data('test', 'txt', 'ENOR')
    assert result1 == "[INFO]\nENOR Ørland\n"

    # Second call should use cache, keeping the latin-1 characters
    result2 = source.get_data('test', 'txt', 'ENOR')
    assert result2 == result1
    assert source.fetches == 1

    # Different param should fetch again
    result3 = source.get_data('test', 'txt', 'ESAA')
    assert result3.startswith("[INFO]\nESAA")
    assert source.fetches == 2


def test_cache_layout(test_cache_dir):
    source = MockSource(str(test_cache_dir))
    source.get_data('test', 'txt', 'ENOR/ENOR.sct', cache_param='renamed')
    cache_file = test_cache_dir / 'mocksource' / 'test_renamed.txt'
    assert cache_file.read_bytes() == "[INFO]\nENOR/ENOR.sct Ørland\n".encode('latin-1')


def test_fetch_without_parameters(test_cache_dir):
    source = MockSource(str(test_cache_dir))
    source.get_data('index', 'txt', 'all')
    assert source.get_data('index', 'txt', 'all') == "ENOR.sct\nENOR.ese\n"
    assert source.fetches == 1


def test_cached_source_force_refresh(test_cache_dir):
    """Test force refresh functionality."""
    source = MockSource(str(test_cache_dir))

    result1 = source.get_data('test', 'txt', 'ENOR')
    source.set_force_refresh()
    result2 = source.get_data('test', 'txt', 'ENOR')

    # Results should be equal but from different fetches
    assert result1 == result2
    assert source.fetches == 2


def test_expired_cache(test_cache_dir):
    source = MockSource(str(test_cache_dir))
    source.get_data('test', 'txt', 'ENOR', max_age_days=28)

    cache_file = test_cache_dir / 'mocksource' / 'test_ENOR.txt'
    old = time.time() - 40 * 24 * 3600
    os.utime(cache_file, (old, old))

    source.get_data('test', 'txt', 'ENOR', max_age_days=28)
    assert source.fetches == 2

    os.utime(cache_file, (old, old))
    source.set_never_refresh()
    source.get_data('test', 'txt', 'ENOR', max_age_days=28)
    assert source.fetches == 2


def test_missing_fetch_method(test_cache_dir):
    source = MockSource(str(test_cache_dir))
    with pytest.raises(NotImplementedError):
        source.get_data('missing', 'txt', 'ENOR')


@pytest.mark.parametrize('ext', ['json', 'csv'])
def test_only_text_is_cached(test_cache_dir, ext):
    source = MockSource(str(test_cache_dir))
    with pytest.raises(ValueError):
        source.get_data('test', ext, 'ENOR')
