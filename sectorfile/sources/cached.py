from abc import ABC
import inspect
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ('txt',)


class CachedSource(ABC):
    """
    Base class for sources that keep a local copy of what they fetch.

    Cached files are stored under `{cache_dir}/{source name}/{key}_{param}.{ext}`.
    The key names the kind of data ('sct', 'ese', ...) and must match a
    `fetch_{key}` method of the implementing class, which is called with the
    parameter when the cache is missing or too old.

    Fetched data is decoded text and is cached as txt, written with the
    source encoding.
    """

    def __init__(self, cache_dir: str, encoding: str = 'latin-1'):
        """
        Initialize the cached source.

        Args:
            cache_dir: Base directory for caching
            encoding: Encoding used for cached text files
        """
        self.cache_dir = Path(cache_dir)
        self.encoding = encoding
        self.source_name = self.__class__.__name__.lower()
        self.cache_path = self.cache_dir / self.source_name
        self.cache_path.mkdir(parents=True, exist_ok=True)
        self._force_refresh = False
        self._never_refresh = False

    def set_force_refresh(self, force_refresh: bool = True) -> None:
        """Always fetch, ignoring any cached copy."""
        self._force_refresh = force_refresh

    def set_never_refresh(self, never_refresh: bool = True) -> None:
        """Use a cached copy whenever one exists, regardless of its age."""
        self._never_refresh = never_refresh

    def _get_cache_file(self, key: str, ext: str) -> Path:
        return self.cache_path / f"{key}.{ext}"

    def _is_cache_valid(self, cache_file: Path, max_age_days: Optional[int] = None) -> Tuple[bool, Optional[str]]:
        """
        Check if the cache file exists and is recent enough.

        Returns:
            Tuple of (is_valid, reason if invalid)
        """
        if self._force_refresh:
            return False, "force refresh"
        if not cache_file.exists():
            return False, "missing"
        if self._never_refresh or max_age_days is None:
            return True, None
        file_age = datetime.now() - datetime.fromtimestamp(cache_file.stat().st_mtime)
        if file_age.days <= max_age_days:
            return True, None
        return False, "expired"

    def _save_to_cache(self, data: str, key: str, ext: str) -> None:
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValueError(f"Unsupported file extension: {ext}")
        self._get_cache_file(key, ext).write_text(data, encoding=self.encoding)

    def _load_from_cache(self, key: str, ext: str) -> str:
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValueError(f"Unsupported file extension: {ext}")
        return self._get_cache_file(key, ext).read_text(encoding=self.encoding)

    def _validate_fetch_method(self, base_key: str) -> None:
        method_name = f"fetch_{base_key}"
        if not hasattr(self, method_name):
            raise NotImplementedError(
                f"No fetch method found for key '{base_key}'. "
                f"Class {self.__class__.__name__} must implement a method named '{method_name}'."
            )

    def get_data(self, key: str, ext: str, param: str, cache_param: Optional[str] = None,
                 max_age_days: Optional[int] = None, **kwargs) -> str:
        """
        Get data from cache or fetch it if not available.

        Args:
            key: Base key for the data type, selects the fetch_{key} method
            ext: File extension, only txt is supported
            param: Parameter passed to the fetch method
            cache_param: Optional value used in the cache file name instead of param
            max_age_days: Maximum age of cache in days (None for no limit)
            **kwargs: Additional arguments to pass to the fetch method

        Returns:
            The requested data

        Raises:
            NotImplementedError: If the fetch method doesn't exist
            ValueError: If the file extension is not supported
        """
        cache_key = f"{key}_{cache_param if cache_param is not None else param}"
        cache_file = self._get_cache_file(cache_key, ext)

        is_valid, reason = self._is_cache_valid(cache_file, max_age_days)
        if is_valid:
            logger.info(f"{cache_file.name} retrieved from cache {self.source_name}")
            return self._load_from_cache(cache_key, ext)

        self._validate_fetch_method(key)
        fetch_method = getattr(self, f"fetch_{key}")

        if len(inspect.signature(fetch_method).parameters) == 0:
            data = fetch_method()
        else:
            data = fetch_method(param, **kwargs)

        self._save_to_cache(data, cache_key, ext)
        logger.info(f"{cache_file.name} [{reason}] fetched using {fetch_method.__name__}")
        return data
