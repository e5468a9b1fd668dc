import logging
import re
from typing import Dict, Optional

import requests

from ..models.annotations import Annotations
from ..models.overlay import Overlay
from ..models.sector import SectorModel
from ..parsers.asr import parse_asr
from ..parsers.ese import parse_ese
from ..parsers.isec import parse_isec
from ..parsers.sct import parse_sct
from .cached import CachedSource

logger = logging.getLogger(__name__)

_UNSAFE_CHARACTERS = re.compile(r'[^A-Za-z0-9_.-]+')


class SectorFileSource(CachedSource):
    """
    Sector package files published on a web server.

    Files are addressed by their path relative to base_url, for example
    'ENOR/ENOR.sct', downloaded once and kept in the cache as text.

    Example:
        source = SectorFileSource('cache', 'https://files.example.org/sectors')
        sector = source.load_sector('ENOR/ENOR.sct', isec='ENOR/ENOR.isec')
    """

    def __init__(self, cache_dir: str, base_url: str, encoding: str = 'latin-1',
                 headers: Optional[Dict[str, str]] = None, timeout: float = 30):
        """
        Initialize the source.

        Args:
            cache_dir: Base directory for caching
            base_url: URL the file names are relative to
            encoding: Encoding of the published files
            headers: Extra HTTP headers sent with every request
            timeout: Request timeout in seconds
        """
        super().__init__(cache_dir, encoding=encoding)
        self.base_url = base_url.rstrip('/')
        self.headers = headers or {}
        self.timeout = timeout

    def _download(self, name: str) -> str:
        url = f"{self.base_url}/{name.lstrip('/')}"
        logger.info(f"Downloading {url}")
        response = requests.get(url, headers=self.headers, timeout=self.timeout)
        response.raise_for_status()
        return response.content.decode(self.encoding)

    def _cache_name(self, name: str) -> str:
        return _UNSAFE_CHARACTERS.sub('_', name)

    def fetch_sct(self, name: str) -> str:
        return self._download(name)

    def fetch_ese(self, name: str) -> str:
        return self._download(name)

    def fetch_asr(self, name: str) -> str:
        return self._download(name)

    def fetch_isec(self, name: str) -> str:
        return self._download(name)

    def get_file(self, kind: str, name: str, max_age_days: Optional[int] = 28) -> str:
        """
        Get the text of a published file.

        Args:
            kind: One of 'sct', 'ese', 'asr' or 'isec'
            name: Path relative to base_url
            max_age_days: Maximum cache age, one AIRAC cycle by default

        Returns:
            Decoded file content
        """
        return self.get_data(kind, 'txt', name, cache_param=self._cache_name(name), max_age_days=max_age_days)

    def load_sector(self, name: str, isec: Optional[str] = None) -> SectorModel:
        """Download and parse a sector file, seeding it with an optional waypoint list."""
        waypoints = parse_isec(self.get_file('isec', isec)) if isec else None
        return parse_sct(self.get_file('sct', name), waypoints)

    def load_annotations(self, name: str) -> Annotations:
        return parse_ese(self.get_file('ese', name))

    def load_overlay(self, name: str) -> Overlay:
        return parse_asr(self.get_file('asr', name))
