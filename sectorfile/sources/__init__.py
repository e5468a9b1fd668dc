from .cached import CachedSource
from .sector_files import SectorFileSource

__all__ = [
    'CachedSource',
    'SectorFileSource',
]
