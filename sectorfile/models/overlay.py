from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from .coordinate import Coordinate


@dataclass(frozen=True)
class Overlay:
    """
    Display selection read from an .asr file.

    Each tuple lists the ids of the objects to show for one category.
    free_text maps an annotation section to the label texts to show and
    runways maps a full runway name to the runway ends listed for it.
    """

    sector_file: str = ''
    sector_title: str = ''
    artcc: Tuple[str, ...] = ()
    artcc_high: Tuple[str, ...] = ()
    artcc_low: Tuple[str, ...] = ()
    geo: Tuple[str, ...] = ()
    regions: Tuple[str, ...] = ()
    fixes: Tuple[str, ...] = ()
    vors: Tuple[str, ...] = ()
    ndbs: Tuple[str, ...] = ()
    airports: Tuple[str, ...] = ()
    sids: Tuple[str, ...] = ()
    stars: Tuple[str, ...] = ()
    high_airways: Tuple[str, ...] = ()
    low_airways: Tuple[str, ...] = ()
    free_text: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))
    runways: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))
    viewport: Optional[Tuple[Coordinate, Coordinate]] = None
