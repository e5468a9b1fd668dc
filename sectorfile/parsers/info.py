from typing import List, Optional, Tuple, Union

from ..exceptions import CoordinateFormatError, UnrecognizedLineError
from ..models.coordinate import Coordinate
from ..models.sector import SectorInfo

# (line number, text) pairs of the [INFO] section
InfoLine = Tuple[int, str]


def _number(entry: Optional[InfoLine]) -> Optional[Union[int, float]]:
    if entry is None:
        return None
    line, text = entry
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise UnrecognizedLineError(line, f"Expected a number in the [INFO] header, got '{text}'")


def structured_info(lines: List[InfoLine]) -> SectorInfo:
    """
    Map the positional [INFO] lines to their header slots.

    The lines are, in order: sector filename, default callsign, default
    airport, center latitude, center longitude, nm per degree of latitude,
    nm per degree of longitude, magnetic variation and sector scale. Lines
    after the ninth are ignored.
    """
    slots: List[Optional[InfoLine]] = list(lines[:9]) + [None] * (9 - min(len(lines), 9))
    (
        sector_filename,
        default_callsign,
        default_airport,
        lat,
        lon,
        nm_per_lat_degree,
        nm_per_lon_degree,
        magnetic_variation,
        sector_scale,
    ) = slots

    center = None
    if lat is not None and lon is not None:
        center = Coordinate.from_dms(lat[1], lon[1])
        try:
            center.latitude
        except CoordinateFormatError as e:
            raise e.with_line(lat[0])
        try:
            center.longitude
        except CoordinateFormatError as e:
            raise e.with_line(lon[0])

    return SectorInfo(
        sector_filename=sector_filename[1] if sector_filename else None,
        default_callsign=default_callsign[1] if default_callsign else None,
        default_airport=default_airport[1] if default_airport else None,
        center=center,
        nm_per_lat_degree=_number(nm_per_lat_degree),
        nm_per_lon_degree=_number(nm_per_lon_degree),
        magnetic_variation=_number(magnetic_variation),
        sector_scale=_number(sector_scale),
    )
