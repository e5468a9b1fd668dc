#!/usr/bin/env python3

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ..exceptions import CoordinateFormatError


class Projection(Enum):
    """Output coordinate systems supported by the exporters."""
    UTM = "UTM"      # Spherical Mercator, meters
    WGS84 = "WGS84"  # Decimal degrees rounded to 6 decimals


EARTH_RADIUS_M = 6378137
HALF_SIZE = math.pi * EARTH_RADIUS_M
WGS84_DECIMALS = 6

_LATITUDE_PATTERN = re.compile(r'^[NnSs][0-9.]+$')
_LONGITUDE_PATTERN = re.compile(r'^[EeWw][0-9.]+$')


def is_latitude(value: str) -> bool:
    """
    Check that a string has the shape of a sector file latitude.

    Only the hemisphere letter and the allowed characters are checked,
    the numeric body is validated during decimal conversion.
    """
    return _LATITUDE_PATTERN.match(value) is not None


def is_longitude(value: str) -> bool:
    """Check that a string has the shape of a sector file longitude."""
    return _LONGITUDE_PATTERN.match(value) is not None


def dms_to_decimal(value: str, positive: str, negative: str) -> float:
    """
    Convert a hemisphere prefixed DMS string to decimal degrees.

    Args:
        value: String like 'N057.06.14.158' (degrees.minutes.seconds.fraction)
        positive: Hemisphere letter for positive values ('N' or 'E')
        negative: Hemisphere letter for negative values ('S' or 'W')

    Returns:
        Signed decimal degrees

    Raises:
        CoordinateFormatError: If the hemisphere or any numeric part is invalid
    """
    if not value:
        raise CoordinateFormatError('Invalid coordinate (empty)')

    hemisphere = value[0].upper()
    if hemisphere not in (positive, negative):
        raise CoordinateFormatError(f"Invalid coordinate {value}")
    direction = 1 if hemisphere == positive else -1

    parts = value[1:].split('.')
    degrees = parts[0]
    minutes = parts[1] if len(parts) > 1 else ''
    seconds = parts[2] if len(parts) > 2 and parts[2] else '0'
    decimals = parts[3] if len(parts) > 3 and parts[3] else '0'

    try:
        # seconds and fraction must each be plain integers before joining
        int(seconds)
        int(decimals)
        result = direction * (
            int(degrees) + int(minutes) / 60 + float(f"{seconds}.{decimals}") / 3600
        )
    except (ValueError, OverflowError):
        raise CoordinateFormatError(f"Invalid coordinate {value}")

    if not math.isfinite(result):
        raise CoordinateFormatError(f"Invalid coordinate {value}")
    return result


def reduce_decimal_precision(decimal: float, decimals: int = WGS84_DECIMALS) -> float:
    """Round half up to a fixed number of decimals."""
    factor = 10 ** decimals
    return math.floor(decimal * factor + 0.5) / factor


@dataclass(frozen=True)
class Coordinate:
    """
    A geographic position as written in a sector file or as decimal degrees.

    Exactly one representation is stored:
    - dms: (latitude, longitude) strings such as ('N057.06.14.158', 'E009.59.34.108')
    - decimal: (latitude, longitude) floats in degrees

    Decimal latitude and longitude are derived on demand, so a position read
    from a file keeps its original text and two positions compare equal only
    when they were written the same way.
    """

    dms: Optional[Tuple[str, str]] = None
    decimal: Optional[Tuple[float, float]] = None

    def __post_init__(self):
        if (self.dms is None) == (self.decimal is None):
            raise ValueError("Coordinate needs exactly one of dms or decimal")

    @classmethod
    def from_dms(cls, latitude: str, longitude: str) -> 'Coordinate':
        """Create a coordinate from two sector file DMS strings."""
        return cls(dms=(latitude, longitude))

    @classmethod
    def from_decimal(cls, latitude: float, longitude: float) -> 'Coordinate':
        """Create a coordinate from decimal degrees."""
        return cls(decimal=(latitude, longitude))

    @property
    def latitude(self) -> float:
        """Latitude in decimal degrees, negative for South."""
        if self.decimal is not None:
            return self.decimal[0]
        return dms_to_decimal(self.dms[0], 'N', 'S')

    @property
    def longitude(self) -> float:
        """Longitude in decimal degrees, negative for West."""
        if self.decimal is not None:
            return self.decimal[1]
        return dms_to_decimal(self.dms[1], 'E', 'W')

    def validate(self) -> 'Coordinate':
        """
        Force decimal conversion of both axes.

        Returns:
            The coordinate itself

        Raises:
            CoordinateFormatError: If either axis cannot be converted
        """
        self.latitude
        self.longitude
        return self

    def to_utm(self) -> Tuple[float, float]:
        """
        Project to spherical Mercator meters.

        Returns:
            Tuple of (x, y); y is clamped to +-pi*R near the poles
        """
        x = HALF_SIZE * self.longitude / 180
        tangent = math.tan(math.pi * (self.latitude + 90) / 360)
        # tan reaches 0 at the south pole
        y = EARTH_RADIUS_M * math.log(tangent) if tangent > 0 else -HALF_SIZE
        if y > HALF_SIZE:
            y = HALF_SIZE
        elif y < -HALF_SIZE:
            y = -HALF_SIZE
        return x, y

    def to_wgs84(self) -> Tuple[float, float]:
        """
        Convert to decimal degrees with a precision of 6 decimals.

        This gives a real world precision of about 10cm.

        Returns:
            Tuple of (longitude, latitude)
        """
        return (
            reduce_decimal_precision(self.longitude),
            reduce_decimal_precision(self.latitude)
        )

    def project(self, projection: Projection) -> Tuple[float, float]:
        """Project to the requested output coordinate system."""
        if projection == Projection.WGS84:
            return self.to_wgs84()
        return self.to_utm()

    def __str__(self) -> str:
        if self.dms is not None:
            return f"({self.dms[0]}, {self.dms[1]})"
        return f"({self.decimal[0]}, {self.decimal[1]})"
