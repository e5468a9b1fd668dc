import pandas as pd

from ..models.coordinate import Projection
from ..models.navaid import Airport, Fix, Ndb, Vor, Waypoint
from ..models.sector import SectorModel

WAYPOINT_COLUMNS = ['id', 'type', 'frequency', 'airport_class', 'x', 'y']


def _waypoint_type(waypoint: Waypoint) -> str:
    if isinstance(waypoint, Vor):
        return 'vor'
    if isinstance(waypoint, Ndb):
        return 'ndb'
    if isinstance(waypoint, Airport):
        return 'airport'
    if isinstance(waypoint, Fix):
        return 'fix'
    return 'waypoint'


def waypoints_dataframe(sector: SectorModel, projection: Projection = Projection.WGS84) -> pd.DataFrame:
    """
    Tabulate every VOR, NDB, fix and airport of a sector.

    Args:
        sector: Parsed sector file
        projection: Coordinate system of the x/y columns; with WGS84 x is
            the longitude and y the latitude

    Returns:
        DataFrame with one row per waypoint, in declaration order by type
    """
    projection = Projection(projection)
    rows = []
    for waypoint in [*sector.vors, *sector.ndbs, *sector.fixes, *sector.airports]:
        x, y = waypoint.position.project(projection)
        rows.append({
            'id': waypoint.id,
            'type': _waypoint_type(waypoint),
            'frequency': getattr(waypoint, 'frequency', None),
            'airport_class': getattr(waypoint, 'airport_class', None),
            'x': x,
            'y': y,
        })
    return pd.DataFrame(rows, columns=WAYPOINT_COLUMNS)
