from .geojson import to_geojson
from .tables import waypoints_dataframe

__all__ = [
    'to_geojson',
    'waypoints_dataframe',
]
