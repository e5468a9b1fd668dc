"""
GeoJSON export of a parsed sector.

Every object of the sector model becomes one or more features: navaids and
labels are Points, segments and runways are LineStrings and region polygons
are Polygons. When an overlay is supplied, only the objects it selects are
exported.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from ..models.annotations import Annotations
from ..models.color import Color
from ..models.coordinate import Coordinate, Projection
from ..models.navaid import Airport, Fix, Ndb, Vor
from ..models.overlay import Overlay
from ..models.sector import GeoGroup, Label, Region, Runway, SectorModel, endpoint_position

logger = logging.getLogger(__name__)

Feature = Dict[str, Any]

# SectorModel attribute, feature type, Overlay attribute for the segment groups
GEO_FEATURE_TYPES = [
    ('geo', 'geo', 'geo'),
    ('artcc', 'artcc', 'artcc'),
    ('artcc_low', 'artcc-low', 'artcc_low'),
    ('artcc_high', 'artcc-high', 'artcc_high'),
    ('high_airway', 'high-airway', 'high_airways'),
    ('low_airway', 'low-airway', 'low_airways'),
]


def _rgb(color: Optional[Color]) -> Optional[List[int]]:
    return list(color.to_rgb()) if color is not None else None


def _point(position: Coordinate, projection: Projection) -> Dict[str, Any]:
    return {'type': 'Point', 'coordinates': list(position.project(projection))}


def _line(points: Sequence[Coordinate], projection: Projection) -> Dict[str, Any]:
    return {'type': 'LineString', 'coordinates': [list(p.project(projection)) for p in points]}


def region_features(region: Region, projection: Projection) -> List[Feature]:
    return [
        {
            'type': 'Feature',
            'geometry': {
                'type': 'Polygon',
                'coordinates': [[list(point.project(projection)) for point in polygon.points]],
            },
            'properties': {
                'type': 'region',
                'region': region.id,
                'color': _rgb(polygon.color),
            },
        }
        for polygon in region.polygons
    ]


def geo_features(group: GeoGroup, feature_type: str, projection: Projection) -> List[Feature]:
    """One LineString per segment, all tagged with the group title."""
    return [
        {
            'type': 'Feature',
            'geometry': _line([endpoint_position(segment.start), endpoint_position(segment.end)], projection),
            'properties': {
                'type': feature_type,
                'section': group.id,
                'color': _rgb(segment.color),
            },
        }
        for segment in group.segments
    ]


def airport_feature(airport: Airport, projection: Projection) -> Feature:
    return {
        'type': 'Feature',
        'geometry': _point(airport.position, projection),
        'properties': {
            'type': 'airport',
            'name': airport.id,
        },
    }


def runway_feature(runway: Runway, projection: Projection) -> Feature:
    return {
        'id': f"{runway.icao}: {runway.id}",
        'type': 'Feature',
        'geometry': _line([runway.start, runway.end], projection),
        'properties': {
            'type': 'runway',
            'name': runway.id,
            'opposite_id': runway.opposite_id,
            'icao': runway.icao,
            'airport': runway.airport_name,
        },
    }


def vor_feature(vor: Vor, projection: Projection) -> Feature:
    return {
        'type': 'Feature',
        'geometry': _point(vor.position, projection),
        'properties': {
            'type': 'vor',
            'name': vor.id,
            'freq': vor.frequency,
        },
    }


def ndb_feature(ndb: Ndb, projection: Projection) -> Feature:
    return {
        'type': 'Feature',
        'geometry': _point(ndb.position, projection),
        'properties': {
            'type': 'ndb',
            'name': ndb.id,
            'freq': ndb.frequency,
        },
    }


def fix_feature(fix: Fix, projection: Projection) -> Feature:
    return {
        'type': 'Feature',
        'geometry': _point(fix.position, projection),
        'properties': {
            'type': 'fix',
            'name': fix.id,
        },
    }


def label_feature(label: Label, projection: Projection, section: Optional[str] = None) -> Feature:
    """Point feature for a sector label, or for annotation free text when section is given."""
    properties: Dict[str, Any] = {
        'type': 'label',
        'value': label.text,
        'color': _rgb(label.color),
    }
    if section is not None:
        properties['section'] = section
    return {
        'type': 'Feature',
        'geometry': _point(label.position, projection),
        'properties': properties,
    }


def _select(items: Iterable[Any], overlay: Optional[Overlay], attribute: str,
            key: Callable[[Any], str] = lambda item: item.id) -> List[Any]:
    if overlay is None:
        return list(items)
    selected = set(getattr(overlay, attribute))
    return [item for item in items if key(item) in selected]


def to_geojson(sector: SectorModel,
               annotations: Optional[Annotations] = None,
               overlay: Optional[Overlay] = None,
               projection: Projection = Projection.UTM) -> Dict[str, Any]:
    """
    Convert a sector model to a GeoJSON FeatureCollection.

    Args:
        sector: Parsed sector file
        annotations: Optional parsed .ese file providing free text labels
        overlay: Optional parsed .asr file restricting the exported objects
        projection: Output coordinate system (meters or rounded degrees)

    Returns:
        FeatureCollection as a JSON serializable dict
    """
    projection = Projection(projection)
    features: List[Feature] = []

    for region in _select(sector.regions, overlay, 'regions'):
        features.extend(region_features(region, projection))

    for attribute, feature_type, overlay_attribute in GEO_FEATURE_TYPES:
        for group in _select(getattr(sector, attribute), overlay, overlay_attribute):
            features.extend(geo_features(group, feature_type, projection))

    features.extend(airport_feature(a, projection) for a in _select(sector.airports, overlay, 'airports'))

    runways = sector.runways
    if overlay is not None:
        runways = [runway for runway in runways if runway.full_name in overlay.runways]
    features.extend(runway_feature(r, projection) for r in runways)

    features.extend(vor_feature(v, projection) for v in _select(sector.vors, overlay, 'vors'))
    features.extend(ndb_feature(n, projection) for n in _select(sector.ndbs, overlay, 'ndbs'))
    features.extend(fix_feature(f, projection) for f in _select(sector.fixes, overlay, 'fixes'))

    for group in _select(sector.sid, overlay, 'sids'):
        features.extend(geo_features(group, 'sid', projection))
    for group in _select(sector.star, overlay, 'stars'):
        features.extend(geo_features(group, 'star', projection))

    features.extend(label_feature(label, projection) for label in sector.labels)

    if annotations is not None:
        for section, labels in annotations.free_text.items():
            if overlay is not None:
                shown = set(overlay.free_text.get(section, ()))
                labels = [label for label in labels if label.text in shown]
            features.extend(label_feature(label, projection, section) for label in labels)

    logger.debug(f"Exported {len(features)} features using {projection.value}")
    return {
        'type': 'FeatureCollection',
        'features': features,
    }
