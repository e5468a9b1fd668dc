import json

import pytest

from sectorfile.export.geojson import to_geojson
from sectorfile.models import (
    Annotations,
    Color,
    Coordinate,
    Fix,
    GeoGroup,
    Label,
    Overlay,
    Polygon,
    Projection,
    Region,
    SectorModel,
    Segment,
    Vor,
    Waypoint,
)
from sectorfile.parsers import parse_asr, parse_ese, parse_sct


def dms(lat: str, lon: str) -> Coordinate:
    return Coordinate.from_dms(lat, lon)


CTR_COLOR = Color('COLOR_TWR-CTR', 13158600)


def dummy_groups(ids):
    return tuple(
        GeoGroup(id=id, segments=(
            Segment(dms('N060.01.54.946', 'E011.00.16.024'), dms('N060.00.47.000', 'E011.08.04.000'), CTR_COLOR),
            Segment(dms('N060.00.47.000', 'E011.08.04.000'), dms('N060.12.18.000', 'E011.17.31.000'), CTR_COLOR),
        ))
        for id in ids
    )


def test_empty_feature_collection():
    assert to_geojson(SectorModel(), Annotations(), Overlay()) == {
        'type': 'FeatureCollection',
        'features': [],
    }


def test_vor_point():
    sector = SectorModel(vors=(
        Vor(id='GRM', frequency='115.950', position=dms('N060.11.30.328', 'E011.04.27.908')),
    ))
    assert to_geojson(sector, projection=Projection.WGS84)['features'] == [
        {
            'type': 'Feature',
            'geometry': {'type': 'Point', 'coordinates': [11.074419, 60.191758]},
            'properties': {'type': 'vor', 'name': 'GRM', 'freq': '115.950'},
        },
    ]


def test_fix_point():
    sector = SectorModel(fixes=(Fix(id='BAVAD', position=dms('N060.27.57.999', 'E011.05.03.998')),))
    feature, = to_geojson(sector, projection='WGS84')['features']
    assert feature['geometry']['coordinates'] == [11.084444, 60.466111]
    assert feature['properties'] == {'type': 'fix', 'name': 'BAVAD'}


def test_utm_is_the_default_projection():
    position = dms('N060.11.30.328', 'E011.04.27.908')
    sector = SectorModel(fixes=(Fix(id='GRM', position=position),))
    feature, = to_geojson(sector)['features']
    assert feature['geometry']['coordinates'] == list(position.to_utm())


def test_star_segments_follow_waypoints(color_app):
    adopi = Fix(id='ADOPI', position=dms('N060.19.24.999', 'E009.22.59.998'))
    nivdu = Fix(id='NIVDU', position=dms('N060.16.19.999', 'E009.51.50.000'))
    gm402 = Waypoint(id='GM402', position=Coordinate.from_decimal(60.130306, 10.252833))
    sector = SectorModel(star=(
        GeoGroup(id='ENGM STARS RWY 01', segments=(
            Segment(adopi, nivdu, color_app),
            Segment(nivdu, gm402, None),
        )),
    ))

    assert to_geojson(sector, projection=Projection.WGS84)['features'] == [
        {
            'type': 'Feature',
            'geometry': {'type': 'LineString', 'coordinates': [[9.383333, 60.323611], [9.863889, 60.272222]]},
            'properties': {'type': 'star', 'section': 'ENGM STARS RWY 01', 'color': [200, 200, 200]},
        },
        {
            'type': 'Feature',
            'geometry': {'type': 'LineString', 'coordinates': [[9.863889, 60.272222], [10.252833, 60.130306]]},
            'properties': {'type': 'star', 'section': 'ENGM STARS RWY 01', 'color': None},
        },
    ]


def test_artcc_low_lines():
    sector = SectorModel(artcc_low=dummy_groups(['CTR - ENGM']))
    features = to_geojson(sector, projection=Projection.WGS84)['features']
    assert [feature['geometry']['coordinates'] for feature in features] == [
        [[11.004451, 60.031929], [11.134444, 60.013056]],
        [[11.134444, 60.013056], [11.291944, 60.205]],
    ]
    assert {feature['properties']['type'] for feature in features} == {'artcc-low'}


def test_label_and_free_text():
    label_color = Color('FREETEXT_COLOR', 13158600)
    sector = SectorModel(labels=(
        Label(text='VORMSUND', position=dms('N060.09.18.000', 'E011.25.05.000'), color=label_color),
    ))
    annotations = Annotations(free_text={
        'ENGM VFR Reporting Points': (
            Label(text='NANNESTAD', position=dms('N060.13.03.000', 'E010.58.15.000'), color=label_color),
            Label(text='NORDKISA', position=dms('N060.11.05.000', 'E011.15.50.000')),
        ),
    })

    features = to_geojson(sector, annotations, projection=Projection.WGS84)['features']
    assert [feature['geometry']['coordinates'] for feature in features] == [
        [11.418056, 60.155],
        [10.970833, 60.2175],
        [11.263889, 60.184722],
    ]
    assert features[0]['properties'] == {'type': 'label', 'value': 'VORMSUND', 'color': [200, 200, 200]}
    assert features[2]['properties'] == {
        'type': 'label',
        'value': 'NORDKISA',
        'color': None,
        'section': 'ENGM VFR Reporting Points',
    }


def test_region_polygons():
    building = Color('COLOR_Building', 3881787)
    sector = SectorModel(regions=(
        Region(id='ENML', polygons=(
            Polygon(color=building, points=(
                dms('N062.44.43.705', 'E007.15.21.800'),
                dms('N062.44.43.497', 'E007.15.23.427'),
                dms('N062.44.44.006', 'E007.15.23.717'),
                dms('N062.44.44.210', 'E007.15.22.090'),
            )),
            Polygon(color=building, points=(
                dms('N062.44.44.522', 'E007.15.22.181'),
                dms('N062.44.44.062', 'E007.15.23.796'),
            )),
        )),
    ))

    features = to_geojson(sector, projection=Projection.WGS84)['features']
    assert len(features) == 2
    assert features[0] == {
        'type': 'Feature',
        'geometry': {
            'type': 'Polygon',
            'coordinates': [[
                [7.256056, 62.745474],
                [7.256508, 62.745416],
                [7.256588, 62.745557],
                [7.256136, 62.745614],
            ]],
        },
        'properties': {'type': 'region', 'region': 'ENML', 'color': [59, 59, 59]},
    }


def test_overlay_picks_boundaries():
    sector = SectorModel(
        artcc=dummy_groups(['ARTCC-1', 'ARTCC-2', 'ARTCC-3']),
        artcc_low=dummy_groups(['ARTCC-LOW-1', 'ARTCC-LOW-2', 'ARTCC-LOW-3']),
        artcc_high=dummy_groups(['ARTCC-HIGH-1', 'ARTCC-HIGH-2', 'ARTCC-HIGH-3']),
    )
    overlay = Overlay(
        artcc=('ARTCC-1',),
        artcc_low=('ARTCC-LOW-1',),
        artcc_high=('ARTCC-HIGH-2', 'ARTCC-HIGH-3'),
    )

    features = to_geojson(sector, overlay=overlay)['features']
    sections = list(dict.fromkeys(feature['properties']['section'] for feature in features))
    assert sections == ['ARTCC-1', 'ARTCC-LOW-1', 'ARTCC-HIGH-2', 'ARTCC-HIGH-3']


def test_sample_package_without_overlay(sample_texts):
    sector = parse_sct(sample_texts['sct'])
    annotations = parse_ese(sample_texts['ese'])

    features = to_geojson(sector, annotations)['features']
    assert [feature['properties']['type'] for feature in features] == [
        'region',
        'artcc-low', 'artcc-low',
        'airport',
        'runway',
        'vor', 'vor',
        'ndb',
        'fix', 'fix',
        'star', 'star',
        'label',
        'label', 'label',
    ]


def test_sample_package_with_overlay(sample_texts):
    sector = parse_sct(sample_texts['sct'])
    annotations = parse_ese(sample_texts['ese'])
    overlay = parse_asr(sample_texts['asr'])

    collection = to_geojson(sector, annotations, overlay, Projection.WGS84)
    features = collection['features']
    assert [feature['properties']['type'] for feature in features] == [
        'region',
        'artcc-low', 'artcc-low',
        'runway',
        'vor',
        'fix',
        'star', 'star',
        'label',
        'label',
    ]
    runway = features[3]
    assert runway['id'] == 'ENGM: 01L'
    assert runway['properties'] == {
        'type': 'runway',
        'name': '01L',
        'opposite_id': '19R',
        'icao': 'ENGM',
        'airport': 'Oslo Gardermoen',
    }
    assert features[-1]['properties']['value'] == 'NANNESTAD'
    # must serialize without custom encoders
    assert json.loads(json.dumps(collection)) == collection


def test_unknown_projection():
    with pytest.raises(ValueError):
        to_geojson(SectorModel(), projection='LAMBERT')
