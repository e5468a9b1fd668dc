import pandas as pd

from sectorfile.export.tables import WAYPOINT_COLUMNS, waypoints_dataframe
from sectorfile.models import Projection, SectorModel
from sectorfile.parsers import parse_sct


def test_empty_sector():
    df = waypoints_dataframe(SectorModel())
    assert df.empty
    assert list(df.columns) == WAYPOINT_COLUMNS


def test_sample_waypoints(sample_texts):
    df = waypoints_dataframe(parse_sct(sample_texts['sct']))

    assert list(df['id']) == ['GRM', 'AAL', 'HEI', 'ADOPI', 'NIVDU', 'ENGM']
    assert list(df['type']) == ['vor', 'vor', 'ndb', 'fix', 'fix', 'airport']

    grm = df.iloc[0]
    assert grm['frequency'] == '115.950'
    assert (grm['x'], grm['y']) == (11.074419, 60.191758)

    engm = df[df['id'] == 'ENGM'].iloc[0]
    assert engm['airport_class'] == 'D'
    assert pd.isna(df[df['id'] == 'ADOPI'].iloc[0]['frequency'])


def test_utm_columns(sample_texts):
    sector = parse_sct(sample_texts['sct'])
    df = waypoints_dataframe(sector, projection=Projection.UTM)
    x, y = sector.vors[0].position.to_utm()
    assert df.iloc[0]['x'] == x
    assert df.iloc[0]['y'] == y
