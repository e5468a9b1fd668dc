import pytest

from sectorfile.exceptions import CoordinateFormatError
from sectorfile.models import Coordinate, Overlay
from sectorfile.parsers.asr import AsrParser, parse_asr


def test_empty_overlay():
    assert parse_asr('') == Overlay()


def test_sample_overlay(sample_texts):
    overlay = AsrParser().parse(sample_texts['asr'])

    assert overlay.sector_file == 'sample.sct'
    assert overlay.sector_title == 'Sample'
    assert overlay.vors == ('GRM',)
    assert overlay.fixes == ('ADOPI',)
    assert overlay.artcc_low == ('CTR - ENGM',)
    assert overlay.stars == ('ENGM STARS RWY 01',)
    assert overlay.regions == ('ENGM Buildings',)
    assert overlay.free_text == {'ENGM VFR Reporting Points': ('NANNESTAD',)}
    assert overlay.runways == {'ENGM Oslo Gardermoen 01L-19R': ('01L',)}
    assert overlay.viewport == (Coordinate.from_decimal(59.5, 10.0), Coordinate.from_decimal(60.8, 12.1))


def test_boundaries_keep_file_order():
    overlay = parse_asr('''
ARTCC boundary:ARTCC-1:
ARTCC high boundary:ARTCC-HIGH-2:
ARTCC high boundary:ARTCC-HIGH-3:
ARTCC low boundary:ARTCC-LOW-1:
''')
    assert overlay.artcc == ('ARTCC-1',)
    assert overlay.artcc_high == ('ARTCC-HIGH-2', 'ARTCC-HIGH-3')
    assert overlay.artcc_low == ('ARTCC-LOW-1',)


def test_runway_ends_are_grouped():
    overlay = parse_asr('''
Runways:ENGM Oslo Gardermoen 01L-19R:01L:centerline
Runways:ENGM Oslo Gardermoen 01L-19R:19R:centerline
''')
    assert overlay.runways == {'ENGM Oslo Gardermoen 01L-19R': ('01L', '19R')}


def test_free_text_grouped_by_section():
    overlay = parse_asr('''
Free Text:ENGM VFR Reporting Points\\NANNESTAD:freetext
Free Text:ENGM VFR Reporting Points\\NORDKISA:freetext
Free Text:ENGM Gates\\A1:freetext
''')
    assert overlay.free_text == {
        'ENGM VFR Reporting Points': ('NANNESTAD', 'NORDKISA'),
        'ENGM Gates': ('A1',),
    }


def test_unknown_keys_and_bare_lines_are_ignored():
    overlay = parse_asr('DisplayTypeName:Standard ES radar screen\nSHOWC:1\nNOTHING\n')
    assert overlay == Overlay()


def test_bad_viewport():
    with pytest.raises(CoordinateFormatError) as exc_info:
        parse_asr('SECTORFILE:x.sct\nWINDOWAREA:59.5:ten:60.8:12.1')
    assert exc_info.value.line == 2
