#!/usr/bin/env python3

import sys
import argparse
import logging
import json
from pathlib import Path
from typing import Optional

from .exceptions import SectorFileError
from .export import to_geojson, waypoints_dataframe
from .models import Projection, SectorModel
from .models.annotations import Annotations
from .models.overlay import Overlay
from .parsers import parse_asr, parse_ese, parse_isec, parse_sct
from .sources import SectorFileSource

logger = logging.getLogger(__name__)


class Command:
    """Command-line interface for sectorfile."""

    def __init__(self, args):
        """
        Initialize the command interface.

        Args:
            args: Command line arguments
        """
        self.args = args
        self.projection = Projection(args.projection)
        self.source: Optional[SectorFileSource] = None
        if args.base_url:
            self.source = SectorFileSource(
                cache_dir=args.cache_dir,
                base_url=args.base_url,
                encoding=args.encoding
            )
            if args.force_refresh:
                self.source.set_force_refresh()
            if args.never_refresh:
                self.source.set_never_refresh()

    def _read(self, kind: str, name: str) -> str:
        """Read a file locally, or through the cached source when a base URL is set."""
        if self.source is not None:
            return self.source.get_file(kind, name)
        return Path(name).read_text(encoding=self.args.encoding)

    def load_sector(self) -> SectorModel:
        waypoints = parse_isec(self._read('isec', self.args.isec)) if self.args.isec else None
        sector = parse_sct(self._read('sct', self.args.sct), waypoints)
        logger.info(f"Loaded {sector}")
        return sector

    def load_annotations(self) -> Optional[Annotations]:
        if not self.args.ese:
            return None
        return parse_ese(self._read('ese', self.args.ese))

    def load_overlay(self) -> Optional[Overlay]:
        if not self.args.asr:
            return None
        return parse_asr(self._read('asr', self.args.asr))

    def _write(self, text: str) -> None:
        if self.args.output:
            Path(self.args.output).write_text(text, encoding='utf-8')
            logger.info(f"Wrote {self.args.output}")
        else:
            sys.stdout.write(text)

    def run_geojson(self):
        """Export the sector as a GeoJSON FeatureCollection."""
        collection = to_geojson(
            self.load_sector(),
            annotations=self.load_annotations(),
            overlay=self.load_overlay(),
            projection=self.projection
        )
        logger.info(f"Exporting {len(collection['features'])} features")
        self._write(json.dumps(collection, indent=2 if self.args.pretty else None))

    def run_waypoints(self):
        """Export VORs, NDBs, fixes and airports as CSV."""
        df = waypoints_dataframe(self.load_sector(), projection=self.projection)
        self._write(df.to_csv(index=False))

    def run_summary(self):
        """Print the header and object counts of the sector."""
        sector = self.load_sector()
        lines = [f"Sector: {sector.info.sector_filename or '-'}"]
        if sector.info.center is not None:
            lon, lat = sector.info.center.to_wgs84()
            lines.append(f"Center: {lat}, {lon}")
        for name, count in sector.summary().items():
            lines.append(f"{name:12} {count}")
        self._write('\n'.join(lines) + '\n')

    def run(self) -> int:
        """Run the selected command, returning the process exit status."""
        method = getattr(self, f"run_{self.args.command}")
        try:
            method()
        except SectorFileError as e:
            logger.error(f"{self.args.command} failed: {e}")
            return 1
        return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description='Sector file conversion tool')
    parser.add_argument('command', help='Command to execute', choices=['geojson', 'waypoints', 'summary'])
    parser.add_argument('sct', help='Sector file path (relative to --base-url when set)')
    parser.add_argument('--ese', help='Annotation (.ese) file with free text labels')
    parser.add_argument('--asr', help='Overlay (.asr) file selecting the objects to export')
    parser.add_argument('--isec', help='Supplementary waypoint list seeding the sector file')
    parser.add_argument('--projection', help='Output coordinates', choices=['UTM', 'WGS84'], default='UTM')
    parser.add_argument('--encoding', help='Encoding of the input files', default='latin-1')
    parser.add_argument('--pretty', help='Indent JSON output', action='store_true')
    parser.add_argument('-o', '--output', help='Output file path')
    parser.add_argument('-b', '--base-url', help='Download input files relative to this URL')
    parser.add_argument('-c', '--cache-dir', help='Directory to cache downloaded files', default='cache')
    parser.add_argument('-f', '--force-refresh', help='Force refresh of cached data', action='store_true')
    parser.add_argument('-n', '--never-refresh', help='Never refresh cached data if it exists', action='store_true')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    cmd = Command(args)
    return cmd.run()


if __name__ == '__main__':
    sys.exit(main())
