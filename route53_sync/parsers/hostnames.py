import logging
from typing import List

from ..exceptions import FormatError, HostnamesFileError
from ..models import HostnameEntry

logger = logging.getLogger(__name__)


class HostnamesParser:
    def __init__(self, path: str):
        self.path = path

    def parse(self) -> List[HostnameEntry]:
        """Parse the hostnames file into (zone_id, hostname) entries.

        Blank lines are skipped. Any other line that is not exactly two
        comma separated tokens aborts the whole load.
        """
        try:
            with open(self.path, "r") as f:
                content = f.read()
        except OSError as e:
            raise HostnamesFileError(
                f"Cannot read hostnames file {self.path}: {e}"
            ) from e

        entries = []
        for line_number, line in enumerate(content.split("\n"), start=1):
            if not line.strip():
                continue
            entries.append(self.parse_line(line, line_number))

        logger.info(f"Loaded {len(entries)} hostnames from {self.path}")
        return entries

    @staticmethod
    def parse_line(line: str, line_number: int = 1) -> HostnameEntry:
        tokens = line.split(",")
        if len(tokens) != 2:
            raise FormatError(line_number, line)

        zone_id = tokens[0].strip()
        hostname = tokens[1].strip()
        if not zone_id or not hostname:
            raise FormatError(line_number, line)

        return HostnameEntry(zone_id, hostname)
