"""Demonstration: checksum the fixed buffer {0x41, 0x41, 0x41, 0x41}."""

from __future__ import annotations

import argparse
import logging
import sys

from crc15.constants import CRC15_DEMO_INPUT
from crc15.crc import crc15
from crc15.params import CRC15_PARAMETERS

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="crc15-demo", description=__doc__)
    parser.add_argument("-v", "--verbose", action="store_true", help="log algorithm details")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Algorithm %s", CRC15_PARAMETERS.describe())
    logger.debug("Checksumming %d byte(s)", len(CRC15_DEMO_INPUT))

    crc = crc15(CRC15_DEMO_INPUT)
    print(f"crc: {crc:#06x}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
