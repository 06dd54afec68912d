import argparse
import json
import logging
import sys

from iterstats.adapters.readers import FileReader
from iterstats.core.services.statistics import summarize


logging.basicConfig(
    level=logging.ERROR,
    format="%(asctime)s [%(levelname)s] %(message)s",
)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Single pass summary of a one-value-per-line file")
    parser.add_argument("path", help="Data file, one value per line")
    args = parser.parse_args(argv)

    with FileReader(args.path) as reader:
        summary = summarize(reader.values())

    print(json.dumps(summary.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
