import argparse
import logging
import sys

from iterstats.core.config import Config, DEFAULT_CONFIG_PATH
from iterstats.core.services.reference import check_all


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Check streaming mean against reference datasets")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to reference.yaml")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    cfg = Config(args.config)
    results = check_all(cfg)

    for r in results:
        if r.passed:
            logging.info("%-10s ok    mean=%r (error %.3g <= %g)", r.name, r.actual, r.error, r.tolerance)
        else:
            logging.error("%-10s FAIL  mean=%r expected=%r (error %.3g > %g)",
                          r.name, r.actual, r.expected, r.error, r.tolerance)

    failed = sum(not r.passed for r in results)
    logging.info("%d/%d datasets within tolerance", len(results) - failed, len(results))
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
