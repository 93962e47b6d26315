"""Main entry point for typocheck package."""

import sys
import time

from loguru import logger

from typocheck.cli import create_parser
from typocheck.core import TypocheckError, load_config
from typocheck.processing import run_pipeline
from typocheck.utils.logging import setup_logger


def main():
    """Main entry point."""
    start_time = time.time()

    parser = create_parser()
    args = parser.parse_args()

    config = load_config(args.config, args, parser)

    setup_logger(verbose=config.verbose, debug=config.debug)

    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Dictionary: {config.dictionary}")
        logger.info(f"  Threshold: {config.threshold}")
        logger.info("")

    try:
        run_pipeline(config, start_time=start_time)
    except TypocheckError as e:
        # Startup failures: nothing has been written to stdout yet
        logger.debug(f"Aborting on {type(e).__name__}")
        print(e)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.warning("")
        logger.warning("⚠️  Processing interrupted by user")
        raise


if __name__ == "__main__":
    main()
