import logging
import sys

from generating import run
from schema import SqlGenError

logger = logging.getLogger(__name__)


def main():
    try:
        run()
    except SqlGenError as e:
        logger.error(f"Aborting: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
