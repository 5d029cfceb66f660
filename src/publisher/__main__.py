"""Command-line entry point: ``python -m src.publisher``.

Configuration comes from environment variables only (see src/nerdgraph/config.py).
Exits 0 when the dashboard was created and its summary written, 1 otherwise.
"""

import logging
import sys

from src.nerdgraph.errors import ConfigurationError, SummaryWriteError, TransportError
from src.publisher.publisher import publish

logger = logging.getLogger("src.publisher")


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        result = publish()
    except ConfigurationError as e:
        logger.error(str(e))
        return 1
    except TransportError as e:
        logger.error(f"Failed to create dashboard: {e}")
        if e.response_body:
            logger.error(f"Response: {e.response_body}")
        return 1
    except SummaryWriteError as e:
        logger.error(str(e))
        logger.error(f"Dashboard {e.guid} was created: {e.url}")
        return 1

    if not result.ok:
        logger.error(
            f"Dashboard was not created ({result.status.value}, "
            f"{len(result.errors)} error(s))"
        )
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
