"""Command-line entry point: print the NOC VIP list as JSON."""

import asyncio
import json
import logging
import sys

from pydantic import ValidationError

from .client import NocListClient
from .config import Config
from .exceptions import ConfigError, NocListError
from .logging import setup_logging

logger = logging.getLogger("noclist.main")


def load_config() -> Config:
    """Load configuration from the environment.

    Raises:
        ConfigError: If any NOCLIST_* variable holds an invalid value.
    """
    try:
        return Config()
    except ValidationError as e:
        raise ConfigError(
            "Invalid noclist configuration",
            errors=[
                f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors()
            ],
            suggestions=["Check the NOCLIST_* environment variables"],
        ) from e


async def run(config: Config) -> list[str]:
    """Fetch the VIP list with a client that lives for this call only."""
    async with NocListClient(config) as client:
        return await client.fetch()


def main() -> None:
    """Main entry point."""
    setup_logging()
    try:
        config = load_config()
        setup_logging(config.log_level)
        logger.info(f"Fetching NOC list from {config.base_url}...")
        vips = asyncio.run(run(config))
    except NocListError as e:
        logger.error(f"Failed to fetch NOC list: {e.message}")
        for detail in e.errors:
            logger.error(f"  {detail}")
        for suggestion in e.suggestions:
            logger.info(f"  hint: {suggestion}")
        sys.exit(1)
    except TimeoutError:
        logger.error("Failed to fetch NOC list: deadline exceeded")
        sys.exit(1)

    # JSON output goes to stdout, everything else to stderr
    print(json.dumps(vips), file=sys.stdout)


if __name__ == "__main__":
    main()
