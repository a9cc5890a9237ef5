"""Entry point: run the hello bot's long-polling worker until interrupted."""

import asyncio

from hellobot.logger import HelloBotLogger
from hellobot.worker import run

logger = HelloBotLogger.get_logger()


def main() -> None:
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        logger.info("HelloBot stopped by user")
    finally:
        HelloBotLogger().cleanup()


if __name__ == "__main__":
    main()
