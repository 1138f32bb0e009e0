"""Console entry point."""

import asyncio
import os
import sys
import uuid

from common.logging_config import setup_logging
from console.config import Config, default_config_path
from console.repl import repl_loop


def new_session_id() -> str:
    """Short id that tags every log line of one console session."""
    return uuid.uuid4().hex[:8]


def main() -> None:
    """Entry point for the FileDesk console."""
    log_level = 'DEBUG' if '--debug' in sys.argv else os.getenv('LOG_LEVEL', 'WARNING')

    logger = setup_logging('filedesk', log_level=log_level, correlation_id=new_session_id())

    if '--debug' in sys.argv:
        logger.info("Debug logging enabled")
        sys.argv.remove('--debug')

    config = Config(default_config_path())
    logger.info(f"Console starting [api={config.get_base_url()}]")
    try:
        asyncio.run(repl_loop(config))
    except Exception as e:
        logger.error(f"Console error: {e}", exc_info=True)
        raise
    finally:
        logger.info("Console exiting")


if __name__ == "__main__":
    main()
