"""CLI runtime wiring for voicecmd."""

import logging
import sys

from voicecmd.app_config import AppConfig
from voicecmd.http_client import close_shared_client
from voicecmd.native_audio import quiet_native_audio
from voicecmd.pipeline import CommandPipeline

logger = logging.getLogger(__name__)


def _configure_logging(config: AppConfig):
    level = getattr(logging, str(config.log_level or "").upper(), logging.WARNING)
    handlers = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        handlers=handlers,
    )


def run_cli(stdin=None) -> int:
    """Record, transcribe, generate and print one command. Returns the exit code."""
    quiet_native_audio()
    config = AppConfig.from_env()
    _configure_logging(config)

    try:
        command = CommandPipeline(config, stdin=stdin).run()
    except KeyboardInterrupt:
        print("An error occurred: interrupted")
        return 1
    except Exception as e:
        logger.debug("Run failed", exc_info=True)
        print(f"An error occurred: {e}")
        return 1
    finally:
        close_shared_client()

    print(f"\n{command}")
    return 0


def main():
    sys.exit(run_cli())
