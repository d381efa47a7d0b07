"""Command-line entry point for the media purge tool."""
import sys
import logging

from .base.exceptions import ConfigLoadError
from .base.rate_limiter import FixedDelayRateLimiter
from .controller import InteractiveController
from .factory import ActionFactory
from .services.archive_manager import ArchiveManager
from .services.config_manager import ConfigManager
from .services.record_client import RecordClient

logger = logging.getLogger(__name__)


def setup_logging():
    """Plain console output: log lines are the tool's status messages."""
    logging.basicConfig(level=logging.INFO, format='%(message)s')
    logging.getLogger('urllib3').setLevel(logging.WARNING)


def build_controller(config_file=None, input_func=input) -> InteractiveController:
    config = ConfigManager.load_config(ConfigManager.resolve_config_path(config_file))
    factory = ActionFactory(
        client=RecordClient(config),
        archive=ArchiveManager(config.downloads_dir),
        rate_limiter=FixedDelayRateLimiter(),
    )
    return InteractiveController(factory, input_func=input_func)


def main(config_file=None, input_func=input) -> int:
    """Run the interactive menu. Returns the process exit code."""
    setup_logging()
    controller = None
    try:
        controller = build_controller(config_file, input_func)
        controller.run()
        return 0
    except KeyboardInterrupt:
        logger.info('\n\nOperation cancelled by user.')
        return 0
    except ConfigLoadError as e:
        logger.error(f"\n❌ {e}")
        return 1
    except Exception as e:
        logger.error(f"\n❌ ERROR: {e}")
        return 1
    finally:
        if controller is not None:
            controller.factory.client.close()


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
