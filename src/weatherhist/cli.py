# wires config -> client -> orchestrator -> view and opens the window

from __future__ import annotations
import logging
import sys
from .app import WeatherWindow, thread_runner
from .client import WeatherAPIClient
from .config import ConfigError, load_config
from .service import FetchOrchestrator
from .view import WeatherView

logger = logging.getLogger(__name__)


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config()
    except ConfigError as exc:
        logger.error("%s (put it in the environment or a .env file)", exc)
        return 1

    orchestrator = FetchOrchestrator(WeatherAPIClient(config))
    view = WeatherView(orchestrator, runner=thread_runner)
    WeatherWindow(view).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
