"""Open a local Chromium window and follow the active tab until Enter is pressed."""
import logging
from pathlib import Path

from playwright.sync_api import Page

from computers.browser import LocalPlaywrightComputer
from computers.core import Settings, setup_logging

logger = logging.getLogger(__name__)

SETTINGS_PATH = Path("config/settings.yaml")


def main() -> None:
    """Main entry point."""
    settings = Settings.from_yaml(SETTINGS_PATH) if SETTINGS_PATH.exists() else Settings()
    setup_logging(settings.log_level)
    logger.info("=== Local computer starting ===")

    with LocalPlaywrightComputer.from_settings(settings) as computer:

        def report(page: Page) -> None:
            logger.info(f"Active page: {computer.get_current_url() or '<none>'}")

        computer.on_page_created(report)
        computer.on_page_closed(report)

        print(f"\nBrowser open at {computer.get_current_url()}")
        print("Open and close tabs in the window, press Enter to quit.\n")
        try:
            input()
        except (EOFError, KeyboardInterrupt):
            pass

    logger.info("=== Local computer stopped ===")


if __name__ == "__main__":
    main()
