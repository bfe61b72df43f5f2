"""Local Chromium computer launched through Playwright."""
import logging
import os
from typing import Optional

from playwright.sync_api import Browser, Page

from ..core.config import BrowserConfig, Settings
from .base import BasePlaywrightComputer
from .models import CONTEXT_PAGE_EVENT, PAGE_CLOSE_EVENT, build_launch_args
from .tracking import NoActivePageError, resolve_active_page

logger = logging.getLogger(__name__)


class LocalPlaywrightComputer(BasePlaywrightComputer):
    """Launches a local Chromium instance and follows tabs as they open and close."""

    def __init__(
        self,
        headless: Optional[bool] = None,
        config: Optional[BrowserConfig] = None,
    ) -> None:
        """Initialize the local computer.

        Args:
            headless: Launch without a visible window; falls back to `config.headless`.
            config: Viewport, start page and display settings.
        """
        super().__init__(config)
        self.headless = self.config.headless if headless is None else headless
        self._watched: set[int] = set()

    @classmethod
    def from_settings(cls, settings: Settings) -> "LocalPlaywrightComputer":
        return cls(config=settings.browser)

    def _launch_env(self) -> dict[str, str]:
        env = dict(os.environ) if self.config.inherit_env else {}
        env["DISPLAY"] = self.config.display
        return env

    def _get_browser_and_page(self) -> tuple[Browser, Page]:
        width, height = self.get_dimensions()

        browser = self._playwright.chromium.launch(
            headless=self.headless,
            args=build_launch_args(width, height),
            env=self._launch_env(),
        )
        logger.info(f"Chromium launched (headless={self.headless}, {width}x{height})")

        context = browser.new_context()
        context.on(CONTEXT_PAGE_EVENT, self._handle_new_page)

        page = context.new_page()
        page.set_viewport_size({"width": width, "height": height})
        self._watch_page(page)

        page.goto(self.config.start_url)

        return browser, page

    def _watch_page(self, page: Page) -> None:
        # The context also reports pages it opened itself, so guard double binding.
        if id(page) in self._watched:
            return
        self._watched.add(id(page))
        page.on(PAGE_CLOSE_EVENT, self._handle_page_close)

    def _handle_new_page(self, page: Page) -> None:
        """Make a newly opened page the active one."""
        logger.info("New page created")
        self._active.set(page)
        self._watch_page(page)
        self._notify(self._created_listeners, page)

    def _handle_page_close(self, page: Page) -> None:
        """Re-derive the active page when the active one closes."""
        logger.debug("Page closed")
        self._watched.discard(id(page))
        if self._closing:
            return
        try:
            self._update_after_close(page)
        finally:
            self._notify(self._closed_listeners, page)

    def _update_after_close(self, page: Page) -> None:
        try:
            self._assert_page()
        except NoActivePageError:
            return
        if not self._active.is_active(page):
            return

        self._active.apply(resolve_active_page(self._browser))
