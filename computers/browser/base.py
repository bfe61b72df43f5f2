"""Shared Playwright computer: lifecycle, dimensions and the active page."""
import logging
from typing import Callable, Optional

from playwright.sync_api import Browser, Page, Playwright, sync_playwright

from ..core.config import BrowserConfig
from .tracking import ActivePageSlot

logger = logging.getLogger(__name__)

PageListener = Callable[[Page], None]


class BasePlaywrightComputer:
    """Drives a Playwright browser and keeps track of the active page.

    Subclasses supply the environment-specific bootstrap through
    `_get_browser_and_page`. Use the instance as a context manager:

        with LocalPlaywrightComputer() as computer:
            computer.get_current_url()
    """

    def __init__(self, config: Optional[BrowserConfig] = None) -> None:
        """Initialize computer state.

        Args:
            config: Browser settings; defaults are used when omitted.
        """
        self.config = config or BrowserConfig()
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._active = ActivePageSlot()
        self._created_listeners: list[PageListener] = []
        self._closed_listeners: list[PageListener] = []
        self._closing = False

    def get_environment(self) -> str:
        return "browser"

    def get_dimensions(self) -> tuple[int, int]:
        """Viewport size as (width, height)."""
        return (self.config.width, self.config.height)

    @property
    def browser(self) -> Optional[Browser]:
        return self._browser

    @property
    def page(self) -> Optional[Page]:
        """The active page, or None once every page is gone."""
        return self._active.page

    def _assert_page(self) -> Page:
        """Get the active page.

        Raises:
            NoActivePageError: If no page is currently active.
        """
        return self._active.require()

    def get_current_url(self) -> str:
        page = self._active.page
        return page.url if page else ""

    def on_page_created(self, handler: PageListener) -> None:
        """Call `handler` with every page the browsing context opens."""
        self._created_listeners.append(handler)

    def on_page_closed(self, handler: PageListener) -> None:
        """Call `handler` with every tracked page that closes."""
        self._closed_listeners.append(handler)

    def _notify(self, listeners: list[PageListener], page: Page) -> None:
        for listener in listeners:
            try:
                listener(page)
            except Exception:
                logger.exception(f"Page listener {listener!r} failed")

    def __enter__(self) -> "BasePlaywrightComputer":
        self._playwright = sync_playwright().start()
        try:
            self._browser, page = self._get_browser_and_page()
        except Exception:
            self._stop_playwright()
            raise
        self._active.set(page)
        logger.info(f"Browser ready at {page.url}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Close the browser and stop Playwright.

        Page close events fired by the shutdown itself are ignored.
        """
        self._closing = True
        self._active.clear()
        if self._browser:
            try:
                self._browser.close()
            except Exception as e:
                logger.warning(f"Error closing browser: {e}")
        self._browser = None
        self._stop_playwright()
        self._closing = False

    def _stop_playwright(self) -> None:
        if self._playwright:
            try:
                self._playwright.stop()
            except Exception as e:
                logger.warning(f"Error stopping playwright: {e}")
        self._playwright = None

    def _get_browser_and_page(self) -> tuple[Browser, Page]:
        """Launch or connect, returning (browser, initial page)."""
        raise NotImplementedError
