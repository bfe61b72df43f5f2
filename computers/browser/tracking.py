"""Active page bookkeeping for a single browser."""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from playwright.sync_api import Browser, Page

logger = logging.getLogger(__name__)


class NoActivePageError(RuntimeError):
    """Raised when an action needs the active page but none is tracked."""


class PageState(Enum):
    """Outcome of re-deriving the active page from a browser."""
    ACTIVE = "active"
    NO_BROWSER = "no_browser"
    NO_CONTEXTS = "no_contexts"
    NO_PAGES = "no_pages"


@dataclass(frozen=True)
class PageResolution:
    state: PageState
    page: Optional[Page] = None


def resolve_active_page(browser: Optional[Browser]) -> PageResolution:
    """Pick the page that should become active after the active one closed.

    Only the first browsing context is inspected. Pages living in any later
    context are ignored even when the first context is empty.

    Args:
        browser: Browser whose contexts are inspected, or None if it is gone.

    Returns:
        ACTIVE with the last page of the first context, or the reason none exists.
    """
    if browser is None:
        return PageResolution(PageState.NO_BROWSER)

    contexts = browser.contexts
    if not contexts:
        return PageResolution(PageState.NO_CONTEXTS)

    pages = contexts[0].pages
    if not pages:
        return PageResolution(PageState.NO_PAGES)
    return PageResolution(PageState.ACTIVE, pages[-1])


class ActivePageSlot:
    """Holds the page that subsequent automation actions target.

    Only the acquire step and the page event reactions write to the slot.
    """

    def __init__(self) -> None:
        self._page: Optional[Page] = None

    @property
    def page(self) -> Optional[Page]:
        return self._page

    def set(self, page: Page) -> None:
        self._page = page

    def clear(self) -> None:
        self._page = None

    def is_active(self, page: Page) -> bool:
        return self._page is not None and self._page is page

    def require(self) -> Page:
        """Return the active page.

        Raises:
            NoActivePageError: If no page is currently active.
        """
        if self._page is None:
            raise NoActivePageError("No active page. All pages may have been closed.")
        return self._page

    def apply(self, resolution: PageResolution) -> None:
        """Update the slot from a re-derivation outcome, warning when it empties."""
        if resolution.state is PageState.ACTIVE:
            logger.debug(f"Active page is now {resolution.page.url}")
            self._page = resolution.page
        elif resolution.state is PageState.NO_BROWSER:
            logger.warning("Browser or context not available.")
            self._page = None
        elif resolution.state is PageState.NO_CONTEXTS:
            logger.warning("No browser contexts available.")
            self._page = None
        else:
            logger.warning("All pages have been closed.")
            self._page = None
