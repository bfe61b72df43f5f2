"""Browser computers: Playwright lifecycle and active page tracking."""
from .base import BasePlaywrightComputer
from .local import LocalPlaywrightComputer
from .tracking import ActivePageSlot, NoActivePageError, PageResolution, PageState, resolve_active_page

__all__ = [
    "BasePlaywrightComputer",
    "LocalPlaywrightComputer",
    "ActivePageSlot",
    "NoActivePageError",
    "PageResolution",
    "PageState",
    "resolve_active_page",
]
