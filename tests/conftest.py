"""In-process stand-ins for the Playwright objects the computers drive."""
from typing import Any, Callable, Iterator, Optional
from unittest.mock import MagicMock, patch

import pytest

from computers.browser.local import LocalPlaywrightComputer
from computers.core.config import BrowserConfig


class FakeEmitter:
    def __init__(self) -> None:
        self.handlers: dict[str, list[Callable[..., Any]]] = {}

    def on(self, event: str, handler: Callable[..., Any]) -> None:
        self.handlers.setdefault(event, []).append(handler)

    def emit(self, event: str, *args: Any) -> None:
        for handler in list(self.handlers.get(event, [])):
            handler(*args)


class FakePage(FakeEmitter):
    def __init__(self, context: "FakeContext", name: str) -> None:
        super().__init__()
        self.context = context
        self.name = name
        self.url = "about:blank"
        self.viewport_size: Optional[dict[str, int]] = None
        self.goto_error: Optional[Exception] = None

    def set_viewport_size(self, viewport_size: dict[str, int]) -> None:
        self.viewport_size = dict(viewport_size)

    def goto(self, url: str) -> None:
        if self.goto_error:
            raise self.goto_error
        self.url = url

    def close(self) -> None:
        if self in self.context.pages:
            self.context.pages.remove(self)
        self.emit("close", self)

    def __repr__(self) -> str:
        return f"FakePage({self.name})"


class FakeContext(FakeEmitter):
    def __init__(self, browser: "FakeBrowser") -> None:
        super().__init__()
        self.browser = browser
        self.pages: list[FakePage] = []
        self.goto_error: Optional[Exception] = None

    def new_page(self) -> FakePage:
        page = FakePage(self, f"page-{len(self.pages)}")
        page.goto_error = self.goto_error
        self.pages.append(page)
        self.emit("page", page)
        return page


class FakeBrowser:
    def __init__(self) -> None:
        self.contexts: list[FakeContext] = []
        self.closed = False
        self.goto_error: Optional[Exception] = None

    def new_context(self) -> FakeContext:
        context = FakeContext(self)
        context.goto_error = self.goto_error
        self.contexts.append(context)
        return context

    def close(self) -> None:
        self.closed = True
        for context in self.contexts:
            for page in list(context.pages):
                page.close()


class FakeChromium:
    def __init__(self) -> None:
        self.launch_kwargs: Optional[dict[str, Any]] = None
        self.launch_error: Optional[Exception] = None
        self.goto_error: Optional[Exception] = None
        self.browser: Optional[FakeBrowser] = None

    def launch(self, **kwargs: Any) -> FakeBrowser:
        self.launch_kwargs = kwargs
        if self.launch_error:
            raise self.launch_error
        self.browser = FakeBrowser()
        self.browser.goto_error = self.goto_error
        return self.browser


class FakePlaywright:
    def __init__(self) -> None:
        self.chromium = FakeChromium()
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True


@pytest.fixture
def fake_playwright() -> FakePlaywright:
    """Create a Playwright stand-in with a recording Chromium launcher."""
    return FakePlaywright()


@pytest.fixture
def mock_sync_playwright(fake_playwright: FakePlaywright) -> Iterator[MagicMock]:
    """Patch sync_playwright so starting it yields the fake Playwright."""
    with patch("computers.browser.base.sync_playwright") as mock_factory:
        mock_factory.return_value = MagicMock(start=MagicMock(return_value=fake_playwright))
        yield mock_factory


@pytest.fixture
def computer(mock_sync_playwright: MagicMock) -> Iterator[LocalPlaywrightComputer]:
    """Create a launched 1024x768 local computer, closed after the test."""
    computer = LocalPlaywrightComputer(config=BrowserConfig(width=1024, height=768))
    with computer:
        yield computer
