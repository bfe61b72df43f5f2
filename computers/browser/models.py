"""Launch flags and event names shared by the browser computers."""

DISABLE_EXTENSIONS_ARG: str = "--disable-extensions"
DISABLE_FILE_SYSTEM_ARG: str = "--disable-file-system"

# Playwright event names
CONTEXT_PAGE_EVENT: str = "page"
PAGE_CLOSE_EVENT: str = "close"


def window_size_arg(width: int, height: int) -> str:
    """Chromium flag sizing the top-level window."""
    return f"--window-size={width},{height}"


def build_launch_args(width: int, height: int) -> list[str]:
    """Chromium command-line flags for a sandboxed local window.

    Args:
        width: Window width in pixels.
        height: Window height in pixels.

    Returns:
        Flags in launch order: window size, then the sandboxing switches.
    """
    return [
        window_size_arg(width, height),
        DISABLE_EXTENSIONS_ARG,
        DISABLE_FILE_SYSTEM_ARG,
    ]
