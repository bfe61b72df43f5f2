"""Local Playwright computer with active-page tracking."""
