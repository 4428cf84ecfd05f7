"""Framework unit tests driven by fake Playwright objects."""
