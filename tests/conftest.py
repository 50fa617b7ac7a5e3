"""
Shared test configuration for a11ycheck.

Provides markup fixtures, on-disk template trees and logging isolation for
the unit and integration suites.
"""

# Standard library imports
import logging
from pathlib import Path
from typing import Callable, Dict, Generator

# Third-party imports
import pytest
import structlog

# Local imports
from a11ycheck.config import Config
from a11ycheck.engine.engine import AuditEngine

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")
    config.addinivalue_line("markers", "network: Tests that exercise the HTTP layer (mocked transport)")


# ============================================================================
# Isolation
# ============================================================================


@pytest.fixture(autouse=True)
def isolate_logging() -> Generator[None, None, None]:
    """Restore root logging handlers and clear bound context after each test.

    The CLI reconfigures logging with handlers bound to the runner's streams,
    which are closed once the invocation finishes.
    """
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def no_config_file(tmp_path, monkeypatch) -> Path:
    """Run from an empty directory so no config file is discovered."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ============================================================================
# Engine Fixtures
# ============================================================================


@pytest.fixture
def engine() -> AuditEngine:
    """Engine with every rule enabled."""
    return AuditEngine()


@pytest.fixture
def default_config() -> Config:
    return Config()


# ============================================================================
# Markup Fixtures
# ============================================================================


@pytest.fixture
def clean_html() -> str:
    """A document that triggers no rule at all."""
    return """<!DOCTYPE html>
<html lang="en">
<head><title>Clean</title></head>
<body>
<header><nav aria-label="Main"><a href="/">Home</a></nav></header>
<main>
<h1>Welcome</h1>
<h2>About</h2>
<p style="color: #000000; background-color: #ffffff">Readable text</p>
<img src="logo.png" alt="Company logo">
<label for="email">Email</label>
<input type="text" id="email">
<label><input type="checkbox"> Subscribe</label>
<a href="/docs" target="_blank">Docs (opens in new tab)</a>
<iframe src="/map" title="Office map"></iframe>
</main>
<footer>Footer</footer>
</body>
</html>
"""


@pytest.fixture
def problem_html() -> str:
    """A document that triggers every diagnostic kind at least once."""
    return """<html>
<body>
<h1>Title</h1>
<h3>Skipped</h3>
<h2></h2>
<h1>Second title</h1>
<img src="a.png">
<img src="b.png" alt="">
<img src="c.png" alt="A very long description of an image that goes on">
<img src="d.png" role="presentation" alt="Decoration">
<a href="/x"><img src="e.png" alt=" "></a>
<div aria-label="">Empty label</div>
<button></button>
<div role="bogus">Bad role</div>
<label for="nowhere">Ghost</label>
<label>Floating</label>
<input type="radio" name="r">
<a href="#">Click</a>
<iframe src="/frame"></iframe>
<a href="/ext" target="_blank">Partner site</a>
<p style="color: #777777; background-color: #888888">Faint</p>
</body>
</html>
"""


@pytest.fixture
def write_tree(tmp_path) -> Callable[[Dict[str, str]], Path]:
    """Create files below a fresh directory from a ``{relative path: content}`` mapping."""

    def _write(files: Dict[str, str]) -> Path:
        root = tmp_path / "site"
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        root.mkdir(exist_ok=True)
        return root

    return _write
