"""Root test configuration for argguard.

Clears ARGGUARD_* environment variables and points the default config search
paths at a per-test temp directory, so a developer's own
``~/.argguard/config.yaml`` never leaks into the suite.

Logging is reset to the library defaults after every test because the CLI and
logger tests reconfigure structlog globally.
"""

import pytest


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Remove env overrides and hide any real config files."""
    for var in ("ARGGUARD_CONFIG", "ARGGUARD_LOG_LEVEL", "ARGGUARD_LOG_JSON"):
        monkeypatch.delenv(var, raising=False)
    import argguard.config
    monkeypatch.setattr(
        argguard.config,
        "DEFAULT_CONFIG_PATHS",
        [str(tmp_path / ".argguard" / "config.yaml")],
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore default structlog configuration after each test."""
    yield
    from argguard.utils.logger import configure_logging
    configure_logging()
