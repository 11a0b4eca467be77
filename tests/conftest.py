"""Pytest configuration and shared fixtures."""
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from app.domain.employee import Employee


ROOT = Path(__file__).resolve().parents[1]
SETTINGS_VARS = ("ENVIRONMENT", "DEBUG", "LOG_LEVEL", "LOG_JSON")


@pytest.fixture
def ada():
    """Employee with a recorded salary."""
    return Employee("Ada", 5000)


@pytest.fixture
def grace():
    """Employee without a salary."""
    return Employee("Grace", None)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove settings variables so defaults apply."""
    for var in SETTINGS_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures them."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def run_python():
    """Run a snippet in a fresh interpreter with settings taken from kwargs."""
    def _run(code, **env_overrides):
        env = {k: v for k, v in os.environ.items() if k not in SETTINGS_VARS}
        env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(ROOT), env.get("PYTHONPATH")]))
        env.update(env_overrides)
        return subprocess.run(
            [sys.executable, "-c", code],
            cwd=ROOT,
            env=env,
            capture_output=True,
            text=True,
            timeout=60,
        )
    return _run
