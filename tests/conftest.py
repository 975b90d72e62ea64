"""Root test configuration — isolate tests from user config and environment"""

import os

import pytest
from typer.testing import CliRunner


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Run each test from an empty tmp directory with no MDTERM_* env vars set."""
    for name in list(os.environ):
        if name.startswith("MDTERM_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(name="runner")
def runner_fixture():
    return CliRunner()
