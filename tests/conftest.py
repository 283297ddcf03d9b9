"""
Pytest configuration and fixtures for csv-automation-bot tests

This module provides shared fixtures for unit, integration, and E2E tests.
"""
import json
import os
from pathlib import Path

import pytest

from csv_automation.core.config import ENV_PREFIX
from csv_automation.core.models import PipelineConfig, Record


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that only touch memory or tmp_path"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that run the full pipeline against a directory"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests that go through the CLI"
    )


# =======================
# DIRECTORY FIXTURES
# =======================

@pytest.fixture(scope="function")
def input_dir(tmp_path) -> Path:
    """Input directory for a single test (created)"""
    path = tmp_path / "input"
    path.mkdir()
    return path


@pytest.fixture(scope="function")
def output_dir(tmp_path) -> Path:
    """Output directory for a single test (not created; the pipeline makes it)"""
    return tmp_path / "output"


@pytest.fixture(scope="function")
def pipeline_config(input_dir, output_dir) -> PipelineConfig:
    """Pipeline configuration pointing at the test directories"""
    return PipelineConfig(input_dir=str(input_dir), output_dir=str(output_dir))


@pytest.fixture
def write_json(input_dir):
    """
    Write a JSON payload into the input directory

    Returns:
        Function (filename, payload) -> Path
    """
    def _write(filename: str, payload) -> Path:
        path = input_dir / filename
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


# =======================
# DATA FIXTURES
# =======================

@pytest.fixture
def team_payload() -> list[dict]:
    """Three records where id "1" appears twice"""
    return [
        {"id": "1", "name": "Alice", "category": "Team"},
        {"id": "2", "name": "Bob", "category": "Team"},
        {"id": "1", "name": "Alice2", "category": "Team"},
    ]


@pytest.fixture
def make_record():
    """Factory for Records with a fixed timestamp"""
    def _make(id="1", name="Alice", category="Team", timestamp="2026-10-19T08:00:00.000Z"):
        return Record(id=id, name=name, category=category, timestamp=timestamp)

    return _make


# =======================
# ENVIRONMENT FIXTURES
# =======================

@pytest.fixture
def clean_bot_env(monkeypatch):
    """Remove CSV_BOT_* variables so the host environment cannot leak into tests"""
    for key in list(os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key, raising=False)
