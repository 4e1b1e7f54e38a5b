"""
Pytest configuration and shared fixtures for ChronoText testing.

Provides the culture configuration, fixed reference dates and helpers that
run an extractor and its parser in one step.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

import pytest
import yaml

from chronotext.core.config_manager import ResolutionConfig
from chronotext.processors.core.results import DateTimeParseResult
from chronotext.processors.english.configuration import EnglishCultureConfiguration
from chronotext.processors.recognizer import DateTimeRecognizer, ModelCache

from tests.fixtures.sample_data import REFERENCE_DATES, SAMPLE_CONFIGURATIONS


@pytest.fixture(scope="session")
def culture_config():
    """English culture configuration shared by the whole session"""
    return EnglishCultureConfiguration(ResolutionConfig())


@pytest.fixture
def reference_date():
    """Wednesday 2024-06-12 at 10:00"""
    return REFERENCE_DATES["wednesday"]


@pytest.fixture
def saturday_reference():
    """Saturday 2024-06-15 at 09:30"""
    return REFERENCE_DATES["saturday"]


@pytest.fixture
def extract_and_parse():
    """Run an extractor and its parser, expecting exactly one span"""

    def _run(extractor, parser, text: str, reference: datetime) -> Optional[DateTimeParseResult]:
        results = extractor.extract(text, reference)
        assert len(results) == 1, f"expected one span in {text!r}, got {[r.text for r in results]}"
        return parser.parse(results[0], reference)

    return _run


@pytest.fixture(scope="session")
def recognizer():
    """Recognizer with default resolution settings"""
    return DateTimeRecognizer("en-us")


@pytest.fixture
def model_cache():
    """Fresh model cache per test"""
    cache = ModelCache()
    yield cache
    cache.clear()


# Configuration Fixtures
@pytest.fixture
def temp_config_dir(tmp_path: Path):
    """Temporary directory holding a default configuration file"""
    config_dir = tmp_path / "config"
    config_dir.mkdir()

    with open(config_dir / "default_config.yaml", "w") as f:
        yaml.dump(SAMPLE_CONFIGURATIONS["default"], f)

    return config_dir


@pytest.fixture
def clean_env(monkeypatch):
    """Remove ChronoText environment overrides for the duration of a test"""
    import os

    for key in list(os.environ):
        if key.startswith("CHRONOTEXT_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch
