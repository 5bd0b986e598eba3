"""Pytest configuration and fixtures

Provides shared fixtures for all tests: an isolated data directory per test,
reset config store / file system singletons, and collaborators wired to the
temporary directory.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from css_editor.config import Config
from css_editor.config_store import YamlConfigStore, reset_config_store
from css_editor.file_system import LocalFileSystem, reset_file_system
from css_editor.themes import ThemeCssWriter
from logging_helpers import RecordingLogger


@pytest.fixture(scope="function", autouse=True)
def test_data_dir(tmp_path, monkeypatch):
    """
    Automatically provide a temporary data directory for each test

    This fixture:
    - Creates a unique temporary directory for each test
    - Configures css_editor.config to use this directory
    - Clears environment overrides that would leak in from the shell
    - Resets config store and file system singletons
    """
    for variable in (
        "CSS_EDITOR_DATA_DIR",
        "CSS_EDITOR_PUBLIC_DIR",
        "CSS_EDITOR_PRIVATE_DIR",
        "CSS_EDITOR_CONFIG_DIR",
        "CSS_EDITOR_FILE_MODE",
        "CSS_EDITOR_DIRECTORY_MODE",
        "CSS_EDITOR_LOG_LEVEL",
    ):
        monkeypatch.delenv(variable, raising=False)

    test_dir = tmp_path / "css-editor_test_data"
    test_dir.mkdir(parents=True, exist_ok=True)

    Config.set_test_mode(test_dir)
    reset_config_store()
    reset_file_system()

    yield test_dir

    Config.clear_test_mode()
    reset_config_store()
    reset_file_system()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def config_store(test_data_dir, recording_logger) -> YamlConfigStore:
    return YamlConfigStore(str(test_data_dir / "config"), logger=recording_logger)


@pytest.fixture
def public_dir(test_data_dir) -> Path:
    return test_data_dir / "public"


@pytest.fixture
def file_system(public_dir, test_data_dir, recording_logger) -> LocalFileSystem:
    return LocalFileSystem(
        schemes={"public": str(public_dir), "private": str(test_data_dir / "private")},
        logger=recording_logger,
    )


@pytest.fixture
def writer(config_store, file_system, recording_logger) -> ThemeCssWriter:
    return ThemeCssWriter(config_store, file_system, logger=recording_logger)
