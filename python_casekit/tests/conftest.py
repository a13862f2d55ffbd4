import logging
import os
import sys

import pytest

# ensure project root on path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import common.config as config_module
from common.config import AppConfig, CaseConfig


@pytest.fixture
def override_settings(monkeypatch):
    """Swap the global settings for the duration of a test."""
    def _override(**case_options) -> AppConfig:
        new_settings = AppConfig(case=CaseConfig(**case_options))
        monkeypatch.setattr(config_module, "settings", new_settings)
        return new_settings
    return _override


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
