"""
Tests для конфігурації роздільників та сутностей.

Запуск: pytest test/test_config.py -v
"""

import os

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.config import PathConfig


class TestPathConfig:

    def test_separators_from_platform(self):
        cfg = PathConfig()
        assert cfg.DIRECTORY_SEPARATOR == os.sep
        assert cfg.ALT_DIRECTORY_SEPARATOR == (os.altsep or os.sep)
        assert cfg.separators() == (os.sep, os.altsep or os.sep)

    def test_explicit_separators(self):
        cfg = PathConfig(DIRECTORY_SEPARATOR="\\", ALT_DIRECTORY_SEPARATOR="/")
        assert cfg.separators() == ("\\", "/")

    def test_entities_enabled_by_default(self):
        assert PathConfig().get_enabled_path_entities() == ["DRIVE_PATH", "UNC_PATH"]

    def test_update_entity_state(self):
        cfg = PathConfig()
        cfg.update_entity_state("DRIVE_PATH", False)
        assert cfg.get_enabled_path_entities() == ["UNC_PATH"]

    def test_unknown_entity_ignored(self):
        cfg = PathConfig()
        cfg.update_entity_state("EMAIL_ADDRESS", False)
        assert cfg.get_enabled_path_entities() == ["DRIVE_PATH", "UNC_PATH"]

    def test_instances_do_not_share_entities(self):
        first, second = PathConfig(), PathConfig()
        first.update_entity_state("UNC_PATH", False)
        assert "UNC_PATH" in second.get_enabled_path_entities()
