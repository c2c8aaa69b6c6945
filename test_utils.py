#!/usr/bin/env python3
"""
Tests for configuration loading and the utility helpers.
"""

import unittest
import tempfile
import os
import shutil
import yaml

from config.config_manager import ConfigManager, DEFAULT_DATA_FILE
from utils.date_utils import DateUtils
from utils.text_utils import TextUtils


class TestConfigManager(unittest.TestCase):
    """Test cases for ConfigManager."""

    def setUp(self):
        """Set up test fixtures."""
        self.test_dir = tempfile.mkdtemp()
        self.config_path = os.path.join(self.test_dir, "config.yaml")

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.test_dir)

    def test_missing_file_uses_defaults(self):
        config = ConfigManager.load_config(os.path.join(self.test_dir, "nope.yaml"))

        self.assertEqual(config, ConfigManager.get_default_config())

    def test_partial_file_is_merged_over_defaults(self):
        with open(self.config_path, 'w') as f:
            yaml.dump({'leaderboard_size': 3, 'report_dir': None}, f)

        config = ConfigManager.load_config(self.config_path)

        self.assertEqual(config['leaderboard_size'], 3)
        self.assertEqual(config['report_dir'], 'reports')
        self.assertEqual(config['data_file'], DEFAULT_DATA_FILE)

    def test_malformed_file_uses_defaults(self):
        with open(self.config_path, 'w') as f:
            f.write("data_file: [unclosed\n")

        with self.assertLogs('config.config_manager', level='ERROR'):
            config = ConfigManager.load_config(self.config_path)

        self.assertEqual(config, ConfigManager.get_default_config())

    def test_unreadable_path_uses_defaults(self):
        """A directory given as the config file falls back to the defaults."""
        with self.assertLogs('config.config_manager', level='ERROR'):
            config = ConfigManager.load_config(self.test_dir)

        self.assertEqual(config, ConfigManager.get_default_config())

    def test_resolve_data_file_expands_home(self):
        path = ConfigManager.resolve_data_file({'data_file': os.path.join('~', 'roster.json')})

        self.assertEqual(path, os.path.join(os.path.expanduser('~'), 'roster.json'))
        self.assertTrue(os.path.isabs(ConfigManager.resolve_data_file({})))


class TestDateUtils(unittest.TestCase):
    """Test cases for DateUtils."""

    def test_build_iso_date_pads(self):
        self.assertEqual(DateUtils.build_iso_date(5, 2, 2026), "2026-02-05")
        self.assertEqual(DateUtils.build_iso_date("15", "11", "2026"), "2026-11-15")

    def test_format_date(self):
        self.assertEqual(DateUtils.format_date("2026-01-15"), "15 January 2026")
        self.assertEqual(DateUtils.format_date("2026-12-01"), "1 December 2026")

    def test_format_date_keeps_unparseable_input(self):
        self.assertEqual(DateUtils.format_date("yesterday"), "yesterday")
        self.assertEqual(DateUtils.format_date("2026-xx-01"), "2026-xx-01")
        self.assertEqual(DateUtils.format_date("2026-13-01"), "1 13 2026")

    def test_is_iso_date(self):
        self.assertTrue(DateUtils.is_iso_date("2026-02-28"))
        self.assertFalse(DateUtils.is_iso_date("2026-02-30"))
        self.assertFalse(DateUtils.is_iso_date("2026-2-3"))
        self.assertTrue(DateUtils.is_iso_date(DateUtils.today_iso()))


class TestTextUtils(unittest.TestCase):
    """Test cases for TextUtils."""

    def test_sort_key_is_case_insensitive(self):
        names = ["bob", "Ann", "cid"]
        self.assertEqual(sorted(names, key=TextUtils.sort_key), ["Ann", "bob", "cid"])

    def test_safe_filename(self):
        self.assertEqual(TextUtils.safe_filename("Under 12 - Girls"), "under_12_girls")
        self.assertEqual(TextUtils.safe_filename("Jürgens/Team"), "jurgensteam")
        self.assertEqual(TextUtils.safe_filename("!!!"), "unnamed")


if __name__ == '__main__':
    unittest.main()
