"""Unit tests for settings loading."""

import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from mnemo.config import (
    DEFAULT_HIGHLIGHT_COLOR, DEFAULT_TEXTS_DIR, Settings, config_file_path, load_settings,
)


class TestLoadSettings(unittest.TestCase):

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)
        self.settings_file = Path(self.temp_dir.name) / "settings.json"

    def write(self, data):
        self.settings_file.write_text(json.dumps(data), encoding="utf-8")

    def test_defaults_without_file_or_environment(self):
        settings = load_settings(self.settings_file, environ={})

        self.assertEqual(settings.texts_dir, DEFAULT_TEXTS_DIR)
        self.assertEqual(settings.highlight_color, DEFAULT_HIGHLIGHT_COLOR)
        self.assertIsNone(settings.log_file)

    def test_values_from_file(self):
        self.write({"texts_dir": "/srv/texts", "highlight_color": "bright_green"})

        settings = load_settings(self.settings_file, environ={})

        self.assertEqual(settings.texts_dir, Path("/srv/texts"))
        self.assertEqual(settings.highlight_color, "bright_green")

    def test_environment_beats_file(self):
        self.write({"texts_dir": "/srv/texts"})

        settings = load_settings(self.settings_file, environ={"MNEMO_TEXTS_DIR": "/env/texts"})

        self.assertEqual(settings.texts_dir, Path("/env/texts"))

    def test_empty_environment_value_is_ignored(self):
        self.write({"highlight_color": "red"})

        settings = load_settings(self.settings_file, environ={"MNEMO_HIGHLIGHT_COLOR": ""})

        self.assertEqual(settings.highlight_color, "red")

    def test_unknown_highlight_color_keeps_default(self):
        with self.assertLogs("mnemo.config", level="WARNING") as logs:
            settings = load_settings(
                self.settings_file, environ={"MNEMO_HIGHLIGHT_COLOR": "not_a_colour"})

        self.assertEqual(settings.highlight_color, DEFAULT_HIGHLIGHT_COLOR)
        self.assertIn("not_a_colour", logs.output[0])

    def test_unknown_env_color_keeps_file_color(self):
        self.write({"highlight_color": "bright_green"})

        with self.assertLogs("mnemo.config", level="WARNING"):
            settings = load_settings(
                self.settings_file, environ={"MNEMO_HIGHLIGHT_COLOR": "cyanish"})

        self.assertEqual(settings.highlight_color, "bright_green")

    def test_style_names_are_accepted(self):
        settings = load_settings(self.settings_file, environ={"MNEMO_HIGHLIGHT_COLOR": "reverse"})

        self.assertEqual(settings.highlight_color, "reverse")

    def test_paths_expand_user(self):
        self.write({"log_file": "~/mnemo.log"})

        settings = load_settings(self.settings_file, environ={})

        self.assertEqual(settings.log_file, Path("~/mnemo.log").expanduser())

    def test_malformed_file_is_ignored(self):
        self.settings_file.write_text("{not json", encoding="utf-8")

        with self.assertLogs("mnemo.config", level="WARNING"):
            settings = load_settings(self.settings_file, environ={})

        self.assertEqual(settings, Settings())

    def test_non_dict_file_is_ignored(self):
        self.write(["texts_dir"])

        with self.assertLogs("mnemo.config", level="WARNING"):
            settings = load_settings(self.settings_file, environ={})

        self.assertEqual(settings, Settings())

    def test_bad_values_are_skipped(self):
        self.write({"texts_dir": 42, "highlight_color": "", "font": "Courier"})

        with self.assertLogs("mnemo.config", level="WARNING") as logs:
            settings = load_settings(self.settings_file, environ={})

        self.assertEqual(settings, Settings())
        self.assertEqual(len(logs.records), 2)

    def test_default_path_is_in_user_config_dir(self):
        with patch("mnemo.config.platformdirs.user_config_dir", return_value="/cfg/mnemo"):
            self.assertEqual(config_file_path(), Path("/cfg/mnemo/settings.json"))


class TestOverrides(unittest.TestCase):

    def test_none_overrides_are_skipped(self):
        settings = Settings(texts_dir=Path("/a"))

        self.assertEqual(settings.with_overrides(texts_dir=None, log_file=None), settings)

    def test_overrides_apply(self):
        settings = Settings().with_overrides(texts_dir=Path("/b"), log_file="/tmp/m.log")

        self.assertEqual(settings.texts_dir, Path("/b"))
        self.assertEqual(settings.log_file, Path("/tmp/m.log"))


if __name__ == '__main__':
    unittest.main()
