"""Unit tests for environment-driven command line settings."""

from __future__ import annotations

import logging
import unittest

from plainschema.config import CliConfig, ConfigError, parse_log_level


class CliConfigTests(unittest.TestCase):
    def test_defaults_when_env_is_empty(self) -> None:
        config = CliConfig.from_env({})
        self.assertEqual(config.log_level, logging.WARNING)
        self.assertEqual(config.yaml_suffixes, (".yaml", ".yml"))

    def test_log_level_is_case_insensitive(self) -> None:
        config = CliConfig.from_env({"PLAINSCHEMA_LOG_LEVEL": " debug "})
        self.assertEqual(config.log_level, logging.DEBUG)

    def test_unknown_log_level_is_rejected(self) -> None:
        with self.assertRaisesRegex(ConfigError, "log level must be one of"):
            CliConfig.from_env({"PLAINSCHEMA_LOG_LEVEL": "verbose"})

    def test_yaml_suffixes_are_normalized(self) -> None:
        config = CliConfig.from_env({"PLAINSCHEMA_YAML_SUFFIXES": "yaml, .CFG,,"})
        self.assertEqual(config.yaml_suffixes, (".yaml", ".cfg"))

    def test_parse_log_level(self) -> None:
        self.assertEqual(parse_log_level("error"), logging.ERROR)
        with self.assertRaises(ConfigError):
            parse_log_level("")


if __name__ == "__main__":
    unittest.main()
