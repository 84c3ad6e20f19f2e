from __future__ import annotations

import unittest

from cargo_get.config import QueryConfig, default_config


class QueryConfigTest(unittest.TestCase):
    def test_defaults(self) -> None:
        config = default_config()

        self.assertEqual(config.manifest_filename, "Cargo.toml")
        self.assertEqual(config.default_delimiter, "\n")
        self.assertEqual(config.log_level, "WARNING")

    def test_with_overrides_returns_new_config(self) -> None:
        config = default_config()

        updated = config.with_overrides(log_level="DEBUG")

        self.assertIsInstance(updated, QueryConfig)
        self.assertEqual(updated.log_level, "DEBUG")
        self.assertEqual(config.log_level, "WARNING")
        self.assertEqual(updated.manifest_filename, config.manifest_filename)


if __name__ == "__main__":
    unittest.main()
