from __future__ import annotations

import unittest

from cargo_get.errors import InvalidSemver
from cargo_get.version import VersionPart, decompose, render_version


class DecomposeTest(unittest.TestCase):
    def test_components_with_pre_and_build(self) -> None:
        components = decompose("1.2.3-beta+001")

        self.assertEqual(components.major, 1)
        self.assertEqual(components.minor, 2)
        self.assertEqual(components.patch, 3)
        self.assertEqual(components.pre, "beta")
        self.assertEqual(components.build, "001")

    def test_plain_version_has_no_metadata(self) -> None:
        components = decompose("0.9.0")

        self.assertIsNone(components.pre)
        self.assertIsNone(components.build)

    def test_malformed_versions_raise(self) -> None:
        for raw in ("1.2", "abc", "", "1.2.3.4", "01.2.3"):
            with self.subTest(raw=raw):
                with self.assertRaises(InvalidSemver) as ctx:
                    decompose(raw)
                self.assertEqual(ctx.exception.version, raw)
                self.assertTrue(ctx.exception.diagnostic)


class RenderVersionTest(unittest.TestCase):
    def test_all_parts(self) -> None:
        components = decompose("1.2.3-beta+001")
        expected = {
            None: "1.2.3",
            VersionPart.FULL: "1.2.3-beta+001",
            VersionPart.PRETTY: "v1.2.3",
            VersionPart.MAJOR: "1",
            VersionPart.MINOR: "2",
            VersionPart.PATCH: "3",
            VersionPart.PRE: "beta",
            VersionPart.BUILD: "001",
        }
        for part, rendered in expected.items():
            with self.subTest(part=part):
                self.assertEqual(render_version(components, part), rendered)

    def test_pretty_drops_metadata(self) -> None:
        for raw in ("4.5.6", "4.5.6-rc.1", "4.5.6+build.7", "4.5.6-rc.1+build.7"):
            with self.subTest(raw=raw):
                self.assertEqual(render_version(decompose(raw), VersionPart.PRETTY), "v4.5.6")

    def test_missing_metadata_renders_empty(self) -> None:
        components = decompose("2.0.0")

        self.assertEqual(render_version(components, VersionPart.PRE), "")
        self.assertEqual(render_version(components, VersionPart.BUILD), "")

    def test_full_is_verbatim(self) -> None:
        raw = "10.20.30-alpha.1+sha.5114f85"
        self.assertEqual(render_version(decompose(raw), VersionPart.FULL), raw)


if __name__ == "__main__":
    unittest.main()
