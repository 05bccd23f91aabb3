from __future__ import annotations

import sys
import unittest
from pathlib import Path

TOOLS_DIR = Path(__file__).resolve().parent / "tools"
SRC_DIR = Path(__file__).resolve().parents[1] / "src"
for _p in (TOOLS_DIR, SRC_DIR):
    if str(_p) not in sys.path:
        sys.path.insert(0, str(_p))

from base import DropTreeTestCase  # noqa: E402
from scripted_prompter import ScriptedPrompter  # noqa: E402
from esddrop.core.errors import InputExhausted  # noqa: E402
from esddrop.processing.overrides import AmbiguityResolver, DirectoryOverrideMap  # noqa: E402
from esddrop.utils.paths import is_valid_entry_name  # noqa: E402


class DirectoryOverrideMapTests(unittest.TestCase):
    def test_first_name_wins(self) -> None:
        m = DirectoryOverrideMap()
        self.assertTrue(m.set_if_absent("/game/talk", "shared"))
        self.assertFalse(m.set_if_absent("/game/talk", "other"))
        self.assertEqual(m.get("/game/talk"), "shared")
        self.assertIn("/game/talk", m)
        self.assertEqual(len(m), 1)
        self.assertIsNone(m.get("/game/other"))


class EntryNameTests(unittest.TestCase):
    def test_valid_names(self) -> None:
        for name in ("shared", "my talk", "m10-only", "v1.2"):
            with self.subTest(name=name):
                self.assertTrue(is_valid_entry_name(name))

    def test_invalid_names(self) -> None:
        for name in ("", ".", "..", "a/b", "a\\b", "c:", "what?", "x*", "<x>", "p|q", 'q"', "tab\there"):
            with self.subTest(name=name):
                self.assertFalse(is_valid_entry_name(name))


class CollectBundlesTests(DropTreeTestCase):
    def test_groups_by_directory_in_first_seen_order(self) -> None:
        paths = [
            self.p("talk2", "m50_00_00_00.talkesdbnd"),
            self.p("loose", "alpha.py"),
            self.p("talk", "m11_00_00_00.talkesdbnd"),
            self.p("talk", "m10_00_00_00.talkesdbnd.dcx"),
            self.p("talk", "missing.talkesdbnd"),
            self.p("talk", "m10_00_00_00-only"),
        ]
        grouped = AmbiguityResolver.collect_bundles(paths)
        self.assertEqual(list(grouped), [self.p("talk2"), self.p("talk")])
        self.assertEqual(
            grouped[self.p("talk")],
            [self.p("talk", "m11_00_00_00.talkesdbnd"), self.p("talk", "m10_00_00_00.talkesdbnd.dcx")],
        )


class ResolveTests(DropTreeTestCase):
    def _bundles(self) -> list:
        return [self.p("talk", "m11_00_00_00.talkesdbnd"), self.p("talk", "m10_00_00_00.talkesdbnd.dcx")]

    def test_no_bundles_no_prompt(self) -> None:
        prompter = ScriptedPrompter()
        result = AmbiguityResolver(prompter).resolve([self.p("loose", "alpha.py")])
        self.assertEqual(prompter.requests, [])
        self.assertEqual(len(result), 0)

    def test_one_prompt_per_directory(self) -> None:
        prompter = ScriptedPrompter(["shared"])
        result = AmbiguityResolver(prompter).resolve(self._bundles())
        self.assertEqual(prompter.requests, [(self.p("talk"), self._bundles())])
        self.assertEqual(result.get(self.p("talk")), "shared")

    def test_answer_is_trimmed(self) -> None:
        prompter = ScriptedPrompter(["  shared  "])
        result = AmbiguityResolver(prompter).resolve(self._bundles()[:1])
        self.assertEqual(result.get(self.p("talk")), "shared")

    def test_blank_answer_keeps_defaults(self) -> None:
        prompter = ScriptedPrompter(["   "])
        result = AmbiguityResolver(prompter).resolve(self._bundles())
        self.assertNotIn(self.p("talk"), result)

    def test_invalid_name_reprompts(self) -> None:
        prompter = ScriptedPrompter(["bad/name", "good"])
        result = AmbiguityResolver(prompter).resolve(self._bundles())
        self.assertEqual(len(prompter.requests), 2)
        self.assertEqual(len(prompter.reported), 1)
        self.assertIn("bad/name", prompter.reported[0][0])
        self.assertEqual(result.get(self.p("talk")), "good")

    def test_exhausted_input_aborts(self) -> None:
        prompter = ScriptedPrompter([])
        with self.assertRaises(InputExhausted):
            AmbiguityResolver(prompter).resolve(self._bundles())

    def test_exhausted_after_invalid_answer_aborts(self) -> None:
        prompter = ScriptedPrompter(["a:b"])
        with self.assertRaises(InputExhausted):
            AmbiguityResolver(prompter).resolve(self._bundles())

    def test_several_directories(self) -> None:
        prompter = ScriptedPrompter(["", "mine"])
        paths = self._bundles() + [self.p("talk2", "m50_00_00_00.talkesdbnd")]
        result = AmbiguityResolver(prompter).resolve(paths)
        self.assertEqual([d for d, _ in prompter.requests], [self.p("talk"), self.p("talk2")])
        self.assertIsNone(result.get(self.p("talk")))
        self.assertEqual(result.get(self.p("talk2")), "mine")

    def test_known_directory_is_not_prompted_again(self) -> None:
        existing = DirectoryOverrideMap()
        existing.set_if_absent(self.p("talk"), "first")
        prompter = ScriptedPrompter(["second"])
        result = AmbiguityResolver(prompter).resolve(self._bundles(), existing)
        self.assertIs(result, existing)
        self.assertEqual(prompter.requests, [])
        self.assertEqual(result.get(self.p("talk")), "first")


if __name__ == "__main__":
    unittest.main()
