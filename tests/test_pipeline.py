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
from esddrop.core.models import Configuration  # noqa: E402
from esddrop.runtime.pipeline import OptionsPipeline, make_options  # noqa: E402

CONFIG = Configuration(game="ds3", base_dir="/games/ds3", backup=False, extra={}, options="")


class PipelineTests(DropTreeTestCase):
    def test_bundles_share_chosen_directory(self) -> None:
        prompter = ScriptedPrompter(["shared"])
        bundles = [self.p("talk", "m11_00_00_00.talkesdbnd"), self.p("talk", "m10_00_00_00.talkesdbnd.dcx")]
        result = OptionsPipeline(prompter).run(CONFIG, bundles)
        self.assertTrue(result.ok)
        self.assertEqual(
            result.arguments,
            ["-ds3", "-basedir", "/games/ds3", "-i", *bundles, "-writepy", self.p("talk", "shared", "%e.py")],
        )

    def test_bundles_keep_their_own_directories(self) -> None:
        prompter = ScriptedPrompter([""])
        bundles = [self.p("talk", "m11_00_00_00.talkesdbnd"), self.p("talk", "m10_00_00_00.talkesdbnd.dcx")]
        result = OptionsPipeline(prompter).run(CONFIG, bundles)
        self.assertEqual(
            result.arguments[3:],
            [
                "-i", bundles[0], "-writepy", self.p("talk", "m11_00_00_00-only", "%e.py"),
                "-i", bundles[1], "-writepy", self.p("talk", "m10_00_00_00-only", "%e.py"),
            ],
        )

    def test_mixed_drop(self) -> None:
        prompter = ScriptedPrompter()
        paths = [
            self.p("chr", "scripts"),
            self.p("loose", "beta.esd"),
            self.p("talk", "m10_00_00_00-only"),
            self.p("loose", "gamma.esd.dcx"),
        ]
        result = OptionsPipeline(prompter).run(Configuration(), paths)
        self.assertEqual(prompter.requests, [])
        self.assertEqual(
            result.arguments,
            [
                "-i", *[self.p("chr", "scripts", n) for n in ("a.py", "b.py", "c.py")],
                "-writebnd", self.p("chr"),
                "-i", self.p("loose", "beta.esd"), self.p("loose", "gamma.esd.dcx"),
                "-writepy", self.p("loose", "%e.py"),
                "-i", self.p("talk", "m10_00_00_00-only", "t100000.py"),
                self.p("talk", "m10_00_00_00-only", "t100010.py"),
                "-writebndfile", self.p("talk", "m10_00_00_00.talkesdbnd.dcx"),
            ],
        )

    def test_errors_are_reported_together(self) -> None:
        prompter = ScriptedPrompter()
        paths = [self.p("loose", "alpha.py"), self.p("nope"), self.p("talk", "m30-only"), self.p("loose", "readme.txt")]
        result = OptionsPipeline(prompter).run(CONFIG, paths)
        self.assertIsNone(result.arguments)
        self.assertFalse(result.aborted)
        self.assertEqual(len(result.errors), 3)
        self.assertEqual(prompter.reported, [list(result.errors)])

    def test_directory_without_scripts_fails_the_drop(self) -> None:
        prompter = ScriptedPrompter()
        result = OptionsPipeline(prompter).run(CONFIG, [self.p("chr", "scripts"), self.p("chr", "empty")])
        self.assertIsNone(result.arguments)
        self.assertEqual(result.errors, (f"Can't pack {self.p('chr', 'empty')}: No Python files found in it",))

    def test_exhausted_prompter_aborts_without_errors(self) -> None:
        prompter = ScriptedPrompter([])
        paths = [self.p("nope"), self.p("talk", "m11_00_00_00.talkesdbnd")]
        result = OptionsPipeline(prompter).run(CONFIG, paths)
        self.assertTrue(result.aborted)
        self.assertIsNone(result.arguments)
        self.assertEqual(result.errors, ())
        self.assertEqual(prompter.reported, [])

    def test_make_options(self) -> None:
        self.assertEqual(
            make_options(Configuration(backup=True), [self.p("loose", "alpha.py")], ScriptedPrompter()),
            ["-backup", "-i", self.p("loose", "alpha.py"), "-writeloose", self.p("loose", "%e.esd")],
        )
        self.assertIsNone(make_options(Configuration(), [self.p("nope")], ScriptedPrompter()))


if __name__ == "__main__":
    unittest.main()
