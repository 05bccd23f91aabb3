from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Union

from esddrop.constants import (
    BUNDLE_MARKER,
    ONLY_DIR_SUFFIX,
    OP_WRITE_BND,
    OP_WRITE_BND_FILE,
    OP_WRITE_LOOSE,
    OP_WRITE_PY,
    OUTPUT_PLACEHOLDER,
)
from esddrop.core.interfaces.classifier import PathClassifierProtocol
from esddrop.core.models import ClassificationError, ClassifiedEntry
from esddrop.logging.helpers import get_logger
from esddrop.processing.overrides import DirectoryOverrideMap
from esddrop.utils.paths import absolute, list_files
from esddrop.utils.suffixes import (
    is_archive,
    is_bundle,
    is_script,
    matches_bundle_family,
    strip_marker,
)

Classification = Union[ClassifiedEntry, ClassificationError]


@dataclass
class PathClassifier(PathClassifierProtocol):
    """Default classifier for dropped files and directories.

    Rules (first match wins):
      - '<prefix>-only' directory: repack its scripts into the single
        '<prefix>.*esdbnd[.dcx]' bundle next to it (writebndfile)
      - other directory: repack its scripts into the bundles of the parent
        directory (writebnd)
      - '.py' file: compile next to itself (writeloose)
      - '.esd[.dcx]' file: decompile next to itself (writepy)
      - '.talkesdbnd[.dcx]' file: decompile into a sibling directory, either
        the one chosen for its directory or '<name>-only' (writepy)
      - anything else: 'unrecognized'; missing paths: 'not_found'

    A directory without any '.py' file is a 'no_scripts' error, so every
    path ends up as exactly one entry or one error.

    Paths are not validated beyond what classification needs: they are
    expected to come from drag-and-drop.
    """

    logger: Optional[logging.Logger] = field(default=None)

    def __post_init__(self) -> None:
        if self.logger is None:
            self.logger = get_logger("classifier")

    # -------- Internal helpers --------

    def _classify_directory(self, path: str) -> Classification:
        name = os.path.basename(path)
        parent = os.path.dirname(path)
        scripts = tuple(list_files(path, is_script))
        parent_name = os.path.basename(parent)

        if not name.endswith(ONLY_DIR_SUFFIX):
            if not scripts:
                return self._no_scripts(path)
            # A parent without any bundle is fine: the converter creates one.
            return ClassifiedEntry(OP_WRITE_BND, parent, scripts)

        prefix = name[: -len(ONLY_DIR_SUFFIX)]
        matches = list_files(parent, lambda n: matches_bundle_family(n, prefix))
        if not matches:
            return ClassificationError(
                path,
                f"Can't pack {path}: No ESD files for {prefix} found in {parent_name} directory",
                kind="ambiguous_bundle",
            )
        if len(matches) > 1:
            return ClassificationError(
                path,
                f"Can't pack {path}: Multiple ESD files matching {prefix} found in {parent_name} directory",
                kind="ambiguous_bundle",
            )
        if not scripts:
            return self._no_scripts(path)
        return ClassifiedEntry(OP_WRITE_BND_FILE, matches[0], scripts)

    @staticmethod
    def _no_scripts(path: str) -> ClassificationError:
        return ClassificationError(path, f"Can't pack {path}: No Python files found in it", kind="no_scripts")

    def _classify_file(self, path: str, overrides: DirectoryOverrideMap) -> Classification:
        name = os.path.basename(path)
        directory = os.path.dirname(path)

        if is_script(name):
            return ClassifiedEntry(OP_WRITE_LOOSE, os.path.join(directory, f"{OUTPUT_PLACEHOLDER}.esd"), (path,))
        if is_archive(name):
            return ClassifiedEntry(OP_WRITE_PY, os.path.join(directory, f"{OUTPUT_PLACEHOLDER}.py"), (path,))
        if is_bundle(name):
            sub = overrides.get(directory) or strip_marker(name, BUNDLE_MARKER) + "-only"
            return ClassifiedEntry(OP_WRITE_PY, os.path.join(directory, sub, f"{OUTPUT_PLACEHOLDER}.py"), (path,))
        return ClassificationError(
            path, f"{path} is not named like a Python file, ESD, or talk ESD BND", kind="unrecognized"
        )

    # -------- PathClassifierProtocol --------

    def classify(self, path: str, overrides: Optional[DirectoryOverrideMap] = None) -> Classification:
        full = absolute(path)
        if os.path.isdir(full):
            result = self._classify_directory(full)
        elif os.path.isfile(full):
            result = self._classify_file(full, overrides or DirectoryOverrideMap())
        else:
            return ClassificationError(path, f"{path} not found", kind="not_found")

        if isinstance(result, ClassificationError):
            self.logger.debug("rejected %s: %s", full, result.message)
        else:
            self.logger.debug("%s -> -%s %s", full, result.operation, result.output)
        return result

    def classify_all(
        self, paths: Iterable[str], overrides: Optional[DirectoryOverrideMap] = None
    ) -> List[Classification]:
        """Classify every path in order; errors never stop the batch."""
        ov = overrides or DirectoryOverrideMap()
        return [self.classify(p, ov) for p in paths]
