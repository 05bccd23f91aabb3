from __future__ import annotations

"""
Bundle-directory overrides.

Decompiling a '.talkesdbnd' bundle writes its scripts into a sibling
directory. By default each bundle gets its own '<name>-only' directory;
the user may instead pick one shared directory per source directory,
which lets a single recompile update every bundle at once.

    DirectoryOverrideMap  – directory -> chosen name, insert-if-absent
    AmbiguityResolver     – asks the interactive collaborator once per
                            directory holding dropped bundles
"""

import logging
import os
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from esddrop.core.errors import InputExhausted
from esddrop.core.interfaces.prompt import PromptProtocol
from esddrop.logging.helpers import get_logger
from esddrop.utils.paths import absolute, is_valid_entry_name
from esddrop.utils.suffixes import is_bundle


class DirectoryOverrideMap:
    """Mapping from a source directory to a relative output directory name.

    The first name recorded for a directory wins; later attempts are
    ignored.
    """

    def __init__(self) -> None:
        self._names: Dict[str, str] = {}

    def set_if_absent(self, directory: str, name: str) -> bool:
        """Record *name* for *directory*; return False if one was already set."""
        if directory in self._names:
            return False
        self._names[directory] = name
        return True

    def get(self, directory: str) -> Optional[str]:
        return self._names.get(directory)

    def items(self) -> Iterator[Tuple[str, str]]:
        return iter(self._names.items())

    def __contains__(self, directory: object) -> bool:
        return directory in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"DirectoryOverrideMap({self._names!r})"


class AmbiguityResolver:
    """Collects one optional shared output directory per bundle directory."""

    def __init__(self, prompter: PromptProtocol, *, logger: Optional[logging.Logger] = None) -> None:
        self._prompter = prompter
        self._log = logger or get_logger("resolver")

    @staticmethod
    def collect_bundles(paths: Iterable[str]) -> Dict[str, List[str]]:
        """Group existing bundle files by directory, in first-seen order."""
        by_dir: Dict[str, List[str]] = {}
        for raw in paths:
            full = absolute(raw)
            if not os.path.isfile(full) or not is_bundle(os.path.basename(full)):
                continue
            by_dir.setdefault(os.path.dirname(full), []).append(full)
        return by_dir

    def _ask(self, directory: str, candidates: List[str]) -> Optional[str]:
        """Prompt until a valid answer arrives; '' or None means no override."""
        while True:
            answer = self._prompter.request_directory_override(directory, candidates)
            if answer is None:
                raise InputExhausted(f"no answer for bundle directory {directory}")
            answer = answer.strip()
            if not answer:
                return None
            if is_valid_entry_name(answer):
                return answer
            self._log.debug("rejected directory name %r for %s", answer, directory)
            self._prompter.report_errors([f"Invalid directory name: {answer}"])

    def resolve(
        self, paths: Iterable[str], overrides: Optional[DirectoryOverrideMap] = None
    ) -> DirectoryOverrideMap:
        """Return *overrides* completed with the answers for *paths*.

        Raises:
            InputExhausted: The collaborator ran out of input.
        """
        result = overrides if overrides is not None else DirectoryOverrideMap()
        for directory, candidates in self.collect_bundles(paths).items():
            if directory in result:
                continue
            name = self._ask(directory, candidates)
            if name is None:
                self._log.info("bundles in %s keep their own directories", directory)
                continue
            result.set_if_absent(directory, name)
            self._log.info("bundles in %s share directory %s", directory, name)
        return result
