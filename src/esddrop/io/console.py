from __future__ import annotations

"""
Console collaborator for the drag-and-drop front end.

`ConsolePrompter` implements `PromptProtocol` with :pymod:`click`
prompts, plus the primitives used by the guided configuration
(`ask`, `choose`, `ask_directory`, `confirm`). Validation errors are
echoed by click and the question is asked again.

End of input (or Ctrl-C at a prompt) surfaces from click as `Abort`;
every primitive reports it as None ("input exhausted").
"""

import os
from typing import Any, Optional, Sequence

import click

_SINGLE_NOTE = (
    "Note: ESD files from multiple different bnd files can all be decompiled to the same "
    "directory. When the directory is recompiled, it automatically updates all of the bnds "
    "containing those files."
)
_SINGLE_ASK = (
    "Enter a directory name to enable editing multiple bnds, or else enter nothing to create "
    "a directory limited to only this bnd file."
)
_MULTI_NOTE = (
    "You've selected multiple bnd files in the same directory. Decompiled files from different "
    "bnds can be added to a single directory. When the directory is recompiled, it updates all "
    "of the bnds containing those files."
)
_MULTI_ASK = (
    "Enter a directory name for all decompiled files, or else enter nothing to create separate "
    "directories limited to only their bnd files."
)


class AbsoluteDirectory(click.Path):
    """An existing directory, given as an absolute path."""

    def __init__(self) -> None:
        super().__init__(exists=True, file_okay=False, dir_okay=True, path_type=str)

    def convert(self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]) -> Any:
        value = str(value).strip()
        if not os.path.isabs(value):
            self.fail("Provide an absolute directory, not a relative one", param, ctx)
        return super().convert(value, param, ctx)


class ConsolePrompter:
    def __init__(self) -> None:
        self._explained: set[str] = set()

    @staticmethod
    def _prompt(text: str, **kwargs: Any) -> Any:
        try:
            return click.prompt(text, **kwargs)
        except click.Abort:
            return None

    def say(self, text: str = "") -> None:
        click.echo(text)

    def ask(self, question: str) -> Optional[str]:
        """Return one raw answer ('' allowed), or None when input is exhausted."""
        return self._prompt(question, default="", show_default=False)

    def choose(self, question: str, choices: Sequence[str]) -> Optional[str]:
        """Return one of *choices* (matched case-insensitively), or None."""
        return self._prompt(question, type=click.Choice(list(choices), case_sensitive=False))

    def ask_directory(self, question: str) -> Optional[str]:
        """Return an absolute path to an existing directory, or None."""
        return self._prompt(question, type=AbsoluteDirectory())

    def confirm(self, question: str, *, default: bool = False) -> Optional[bool]:
        try:
            return click.confirm(question, default=default)
        except click.Abort:
            return None

    # -------- PromptProtocol --------

    def request_directory_override(self, directory: str, candidates: Sequence[str]) -> Optional[str]:
        # Re-prompts after an invalid name skip the explanation.
        if directory not in self._explained:
            self._explained.add(directory)
            for path in candidates:
                self.say(path)
            self.say()
            if len(candidates) == 1:
                self.say(_SINGLE_NOTE)
                self.say()
                self.say(_SINGLE_ASK)
            else:
                self.say(_MULTI_NOTE)
                self.say()
                self.say(_MULTI_ASK)
            self.say()
        return self.ask("Single directory to write to")

    def report_errors(self, messages: Sequence[str]) -> None:
        for msg in messages:
            click.echo(f"Error: {msg}")
        click.echo()
