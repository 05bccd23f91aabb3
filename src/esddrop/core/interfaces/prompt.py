from __future__ import annotations
from typing import Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class PromptProtocol(Protocol):
    """Interactive collaborator consulted while building converter options.

    Implementations own all wording and console mechanics; the core only
    consumes the returned answers.
    """

    def request_directory_override(self, directory: str, candidates: Sequence[str]) -> Optional[str]:
        """Return a shared directory name ('' for none) or None once input is exhausted."""
        ...

    def report_errors(self, messages: Sequence[str]) -> None:
        """Display a batch of error messages."""
        ...
