from __future__ import annotations
from typing import Protocol, Union, runtime_checkable

from esddrop.core.models import ClassificationError, ClassifiedEntry


@runtime_checkable
class PathClassifierProtocol(Protocol):
    """Protocol for mapping one dropped path to a converter operation.

    Implementations never raise for bad paths; they return a
    `ClassificationError` so the caller can report the whole batch.
    """

    def classify(self, path: str, overrides) -> Union[ClassifiedEntry, ClassificationError]:
        """Classify *path* using the per-directory bundle *overrides*."""
        ...
