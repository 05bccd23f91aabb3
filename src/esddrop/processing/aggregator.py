from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, Mapping, Tuple, Union

from esddrop.core.models import ClassificationError, ClassifiedEntry, OperationKey


@dataclass(frozen=True)
class OperationAggregator:
    """Immutable accumulator of classified entries.

    Entries sharing an (operation, output) key are merged: their inputs
    are concatenated in encounter order, duplicates included. Iteration
    follows the explicit `keys` tuple, i.e. first-insertion order.

    Every update returns a new aggregator; the receiver is left unchanged.
    """

    keys: Tuple[OperationKey, ...] = ()
    inputs: Mapping[OperationKey, Tuple[str, ...]] = field(default_factory=dict)
    errors: Tuple[ClassificationError, ...] = ()

    def add(self, entry: ClassifiedEntry) -> "OperationAggregator":
        if not entry.inputs:
            raise ValueError(f"entry -{entry.operation} {entry.output} has no inputs")
        key = entry.key
        merged = dict(self.inputs)
        if key in merged:
            merged[key] = merged[key] + tuple(entry.inputs)
            return replace(self, inputs=merged)
        merged[key] = tuple(entry.inputs)
        return replace(self, keys=self.keys + (key,), inputs=merged)

    def add_error(self, error: ClassificationError) -> "OperationAggregator":
        return replace(self, errors=self.errors + (error,))

    def extend(self, results: Iterable[Union[ClassifiedEntry, ClassificationError]]) -> "OperationAggregator":
        agg = self
        for res in results:
            agg = agg.add_error(res) if isinstance(res, ClassificationError) else agg.add(res)
        return agg

    def merge(self, other: "OperationAggregator") -> "OperationAggregator":
        """Append *other*'s groups and errors after this aggregator's own."""
        agg = self
        for key, inputs in other.groups():
            agg = agg.add(ClassifiedEntry(key.operation, key.output, inputs))
        return replace(agg, errors=agg.errors + other.errors)

    def groups(self) -> Iterator[Tuple[OperationKey, Tuple[str, ...]]]:
        for key in self.keys:
            yield key, self.inputs[key]

    @property
    def error_messages(self) -> Tuple[str, ...]:
        return tuple(err.message for err in self.errors)

    def __len__(self) -> int:
        return len(self.keys)
