from dataclasses import dataclass, field
from typing import Any, List, Literal, Mapping, NamedTuple, Optional, Tuple

# Single source of truth for classification failures
ErrorKind = Literal['not_found', 'unrecognized', 'ambiguous_bundle', 'no_scripts']


class OperationKey(NamedTuple):
    operation: str
    output: str


def _typed(data: Mapping[str, Any], key: str, kind: type) -> Any:
    value = data.get(key)
    if value is not None and not isinstance(value, kind):
        raise TypeError(f"{key!r} must be {kind.__name__} or null, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Configuration:
    """Persisted drag-and-drop settings, a strict subset of the converter CLI."""
    game: Optional[str] = None
    base_dir: Optional[str] = None
    backup: bool = False
    extra: Mapping[str, str] = field(default_factory=dict)
    options: str = ''

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> 'Configuration':
        """Build a configuration from decoded JSON.

        Every field may be missing or null. Raises TypeError when a
        present field has the wrong JSON type.
        """
        backup = _typed(data, 'backup', bool)
        extra = _typed(data, 'extra', dict) or {}
        for key, value in extra.items():
            if not isinstance(value, str):
                raise TypeError(f"'extra.{key}' must be a string, got {type(value).__name__}")
        return cls(
            game=_typed(data, 'game', str),
            base_dir=_typed(data, 'basedir', str),
            backup=bool(backup),
            extra=dict(extra),
            options=_typed(data, 'other_options', str) or '',
        )

    def to_json(self) -> dict:
        return {
            'game': self.game,
            'basedir': self.base_dir,
            'backup': self.backup,
            'extra': dict(self.extra),
            'other_options': self.options,
        }


@dataclass(frozen=True)
class ClassifiedEntry:
    operation: str
    output: str
    inputs: Tuple[str, ...] = ()

    @property
    def key(self) -> OperationKey:
        return OperationKey(self.operation, self.output)


@dataclass(frozen=True)
class ClassificationError:
    path: str
    message: str
    kind: ErrorKind = 'unrecognized'


@dataclass(frozen=True)
class SynthesisResult:
    arguments: Optional[List[str]] = None
    errors: Tuple[str, ...] = ()
    aborted: bool = False

    @property
    def ok(self) -> bool:
        return self.arguments is not None and not self.errors and not self.aborted
