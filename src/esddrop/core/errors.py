from __future__ import annotations

"""Exception hierarchy for esddrop.

Classification problems are *not* exceptions: they are collected as
`ClassificationError` values so a whole batch is reported at once. The
exceptions below cover the conditions that stop a run.
"""


class EsdDropError(Exception):
    """Base class for all esddrop failures."""


class InputExhausted(EsdDropError):
    """The interactive collaborator has no more input (user abort)."""


class ConfigError(EsdDropError):
    """The persisted configuration file exists but cannot be used."""
