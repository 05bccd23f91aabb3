from __future__ import annotations

"""Public surface for esddrop.core.

Stable import location for the data model, the exception hierarchy and
the protocols implemented by the processing and io layers:

    from esddrop.core import Configuration, PromptProtocol, ...
"""

from esddrop.core.errors import ConfigError, EsdDropError, InputExhausted
from esddrop.core.interfaces import (
    LoggerFactoryProtocol,
    LoggerLikeProtocol,
    PathClassifierProtocol,
    PromptProtocol,
)
from esddrop.core.models import (
    ClassificationError,
    ClassifiedEntry,
    Configuration,
    OperationKey,
    SynthesisResult,
)

__all__ = [
    # Models
    "ClassificationError",
    "ClassifiedEntry",
    "Configuration",
    "OperationKey",
    "SynthesisResult",
    # Errors
    "ConfigError",
    "EsdDropError",
    "InputExhausted",
    # Protocols
    "LoggerFactoryProtocol",
    "LoggerLikeProtocol",
    "PathClassifierProtocol",
    "PromptProtocol",
]
