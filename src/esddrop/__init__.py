from __future__ import annotations

from esddrop.cli import EsdDrop
from esddrop.core.errors import ConfigError, EsdDropError, InputExhausted
from esddrop.core.models import (
    ClassificationError,
    ClassifiedEntry,
    Configuration,
    OperationKey,
    SynthesisResult,
)
from esddrop.io.config_store import OptionsConfigStore
from esddrop.io.console import ConsolePrompter
from esddrop.parsing.tokenizer import OptionTokenizer
from esddrop.processing.aggregator import OperationAggregator
from esddrop.processing.input_classifier import PathClassifier
from esddrop.processing.overrides import AmbiguityResolver, DirectoryOverrideMap
from esddrop.rendering.arguments import ArgumentSynthesizer
from esddrop.runtime.pipeline import OptionsPipeline, make_options

__version__ = '0.1.0'

__all__ = [
    'EsdDrop',
    'make_options',
    'OptionsPipeline',
    'OptionTokenizer',
    'PathClassifier',
    'AmbiguityResolver',
    'DirectoryOverrideMap',
    'OperationAggregator',
    'ArgumentSynthesizer',
    'OptionsConfigStore',
    'ConsolePrompter',
    'Configuration',
    'ClassifiedEntry',
    'ClassificationError',
    'OperationKey',
    'SynthesisResult',
    'EsdDropError',
    'InputExhausted',
    'ConfigError',
]
