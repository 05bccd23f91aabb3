from __future__ import annotations

"""
Converter argument rendering.

The argument list has a fixed grammar:

    [-<game>] [-basedir DIR] [-backup] [-extra K=V ...] [OPTIONS ...]
    (-i INPUT ... -<operation> OUTPUT)*

No validation happens here: the converter rejects bad values itself.
"""

import logging
from typing import List, Optional, Sequence

from esddrop.core.models import Configuration, SynthesisResult
from esddrop.logging.helpers import get_logger
from esddrop.parsing.tokenizer import OptionTokenizer
from esddrop.processing.aggregator import OperationAggregator


def _is_set(value: Optional[str]) -> bool:
    return bool(value and value.strip())


class ArgumentSynthesizer:
    def __init__(self, *, tokenizer: type[OptionTokenizer] = OptionTokenizer,
                 logger: Optional[logging.Logger] = None) -> None:
        self._tokenizer = tokenizer
        self._log = logger or get_logger("arguments")

    @staticmethod
    def config_flags(config: Configuration) -> List[str]:
        out: List[str] = []
        if _is_set(config.game):
            out.append(f"-{config.game}")
        if _is_set(config.base_dir):
            out.extend(["-basedir", config.base_dir])
        if config.backup:
            out.append("-backup")
        if config.extra:
            out.append("-extra")
            out.extend(f"{k}={v}" for k, v in config.extra.items())
        return out

    def option_tokens(self, config: Configuration) -> List[str]:
        if not _is_set(config.options):
            return []
        return self._tokenizer.split(config.options)

    @staticmethod
    def render(config: Configuration, option_tokens: Sequence[str], aggregator: OperationAggregator) -> List[str]:
        out = ArgumentSynthesizer.config_flags(config)
        out.extend(option_tokens)
        for key, inputs in aggregator.groups():
            out.append("-i")
            out.extend(inputs)
            out.append(f"-{key.operation}")
            out.append(key.output)
        return out

    def synthesize(self, config: Configuration, aggregator: OperationAggregator) -> SynthesisResult:
        """Render the final argument list, or only the errors if any were collected."""
        if aggregator.errors:
            self._log.debug("suppressing %d group(s) because of %d error(s)", len(aggregator), len(aggregator.errors))
            return SynthesisResult(arguments=None, errors=aggregator.error_messages)
        args = self.render(config, self.option_tokens(config), aggregator)
        self._log.debug("rendered %d argument(s) for %d group(s)", len(args), len(aggregator))
        return SynthesisResult(arguments=args)
