from __future__ import annotations

"""
OptionsPipeline – turns dropped paths into a converter argument list.

Stages, run once per invocation:
    1) AmbiguityResolver   – one prompt per directory holding bundles
    2) PathClassifier      – every path, errors collected
    3) OperationAggregator – group by (operation, output)
    4) ArgumentSynthesizer – flags, options, then one group per key

The interactive collaborator is injected, so the whole pipeline runs
headless under test with a scripted prompter.
"""

import logging
from typing import List, Optional, Sequence

from esddrop.core.errors import InputExhausted
from esddrop.core.interfaces.classifier import PathClassifierProtocol
from esddrop.core.interfaces.prompt import PromptProtocol
from esddrop.core.models import Configuration, SynthesisResult
from esddrop.logging.helpers import get_logger
from esddrop.processing.aggregator import OperationAggregator
from esddrop.processing.input_classifier import PathClassifier
from esddrop.processing.overrides import AmbiguityResolver
from esddrop.rendering.arguments import ArgumentSynthesizer


class OptionsPipeline:
    def __init__(
        self,
        prompter: PromptProtocol,
        *,
        classifier: Optional[PathClassifierProtocol] = None,
        synthesizer: Optional[ArgumentSynthesizer] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._prompter = prompter
        self._log = logger or get_logger("pipeline")
        self._resolver = AmbiguityResolver(prompter, logger=logger)
        self._classifier = classifier or PathClassifier(logger=logger)
        self._synth = synthesizer or ArgumentSynthesizer(logger=logger)

    def aggregate(self, paths: Sequence[str]) -> OperationAggregator:
        """Resolve bundle directories, then classify and group every path.

        Raises:
            InputExhausted: The prompter ran out of input.
        """
        overrides = self._resolver.resolve(paths)
        return OperationAggregator().extend(self._classifier.classify(p, overrides) for p in paths)

    def run(self, config: Configuration, paths: Sequence[str]) -> SynthesisResult:
        try:
            agg = self.aggregate(paths)
        except InputExhausted as exc:
            self._log.debug("aborted: %s", exc)
            return SynthesisResult(aborted=True)

        result = self._synth.synthesize(config, agg)
        if result.errors:
            self._prompter.report_errors(list(result.errors))
        return result


def make_options(config: Configuration, paths: Sequence[str], prompter: PromptProtocol) -> Optional[List[str]]:
    """Convenience wrapper returning the argument list, or None on errors/abort."""
    return OptionsPipeline(prompter).run(config, paths).arguments
