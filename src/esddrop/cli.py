from __future__ import annotations

import argparse
import logging
import os
import shlex
import subprocess
import sys
from typing import List, NoReturn, Optional, Sequence, TextIO

from esddrop.core.errors import ConfigError
from esddrop.core.models import SynthesisResult
from esddrop.io.config_store import OptionsConfigStore, resolve_config_path
from esddrop.io.console import ConsolePrompter
from esddrop.logging.factory import DefaultLoggerFactory
from esddrop.logging.helpers import get_logger, json_logs_requested
from esddrop.parsing.parser import _build_parser
from esddrop.parsing.tokenizer import OptionTokenizer
from esddrop.runtime.pipeline import OptionsPipeline

logger = get_logger('esddrop')

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_ABORTED = 130


def _configure_logging(enable_json: bool, *, verbose: bool = False) -> None:
    """Configure process-wide logging once, either JSON or plain text."""
    mode = (bool(enable_json), bool(verbose))
    if getattr(_configure_logging, '_configured_mode', None) == mode:
        return
    level = logging.DEBUG if verbose else logging.WARNING
    factory = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('esddrop')
    setattr(_configure_logging, '_configured_mode', mode)


def _fatal(msg: str, code: int = EXIT_FAILED) -> NoReturn:
    """Exit the process with a logged error."""
    logger.error(msg)
    sys.exit(code)


def _run_converter(command: str, args: List[str]) -> int:
    argv = [*OptionTokenizer.split(command), *args]
    if not argv:
        _fatal('empty converter command')
    logger.info('running %s', shlex.join(argv))
    try:
        return subprocess.run(argv, check=False).returncode
    except FileNotFoundError:
        _fatal(f'converter {argv[0]!r} not found')


class EsdDrop:
    """Top-level façade for command-style execution."""

    @staticmethod
    def build(argv: Sequence[str], *, prompter: Optional[ConsolePrompter] = None) -> SynthesisResult:
        """Load (or create) the config and build the converter arguments.

        Raises:
            ConfigError: The config file exists but cannot be parsed.
        """
        return EsdDrop._build(_build_parser().parse_args(list(argv)), argv, prompter)

    @staticmethod
    def _build(ns: argparse.Namespace, argv: Sequence[str], prompter: Optional[ConsolePrompter]) -> SynthesisResult:
        _configure_logging(ns.json_logs or json_logs_requested(argv), verbose=ns.verbose)

        console = prompter or ConsolePrompter()
        store = OptionsConfigStore(resolve_config_path(ns.config), console)
        config = store.get_or_create()
        if config is None:
            return SynthesisResult(aborted=True)
        return OptionsPipeline(console).run(config, ns.paths)

    @staticmethod
    def run(argv: Sequence[str], *, prompter: Optional[ConsolePrompter] = None,
            stdout: Optional[TextIO] = None) -> int:
        """Run the front end and return the process exit code."""
        ns = _build_parser().parse_args(list(argv))
        try:
            result = EsdDrop._build(ns, argv, prompter)
        except ConfigError as exc:
            logger.error('%s', exc)
            return EXIT_FAILED

        if result.aborted:
            return EXIT_ABORTED
        if not result.ok:
            return EXIT_FAILED

        converter = ns.converter or os.getenv('ESDDROP_CONVERTER')
        if converter:
            return _run_converter(converter, result.arguments)
        print(shlex.join(result.arguments), file=stdout or sys.stdout)
        return EXIT_OK


def main() -> NoReturn:
    """Entry point for `esddrop` and `python -m esddrop`."""
    try:
        raise SystemExit(EsdDrop.run(sys.argv[1:]))
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(EXIT_ABORTED)
    except BrokenPipeError:
        raise SystemExit(EXIT_OK)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(EXIT_FAILED)


if __name__ == '__main__':
    main()
