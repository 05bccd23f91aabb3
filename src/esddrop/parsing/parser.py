# esddrop/parsing/parser.py
from __future__ import annotations

import argparse


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser for a drag-and-drop run.

    Notes:
        - Everything the converter itself understands lives in the config
          file ('other_options'); this parser only covers the front end.
    """
    p = argparse.ArgumentParser(
        prog="esddrop",
        formatter_class=argparse.RawTextHelpFormatter,
        usage="%(prog)s [OPTIONS] PATH …",
        add_help=False,
        description=(
            "esddrop – drag-and-drop front end for the ESD converter\n"
            "Drop .py, .esd, .talkesdbnd files or script directories to build "
            "the matching converter command line."
        ),
    )

    g_in = p.add_argument_group("Inputs")
    g_run = p.add_argument_group("Execution")
    g_misc = p.add_argument_group("Miscellaneous")

    g_in.add_argument(
        "paths",
        metavar="PATH",
        nargs="+",
        help=(
            "Dropped files or directories. Scripts compile to loose ESDs, ESDs and "
            "talk ESD BNDs decompile to scripts, and directories of scripts pack back "
            "into the BNDs next to them ('<name>-only' directories target one BND)."
        ),
    )
    g_in.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        dest="config",
        help=(
            "Config file to use or create. Defaults to ESDDROP_CONFIG or "
            "./esdtoolconfig.json."
        ),
    )

    g_run.add_argument(
        "--converter",
        metavar="CMD",
        dest="converter",
        help=(
            "Converter command to run with the generated arguments (quoted like "
            "'other_options'). Defaults to ESDDROP_CONVERTER. When unset, the "
            "arguments are printed instead."
        ),
    )

    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs in JSON format instead of plain text.",
    )
    g_misc.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="verbose",
        help="Log every classification decision.",
    )
    g_misc.add_argument(
        "--help",
        action="help",
        help="Show this help message and exit.",
    )
    return p
