from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates file-naming conventions and converter flag names to
reduce cross-module coupling.
"""

SCRIPT_SUFFIX: str = '.py'
ARCHIVE_SUFFIXES: tuple[str, ...] = ('.esd', '.esd.dcx')
BUNDLE_SUFFIXES: tuple[str, ...] = ('.talkesdbnd', '.talkesdbnd.dcx')
BUNDLE_MARKER: str = '.talkesdbnd'

# Tails used when looking up the bundle behind an '-only' directory.
BUNDLE_FAMILY_TAILS: tuple[str, ...] = ('esdbnd', 'esdbnd.dcx')
ONLY_DIR_SUFFIX: str = '-only'

# Placeholder expanded by the converter, never by esddrop.
OUTPUT_PLACEHOLDER: str = '%e'

OP_WRITE_BND_FILE: str = 'writebndfile'
OP_WRITE_BND: str = 'writebnd'
OP_WRITE_LOOSE: str = 'writeloose'
OP_WRITE_PY: str = 'writepy'

CONFIG_FILENAME: str = 'esdtoolconfig.json'

SUPPORTED_GAMES: tuple[str, ...] = (
    'des',
    'ds1',
    'ds1r',
    'bb',
    'ds2',
    'ds2s',
    'ds3',
    'sdt',
    'er',
    'ac6',
)
