from __future__ import annotations

"""
Persisted drag-and-drop configuration ('esdtoolconfig.json').

Search order for the config file (first hit wins):

1. Path given with ``--config``.
2. Path in the ``ESDDROP_CONFIG`` environment variable.
3. ``esdtoolconfig.json`` in the current directory.

When the file does not exist, `OptionsConfigStore.get_or_create` walks
the user through a short guided setup (game, base directory, backups)
and writes the result, so the next drop runs without questions.
"""

import json
import os
from pathlib import Path
from typing import Optional, Protocol, Sequence

from esddrop.constants import CONFIG_FILENAME, SUPPORTED_GAMES
from esddrop.core.errors import ConfigError
from esddrop.core.models import Configuration
from esddrop.logging.helpers import get_logger

log = get_logger("config")


class GuidedPromptProtocol(Protocol):
    def say(self, text: str = "") -> None: ...

    def choose(self, question: str, choices: Sequence[str]) -> Optional[str]: ...

    def ask_directory(self, question: str) -> Optional[str]: ...

    def confirm(self, question: str, *, default: bool = False) -> Optional[bool]: ...


def resolve_config_path(explicit: Optional[str] = None) -> Path:
    """Return the config path following the documented search order."""
    if explicit:
        return Path(explicit).expanduser().absolute()
    env_override = os.getenv("ESDDROP_CONFIG")
    if env_override:
        return Path(env_override).expanduser().absolute()
    return Path.cwd() / CONFIG_FILENAME


class OptionsConfigStore:
    def __init__(self, path: Path, prompter: GuidedPromptProtocol, *,
                 games: Sequence[str] = SUPPORTED_GAMES) -> None:
        self.path = Path(path)
        self._prompter = prompter
        self._games = tuple(games)

    def load(self) -> Configuration:
        """Parse the config file.

        Raises:
            ConfigError: The file is not UTF-8, not a JSON object, or has
                fields of the wrong type.
        """
        try:
            data = json.loads(self.path.read_text(encoding="utf-8-sig"))
            if not isinstance(data, dict):
                raise TypeError(f"expected a JSON object, got {type(data).__name__}")
            return Configuration.from_json(data)
        except (ValueError, TypeError) as exc:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
            log.debug("cannot load %s: %s", self.path, exc)
            raise ConfigError(
                f"Failed to parse {self.path}. Please either fix it or delete it so it can be recreated."
            ) from exc

    def save(self, config: Configuration) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(config.to_json(), indent=2) + "\n", encoding="utf-8")

    # -------- Guided creation --------

    def create(self) -> Optional[Configuration]:
        """Run the guided setup and write the file; None if input ran out."""
        p = self._prompter
        p.say(f"Creating {self.path}")
        p.say()
        game = p.choose("Select a game type", self._games)
        if game is None:
            return None
        p.say()
        p.say("Unpack your game with UXM/UDSFM and paste the game directory here.")
        base_dir = p.ask_directory(f"Enter {game} game directory")
        if base_dir is None:
            return None
        p.say()
        backup = p.confirm("Create backups of overwritten files")
        if backup is None:
            return None
        p.say()

        config = Configuration(game=game, base_dir=base_dir, backup=backup, extra={}, options="")
        p.say(f"Writing config {self.path}")
        p.say()
        p.say("Use the command line interface directly for advanced functionality. You can also edit the config.")
        p.say()
        self.save(config)
        log.info("wrote %s", self.path)
        return config

    def get_or_create(self) -> Optional[Configuration]:
        if self.path.is_file():
            config = self.load()
            self._prompter.say(f"Using config {self.path}")
            self._prompter.say()
            log.debug("loaded %s", self.path)
            return config
        return self.create()
