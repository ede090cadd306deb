"""
Content module for the battle tracker.

Loads the catalog of normalized combatant and spell templates from JSON files.
Records are expected to be normalized already; invalid records are skipped
with a warning and duplicate ids keep the first occurrence.
"""

import json
import re
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from catchery import log_warning
from pydantic import BaseModel, ValidationError

from battle_tracker.character.character_actions import SpellTemplate
from battle_tracker.character.main import CombatantTemplate

from .constants import DATA_DIR
from .utils import cprint

_Model = TypeVar("_Model", bound=BaseModel)


def catalog_id(name: str, source: str | None) -> str:
    """
    Builds the catalog id of an entry from its name and source book.

    Args:
        name (str): The entry name.
        source (str | None): The source book, if known.

    Returns:
        str: A lowercase, dash-separated id, e.g. "goblin-mm".

    """
    raw = f"{name}-{source}" if source else name
    return re.sub(r"\s+", "-", raw.strip().lower())


class ContentRepository:
    """
    By-id access to the combatant and spell templates of the catalog.

    Attributes:
        combatants (dict[str, CombatantTemplate]):
            Combatant templates keyed by catalog id.
        spells (dict[str, SpellTemplate]):
            Spell templates keyed by catalog id.

    """

    combatants: dict[str, CombatantTemplate]
    spells: dict[str, SpellTemplate]

    def __init__(self, data_dir: Path | None = None) -> None:
        self.combatants = {}
        self.spells = {}
        if data_dir is not None:
            self.reload(data_dir)

    @classmethod
    def bundled(cls) -> "ContentRepository":
        """Returns a repository loaded from the catalog shipped with the package."""
        return cls(DATA_DIR)

    def reload(self, root: Path) -> None:
        """
        (Re)load the catalog files from a directory.

        Args:
            root (Path):
                Directory holding ``bestiary.json`` and ``spells.json``.

        """
        self.combatants = _load_json_file(
            root / "bestiary.json",
            lambda data: _load_models(data, CombatantTemplate, "combatant"),
            "combatant templates",
        )
        self.spells = _load_json_file(
            root / "spells.json",
            lambda data: _load_models(data, SpellTemplate, "spell"),
            "spell templates",
        )

    def get_combatant(self, entry_id: str) -> CombatantTemplate | None:
        """Get a combatant template by id, or None if not found."""
        return self.combatants.get(entry_id)

    def get_spell(self, entry_id: str) -> SpellTemplate | None:
        """Get a spell template by id, or None if not found."""
        return self.spells.get(entry_id)

    def find_combatant(self, name: str) -> CombatantTemplate | None:
        """Get the first combatant template with the given name."""
        lowered = name.lower()
        return next(
            (t for t in self.combatants.values() if t.name.lower() == lowered),
            None,
        )


def _load_models(
    data: list[dict[str, Any]],
    model: type[_Model],
    kind: str,
) -> dict[str, _Model]:
    entries: dict[str, _Model] = {}
    for index, record in enumerate(data):
        try:
            entry = model.model_validate(record)
        except ValidationError as e:
            log_warning(
                f"Skipping invalid {kind} record",
                {"index": index, "errors": e.error_count(), "context": "content_loading"},
            )
            continue
        entry_id = record.get("id") or catalog_id(entry.name, getattr(entry, "source", None))
        if entry_id in entries:
            log_warning(
                f"Duplicate {kind} id, keeping the first one",
                {"id": entry_id, "context": "content_loading"},
            )
            continue
        entries[entry_id] = entry
    return entries


def _load_json_file(
    filepath: Path,
    loader_func: Callable[[list[dict]], dict[str, Any]],
    description: str,
) -> dict[str, Any]:
    """Helper to load and validate JSON files"""
    cprint(f"  Loading {description}...", style="bold green")
    try:
        if not filepath.is_file():
            raise FileNotFoundError(f"File not found: {filepath}")
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"Expected list in {filepath}, got {type(data).__name__}")
        return loader_func(data)
    except (json.JSONDecodeError, FileNotFoundError, ValueError) as e:
        raise ValueError(f"File {filepath} raised an error: {e}") from e
