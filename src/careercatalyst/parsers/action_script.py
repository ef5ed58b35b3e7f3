"""Load action scripts (YAML or JSON lists of actions) and replay them."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from careercatalyst.exceptions import ActionParseError
from careercatalyst.models.actions import Action, UnrecognizedAction, parse_action
from careercatalyst.store.dispatcher import CVStore

logger = logging.getLogger(__name__)


def parse_action_script(text: str, *, fmt: str = "yaml") -> list[Action | UnrecognizedAction]:
    """Parse script text into actions.

    The script is either a list of action mappings or a mapping with an
    ``actions`` list. JSON is accepted by the YAML parser as well.
    """
    try:
        data = json.loads(text) if fmt == "json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ActionParseError(f"Could not parse action script: {e}") from e

    if data is None:
        return []
    if isinstance(data, dict):
        data = data.get("actions", [])
    if not isinstance(data, list):
        raise ActionParseError("Action script must be a list of actions")

    actions = []
    for i, item in enumerate(data):
        try:
            actions.append(parse_action(item))
        except ActionParseError as e:
            raise ActionParseError(f"Action #{i + 1}: {e}") from e
    return actions


def load_action_script(path: str | Path) -> list[Action | UnrecognizedAction]:
    """Load an action script from a .yaml/.yml/.json file."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Action script not found: {p}")
    fmt = "json" if p.suffix.lower() == ".json" else "yaml"
    return parse_action_script(p.read_text(encoding="utf-8"), fmt=fmt)


def replay(store: CVStore, actions: list[Action | UnrecognizedAction]) -> None:
    """Dispatch ``actions`` to ``store`` in order."""
    for action in actions:
        store.dispatch(action)
    logger.debug("Replayed %d actions, store version %d", len(actions), store.version)
