"""Catalog model: categories of actionable items, and the document loader.

// [LAW:one-source-of-truth] The kind enum IS the action discriminator.
// [LAW:single-enforcer] parse_catalog is the sole catalog validation boundary.

The catalog is loaded once at startup and never mutated.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import command_runner.action_config

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Catalog document is missing, unreadable, or malformed."""


class ActionKind(Enum):
    """What confirming an item does. Values are the document's ``type`` strings."""

    RUN_COMMAND = "command"
    COPY_TEXT = "copy"
    INTERNAL_ACTION = "internal"


@dataclass(frozen=True)
class CatalogItem:
    """One actionable entry.

    ``payload`` is the command text for RUN_COMMAND, the action identifier for
    INTERNAL_ACTION and the display name for COPY_TEXT.
    """

    name: str
    kind: ActionKind
    payload: str


@dataclass(frozen=True)
class Category:
    name: str
    items: tuple[CatalogItem, ...] = ()


@dataclass(frozen=True)
class Catalog:
    categories: tuple[Category, ...] = ()

    def __len__(self) -> int:
        return len(self.categories)

    def category(self, index: int) -> Category:
        if not 0 <= index < len(self.categories):
            raise IndexError(f"category index out of range: {index}")
        return self.categories[index]

    def item(self, category_index: int, item_index: int) -> CatalogItem:
        items = self.category(category_index).items
        if not 0 <= item_index < len(items):
            raise IndexError(f"item index out of range: {item_index}")
        return items[item_index]


# ─── Parse boundary ───────────────────────────────────────────────────────────


def _require_str(raw: dict, key: str, where: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str):
        raise CatalogError(f"{where}: '{key}' must be a string")
    return value


def _parse_item(raw: object, where: str) -> CatalogItem:
    if not isinstance(raw, dict):
        raise CatalogError(f"{where}: expected an object")
    name = _require_str(raw, "name", where)
    type_str = raw.get("type")
    try:
        kind = ActionKind(type_str)
    except ValueError:
        raise CatalogError(f"{where}: unknown item type {type_str!r}") from None

    if kind is ActionKind.RUN_COMMAND:
        command = raw.get("command")
        if not isinstance(command, str) or not command.strip():
            raise CatalogError(f"{where}: 'command' items need a non-empty 'command'")
        return CatalogItem(name=name, kind=kind, payload=command)

    if kind is ActionKind.INTERNAL_ACTION:
        action = raw.get("action")
        if not isinstance(action, str) or not action.strip():
            raise CatalogError(f"{where}: 'internal' items need a non-empty 'action'")
        if action not in command_runner.action_config.INTERNAL_ACTION_IDS:
            logger.warning("%s: unrecognized internal action %r will be ignored", where, action)
        return CatalogItem(name=name, kind=kind, payload=action)

    return CatalogItem(name=name, kind=kind, payload=name)


def _parse_category(raw: object, where: str) -> Category:
    if not isinstance(raw, dict):
        raise CatalogError(f"{where}: expected an object")
    name = _require_str(raw, "name", where)
    items_raw = raw.get("items", [])
    if not isinstance(items_raw, list):
        raise CatalogError(f"{where}: 'items' must be a list")
    items = tuple(
        _parse_item(item, f"{where}.items[{i}]") for i, item in enumerate(items_raw)
    )
    return Category(name=name, items=items)


def parse_catalog(raw: object) -> Catalog:
    """Validate a decoded catalog document and build the immutable Catalog.

    Raises:
        CatalogError: On the first defect found; nothing partial is returned.
    """
    if not isinstance(raw, dict):
        raise CatalogError("catalog: expected a JSON object at top level")
    categories_raw = raw.get("categories")
    if not isinstance(categories_raw, list):
        raise CatalogError("catalog: 'categories' must be a list")
    categories = tuple(
        _parse_category(cat, f"categories[{i}]") for i, cat in enumerate(categories_raw)
    )
    return Catalog(categories=categories)


def load_catalog(path: str | Path) -> Catalog:
    """Read and validate the catalog document at ``path``."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise CatalogError(f"catalog file not found: {path}") from None
    except (OSError, UnicodeDecodeError) as e:
        raise CatalogError(f"cannot read catalog file {path}: {e}") from e
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogError(f"invalid JSON in {path}: {e}") from e
    catalog = parse_catalog(raw)
    logger.info(
        "Loaded catalog %s: %d categories, %d items",
        path,
        len(catalog.categories),
        sum(len(c.items) for c in catalog.categories),
    )
    return catalog
