"""Selection cursor: the active category and the highlighted item within it."""

from __future__ import annotations

from command_runner.catalog import Catalog, CatalogItem
from command_runner.tui.events import CategoryChanged, ItemChosen


class SelectionCursor:
    """Tracks ``category_index`` and ``item_index`` over an immutable catalog.

    Both indices are 0 for an empty catalog or an empty category; callers check
    ``active_items()`` before resolving an item.
    """

    def __init__(self, catalog: Catalog):
        self._catalog = catalog
        self.category_index = 0
        self.item_index = 0

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def active_items(self) -> tuple[CatalogItem, ...]:
        if not self._catalog.categories:
            return ()
        return self._catalog.category(self.category_index).items

    def active_item(self) -> CatalogItem | None:
        items = self.active_items()
        return items[self.item_index] if 0 <= self.item_index < len(items) else None

    def select_category(self, index: int) -> CategoryChanged:
        """Make ``index`` the active category and reset the item cursor.

        Raises:
            IndexError: If ``index`` is not a valid category index.
        """
        self._catalog.category(index)
        self.category_index = index
        self.item_index = 0
        return CategoryChanged(index)

    def select_item(self, index: int) -> ItemChosen:
        """Confirm ``index`` within the active category.

        Raises:
            IndexError: If the active category has no item at ``index``.
        """
        if not 0 <= index < len(self.active_items()):
            raise IndexError(f"item index out of range: {index}")
        self.item_index = index
        return ItemChosen(self.category_index, index)
