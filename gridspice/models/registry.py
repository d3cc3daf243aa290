"""
ElementRegistry - Slot arena of placed elements.

This module contains no Qt dependencies. Ids are small integers that
are recycled: a freed id goes on a stack and is handed out again before
any new id is minted.
"""

import logging
from typing import Iterator, Optional

from .element import ElementData

logger = logging.getLogger(__name__)


class ElementRegistry:
    """
    Mapping of element id to ElementData with id reuse.

    The next id is the most recently freed one, or the number of live
    elements when nothing has been freed. An id is never held by two
    live elements at once.
    """

    def __init__(self):
        self._elements: dict[int, ElementData] = {}
        self._free_ids: list[int] = []

    def add(self, element: ElementData) -> int:
        """Store an element under a freshly allocated id and return the id."""
        element_id = self._free_ids.pop() if self._free_ids else len(self._elements)
        element.element_id = element_id
        self._elements[element_id] = element
        logger.debug("Registered %s", element)
        return element_id

    def remove(self, element_id: int) -> Optional[ElementData]:
        """
        Remove an element and recycle its id.

        Unknown ids are ignored.

        Returns:
            The removed element, or None if the id was not live.
        """
        element = self._elements.pop(element_id, None)
        if element is None:
            return None
        self._free_ids.append(element_id)
        return element

    def get(self, element_id: int) -> Optional[ElementData]:
        return self._elements.get(element_id)

    def ids(self) -> list[int]:
        """Return live ids in ascending order."""
        return sorted(self._elements)

    def free_ids(self) -> list[int]:
        """Return a copy of the free-id stack (top is last)."""
        return list(self._free_ids)

    def clear(self) -> None:
        self._elements.clear()
        self._free_ids.clear()

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._elements

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[ElementData]:
        """Iterate live elements in ascending id order."""
        return iter([self._elements[i] for i in sorted(self._elements)])

    def __repr__(self) -> str:
        return f"ElementRegistry(live={len(self._elements)}, free={self._free_ids})"
