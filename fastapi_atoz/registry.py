"""Registry of categories that support alphabetic sorting."""

from typing import Iterable, Iterator, Optional, Union

CategoryArg = Union[str, Iterable[str], None]


class CapabilityRegistry:
    """
    Set of categories that allow alphabetic ordering and filtering.

    A request scoped to several categories is only eligible when every one of
    them is registered.

    Example:
        registry = CapabilityRegistry(["book", "author"])
        registry.supports("book")              # True
        registry.supports(["book", "review"])  # False
    """

    def __init__(self, categories: Iterable[str] = ()):
        self._categories: set[str] = set(categories)

    def add_support(self, *categories: str) -> "CapabilityRegistry":
        """Register categories. Returns self for chaining."""
        self._categories.update(categories)
        return self

    def remove_support(self, *categories: str) -> "CapabilityRegistry":
        """Unregister categories. Unknown names are ignored."""
        self._categories.difference_update(categories)
        return self

    def supports(self, category: Optional[CategoryArg]) -> bool:
        """
        Check whether a category, or every category in a collection, is supported.

        Args:
            category: A category name or a collection of names

        Returns:
            bool: False for missing or empty input, otherwise AND across members
        """
        if not category:
            return False
        if isinstance(category, str):
            return category in self._categories
        try:
            members = list(category)
        except TypeError:
            return False
        if not members:
            return False
        return all(isinstance(m, str) and m in self._categories for m in members)

    def __contains__(self, category: object) -> bool:
        return category in self._categories

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._categories))

    def __len__(self) -> int:
        return len(self._categories)
