"""Library document model: the whole remote payload."""

import logging
from dataclasses import dataclass, field
from typing import Any

from portallib.models.category import Category

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Library:
    """The full portal library document.

    Attributes:
        categories: Categories in document order
    """

    categories: list[Category] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: Any) -> "Library":
        """Create Library from the decoded JSON body.

        A missing or malformed category list degrades to an empty library
        instead of failing.

        Args:
            data: Decoded JSON document

        Returns:
            Library instance
        """
        categories_data = data.get("Categorys") if isinstance(data, dict) else None

        if not isinstance(categories_data, list):
            logger.warning("Document has no category list, treating as empty")
            return cls()

        categories = []
        for cat_data in categories_data:
            try:
                categories.append(Category.from_api_response(cat_data))
            except ValueError as e:
                logger.warning(f"Failed to parse category: {e}")
                continue

        return cls(categories=categories)

    @property
    def category_names(self) -> list[str]:
        return [category.name for category in self.categories]

    def find_category(self, name: str) -> Category | None:
        """Return the first category with the given name, if any."""
        for category in self.categories:
            if category.name == name:
                return category
        return None
