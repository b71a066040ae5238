"""
In-memory model of a PickLE pick-list document.

    Document
      ├── properties: [Property, ...]       (document order)
      └── categories: [Category, ...]       (document order)
              └── components: [Component, ...]

A Component refers back to its Category by index into
``Document.categories``; resolve it with ``Document.category_of``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional


@dataclass
class Property:
    """A document-level ``name: value`` header entry."""

    name: str
    value: str

    def __str__(self) -> str:
        return f"{self.name}: {self.value}"


@dataclass
class Component:
    """
    One pick entry.

    Attributes:
        picked: Whether the part has already been picked.
        name: Part name, if known. The line grammar never sets it.
        value: Component value, e.g. "10k".
        description: Free text that follows the package.
        package: Footprint/package, e.g. "0805".
        refdes: Reference designators in source order; duplicates kept.
        category_index: Index of the owning Category in Document.categories.
        lineno: Source line number (0 when built programmatically).
    """

    picked: bool = False
    name: Optional[str] = None
    value: Optional[str] = None
    description: Optional[str] = None
    package: Optional[str] = None
    refdes: List[str] = field(default_factory=list)
    category_index: Optional[int] = None
    lineno: int = field(default=0, compare=False)

    @property
    def quantity(self) -> int:
        return len(self.refdes)

    def add_refdes(self, refdes: str) -> None:
        self.refdes.append(refdes)


@dataclass
class Category:
    """A named group of components, e.g. "Resistors"."""

    name: str
    components: List[Component] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[Component]:
        return iter(self.components)


@dataclass
class Document:
    """Root aggregate that owns every property, category and component."""

    properties: List[Property] = field(default_factory=list)
    categories: List[Category] = field(default_factory=list)
    source: Optional[str] = field(default=None, compare=False)

    # ------------------------------------------------------------------ #
    # Population
    # ------------------------------------------------------------------ #

    def add_property(self, prop: Property) -> Property:
        self.properties.append(prop)
        return prop

    def add_category(self, category: Category) -> int:
        """Append a category and return its index."""
        self.categories.append(category)
        return len(self.categories) - 1

    def add_component(self, component: Component, category_index: int) -> Component:
        """
        Attach a component to the category at ``category_index``.

        Raises:
            IndexError: if no such category exists.
        """
        if not 0 <= category_index < len(self.categories):
            raise IndexError(f"No category at index {category_index}")
        component.category_index = category_index
        self.categories[category_index].components.append(component)
        return component

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #

    def get_property(self, name: str) -> Optional[Property]:
        """Return the first property with this exact name, or None."""
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    def find_category(self, name: str) -> Optional[Category]:
        for category in self.categories:
            if category.name == name:
                return category
        return None

    def category_of(self, component: Component) -> Optional[Category]:
        idx = component.category_index
        if idx is None or not 0 <= idx < len(self.categories):
            return None
        return self.categories[idx]

    def iter_components(self) -> Iterator[Component]:
        """Yield every component in document order."""
        for category in self.categories:
            yield from category.components

    @property
    def components(self) -> List[Component]:
        return list(self.iter_components())

    def find_by_refdes(self, refdes: str) -> Optional[Component]:
        """Return the first component listing ``refdes``, or None."""
        for component in self.iter_components():
            if refdes in component.refdes:
                return component
        return None

    def picked_components(self) -> List[Component]:
        return [c for c in self.iter_components() if c.picked]

    def unpicked_components(self) -> List[Component]:
        return [c for c in self.iter_components() if not c.picked]

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return (
            f"<Document properties={len(self.properties)} "
            f"categories={len(self.categories)} "
            f"components={sum(len(c) for c in self.categories)}>"
        )
