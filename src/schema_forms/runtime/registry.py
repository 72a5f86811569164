"""
Component Registry - the ordered components of the current page.

Built once per page load. Loading is all-or-nothing: components are built
into a local list and only published once the whole layout has been read
and built. A failing source leaves the registry empty.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from schema_forms.errors import SchemaLoadError
from schema_forms.runtime.components import Component
from schema_forms.runtime.schema_loader import SchemaSource
from schema_forms.runtime.widget_factory import WidgetFactory
from schema_forms.schemas.field_descriptor import FieldDescriptor

logger = logging.getLogger(__name__)


class ComponentRegistry:
    """Append-only, ordered collection of components."""

    def __init__(self, factory: type[WidgetFactory] = WidgetFactory):
        self._factory = factory
        self._components: List[Component] = []
        self._by_id: Dict[str, Component] = {}
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def components(self) -> Tuple[Component, ...]:
        return tuple(self._components)

    def load(self, source: SchemaSource) -> int:
        """
        Read the layout from ``source`` and build its components.

        Args:
            source: Zero-argument callable returning descriptors

        Returns:
            Number of components in the registry afterwards. 0 if the
            source failed; the error is logged, not raised.
        """
        if self._loaded:
            logger.debug("Registry already loaded, skipping")
            return len(self._components)

        try:
            descriptors = source()
        except SchemaLoadError as e:
            logger.error(f"Failed to load layout: {e}")
            return 0

        return self.load_descriptors(descriptors)

    def load_descriptors(self, descriptors: List[FieldDescriptor]) -> int:
        """
        Build and publish components for already-decoded descriptors.

        A no-op once the registry is loaded. An id seen earlier in the
        layout is built as a diagnostic text component, since two input
        widgets cannot share a widget key.

        Returns:
            Number of components in the registry afterwards
        """
        if self._loaded:
            logger.debug("Registry already loaded, skipping")
            return len(self._components)

        built: List[Component] = []
        seen = set()
        for descriptor in descriptors:
            if descriptor.id in seen:
                logger.warning(f"Duplicate component id '{descriptor.id}'")
                built.append(
                    self._factory.fallback(descriptor, f"Duplicate field id '{descriptor.id}'")
                )
                continue
            seen.add(descriptor.id)
            built.append(self._factory.build(descriptor))

        for component in built:
            self._components.append(component)
            self._by_id.setdefault(component.unique_id, component)
        self._loaded = True
        logger.info(f"Registry loaded with {len(self._components)} components")
        return len(self._components)

    def get(self, unique_id: str) -> Optional[Component]:
        """Return the first component with ``unique_id``, or None."""
        return self._by_id.get(unique_id)

    def reset(self) -> None:
        """Drop all components so the page can be loaded again."""
        self._components = []
        self._by_id = {}
        self._loaded = False

    def __iter__(self) -> Iterator[Component]:
        return iter(tuple(self._components))

    def __len__(self) -> int:
        return len(self._components)

    def __contains__(self, unique_id: object) -> bool:
        return unique_id in self._by_id
