"""
Value Collector - gathers current widget values into a flat result list.

For each component in registry order the collector resolves the type from
the id prefix, checks it against the type the component was built for, and
applies that type's extraction rule. Components without a rule, with an
unrecognized prefix or with a prefix/type mismatch contribute nothing, so
the result is not positionally aligned with the registry.

Collected types:
- form_field -> raw string
- date -> YYYY-MM-DD
- time -> HH:MM
- picker -> selected option, verbatim
- checkbox -> "true" / "false"

toggle, filepicker and slider are not collected unless
``collect_extended_types`` is enabled.
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional

from schema_forms.runtime.components import Component
from schema_forms.runtime.widget_models import FileModel
from schema_forms.schemas.field_descriptor import FieldType, id_prefix

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

Extractor = Callable[[Component], Optional[str]]


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def format_number(value: float) -> str:
    """Render a number, dropping the fractional part when it is integral."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _extract_text(component: Component) -> Optional[str]:
    return component.model.get()


def _extract_date(component: Component) -> Optional[str]:
    return component.model.get().strftime(DATE_FORMAT)


def _extract_time(component: Component) -> Optional[str]:
    return component.model.get().strftime(TIME_FORMAT)


def _extract_selection(component: Component) -> Optional[str]:
    return component.model.get()


def _extract_bool(component: Component) -> Optional[str]:
    return format_bool(component.model.get())


def _extract_number(component: Component) -> Optional[str]:
    return format_number(component.model.get())


def _extract_file_name(component: Component) -> Optional[str]:
    model = component.model
    return model.name if isinstance(model, FileModel) else None


EXTRACTORS: Dict[FieldType, Extractor] = {
    FieldType.FORM_FIELD: _extract_text,
    FieldType.DATE: _extract_date,
    FieldType.TIME: _extract_time,
    FieldType.PICKER: _extract_selection,
    FieldType.CHECKBOX: _extract_bool,
}

# Not collected by default: toggle shares the checkbox model but was never
# part of the submitted values.
EXTENDED_EXTRACTORS: Dict[FieldType, Extractor] = {
    FieldType.TOGGLE: _extract_bool,
    FieldType.SLIDER: _extract_number,
    FieldType.FILEPICKER: _extract_file_name,
}


class ValueCollector:
    """
    Extracts the current values of a registry.

    ``collect`` only reads widget models, so calling it twice without user
    input in between returns the same list.
    """

    def __init__(self, collect_extended_types: bool = False):
        self._extractors: Dict[FieldType, Extractor] = dict(EXTRACTORS)
        if collect_extended_types:
            self._extractors.update(EXTENDED_EXTRACTORS)

    def extract(self, component: Component) -> Optional[str]:
        """
        Extract one component's value.

        Returns:
            The formatted value, or None when the component has nothing to
            contribute
        """
        prefix = id_prefix(component.unique_id)
        prefix_type = FieldType.from_prefix(prefix)
        if prefix_type is None:
            logger.debug(f"No extraction rule for id prefix '{prefix}' ({component.unique_id})")
            return None

        if prefix_type is not component.field_type:
            logger.debug(
                f"Id prefix '{prefix}' does not match field type "
                f"'{component.field_type.value}' for {component.unique_id}, skipping"
            )
            return None

        extractor = self._extractors.get(prefix_type)
        if extractor is None or component.model is None:
            return None
        return extractor(component)

    def collect(self, components: Iterable[Component]) -> List[str]:
        """
        Collect values in iteration order.

        Args:
            components: Registry (or any iterable of components)

        Returns:
            Values for components that produced one
        """
        values = []
        for component in components:
            value = self.extract(component)
            if value is not None:
                values.append(value)
        return values
