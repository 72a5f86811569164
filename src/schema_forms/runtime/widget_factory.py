"""
Widget Factory - maps field descriptors to components.

Dispatches on the descriptor's field type (a closed enum, so the factory is
a total function) and allocates a fresh widget model for every component.

Type Mappings:
- text -> TextSpec (display only, no model)
- form_field -> FormFieldSpec + TextModel("")
- date / time -> DatePickerSpec / TimePickerSpec + DateTimeModel(now)
- picker -> PickerSpec + SelectionModel(first option)
- checkbox / toggle -> CheckboxSpec / ToggleSpec + BooleanModel(True)
- filepicker -> FilePickerSpec + FileModel(empty)
- slider -> SliderSpec + NumericModel(0)
- anything else -> TextSpec with a diagnostic message

A malformed layout entry must never abort page construction, so ``build``
does not raise.
"""

import logging
import math
from typing import Callable, Dict, Iterable, List, Optional

from schema_forms.errors import UnknownFieldTypeError
from schema_forms.runtime.components import (
    CheckboxSpec,
    Component,
    DatePickerSpec,
    FilePickerSpec,
    FormFieldSpec,
    PickerSpec,
    SliderSpec,
    TextSpec,
    TimePickerSpec,
    ToggleSpec,
)
from schema_forms.runtime.widget_models import (
    BooleanModel,
    DateTimeModel,
    FileModel,
    NumericModel,
    SelectionModel,
    TextModel,
)
from schema_forms.schemas.field_descriptor import FieldDescriptor, FieldType

logger = logging.getLogger(__name__)

SLIDER_DEFAULT_MIN = 0.0
SLIDER_DEFAULT_MAX = 100.0


class WidgetFactory:
    """
    Factory for creating components from layout descriptors.

    Each builder receives the descriptor and returns the render spec; the
    factory wraps it into a Component tagged with the field type.
    """

    @staticmethod
    def _parse_number(raw: Optional[str], default: Optional[float]) -> Optional[float]:
        """
        Parse a numeric argument.

        Args:
            raw: Raw string from the descriptor args (may be None)
            default: Value to use when raw is absent or not a finite number

        Returns:
            Parsed number or the default
        """
        if raw is None:
            return default
        try:
            value = float(raw.strip())
        except (TypeError, ValueError):
            logger.debug(f"Could not parse number from {raw!r}, using {default}")
            return default
        if not math.isfinite(value):
            return default
        return value

    @staticmethod
    def _build_text(descriptor: FieldDescriptor) -> TextSpec:
        return TextSpec(
            text=descriptor.arg("text", ""),
            font_type=descriptor.arg("fontType"),
            font_color=descriptor.arg("fontColor"),
        )

    @staticmethod
    def _build_form_field(descriptor: FieldDescriptor) -> FormFieldSpec:
        return FormFieldSpec(
            hint=descriptor.arg("hint", ""),
            model=TextModel(""),
            label=descriptor.arg("label"),
        )

    @staticmethod
    def _build_date(descriptor: FieldDescriptor) -> DatePickerSpec:
        return DatePickerSpec(label=descriptor.arg("label", ""), model=DateTimeModel())

    @staticmethod
    def _build_time(descriptor: FieldDescriptor) -> TimePickerSpec:
        return TimePickerSpec(label=descriptor.arg("label", ""), model=DateTimeModel())

    @staticmethod
    def _build_picker(descriptor: FieldDescriptor) -> PickerSpec:
        # Missing options render an empty picker rather than failing the load
        options = list(descriptor.options or [])
        return PickerSpec(
            label=descriptor.arg("label"),
            model=SelectionModel.for_options(options),
            options=options,
        )

    @staticmethod
    def _build_checkbox(descriptor: FieldDescriptor) -> CheckboxSpec:
        return CheckboxSpec(label=descriptor.arg("label", ""), model=BooleanModel(True))

    @staticmethod
    def _build_toggle(descriptor: FieldDescriptor) -> ToggleSpec:
        return ToggleSpec(label=descriptor.arg("label", ""), model=BooleanModel(True))

    @staticmethod
    def _build_filepicker(descriptor: FieldDescriptor) -> FilePickerSpec:
        return FilePickerSpec(
            label=descriptor.arg("label"),
            button_text=descriptor.arg("buttonText", ""),
            model=FileModel(),
        )

    @staticmethod
    def _build_slider(descriptor: FieldDescriptor) -> SliderSpec:
        min_value = WidgetFactory._parse_number(descriptor.arg("min"), SLIDER_DEFAULT_MIN)
        max_value = WidgetFactory._parse_number(descriptor.arg("max"), SLIDER_DEFAULT_MAX)
        step = WidgetFactory._parse_number(descriptor.arg("step"), None)

        if min_value >= max_value:
            logger.warning(
                f"Slider '{descriptor.id}' has min {min_value} >= max {max_value}, "
                f"using {SLIDER_DEFAULT_MIN}..{SLIDER_DEFAULT_MAX}"
            )
            min_value, max_value = SLIDER_DEFAULT_MIN, SLIDER_DEFAULT_MAX
        if step is not None and step <= 0:
            step = None

        return SliderSpec(
            label=descriptor.arg("label"),
            model=NumericModel(0),
            min_value=min_value,
            max_value=max_value,
            step=step,
        )

    @staticmethod
    def _build_unknown(descriptor: FieldDescriptor) -> TextSpec:
        raise UnknownFieldTypeError(descriptor.id, descriptor.type)

    @staticmethod
    def fallback(descriptor: FieldDescriptor, message: str) -> Component:
        """
        Build the diagnostic text component shown for a broken layout entry.

        Args:
            descriptor: The entry that could not be built
            message: Diagnostic text; should embed the descriptor id

        Returns:
            Text component tagged FieldType.UNKNOWN
        """
        return Component(
            unique_id=descriptor.id,
            field_type=FieldType.UNKNOWN,
            spec=TextSpec(text=message, font_type=None, font_color=descriptor.arg("fontColor")),
        )

    @staticmethod
    def build(descriptor: FieldDescriptor) -> Component:
        """
        Create a component for a descriptor.

        Args:
            descriptor: Parsed layout entry

        Returns:
            Component whose unique_id equals descriptor.id. Unknown types and
            entries that fail to build yield a diagnostic text component.
        """
        field_type = descriptor.field_type
        builder = _BUILDERS[field_type]

        try:
            spec = builder(descriptor)
        except UnknownFieldTypeError as e:
            logger.warning(str(e))
            return WidgetFactory.fallback(descriptor, str(e))
        except Exception as e:
            logger.exception(f"Failed to build field '{descriptor.id}' of type '{descriptor.type}'")
            return WidgetFactory.fallback(
                descriptor, f"Could not build field '{descriptor.id}': {e}"
            )

        return Component(unique_id=descriptor.id, field_type=field_type, spec=spec)

    @staticmethod
    def build_all(descriptors: Iterable[FieldDescriptor]) -> List[Component]:
        """Build components for descriptors, preserving order."""
        return [WidgetFactory.build(descriptor) for descriptor in descriptors]


_BUILDERS: Dict[FieldType, Callable[[FieldDescriptor], object]] = {
    FieldType.TEXT: WidgetFactory._build_text,
    FieldType.FORM_FIELD: WidgetFactory._build_form_field,
    FieldType.DATE: WidgetFactory._build_date,
    FieldType.TIME: WidgetFactory._build_time,
    FieldType.PICKER: WidgetFactory._build_picker,
    FieldType.CHECKBOX: WidgetFactory._build_checkbox,
    FieldType.TOGGLE: WidgetFactory._build_toggle,
    FieldType.FILEPICKER: WidgetFactory._build_filepicker,
    FieldType.SLIDER: WidgetFactory._build_slider,
    FieldType.UNKNOWN: WidgetFactory._build_unknown,
}
