"""
Components - a stable id paired with a render spec.

A render spec describes one widget variant and carries its UI model: the
static presentation arguments plus the widget model the user mutates.
Drawing is delegated to ``schema_forms.runtime.renderer``.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Union

from schema_forms.runtime.widget_models import (
    BooleanModel,
    DateTimeModel,
    FileModel,
    NumericModel,
    SelectionModel,
    TextModel,
    ValueCell,
)
from schema_forms.schemas.field_descriptor import FieldType


@dataclass(frozen=True)
class TextSpec:
    text: str
    font_type: Optional[str] = None
    font_color: Optional[str] = None


@dataclass(frozen=True)
class FormFieldSpec:
    hint: str
    model: TextModel
    label: Optional[str] = None


@dataclass(frozen=True)
class DatePickerSpec:
    label: str
    model: DateTimeModel


@dataclass(frozen=True)
class TimePickerSpec:
    label: str
    model: DateTimeModel


@dataclass(frozen=True)
class PickerSpec:
    label: Optional[str]
    model: SelectionModel
    options: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class CheckboxSpec:
    label: str
    model: BooleanModel


@dataclass(frozen=True)
class ToggleSpec:
    label: str
    model: BooleanModel


@dataclass(frozen=True)
class FilePickerSpec:
    label: Optional[str]
    button_text: str
    model: FileModel


@dataclass(frozen=True)
class SliderSpec:
    label: Optional[str]
    model: NumericModel
    min_value: float = 0
    max_value: float = 100
    step: Optional[float] = None


RenderSpec = Union[
    TextSpec,
    FormFieldSpec,
    DatePickerSpec,
    TimePickerSpec,
    PickerSpec,
    CheckboxSpec,
    ToggleSpec,
    FilePickerSpec,
    SliderSpec,
]


@dataclass(frozen=True)
class Component:
    """
    A constructed field, ready to be drawn.

    Attributes:
        unique_id: Copied from the descriptor id
        field_type: Field type the factory built this component for
        spec: Render spec (variant + UI model)
    """

    unique_id: str
    field_type: FieldType
    spec: RenderSpec

    @property
    def model(self) -> Optional[ValueCell]:
        """Widget model backing this component, None for display-only text."""
        return getattr(self.spec, "model", None)

    def render(self) -> Any:
        """Draw the component with Streamlit and return the widget result."""
        from schema_forms.runtime.renderer import render_component

        return render_component(self)
