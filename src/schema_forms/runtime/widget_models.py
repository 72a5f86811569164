"""
Widget Models - the mutable value holders behind rendered fields.

Each constructed component owns exactly one cell. The render layer writes
user input into the cell and may subscribe to changes; the value collector
only reads.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Generic, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T, T], None]


class ValueCell(Generic[T]):
    """
    Observable single-value cell.

    ``set`` notifies subscribers with ``(old, new)`` when the value actually
    changes. Subscribers are called in subscription order.
    """

    def __init__(self, initial: T):
        self._value = initial
        self._listeners: List[Listener] = []

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        old = self._value
        if old == value:
            return
        self._value = value
        for listener in list(self._listeners):
            listener(old, value)

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self.set(value)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a change listener.

        Returns:
            Callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


class TextModel(ValueCell[str]):
    """Free text entered into a form field."""

    def __init__(self, initial: str = ""):
        super().__init__(initial)


class DateTimeModel(ValueCell[datetime]):
    """Date or time selection; starts at the current timestamp."""

    def __init__(self, initial: Optional[datetime] = None):
        super().__init__(initial if initial is not None else datetime.now())


class SelectionModel(ValueCell[str]):
    """Selected option of a picker."""

    def __init__(self, initial: str = ""):
        super().__init__(initial)

    @classmethod
    def for_options(cls, options: List[str]) -> "SelectionModel":
        return cls(options[0] if options else "")


class BooleanModel(ValueCell[bool]):
    """On/off state shared by checkbox and toggle fields."""

    def __init__(self, initial: bool = True):
        super().__init__(initial)


@dataclass(frozen=True)
class FileSelection:
    """Bytes and file name of a picked file."""

    data: bytes
    name: str


class FileModel(ValueCell[Optional[FileSelection]]):
    """Picked file; empty until a selection has been read."""

    def __init__(self, initial: Optional[FileSelection] = None):
        super().__init__(initial)

    @property
    def data(self) -> Optional[bytes]:
        selection = self.get()
        return selection.data if selection else None

    @property
    def name(self) -> Optional[str]:
        selection = self.get()
        return selection.name if selection else None

    def select(self, data: bytes, name: str) -> None:
        logger.debug(f"File selected: {name} ({len(data)} bytes)")
        self.set(FileSelection(data=data, name=name))

    def clear(self) -> None:
        if self.get() is not None:
            logger.debug(f"File selection cleared: {self.name}")
        self.set(None)


class NumericModel(ValueCell[float]):
    """Slider position."""

    def __init__(self, initial: float = 0):
        super().__init__(initial)
