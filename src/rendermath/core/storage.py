"""Single-precision component storage shared by vectors and quaternions.

Every entity keeps its components in one contiguous `array('f')`, in
declaration order. `data()` hands out a `memoryview` over that array so the
components can be copied straight into a graphics buffer without packing.

Usage:
    v = Vector3(1.0, 2.0, 3.0)
    with v.data() as view:
        view[0] = 5.0          # writes through to v.x
        gpu_buffer.write(view)  # any buffer-protocol consumer
"""

from __future__ import annotations

from array import array
from collections.abc import Iterator
from typing import Any, ClassVar, Self, overload

from rendermath.core.types import Components

STORAGE_FORMAT = "f"
"""array/struct format code of the component storage (32-bit float)."""


class ComponentField:
    """Descriptor exposing one slot of a ComponentBuffer as a named attribute."""

    __slots__ = ("index",)

    def __init__(self, index: int) -> None:
        self.index = index

    @overload
    def __get__(self, instance: None, owner: type | None = None) -> ComponentField: ...
    @overload
    def __get__(self, instance: ComponentBuffer, owner: type | None = None) -> float: ...
    def __get__(
        self, instance: ComponentBuffer | None, owner: type | None = None
    ) -> ComponentField | float:
        if instance is None:
            return self
        return instance._data[self.index]

    def __set__(self, instance: ComponentBuffer, value: float) -> None:
        instance._data[self.index] = value


class ComponentBuffer:
    """Base class for fixed-arity numeric value types.

    Subclasses declare their components as `ComponentField`s; the order of the
    indexes is the storage order. Instances compare by value and are mutable
    through component assignment, so they are not hashable.
    """

    __slots__ = ("_data",)

    _fields: ClassVar[tuple[str, ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        declared = {
            name: attr for name, attr in vars(cls).items() if isinstance(attr, ComponentField)
        }
        if declared:
            cls._fields = tuple(sorted(declared, key=lambda name: declared[name].index))

    def __init__(self, *components: float) -> None:
        if len(components) != len(self._fields):
            raise TypeError(
                f"{type(self).__name__} takes {len(self._fields)} components, "
                f"got {len(components)}"
            )
        self._data = array(STORAGE_FORMAT, components)

    @classmethod
    def from_iterable(cls, components: Any) -> Self:
        """Build an instance from any iterable of numbers in storage order."""
        return cls(*components)

    @classmethod
    def arity(cls) -> int:
        """Number of components of this type."""
        return len(cls._fields)

    def data(self, readonly: bool = False) -> memoryview:
        """Raw view over this instance's own component storage.

        The view is fixed-size and bounds-checked. Writes through a writable
        view change this instance. Use it as a context manager so the view is
        released when the consumer is done with it.

        Args:
            readonly: Return a view that rejects writes.

        Returns:
            memoryview of format 'f' and length equal to the arity.
        """
        view = memoryview(self._data)
        if readonly:
            return view.toreadonly()
        return view

    def astuple(self) -> Components:
        """Detached copy of the components as plain floats."""
        return tuple(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    @overload
    def __getitem__(self, index: int) -> float: ...
    @overload
    def __getitem__(self, index: slice) -> Components: ...
    def __getitem__(self, index: int | slice) -> float | Components:
        if isinstance(index, slice):
            return tuple(self._data[index])
        return self._data[index]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data  # type: ignore[attr-defined]

    __hash__ = None  # type: ignore[assignment]

    def __reduce__(self) -> tuple[type[Self], Components]:
        # Used by copy, deepcopy and pickle; never share the array
        return (type(self), self.astuple())

    def __repr__(self) -> str:
        parts = ", ".join(
            f"{name}={value!r}" for name, value in zip(self._fields, self._data, strict=True)
        )
        return f"{type(self).__name__}({parts})"
