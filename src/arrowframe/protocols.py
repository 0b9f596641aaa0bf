from collections.abc import Iterator
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Vector(Protocol):
    """Read-only, indexable sequence of the row values of a field."""

    def __len__(self) -> int: ...

    def __getitem__(self, index: int) -> Any: ...

    def __iter__(self) -> Iterator[Any]: ...

    def to_list(self) -> list[Any]: ...
