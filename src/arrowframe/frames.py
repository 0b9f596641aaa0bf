from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from arrowframe.protocols import Vector
from arrowframe.types import DataValue, FieldConfig, FieldType, FrameMeta, Labels
from arrowframe.utils.lazy_module import LazyModule

if TYPE_CHECKING:
    import pyarrow as pa
else:
    pa = LazyModule("pyarrow")


# multiplier/divisor turning a timestamp in the given unit into epoch milliseconds
_MS_PER_UNIT = {"s": (1000, 1), "ms": (1, 1), "us": (1, 1_000), "ns": (1, 1_000_000)}


def _epoch_ms(value: int | None, unit: str) -> int | None:
    if value is None:
        return None
    multiplier, divisor = _MS_PER_UNIT[unit]
    return value * multiplier // divisor


class ArrowVector:
    """
    Read-only view over an Arrow column, used as the values of decoded fields.

    Elements are converted one at a time on access, so wrapping a column
    never copies its buffers. Timestamp columns yield epoch milliseconds
    (int), every other column yields the Python value of the Arrow scalar.
    Nulls read as None.

    The view references the column's memory; the table it came from must be
    treated as immutable for as long as the view is in use.
    """

    def __init__(self, column: "pa.ChunkedArray | pa.Array"):
        if isinstance(column, pa.Array):
            column = pa.chunked_array([column], type=column.type)
        self._column = column
        self._time_unit = (
            column.type.unit if pa.types.is_timestamp(column.type) else None
        )

    @property
    def column(self) -> "pa.ChunkedArray":
        """The underlying Arrow column."""
        return self._column

    @property
    def arrow_type(self) -> "pa.DataType":
        return self._column.type

    def _convert(self, scalar: "pa.Scalar") -> DataValue:
        if not scalar.is_valid:
            return None
        if self._time_unit is not None:
            return _epoch_ms(scalar.value, self._time_unit)
        return scalar.as_py()

    def __len__(self) -> int:
        return len(self._column)

    def __getitem__(self, index: int | slice) -> Any:
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            if step != 1:
                return [self[i] for i in range(start, stop, step)]
            return ArrowVector(self._column.slice(start, max(stop - start, 0)))
        # ChunkedArray indexing normalizes negative indices and raises IndexError
        return self._convert(self._column[index])

    def __iter__(self) -> Iterator[DataValue]:
        for chunk in self._column.chunks:
            for scalar in chunk:
                yield self._convert(scalar)

    def to_list(self) -> list[DataValue]:
        if self._time_unit is not None:
            raw = self._column.cast(pa.int64()).to_pylist()
            return [_epoch_ms(v, self._time_unit) for v in raw]
        return self._column.to_pylist()

    def __repr__(self) -> str:
        return f"ArrowVector(type={self._column.type}, length={len(self)})"


@dataclass(frozen=True)
class Field:
    """
    One named, semantically typed column of a DataFrame.

    ``values`` is any indexable sequence: a plain list when the field is
    built in memory, an ArrowVector when it was decoded from a table.
    """

    name: str
    type: FieldType
    values: Vector | Sequence[DataValue]
    config: FieldConfig = field(default_factory=dict)
    labels: Labels | None = None

    def __post_init__(self) -> None:
        # accept plain strings for known types, keep unrecognized ones as given
        if (
            not isinstance(self.type, FieldType)
            and self.type in FieldType._value2member_map_
        ):
            object.__setattr__(self, "type", FieldType(self.type))

    def __len__(self) -> int:
        return len(self.values)

    def to_list(self) -> list[DataValue]:
        """Materialize the values into a new list."""
        if isinstance(self.values, Vector):
            return self.values.to_list()
        return list(self.values)


@dataclass(frozen=True)
class DataFrame:
    """
    Ordered collection of fields sharing a row count.

    ``length`` defaults to the number of values of the first field (0 for a
    frame without fields).
    """

    fields: list[Field] = field(default_factory=list)
    length: int | None = None
    name: str | None = None
    ref_id: str | None = None
    meta: FrameMeta | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", list(self.fields))
        if self.length is None:
            length = len(self.fields[0].values) if self.fields else 0
            object.__setattr__(self, "length", length)

    def __len__(self) -> int:
        return self.length  # type: ignore[return-value]

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def get_field(self, name: str) -> Field | None:
        """First field with the given name, None if there is none."""
        for f in self.fields:
            if f.name == name:
                return f
        return None


@dataclass(frozen=True)
class ArrowDataFrame(DataFrame):
    """DataFrame decoded from an Arrow table, keeping a reference to that table."""

    table: "pa.Table | None" = field(default=None, repr=False, compare=False)
