import json
import math
import numbers
from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from arrowframe.config import Config, resolve_config
from arrowframe.errors import VectorBuildError
from arrowframe.frames import Field
from arrowframe.semantic_types import arrow_type_for_field_type
from arrowframe.types import DataValue, FieldType
from arrowframe.utils.lazy_module import LazyModule

if TYPE_CHECKING:
    import pyarrow as pa
else:
    pa = LazyModule("pyarrow")


# factor turning epoch milliseconds into the given sub-second timestamp unit
_UNITS_PER_MS = {"ms": 1, "us": 1_000, "ns": 1_000_000}


def is_null_value(value: Any, null_values: tuple[Any, ...]) -> bool:
    """
    True when value matches one of the configured null markers.

    Markers match by identity, by equality with a value of the same type
    (so 0 never matches False), and NaN matches NaN.
    """
    for marker in null_values:
        if value is marker:
            return True
        if type(value) is not type(marker):
            continue
        if isinstance(marker, float) and math.isnan(marker):
            if math.isnan(value):
                return True
        elif value == marker:
            return True
    return False


def _number_value(value: DataValue) -> DataValue:
    # Decimal (from decoded decimal columns) and other non-float reals
    if isinstance(value, (Decimal, numbers.Real)) and not isinstance(
        value, (bool, int, float)
    ):
        return float(value)
    return value


def _time_value(value: DataValue, time_unit: str) -> DataValue:
    # numbers are epoch milliseconds, datetimes are handed to Arrow as they are
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if time_unit == "s":
            return int(value // 1000)
        return int(value * _UNITS_PER_MS[time_unit])
    return value


def _fallback_string(value: DataValue) -> DataValue:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def field_to_arrow_array(field: Field, config: Config | None = None) -> "pa.Array":
    """
    Build an Arrow array holding the values of a field.

    The Arrow type follows the field type (see ``arrow_type_for_field_type``).
    Values are materialized once into a list, null markers become nulls at
    the same row index, and the list is handed to Arrow in a single pass.
    Values of ``other`` (or unrecognized) fields that are not strings are
    stored as their string (JSON for dicts and lists) representation.

    Args:
        field: Field to convert.
        config: Build options; DEFAULT_CONFIG when None.

    Returns:
        Arrow array with one element per field value.

    Raises:
        VectorBuildError: If a value cannot be stored in the chosen Arrow type.
    """
    config = resolve_config(config)
    arrow_type = arrow_type_for_field_type(field.type, config)

    values = field.to_list()
    is_number = field.type == FieldType.number
    is_time = field.type == FieldType.time
    is_fallback = field.type not in (
        FieldType.number,
        FieldType.time,
        FieldType.boolean,
        FieldType.string,
    )

    try:
        for i, value in enumerate(values):
            if is_null_value(value, config.null_values):
                values[i] = None
            elif is_number:
                values[i] = _number_value(value)
            elif is_time:
                values[i] = _time_value(value, config.time_unit)
            elif is_fallback:
                values[i] = _fallback_string(value)
        return pa.array(values, type=arrow_type)
    except (pa.ArrowException, TypeError, ValueError, OverflowError) as e:
        raise VectorBuildError(field.name, str(e)) from e
