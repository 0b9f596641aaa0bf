"""
Mapping between physical Arrow types and semantic field types.

Reading direction is total: every Arrow type resolves to a FieldType, with
types outside the known set falling back to ``FieldType.other``. Writing
direction picks one Arrow type per FieldType.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from arrowframe.config import Config, resolve_config
from arrowframe.types import FieldType
from arrowframe.utils.lazy_module import LazyModule

if TYPE_CHECKING:
    import pyarrow as pa
else:
    pa = LazyModule("pyarrow")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TypeResolution:
    """
    Outcome of resolving an Arrow type to a semantic field type.

    Attributes:
        field_type: The semantic type the Arrow type maps to.
        arrow_type: The Arrow type that was resolved.
        is_known: False when the Arrow type fell outside the known set and
            ``field_type`` is the ``other`` fallback.
    """

    field_type: FieldType
    arrow_type: "pa.DataType"
    is_known: bool = True


def resolve_field_type(
    arrow_type: "pa.DataType", column_name: str | None = None
) -> TypeResolution:
    """
    Resolve an Arrow type to its semantic field type.

    Decimal, integer and floating point types map to ``number``, bool to
    ``boolean`` and timestamps (any unit or time zone) to ``time``. Any
    other type resolves to ``other`` and a warning is logged; this never
    raises.

    Args:
        arrow_type: Physical Arrow type of a column.
        column_name: Optional column name, only used in the log message.

    Returns:
        TypeResolution carrying the semantic type and the original Arrow type.
    """
    if (
        pa.types.is_decimal(arrow_type)
        or pa.types.is_integer(arrow_type)
        or pa.types.is_floating(arrow_type)
    ):
        return TypeResolution(FieldType.number, arrow_type)
    if pa.types.is_boolean(arrow_type):
        return TypeResolution(FieldType.boolean, arrow_type)
    if pa.types.is_timestamp(arrow_type):
        return TypeResolution(FieldType.time, arrow_type)

    if column_name is None:
        logger.warning(f"Unknown Arrow type {arrow_type}, using field type 'other'")
    else:
        logger.warning(
            f"Unknown Arrow type {arrow_type} for column '{column_name}', "
            "using field type 'other'"
        )
    return TypeResolution(FieldType.other, arrow_type, is_known=False)


def field_type_for_arrow_type(arrow_type: "pa.DataType") -> FieldType:
    return resolve_field_type(arrow_type).field_type


def arrow_type_for_field_type(
    field_type: FieldType | str, config: Config | None = None
) -> "pa.DataType":
    """Arrow type used to store values of the given semantic type."""
    config = resolve_config(config)
    string_type = pa.large_string() if config.use_large_string else pa.string()

    try:
        field_type = FieldType(field_type)
    except ValueError:
        # unrecognized semantic types are stored as strings, like 'other'
        return string_type

    if field_type is FieldType.number:
        return pa.float64()
    if field_type is FieldType.time:
        return pa.timestamp(config.time_unit)
    if field_type is FieldType.boolean:
        return pa.bool_()
    return string_type
