"""
Conversion between DataFrames and Arrow tables.

Field order follows column order in both directions. Frame level
``name``/``refId``/``meta`` live in the schema metadata, per field
``labels``/``config`` in the field metadata (see arrowframe.metadata).
"""

import logging
from typing import TYPE_CHECKING

from arrowframe import metadata as md
from arrowframe.config import Config
from arrowframe.frames import ArrowDataFrame, ArrowVector, DataFrame, Field
from arrowframe.semantic_types import resolve_field_type
from arrowframe.utils.lazy_module import LazyModule
from arrowframe.vectors import field_to_arrow_array

if TYPE_CHECKING:
    import pyarrow as pa
else:
    pa = LazyModule("pyarrow")

logger = logging.getLogger(__name__)


def arrow_table_to_data_frame(table: "pa.Table") -> ArrowDataFrame:
    """
    Decode an Arrow table into a DataFrame.

    Each column becomes a field whose values are an ArrowVector over the
    column, so no column data is copied. Columns of unrecognized Arrow type
    become ``other`` fields and a warning is logged.

    Args:
        table: Arrow table to decode.

    Returns:
        ArrowDataFrame referencing ``table``.

    Raises:
        MetadataParseError: If labels, config or meta metadata are not valid JSON.
    """
    fields = []
    for i, schema_field in enumerate(table.schema):
        resolution = resolve_field_type(schema_field.type, schema_field.name)
        field_metadata = md.read_field_metadata(schema_field.metadata)
        fields.append(
            Field(
                name=schema_field.name,
                type=resolution.field_type,
                values=ArrowVector(table.column(i)),
                config=field_metadata.config,
                labels=field_metadata.labels,
            )
        )

    frame_metadata = md.read_frame_metadata(table.schema.metadata)
    return ArrowDataFrame(
        fields=fields,
        length=table.num_rows,
        name=frame_metadata.name,
        ref_id=frame_metadata.ref_id,
        meta=frame_metadata.meta,
        table=table,
    )


def data_frame_to_arrow_table(
    frame: DataFrame, config: Config | None = None
) -> "pa.Table":
    """
    Encode a DataFrame into an Arrow table.

    Field names are not checked for uniqueness; duplicates are carried over
    to the table as they are. Metadata that is absent on the frame or a
    field is omitted from the table rather than stored empty.

    Raises:
        VectorBuildError: If a field's values do not fit its Arrow type.
    """
    arrays = []
    schema_fields = []
    for field in frame.fields:
        array = field_to_arrow_array(field, config)
        arrays.append(array)
        schema_fields.append(
            pa.field(field.name, array.type, metadata=md.field_metadata(field))
        )

    schema = pa.schema(schema_fields, metadata=md.frame_metadata(frame))
    if not arrays:
        return schema.empty_table()
    return pa.Table.from_arrays(arrays, schema=schema)
