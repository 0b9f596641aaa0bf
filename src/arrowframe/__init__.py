from .config import DEFAULT_CONFIG, Config
from .errors import (
    ArrowFrameError,
    MetadataParseError,
    TransportError,
    VectorBuildError,
)
from .types import FieldType
from .frames import ArrowDataFrame, ArrowVector, DataFrame, Field
from .semantic_types import (
    TypeResolution,
    arrow_type_for_field_type,
    field_type_for_arrow_type,
    resolve_field_type,
)
from .vectors import field_to_arrow_array
from .conversion import arrow_table_to_data_frame, data_frame_to_arrow_table
from .transport import (
    decode_envelope,
    decode_envelope_json,
    decode_payload,
    encode_envelope,
    encode_payload,
)
from . import interop


__all__ = [
    "DEFAULT_CONFIG",
    "Config",
    "ArrowFrameError",
    "MetadataParseError",
    "TransportError",
    "VectorBuildError",
    "FieldType",
    "ArrowDataFrame",
    "ArrowVector",
    "DataFrame",
    "Field",
    "TypeResolution",
    "arrow_type_for_field_type",
    "field_type_for_arrow_type",
    "resolve_field_type",
    "field_to_arrow_array",
    "arrow_table_to_data_frame",
    "data_frame_to_arrow_table",
    "decode_envelope",
    "decode_envelope_json",
    "decode_payload",
    "encode_envelope",
    "encode_payload",
    "interop",
]
