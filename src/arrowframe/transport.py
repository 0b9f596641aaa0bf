"""
Base64 wire payloads and multi-result response envelopes.

A response envelope has the shape::

    {"results": {"A": {"dataframes": ["<base64 Arrow IPC>", ...]}, ...}}

Every payload is one Arrow table, serialized in the IPC stream or file format.
"""

import base64
import binascii
import json
import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from arrowframe import system_constants as keys
from arrowframe.config import Config
from arrowframe.conversion import arrow_table_to_data_frame, data_frame_to_arrow_table
from arrowframe.errors import TransportError
from arrowframe.frames import DataFrame
from arrowframe.utils.lazy_module import LazyModule

if TYPE_CHECKING:
    import pyarrow as pa
else:
    pa = LazyModule("pyarrow")

logger = logging.getLogger(__name__)


def _read_ipc(data: bytes) -> "pa.Table":
    buffer = pa.py_buffer(data)
    if data.startswith(keys.ARROW_FILE_MAGIC):
        return pa.ipc.open_file(buffer).read_all()
    return pa.ipc.open_stream(buffer).read_all()


def decode_payload(text: str | bytes) -> "pa.Table":
    """
    Decode a base64 encoded Arrow IPC payload into an Arrow table.

    Raises:
        TransportError: If text is not valid base64 or the decoded bytes are
            not an Arrow IPC stream or file.
    """
    try:
        data = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise TransportError(f"Payload is not valid base64: {e}") from e

    try:
        return _read_ipc(data)
    except (pa.ArrowException, OSError) as e:
        raise TransportError(f"Payload is not a valid Arrow table: {e}") from e


def encode_payload(table: "pa.Table") -> str:
    """Serialize an Arrow table as a base64 encoded IPC stream."""
    sink = pa.BufferOutputStream()
    with pa.ipc.new_stream(sink, table.schema) as writer:
        writer.write_table(table)
    return base64.b64encode(sink.getvalue().to_pybytes()).decode("ascii")


def decode_envelope(response: Mapping[str, Any]) -> list[DataFrame]:
    """
    Decode every payload of a response envelope into DataFrames.

    Frames are returned in result order, then payload order within each
    result, exactly as the envelope lists them. A result without a
    ``dataframes`` entry contributes no frames. The first payload that fails
    to decode aborts the whole call.

    Raises:
        TransportError: If the envelope has no ``results`` mapping or a
            payload cannot be decoded.
        MetadataParseError: If a decoded table carries malformed metadata.
    """
    results = response.get(keys.RESULTS_KEY) if isinstance(response, Mapping) else None
    if not isinstance(results, Mapping):
        raise TransportError(
            f"Response envelope must hold a '{keys.RESULTS_KEY}' mapping"
        )

    frames: list[DataFrame] = []
    for result_key, result in results.items():
        payloads = result.get(keys.DATAFRAMES_KEY) if isinstance(result, Mapping) else None
        if not payloads:
            logger.debug(f"Result '{result_key}' holds no dataframes")
            continue
        for payload in payloads:
            frames.append(arrow_table_to_data_frame(decode_payload(payload)))
        logger.debug(f"Decoded {len(payloads)} dataframe(s) for result '{result_key}'")
    return frames


def decode_envelope_json(text: str | bytes) -> list[DataFrame]:
    """Parse a JSON response envelope and decode its payloads."""
    try:
        response = json.loads(text)
    except json.JSONDecodeError as e:
        raise TransportError(f"Response envelope is not valid JSON: {e}") from e
    return decode_envelope(response)


def encode_envelope(
    results: Mapping[str, Sequence[DataFrame]], config: Config | None = None
) -> dict[str, Any]:
    """Build a response envelope holding the given frames per result key."""
    return {
        keys.RESULTS_KEY: {
            result_key: {
                keys.DATAFRAMES_KEY: [
                    encode_payload(data_frame_to_arrow_table(frame, config))
                    for frame in frames
                ]
            }
            for result_key, frames in results.items()
        }
    }
