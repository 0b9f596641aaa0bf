"""
Reading and writing the side-channel metadata of Arrow schemas and fields.

Arrow metadata maps only hold strings, so richer values (``labels``,
``config``, ``meta``) are stored JSON encoded. Absent values are never
written; reading distinguishes an absent key from an empty string.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from arrowframe import system_constants as keys
from arrowframe.errors import MetadataParseError
from arrowframe.types import FieldConfig, FrameMeta, Labels

if TYPE_CHECKING:
    from arrowframe.frames import DataFrame, Field

MetadataMap = Mapping[bytes, bytes] | Mapping[str, str]


@dataclass(frozen=True)
class FieldMetadata:
    labels: Labels | None = None
    config: FieldConfig = field(default_factory=dict)


@dataclass(frozen=True)
class FrameMetadata:
    name: str | None = None
    ref_id: str | None = None
    meta: FrameMeta | None = None


def _as_text(value: bytes | str) -> str:
    return value.decode("utf-8") if isinstance(value, bytes) else value


def get_metadata_value(metadata: MetadataMap | None, key: str) -> str | None:
    """
    Return the value stored under key, or None when the key is absent.

    Arrow hands metadata over with bytes keys and values; plain str maps are
    accepted too. An empty stored value is returned as "".
    """
    if not metadata:
        return None
    for raw_key, raw_value in metadata.items():
        if _as_text(raw_key) == key:
            return _as_text(raw_value)
    return None


def _read_json(metadata: MetadataMap | None, key: str) -> Any | None:
    text = get_metadata_value(metadata, key)
    if not text:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MetadataParseError(key, str(e)) from e


def read_labels(metadata: MetadataMap | None) -> Labels | None:
    labels = _read_json(metadata, keys.LABELS_KEY)
    if labels is None:
        return None
    if not isinstance(labels, dict) or not all(
        isinstance(v, str) for v in labels.values()
    ):
        raise MetadataParseError(
            keys.LABELS_KEY, "expected an object of string values"
        )
    return labels


def read_config(metadata: MetadataMap | None) -> FieldConfig:
    config = _read_json(metadata, keys.CONFIG_KEY)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise MetadataParseError(keys.CONFIG_KEY, "expected an object")
    return config


def read_meta(metadata: MetadataMap | None) -> FrameMeta | None:
    return _read_json(metadata, keys.META_KEY)


def read_field_metadata(metadata: MetadataMap | None) -> FieldMetadata:
    return FieldMetadata(labels=read_labels(metadata), config=read_config(metadata))


def read_frame_metadata(metadata: MetadataMap | None) -> FrameMetadata:
    return FrameMetadata(
        name=get_metadata_value(metadata, keys.NAME_KEY),
        ref_id=get_metadata_value(metadata, keys.REF_ID_KEY),
        meta=read_meta(metadata),
    )


def write_metadata_value(
    metadata: dict[bytes, bytes], key: str, value: str | None
) -> None:
    """Store a plain string under key, leaving the map untouched for None."""
    if value is None:
        return
    metadata[key.encode("utf-8")] = value.encode("utf-8")


def write_metadata_json(metadata: dict[bytes, bytes], key: str, value: Any) -> None:
    """Store the JSON encoding of value under key, leaving the map untouched for None."""
    if value is None:
        return
    write_metadata_value(metadata, key, json.dumps(value))


def field_metadata(field: "Field") -> dict[bytes, bytes] | None:
    """Arrow field metadata for a field, None when there is nothing to store."""
    metadata: dict[bytes, bytes] = {}
    write_metadata_json(metadata, keys.LABELS_KEY, field.labels)
    # an empty config reads back as {} anyway
    write_metadata_json(metadata, keys.CONFIG_KEY, field.config or None)
    return metadata or None


def frame_metadata(frame: "DataFrame") -> dict[bytes, bytes] | None:
    """Arrow schema metadata for a frame, None when there is nothing to store."""
    metadata: dict[bytes, bytes] = {}
    write_metadata_value(metadata, keys.NAME_KEY, frame.name)
    write_metadata_value(metadata, keys.REF_ID_KEY, frame.ref_id)
    write_metadata_json(metadata, keys.META_KEY, frame.meta)
    return metadata or None
