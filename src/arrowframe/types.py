from enum import Enum
from typing import Any, TypeAlias


class FieldType(str, Enum):
    """Semantic type of a field, independent of its physical Arrow encoding."""

    number = "number"
    boolean = "boolean"
    time = "time"
    string = "string"
    other = "other"

    def __str__(self) -> str:
        return self.value


# series dimensions, e.g. {"host": "a", "region": "eu"}
Labels: TypeAlias = dict[str, str]

# display/formatting options, opaque to the conversion code
FieldConfig: TypeAlias = dict[str, Any]

# arbitrary frame level metadata object
FrameMeta: TypeAlias = dict[str, Any]

# a single row value of a field; its Python type follows the field type
DataValue: TypeAlias = Any
