class ArrowFrameError(Exception):
    """Base class for all errors raised by arrowframe."""


class TransportError(ArrowFrameError):
    """
    Raised when a wire payload cannot be turned into an Arrow table.
    This covers invalid base64 text, bytes that are not Arrow IPC data and
    response envelopes of the wrong shape.
    """


class MetadataParseError(ArrowFrameError, ValueError):
    """Raised when a JSON encoded metadata value is malformed or of the wrong shape."""

    def __init__(self, key: str, message: str):
        super().__init__(f"Invalid '{key}' metadata: {message}")
        self.key = key


class VectorBuildError(ArrowFrameError, ValueError):
    """Raised when the values of a field cannot be built into an Arrow array."""

    def __init__(self, field_name: str, message: str):
        super().__init__(f"Cannot build Arrow array for field '{field_name}': {message}")
        self.field_name = field_name
