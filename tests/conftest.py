"""Common fixtures for arrowframe tests."""

import pytest

from arrowframe import DataFrame, Field, FieldType


@pytest.fixture
def sample_frame() -> DataFrame:
    """A frame with one field of each round-trippable semantic type and full metadata."""
    return DataFrame(
        fields=[
            Field(
                "time",
                FieldType.time,
                [1600000000000, 1600000001000, 1600000002000],
            ),
            Field(
                "value",
                FieldType.number,
                [1.5, None, 3.25],
                config={"unit": "percent", "decimals": 2},
                labels={"host": "a", "region": "eu"},
            ),
            Field("up", FieldType.boolean, [True, False, None]),
            Field("note", FieldType.other, ["x", None, "z"]),
        ],
        name="cpu",
        ref_id="A",
        meta={"executedQueryString": "SELECT 1", "custom": {"nested": [1, 2]}},
    )


@pytest.fixture
def bare_frame() -> DataFrame:
    """A frame without any labels, config or frame level metadata."""
    return DataFrame(fields=[Field("value", FieldType.number, [1.0, 2.0])])
