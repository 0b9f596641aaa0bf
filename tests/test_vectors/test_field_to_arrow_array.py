import math
from datetime import datetime
from decimal import Decimal
from fractions import Fraction

import pyarrow as pa
import pytest

from arrowframe import ArrowVector, Config, Field, FieldType, VectorBuildError
from arrowframe.vectors import field_to_arrow_array, is_null_value


class TestArrowTypes:
    def test_number_is_float64(self):
        array = field_to_arrow_array(Field("v", FieldType.number, [1, 2.5]))
        assert array.type == pa.float64()
        assert array.to_pylist() == [1.0, 2.5]

    def test_time_is_millisecond_timestamp(self):
        array = field_to_arrow_array(Field("t", FieldType.time, [1600000000000]))
        assert array.type == pa.timestamp("ms")
        assert array.cast(pa.int64()).to_pylist() == [1600000000000]

    def test_boolean(self):
        array = field_to_arrow_array(Field("b", FieldType.boolean, [True, False]))
        assert array.type == pa.bool_()
        assert array.to_pylist() == [True, False]

    def test_string(self):
        array = field_to_arrow_array(Field("s", FieldType.string, ["a", "b"]))
        assert array.type == pa.string()

    def test_other_and_unrecognized_fall_back_to_string(self):
        assert field_to_arrow_array(Field("o", FieldType.other, ["a"])).type == pa.string()
        assert field_to_arrow_array(Field("g", "geo", ["a"])).type == pa.string()


class TestNullHandling:
    @pytest.mark.parametrize(
        "field_type, values",
        [
            (FieldType.number, [1.0, None, 3.0]),
            (FieldType.time, [1, None, 3]),
            (FieldType.boolean, [True, None, False]),
            (FieldType.string, ["a", None, "c"]),
            (FieldType.other, ["a", None, "c"]),
        ],
    )
    def test_null_marker_reads_back_as_null(self, field_type, values):
        array = field_to_arrow_array(Field("f", field_type, values))
        assert len(array) == 3
        assert array.null_count == 1
        assert not array[1].is_valid
        assert array[0].is_valid and array[2].is_valid

    def test_custom_null_markers(self):
        config = Config(null_values=(None, float("nan"), -1.0))
        field = Field("v", FieldType.number, [1.0, math.nan, -1.0, None, 2.0])
        array = field_to_arrow_array(field, config)
        assert array.to_pylist() == [1.0, None, None, None, 2.0]

    def test_null_marker_type_must_match(self):
        assert not is_null_value(False, (0,))
        assert not is_null_value(0, (False,))
        assert is_null_value(0, (0,))
        assert is_null_value(math.nan, (float("nan"),))
        assert not is_null_value(1.0, (float("nan"),))


class TestValues:
    def test_source_values_are_not_modified(self):
        values = [1.0, None]
        field_to_arrow_array(Field("v", FieldType.number, values))
        assert values == [1.0, None]

    def test_datetime_values(self):
        field = Field("t", FieldType.time, [datetime(2020, 9, 13, 12, 26, 40)])
        array = field_to_arrow_array(field)
        assert array.cast(pa.int64()).to_pylist() == [1600000000000]

    @pytest.mark.parametrize(
        "unit, expected",
        [
            ("s", 1600000000),
            ("us", 1600000000000000),
            ("ns", 1600000000000000000),
        ],
    )
    def test_epoch_milliseconds_are_scaled_to_unit(self, unit, expected):
        field = Field("t", FieldType.time, [1600000000000])
        array = field_to_arrow_array(field, Config(time_unit=unit))
        assert array.type == pa.timestamp(unit)
        assert array.cast(pa.int64()).to_pylist() == [expected]

    def test_other_values_are_stringified(self):
        field = Field("o", FieldType.other, [{"a": 1}, [1, 2], 3, None])
        array = field_to_arrow_array(field)
        assert array.to_pylist() == ['{"a": 1}', "[1, 2]", "3", None]

    def test_vector_values(self):
        field = Field("v", FieldType.number, ArrowVector(pa.array([1.0, None])))
        assert field_to_arrow_array(field).to_pylist() == [1.0, None]

    def test_large_string_config(self):
        array = field_to_arrow_array(
            Field("s", FieldType.string, ["a"]), Config(use_large_string=True)
        )
        assert array.type == pa.large_string()

    def test_incompatible_values_raise(self):
        with pytest.raises(VectorBuildError) as exc_info:
            field_to_arrow_array(Field("v", FieldType.number, ["not a number"]))
        assert exc_info.value.field_name == "v"

    def test_non_string_in_string_field_raises(self):
        with pytest.raises(VectorBuildError):
            field_to_arrow_array(Field("s", FieldType.string, [{"a": 1}]))


class TestNumberCoercion:
    def test_decimal_values(self):
        field = Field("v", FieldType.number, [Decimal("2.25"), 1, None])
        assert field_to_arrow_array(field).to_pylist() == [2.25, 1.0, None]

    def test_fraction_values(self):
        field = Field("v", FieldType.number, [Fraction(1, 4)])
        assert field_to_arrow_array(field).to_pylist() == [0.25]


class TestTimeErrors:
    @pytest.mark.parametrize("bad_value", [math.nan, math.inf])
    def test_non_finite_time_raises_build_error(self, bad_value):
        with pytest.raises(VectorBuildError) as exc_info:
            field_to_arrow_array(Field("t", FieldType.time, [1000, bad_value]))
        assert exc_info.value.field_name == "t"
