import math

import pyarrow as pa
import pytest

from tinyframe import MISSING, Series
from tinyframe.errors import (
    DivisionByZero,
    IndexOutOfRange,
    LengthMismatch,
    TinyFrameError,
    UnsupportedOperation,
)


@pytest.fixture
def numbers():
    return Series("numbers", [1, 2, 3])


def test_init_copies_values():
    values = [1, 2, 3]
    s = Series("a", values)
    values.append(4)
    assert len(s) == 3
    assert s.to_pylist() == [1, 2, 3]


def test_name_is_read_only(numbers):
    with pytest.raises(AttributeError):
        numbers.name = "other"


def test_get(numbers):
    assert [numbers.get(i) for i in range(3)] == [1, 2, 3]
    assert numbers[1] == 2


@pytest.mark.parametrize("index", [3, 10, -1])
def test_get_out_of_range(numbers, index):
    with pytest.raises(IndexOutOfRange):
        numbers.get(index)


def test_get_out_of_range_is_index_error(numbers):
    with pytest.raises(IndexError):
        numbers[3]


def test_get_invalid_index_type(numbers):
    with pytest.raises(TypeError):
        numbers.get("1")


def test_set(numbers):
    numbers.set(0, 10)
    numbers[2] = 30
    assert numbers.to_pylist() == [10, 2, 30]


def test_set_does_not_extend(numbers):
    with pytest.raises(IndexOutOfRange):
        numbers.set(3, 4)
    assert numbers.to_pylist() == [1, 2, 3]


def test_append_and_extend(numbers):
    numbers.append(4)
    assert len(numbers) == 4
    assert numbers.get(3) == 4

    numbers.extend([5, 6])
    assert numbers.to_pylist() == [1, 2, 3, 4, 5, 6]


def test_iteration_and_membership(numbers):
    assert list(numbers) == [1, 2, 3]
    assert 2 in numbers
    assert 5 not in numbers


def test_add(numbers):
    result = numbers.add(Series("other", [10, 20, 30]))
    assert result == Series("numbers+other", [11, 22, 33])
    assert len(result) == len(numbers)


def test_add_int_and_float():
    result = Series("col1", [5, 6]).add(Series("col2", [8.1, 3.2]))
    assert result.name == "col1+col2"
    assert result.to_pylist() == [13.1, 9.2]


def test_subtract():
    result = Series("a", [1.5, 2]).subtract(Series("b", [0.5, 1]))
    assert result == Series("a-b", [1.0, 1.0])


def test_multiply():
    result = Series("a", [1, 2, 3]).multiply(Series("b", [4, 5, 6]))
    assert result == Series("a*b", [4, 10, 18])


def test_divide_is_true_division():
    result = Series("a", [1, 3, 4]).divide(Series("b", [2, 2, 4]))
    assert result == Series("a/b", [0.5, 1.5, 1.0])
    assert all(isinstance(v, float) for v in result)


def test_operators_are_methods_sugar():
    a = Series("a", [6, 8])
    b = Series("b", [2, 4])
    assert a + b == a.add(b)
    assert a - b == a.subtract(b)
    assert a * b == a.multiply(b)
    assert a / b == a.divide(b)


def test_arithmetic_does_not_mutate_operands():
    a = Series("a", [1, 2])
    b = Series("b", [3, 4])
    a.add(b)
    a.divide(b)
    assert a == Series("a", [1, 2])
    assert b == Series("b", [3, 4])


@pytest.mark.parametrize("op", ["add", "subtract", "multiply", "divide"])
def test_arithmetic_length_mismatch(op):
    a = Series("a", [1, 2, 3])
    b = Series("b", [1, 2])
    with pytest.raises(LengthMismatch):
        getattr(a, op)(b)
    with pytest.raises(LengthMismatch):
        getattr(b, op)(a)


def test_integer_division_by_zero():
    with pytest.raises(DivisionByZero):
        Series("a", [1, 2]).divide(Series("b", [1, 0]))


def test_integer_division_by_zero_is_zero_division_error():
    with pytest.raises(ZeroDivisionError):
        Series("a", [1]) / Series("b", [0])


def test_float_division_by_zero():
    result = Series("a", [1.0, -1.0, 0.0]).divide(Series("b", [0.0, 0.0, 0.0]))
    values = result.to_pylist()
    assert values[0] == math.inf
    assert values[1] == -math.inf
    assert math.isnan(values[2])


def test_int_divided_by_float_zero():
    result = Series("a", [1]).divide(Series("b", [0.0]))
    assert result.to_pylist() == [math.inf]


@pytest.mark.parametrize(
    "values",
    [["a", "b"], [True, False], [1, "b"]],
)
def test_arithmetic_on_non_numeric(values):
    with pytest.raises(UnsupportedOperation):
        Series("text", values).add(Series("numbers", [1, 2]))
    with pytest.raises(UnsupportedOperation):
        Series("numbers", [1, 2]).multiply(Series("text", values))


def test_arithmetic_with_non_series(numbers):
    with pytest.raises(UnsupportedOperation):
        numbers + 5
    with pytest.raises(TypeError):
        numbers.divide([1, 2, 3])


def test_arithmetic_overflow():
    with pytest.raises(UnsupportedOperation):
        Series("a", [2**62]).multiply(Series("b", [4]))


def test_arithmetic_propagates_missing():
    result = Series("a", [1, MISSING, 3]).add(Series("b", [1, 2, MISSING]))
    assert result.to_pylist() == [2, MISSING, MISSING]


def test_arithmetic_on_empty_series():
    assert Series("a").add(Series("b")) == Series("a+b", [])
    assert Series("a").divide(Series("b")) == Series("a/b", [])


def test_errors_share_base_class(numbers):
    with pytest.raises(TinyFrameError):
        numbers.get(100)
    with pytest.raises(TinyFrameError):
        numbers.add(Series("short", [1]))


def test_str(numbers):
    assert str(numbers) == "(numbers): 1, 2, 3"
    assert str(Series("f", [8.1, 3.2])) == "(f): 8.1, 3.2"


def test_str_missing_and_empty():
    assert str(Series("a", [1, MISSING])) == "(a): 1, null"
    assert str(Series("a")) == "(a): "


def test_repr(numbers):
    assert repr(numbers) == "Series('numbers', [1, 2, 3])"


def test_equality():
    assert Series("a", [1, 2]) == Series("a", [1, 2])
    assert Series("a", [1, 2]) != Series("b", [1, 2])
    assert Series("a", [1, 2]) != Series("a", [1, 3])
    assert Series("a", [1, 2]) != [1, 2]


def test_rename_and_copy(numbers):
    renamed = numbers.rename("renamed")
    copied = numbers.copy()
    numbers.set(0, 100)
    assert renamed == Series("renamed", [1, 2, 3])
    assert copied == Series("numbers", [1, 2, 3])


def test_is_numeric():
    assert Series("a", [1, 2.5, MISSING]).is_numeric()
    assert Series("a").is_numeric()
    assert not Series("a", ["x"]).is_numeric()
    assert not Series("a", [True]).is_numeric()


def test_to_arrow(numbers):
    assert numbers.to_arrow().equals(pa.array([1, 2, 3]))
    assert Series("a", [1.5, MISSING]).to_arrow().equals(pa.array([1.5, None]))


def test_to_arrow_mixed_values():
    with pytest.raises(UnsupportedOperation):
        Series("mixed", ["a", 1]).to_arrow()


def test_from_arrow():
    s = Series.from_arrow("a", pa.array([1, None, 3]))
    assert s == Series("a", [1, MISSING, 3])

    chunked = pa.chunked_array([[1, 2], [3]])
    assert Series.from_arrow("b", chunked) == Series("b", [1, 2, 3])
