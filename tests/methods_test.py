import pytest

from dirrnd import DEFAULT_METHOD, InvalidArgument, Method


def test_default_method_is_columnwise():
    assert DEFAULT_METHOD is Method.COLUMNWISE


from_value_cases = [
    {"value": Method.BATCHED, "expected": Method.BATCHED},
    {"value": "batched", "expected": Method.BATCHED},
    {"value": "COLUMNWISE", "expected": Method.COLUMNWISE},
    {"value": "Python", "expected": Method.PYTHON},
    {"value": " python ", "expected": Method.PYTHON},
]


@pytest.mark.parametrize("case", from_value_cases)
def test_from_value(case):
    assert Method.from_value(case["value"]) is case["expected"]


@pytest.mark.parametrize("value", ["SPM", "", "gamma", None, 1, 2.0])
def test_from_value_unknown(value):
    with pytest.raises(InvalidArgument, match="Unknown sampling method"):
        Method.from_value(value)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        Method.from_value("matlab")
