import pytest
from pydantic import RootModel
from pydantic import ValidationError

from vimeo_networking import InvalidValue
from vimeo_networking import ValueObject


class Book(ValueObject):
    title: str


def test_invalid_value_str():
    with pytest.raises(ValidationError) as e:
        Book()

    err = InvalidValue(e.value)

    assert str(err) == "invalid value for 'title': Field required"
    assert err.error is e.value


def test_invalid_value_without_loc():
    with pytest.raises(ValidationError) as e:
        RootModel[int].model_validate("x")

    err = InvalidValue(e.value)

    assert str(err).startswith("invalid value: Input should be a valid integer")


def test_invalid_value_is_value_error():
    assert issubclass(InvalidValue, ValueError)
