# (c) Nelen & Schuurmans

from typing import TypeVar

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import ValidationError

from .exceptions import InvalidValue

__all__ = ["ValueObject"]


T = TypeVar("T", bound="ValueObject")


class ValueObject(BaseModel):
    model_config = ConfigDict(frozen=True)

    def update(self: T, **values) -> T:
        # nested models are passed on as instances, not as dicts
        try:
            return self.__class__(**{**dict(self), **values})
        except ValidationError as e:
            raise InvalidValue(e)
