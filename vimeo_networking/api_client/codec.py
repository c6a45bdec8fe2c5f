import json
from datetime import date
from datetime import datetime
from datetime import timezone
from enum import Enum
from types import NoneType
from types import UnionType
from typing import Annotated
from typing import Any
from typing import get_args
from typing import get_origin
from typing import Type
from typing import TypeVar
from typing import Union
from uuid import UUID

import inject
from pydantic import BaseModel
from pydantic import TypeAdapter
from pydantic.alias_generators import to_camel
from pydantic.alias_generators import to_snake

from vimeo_networking import ValueObject

__all__ = ["JsonCodec", "NamingPolicy", "bind_codec"]


T = TypeVar("T")

COLLECTION_TYPES = (list, tuple, set, frozenset)


class NamingPolicy(str, Enum):
    """How internal (snake_case) attribute names appear as JSON keys.

    Only attribute names of models are renamed, keys of plain dicts are kept.
    """

    IDENTITY = "identity"
    LOWER_CASE_WITH_UNDERSCORES = "lower_case_with_underscores"
    LOWER_CAMEL_CASE = "lower_camel_case"

    def to_external(self, name: str) -> str:
        if self is NamingPolicy.LOWER_CAMEL_CASE:
            return to_camel(name)
        elif self is NamingPolicy.LOWER_CASE_WITH_UNDERSCORES:
            return to_snake(name)
        return name


def _is_model(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, BaseModel)


def _fits(value: Any, annotation: Any) -> bool:
    """Whether a union member is the one that should guide the conversion of value"""
    origin = get_origin(annotation)
    if isinstance(value, dict):
        return _is_model(annotation) or origin is dict
    elif isinstance(value, list):
        return origin in COLLECTION_TYPES
    elif isinstance(value, str):
        return annotation is datetime
    return False


class JsonCodec(ValueObject):
    """Converts between in-memory values and the JSON of the Vimeo API.

    The defaults follow the API: snake_case keys and ISO 8601 dates with an explicit
    offset (e.g. "2015-05-21T14:24:03+00:00"). Derive a differently configured codec
    with ``codec.update(...)``.

    Args:
        naming_policy: How attribute names map to JSON keys.
        date_format: A strftime pattern for datetimes, used for encoding as well as
            decoding. If None, ISO 8601 with second precision is used. Naive
            datetimes are assumed to be UTC.
    """

    naming_policy: NamingPolicy = NamingPolicy.LOWER_CASE_WITH_UNDERSCORES
    date_format: str | None = None

    def format_datetime(self, value: datetime) -> str:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        if self.date_format is None:
            return value.isoformat(timespec="seconds")
        return value.strftime(self.date_format)

    def parse_datetime(self, value: str) -> datetime | str:
        if self.date_format is None:
            return value  # ISO 8601 is parsed by pydantic
        result = datetime.strptime(value, self.date_format)
        if result.tzinfo is None:
            result = result.replace(tzinfo=timezone.utc)
        return result

    def external_name(self, name: str, alias: str | None) -> str:
        return alias or self.naming_policy.to_external(name)

    def to_jsonable(self, value: Any) -> Any:
        if isinstance(value, BaseModel):
            return {
                self.external_name(name, field.alias): self.to_jsonable(
                    getattr(value, name)
                )
                for (name, field) in type(value).model_fields.items()
                if not field.exclude
            }
        elif isinstance(value, dict):
            return {str(k): self.to_jsonable(v) for (k, v) in value.items()}
        elif isinstance(value, COLLECTION_TYPES):
            return [self.to_jsonable(x) for x in value]
        elif isinstance(value, datetime):
            return self.format_datetime(value)
        elif isinstance(value, date):
            return value.isoformat()
        elif isinstance(value, Enum):
            return self.to_jsonable(value.value)
        elif isinstance(value, UUID):
            return str(value)
        return value

    def to_internal(self, value: Any, annotation: Any) -> Any:
        """Prepare parsed JSON for validation into ``annotation``.

        Renames the keys of model attributes and parses datetimes with
        ``date_format``. Anything that does not match the annotation is left as is.
        """
        origin = get_origin(annotation)
        args = get_args(annotation)
        if origin is Annotated:
            return self.to_internal(value, args[0])
        elif origin in (Union, UnionType):
            for arg in args:
                if arg is not NoneType and _fits(value, arg):
                    return self.to_internal(value, arg)
            return value
        elif _is_model(annotation) and isinstance(value, dict):
            fields = {
                self.external_name(name, field.alias): (
                    field.alias or name,
                    field.annotation,
                )
                for (name, field) in annotation.model_fields.items()
            }
            result = {}
            for key, item in value.items():
                if key in fields:
                    name, field_type = fields[key]
                    result[name] = self.to_internal(item, field_type)
                else:
                    result[key] = item
            return result
        elif origin is dict and isinstance(value, dict):
            value_type = args[1] if args else Any
            return {k: self.to_internal(v, value_type) for (k, v) in value.items()}
        elif origin in COLLECTION_TYPES and isinstance(value, list):
            item_type = args[0] if args else Any
            return [self.to_internal(x, item_type) for x in value]
        elif annotation is datetime and isinstance(value, str):
            return self.parse_datetime(value)
        return value

    def encode(self, value: Any) -> bytes:
        return json.dumps(self.to_jsonable(value)).encode()

    def decode(self, data: bytes | str, type_: Type[T]) -> T:
        """Parse JSON text into ``type_``.

        Raises:
            ValueError: on malformed JSON (json.JSONDecodeError), on a datetime
                that does not match ``date_format`` or on a document that does not
                fit ``type_`` (pydantic.ValidationError).
        """
        body = self.to_internal(json.loads(data), type_)
        return TypeAdapter(type_).validate_python(body)


def bind_codec(binder: inject.Binder, codec: JsonCodec | None = None) -> None:
    """Bind a JsonCodec in the inject container.

    Without a codec, the default codec is constructed on first use.
    """
    if codec is None:
        binder.bind_to_constructor(JsonCodec, JsonCodec)
    else:
        binder.bind(JsonCodec, codec)
