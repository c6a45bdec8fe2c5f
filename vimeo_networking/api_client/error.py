from http import HTTPStatus

from pydantic import ConfigDict
from pydantic import Field

from vimeo_networking import ValueObject

from .response import Response

__all__ = ["VimeoError", "InvalidParameter"]


class InvalidParameter(ValueObject):
    model_config = ConfigDict(frozen=True, extra="ignore")

    field: str | None = None
    error_code: int | None = None
    error: str | None = None
    developer_message: str | None = None


class VimeoError(ValueObject):
    """An error as returned by the Vimeo API in the body of an error response.

    Every field has a default so that an error can always be constructed, also when
    the body is absent or could not be decoded. The originating response is attached
    as ``response``; it is not part of the serialized error.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    error: str | None = None
    link: str | None = None
    developer_message: str | None = None
    error_code: int | None = None
    invalid_parameters: list[InvalidParameter] = []
    response: Response | None = Field(default=None, exclude=True)

    @property
    def http_status_code(self) -> HTTPStatus | int | None:
        return None if self.response is None else self.response.status

    @property
    def message(self) -> str:
        if self.error:
            return self.error
        if self.developer_message:
            return self.developer_message
        if self.response is not None and isinstance(self.response.status, HTTPStatus):
            return self.response.status.phrase
        return "Unknown error"
