from http import HTTPStatus
from typing import Annotated

from aiohttp import ClientResponse
from pydantic import Field
from urllib3 import BaseHTTPResponse

from vimeo_networking import ValueObject

from .cache_control import CacheControl

__all__ = ["Response", "Status", "is_success"]


# Codes that HTTPStatus does not define (e.g. 499) are kept as plain ints
Status = Annotated[HTTPStatus | int, Field(union_mode="left_to_right")]


def is_success(status: HTTPStatus | int) -> bool:
    """Returns True on 2xx status"""
    return (int(status) // 100) == 2


class Response(ValueObject):
    """A completed HTTP response, decoupled from the client that produced it.

    On an unsuccessful response, ``data`` holds the error body.
    """

    status: Status
    data: bytes | None = None
    content_type: str | None = None
    headers: dict[str, str] = {}

    @property
    def is_successful(self) -> bool:
        return is_success(self.status)

    @property
    def error_body(self) -> bytes | None:
        if self.is_successful or not self.data:
            return None
        return self.data

    def get_header(self, name: str) -> str | None:
        name = name.lower()
        for key, value in self.headers.items():
            if key.lower() == name:
                return value
        return None

    @property
    def cache_control(self) -> CacheControl:
        return CacheControl.parse(self.get_header("Cache-Control"))

    @classmethod
    def from_urllib3(cls, response: BaseHTTPResponse) -> "Response":
        return cls(
            status=response.status,
            data=response.data,
            content_type=response.headers.get("Content-Type"),
            headers=dict(response.headers),
        )

    @classmethod
    async def from_aiohttp(cls, response: ClientResponse) -> "Response":
        return cls(
            status=response.status,
            data=await response.read(),
            content_type=response.headers.get("Content-Type"),
            headers=dict(response.headers),
        )
