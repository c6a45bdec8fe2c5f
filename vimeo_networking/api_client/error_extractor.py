import logging

import inject

from .codec import JsonCodec
from .error import VimeoError
from .exceptions import ApiException
from .response import Response

__all__ = ["ErrorExtractor", "get_error_from_response", "raise_for_error"]


logger = logging.getLogger(__name__)


class ErrorExtractor:
    """Materializes a VimeoError from a completed response.

    The JsonCodec is taken from the inject container, unless one is passed explicitly.
    """

    def __init__(self, codec_override: JsonCodec | None = None):
        self.codec_override = codec_override

    @property
    def codec(self) -> JsonCodec:
        return self.codec_override or inject.instance(JsonCodec)

    def extract(self, response: Response | None) -> VimeoError | None:
        """Returns None for a successful (or absent) response, else a VimeoError.

        Decoding is best-effort: if the error body is absent or cannot be decoded,
        an empty VimeoError is returned. The error always refers to the response.
        """
        if response is None or response.is_successful:
            return None
        error = None
        body = response.error_body
        if body is not None:
            try:
                error = self.codec.decode(body, VimeoError)
            except Exception:
                logger.warning(
                    "could not decode the error body of a %s response",
                    int(response.status),
                    exc_info=True,
                )
        if error is None:
            error = VimeoError()
        return error.update(response=response)


def get_error_from_response(
    response: Response | None, codec: JsonCodec | None = None
) -> VimeoError | None:
    return ErrorExtractor(codec).extract(response)


def raise_for_error(response: Response | None, codec: JsonCodec | None = None) -> None:
    if response is None:
        return
    error = get_error_from_response(response, codec)
    if error is not None:
        raise ApiException(error, status=response.status)
