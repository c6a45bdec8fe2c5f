import logging
import re
from urllib.parse import unquote_plus

__all__ = ["get_simple_query_map"]


logger = logging.getLogger(__name__)

MALFORMED_ESCAPE_REGEX = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _decode(value: str) -> str:
    if MALFORMED_ESCAPE_REGEX.search(value):
        raise ValueError(f"Malformed percent-encoding in '{value}'")
    return unquote_plus(value, errors="strict")


def get_simple_query_map(uri: str) -> dict[str, str]:
    """Return the query parameters of a uri, with exactly one value per name.

    If a name occurs multiple times, the last value is kept. A parameter without a
    value ("?a") maps to an empty string.

    If the query contains malformed percent-encoding, this is logged and the
    parameters up to the malformed one are returned. This function never raises.
    """
    result: dict[str, str] = {}
    _, _, query = uri.partition("?")
    query, _, _ = query.partition("#")
    try:
        for pair in query.split("&"):
            if not pair:
                continue
            name, _, value = pair.partition("=")
            result[_decode(name)] = _decode(value)
    except ValueError:
        # Do not crash the caller; an empty or partial result points to a malformed
        # url returned from the API
        logger.warning("could not parse the query of '%s'", uri, exc_info=True)
    return result
