from datetime import timedelta
from typing import Annotated

from pydantic import Field

from vimeo_networking import ValueObject

__all__ = [
    "CacheControl",
    "CacheControlBuilder",
    "get_cache_control_builder",
    "FORCE_NETWORK",
    "FORCE_CACHE",
]


MAX_SECONDS = 2**31 - 1

Seconds = Annotated[int, Field(ge=0, le=MAX_SECONDS)]


def _to_seconds(value: int | timedelta, name: str) -> int:
    if isinstance(value, timedelta):
        value = int(value.total_seconds())
    if value < 0:
        raise ValueError(f"{name} < 0: {value}")
    return min(value, MAX_SECONDS)


def _parse_seconds(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return _to_seconds(int(value), "seconds")
    except ValueError:
        return None


class CacheControl(ValueObject):
    """The directives of a Cache-Control header.

    Durations are in seconds (0 up to 2147483647), None means that the directive is
    absent.
    """

    max_age_seconds: Seconds | None = None
    s_max_age_seconds: Seconds | None = None
    max_stale_seconds: Seconds | None = None
    min_fresh_seconds: Seconds | None = None
    no_cache: bool = False
    no_store: bool = False
    no_transform: bool = False
    only_if_cached: bool = False
    must_revalidate: bool = False
    is_public: bool = False
    is_private: bool = False
    immutable: bool = False

    @classmethod
    def parse(cls, header: str | None) -> "CacheControl":
        """Parse a Cache-Control header value. Unknown directives are ignored."""
        values = {}
        for directive in (header or "").split(","):
            name, sep, value = directive.partition("=")
            name = name.strip().lower()
            value = value.strip().strip('"') if sep else None
            if name == "max-age":
                values["max_age_seconds"] = _parse_seconds(value)
            elif name == "s-maxage":
                values["s_max_age_seconds"] = _parse_seconds(value)
            elif name == "max-stale":
                # without a value, any staleness is acceptable
                values["max_stale_seconds"] = (
                    MAX_SECONDS if value is None else _parse_seconds(value)
                )
            elif name == "min-fresh":
                values["min_fresh_seconds"] = _parse_seconds(value)
            elif name == "no-cache":
                values["no_cache"] = True
            elif name == "no-store":
                values["no_store"] = True
            elif name == "no-transform":
                values["no_transform"] = True
            elif name == "only-if-cached":
                values["only_if_cached"] = True
            elif name == "must-revalidate":
                values["must_revalidate"] = True
            elif name == "public":
                values["is_public"] = True
            elif name == "private":
                values["is_private"] = True
            elif name == "immutable":
                values["immutable"] = True
        return cls(**values)

    def __str__(self) -> str:
        result = []
        if self.no_cache:
            result.append("no-cache")
        if self.no_store:
            result.append("no-store")
        if self.max_age_seconds is not None:
            result.append(f"max-age={self.max_age_seconds}")
        if self.s_max_age_seconds is not None:
            result.append(f"s-maxage={self.s_max_age_seconds}")
        if self.is_private:
            result.append("private")
        if self.is_public:
            result.append("public")
        if self.must_revalidate:
            result.append("must-revalidate")
        if self.max_stale_seconds is not None:
            result.append(f"max-stale={self.max_stale_seconds}")
        if self.min_fresh_seconds is not None:
            result.append(f"min-fresh={self.min_fresh_seconds}")
        if self.only_if_cached:
            result.append("only-if-cached")
        if self.no_transform:
            result.append("no-transform")
        if self.immutable:
            result.append("immutable")
        return ", ".join(result)


class CacheControlBuilder:
    """Fluent builder for CacheControl. Every setter returns the builder."""

    def __init__(self):
        self._values = {}

    def max_age(self, value: int | timedelta) -> "CacheControlBuilder":
        self._values["max_age_seconds"] = _to_seconds(value, "max_age")
        return self

    def s_max_age(self, value: int | timedelta) -> "CacheControlBuilder":
        self._values["s_max_age_seconds"] = _to_seconds(value, "s_max_age")
        return self

    def max_stale(self, value: int | timedelta) -> "CacheControlBuilder":
        self._values["max_stale_seconds"] = _to_seconds(value, "max_stale")
        return self

    def min_fresh(self, value: int | timedelta) -> "CacheControlBuilder":
        self._values["min_fresh_seconds"] = _to_seconds(value, "min_fresh")
        return self

    def no_cache(self) -> "CacheControlBuilder":
        self._values["no_cache"] = True
        return self

    def no_store(self) -> "CacheControlBuilder":
        self._values["no_store"] = True
        return self

    def no_transform(self) -> "CacheControlBuilder":
        self._values["no_transform"] = True
        return self

    def only_if_cached(self) -> "CacheControlBuilder":
        self._values["only_if_cached"] = True
        return self

    def must_revalidate(self) -> "CacheControlBuilder":
        self._values["must_revalidate"] = True
        return self

    def public(self) -> "CacheControlBuilder":
        self._values["is_public"] = True
        return self

    def private(self) -> "CacheControlBuilder":
        self._values["is_private"] = True
        return self

    def immutable(self) -> "CacheControlBuilder":
        self._values["immutable"] = True
        return self

    def build(self) -> CacheControl:
        return CacheControl(**self._values)


def get_cache_control_builder(cache_control: CacheControl) -> CacheControlBuilder:
    """Return a builder holding the directives of an existing CacheControl.

    Useful for adding directives to an already defined CacheControl.
    """
    builder = CacheControlBuilder()
    if cache_control.max_age_seconds is not None:
        builder.max_age(cache_control.max_age_seconds)
    if cache_control.s_max_age_seconds is not None:
        builder.s_max_age(cache_control.s_max_age_seconds)
    if cache_control.max_stale_seconds is not None:
        builder.max_stale(cache_control.max_stale_seconds)
    if cache_control.min_fresh_seconds is not None:
        builder.min_fresh(cache_control.min_fresh_seconds)
    if cache_control.no_cache:
        builder.no_cache()
    if cache_control.no_store:
        builder.no_store()
    if cache_control.no_transform:
        builder.no_transform()
    if cache_control.only_if_cached:
        builder.only_if_cached()
    if cache_control.must_revalidate:
        builder.must_revalidate()
    if cache_control.is_public:
        builder.public()
    if cache_control.is_private:
        builder.private()
    if cache_control.immutable:
        builder.immutable()
    return builder


# Request directives that bypass, or exclusively use, the response cache
FORCE_NETWORK = CacheControlBuilder().no_cache().build()
FORCE_CACHE = CacheControlBuilder().only_if_cached().max_stale(MAX_SECONDS).build()
