from datetime import timedelta

import pytest
from pydantic import ValidationError

from vimeo_networking.api_client import CacheControl
from vimeo_networking.api_client import CacheControlBuilder
from vimeo_networking.api_client import FORCE_CACHE
from vimeo_networking.api_client import FORCE_NETWORK
from vimeo_networking.api_client import get_cache_control_builder


@pytest.mark.parametrize(
    "cache_control",
    [
        CacheControl(),
        CacheControl(max_age_seconds=60, no_transform=True),
        CacheControl(max_stale_seconds=0, min_fresh_seconds=10, only_if_cached=True),
        CacheControl(max_age_seconds=0, s_max_age_seconds=2**31 - 1),
        CacheControl(
            max_age_seconds=1,
            s_max_age_seconds=2,
            max_stale_seconds=3,
            min_fresh_seconds=4,
            no_cache=True,
            no_store=True,
            no_transform=True,
            only_if_cached=True,
            must_revalidate=True,
            is_public=True,
            is_private=True,
            immutable=True,
        ),
        FORCE_CACHE,
        FORCE_NETWORK,
    ],
)
def test_builder_without_changes(cache_control):
    assert get_cache_control_builder(cache_control).build() == cache_control


def test_builder_adds_directives():
    cache_control = CacheControl(max_age_seconds=60)

    actual = get_cache_control_builder(cache_control).no_store().build()

    assert actual == CacheControl(max_age_seconds=60, no_store=True)
    assert cache_control == CacheControl(max_age_seconds=60)


def test_builder_overrides_duration():
    cache_control = CacheControl(max_age_seconds=60)

    actual = get_cache_control_builder(cache_control).max_age(timedelta(minutes=5))

    assert actual.build().max_age_seconds == 300


@pytest.mark.parametrize(
    "method", ["max_age", "s_max_age", "max_stale", "min_fresh"]
)
def test_builder_negative_duration(method):
    with pytest.raises(ValueError):
        getattr(CacheControlBuilder(), method)(-1)


def test_builder_clamps_duration():
    actual = CacheControlBuilder().max_stale(timedelta(days=100000)).build()

    assert actual.max_stale_seconds == 2**31 - 1


@pytest.mark.parametrize(
    "header,expected",
    [
        (None, CacheControl()),
        ("", CacheControl()),
        ("no-cache", CacheControl(no_cache=True)),
        (
            "private, max-age=0, must-revalidate",
            CacheControl(is_private=True, max_age_seconds=0, must_revalidate=True),
        ),
        ("public, s-maxage=600", CacheControl(is_public=True, s_max_age_seconds=600)),
        ('max-age="60"', CacheControl(max_age_seconds=60)),
        ("Max-Age=60, NO-STORE", CacheControl(max_age_seconds=60, no_store=True)),
        ("max-stale", CacheControl(max_stale_seconds=2**31 - 1)),
        ("min-fresh=5, immutable", CacheControl(min_fresh_seconds=5, immutable=True)),
        ("max-age=abc, no-transform", CacheControl(no_transform=True)),
        ("max-age=-1", CacheControl()),
        ("only-if-cached, foo=bar", CacheControl(only_if_cached=True)),
    ],
)
def test_parse(header, expected):
    assert CacheControl.parse(header) == expected


@pytest.mark.parametrize(
    "cache_control,expected",
    [
        (CacheControl(), ""),
        (FORCE_NETWORK, "no-cache"),
        (FORCE_CACHE, "max-stale=2147483647, only-if-cached"),
        (
            CacheControl(no_store=True, max_age_seconds=60, is_private=True),
            "no-store, max-age=60, private",
        ),
    ],
)
def test_str(cache_control, expected):
    assert str(cache_control) == expected


def test_str_parses_back():
    cache_control = CacheControl(
        max_age_seconds=1, min_fresh_seconds=2, no_cache=True, immutable=True
    )

    assert CacheControl.parse(str(cache_control)) == cache_control


@pytest.mark.parametrize(
    "field",
    ["max_age_seconds", "s_max_age_seconds", "max_stale_seconds", "min_fresh_seconds"],
)
@pytest.mark.parametrize("seconds", [-1, 2**31, 2**40])
def test_duration_out_of_range(field, seconds):
    with pytest.raises(ValidationError):
        CacheControl(**{field: seconds})
