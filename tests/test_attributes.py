"""Unit tests for attribute merging and the provider pool.

The pool folds provider output in ascending ``sort_order`` with a stable
tie-break, and the merge helper unions ``class`` tokens while overwriting every
other attribute.
"""

from __future__ import annotations

import typing as typ

import pytest

from banner_slider.attributes import (
    BackgroundVideoAttributeProvider,
    ElementAttributePool,
    ElementAttributeProvider,
    LinkTrackingAttributeProvider,
    SliderDataAttributeProvider,
    default_providers,
    merge_attributes,
)
from banner_slider.models import Banner, BannerType, Slider

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from banner_slider.models import AttributeMap


class StaticProvider(ElementAttributeProvider):
    """Provider returning the same attributes for every element kind."""

    def __init__(self, sort_order: int, attributes: AttributeMap) -> None:
        self.sort_order = sort_order
        self.attributes = attributes

    def get_container_attributes(
        self, slider: Slider, banners: cabc.Sequence[Banner]
    ) -> AttributeMap:
        return dict(self.attributes)

    def get_slide_attributes(self, slider: Slider, banner: Banner) -> AttributeMap:
        return dict(self.attributes)

    def get_link_attributes(self, slider: Slider, banner: Banner) -> AttributeMap:
        return dict(self.attributes)


SLIDER = Slider(slider_id=3, effect="fade")
BANNER = Banner(banner_id=9, slider_id=3, link_url="/sale", position=2)


def test_class_tokens_are_unioned_without_duplicates() -> None:
    """Class values should merge into an ordered, de-duplicated token list."""
    merged = merge_attributes({"class": "a b"}, {"class": "b c"})
    assert merged == {"class": "a b c"}, f"expected 'a b c', got {merged!r}"


def test_plain_attributes_are_overwritten() -> None:
    """Non-class attributes take the incoming value."""
    assert merge_attributes({"x": 1}, {"x": 2}) == {"x": 2}, (
        "expected incoming value to overwrite existing one"
    )


def test_merge_keeps_existing_key_order_and_appends_new_keys() -> None:
    """Existing keys keep their slot; new keys follow incoming order."""
    merged = merge_attributes({"id": "s", "class": "a"}, {"role": "x", "id": "t"})
    assert list(merged) == ["id", "class", "role"], (
        f"unexpected key order {list(merged)!r}"
    )
    assert merged["id"] == "t", "expected id to be overwritten in place"


def test_merge_does_not_mutate_inputs() -> None:
    """Both input mappings stay untouched."""
    existing = {"class": "a"}
    incoming = {"class": "b"}
    merge_attributes(existing, incoming)
    assert existing == {"class": "a"}, "existing mapping was mutated"
    assert incoming == {"class": "b"}, "incoming mapping was mutated"


def test_non_string_class_values_are_single_tokens() -> None:
    """Integer class values are treated as one token and empty tokens dropped."""
    merged = merge_attributes({"class": 5}, {"class": "  c  5 "})
    assert merged["class"] == "5 c", f"expected '5 c', got {merged['class']!r}"


def test_first_class_value_is_kept_verbatim() -> None:
    """Without an existing class, the incoming value is stored as-is."""
    assert merge_attributes({}, {"class": "x  y"}) == {"class": "x  y"}


@pytest.mark.parametrize(
    "registration",
    [
        pytest.param((0, 1, 2), id="sorted"),
        pytest.param((2, 1, 0), id="reversed"),
        pytest.param((1, 2, 0), id="shuffled"),
    ],
)
def test_pool_output_is_independent_of_registration_order(
    registration: tuple[int, int, int],
) -> None:
    """Distinct sort orders fully determine the merge order."""
    providers = [
        StaticProvider(10, {"class": "first", "data-x": "10"}),
        StaticProvider(20, {"class": "second", "data-x": "20"}),
        StaticProvider(30, {"class": "third"}),
    ]
    pool = ElementAttributePool(providers[index] for index in registration)
    attributes = pool.get_slide_attributes(SLIDER, BANNER)
    assert attributes == {"class": "first second third", "data-x": "20"}, (
        f"unexpected merged attributes {attributes!r}"
    )


def test_equal_sort_orders_keep_registration_order() -> None:
    """Ties are resolved by registration order (stable sort)."""
    pool = ElementAttributePool(
        [
            StaticProvider(5, {"data-winner": "a", "class": "a"}),
            StaticProvider(5, {"data-winner": "b", "class": "b"}),
            StaticProvider(1, {"data-winner": "early", "class": "early"}),
        ]
    )
    attributes = pool.get_link_attributes(SLIDER, BANNER)
    assert attributes == {"data-winner": "b", "class": "early a b"}, (
        f"expected stable ordering, got {attributes!r}"
    )


def test_pool_sorts_providers_once() -> None:
    """The sorted provider sequence is cached for the pool's lifetime."""
    pool = ElementAttributePool([StaticProvider(2, {}), StaticProvider(1, {})])
    first = pool.providers
    assert pool.providers is first, "expected the sorted list to be reused"
    assert [provider.sort_order for provider in first] == [1, 2]


def test_empty_pool_returns_empty_maps() -> None:
    """Without providers every element kind gets no attributes."""
    pool = ElementAttributePool()
    assert pool.get_container_attributes(SLIDER, [BANNER]) == {}
    assert pool.get_slide_attributes(SLIDER, BANNER) == {}
    assert pool.get_link_attributes(SLIDER, BANNER) == {}


def test_default_providers_contribute_per_element() -> None:
    """Built-in providers expose ids, modifiers, and tracking data."""
    video = Banner(
        banner_id=4,
        slider_id=3,
        banner_type=BannerType.VIDEO,
        video_as_background=True,
    )
    pool = ElementAttributePool(reversed(default_providers()))
    assert pool.get_container_attributes(SLIDER, [video]) == {
        "data-slider-id": 3,
        "class": "banner-slider--fade",
    }
    assert pool.get_slide_attributes(SLIDER, video) == {
        "data-banner-id": 4,
        "class": (
            "banner-slider__slide--video banner-slider__slide--video-background"
        ),
    }
    assert pool.get_link_attributes(SLIDER, video) == {}, (
        "expected no link tracking for banners without a link"
    )
    assert pool.get_link_attributes(SLIDER, BANNER) == {
        "data-banner-id": 9,
        "data-banner-position": 2,
    }


def test_builtin_providers_are_ordered() -> None:
    """Built-in providers run data, background video, then link tracking."""
    pool = ElementAttributePool(
        [
            LinkTrackingAttributeProvider(),
            SliderDataAttributeProvider(),
            BackgroundVideoAttributeProvider(),
        ]
    )
    assert [type(provider) for provider in pool.providers] == [
        SliderDataAttributeProvider,
        BackgroundVideoAttributeProvider,
        LinkTrackingAttributeProvider,
    ]
