"""Tests for waypoint.routing.values — Static and Computed properties."""

import pytest

from waypoint.errors import ComputedValueError
from waypoint.routing.values import Computed, Static, wrap, wrap_all


class TestWrap:
    def test_plain_value_is_static(self) -> None:
        assert wrap("About") == Static("About")

    def test_callable_is_computed(self) -> None:
        def title(page):
            return page["id"]

        value = wrap(title)
        assert isinstance(value, Computed)
        assert value.func is title

    def test_already_wrapped_passes_through(self) -> None:
        static = Static(1)
        assert wrap(static) is static

    def test_wrap_all_preserves_order(self) -> None:
        wrapped = wrap_all({"b": 1, "a": len})
        assert list(wrapped) == ["b", "a"]
        assert isinstance(wrapped["a"], Computed)


class TestEvaluate:
    def test_static_ignores_page(self) -> None:
        assert Static(False).evaluate({"id": "x"}) is False

    def test_computed_receives_page(self) -> None:
        value = Computed(lambda page: page["id"].upper())
        assert value.evaluate({"id": "about"}) == "ABOUT"

    def test_computed_returning_callable_raises(self) -> None:
        value = Computed(lambda page: len)
        with pytest.raises(ComputedValueError, match="returned a callable"):
            value.evaluate({"id": "about"})

    def test_error_carries_key_path(self) -> None:
        value = Computed(lambda page: len)
        with pytest.raises(ComputedValueError) as exc_info:
            value.evaluate({"id": "about"}, "schema.routes.about.title")
        assert exc_info.value.key_path == "schema.routes.about.title"

    def test_default_key_path(self) -> None:
        with pytest.raises(ComputedValueError) as exc_info:
            Computed(lambda page: len).evaluate({})
        assert exc_info.value.key_path == "schema"
