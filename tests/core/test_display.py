"""Tests for the bounded generic view and its capability check."""

from __future__ import annotations

import pytest

from packages.generics_core.display import (
    DEFAULT_LABEL,
    GenericView,
    is_displayable,
    make_view,
    require_displayable,
)
from packages.generics_core.rendering import Rendered, Text
from packages.generics_shared.errors import CapabilityContractError, ErrorCategory, codes


def test_make_view_renders_label_then_content() -> None:
    """A generic view should render its label followed by the content lines."""
    view = make_view("Generic view", Text("Hello Developer!"))

    assert view.render() == Rendered.of("Generic view", "Hello Developer!")


def test_generic_view_uses_default_label() -> None:
    """Direct construction without a label should use the default label."""
    view = GenericView(content=Text("body"))

    assert view.label == DEFAULT_LABEL
    assert view.render().lines == ("Generic view", "body")


def test_generic_views_nest() -> None:
    """A generic view is itself displayable and can be used as content."""
    inner = make_view("Inner", Text("leaf"))
    outer = make_view("Outer", inner)

    assert outer.render().lines == ("Outer", "Inner", "leaf")


def test_make_view_rejects_plain_string_before_construction(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """A plain string content should be rejected before any view exists."""
    constructed: list[object] = []
    monkeypatch.setattr(GenericView, "__post_init__", lambda self: constructed.append(self))

    with pytest.raises(CapabilityContractError) as exc_info:
        make_view("Generic view", "plain string")

    assert constructed == []
    detail = exc_info.value.detail
    assert detail.code == codes.CAPABILITY_CONTRACT_VIOLATION
    assert detail.category == ErrorCategory.CAPABILITY
    assert detail.metadata == {"field_name": "content", "content_type": "str"}


def test_direct_construction_rejects_non_displayable_content() -> None:
    """Constructing GenericView directly should enforce the same bound."""
    with pytest.raises(CapabilityContractError):
        GenericView(content="plain string")  # type: ignore[type-var]


def test_capability_error_is_a_type_error() -> None:
    """Capability violations should be catchable as TypeError."""
    with pytest.raises(TypeError, match="content must implement Displayable; got int"):
        make_view("Generic view", 23)  # type: ignore[type-var]


def test_wrapped_string_is_displayable() -> None:
    """Wrapping a string in Text should satisfy the capability."""
    assert is_displayable("plain string") is False
    assert is_displayable(Text("plain string")) is True


def test_custom_class_with_render_satisfies_capability() -> None:
    """Any object with a render method should be accepted structurally."""

    class Badge:
        def render(self) -> Rendered:
            return Rendered.of("[badge]")

    badge = Badge()

    assert require_displayable(badge, field_name="content") is badge
    assert make_view("Badges", badge).render().lines == ("Badges", "[badge]")


def test_make_view_rejects_non_string_label() -> None:
    """A label that is not a str should be rejected at construction."""
    with pytest.raises(TypeError, match="label must be str; got int"):
        make_view(23, Text("body"))  # type: ignore[arg-type]

    with pytest.raises(TypeError, match="label must be str; got NoneType"):
        GenericView(content=Text("body"), label=None)  # type: ignore[arg-type]
