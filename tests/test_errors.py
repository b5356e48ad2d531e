import pytest

from markupgen import (
    EmptyTagError,
    InvalidAttributeNameError,
    InvalidChildTypeError,
    NaNAttributeValueError,
    NullOrEmptyCSSValueError,
    ValidationError,
    VoidElementChildrenError,
    css,
    m,
)


@pytest.mark.parametrize("build", [lambda: m(""), lambda: m("   "), lambda: css("")])
def test_empty_tag(build) -> None:
    with pytest.raises(EmptyTagError):
        build()


def test_void_element_with_children() -> None:
    with pytest.raises(VoidElementChildrenError) as exc:
        m("img", "caption")
    assert exc.value.tag == "img"
    assert "<img />" in str(exc.value)


def test_void_element_with_empty_children_is_fine() -> None:
    assert m("img", [], ()).children == ()


@pytest.mark.parametrize("child", ["text", 1, m("p")])
def test_css_children_must_be_css_nodes(child) -> None:
    with pytest.raises(InvalidChildTypeError):
        css("a", child)


def test_attribute_name_with_whitespace() -> None:
    with pytest.raises(InvalidAttributeNameError) as exc:
        m("div", attrs={"data foo": "1"})
    assert exc.value.name == "data foo"


def test_nan_attribute_value() -> None:
    with pytest.raises(NaNAttributeValueError):
        m("div", width=float("nan"))
    with pytest.raises(NaNAttributeValueError):
        css("a", width=float("nan"))


@pytest.mark.parametrize("value", [None, ""])
def test_null_or_empty_css_value(value) -> None:
    with pytest.raises(NullOrEmptyCSSValueError) as exc:
        css("a", color=value)
    assert exc.value.name == "color"
    assert "a { color: ; }" in str(exc.value)


def test_errors_share_a_base() -> None:
    for error in (
        EmptyTagError,
        VoidElementChildrenError,
        InvalidChildTypeError,
        InvalidAttributeNameError,
        NaNAttributeValueError,
        NullOrEmptyCSSValueError,
    ):
        assert issubclass(error, ValidationError)
    assert issubclass(ValidationError, ValueError)


def test_failed_extension_keeps_nothing() -> None:
    node = m("div", id="x")
    with pytest.raises(InvalidAttributeNameError):
        node(attrs_ok="1", **{"bad name": "2"})
    assert dict(node.attrs) == {"id": "x"}
