from markupgen import css, render
from markupgen.css_model import is_media


def test_rule_with_declarations() -> None:
    assert render(css("a", color="red", fontSize="12px")) == "a {color: red;font-size: 12px;}"


def test_nested_rules_flatten_to_descendant_selectors() -> None:
    rule = css("a", css("b", color="red"), color="blue")
    assert render(rule) == "a {color: blue;}a b {color: red;}"


def test_deep_nesting() -> None:
    rule = css("a", css("b", css("c", x=1), y=2), z=3)
    assert render(rule) == "a {z: 3;}a b {y: 2;}a b c {x: 1;}"


def test_media_rules_nest_children() -> None:
    rule = css("@media (min-width: 100px)", css("b", color="red"))
    assert is_media(rule)
    assert render(rule) == "@media (min-width: 100px) {b {color: red;}}"


def test_css_is_never_escaped() -> None:
    rule = css("a[href^='x'] > b", content='"<&>"')
    assert render(rule) == "a[href^='x'] > b {content: \"<&>\";}"


def test_property_names_are_kebab_cased() -> None:
    rule = css("p", attrs={"backgroundColor": "red", "--main-color": "blue"}, float_="left")
    assert list(rule.attrs) == ["background-color", "--main-color", "float"]


def test_rule_without_declarations_still_renders_children() -> None:
    assert render(css("nav", css("a", color="red"))) == "nav {}nav a {color: red;}"


def test_selector_is_stripped() -> None:
    assert css("  p  ", color="red").tag == "p"
