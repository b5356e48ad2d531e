from markupgen.naming import Identifier, css_property_name, dom_attr_name, kebab


def test_kebab_camel_and_snake() -> None:
    assert kebab("fontSize") == "font-size"
    assert kebab("font_size") == "font-size"
    assert kebab("WebkitTransition") == "-webkit-transition"
    assert kebab("h1") == "h1"
    assert kebab("--main-color") == "--main-color"


def test_dom_attr_name_keeps_known_camel_case() -> None:
    assert dom_attr_name("viewbox") == "viewBox"
    assert dom_attr_name("viewBox") == "viewBox"
    assert dom_attr_name("preserveAspectRatio") == "preserveAspectRatio"
    assert dom_attr_name("dataFoo") == "data-foo"


def test_trailing_underscore_spells_reserved_words() -> None:
    assert dom_attr_name("class_") == "class"
    assert dom_attr_name("for_") == "for"
    assert css_property_name(Identifier("float_")) == "float"
    assert css_property_name("backgroundColor") == "background-color"
