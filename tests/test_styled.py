from concurrent.futures import ThreadPoolExecutor

import pytest
from bs4 import BeautifulSoup

from markupgen import InvalidChildTypeError, Style, Styled, css, m, m_noescape, render


def test_style_ids_increase() -> None:
    first = Style(css("p", color="red"))
    second = Style(css("p", color="red"))
    assert second.id > first.id


def test_style_ids_unique_across_threads() -> None:
    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(lambda _: Style().id, range(200)))
    assert len(set(ids)) == 200


def test_rules_gain_scoping_suffix() -> None:
    style = Style(css("p", color="red"))
    assert style.rules[0].tag == f"p[v-style{style.id}]"
    assert render(style) == f"p[v-style{style.id}] {{color: red;}}"
    assert str(style) == render(style)


def test_rules_without_declarations_and_media_keep_selector() -> None:
    style = Style(
        css("nav", css("a", color="red")),
        [css("@media print", css("p", color="black"))],
    )
    sid = style.id
    assert render(style) == (
        f"nav {{}}nav a[v-style{sid}] {{color: red;}}"
        f"@media print {{p[v-style{sid}] {{color: black;}}}}"
    )


def test_rules_must_be_css_nodes() -> None:
    with pytest.raises(InvalidChildTypeError):
        Style(m("div"))


def test_apply_stamps_every_dom_node() -> None:
    style = Style(css("p", color="red"))
    tree = m("div", m("p", "hi"), "text")
    styled = style(tree)
    sid = style.id
    assert isinstance(styled, Styled)
    assert render(styled) == f"<div v-style{sid}><p v-style{sid}>hi</p>text</div>"
    assert render(tree) == "<div><p>hi</p>text</div>"


def test_styled_descendants_are_a_cascade_barrier() -> None:
    inner = Style(css("span", color="blue"))
    outer = Style(css("div", margin=0))
    component = inner(m("span", m("b", "x")))
    page = outer(m("div", component))
    assert render(page) == (
        f"<div v-style{outer.id}><span v-style{inner.id}><b v-style{inner.id}>x</b></span></div>"
    )


def test_css_children_of_dom_nodes_are_not_stamped() -> None:
    rule = css("a", color="red")
    style = Style(rule)
    styled = style(m_noescape("style", rule))
    assert styled.children == (rule,)


def test_extending_styled_stamps_new_children() -> None:
    style = Style(css("p", color="red"))
    styled = style(m("div"))
    extended = styled(m("p", "new"), id="x")
    sid = style.id
    assert isinstance(extended, Styled)
    assert extended.style is style
    assert render(extended) == f'<div v-style{sid} id="x"><p v-style{sid}>new</p></div>'


def test_applying_style_to_styled_node_composes() -> None:
    first = Style(css("p", color="red"))
    second = Style(css("p", margin=0))
    twice = second(first(m("div", m("p"))))
    assert twice.style is second
    assert render(twice) == (
        f"<div v-style{first.id} v-style{second.id}>"
        f"<p v-style{first.id} v-style{second.id}></p></div>"
    )


def test_style_applies_only_to_dom_nodes() -> None:
    style = Style()
    with pytest.raises(TypeError):
        style(css("a", color="red"))


def test_styled_delegates_and_renders_like_wrapped_node() -> None:
    style = Style()
    styled = style(m("p", "x", id="a")).with_class("note")
    assert styled.tag == "p"
    assert styled.attrs["class"] == "note"
    assert styled.children == ("x",)
    assert str(styled) == render(styled.node)


def test_scoped_page_matches_selectors() -> None:
    style = Style(css(".card", css("h2", fontWeight="bold"), padding="1em"))
    page = m("div", m_noescape("style", style), style(m("div", m("h2", "Title"), class_="card")))
    soup = BeautifulSoup(render(page), "html.parser")
    assert soup.select_one(f".card[v-style{style.id}] h2[v-style{style.id}]").get_text() == "Title"
    assert f".card[v-style{style.id}] h2[v-style{style.id}] {{font-weight: bold;}}" in soup.style.string


def test_styled_nodes_are_hashable() -> None:
    style = Style(css("p", color="red"))
    styled = style(m("p", "x"))
    assert hash(styled) == hash(Styled(styled.node, style))
    assert styled in {styled}
