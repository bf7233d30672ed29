"""
Node construction, attribute setters and rendering.

Rendering output is compared byte for byte; clause order and quoting are part
of the contract with downstream DOT tools.
"""

import dataclasses

import pytest

from exceptions import InvalidNodeNameError
from graph.node import Node
from graph.style import Style


class TestConstruction:
    def test_label_defaults_to_name(self):
        node = Node("n1")
        assert node.name == "n1"
        assert node.label == "n1"

    def test_optional_attributes_empty(self):
        node = Node("n1")
        assert node.style is Style.NONE
        assert node.color is None
        assert node.shape is None
        assert node.url == ""

    @pytest.mark.parametrize("name", ["", "1a", "-x", "a b", "a\"b", "ok!"])
    def test_invalid_name_raises(self, name):
        with pytest.raises(InvalidNodeNameError):
            Node(name)

    def test_name_is_immutable(self):
        node = Node("n1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.name = "n2"


class TestSetters:
    def test_setters_return_new_node(self):
        node = Node("n1")
        colored = node.with_color("red")
        assert colored is not node
        assert node.color is None
        assert colored.color == "red"

    def test_with_label_accepts_arbitrary_text(self):
        node = Node("n1").with_label('any "text"\nhere')
        assert node.label == 'any "text"\nhere'
        assert node.name == "n1"

    def test_shape_and_color_can_be_cleared(self):
        node = Node("n1").with_shape("box").with_color("red")
        cleared = node.with_shape(None).with_color(None)
        assert cleared.shape is None
        assert cleared.color is None

    def test_with_style(self):
        assert Node("n1").with_style(Style.DOTTED).style is Style.DOTTED


class TestRender:
    def test_default_rendering(self):
        assert Node("n1").render() == '"n1"[label="n1"];'

    @pytest.mark.parametrize("name", ["a", "_x", ".dot", "Node_99", "a.b_c.9"])
    def test_identity_clause_verbatim(self, name):
        assert Node(name).render().startswith(f'"{name}"[label=')

    def test_render_is_idempotent(self):
        node = Node("n1").with_style(Style.BOLD).with_shape("box")
        assert node.render() == node.render()

    def test_to_dot_string_alias(self):
        node = Node("n1").with_color("red")
        assert node.to_dot_string() == node.render()

    def test_label_quote_is_escaped(self):
        rendered = Node("n1").with_label('say "hi"').render()
        assert rendered == '"n1"[label="say \\"hi\\""];'

    def test_only_color_set(self):
        assert Node("n1").with_color("red").render() == '"n1"[label="n1"][color="red"];'

    def test_color_is_escaped(self):
        rendered = Node("n1").with_color('re"d').render()
        assert '[color="re\\"d"]' in rendered

    def test_empty_url_is_omitted(self):
        assert "URL" not in Node("n1").with_url("").render()

    def test_url_clause(self):
        rendered = Node("n1").with_url("http://x.org/?q=\"a\"").render()
        assert rendered == '"n1"[label="n1"][URL="http://x.org/?q=\\"a\\""];'

    def test_style_clause(self):
        assert Node("n1").with_style(Style.INVISIBLE).render() == '"n1"[label="n1"][style="invis"];'

    def test_no_style_sentinel_omits_clause(self):
        node = Node("n1").with_style(Style.FILLED).with_style(Style.NONE)
        assert node.render() == '"n1"[label="n1"];'

    def test_clause_order_independent_of_setter_order(self):
        node = (
            Node("n1")
            .with_shape("box")
            .with_color("red")
            .with_url("u")
            .with_style(Style.DASHED)
            .with_label("L")
        )
        assert node.render() == (
            '"n1"[label="L"][URL="u"][style="dashed"][color="red"][shape="box"];'
        )

    def test_shape_is_not_escaped(self):
        rendered = Node("n1").with_shape('bo"x').render()
        assert rendered == '"n1"[label="n1"][shape="bo"x"];'

    def test_rerender_reflects_later_changes(self):
        node = Node("n1")
        first = node.render()
        node = node.with_label("changed")
        assert node.render() != first
        assert node.render() == '"n1"[label="changed"];'

    def test_no_trailing_newline(self):
        assert Node("n1").with_label("a\nb").render() == '"n1"[label="a\\\nb"];'
