"""Tests for built-in tag handlers, called directly on matched spans."""

import pytest

from corchete import (
    MissingAttributeError,
    MissingUrlTemplateError,
    RenderContext,
    TagSpan,
    find_tag,
    parse,
)
from corchete.handlers import optional_attribute, require_attribute
from corchete.handlers.builtins import (
    AlignTag,
    ColorTag,
    JiraTag,
    ListTag,
    ObjectLinkTag,
    ProcessTag,
    QuoteTag,
    SizeTag,
    UserTag,
)
from corchete.handlers.builtins.lists import BulletList, OrderedList


def span(text: str) -> TagSpan:
    """Match the first tag in text, named by its opening bracket."""
    name = text[1:].split("]", 1)[0].split("=", 1)[0].split()[0]
    found = find_tag(text, name)
    assert found is not None
    return found


@pytest.fixture
def context() -> RenderContext:
    return RenderContext(
        urls={
            "thread_url": "http://forum.test/thread/{id}",
            "post_url": "http://forum.test/post/{post_id}",
            "jira_url": "http://jira.test/browse/{jira_id}",
            "user_url": "http://forum.test/user/{user_id}",
        }
    )


class TestContracts:
    """require_attribute and optional_attribute."""

    def test_require_present(self) -> None:
        assert require_attribute(span("[color=red]x[/color]")) == "red"

    def test_require_missing(self) -> None:
        with pytest.raises(MissingAttributeError) as exc_info:
            require_attribute(span("[color]x[/color]"))
        assert exc_info.value.tag_name == "color"
        assert exc_info.value.attribute is None

    def test_optional(self) -> None:
        assert optional_attribute(span("[url=http://x]x[/url]")) == "http://x"
        assert optional_attribute(span("[url]http://x[/url]")) is None


class TestSizeTag:
    """Font size mapping."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("1", "60%"),
            ("3", "100%"),
            ("4", "120%"),
            ("7", "300%"),
            ("+1", "120%"),
            ("+4", "300%"),
            ("-1", "89%"),
            ("-2", "60%"),
            (" 2 ", "89%"),
        ],
    )
    def test_scale(self, value: str, expected: str) -> None:
        assert SizeTag().font_size(value) == expected

    @pytest.mark.parametrize("value", ["0", "8", "+5", "-3", "5px", "large", "1.5em"])
    def test_verbatim(self, value: str) -> None:
        assert SizeTag().font_size(value) == value

    def test_render(self) -> None:
        html = SizeTag().render(span("[size=+1]big[/size]"), RenderContext())
        assert html == '<span style="font-size: 120%;">big</span>'

    def test_requires_attribute(self) -> None:
        with pytest.raises(MissingAttributeError):
            SizeTag().render(span("[size]x[/size]"), RenderContext())


class TestLists:
    """List renderers."""

    def test_bullets(self) -> None:
        assert BulletList().render("[*] a [*] b") == "<ul><li>a</li><li>b</li></ul>"

    def test_lead_text_kept(self) -> None:
        assert BulletList().render("Items: [*] a") == "Items:<ul><li>a</li></ul>"

    def test_blank_items_dropped(self) -> None:
        assert BulletList().render("[*] a [*]   [*]\n[*] b") == "<ul><li>a</li><li>b</li></ul>"

    def test_no_items(self) -> None:
        assert BulletList().render("just text") == "just text<ul></ul>"

    def test_ordered(self) -> None:
        assert OrderedList("I").render("[*]x") == '<ol type="I"><li>x</li></ol>'

    @pytest.mark.parametrize(
        ("text", "opening"),
        [
            ("[list][*]x[/list]", "<ul>"),
            ("[list=1][*]x[/list]", '<ol type="1">'),
            ("[list=a][*]x[/list]", '<ol type="a">'),
        ],
    )
    def test_list_tag_picks_renderer(self, text: str, opening: str) -> None:
        assert ListTag().render(span(text), RenderContext()).startswith(opening)


class TestAlignTag:
    """Alignment by name or attribute."""

    @pytest.mark.parametrize("name", ["left", "center", "right"])
    def test_named(self, name: str) -> None:
        html = AlignTag().render(span(f"[{name}]x[/{name}]"), RenderContext())
        assert html == f'<div style="text-align: {name};">x</div>'

    def test_attribute(self) -> None:
        html = AlignTag().render(span("[align=right]x[/align]"), RenderContext())
        assert html == '<div style="text-align: right;">x</div>'

    def test_untouched_without_attribute(self) -> None:
        tag = span("[align]x[/align]")
        assert AlignTag().render(tag, RenderContext()) == tag.raw


class TestObjectLinkTag:
    """thread, post and attach links."""

    def test_generic_id_placeholder(self, context: RenderContext) -> None:
        html = ObjectLinkTag().render(span("[thread=42]Notes[/thread]"), context)
        assert html == '<a href="http://forum.test/thread/42">Notes</a>'

    def test_content_as_id(self, context: RenderContext) -> None:
        html = ObjectLinkTag().render(span("[post]7[/post]"), context)
        assert html == '<a href="http://forum.test/post/7">http://forum.test/post/7</a>'

    def test_missing_template(self, context: RenderContext) -> None:
        with pytest.raises(MissingUrlTemplateError) as exc_info:
            ObjectLinkTag().render(span("[attach]5[/attach]"), context)
        assert exc_info.value.key == "attach_url"
        assert exc_info.value.tag_name == "attach"

    def test_empty_template_counts_as_missing(self) -> None:
        context = RenderContext(urls={"thread_url": ""})
        with pytest.raises(MissingUrlTemplateError):
            ObjectLinkTag().render(span("[thread]1[/thread]"), context)


class TestJiraTag:
    """Issue tracker links."""

    def test_content_key_upper_cased(self, context: RenderContext) -> None:
        html = JiraTag().render(span("[jira]proj-1[/jira]"), context)
        assert html == '<a href="http://jira.test/browse/proj-1">PROJ-1</a>'

    def test_attribute_key_keeps_label(self, context: RenderContext) -> None:
        html = JiraTag().render(span("[jira=PROJ-2]the crash[/jira]"), context)
        assert html == '<a href="http://jira.test/browse/PROJ-2">the crash</a>'


class TestUserTag:
    def test_profile_id_lower_cased(self, context: RenderContext) -> None:
        html = UserTag().render(span("[name]Alice[/name]"), context)
        assert html == '<a href="http://forum.test/user/alice">Alice</a>'


class TestQuoteTag:
    """Quote attribution."""

    def test_no_attribution(self, context: RenderContext) -> None:
        html = QuoteTag().render(span("[quote]words[/quote]"), context)
        assert html == "<blockquote>\n    <p>words</p>\n    <footer></footer>\n</blockquote>"

    def test_plain_attribution(self, context: RenderContext) -> None:
        assert QuoteTag().footer("Alice", context) == "Alice"

    def test_post_attribution(self, context: RenderContext) -> None:
        footer = QuoteTag().footer("Alice;99", context)
        assert footer == '<a href="http://forum.test/post/99">Alice</a>'

    def test_post_attribution_needs_template(self) -> None:
        with pytest.raises(MissingUrlTemplateError) as exc_info:
            QuoteTag().footer("Alice;99", RenderContext())
        assert exc_info.value.key == "post_url"


class TestProcessTag:
    """Breadcrumb trails."""

    def test_render(self) -> None:
        html = ProcessTag().render(span("[process]A > B > C[/process]"), RenderContext())
        assert html == (
            '<ol class="breadcrumb">'
            "<li><a>A</a></li><li><a>B</a></li>"
            '<li class="active">C</li></ol>'
        )

    def test_single_step(self) -> None:
        html = ProcessTag().render(span("[process] Only [/process]"), RenderContext())
        assert html == '<ol class="breadcrumb"><li class="active">Only</li></ol>'

    def test_separator_without_whitespace(self) -> None:
        html = ProcessTag().render(span("[process]Foo>Bar[/process]"), RenderContext())
        assert html == '<ol class="breadcrumb"><li><a>Foo</a></li><li class="active">Bar</li></ol>'

    @pytest.mark.parametrize(
        ("content", "expected"),
        [
            ("A > B", ["A", "B"]),
            ("A>B>C", ["A", "B", "C"]),
            ("A >> B", ["A", "B"]),
            ("<strong>A</strong> > B", ["<strong>A</strong>", "B"]),
            ("1 < 2 > 3", ["1 < 2 > 3"]),
            ("a < b", ["a < b"]),
        ],
    )
    def test_steps(self, content: str, expected: list[str]) -> None:
        assert ProcessTag().steps(content) == expected

    def test_rendered_markup_inside_step(self) -> None:
        html = parse("[process][b]Home[/b] > Docs[/process]")
        assert html == (
            '<ol class="breadcrumb">'
            "<li><a><strong>Home</strong></a></li>"
            '<li class="active">Docs</li></ol>'
        )


def test_color_requires_attribute() -> None:
    with pytest.raises(MissingAttributeError, match="Tag 'color'"):
        ColorTag().render(span("[color]x[/color]"), RenderContext())
