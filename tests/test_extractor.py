"""Tests for tag span extraction.

Tests cover:
- Leftmost-open, nearest-close matching
- Name boundaries and case-insensitivity
- Spans spanning newlines
- Complete-pair name discovery
- Property-based invariants of TagSpan
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from corchete.extractor import find_tag, is_valid_tag_name, iter_tag_names


class TestFindTag:
    """find_tag() matching semantics."""

    def test_simple_span(self) -> None:
        span = find_tag("a [b]x[/b] c", "b")
        assert span is not None
        assert span.raw == "[b]x[/b]"
        assert span.name == "b"
        assert span.attributes_raw == ""
        assert span.content == "x"
        assert (span.start, span.end) == (2, 10)

    def test_attributes_raw(self) -> None:
        span = find_tag('[jgrossi repo="foo"]Junior[/jgrossi]', "jgrossi")
        assert span is not None
        assert span.attributes_raw == ' repo="foo"'
        assert span.attributes["repo"] == "foo"

    def test_positional_attribute_under_tag_name(self) -> None:
        span = find_tag("[color=red]c[/color]", "color")
        assert span is not None
        assert span.attributes["color"] == "red"

    def test_no_match(self) -> None:
        assert find_tag("plain text", "b") is None

    def test_unclosed(self) -> None:
        assert find_tag("[b]never closed", "b") is None

    def test_close_without_open(self) -> None:
        assert find_tag("text[/b]", "b") is None

    def test_unterminated_opening(self) -> None:
        assert find_tag("[b x[/b]", "b") is None

    def test_nearest_close(self) -> None:
        span = find_tag("[b]one[/b] and [b]two[/b]", "b")
        assert span is not None
        assert span.content == "one"

    def test_nested_same_name_pairs_outer_open_with_inner_close(self) -> None:
        span = find_tag("[b][b]x[/b][/b]", "b")
        assert span is not None
        assert span.raw == "[b][b]x[/b]"
        assert span.content == "[b]x"

    def test_across_newlines(self) -> None:
        span = find_tag("[code]\nline 1\nline 2\n[/code]", "code")
        assert span is not None
        assert span.content == "\nline 1\nline 2\n"

    def test_case_insensitive(self) -> None:
        span = find_tag("[B]x[/b] [i]y[/I]", "b")
        assert span is not None
        assert span.raw == "[B]x[/b]"
        assert span.name == "b"
        span = find_tag("[B]x[/b] [i]y[/I]", "I")
        assert span is not None
        assert span.content == "y"

    @pytest.mark.parametrize(
        ("text", "name"),
        [
            ("[br]x[/b]", "b"),
            ("[highlight]x[/high]", "high"),
            ("[imglft]x[/img]", "img"),
            ("[align=center]x[/a]", "a"),
        ],
    )
    def test_name_boundary(self, text: str, name: str) -> None:
        assert find_tag(text, name) is None

    def test_closing_name_boundary(self) -> None:
        assert find_tag("[b]x[/bold]", "b") is None

    def test_whitespace_after_name(self) -> None:
        span = find_tag('[foo bar="1"]x[/foo]', "foo")
        assert span is not None
        assert span.attributes_raw == ' bar="1"'

    def test_start_offset(self) -> None:
        text = "[b]one[/b] [b]two[/b]"
        span = find_tag(text, "b", 1)
        assert span is not None
        assert span.content == "two"
        assert text[span.start : span.end] == span.raw

    def test_skips_non_matching_opening(self) -> None:
        span = find_tag("[bold] [b]x[/b]", "b")
        assert span is not None
        assert span.start == 7


class TestIterTagNames:
    """iter_tag_names() discovery of complete pairs."""

    def test_names_in_closing_order(self) -> None:
        text = "[url=x][b]y[/b][/url] [i]z[/i]"
        assert list(iter_tag_names(text)) == ["b", "url", "i"]

    def test_each_name_once(self) -> None:
        assert list(iter_tag_names("[b]1[/b][b]2[/b]")) == ["b"]

    def test_lower_cased(self) -> None:
        assert list(iter_tag_names("[FAKE]x[/Fake]")) == ["fake"]

    def test_ignores_unmatched_and_invalid(self) -> None:
        text = "array[0] [/x] [*] item [/] [1]a[/1] [b]unclosed"
        assert list(iter_tag_names(text)) == []

    def test_list_items_are_not_tags(self) -> None:
        text = "[list]\n[*] one\n[*] two\n[/list]"
        assert list(iter_tag_names(text)) == ["list"]


class TestTagNames:
    """is_valid_tag_name()."""

    @pytest.mark.parametrize("name", ["b", "h2", "floatright", "my-tag", "my_tag", "B"])
    def test_valid(self, name: str) -> None:
        assert is_valid_tag_name(name)

    @pytest.mark.parametrize("name", ["", "*", "1", "-x", "a b", "a]"])
    def test_invalid(self, name: str) -> None:
        assert not is_valid_tag_name(name)


_plain = st.text(alphabet=st.characters(exclude_characters="[]"), max_size=30)


class TestSpanInvariants:
    """Property-based checks of TagSpan invariants."""

    @given(before=_plain, attrs=_plain, content=_plain, after=_plain)
    def test_span_reassembles(self, before: str, attrs: str, content: str, after: str) -> None:
        attrs_raw = "=" + attrs
        text = f"{before}[tag{attrs_raw}]{content}[/tag]{after}"
        span = find_tag(text, "tag")
        assert span is not None
        assert text[span.start : span.end] == span.raw
        assert span.raw == f"[tag{span.attributes_raw}]{span.content}[/tag]"
        assert span.attributes_raw == attrs_raw
        assert span.content == content

    @given(_plain)
    def test_no_brackets_no_span(self, text: str) -> None:
        assert find_tag(text, "b") is None
        assert list(iter_tag_names(text)) == []
