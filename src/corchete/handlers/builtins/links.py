"""Link and image tags.

Provides:
- url, email, a: links whose target comes from the attribute or content
- thread, post, attach: links built from configured URL templates
- jira: issue tracker link, label upper-cased
- name: user profile link
- img, imglft, imgrft: images, optionally floated

Example:
[url=http://example.com]Example[/url]
[thread=42]Release notes[/thread]
[jira]proj-123[/jira]

"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from corchete.handlers.contracts import optional_attribute

if TYPE_CHECKING:
    from corchete.config import RenderContext
    from corchete.nodes import TagSpan


class UrlTag:
    """Handler for [url]href[/url] and [url=href]label[/url]."""

    names: ClassVar[tuple[str, ...]] = ("url",)

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        href = optional_attribute(tag) or tag.content
        return f'<a href="{href}" target="_blank">{tag.content}</a>'


class EmailTag:
    """Handler for [email]address[/email] and [email=address]label[/email]."""

    names: ClassVar[tuple[str, ...]] = ("email",)

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        address = optional_attribute(tag) or tag.content
        return f'<a href="mailto:{address}">{tag.content}</a>'


class AnchorTag:
    """Handler for [a=#target]label[/a]. Left untouched without a target."""

    names: ClassVar[tuple[str, ...]] = ("a",)

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        target = optional_attribute(tag)
        if target is None:
            return tag.raw
        return f'<a href="{target}">{tag.content}</a>'


class ObjectLinkTag:
    """Handler for links to forum objects: thread, post and attach.

    The id comes from the attribute or, without one, from the content.
    When the content is the id itself, the URL doubles as the label.

    Thread Safety:
        Stateless handler. Safe for concurrent use.

    """

    URL_KEYS: ClassVar[dict[str, str]] = {
        "thread": "thread_url",
        "post": "post_url",
        "attach": "attach_url",
    }
    names: ClassVar[tuple[str, ...]] = tuple(URL_KEYS)

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        object_id = optional_attribute(tag) or tag.content
        url = context.url_for(self.URL_KEYS[tag.name], object_id, tag.name)
        label = url if tag.content == object_id else tag.content
        return f'<a href="{url}">{label}</a>'


class JiraTag:
    """Handler for [jira]KEY-123[/jira]. The label is the upper-cased key."""

    names: ClassVar[tuple[str, ...]] = ("jira",)

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        issue = optional_attribute(tag) or tag.content
        url = context.url_for("jira_url", issue.strip(), tag.name)
        label = issue.strip().upper() if tag.content == issue else tag.content
        return f'<a href="{url}">{label}</a>'


class UserTag:
    """Handler for [name]User[/name], linking to the user's profile.

    Profile ids are the lower-cased user name.
    """

    names: ClassVar[tuple[str, ...]] = ("name",)

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        user = optional_attribute(tag) or tag.content
        url = context.url_for("user_url", user.strip().lower(), tag.name)
        return f'<a href="{url}">{tag.content}</a>'


class ImageTag:
    """Handler for img, imglft and imgrft; content is the image URL."""

    FLOATS: ClassVar[dict[str, str]] = {
        "imglft": "left",
        "imgrft": "right",
    }
    names: ClassVar[tuple[str, ...]] = ("img", *FLOATS)

    def render(self, tag: TagSpan, context: RenderContext) -> str:
        side = self.FLOATS.get(tag.name)
        if side is None:
            return f'<img class="" src="{tag.content}"/>'
        return f'<img src="{tag.content}" alt="" style="float: {side};">'
