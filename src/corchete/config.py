"""Render configuration for Corchete.

RenderContext carries the URL templates used by link tags (thread, post,
attachment, issue tracker, user profile) and the pass bound of the
render loop. It is built once per BBCode instance and passed explicitly to
every handler; handlers never mutate it.

Templates contain a placeholder for the id of the linked object. Both the
generic ``{id}`` form and the keyed form (``{thread_id}`` for
``thread_url``, ``{post_id}`` for ``post_url``, ...) are substituted.

Usage:
    >>> ctx = RenderContext(urls={"thread_url": "http://x/thread/{id}"})
    >>> ctx.url_for("thread_url", "42", tag="thread")
    'http://x/thread/42'

    >>> ctx = RenderContext.from_dict({"urls": {...}, "max_iterations": 500})

Thread Safety:
    Frozen dataclass over a read-only mapping. Safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from corchete.errors import MissingUrlTemplateError

# URL template keys understood by the built-in tags
URL_KEYS: tuple[str, ...] = (
    "thread_url",
    "post_url",
    "attach_url",
    "jira_url",
    "user_url",
)

DEFAULT_MAX_ITERATIONS = 10_000


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Immutable per-render configuration.

    Attributes:
        urls: URL templates keyed by logical name (see URL_KEYS). Unknown
            keys are kept so custom handlers can use their own templates.
        max_iterations: Maximum number of rewriting passes one render may
            run before failing with IterationLimitError.

    """

    urls: Mapping[str, str] = field(default_factory=dict)
    max_iterations: int = DEFAULT_MAX_ITERATIONS

    def __post_init__(self) -> None:
        if self.max_iterations < 1:
            msg = f"max_iterations must be positive, got {self.max_iterations}"
            raise ValueError(msg)
        # Copy so later changes to the caller's dict cannot leak in
        object.__setattr__(self, "urls", MappingProxyType(dict(self.urls)))

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> RenderContext:
        """Create RenderContext from a dictionary.

        Only keys that are RenderContext fields are used; unknown keys
        are silently ignored.

        Example:
            >>> ctx = RenderContext.from_dict({
            ...     "urls": {"post_url": "http://x/posts/{post_id}"},
            ...     "unknown_key": "ignored",
            ... })
            >>> ctx.max_iterations
            10000

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def template(self, key: str, tag: str) -> str:
        """Get a configured URL template.

        Args:
            key: Template key (e.g., "thread_url")
            tag: Name of the tag asking, for the error message

        Raises:
            MissingUrlTemplateError: If the template is absent or empty
        """
        template = self.urls.get(key)
        if not template:
            raise MissingUrlTemplateError(tag, key)
        return template

    def url_for(self, key: str, object_id: str, tag: str) -> str:
        """Build a URL by substituting object_id into the template for key."""
        template = self.template(key, tag)
        keyed = "{" + key.removesuffix("_url") + "_id}"
        return template.replace(keyed, object_id).replace("{id}", object_id)


__all__ = [
    "DEFAULT_MAX_ITERATIONS",
    "URL_KEYS",
    "RenderContext",
]
