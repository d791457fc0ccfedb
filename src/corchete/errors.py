"""Exception classes for Corchete.

Provides standardized exceptions for error handling throughout Corchete.
Every failure raised while rendering aborts the whole call; no partial HTML
is ever returned.
"""

from __future__ import annotations


class CorcheteError(Exception):
    """Base exception for all Corchete errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(CorcheteError):
    """Error during BBCode rendering.

    Raised when the render loop cannot turn the input into HTML.
    """

    pass


class UnknownTagError(RenderError):
    """A complete tag pair names a tag with no registered handler."""

    def __init__(self, tag_name: str) -> None:
        """Initialize unknown tag error.

        Args:
            tag_name: Name of the tag as found in the text (lower-cased)
        """
        self.tag_name = tag_name
        super().__init__(f"No handler registered for tag '{tag_name}'")


class IterationLimitError(RenderError):
    """The render loop exceeded its iteration bound.

    Raised for input (or handlers) whose substitutions never reach a
    fixed point.
    """

    def __init__(self, limit: int, tag_name: str | None = None) -> None:
        """Initialize iteration limit error.

        Args:
            limit: The configured max_iterations
            tag_name: Tag that kept rewriting within a single pass, if that
                was the cause; None when the pass count ran out
        """
        self.limit = limit
        self.tag_name = tag_name
        if tag_name is None:
            message = f"Render did not reach a fixed point within {limit} passes"
        else:
            message = f"Tag '{tag_name}' kept rewriting its own output (limit {limit})"
        super().__init__(message)


class TagContractError(CorcheteError):
    """Error when a tag's requirements are not met.

    Raised by handlers before any HTML is produced for the span.
    """

    def __init__(self, tag_name: str, message: str) -> None:
        """Initialize tag contract error.

        Args:
            tag_name: Name of the tag (e.g., "color", "thread")
            message: Description of the violation
        """
        self.tag_name = tag_name
        super().__init__(f"Tag '{tag_name}': {message}")


class MissingAttributeError(TagContractError):
    """A required attribute was absent or blank."""

    def __init__(self, tag_name: str, attribute: str | None = None) -> None:
        """Initialize missing attribute error.

        Args:
            tag_name: Name of the tag
            attribute: Name of the missing attribute (None for the positional one)
        """
        self.attribute = attribute
        what = f"attribute '{attribute}'" if attribute else "an attribute"
        super().__init__(tag_name, f"requires {what}")


class MissingUrlTemplateError(TagContractError):
    """A handler needed a URL template the render context does not define."""

    def __init__(self, tag_name: str, key: str) -> None:
        """Initialize missing URL template error.

        Args:
            tag_name: Name of the tag
            key: URL template key (e.g., "thread_url")
        """
        self.key = key
        super().__init__(tag_name, f"URL template '{key}' is not configured")
