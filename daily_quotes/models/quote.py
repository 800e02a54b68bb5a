"""
Core data model for Daily Quotes.

Defines the Quote dataclass representing a single quote returned by the
quote service and shown in the view or the history sidebar.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional


SHARE_TEMPLATE = '"{content}" - {author}'


@dataclass(frozen=True)
class Quote:
    """
    A single quote record.

    Quotes are immutable values: the same record may appear several times
    in the history and is compared by value.

    Attributes:
        content: The quote body.
        author: Who said or wrote it.
        tags: Topic tags reported by the provider (empty when absent).
    """

    content: str
    author: str
    tags: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Lists from JSON payloads are normalized so the record stays hashable
        if not isinstance(self.tags, tuple):
            object.__setattr__(self, "tags", tuple(self.tags or ()))
        self.validate()

    def validate(self) -> None:
        """
        Validate field types and the non-empty content rule.

        Raises:
            ValueError: If validation fails.
        """
        errors = []

        if not isinstance(self.content, str) or not self.content.strip():
            errors.append("content is required and cannot be empty")

        if not isinstance(self.author, str):
            errors.append("author must be a string")

        if not all(isinstance(tag, str) for tag in self.tags):
            errors.append("tags must be strings")

        if errors:
            raise ValueError(f"Quote validation failed: {'; '.join(errors)}")

    @property
    def share_text(self) -> str:
        """Text handed to the share capability: "<content>" - <author>."""
        return SHARE_TEMPLATE.format(content=self.content, author=self.author)

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary."""
        return {
            "content": self.content,
            "author": self.author,
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Quote":
        """
        Create a Quote from a dictionary (e.g., a provider payload).

        Extra keys are ignored; a missing or null ``tags`` becomes an empty tuple.

        Raises:
            KeyError: If ``content`` or ``author`` is missing.
            ValueError: If a field has the wrong type or content is empty.
        """
        tags: Optional[Iterable[str]] = data.get("tags")
        return cls(
            content=data["content"],
            author=data["author"],
            tags=tuple(tags) if tags else (),
        )

    def __str__(self) -> str:
        return self.share_text
