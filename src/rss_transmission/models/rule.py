"""
ParserRule model: which element, at which nesting path, holds which attribute.
"""

from typing import Tuple
from pydantic import BaseModel, Field, field_validator, ConfigDict

from rss_transmission.validators import (
    split_tag_path,
    validate_tag_path,
    validate_attribute_name
)


class ParserRule(BaseModel):
    """
    Immutable extraction rule for one feed layout.

    A rule selects elements whose full ancestor chain (document root down
    to and including the element itself) equals `path`, and reads the
    attribute named `attribute` from each of them.

    Attributes:
        path: Tag names from document root to the target element
        attribute: Name of the attribute holding the download link

    Example:
        >>> rule = ParserRule.from_config('rss,channel,item,enclosure', 'url')
        >>> rule.path
        ('rss', 'channel', 'item', 'enclosure')
        >>> rule.attribute
        'url'

    Raises:
        ValidationError: If the path or attribute name is empty
    """

    path: Tuple[str, ...] = Field(
        ...,
        description="Exact, case-sensitive tag path from document root to target element",
        examples=[("rss", "channel", "item", "enclosure")]
    )

    attribute: str = Field(
        ...,
        description="Attribute on the matched element holding the download link",
        examples=["url"]
    )

    _validate_path = field_validator('path')(validate_tag_path)
    _validate_attribute = field_validator('attribute')(validate_attribute_name)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_config(cls, path: str, property: str) -> "ParserRule":
        """
        Build a rule from the configuration representation.

        The path string is split on ',' with no whitespace trimming.

        Args:
            path: Comma-separated tag path (e.g., 'rss,channel,item')
            property: Attribute name (e.g., 'url')
        """
        return cls(path=split_tag_path(path), attribute=property)

    @property
    def path_string(self) -> str:
        """Path rendered back in configuration form."""
        return ','.join(self.path)
