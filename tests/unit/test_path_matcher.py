"""
Unit tests for exact tag-path matching.
"""

import pytest

from rss_transmission.parsers.path_matcher import is_match


TARGET = ['rss', 'channel', 'item']


class TestIsMatch:
    """Test suite for is_match()."""

    def test_exact_path_matches(self):
        """Stack plus element name equal to the target should match."""
        assert is_match(['rss', 'channel'], 'item', TARGET) is True

    def test_root_element_against_single_tag_path(self):
        """An empty stack means the element is the document root."""
        assert is_match([], 'rss', ['rss']) is True
        assert is_match([], 'item', ['rss']) is False

    @pytest.mark.parametrize('stack, name', [
        (['rss'], 'item'),                          # too shallow
        (['rss', 'channel', 'item'], 'item'),       # too deep
        (['feed', 'channel'], 'item'),              # wrong ancestor
        (['rss', 'channel'], 'enclosure'),          # wrong element
        (['channel', 'rss'], 'item'),               # wrong order
    ])
    def test_non_matching_paths(self, stack, name):
        """Different depth, ancestors, name or order should not match."""
        assert is_match(stack, name, TARGET) is False

    def test_no_prefix_match(self):
        """Path [a, b] matches neither [a, b, c] nor [a]."""
        assert is_match(['a', 'b'], 'c', ['a', 'b']) is False
        assert is_match([], 'a', ['a', 'b']) is False
        assert is_match(['a'], 'b', ['a', 'b']) is True

    def test_case_sensitive(self):
        """Tag comparison should not fold case."""
        assert is_match(['RSS', 'channel'], 'item', TARGET) is False
        assert is_match(['rss', 'channel'], 'Item', TARGET) is False

    def test_whitespace_is_significant(self):
        """A leading space in a configured tag is part of its name."""
        target = ['rss', ' channel', ' item']

        assert is_match(['rss', 'channel'], 'item', target) is False
        assert is_match(['rss', ' channel'], ' item', target) is True

    def test_accepts_tuples(self):
        """Any sequence type should work for stack and target."""
        assert is_match(('rss', 'channel'), 'item', tuple(TARGET)) is True

    def test_does_not_mutate_stack(self):
        """Matching is a pure check."""
        stack = ['rss', 'channel']

        is_match(stack, 'item', TARGET)

        assert stack == ['rss', 'channel']
