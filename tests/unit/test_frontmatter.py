"""Test front matter splitting"""

import pytest

from pagesmith.processors import (
    FrontMatterError,
    parse_front_matter,
    split_front_matter,
    strip_front_matter,
)


class TestSplitFrontMatter:
    """Test the single delimiter split"""

    def test_body_follows_first_delimiter(self) -> None:
        source = "title: X\nlayout: page\n---\nHello {{ name }}"
        metadata, body = split_front_matter(source)

        assert metadata == "title: X\nlayout: page"
        assert body == "Hello {{ name }}"
        assert "---" not in body

    def test_surrounding_newlines_belong_to_delimiter(self) -> None:
        metadata, body = split_front_matter("title: X\n\n\n---\nbody\n")
        assert metadata == "title: X"
        assert body == "body\n"

    def test_body_kept_verbatim(self) -> None:
        source = "title: X\n---\n  indented\n\n"
        assert strip_front_matter(source) == "  indented\n\n"

    def test_no_delimiter_returns_trimmed_source(self) -> None:
        source = "\n\n  Hello {{ name }}  \n"
        metadata, body = split_front_matter(source)

        assert metadata is None
        assert body == "Hello {{ name }}"

    def test_only_first_delimiter_splits(self) -> None:
        source = "title: X\n---\nfirst\n---\nsecond"
        body = strip_front_matter(source)
        assert body == "first\n---\nsecond"

    def test_delimiter_without_trailing_newline_is_not_a_boundary(self) -> None:
        source = "intro\n---"
        assert strip_front_matter(source) == "intro\n---"

    def test_leading_delimiter_yields_empty_metadata(self) -> None:
        metadata, body = split_front_matter("---\nbody")
        assert metadata == ""
        assert body == "body"


class TestParseFrontMatter:
    """Test YAML metadata loading"""

    def test_mapping_is_loaded(self) -> None:
        data, body = parse_front_matter("title: Hello\ntags: [a, b]\n---\n<p>x</p>")
        assert data == {"title": "Hello", "tags": ["a", "b"]}
        assert body == "<p>x</p>"

    def test_missing_front_matter(self) -> None:
        data, body = parse_front_matter("<p>x</p>\n")
        assert data == {}
        assert body == "<p>x</p>"

    def test_empty_front_matter(self) -> None:
        data, body = parse_front_matter("---\n<p>x</p>")
        assert data == {}
        assert body == "<p>x</p>"

    def test_non_mapping_front_matter_rejected(self) -> None:
        with pytest.raises(FrontMatterError):
            parse_front_matter("- one\n- two\n---\nbody")

    def test_invalid_yaml_rejected(self) -> None:
        with pytest.raises(FrontMatterError):
            parse_front_matter("title: [unclosed\n---\nbody")
