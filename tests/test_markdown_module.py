from __future__ import annotations

import pytest

from mdxsmith.adapters.markdown import (
    DEFAULT_MD_EXTENSIONS,
    DEFAULT_MDX_EXTENSIONS,
    MarkdownConversionError,
    MarkdownRenderer,
    deduplicate_markdown_extensions,
    normalize_markdown_extensions,
    split_front_matter,
)
from mdxsmith.core.exceptions import PipelineConstructionError, ProcessingError


def test_mdx_defaults_extend_markdown_defaults() -> None:
    assert DEFAULT_MDX_EXTENSIONS[: len(DEFAULT_MD_EXTENSIONS)] == DEFAULT_MD_EXTENSIONS
    assert "md_in_html" in DEFAULT_MDX_EXTENSIONS
    assert "md_in_html" not in DEFAULT_MD_EXTENSIONS


def test_renderer_collects_front_matter() -> None:
    renderer = MarkdownRenderer(DEFAULT_MD_EXTENSIONS)

    document = renderer.render("---\ntitle: Demo\ntags: [a, b]\n---\nHello\n")

    assert document.front_matter == {"title": "Demo", "tags": ["a", "b"]}
    assert document.html == "<p>Hello</p>"


def test_renderer_deduplicates_extensions() -> None:
    renderer = MarkdownRenderer(["tables", "Tables", "abbr"])

    assert renderer.extensions == ("tables", "abbr")


def test_renderer_rejects_unknown_extension() -> None:
    with pytest.raises(PipelineConstructionError):
        MarkdownRenderer(["definitely_missing_extension"])


def test_conversion_error_is_a_processing_error() -> None:
    assert issubclass(MarkdownConversionError, ProcessingError)


def test_split_front_matter_without_block() -> None:
    assert split_front_matter("# Title\n") == ({}, "# Title\n")


def test_split_front_matter_keeps_unterminated_block() -> None:
    source = "---\ntitle: x\n# Body\n"

    assert split_front_matter(source) == ({}, source)


def test_split_front_matter_ignores_invalid_yaml() -> None:
    source = "---\ntitle: [unclosed\n---\nBody\n"

    assert split_front_matter(source) == ({}, source)


def test_split_front_matter_keeps_non_mapping_yaml() -> None:
    source = "---\n- a\n- b\n---\nBody\n"

    assert split_front_matter(source) == ({}, source)


def test_split_front_matter_keeps_prose_between_thematic_breaks() -> None:
    source = "---\nIntro paragraph\n---\n# Title\n"

    assert split_front_matter(source) == ({}, source)


def test_renderer_notes_leading_block_that_is_not_front_matter() -> None:
    renderer = MarkdownRenderer(DEFAULT_MD_EXTENSIONS)

    document = renderer.render("---\nIntro paragraph\n---\n# Title\n")

    assert "Intro paragraph" in document.html
    assert "<h1>Title</h1>" in document.html
    assert document.front_matter == {}
    assert document.notes == [
        "Leading '---' block is not YAML front matter; rendered as Markdown."
    ]


def test_renderer_has_no_notes_for_real_front_matter() -> None:
    document = MarkdownRenderer(DEFAULT_MD_EXTENSIONS).render("---\ntitle: x\n---\nBody\n")

    assert document.notes == []


def test_split_front_matter_handles_byte_order_mark() -> None:
    metadata, body = split_front_matter("\ufeff---\ntitle: x\n---\nBody\n")

    assert metadata == {"title": "x"}
    assert body == "\ufeffBody\n"


def test_normalize_markdown_extensions_splits_cli_values() -> None:
    assert normalize_markdown_extensions("toc, tables  abbr") == ["toc", "tables", "abbr"]
    assert normalize_markdown_extensions(["toc", 3, "a,b"]) == ["toc", "a", "b"]  # type: ignore[list-item]
    assert normalize_markdown_extensions(None) == []


def test_deduplicate_markdown_extensions_is_case_insensitive() -> None:
    assert deduplicate_markdown_extensions(["Toc", "toc", "abbr"]) == ["Toc", "abbr"]
