"""Tests for style token expansion."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from site_settings import DEFAULT_SETTINGS
from style_tokens import replace_with_escaping, rewrite_style_tokens

TOKENS = [token for token, _ in DEFAULT_SETTINGS.style_tokens]


class TestReplaceWithEscaping:
    def test_unescaped_token_is_replaced(self) -> None:
        assert replace_with_escaping("a {box} b", "{box}", "X") == "a X b"

    def test_escaped_token_is_kept_literal(self) -> None:
        assert replace_with_escaping("a \\{box} b", "{box}", "X") == "a {box} b"

    def test_double_backslash_keeps_one(self) -> None:
        assert replace_with_escaping("\\\\{box}", "{box}", "X") == "\\{box}"

    def test_mixed_occurrences(self) -> None:
        assert replace_with_escaping("{end}\\{end}{end}", "{end}", "</div>") == "</div>{end}</div>"


class TestRewriteStyleTokens:
    def test_box(self) -> None:
        assert rewrite_style_tokens("{box}") == '<div class="box">\n\n'

    def test_escaped_box(self) -> None:
        assert rewrite_style_tokens("\\{box}") == "{box}"

    def test_full_block(self) -> None:
        source = "{box}{title}Hi{end}{body}Text{end}{end-box}"
        assert rewrite_style_tokens(source) == (
            '<div class="box">\n\n<div class="title">\n\nHi</div>'
            '<div class="body">\n\nText</div></div>'
        )

    def test_end_box_is_not_mistaken_for_end(self) -> None:
        assert rewrite_style_tokens("\\{end-box}{end}") == "{end-box}</div>"

    def test_escaped_token_is_not_rewritten_by_later_tokens(self) -> None:
        assert rewrite_style_tokens("\\{title}\\{body}{body}") == '{title}{body}<div class="body">\n\n'

    @settings(max_examples=200, deadline=None)
    @given(st.text().filter(lambda s: not any(token in s for token in TOKENS)))
    def test_text_without_tokens_is_unchanged(self, text: str) -> None:
        assert rewrite_style_tokens(text) == text
