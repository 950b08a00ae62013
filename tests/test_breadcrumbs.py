"""Tests for breadcrumb trails."""

from __future__ import annotations

from pathlib import PurePath

from breadcrumbs import build_breadcrumbs
from site_settings import SiteSettings


class TestRootPage:
    def test_root_message_only(self) -> None:
        html = build_breadcrumbs(PurePath("index.html"), {"breadcrumbs_root_message": "You are home"})
        assert html == '<ul class="breadcrumbs"><li>You are home</li></ul>'
        assert "Home" not in html

    def test_missing_root_message_is_empty(self) -> None:
        assert build_breadcrumbs(PurePath("404.html"), {}) == '<ul class="breadcrumbs"><li></li></ul>'


class TestNestedPage:
    def test_single_folder(self) -> None:
        html = build_breadcrumbs(PurePath("about_us/index.html"), {})
        assert html == '<ul class="breadcrumbs"><li><a href="/">Home</a></li><li>About Us</li></ul>'

    def test_immediate_parent_is_unlinked(self) -> None:
        html = build_breadcrumbs(PurePath("a/b/page.html"), {})
        assert html == (
            '<ul class="breadcrumbs">'
            '<li><a href="/">Home</a></li>'
            '<li><a href="/a">A</a></li>'
            "<li>B</li>"
            "</ul>"
        )

    def test_deep_links_use_full_path(self) -> None:
        html = build_breadcrumbs(PurePath("docs/getting-started/first_steps/index.html"), {})
        assert '<li><a href="/docs">Docs</a></li>' in html
        assert '<li><a href="/docs/getting-started">Getting Started</a></li>' in html
        assert html.endswith("<li>First Steps</li></ul>")

    def test_root_message_is_ignored_for_nested_pages(self) -> None:
        html = build_breadcrumbs(PurePath("a/index.html"), {"breadcrumbs_root_message": "root"})
        assert "root" not in html

    def test_labels_are_escaped(self) -> None:
        html = build_breadcrumbs(PurePath("tom_&_jerry/index.html"), {})
        assert "<li>Tom &amp; Jerry</li>" in html

    def test_custom_class(self) -> None:
        html = build_breadcrumbs(PurePath("a/index.html"), {}, SiteSettings(breadcrumbs_class="crumbs"))
        assert html.startswith('<ul class="crumbs">')
