"""
Page rendering: front matter -> style tokens -> Markdown -> template.

render_page() is a pure function of its inputs. It performs no file I/O and
never raises; a Markdown failure becomes the page text so the author sees it
in the generated site.
"""

from __future__ import annotations

import logging
from pathlib import PurePath
from typing import Callable

from markdown_it import MarkdownIt

from breadcrumbs import build_breadcrumbs
from page_config import ConfigMap, get_configs
from site_settings import DEFAULT_SETTINGS, SiteSettings
from style_tokens import rewrite_style_tokens

logger = logging.getLogger(__name__)

MarkdownRenderer = Callable[[str], str]


_md = MarkdownIt("commonmark", {"html": True})
# page sources are trusted: keep javascript: and other protocols as written
_md.validateLink = lambda url: True


def convert_markdown_to_html(md_text: str) -> str:
    """Convert CommonMark to HTML.

    An HTML block ends at a blank line, so Markdown written between the
    style token divs is still rendered.
    """
    return _md.render(md_text)


def base_href(output_path: PurePath) -> str:
    parent = output_path.parent
    if parent == PurePath("."):
        return '<base href="/">'
    return f'<base href="/{parent.as_posix()}/">'


def render_page(
    raw_text: str,
    template: str,
    default_configs: ConfigMap,
    output_path: PurePath,
    settings: SiteSettings = DEFAULT_SETTINGS,
    markdown_renderer: MarkdownRenderer = convert_markdown_to_html,
) -> str:
    """Render one page into the site template and return the finished HTML."""
    configs, body = get_configs(raw_text, default_configs, output_path.parent, settings)
    body = rewrite_style_tokens(body, settings)

    try:
        content_html = markdown_renderer(body)
    except Exception as exc:
        logger.warning("markdown rendering failed for %s: %s", output_path, exc)
        return str(exc)

    page = template.replace(settings.content_placeholder, base_href(output_path) + content_html, 1)
    if settings.breadcrumbs_placeholder in page:
        page = page.replace(
            settings.breadcrumbs_placeholder,
            build_breadcrumbs(output_path, default_configs, settings),
            1,
        )

    for key, value in configs.items():
        page = page.replace(settings.config_placeholder(key), value)

    logger.debug("rendered %s with %d config values", output_path, len(configs))
    return page
