"""Breadcrumb trail for a rendered page, derived from its output path."""

from __future__ import annotations

import html
from pathlib import PurePath
from typing import List

from page_config import ConfigMap, title_from_path
from site_settings import DEFAULT_SETTINGS, SiteSettings


def _crumb_href(segment: PurePath) -> str:
    return html.escape("/" + segment.as_posix())


def build_breadcrumbs(
    output_path: PurePath,
    default_configs: ConfigMap,
    settings: SiteSettings = DEFAULT_SETTINGS,
) -> str:
    """Render the trail as a ``<ul>``.

    For ``a/b/page.html`` this gives Home -> A -> B, where Home and A are
    links and B, the folder holding the page, is plain text. Root-level pages
    only show the configured root message.
    """
    parent = output_path.parent
    if parent == PurePath("."):
        message = default_configs.get(settings.breadcrumbs_root_message_key, "")
        items = [message]
    else:
        crumbs: List[str] = []
        # walk upwards from the page's folder; the first one is not linked
        for depth, segment in enumerate([parent, *parent.parents]):
            if segment == PurePath("."):
                break
            label = html.escape(title_from_path(segment))
            if depth == 0:
                crumbs.insert(0, label)
            else:
                crumbs.insert(0, f'<a href="{_crumb_href(segment)}">{label}</a>')
        items = [f'<a href="/">{html.escape(settings.home_label)}</a>', *crumbs]

    inner = "".join(f"<li>{item}</li>" for item in items)
    return f'<ul class="{settings.breadcrumbs_class}">{inner}</ul>'
