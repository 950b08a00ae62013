"""
Front matter splitting and per-page configuration.

A page looks like

    title: My page
    description: Something
    ---
    # Markdown body

The block before the first ``\\n---\\n`` holds ``key: value`` lines. When the
separator is missing the whole file is the body and the page inherits the
site defaults as they are.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Dict, Optional, Tuple

from titlecase import titlecase

from site_settings import DEFAULT_SETTINGS, SiteSettings

ConfigMap = Dict[str, str]


def title_from_path(path: PurePath) -> str:
    """'docs/my_cool-page' -> 'My Cool Page'."""
    return titlecase(path.name.replace("_", " ").replace("-", " "))


def split_front_matter(raw: str, settings: SiteSettings = DEFAULT_SETTINGS) -> Tuple[Optional[str], str]:
    """Return (front_matter, body); front_matter is None when the page has no separator."""
    if settings.config_split not in raw:
        return None, raw
    front_matter, body = raw.split(settings.config_split, 1)
    return front_matter, body


def parse_configs(
    config_text: str,
    defaults: Optional[ConfigMap] = None,
    page_parent: Optional[PurePath] = None,
    settings: SiteSettings = DEFAULT_SETTINGS,
) -> ConfigMap:
    """Build a ConfigMap from defaults, the page directory title and ``key: value`` lines.

    Later sources win: a ``title`` line overrides the directory title, which
    overrides any default title. A line without ``": "`` becomes a key with
    an empty value.
    """
    configs: ConfigMap = dict(defaults) if defaults else {}
    if page_parent is not None:
        configs["title"] = title_from_path(page_parent)

    for line in config_text.split("\n"):
        key, _, value = line.partition(settings.config_delimiter)
        if not key:
            continue
        configs[key] = value

    return configs


def get_configs(
    raw: str,
    defaults: ConfigMap,
    page_parent: PurePath,
    settings: SiteSettings = DEFAULT_SETTINGS,
) -> Tuple[ConfigMap, str]:
    """Split a raw page and return (configs, body)."""
    front_matter, body = split_front_matter(raw, settings)
    if front_matter is None:
        # no front matter: defaults only, no directory title
        return dict(defaults), body
    return parse_configs(front_matter, defaults, page_parent, settings), body
