"""
Literal tokens shared by the page renderer and the site builder.

Everything that appears verbatim in source pages or in template.html lives
here, so the renderer never reaches for module globals.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SiteSettings:
    # input folder layout
    input_folder: str = "!sting_data"
    template_file: str = "template.html"
    default_config_file: str = "default_config.md"

    # template placeholders
    content_placeholder: str = "{!sting_replace}"
    breadcrumbs_placeholder: str = "{!sting_breadcrumbs}"
    config_placeholder_prefix: str = "!sting_config_"

    # front matter
    config_split: str = "\n---\n"
    config_delimiter: str = ": "

    # breadcrumbs
    breadcrumbs_class: str = "breadcrumbs"
    breadcrumbs_root_message_key: str = "breadcrumbs_root_message"
    home_label: str = "Home"

    # (token, replacement) in the order they are applied
    style_tokens: Tuple[Tuple[str, str], ...] = (
        ("{box}", '<div class="box">\n\n'),
        ("{title}", '<div class="title">\n\n'),
        ("{body}", '<div class="body">\n\n'),
        ("{end}", "</div>"),
        ("{end-box}", "</div>"),
    )

    def config_placeholder(self, key: str) -> str:
        """Template marker replaced by the value of ``key``, e.g. ``{!sting_config_title}``."""
        return f"{{{self.config_placeholder_prefix}{key}}}"


DEFAULT_SETTINGS = SiteSettings()
