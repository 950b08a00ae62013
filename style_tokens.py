"""Expand the {box}/{title}/{body}/{end}/{end-box} style tokens into div wrappers."""

from __future__ import annotations

import re

from site_settings import DEFAULT_SETTINGS, SiteSettings


def replace_with_escaping(text: str, token: str, replacement: str) -> str:
    """Replace ``token`` with ``replacement`` unless it is preceded by a backslash.

    An escaped ``\\token`` is emitted as the bare token and the backslash is
    dropped.
    """
    pattern = re.compile(r"(\\)?" + re.escape(token))

    def _repl(match: re.Match[str]) -> str:
        if match.group(1):
            return token
        return replacement

    return pattern.sub(_repl, text)


def rewrite_style_tokens(body: str, settings: SiteSettings = DEFAULT_SETTINGS) -> str:
    for token, replacement in settings.style_tokens:
        body = replace_with_escaping(body, token, replacement)
    return body
