#!/usr/bin/env python3
"""
Static site builder for a folder of Markdown pages.

Features:
- Renders every index.md (and a root 404.md) to .html through template.html
- Per-page front matter (`key: value` lines above a `---` line) merged over
  the site defaults in default_config.md
- Style tokens ({box}, {title}, {body}, {end}, {end-box}) and breadcrumbs
- Preserves directory structure; copies every other file as-is

Usage:
  python build_static_site.py "!sting_data" --output ./site

Notes:
- Requires the "markdown-it-py" and "titlecase" packages: pip install markdown-it-py titlecase
"""

from __future__ import annotations

import argparse
import logging
import os
import shutil
from pathlib import Path
from typing import List, Optional

from page_config import ConfigMap, parse_configs
from render_page import render_page
from site_settings import DEFAULT_SETTINGS, SiteSettings

logger = logging.getLogger(__name__)


# -- helpers: site inputs --
def load_template(input_root: Path, settings: SiteSettings = DEFAULT_SETTINGS) -> str:
    """Read template.html, falling back to a bare content placeholder."""
    try:
        return (input_root / settings.template_file).read_text(encoding="utf-8")
    except OSError as exc:
        logger.info("no usable template (%s), pages are written without one", exc)
        return settings.content_placeholder


def load_default_configs(input_root: Path, settings: SiteSettings = DEFAULT_SETTINGS) -> ConfigMap:
    """Parse default_config.md; the whole file is config lines, no separator."""
    try:
        text = (input_root / settings.default_config_file).read_text(encoding="utf-8")
    except OSError:
        return {}
    return parse_configs(text, settings=settings)


def is_page_source(rel: Path) -> bool:
    """index.md anywhere, or 404.md at the root."""
    return rel.name == "index.md" or rel == Path("404.md")


# -- build --
def build_site(input_root: Path, output_root: Path, settings: SiteSettings = DEFAULT_SETTINGS) -> int:
    """Render pages and copy assets from input_root into output_root.

    Failures on single entries are logged and skipped. Returns the number of
    pages rendered.
    """
    template = load_template(input_root, settings)
    default_configs = load_default_configs(input_root, settings)
    skip_files = {Path(settings.template_file), Path(settings.default_config_file)}
    rendered = 0

    for dirpath, dirnames, filenames in os.walk(input_root):
        current_dir = Path(dirpath)
        rel_dir = current_dir.relative_to(input_root)

        # never descend into a folder named like the input folder: it would be written into itself
        if rel_dir == Path("."):
            for name in [d for d in dirnames if d == input_root.name]:
                logger.warning("%s has the same name as the input folder, skipping!", name)
                dirnames.remove(name)
        dirnames.sort()

        for name in dirnames:
            try:
                (output_root / rel_dir / name).mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                logger.warning("cannot create %s: %s", rel_dir / name, exc)

        for fname in sorted(filenames):
            src = current_dir / fname
            rel = src.relative_to(input_root)
            if rel in skip_files:
                continue
            try:
                if is_page_source(rel):
                    page_path = rel.with_suffix(".html")
                    raw_text = src.read_text(encoding="utf-8")
                    html_text = render_page(raw_text, template, default_configs, page_path, settings)
                    dst = output_root / page_path
                    dst.parent.mkdir(parents=True, exist_ok=True)
                    dst.write_text(html_text, encoding="utf-8")
                    rendered += 1
                    logger.debug("rendered %s", page_path)
                else:
                    dst = output_root / rel
                    dst.parent.mkdir(parents=True, exist_ok=True)
                    shutil.copy2(src, dst)
                    logger.debug("copied %s", rel)
            except OSError as exc:
                logger.warning("%s: %s", rel, exc)

    return rendered


# -- CLI --
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build a static site from a folder of Markdown pages.")
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=Path(DEFAULT_SETTINGS.input_folder),
        help=f"Folder holding the pages, template.html and default_config.md (default: {DEFAULT_SETTINGS.input_folder})",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("."),
        help="Output folder for the generated site (default: current directory)",
    )
    parser.add_argument(
        "-x", "--verbose",
        action="store_true",
        help="Log every rendered page and copied file",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s - %(message)s",
    )
    input_root: Path = args.input.expanduser()
    output_root: Path = args.output

    if not input_root.is_dir():
        raise SystemExit(f"Input directory not found: {input_root}")

    output_root.mkdir(parents=True, exist_ok=True)
    rendered = build_site(input_root, output_root)

    print(f"Site generated at: {output_root.resolve()} ({rendered} pages)")


if __name__ == "__main__":
    main()
