#!/usr/bin/env python3
"""
Static builder for the portfolio & blog site.

- content/posts/*.md | *.ipynb -> out/posts/<slug>/index.html
- /                 -> out/index.html (projects + 4 most recent posts)
- /posts            -> out/posts/index.html (all posts, newest first)
- /rss.xml          -> out/rss.xml (RSS 2.0)
- /sitemap.xml      -> out/sitemap.xml (static routes + posts)
- public/**         -> out/** (copied as-is)

Site name/description/url come from site.yml; SITE_URL overrides the url.
"""

from __future__ import annotations

import argparse
import pathlib
import sys
from typing import Dict

from .assets import mirror_tree, prune_stale, write_if_changed
from .config import (
    OUT_DIR,
    POSTS_DIR,
    PUBLIC_DIR,
    SERVE_PORT,
    SITE_CONFIG,
    TEMPLATE_DIR,
    load_site_config,
)
from .feed import feed_response
from .pages import make_env, render_home, render_post, render_post_list
from .posts import load_posts, sort_posts
from .sitemap import sitemap_entries, sitemap_xml


def _emit(out_dir: pathlib.Path, rel: str, text: str) -> None:
    if write_if_changed(out_dir / rel, text):
        print(f"✓ wrote {rel}")
    else:
        print(f"= {rel} unchanged, skip")


def build(
    out_dir: pathlib.Path = OUT_DIR,
    posts_dir: pathlib.Path = POSTS_DIR,
    site_config: pathlib.Path = SITE_CONFIG,
    public_dir: pathlib.Path = PUBLIC_DIR,
    template_dir: pathlib.Path = TEMPLATE_DIR,
) -> Dict[str, int]:
    site = load_site_config(site_config)
    posts = load_posts(posts_dir)
    env = make_env(template_dir)

    out_dir.mkdir(parents=True, exist_ok=True)
    copied = mirror_tree(public_dir, out_dir)
    if copied:
        print(f"✓ copied {copied} public files")

    _emit(out_dir, "index.html", render_home(env, site, posts))
    _emit(out_dir, "posts/index.html", render_post_list(env, site, posts))

    posts_sorted = sort_posts(posts)
    keep = set()
    for post in posts_sorted:
        rel = f"posts{post.slug}/index.html"
        _emit(out_dir, rel, render_post(env, site, post, posts_sorted))
        keep.add((out_dir / rel).resolve())
    prune_stale(out_dir, keep)

    body, _ = feed_response(posts, site)
    _emit(out_dir, "rss.xml", body)

    entries = sitemap_entries(posts, site)
    _emit(out_dir, "sitemap.xml", sitemap_xml(entries))

    return {"posts": len(posts), "sitemap": len(entries)}


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Build or preview the portfolio site.")
    parser.add_argument("command", nargs="?", choices=("build", "serve"), default="build")
    parser.add_argument("--out", type=pathlib.Path, default=OUT_DIR, help="Output directory.")
    parser.add_argument("--port", type=int, default=SERVE_PORT, help="Preview server port.")
    args = parser.parse_args(argv)

    try:
        summary = build(out_dir=args.out)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    print(f"✓ built {summary['posts']} posts into {args.out}")

    if args.command == "serve":
        from .server import serve

        serve(args.out, args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
