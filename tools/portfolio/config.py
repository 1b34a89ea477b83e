#!/usr/bin/env python3
from __future__ import annotations

import os
import pathlib
import re

from .models import SiteConfig

# ---------- Paths

# This assumes the package sits in tools/ at the repo root.
ROOT = pathlib.Path(__file__).resolve().parents[2]
CONTENT_DIR = ROOT / "content"
POSTS_DIR = CONTENT_DIR / "posts"
TEMPLATE_DIR = ROOT / "tools" / "templates"
PUBLIC_DIR = ROOT / "public"
OUT_DIR = ROOT / "out"
SITE_CONFIG = ROOT / "site.yml"

# ---------- Config

RECENT_POSTS_LIMIT = 4
STATIC_ROUTES = ("", "/posts")
FEED_LANGUAGE = "en"
XML_CONTENT_TYPE = "application/xml"
POST_SUFFIXES = (".md", ".ipynb")
SERVE_PORT = 8787

DEFAULT_SITE = {
    "name": "Rayan Kazi",
    "description": "My personal website and blog",
    "url": "https://portfolio-rocketburst.vercel.app",
    "title_prefix": "rocketburst",
    "author": "Rayan Kazi",
    "email": "rayankazi7515@gmail.com",
    "github": "https://github.com/rocketburst/",
}

# Some shared regexes

SLUG_RE = re.compile(r"[^a-z0-9-]+")
SPACES_EOL = re.compile(r'[ \t]+$', re.MULTILINE)


def load_site_config(path: pathlib.Path = SITE_CONFIG) -> SiteConfig:
    from .utils import read_yaml

    data = dict(DEFAULT_SITE)
    data.update({
        k: v for k, v in read_yaml(path).items()
        if k in DEFAULT_SITE and v is not None
    })
    if os.environ.get("SITE_URL"):
        data["url"] = os.environ["SITE_URL"]
    data["url"] = str(data["url"]).rstrip("/")
    return SiteConfig(**{k: str(v) for k, v in data.items()})
