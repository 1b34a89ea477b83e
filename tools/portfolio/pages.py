from __future__ import annotations

import pathlib
from typing import Iterable, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from markupsafe import Markup

from .config import TEMPLATE_DIR
from .models import Post, Project, SiteConfig
from .posts import prev_next, recent_posts, sort_posts
from .projects import PROJECTS
from .utils import format_card_date, format_long_date


def make_env(template_dir: pathlib.Path = TEMPLATE_DIR) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["card_date"] = format_card_date
    env.filters["long_date"] = format_long_date
    return env


def render_home(
    env: Environment,
    site: SiteConfig,
    posts: Iterable[Post],
    projects: Sequence[Project] = PROJECTS,
) -> str:
    return env.get_template("home.html").render(
        site=site,
        page_title=f"{site.title_prefix} · home",
        projects=projects,
        posts=recent_posts(posts),
    )


def render_post_list(env: Environment, site: SiteConfig, posts: Iterable[Post]) -> str:
    return env.get_template("posts.html").render(
        site=site,
        page_title=f"{site.title_prefix} · blog",
        posts=sort_posts(posts),
    )


def render_post(
    env: Environment,
    site: SiteConfig,
    post: Post,
    posts_sorted: Optional[Sequence[Post]] = None,
) -> str:
    newer, older = prev_next(posts_sorted or [post], post)
    return env.get_template("post.html").render(
        site=site,
        page_title=f"{post.title} · {site.title_prefix}",
        page_description=post.description or site.description,
        post=post,
        body=Markup(post.body_html),
        newer=newer,
        older=older,
    )
