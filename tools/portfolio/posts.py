from __future__ import annotations

import pathlib
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import markdown

from .config import POST_SUFFIXES, POSTS_DIR, RECENT_POSTS_LIMIT
from .git import git_last_commit_date
from .models import Post
from .notebooks import notebook_meta, notebook_title, read_notebook, render_notebook
from .utils import (
    _norm_text,
    coerce_date,
    natural_key,
    normalize_markdown_light,
    parse_frontmatter,
    slugify,
)

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "toc"]


def _publish_date(fm: Dict[str, Any], path: pathlib.Path) -> date:
    try:
        d = coerce_date(fm.get("date"))
    except ValueError as e:
        raise ValueError(f"{path}: {e}") from e
    return d or git_last_commit_date(path) or datetime.now().date()


def _description(fm: Dict[str, Any]) -> Optional[str]:
    desc = fm.get("description")
    if desc is None:
        return None
    return str(desc).strip() or None


def post_slug(rel_key: str) -> str:
    slug = "/".join(slugify(part) for part in rel_key.split("/"))
    if not slug.strip("/"):
        raise ValueError(f"cannot derive a slug from {rel_key!r}")
    return f"/{slug}"


def load_markdown_post(md: pathlib.Path, posts_dir: pathlib.Path) -> Post:
    rel = md.relative_to(posts_dir)
    text = _norm_text(md.read_text(encoding="utf-8"))
    try:
        fm, body = parse_frontmatter(text)
    except ValueError as e:
        raise ValueError(f"{md}: {e}") from e
    fm = fm or {}

    rel_key = str(fm.get("slug") or rel.with_suffix("").as_posix()).strip("/")
    html = markdown.markdown(
        normalize_markdown_light(body), extensions=MARKDOWN_EXTENSIONS
    )
    return Post(
        id=rel.as_posix(),
        title=str(fm.get("title") or md.stem.replace("-", " ").title()),
        date=_publish_date(fm, md),
        slug=post_slug(rel_key),
        description=_description(fm),
        body_html=html,
        source="markdown",
    )


def load_notebook_post(ipynb: pathlib.Path, posts_dir: pathlib.Path) -> Post:
    rel = ipynb.relative_to(posts_dir)
    nb = read_notebook(ipynb)
    meta = notebook_meta(nb)
    title = (
        meta.get("title")
        or notebook_title(nb)
        or ipynb.stem.replace("-", " ").title()
    )
    return Post(
        id=rel.as_posix(),
        title=str(title),
        date=_publish_date(meta, ipynb),
        slug=post_slug(rel.with_suffix("").as_posix()),
        description=_description(meta),
        body_html=render_notebook(nb),
        source="notebook",
    )


def load_posts(posts_dir: pathlib.Path = POSTS_DIR) -> List[Post]:
    """Load every post under ``posts_dir``, in natural file-name order."""
    if not posts_dir.exists():
        print(f"- no posts/ at {posts_dir}")
        return []

    files = [
        p for p in posts_dir.rglob("*")
        if p.is_file() and p.suffix.lower() in POST_SUFFIXES
        and not any(part.startswith((".", "_")) for part in p.relative_to(posts_dir).parts)
    ]
    files.sort(key=lambda p: natural_key(p.relative_to(posts_dir).as_posix()))

    posts: List[Post] = []
    seen: Dict[str, pathlib.Path] = {}
    for p in files:
        if p.suffix.lower() == ".ipynb":
            post = load_notebook_post(p, posts_dir)
        else:
            post = load_markdown_post(p, posts_dir)
        if post.slug in seen:
            raise ValueError(
                f"{p}: slug {post.slug} already used by {seen[post.slug]}"
            )
        seen[post.slug] = p
        posts.append(post)
    print(f"✓ loaded {len(posts)} posts")
    return posts


def sort_posts(posts: Iterable[Post]) -> List[Post]:
    return sorted(posts, key=lambda p: p.date, reverse=True)


def recent_posts(posts: Iterable[Post], limit: int = RECENT_POSTS_LIMIT) -> List[Post]:
    return sort_posts(posts)[:limit]


def prev_next(
    posts_sorted: Sequence[Post], post: Post
) -> Tuple[Optional[Post], Optional[Post]]:
    """Neighbours of ``post`` in a newest-first list: (newer, older)."""
    i = next((i for i, p in enumerate(posts_sorted) if p.slug == post.slug), None)
    if i is None:
        raise ValueError(f"post {post.slug} is not in the list")
    newer = posts_sorted[i - 1] if i > 0 else None
    older = posts_sorted[i + 1] if i < len(posts_sorted) - 1 else None
    return newer, older
