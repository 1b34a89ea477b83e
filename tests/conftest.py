from __future__ import annotations

import textwrap
from datetime import date
from pathlib import Path

import pytest

from tools.portfolio.models import Post, SiteConfig


@pytest.fixture(autouse=True)
def _no_site_url(monkeypatch):
    monkeypatch.delenv("SITE_URL", raising=False)


@pytest.fixture
def site() -> SiteConfig:
    return SiteConfig(
        name="Test Person",
        description="A test site",
        url="https://example.com",
        title_prefix="tester",
        author="Test Person",
        email="me@example.com",
        github="https://github.com/tester/",
    )


@pytest.fixture
def write_post(tmp_path: Path):
    """Write a markdown post with frontmatter into tmp_path/posts."""
    posts_dir = tmp_path / "posts"
    posts_dir.mkdir(exist_ok=True)

    def _write(name: str, body: str = "Some text.", **fm) -> Path:
        lines = [f"{k}: {v}" for k, v in fm.items()]
        text = "---\n" + "\n".join(lines) + "\n---\n\n" + textwrap.dedent(body)
        path = posts_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    _write.dir = posts_dir
    return _write


def _make_post(n: int, d: date, description: str | None = "desc") -> Post:
    return Post(
        id=f"post-{n}.md",
        title=f"Post {n}",
        date=d,
        slug=f"/post-{n}",
        description=description,
        body_html=f"<p>body {n}</p>",
    )


@pytest.fixture
def make_post():
    """Build an in-memory Post numbered `n`."""
    return _make_post


@pytest.fixture
def posts():
    days = [date(2023, 1, 5), date(2023, 3, 1), date(2022, 12, 31),
            date(2023, 2, 14), date(2023, 6, 30), date(2021, 7, 4)]
    return [_make_post(i, d) for i, d in enumerate(days)]
