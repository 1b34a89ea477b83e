from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Post:
    id: str
    title: str
    date: date
    slug: str
    description: Optional[str] = None
    body_html: str = ""
    source: str = "markdown"

    @property
    def path(self) -> str:
        return f"/posts{self.slug}"


@dataclass(frozen=True)
class Project:
    name: str
    description: str
    link: str


@dataclass(frozen=True)
class SiteConfig:
    name: str
    description: str
    url: str
    title_prefix: str = ""
    author: str = ""
    email: str = ""
    github: str = ""

    def absolute(self, path: str = "") -> str:
        return f"{self.url}{path}"
