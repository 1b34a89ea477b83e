"""
RSS 2.0 feed for the post collection.

Channel: title, description, link (site url), atom self link (feed url),
language, lastBuildDate, generator.
Items: title, description?, link, guid, pubDate.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import date, datetime, time, timezone
from email.utils import format_datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .config import FEED_LANGUAGE, XML_CONTENT_TYPE
from .models import Post, SiteConfig

ATOM_NS = "http://www.w3.org/2005/Atom"
GENERATOR = "portfolio site builder"

ET.register_namespace("atom", ATOM_NS)


def _rfc822(d: date) -> str:
    return format_datetime(datetime.combine(d, time(), tzinfo=timezone.utc), usegmt=True)


def feed_item(post: Post, site: SiteConfig) -> Dict[str, Any]:
    return {
        "title": post.title,
        "description": post.description,
        "date": post.date,
        "url": site.absolute(f"/posts{post.slug}"),
        "guid": site.absolute(f"/posts/{post.id}"),
    }


def feed_items(posts: Iterable[Post], site: SiteConfig) -> List[Dict[str, Any]]:
    return [feed_item(p, site) for p in posts]


def _sub(parent: ET.Element, tag: str, text: Optional[str] = None, **attrs) -> ET.Element:
    el = ET.SubElement(parent, tag, attrs)
    if text is not None:
        el.text = text
    return el


def feed_xml(
    posts: Iterable[Post],
    site: SiteConfig,
    now: Optional[datetime] = None,
) -> str:
    now = now or datetime.now(timezone.utc)
    rss = ET.Element("rss", {"version": "2.0"})
    channel = _sub(rss, "channel")
    _sub(channel, "title", site.name)
    _sub(channel, "description", site.description)
    _sub(channel, "link", site.url)
    _sub(channel, "generator", GENERATOR)
    _sub(channel, "lastBuildDate", format_datetime(now, usegmt=True))
    _sub(
        channel,
        f"{{{ATOM_NS}}}link",
        href=site.absolute("/rss.xml"),
        rel="self",
        type="application/rss+xml",
    )
    _sub(channel, "language", FEED_LANGUAGE)

    for item in feed_items(posts, site):
        el = _sub(channel, "item")
        _sub(el, "title", item["title"])
        if item["description"]:
            _sub(el, "description", item["description"])
        _sub(el, "link", item["url"])
        _sub(el, "guid", item["guid"], isPermaLink="false")
        _sub(el, "pubDate", _rfc822(item["date"]))

    ET.indent(rss)
    return ET.tostring(rss, encoding="utf-8", xml_declaration=True).decode("utf-8") + "\n"


def feed_response(posts: Iterable[Post], site: SiteConfig) -> Tuple[str, str]:
    """Body and content type served at ``/rss.xml``."""
    return feed_xml(posts, site), XML_CONTENT_TYPE
