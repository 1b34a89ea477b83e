from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import date
from typing import Dict, Iterable, List, Optional

from .config import STATIC_ROUTES
from .models import Post, SiteConfig

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def sitemap_entries(
    posts: Iterable[Post],
    site: SiteConfig,
    today: Optional[date] = None,
) -> List[Dict[str, str]]:
    """Static routes stamped with today's date, then one entry per post."""
    today = today or date.today()
    routes = [
        {"url": site.absolute(route), "lastModified": today.isoformat()}
        for route in STATIC_ROUTES
    ]
    entries = [
        {"url": site.absolute(f"/posts{p.slug}"), "lastModified": p.date.isoformat()}
        for p in posts
    ]
    return routes + entries


def sitemap_xml(entries: Iterable[Dict[str, str]]) -> str:
    urlset = ET.Element("urlset", {"xmlns": SITEMAP_NS})
    for e in entries:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = e["url"]
        ET.SubElement(url, "lastmod").text = e["lastModified"]
    ET.indent(urlset)
    return ET.tostring(urlset, encoding="utf-8", xml_declaration=True).decode("utf-8") + "\n"
