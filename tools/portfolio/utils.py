from __future__ import annotations

import pathlib
import re
from datetime import date, datetime
from typing import Any, Dict, Optional, Tuple

import yaml

from .config import SLUG_RE, SPACES_EOL


def slugify(s: str) -> str:
    return re.sub(r"-{2,}", "-", SLUG_RE.sub("-", s.lower()).strip("-"))


def natural_key(s: str):
    return [int(t) if t.isdigit() else t for t in re.split(r'(\d+)', s.lower())]


def read_yaml(path: pathlib.Path) -> Dict[str, Any]:
    if path.exists():
        return yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return {}


def _norm_text(s: str) -> str:
    return s.replace('\r\n', '\n').replace('\r', '\n').lstrip('\ufeff')


def coerce_date(v) -> Optional[date]:
    """Turn a YAML/metadata date value into a plain ``date``.

    Accepts ``date``/``datetime`` objects (what PyYAML yields for bare
    ISO scalars) and ISO strings, quoted or not. ``None`` stays ``None``.
    Anything else raises ``ValueError``.
    """
    if v is None:
        return None
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, date):
        return v
    if isinstance(v, str):
        s = v.strip().strip('"').strip("'")
        try:
            return date.fromisoformat(s[:10])
        except ValueError:
            raise ValueError(f"not an ISO date: {v!r}") from None
    raise ValueError(f"not a date: {v!r}")


def parse_frontmatter(text: str) -> Tuple[Optional[Dict[str, Any]], str]:
    s = text.lstrip()
    if not s.startswith("---\n") and not s.startswith("---\r\n"):
        return None, text

    lines = s.splitlines(keepends=True)
    for i in range(1, len(lines)):
        if lines[i].strip() == "---":
            fm_text = "".join(lines[1:i])
            body = "".join(lines[i + 1 :])
            try:
                fm = yaml.safe_load(fm_text) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"invalid frontmatter: {e}") from e
            if not isinstance(fm, dict):
                raise ValueError("frontmatter is not a mapping")
            return fm, body
    return None, text


def normalize_markdown_light(md: str) -> str:
    md = SPACES_EOL.sub("", md)
    md = re.sub(r'\n{3,}', '\n\n', md)
    md = re.sub(r'([^\n])\n(#{1,6}\s)', r'\1\n\n\2', md)
    return md


# ---------- Dates for display

def _ordinal(n: int) -> str:
    if 11 <= n % 100 <= 13:
        return f"{n}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def format_long_date(d: date) -> str:
    """``date(2024, 6, 1)`` -> ``"Saturday, June 1st, 2024"``."""
    return f"{d.strftime('%A')}, {d.strftime('%B')} {_ordinal(d.day)}, {d.year}"


def format_card_date(d: date) -> str:
    # keeps everything from the first space on, leading space included
    long = format_long_date(d)
    return long[long.find(" "):]
