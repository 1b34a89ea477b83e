from __future__ import annotations

import copy
import pathlib
import re
from typing import Any, Dict, Optional

import nbformat
from nbconvert import HTMLExporter
from nbformat import NotebookNode
from nbformat.validator import validate

from .utils import _norm_text

_HIDDEN_INPUT_TAGS = {"hide-input", "remove-input", "hide_input", "remove_input"}
_HIDDEN_OUTPUT_TAGS = {"hide-output", "remove-output", "hide_output", "remove_output"}
_REMOVE_CELL_TAGS = {"remove-cell", "hide-cell", "remove_cell", "hide_cell"}

_H1 = re.compile(r'^\s*#\s+(.+?)\s*$', re.MULTILINE)


def _tags(cell: NotebookNode) -> set:
    md = cell.get("metadata") or {}
    return set(md.get("tags") or [])


def _flag(cell: NotebookNode, tags: set, name: str) -> bool:
    md = cell.get("metadata") or {}
    jup = md.get("jupyter") if isinstance(md.get("jupyter"), dict) else {}
    return bool(jup.get(name)) or bool(md.get(name)) or bool(_tags(cell) & tags)


def _visible_cell(cell: NotebookNode) -> Optional[NotebookNode]:
    """Apply hide/remove flags to a copy of ``cell``; ``None`` drops it."""
    if _tags(cell) & _REMOVE_CELL_TAGS:
        return None

    c = copy.deepcopy(cell)
    kind = c.get("cell_type")

    if _flag(c, _HIDDEN_INPUT_TAGS, "source_hidden"):
        if kind == "markdown":
            return None
        if kind == "code":
            c["source"] = ""

    if kind == "code" and _flag(c, _HIDDEN_OUTPUT_TAGS, "outputs_hidden"):
        c["outputs"] = []
        c["execution_count"] = None

    src = _norm_text(c.get("source", "")).strip()
    if kind == "markdown" and not src and not c.get("attachments"):
        return None
    if kind == "code" and not src and not c.get("outputs"):
        return None
    return c


def filter_and_apply_visibility(nb: NotebookNode) -> None:
    cells = (_visible_cell(cell) for cell in nb.cells)
    nb.cells = [c for c in cells if c is not None]


def notebook_title(nb: NotebookNode) -> Optional[str]:
    for cell in nb.cells:
        if cell.get("cell_type") != "markdown":
            continue
        m = _H1.search(cell.get("source", ""))
        if m:
            return m.group(1).strip()
    return None


def read_notebook(path: pathlib.Path) -> NotebookNode:
    nb = nbformat.read(str(path), as_version=4)
    try:
        validate(nb)
    except nbformat.ValidationError as e:
        raise ValueError(f"{path}: invalid notebook: {e.message}") from e
    filter_and_apply_visibility(nb)
    return nb


def notebook_meta(nb: NotebookNode) -> Dict[str, Any]:
    """Post fields stored in the notebook's top-level metadata."""
    meta = nb.metadata.get("post") or nb.metadata
    return {k: meta.get(k) for k in ("title", "date", "description") if meta.get(k)}


def render_notebook(nb: NotebookNode) -> str:
    exporter = HTMLExporter(template_name="basic")
    body, _ = exporter.from_notebook_node(nb)
    return body
