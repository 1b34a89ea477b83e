from __future__ import annotations

import hashlib
import pathlib
import shutil


def _digest(p: pathlib.Path) -> str:
    return hashlib.sha256(p.read_bytes()).hexdigest()


def write_if_changed(path: pathlib.Path, text: str) -> bool:
    """Write ``text`` to ``path`` unless it already holds exactly that."""
    data = text.encode("utf-8")
    if path.exists() and path.read_bytes() == data:
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return True


def mirror_tree(src_dir: pathlib.Path, dst_dir: pathlib.Path) -> int:
    """Copy new/changed files from ``src_dir`` into ``dst_dir``.

    Files already in ``dst_dir`` that ``src_dir`` does not have are left
    alone, since the output directory also holds generated pages.
    Returns the number of files copied.
    """
    if not src_dir.exists():
        return 0

    copied = 0
    for s in src_dir.rglob("*"):
        if not s.is_file():
            continue
        d = dst_dir / s.relative_to(src_dir)
        if d.exists() and _digest(s) == _digest(d):
            continue
        d.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(s, d)
        copied += 1
    return copied


def prune_stale(out_dir: pathlib.Path, keep: set[pathlib.Path]) -> None:
    """Remove generated post pages whose post no longer exists."""
    posts_out = out_dir / "posts"
    if not posts_out.exists():
        return
    for index in list(posts_out.rglob("index.html")):
        if index.resolve() in keep or index.parent == posts_out:
            continue
        print(f"- removing stale page {index.parent.relative_to(out_dir)}")
        index.unlink()
        if not any(index.parent.iterdir()):
            index.parent.rmdir()
