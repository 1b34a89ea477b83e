from __future__ import annotations

import subprocess
from datetime import date
from pathlib import Path
from typing import Optional


def git_last_commit_date(path: Path) -> Optional[date]:
    """Author date of the last commit touching ``path``.

    ``None`` when the file is untracked, outside a repository, or git is
    not installed.
    """
    path = path.resolve()
    cmd = ["git", "log", "--follow", "-1", "--format=%as", "--", path.name]
    try:
        proc = subprocess.run(
            cmd, cwd=path.parent, capture_output=True, text=True, check=False
        )
    except FileNotFoundError:
        return None
    stamp = proc.stdout.strip()
    if proc.returncode != 0 or not stamp:
        return None
    # %as is the short author date, YYYY-MM-DD
    return date.fromisoformat(stamp.splitlines()[0])
