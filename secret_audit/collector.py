"""
File collection for the audit.

Walks a directory tree and returns every file whose name ends with one of
the given suffixes. A missing or unreadable root is not handled here; the
OSError reaches the CLI's top-level handler.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

SOURCE_EXTS = (".ts",)
WORKFLOW_EXTS = (".yml", ".yaml")


def collect_files(root: Path, extensions: Iterable[str], files: Optional[List[Path]] = None) -> List[Path]:
    if files is None:
        files = []
    exts = tuple(extensions)
    for p in sorted(Path(root).iterdir()):
        if p.is_dir():
            collect_files(p, exts, files)
        elif p.name.endswith(exts):
            files.append(p)
    return files


def source_dir(project_root: Path) -> Path:
    return Path(project_root) / "src"


def workflow_dir(project_root: Path) -> Path:
    return Path(project_root) / ".github" / "workflows"


def collect_source_files(project_root: Path) -> List[Path]:
    return collect_files(source_dir(project_root), SOURCE_EXTS)


def collect_workflow_files(project_root: Path) -> List[Path]:
    wf_dir = workflow_dir(project_root)
    if not wf_dir.exists():
        return []
    return collect_files(wf_dir, WORKFLOW_EXTS)
