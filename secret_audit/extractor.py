"""
Token extraction.

Both scans are plain regex matches over the file text, not a parse of
TypeScript or YAML. A `process.env.FOO` inside a comment or a string literal
counts the same as real code, and an access written as
`process.env["FOO"]` is missed. Keep it lexical.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, Iterable, List, Optional

import yaml

ENV_VAR_PATTERN = re.compile(r"process\.env\.([A-Z_][A-Z0-9_]*)")
SECRET_PATTERN = re.compile(r"secrets\.([A-Z_][A-Z0-9_]*)")


def extract_tokens(text: str, pattern: re.Pattern[str]) -> List[str]:
    """Distinct capture-group values, in first-occurrence order."""
    return list(dict.fromkeys(m.group(1) for m in pattern.finditer(text)))


def scan_files(
    paths: Iterable[Path],
    pattern: re.Pattern[str],
    validate: Optional[Callable[[Path, str], bool]] = None,
) -> List[str]:
    tokens: dict = {}
    for path in paths:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
        if validate is not None:
            validate(path, text)
        for tok in extract_tokens(text, pattern):
            tokens.setdefault(tok, None)
    return list(tokens)


def check_workflow_yaml(path: Path, text: str) -> bool:
    """
    Best-effort YAML sanity check for a workflow file.
    Only prints a warning; secret extraction stays lexical either way.
    """
    try:
        yaml.safe_load(text)
        return True
    except yaml.YAMLError as e:
        print(f"[YAML] WARNING: could not parse {path}: {e}")
        return False


def scan_source_files(paths: Iterable[Path]) -> List[str]:
    return scan_files(paths, ENV_VAR_PATTERN)


def scan_workflow_files(paths: Iterable[Path]) -> List[str]:
    return scan_files(paths, SECRET_PATTERN, validate=check_workflow_yaml)
