from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List


@dataclass
class Reconciliation:
    source: List[str] = field(default_factory=list)
    declared: List[str] = field(default_factory=list)
    undeclared: List[str] = field(default_factory=list)


def reconcile(source_tokens: Iterable[str], workflow_tokens: Iterable[str]) -> Reconciliation:
    """
    Classify each source token as declared (also referenced in a workflow)
    or undeclared. Workflow-only tokens are not reported.
    """
    wf = set(workflow_tokens)
    result = Reconciliation()
    for tok in dict.fromkeys(source_tokens):
        result.source.append(tok)
        if tok in wf:
            result.declared.append(tok)
        else:
            result.undeclared.append(tok)
    return result
