"""
GitHub Actions secret existence checks.

One GET per declared secret against
  /repos/{owner}/{repo}/actions/secrets/{name}

Checks run one after another. A bad status or a transport failure for one
secret is reported on its own line and the loop moves on; nothing here
retries, backs off, or paginates.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Dict, List, Optional

import requests

from secret_audit.reconciler import Reconciliation

GITHUB_API = "https://api.github.com"

FOUND = "found"
NOT_FOUND = "not_found"
LOOKUP_ERROR = "lookup_error"
UNDECLARED = "undeclared"


@dataclass
class SecretVerdict:
    token: str
    status: str
    http_status: Optional[int] = None
    message: Optional[str] = None


def gh_headers(credential: str) -> Dict[str, str]:
    return {
        "Authorization": f"token {credential}",
        "Accept": "application/vnd.github.v3+json",
        "User-Agent": "secret-audit",
    }


def secret_url(owner: str, repo: str, name: str) -> str:
    return f"{GITHUB_API}/repos/{owner}/{repo}/actions/secrets/{name}"


def check_secret(
    name: str,
    owner: str,
    repo: str,
    credential: str,
    session: Optional[requests.Session] = None,
) -> SecretVerdict:
    http = session or requests
    try:
        r = http.get(secret_url(owner, repo, name), headers=gh_headers(credential))
    except (requests.RequestException, UnicodeError) as e:
        return SecretVerdict(token=name, status=LOOKUP_ERROR, message=str(e))

    if r.status_code == 200:
        return SecretVerdict(token=name, status=FOUND, http_status=200)
    if r.status_code == 404:
        return SecretVerdict(token=name, status=NOT_FOUND, http_status=404)
    return SecretVerdict(token=name, status=LOOKUP_ERROR, http_status=r.status_code)


def format_verdict(v: SecretVerdict) -> str:
    if v.status == FOUND:
        return f"✅ {v.token} found in GitHub secrets."
    if v.status == NOT_FOUND:
        return f"❌ {v.token} not found in GitHub secrets, but is in a workflow file."
    if v.status == UNDECLARED:
        return f"⚠️ {v.token} not found in any workflow file."
    if v.http_status is not None:
        return f"Error checking secret {v.token}: Received status {v.http_status}"
    return f"Error checking secret {v.token}: {v.message}"


def report_verdict(v: SecretVerdict) -> None:
    stream = sys.stderr if v.status == LOOKUP_ERROR else sys.stdout
    print(format_verdict(v), file=stream)


def verify_secrets(
    rec: Reconciliation,
    owner: str,
    repo: str,
    credential: str,
    session: Optional[requests.Session] = None,
) -> List[SecretVerdict]:
    """
    Walk source tokens in order. Undeclared ones get a warning verdict with
    no request; declared ones are checked against the secret store.
    """
    declared = set(rec.declared)
    verdicts: List[SecretVerdict] = []
    for tok in rec.source:
        if tok in declared:
            v = check_secret(tok, owner, repo, credential, session=session)
        else:
            v = SecretVerdict(token=tok, status=UNDECLARED)
        report_verdict(v)
        verdicts.append(v)
    return verdicts
