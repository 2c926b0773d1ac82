#!/usr/bin/env python
"""
Secret Audit

What it does:
  - Scans <dir>/src/**/*.ts for process.env.NAME references.
  - Scans <dir>/.github/workflows/**/*.yml|yaml for secrets.NAME references.
  - For every env var that a workflow also references, asks the GitHub REST
    API whether the repository actually has that Actions secret.
  - Env vars no workflow references are reported as warnings only.

Credential:
  --token, or the GHCR_TOKEN environment variable (a .env file in the
  working directory is loaded first).

Safety:
  - Read-only GitHub API calls only.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from secret_audit.collector import (
    collect_source_files,
    collect_workflow_files,
    source_dir,
    workflow_dir,
)
from secret_audit.config import TOKEN_ENV_VAR, AuditConfig, load_env_file, resolve_token
from secret_audit.extractor import scan_source_files, scan_workflow_files
from secret_audit.reconciler import reconcile
from secret_audit.verifier import verify_secrets


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="secret-audit",
        description="Check that env vars used in src/ are GitHub Actions secrets.",
    )
    ap.add_argument("-r", "--repo", required=True, help="Repository name")
    ap.add_argument("-o", "--owner", required=True, help="Repository owner")
    ap.add_argument("-d", "--dir", default=".", help="Directory to scan")
    ap.add_argument("-t", "--token", help="GitHub token")
    return ap


def run(cfg: AuditConfig) -> int:
    src = source_dir(cfg.project_root)
    print(f"Scanning project files in {src}...")
    env_vars = scan_source_files(collect_source_files(cfg.project_root))
    print(f"Found environment variables in the project: {env_vars}")

    if not workflow_dir(cfg.project_root).exists():
        print("No .github/workflows directory found. Skipping secret check.")
        return 0

    wf_secrets = scan_workflow_files(collect_workflow_files(cfg.project_root))
    print(f"\nFound secrets in GitHub workflows: {wf_secrets}")

    print("\nChecking for variables in GitHub secrets via REST API...")
    token = resolve_token(cfg.token)
    if not token:
        print(
            "Error: GitHub token not provided. Set it via the --token flag "
            f"or the {TOKEN_ENV_VAR} environment variable.",
            file=sys.stderr,
        )
        return 1

    rec = reconcile(env_vars, wf_secrets)
    verify_secrets(rec, cfg.owner, cfg.repo, token)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        load_env_file()
        return run(AuditConfig.from_args(args))
    except Exception as e:
        print(f"Error during script execution: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
