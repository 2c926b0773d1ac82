"""
secret-audit: check that env vars used in source are GitHub Actions secrets.

Contains:
- collector: recursive file walk filtered by suffix
- extractor: regex token scans for source and workflow files
- reconciler: split source tokens into declared / undeclared
- verifier: GitHub REST existence check per declared secret
- config: credential resolution + .env loading
- cli: argparse entry point
"""

__version__ = "0.1.0"
