"""
CLI Entrypoint
--------------

Manage test projects on a running OpenRefine without a browser, e.g. to
prepare data for manual exploration or to remove projects left behind
by an interrupted test run.  See ``python -m refine_e2e --help``.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .api import RefineClient
from .commands import commands
from .config import Config
from .fixtures import fixture_names, to_csv


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="refine-e2e", description="OpenRefine end-to-end test helpers")
    parser.add_argument("--config", help="Path to the YAML configuration file")
    parser.add_argument("--url", help="OpenRefine base URL (overrides the configuration)")
    sub = parser.add_subparsers(dest="action", required=True)

    load = sub.add_parser("load", help="Create a project from a bundled fixture")
    load.add_argument("fixture", choices=fixture_names())
    load.add_argument("--name", default=None, help="Project name (default: the fixture name)")

    delete = sub.add_parser("delete", help="Delete projects by id")
    delete.add_argument("project_ids", nargs="+")

    sub.add_parser("fixtures", help="List bundled fixtures")
    sub.add_parser("commands", help="List registered commands")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.action == "fixtures":
        print("\n".join(fixture_names()))
        return 0
    if args.action == "commands":
        for command in commands:
            print(f"{command.name:42} {command.summary}")
        return 0

    config = Config(args.config)
    client = RefineClient(args.url or config.openrefine_url, timeout=float(config.get("api.timeout", 30)))
    try:
        if args.action == "load":
            project_id = client.create_project(to_csv(args.fixture), args.name or args.fixture)
            print(project_id)
        elif args.action == "delete":
            for project_id in args.project_ids:
                client.delete_project(project_id)
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
