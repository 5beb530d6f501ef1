"""
Search all resources within a scope.

Usage:
    python -m src.samples.search_all_resources SCOPE [QUERY]

An empty SCOPE ('') searches the current project.
"""

import argparse
import sys

from google.cloud import asset_v1

from src.util import split_csv

from . import project_scope, require_project_id, run_main


def search_all_resources(scope: str, query: str = "", asset_types=None, page_size: int = 0,
                         order_by: str = "", client=None) -> list:
    """Print every matching resource and return them as a list."""
    if client is None:
        client = asset_v1.AssetServiceClient()

    response = client.search_all_resources(
        request={
            "scope": scope,
            "query": query,
            "asset_types": asset_types or [],
            "page_size": page_size,
            "order_by": order_by,
        }
    )
    results = []
    for resource in response:
        print(resource)
        results.append(resource)
    return results


def main(argv=None):
    parser = argparse.ArgumentParser(description="Search all resources")
    parser.add_argument("scope", help="projects/ID, folders/ID or organizations/ID ('' = current project)")
    parser.add_argument("query", nargs="?", default="", help="e.g. name:my-instance")
    parser.add_argument("asset_types", nargs="?", default="", help="Comma separated asset types")
    args = parser.parse_args(argv)

    scope = args.scope or project_scope("", require_project_id())
    search_all_resources(scope, args.query, split_csv(args.asset_types))


if __name__ == "__main__":
    sys.exit(run_main(main))
