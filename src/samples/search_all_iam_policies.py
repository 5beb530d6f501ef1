"""
Search all IAM policies within a scope.

Usage:
    python -m src.samples.search_all_iam_policies SCOPE [QUERY]
"""

import argparse
import sys

from google.cloud import asset_v1

from . import project_scope, require_project_id, run_main


def search_all_iam_policies(scope: str, query: str = "", page_size: int = 0, client=None) -> list:
    """Print every matching IAM policy binding and return them as a list."""
    if client is None:
        client = asset_v1.AssetServiceClient()

    response = client.search_all_iam_policies(
        request={"scope": scope, "query": query, "page_size": page_size}
    )
    results = []
    for policy in response:
        print(policy)
        results.append(policy)
    return results


def main(argv=None):
    parser = argparse.ArgumentParser(description="Search all IAM policies")
    parser.add_argument("scope", help="projects/ID, folders/ID or organizations/ID ('' = current project)")
    parser.add_argument("query", nargs="?", default="", help="e.g. policy:roles/owner")
    args = parser.parse_args(argv)

    scope = args.scope or project_scope("", require_project_id())
    search_all_iam_policies(scope, args.query)


if __name__ == "__main__":
    sys.exit(run_main(main))
