"""
List the saved queries of the current project.

Usage:
    python -m src.samples.list_saved_queries
"""

import argparse
import sys

from google.cloud import asset_v1

from . import require_project_id, run_main

LISTED_MESSAGE = "Listed saved queries successfully."


def list_saved_queries(project_id: str, client=None) -> list:
    """Print every saved query, then a completion line last."""
    if client is None:
        client = asset_v1.AssetServiceClient()

    response = client.list_saved_queries(request={"parent": f"projects/{project_id}"})
    queries = []
    for saved_query in response:
        print(saved_query)
        queries.append(saved_query)
    print(LISTED_MESSAGE)
    return queries


def main(argv=None):
    parser = argparse.ArgumentParser(description="List saved queries")
    parser.parse_args(argv)

    list_saved_queries(require_project_id())


if __name__ == "__main__":
    sys.exit(run_main(main))
