"""
Delete a saved query.

Usage:
    python -m src.samples.delete_saved_query projects/NUMBER/savedQueries/QUERY_ID
"""

import argparse
import sys

from google.cloud import asset_v1

from . import run_main


def delete_saved_query(saved_query_name: str, client=None) -> None:
    if client is None:
        client = asset_v1.AssetServiceClient()

    client.delete_saved_query(request={"name": saved_query_name})
    print("Deleted saved query:", saved_query_name)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Delete a saved query")
    parser.add_argument("saved_query_name", help="projects/NUMBER/savedQueries/QUERY_ID")
    args = parser.parse_args(argv)

    delete_saved_query(args.saved_query_name)


if __name__ == "__main__":
    sys.exit(run_main(main))
