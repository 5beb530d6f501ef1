"""
Update the description of a saved query.

Usage:
    python -m src.samples.update_saved_query projects/NUMBER/savedQueries/QUERY_ID NEW_DESCRIPTION
"""

import argparse
import sys

from google.cloud import asset_v1

from . import run_main


def update_saved_query(saved_query_name: str, description: str, client=None):
    """Print the full name first and the new description second."""
    if client is None:
        client = asset_v1.AssetServiceClient()

    response = client.update_saved_query(
        request={
            "saved_query": {"name": saved_query_name, "description": description},
            "update_mask": {"paths": ["description"]},
        }
    )
    print(response.name)
    print(response.description)
    return response


def main(argv=None):
    parser = argparse.ArgumentParser(description="Update a saved query")
    parser.add_argument("saved_query_name", help="projects/NUMBER/savedQueries/QUERY_ID")
    parser.add_argument("description", help="New description")
    args = parser.parse_args(argv)

    update_saved_query(args.saved_query_name, args.description)


if __name__ == "__main__":
    sys.exit(run_main(main))
