"""
Get a saved query by its full name.

Usage:
    python -m src.samples.get_saved_query projects/NUMBER/savedQueries/QUERY_ID
"""

import argparse
import sys

from google.cloud import asset_v1

from . import run_main


def get_saved_query(saved_query_name: str, client=None):
    """Print the full name first, then the saved query."""
    if client is None:
        client = asset_v1.AssetServiceClient()

    response = client.get_saved_query(request={"name": saved_query_name})
    print(response.name)
    print(response)
    return response


def main(argv=None):
    parser = argparse.ArgumentParser(description="Get a saved query")
    parser.add_argument("saved_query_name", help="projects/NUMBER/savedQueries/QUERY_ID")
    args = parser.parse_args(argv)

    get_saved_query(args.saved_query_name)


if __name__ == "__main__":
    sys.exit(run_main(main))
