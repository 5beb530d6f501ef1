"""
Get the history of assets of a given content type.

Usage:
    python -m src.samples.get_batch_asset_history ASSET_NAMES CONTENT_TYPE
"""

import argparse
import datetime
import sys

from google.cloud import asset_v1

from src.util import split_csv

from . import parse_content_type, require_project_id, run_main


def get_batch_asset_history(project_id: str, asset_names: list[str], content_type: str, client=None):
    """Print and return the history of the named assets from now on."""
    if client is None:
        client = asset_v1.AssetServiceClient()

    read_time_window = asset_v1.TimeWindow(
        start_time=datetime.datetime.now(datetime.timezone.utc)
    )
    response = client.batch_get_assets_history(
        request={
            "parent": f"projects/{project_id}",
            "content_type": parse_content_type(content_type),
            "read_time_window": read_time_window,
            "asset_names": asset_names,
        }
    )
    print(response)
    return response


def main(argv=None):
    parser = argparse.ArgumentParser(description="Get batch asset history")
    parser.add_argument("asset_names", help="Comma separated full asset names")
    parser.add_argument("content_type", help="e.g. RESOURCE")
    args = parser.parse_args(argv)

    get_batch_asset_history(require_project_id(), split_csv(args.asset_names), args.content_type)


if __name__ == "__main__":
    sys.exit(run_main(main))
