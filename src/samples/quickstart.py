"""
Quickstart: fetch the current resource history of one asset.

Usage:
    python -m src.samples.quickstart //storage.googleapis.com/my-bucket
"""

import argparse
import datetime
import sys

from google.cloud import asset_v1

from . import require_project_id, run_main


def batch_get_assets_history(project_id: str, asset_names: list[str], client=None):
    """Print and return the resource history of the given assets, starting now."""
    if client is None:
        client = asset_v1.AssetServiceClient()

    read_time_window = asset_v1.TimeWindow(
        start_time=datetime.datetime.now(datetime.timezone.utc)
    )
    response = client.batch_get_assets_history(
        request={
            "parent": f"projects/{project_id}",
            "content_type": asset_v1.ContentType.RESOURCE,
            "read_time_window": read_time_window,
            "asset_names": asset_names,
        }
    )
    print(response)
    return response


def main(argv=None):
    parser = argparse.ArgumentParser(description="Cloud Asset Inventory quickstart")
    parser.add_argument("asset_name", help="Full asset name, e.g. //storage.googleapis.com/my-bucket")
    args = parser.parse_args(argv)

    batch_get_assets_history(require_project_id(), [args.asset_name])


if __name__ == "__main__":
    sys.exit(run_main(main))
