"""
Get the effective IAM policies of assets, including inherited ones.

Usage:
    python -m src.samples.get_batch_effective_iam_policies ASSET_NAMES
"""

import argparse
import sys

from google.cloud import asset_v1

from src.util import split_csv

from . import require_project_id, run_main


def get_batch_effective_iam_policies(project_id: str, asset_names: list[str], client=None):
    """Print and return the effective policies of the named assets."""
    if client is None:
        client = asset_v1.AssetServiceClient()

    response = client.batch_get_effective_iam_policies(
        request={
            "scope": f"projects/{project_id}",
            "names": asset_names,
        }
    )
    print(response)
    return response


def main(argv=None):
    parser = argparse.ArgumentParser(description="Get effective IAM policies")
    parser.add_argument("asset_names", help="Comma separated full asset names")
    args = parser.parse_args(argv)

    get_batch_effective_iam_policies(require_project_id(), split_csv(args.asset_names))


if __name__ == "__main__":
    sys.exit(run_main(main))
