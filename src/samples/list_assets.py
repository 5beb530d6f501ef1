"""
List assets of the current project as JSON.

Usage:
    python -m src.samples.list_assets ASSET_TYPES CONTENT_TYPE

ASSET_TYPES is comma separated and may be '' to list every type.
"""

import argparse
import sys

from google.cloud import asset_v1

from src.util import split_csv

from . import parse_content_type, require_project_id, run_main


def list_assets(project_id: str, asset_types: list[str], content_type: str, page_size: int = 0,
                client=None) -> list:
    """
    Print each asset as camelCase JSON and return them.

    Relationship listings print a "relatedAsset" block per asset.
    """
    if client is None:
        client = asset_v1.AssetServiceClient()

    response = client.list_assets(
        request={
            "parent": f"projects/{project_id}",
            "asset_types": asset_types,
            "content_type": parse_content_type(content_type),
            "page_size": page_size,
        }
    )
    assets = []
    for asset in response:
        print(asset_v1.Asset.to_json(asset))
        assets.append(asset)
    return assets


def main(argv=None):
    parser = argparse.ArgumentParser(description="List assets")
    parser.add_argument("asset_types", help="Comma separated asset types ('' = all)")
    parser.add_argument("content_type", help="e.g. RESOURCE or RELATIONSHIP")
    args = parser.parse_args(argv)

    list_assets(require_project_id(), split_csv(args.asset_types), args.content_type)


if __name__ == "__main__":
    sys.exit(run_main(main))
