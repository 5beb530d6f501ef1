"""
Export a snapshot of the project's assets to Cloud Storage.

Usage:
    python -m src.samples.export_assets gs://my-bucket/my-assets.txt [CONTENT_TYPE]
"""

import argparse
import sys
from typing import Optional

from google.cloud import asset_v1

import src.constants as CONSTANTS

from . import parse_content_type, require_project_id, run_main


def export_assets(project_id: str, dump_file_path: str, content_type: Optional[str] = None, client=None):
    """
    Export assets to a gs:// URI and wait for the export to finish.

    Args:
        project_id: Project whose assets are exported
        dump_file_path: Destination object, e.g. gs://bucket/my-assets.txt
        content_type: Optional content type name; the API default is used when None
        client: AssetServiceClient (created when omitted)
    """
    if client is None:
        client = asset_v1.AssetServiceClient()

    output_config = asset_v1.OutputConfig()
    output_config.gcs_destination.uri = dump_file_path

    request = {
        "parent": f"projects/{project_id}",
        "output_config": output_config,
    }
    if content_type:
        request["content_type"] = parse_content_type(content_type)

    operation = client.export_assets(request=request)
    response = operation.result(timeout=CONSTANTS.SAMPLE_OPERATION_TIMEOUT)
    print(response)
    return response


def main(argv=None):
    parser = argparse.ArgumentParser(description="Export assets to Cloud Storage")
    parser.add_argument("dump_file_path", help="gs:// URI of the dump file")
    parser.add_argument("content_type", nargs="?", default=None, help="e.g. RESOURCE or RELATIONSHIP")
    args = parser.parse_args(argv)

    export_assets(require_project_id(), args.dump_file_path, args.content_type)


if __name__ == "__main__":
    sys.exit(run_main(main))
