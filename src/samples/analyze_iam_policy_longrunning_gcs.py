"""
Analyze IAM policy and write the results to Cloud Storage.

Usage:
    python -m src.samples.analyze_iam_policy_longrunning_gcs gs://my-bucket/my-analysis.json
"""

import argparse
import sys

from google.cloud import asset_v1

import src.constants as CONSTANTS

from . import require_project_id, run_main
from .analyze_iam_policy import build_analysis_query


def analyze_iam_policy_longrunning_gcs(project_id: str, dump_file_path: str, client=None):
    """Start the analysis, wait for the operation and print its metadata."""
    if client is None:
        client = asset_v1.AssetServiceClient()

    operation = client.analyze_iam_policy_longrunning(
        request={
            "analysis_query": build_analysis_query(project_id),
            "output_config": {"gcs_destination": {"uri": dump_file_path}},
        }
    )
    operation.result(timeout=CONSTANTS.SAMPLE_OPERATION_TIMEOUT)
    print(operation.metadata)
    return operation


def main(argv=None):
    parser = argparse.ArgumentParser(description="Analyze IAM policy to Cloud Storage")
    parser.add_argument("dump_file_path", help="gs:// URI for the analysis JSON")
    args = parser.parse_args(argv)

    analyze_iam_policy_longrunning_gcs(require_project_id(), args.dump_file_path)


if __name__ == "__main__":
    sys.exit(run_main(main))
