"""
Analyze IAM policy and write the results to BigQuery.

The analysis lands in two tables of the dataset:
<table_prefix>_analysis and <table_prefix>_analysis_result.

Usage:
    python -m src.samples.analyze_iam_policy_longrunning_bigquery DATASET_ID TABLE_PREFIX
"""

import argparse
import sys

from google.cloud import asset_v1

import src.constants as CONSTANTS

from . import require_project_id, run_main
from .analyze_iam_policy import build_analysis_query


def analysis_table_ids(table_prefix: str) -> list[str]:
    return [
        f"{table_prefix}{CONSTANTS.ANALYSIS_TABLE_SUFFIX}",
        f"{table_prefix}{CONSTANTS.ANALYSIS_RESULT_TABLE_SUFFIX}",
    ]


def analyze_iam_policy_longrunning_bigquery(project_id: str, dataset_id: str, table_prefix: str,
                                            client=None):
    """Start the analysis, wait for the operation and print its metadata."""
    if client is None:
        client = asset_v1.AssetServiceClient()

    operation = client.analyze_iam_policy_longrunning(
        request={
            "analysis_query": build_analysis_query(project_id),
            "output_config": {
                "bigquery_destination": {
                    "dataset": f"projects/{project_id}/datasets/{dataset_id}",
                    "table_prefix": table_prefix,
                }
            },
        }
    )
    operation.result(timeout=CONSTANTS.SAMPLE_OPERATION_TIMEOUT)
    print(operation.metadata)
    return operation


def main(argv=None):
    parser = argparse.ArgumentParser(description="Analyze IAM policy to BigQuery")
    parser.add_argument("dataset_id", help="Existing BigQuery dataset id")
    parser.add_argument("table_prefix", help="Prefix of the output tables")
    args = parser.parse_args(argv)

    analyze_iam_policy_longrunning_bigquery(require_project_id(), args.dataset_id, args.table_prefix)


if __name__ == "__main__":
    sys.exit(run_main(main))
