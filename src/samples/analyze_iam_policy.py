"""
Analyze who has which access to the current project.

Usage:
    python -m src.samples.analyze_iam_policy
"""

import argparse
import sys

from google.cloud import asset_v1

import src.constants as CONSTANTS

from . import require_project_id, run_main


def build_analysis_query(project_id: str) -> dict:
    """IAM analysis query scoped to the project and selecting the project itself."""
    return {
        "scope": f"projects/{project_id}",
        "resource_selector": {
            "full_resource_name": f"{CONSTANTS.PROJECT_ASSET_PREFIX}{project_id}",
        },
        "options": {
            "expand_groups": True,
            "output_group_edges": True,
        },
    }


def analyze_iam_policy(project_id: str, client=None):
    """Run the analysis synchronously, print and return the response."""
    if client is None:
        client = asset_v1.AssetServiceClient()

    response = client.analyze_iam_policy(
        request={"analysis_query": build_analysis_query(project_id)}
    )
    print(response)
    return response


def main(argv=None):
    parser = argparse.ArgumentParser(description="Analyze IAM policy")
    parser.parse_args(argv)

    analyze_iam_policy(require_project_id())


if __name__ == "__main__":
    sys.exit(run_main(main))
