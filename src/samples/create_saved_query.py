"""
Create a saved IAM policy analysis query.

Usage:
    python -m src.samples.create_saved_query QUERY_ID DESCRIPTION
"""

import argparse
import sys

from google.cloud import asset_v1

from . import require_project_id, run_main


def build_saved_query(project_id: str, description: str) -> dict:
    """Saved query asking who can act as a service account in the project."""
    return {
        "description": description,
        "content": {
            "iam_policy_analysis_query": {
                "scope": f"projects/{project_id}",
                "access_selector": {"permissions": ["iam.serviceAccount.actAs"]},
            }
        },
    }


def create_saved_query(project_id: str, query_id: str, description: str, client=None):
    """
    Create the saved query.

    Prints the full resource name first
    (projects/<number>/savedQueries/<query_id>), then the query itself.
    """
    if client is None:
        client = asset_v1.AssetServiceClient()

    response = client.create_saved_query(
        request={
            "parent": f"projects/{project_id}",
            "saved_query": build_saved_query(project_id, description),
            "saved_query_id": query_id,
        }
    )
    print(response.name)
    print(response)
    return response


def main(argv=None):
    parser = argparse.ArgumentParser(description="Create a saved query")
    parser.add_argument("query_id", help="Id of the new saved query")
    parser.add_argument("description", help="Description of the saved query")
    args = parser.parse_args(argv)

    create_saved_query(require_project_id(), args.query_id, args.description)


if __name__ == "__main__":
    sys.exit(run_main(main))
