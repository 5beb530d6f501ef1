"""
Utility Functions - Common Operations.

Helpers shared by the samples and the verifier: project id resolution and
resource path parsing.
"""

import os
from typing import Optional

import google.auth
from google.auth.exceptions import DefaultCredentialsError


def get_project_id() -> Optional[str]:
    """
    Resolve the active GCP project id.

    GOOGLE_CLOUD_PROJECT wins; otherwise Application Default Credentials are
    asked for their project.

    Returns:
        The project id, or None if neither source provides one
    """
    project_id = os.environ.get("GOOGLE_CLOUD_PROJECT")
    if project_id:
        return project_id

    try:
        _, project_id = google.auth.default()
    except DefaultCredentialsError:
        return None
    return project_id


def last_path_segment(resource_path: str) -> str:
    """Return the trailing segment of a URL or resource path ("zones/us-a" -> "us-a")."""
    return resource_path.rstrip("/").split("/")[-1]


def split_csv(value: str) -> list[str]:
    """Split a comma separated CLI argument, dropping empty entries."""
    return [part.strip() for part in value.split(",") if part.strip()]
