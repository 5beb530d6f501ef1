"""
Cloud Asset Inventory sample programs.

Every module here is runnable on its own:

    python -m src.samples.export_assets gs://my-bucket/my-assets.txt RELATIONSHIP

and exposes the function behind it for in-process use.
"""

import sys

from google.cloud import asset_v1

import src.constants as CONSTANTS
from src.core.exceptions import ConfigurationError
from src.util import get_project_id


def parse_content_type(name: str) -> asset_v1.ContentType:
    """
    Map a content type name ("RESOURCE", "RELATIONSHIP", ...) to the enum.

    Raises:
        ValueError: If the name is not a known content type
    """
    normalized = (name or "").strip().upper()
    if normalized not in CONSTANTS.CONTENT_TYPES:
        raise ValueError(
            f"Invalid content type '{name}'. Expected one of {CONSTANTS.CONTENT_TYPES}"
        )
    return asset_v1.ContentType[normalized]


def require_project_id() -> str:
    """
    Resolve the project the samples run against.

    Raises:
        ConfigurationError: If neither GOOGLE_CLOUD_PROJECT nor ADC provide one
    """
    project_id = get_project_id()
    if not project_id:
        raise ConfigurationError(
            "No project id found. Set GOOGLE_CLOUD_PROJECT or configure Application Default Credentials."
        )
    return project_id


def project_scope(scope: str, project_id: str) -> str:
    """An empty scope argument means the current project."""
    return scope or f"projects/{project_id}"


def run_main(main, argv=None) -> int:
    """
    Entry point wrapper shared by the sample modules.

    Configuration and argument errors are reported on stderr with exit
    status 2; API errors propagate so the traceback reaches the caller.
    """
    try:
        main(argv)
    except (ConfigurationError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0
