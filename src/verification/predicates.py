"""
Visibility checks used with the poll loop.

Each builder returns a zero-argument callable suitable for
poll_until_visible().
"""

from typing import Callable, Iterable

from google.api_core.exceptions import NotFound


def blob_exists(bucket, object_name: str) -> Callable[[], bool]:
    """Check that an object exists in a google.cloud.storage Bucket."""
    def check() -> bool:
        return bucket.blob(object_name).exists()
    return check


def _table_found(bigquery_client, dataset_id: str, table_id: str) -> bool:
    try:
        bigquery_client.get_table(f"{bigquery_client.project}.{dataset_id}.{table_id}")
    except NotFound:
        return False
    return True


def table_exists(bigquery_client, dataset_id: str, table_id: str) -> Callable[[], bool]:
    """Check that a table exists in a BigQuery dataset."""
    def check() -> bool:
        return _table_found(bigquery_client, dataset_id, table_id)
    return check


def tables_exist(bigquery_client, dataset_id: str, table_ids: Iterable[str]) -> Callable[[], bool]:
    """Check that every listed table exists in a BigQuery dataset."""
    table_ids = list(table_ids)

    def check() -> bool:
        return all(_table_found(bigquery_client, dataset_id, t) for t in table_ids)
    return check


def sample_output_contains(runner, sample: str, args: Iterable[str], needle: str) -> Callable[[], bool]:
    """Re-run a sample on every check and look for needle in its stdout."""
    args = list(args)

    def check() -> bool:
        return needle in runner.run_sample(sample, *args)
    return check
