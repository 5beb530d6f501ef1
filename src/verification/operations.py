"""
Compute Engine zone operation polling.

Instance inserts and deletes return a zone operation that finishes
asynchronously. wait_for_zone_operation() blocks until the operation is
DONE, re-issuing ZoneOperationsClient.wait() (which itself blocks for up to
two minutes server-side) by operation name, project and zone.

An operation that carries error entries fails fast with
OperationFailedError instead of being polled again.
"""

import src.constants as CONSTANTS
from src.core.exceptions import OperationFailedError
from src.logger import logger
from src.util import last_path_segment


def status_name(operation) -> str:
    """Return the status of an operation as a plain string ("DONE", "RUNNING", ...)."""
    status = getattr(operation, "status", None)
    return str(getattr(status, "name", status))


def operation_errors(operation) -> list[str]:
    """Collect "code: message" strings from an operation's error block."""
    error = getattr(operation, "error", None)
    entries = getattr(error, "errors", None) or []
    return [f"{getattr(e, 'code', '')}: {getattr(e, 'message', '')}" for e in entries]


def _raise_if_failed(operation) -> None:
    errors = operation_errors(operation)
    if errors:
        logger.error(f"  ✗ Operation {operation.name} failed: {errors}")
        raise OperationFailedError(operation.name, errors)


def wait_for_zone_operation(operations_client, operation, project: str):
    """
    Block until a zone operation reaches DONE.

    Args:
        operations_client: compute_v1.ZoneOperationsClient
        operation: compute_v1.Operation returned by insert/delete
        project: Project id that owns the operation

    Returns:
        The final operation

    Raises:
        OperationFailedError: If the operation reports error entries
    """
    zone = last_path_segment(operation.zone)
    logger.info(f"  Waiting for operation {operation.name} in {zone}...")

    while status_name(operation) != CONSTANTS.OPERATION_DONE_STATUS:
        _raise_if_failed(operation)
        logger.debug(f"  Operation {operation.name} is {status_name(operation)}")
        operation = operations_client.wait(
            operation=operation.name,
            project=project,
            zone=zone,
        )

    _raise_if_failed(operation)
    logger.info(f"  ✓ Operation {operation.name} done")
    return operation
