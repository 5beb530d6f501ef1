"""
Custom exceptions for the asset samples verifier.

This module defines a hierarchy of exceptions used by the fixture manager,
the sample runner and the operation helpers to provide clear, actionable
error messages on the test console.

Exception Hierarchy:
    SampleHarnessError (base)
    ├── ConfigurationError - Invalid or missing suite configuration
    ├── SampleInvocationError - Sample process exited non-zero
    ├── FixtureError - Failed to create or delete a fixture resource
    └── OperationFailedError - Long-running operation reported errors
"""

from typing import Optional, Sequence


class SampleHarnessError(Exception):
    """
    Base exception for all verifier errors.

    Attributes:
        message: Human-readable error description
        resource: Optional name of the resource involved
    """

    def __init__(self, message: str, resource: Optional[str] = None):
        self.message = message
        self.resource = resource

        if resource:
            full_message = f"{message} [resource={resource}]"
        else:
            full_message = message

        super().__init__(full_message)


class ConfigurationError(SampleHarnessError):
    """
    Raised when the suite configuration is invalid or incomplete.

    This typically occurs when:
    - config_e2e.json has invalid JSON or unknown keys
    - No project id can be resolved from config, env or ADC

    Example:
        >>> load_suite_config(Path("broken.json"))
        ConfigurationError: Invalid JSON in configuration file: ... (file: broken.json)
    """

    def __init__(self, message: str, config_file: Optional[str] = None):
        self.config_file = config_file
        if config_file:
            message = f"{message} (file: {config_file})"
        super().__init__(message)


class SampleInvocationError(SampleHarnessError):
    """Raised when a sample program exits with a non-zero status."""

    def __init__(self, command: Sequence[str], return_code: int, output: str):
        self.command = list(command)
        self.return_code = return_code
        self.output = output
        super().__init__(
            f"Sample command failed (exit {return_code}): {' '.join(self.command)}\n{output}"
        )


class FixtureError(SampleHarnessError):
    """
    Raised when a fixture resource fails to create or delete.

    Wraps cloud SDK errors with the resource type and name. Teardown
    collects every failure first and raises a single FixtureError whose
    ``failures`` lists them all.

    Attributes:
        resource_type: Type of resource (e.g., "bucket", "instance")
        resource_name: Name of the resource that failed
        original_error: The underlying SDK exception
        failures: Nested errors collected during teardown
    """

    def __init__(
        self,
        message: str,
        resource_type: Optional[str] = None,
        resource_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
        failures: Optional[list] = None,
    ):
        self.resource_type = resource_type
        self.resource_name = resource_name
        self.original_error = original_error
        self.failures = failures or []

        if original_error:
            message += f": {original_error}"
        if self.failures:
            message += "; " + "; ".join(str(f) for f in self.failures)

        resource = None
        if resource_type and resource_name:
            resource = f"{resource_type}/{resource_name}"
        super().__init__(message, resource=resource)


class OperationFailedError(SampleHarnessError):
    """Raised when a zone operation reports error entries."""

    def __init__(self, operation_name: str, errors: list):
        self.operation_name = operation_name
        self.errors = errors
        details = ", ".join(errors) if errors else "unknown error"
        super().__init__(f"Operation failed: {details}", resource=operation_name)
