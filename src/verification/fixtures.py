"""
Fixture manager for the live asset samples suite.

Creates the shared cloud resources a test group needs (Cloud Storage bucket,
BigQuery dataset, Compute Engine instance) and deletes them afterwards.

IMPORTANT: setup() creates REAL, billable resources.

Lifecycle:
    setup()    - resolve numeric project name, create bucket, create and
                 confirm dataset, insert instance and wait for DONE
    teardown() - delete everything that was created, attempting every
                 deletion even when an earlier one failed

Usage:
    config = load_suite_config()
    with FixtureManager(config) as context:
        runner.run_sample("quickstart", context.bucket_asset_name)
"""

from dataclasses import dataclass
from typing import Any, Optional

from google.api_core.exceptions import GoogleAPICallError, NotFound
from google.cloud import bigquery, compute_v1, resourcemanager_v3, storage

import src.constants as CONSTANTS
from src.core.context import SuiteConfig, SuiteContext
from src.core.exceptions import FixtureError, SampleHarnessError
from src.logger import logger

from .operations import wait_for_zone_operation


@dataclass
class FixtureClients:
    """SDK clients the fixture manager talks to."""

    storage: Any
    bigquery: Any
    instances: Any
    zone_operations: Any
    projects: Any

    @classmethod
    def from_config(cls, config: SuiteConfig) -> "FixtureClients":
        """Build real google-cloud clients bound to the configured project."""
        return cls(
            storage=storage.Client(project=config.project_id),
            bigquery=bigquery.Client(project=config.project_id),
            instances=compute_v1.InstancesClient(),
            zone_operations=compute_v1.ZoneOperationsClient(),
            projects=resourcemanager_v3.ProjectsClient(),
        )


def build_instance_resource(config: SuiteConfig, instance_name: str) -> compute_v1.Instance:
    """Describe a small VM with an auto-deleted persistent boot disk."""
    boot_disk = compute_v1.AttachedDisk(
        initialize_params=compute_v1.AttachedDiskInitializeParams(
            disk_size_gb=CONSTANTS.INSTANCE_DISK_SIZE_GB,
            source_image=config.source_image,
        ),
        auto_delete=True,
        boot=True,
        type_="PERSISTENT",
    )
    return compute_v1.Instance(
        name=instance_name,
        disks=[boot_disk],
        machine_type=config.machine_type_path,
        network_interfaces=[compute_v1.NetworkInterface(network=config.network)],
    )


class FixtureManager:
    """
    Creates and destroys the resources shared by one test group.

    Attributes:
        config: Suite configuration
        clients: SDK clients (real ones are built from config when omitted)
        context: SuiteContext after setup(), None before
        created: Fixture kinds ("bucket", "dataset", "instance") created so far
    """

    def __init__(self, config: SuiteConfig, clients: Optional[FixtureClients] = None):
        self.config = config
        self.clients = clients if clients is not None else FixtureClients.from_config(config)
        self.context: Optional[SuiteContext] = None
        self.created: list[str] = []

    def __enter__(self) -> SuiteContext:
        try:
            return self.setup()
        except Exception:
            try:
                self.teardown()
            except SampleHarnessError as cleanup_error:
                logger.error(f"✗ Cleanup after failed setup also failed: {cleanup_error}")
            raise

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.teardown()
        return False

    # ==========================================
    # Setup
    # ==========================================

    def setup(self) -> SuiteContext:
        """
        Create every fixture and block until each is usable.

        Returns:
            SuiteContext naming the created resources

        Raises:
            FixtureError: If any resource fails to create
            OperationFailedError: If the instance insert operation fails
        """
        logger.info(f"Setting up fixtures in project {self.config.project_id}...")

        project_numeric_name = self._resolve_project_numeric_name()
        self.context = SuiteContext.generate(self.config, project_numeric_name)

        self._create_bucket()
        self._create_dataset()
        self._create_instance()

        logger.info("✓ Fixtures ready")
        return self.context

    def _resolve_project_numeric_name(self) -> str:
        name = f"projects/{self.config.project_id}"
        try:
            project = self.clients.projects.get_project(name=name)
        except GoogleAPICallError as e:
            raise FixtureError(
                "Failed to resolve project number",
                resource_type="project", resource_name=self.config.project_id, original_error=e
            ) from e
        logger.info(f"  Project {self.config.project_id} is {project.name}")
        return project.name

    def _create_bucket(self) -> None:
        bucket_name = self.context.bucket_name
        logger.info(f"  Creating bucket {bucket_name}...")
        try:
            self.clients.storage.create_bucket(bucket_name)
        except GoogleAPICallError as e:
            raise FixtureError(
                "Failed to create fixture",
                resource_type="bucket", resource_name=bucket_name, original_error=e
            ) from e
        self.created.append("bucket")
        logger.info(f"  ✓ Bucket {bucket_name} created")

    def _dataset_ref(self) -> str:
        return f"{self.config.project_id}.{self.context.dataset_id}"

    def _create_dataset(self) -> None:
        dataset_id = self.context.dataset_id
        logger.info(f"  Creating dataset {dataset_id} in {self.config.dataset_location}...")
        dataset = bigquery.Dataset(self._dataset_ref())
        dataset.location = self.config.dataset_location
        try:
            self.clients.bigquery.create_dataset(dataset)
        except GoogleAPICallError as e:
            raise FixtureError(
                "Failed to create fixture",
                resource_type="dataset", resource_name=dataset_id, original_error=e
            ) from e
        self.created.append("dataset")

        try:
            self.clients.bigquery.get_dataset(self._dataset_ref())
        except NotFound as e:
            raise FixtureError(
                "Dataset not found after creation",
                resource_type="dataset", resource_name=dataset_id, original_error=e
            ) from e
        logger.info(f"  ✓ Dataset {dataset_id} created")

    def _create_instance(self) -> None:
        instance_name = self.context.instance_name
        logger.info(f"  Creating instance {instance_name} in {self.config.zone}...")
        try:
            operation = self.clients.instances.insert_unary(
                project=self.config.project_id,
                zone=self.config.zone,
                instance_resource=build_instance_resource(self.config, instance_name),
            )
        except GoogleAPICallError as e:
            raise FixtureError(
                "Failed to create fixture",
                resource_type="instance", resource_name=instance_name, original_error=e
            ) from e
        self.created.append("instance")

        wait_for_zone_operation(self.clients.zone_operations, operation, self.config.project_id)
        logger.info(f"  ✓ Instance {instance_name} running")

    # ==========================================
    # Teardown
    # ==========================================

    def teardown(self) -> None:
        """
        Delete every created fixture.

        All deletions are attempted. A failing dataset delete is only logged;
        bucket and instance failures are collected and raised together once
        everything has been tried.

        Raises:
            FixtureError: If the bucket or instance could not be deleted
        """
        if not self.created:
            return

        logger.info("Tearing down fixtures...")
        failures = []

        if "bucket" in self.created:
            try:
                self._delete_bucket()
            except Exception as e:
                logger.error(f"  ✗ Bucket delete failed: {e}")
                failures.append(FixtureError(
                    "Failed to delete fixture",
                    resource_type="bucket", resource_name=self.context.bucket_name, original_error=e
                ))

        if "dataset" in self.created:
            try:
                self._delete_dataset()
            except Exception as e:
                logger.warning(f"  ⚠ Dataset delete failed (ignored): {e}")

        if "instance" in self.created:
            try:
                self._delete_instance()
            except Exception as e:
                logger.error(f"  ✗ Instance delete failed: {e}")
                failures.append(FixtureError(
                    "Failed to delete fixture",
                    resource_type="instance", resource_name=self.context.instance_name, original_error=e
                ))

        self.created = []

        if failures:
            raise FixtureError("Teardown incomplete", failures=failures)
        logger.info("✓ Fixtures deleted")

    def _delete_bucket(self) -> None:
        bucket_name = self.context.bucket_name
        logger.info(f"  Deleting bucket {bucket_name}...")
        self.clients.storage.bucket(bucket_name).delete(force=True)
        logger.info(f"  ✓ Bucket {bucket_name} deleted")

    def _delete_dataset(self) -> None:
        dataset_id = self.context.dataset_id
        logger.info(f"  Deleting dataset {dataset_id}...")
        self.clients.bigquery.delete_dataset(
            self._dataset_ref(), delete_contents=True, not_found_ok=True
        )
        logger.info(f"  ✓ Dataset {dataset_id} deleted")

    def _delete_instance(self) -> None:
        instance_name = self.context.instance_name
        logger.info(f"  Deleting instance {instance_name}...")
        operation = self.clients.instances.delete_unary(
            project=self.config.project_id,
            zone=self.config.zone,
            instance=instance_name,
        )
        wait_for_zone_operation(self.clients.zone_operations, operation, self.config.project_id)
        logger.info(f"  ✓ Instance {instance_name} deleted")
