"""
Suite configuration and context classes.

Instead of module-level globals for the bucket, dataset, instance and
project ids, the live suite builds one SuiteContext per test-group run and
hands it to every test.

Design Pattern: Dependency Injection
    - Settings are loaded into SuiteConfig before anything is created
    - FixtureManager.setup() turns a SuiteConfig into a SuiteContext
    - Tests receive the context explicitly and treat it as read-only
"""

import uuid
from dataclasses import dataclass, field

import src.constants as CONSTANTS


@dataclass(frozen=True)
class SuiteConfig:
    """
    Settings for one verifier run.

    Attributes:
        project_id: GCP project that owns every fixture
        zone: Compute Engine zone for the VM instance
        machine_type: Short machine type name (e.g., "n1-standard-1")
        source_image: Boot disk image path
        network: Network the instance attaches to
        dataset_location: BigQuery dataset location
        resource_prefix: Prefix for generated bucket/dataset/instance names
        mode: "DEBUG" or "INFO"
    """

    project_id: str
    zone: str = CONSTANTS.DEFAULT_ZONE
    machine_type: str = CONSTANTS.DEFAULT_MACHINE_TYPE
    source_image: str = CONSTANTS.DEFAULT_SOURCE_IMAGE
    network: str = CONSTANTS.DEFAULT_NETWORK
    dataset_location: str = CONSTANTS.DEFAULT_DATASET_LOCATION
    resource_prefix: str = CONSTANTS.DEFAULT_RESOURCE_PREFIX
    mode: str = CONSTANTS.DEFAULT_MODE

    @property
    def debug(self) -> bool:
        return self.mode.upper() == "DEBUG"

    @property
    def machine_type_path(self) -> str:
        return f"zones/{self.zone}/machineTypes/{self.machine_type}"


def unique_suffix() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class SuiteContext:
    """
    Identifiers of the fixtures shared by one test group.

    Tests reference these names; they never mutate the context, only the
    cloud resources the names point at.

    Attributes:
        project_id: GCP project id (e.g., "my-project")
        project_numeric_name: Resource Manager name (e.g., "projects/1234")
        bucket_name: Fixture bucket
        dataset_id: Fixture BigQuery dataset (underscores only)
        instance_name: Fixture VM instance
        zone: Zone of the VM instance
        file_suffix: Unique suffix for objects written into the bucket
        query_id: Saved query id used by the saved-query samples
    """

    project_id: str
    project_numeric_name: str
    bucket_name: str
    dataset_id: str
    instance_name: str
    zone: str
    file_suffix: str = field(default_factory=unique_suffix)
    query_id: str = CONSTANTS.SAVED_QUERY_ID

    @classmethod
    def generate(cls, config: SuiteConfig, project_numeric_name: str) -> "SuiteContext":
        """
        Build a context with freshly randomized fixture names.

        Args:
            config: Loaded suite configuration
            project_numeric_name: "projects/<number>" from Resource Manager

        Returns:
            SuiteContext whose names will not collide with concurrent runs
        """
        prefix = config.resource_prefix
        return cls(
            project_id=config.project_id,
            project_numeric_name=project_numeric_name,
            bucket_name=f"{prefix}-{unique_suffix()}",
            dataset_id=f"{prefix}_{unique_suffix()}".replace("-", "_"),
            instance_name=f"{prefix}-{unique_suffix()}",
            zone=config.zone,
        )

    @property
    def saved_query_full_name(self) -> str:
        return f"{self.project_numeric_name}/savedQueries/{self.query_id}"

    @property
    def bucket_asset_name(self) -> str:
        return f"{CONSTANTS.STORAGE_ASSET_PREFIX}{self.bucket_name}"

    def dump_object_name(self, content_type: str = "RESOURCE") -> str:
        """
        Object name for an export dump of the given content type.

        Resource exports and relationship exports run in the same suite, so
        they must never share an object name.
        """
        if content_type == "RELATIONSHIP":
            return f"my-relationships-{self.file_suffix}.txt"
        if content_type == "RESOURCE":
            return f"my-assets-{self.file_suffix}.txt"
        return f"my-{content_type.lower().replace('_', '-')}-{self.file_suffix}.txt"

    def gcs_uri(self, object_name: str) -> str:
        return f"gs://{self.bucket_name}/{object_name}"
