# ==========================================
# 1. Configuration Filenames
# ==========================================
CONFIG_E2E_FILE = "config_e2e.json"

# Keys accepted in config_e2e.json
CONFIG_E2E_KEYS = [
    "project_id",
    "zone",
    "machine_type",
    "source_image",
    "network",
    "dataset_location",
    "resource_prefix",
    "mode",
]

# Environment overrides (env var -> config key)
ENV_OVERRIDES = {
    "GOOGLE_CLOUD_PROJECT": "project_id",
    "ASSET_E2E_ZONE": "zone",
    "ASSET_E2E_LOCATION": "dataset_location",
    "ASSET_E2E_MODE": "mode",
}

# Set to "1" to run the live suite under tests/e2e
ENV_LIVE_FLAG = "ASSET_E2E_LIVE"

# ==========================================
# 2. Fixture Defaults
# ==========================================
DEFAULT_ZONE = "us-central1-a"
DEFAULT_MACHINE_TYPE = "n1-standard-1"
DEFAULT_SOURCE_IMAGE = "projects/ubuntu-os-cloud/global/images/family/ubuntu-2204-lts"
DEFAULT_NETWORK = "global/networks/default"
DEFAULT_DATASET_LOCATION = "US"
DEFAULT_RESOURCE_PREFIX = "asset-python"
DEFAULT_MODE = "INFO"

INSTANCE_DISK_SIZE_GB = 10

SAVED_QUERY_ID = "new-query-id"

# Zone operation status that ends polling
OPERATION_DONE_STATUS = "DONE"

# ==========================================
# 3. Poll Budgets (seconds, attempts)
# ==========================================
# Exports and BigQuery tables land slowly
FILE_POLL_INITIAL_WAIT = 4.0
# Asset history and IAM analysis to GCS
HISTORY_POLL_INITIAL_WAIT = 1.0
POLL_MAX_ATTEMPTS = 3

# Seconds to wait on Asset API long-running operations inside samples
SAMPLE_OPERATION_TIMEOUT = 600

# ==========================================
# 4. Asset Inventory
# ==========================================
CONTENT_TYPES = [
    "RESOURCE",
    "IAM_POLICY",
    "ORG_POLICY",
    "ACCESS_POLICY",
    "OS_INVENTORY",
    "RELATIONSHIP",
]

STORAGE_ASSET_PREFIX = "//storage.googleapis.com/"
PROJECT_ASSET_PREFIX = "//cloudresourcemanager.googleapis.com/projects/"

# BigQuery tables written by analyze_iam_policy_longrunning_bigquery
ANALYSIS_TABLE_SUFFIX = "_analysis"
ANALYSIS_RESULT_TABLE_SUFFIX = "_analysis_result"

# Sample name -> module under src.samples
SAMPLE_MODULES = {
    "quickstart": "src.samples.quickstart",
    "export_assets": "src.samples.export_assets",
    "get_batch_asset_history": "src.samples.get_batch_asset_history",
    "search_all_resources": "src.samples.search_all_resources",
    "search_all_iam_policies": "src.samples.search_all_iam_policies",
    "list_assets": "src.samples.list_assets",
    "get_batch_effective_iam_policies": "src.samples.get_batch_effective_iam_policies",
    "analyze_iam_policy": "src.samples.analyze_iam_policy",
    "analyze_iam_policy_longrunning_gcs": "src.samples.analyze_iam_policy_longrunning_gcs",
    "analyze_iam_policy_longrunning_bigquery": "src.samples.analyze_iam_policy_longrunning_bigquery",
    "create_saved_query": "src.samples.create_saved_query",
    "list_saved_queries": "src.samples.list_saved_queries",
    "get_saved_query": "src.samples.get_saved_query",
    "update_saved_query": "src.samples.update_saved_query",
    "delete_saved_query": "src.samples.delete_saved_query",
}

# ==========================================
# 5. Logging
# ==========================================
LOGGER_NAME = "asset_samples"
