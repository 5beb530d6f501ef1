"""
Live E2E fixtures for the asset inventory samples.

These fixtures create REAL resources (a bucket, a BigQuery dataset and a
Compute Engine instance) and incur costs.

Run with:
    ASSET_E2E_LIVE=1 GOOGLE_CLOUD_PROJECT=my-project pytest tests/e2e -m live
"""

import os

import pytest
from google.cloud import bigquery, storage

import src.constants as CONSTANTS
from src.core.config_loader import load_suite_config
from src.logger import configure_logger
from src.verification.fixtures import FixtureManager
from src.verification.sample_runner import SampleRunner


def pytest_collection_modifyitems(config, items):
    if os.environ.get(CONSTANTS.ENV_LIVE_FLAG) == "1":
        return
    skip_live = pytest.mark.skip(reason=f"live test: set {CONSTANTS.ENV_LIVE_FLAG}=1 to run")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture(scope="session")
def suite_config():
    config = load_suite_config()
    configure_logger(config.mode)
    return config


@pytest.fixture(scope="session")
def suite_context(suite_config):
    """
    Shared fixtures for the whole live suite.

    Torn down after the last test even when tests failed.
    """
    print(f"\n[E2E] Creating fixtures in {suite_config.project_id}")
    with FixtureManager(suite_config) as context:
        print(f"[E2E] Bucket: {context.bucket_name}")
        print(f"[E2E] Dataset: {context.dataset_id}")
        print(f"[E2E] Instance: {context.instance_name}")
        yield context
        print("\n[E2E] Tearing down fixtures")


@pytest.fixture(scope="session")
def sample_runner(suite_config):
    env = dict(os.environ)
    env["GOOGLE_CLOUD_PROJECT"] = suite_config.project_id
    return SampleRunner(env=env)


@pytest.fixture(scope="session")
def storage_bucket(suite_config, suite_context):
    return storage.Client(project=suite_config.project_id).bucket(suite_context.bucket_name)


@pytest.fixture(scope="session")
def bigquery_client(suite_config):
    return bigquery.Client(project=suite_config.project_id)
