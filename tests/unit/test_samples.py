"""
Tests for the asset inventory samples.

The AssetServiceClient is always a MagicMock; these tests pin down the
requests each sample sends and what it prints.
"""

from unittest.mock import MagicMock, patch

import pytest
from google.cloud import asset_v1

from src.core.exceptions import ConfigurationError
from src.samples import parse_content_type, project_scope, require_project_id, run_main
from src.samples import (
    analyze_iam_policy,
    analyze_iam_policy_longrunning_bigquery,
    analyze_iam_policy_longrunning_gcs,
    export_assets,
    get_batch_asset_history,
    get_batch_effective_iam_policies,
    list_assets,
    quickstart,
    search_all_iam_policies,
    search_all_resources,
)

BUCKET_ASSET = "//storage.googleapis.com/my-bucket"


@pytest.fixture
def client():
    return MagicMock()


# ==========================================
# Shared helpers
# ==========================================

class TestHelpers:
    def test_parse_content_type(self):
        assert parse_content_type("RESOURCE") == asset_v1.ContentType.RESOURCE
        assert parse_content_type("relationship") == asset_v1.ContentType.RELATIONSHIP

    def test_parse_content_type_rejects_unknown(self):
        with pytest.raises(ValueError, match="Invalid content type"):
            parse_content_type("EVERYTHING")

    def test_project_scope_defaults_to_project(self):
        assert project_scope("", "my-project") == "projects/my-project"
        assert project_scope("organizations/1", "my-project") == "organizations/1"

    def test_require_project_id_from_env(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "env-project")
        assert require_project_id() == "env-project"

    def test_require_project_id_missing(self):
        with patch("src.samples.get_project_id", return_value=None):
            with pytest.raises(ConfigurationError, match="No project id"):
                require_project_id()

    def test_run_main_maps_value_error_to_exit_2(self, capsys):
        def main(argv):
            raise ValueError("Invalid content type 'X'")

        assert run_main(main, []) == 2
        assert "Invalid content type" in capsys.readouterr().err

    def test_run_main_success(self):
        assert run_main(lambda argv: None, []) == 0

    def test_run_main_lets_api_errors_propagate(self):
        def main(argv):
            raise RuntimeError("403")

        with pytest.raises(RuntimeError):
            run_main(main, [])


# ==========================================
# Export / history
# ==========================================

class TestExportAssets:
    def test_exports_to_gcs_and_waits(self, client, capsys):
        client.export_assets.return_value.result.return_value = "export done"

        export_assets.export_assets("my-project", "gs://b/my-assets-x.txt", client=client)

        request = client.export_assets.call_args.kwargs["request"]
        assert request["parent"] == "projects/my-project"
        assert request["output_config"].gcs_destination.uri == "gs://b/my-assets-x.txt"
        assert "content_type" not in request
        client.export_assets.return_value.result.assert_called_once()
        assert "export done" in capsys.readouterr().out

    def test_relationship_content_type(self, client):
        export_assets.export_assets("my-project", "gs://b/r.txt", "RELATIONSHIP", client=client)

        request = client.export_assets.call_args.kwargs["request"]
        assert request["content_type"] == asset_v1.ContentType.RELATIONSHIP

    def test_invalid_content_type_never_calls_api(self, client):
        with pytest.raises(ValueError):
            export_assets.export_assets("my-project", "gs://b/r.txt", "BOGUS", client=client)
        client.export_assets.assert_not_called()

    def test_main_parses_optional_content_type(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "my-project")
        with patch.object(export_assets, "export_assets") as mock_export:
            export_assets.main(["gs://b/r.txt", "RELATIONSHIP"])
            mock_export.assert_called_once_with("my-project", "gs://b/r.txt", "RELATIONSHIP")

            export_assets.main(["gs://b/a.txt"])
            mock_export.assert_called_with("my-project", "gs://b/a.txt", None)


class TestAssetHistory:
    def test_quickstart_requests_resource_history(self, client, capsys):
        client.batch_get_assets_history.return_value = f"assets {{ asset {{ name: \"{BUCKET_ASSET}\" }} }}"

        quickstart.batch_get_assets_history("my-project", [BUCKET_ASSET], client=client)

        request = client.batch_get_assets_history.call_args.kwargs["request"]
        assert request["parent"] == "projects/my-project"
        assert request["content_type"] == asset_v1.ContentType.RESOURCE
        assert request["asset_names"] == [BUCKET_ASSET]
        assert request["read_time_window"].start_time is not None
        assert BUCKET_ASSET in capsys.readouterr().out

    def test_batch_history_uses_given_content_type(self, client):
        get_batch_asset_history.get_batch_asset_history(
            "my-project", [BUCKET_ASSET], "IAM_POLICY", client=client
        )
        request = client.batch_get_assets_history.call_args.kwargs["request"]
        assert request["content_type"] == asset_v1.ContentType.IAM_POLICY

    def test_batch_history_main_splits_names(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "my-project")
        with patch.object(get_batch_asset_history, "get_batch_asset_history") as mock_history:
            get_batch_asset_history.main([f"{BUCKET_ASSET},//compute.googleapis.com/x", "RESOURCE"])
        mock_history.assert_called_once_with(
            "my-project", [BUCKET_ASSET, "//compute.googleapis.com/x"], "RESOURCE"
        )


# ==========================================
# Search / list
# ==========================================

class TestSearch:
    def test_search_all_resources_prints_each_result(self, client, capsys):
        client.search_all_resources.return_value = ["resource-a", "resource-b"]

        results = search_all_resources.search_all_resources("projects/p", "name:vm", client=client)

        assert results == ["resource-a", "resource-b"]
        out = capsys.readouterr().out
        assert "resource-a" in out and "resource-b" in out
        request = client.search_all_resources.call_args.kwargs["request"]
        assert request["scope"] == "projects/p"
        assert request["query"] == "name:vm"

    def test_search_all_resources_empty_scope_means_project(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "my-project")
        with patch.object(search_all_resources, "search_all_resources") as mock_search:
            search_all_resources.main(["", "name:asset-python-vm"])
        mock_search.assert_called_once_with("projects/my-project", "name:asset-python-vm", [])

    def test_search_all_iam_policies(self, client, capsys):
        client.search_all_iam_policies.return_value = ["policy { bindings { role: \"roles/owner\" } }"]

        search_all_iam_policies.search_all_iam_policies("projects/p", "policy:roles/owner", client=client)

        assert "roles/owner" in capsys.readouterr().out
        request = client.search_all_iam_policies.call_args.kwargs["request"]
        assert request["query"] == "policy:roles/owner"

    def test_search_all_iam_policies_main_keeps_explicit_scope(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "my-project")
        with patch.object(search_all_iam_policies, "search_all_iam_policies") as mock_search:
            search_all_iam_policies.main(["folders/7", "policy:roles/owner"])
        mock_search.assert_called_once_with("folders/7", "policy:roles/owner")


class TestListAssets:
    def test_prints_asset_type_as_json(self, client, capsys):
        client.list_assets.return_value = [
            asset_v1.Asset(name=BUCKET_ASSET, asset_type="storage.googleapis.com/Bucket")
        ]

        assets = list_assets.list_assets(
            "my-project", ["storage.googleapis.com/Bucket"], "RESOURCE", client=client
        )

        assert len(assets) == 1
        out = capsys.readouterr().out
        assert '"assetType": "storage.googleapis.com/Bucket"' in out
        request = client.list_assets.call_args.kwargs["request"]
        assert request["asset_types"] == ["storage.googleapis.com/Bucket"]
        assert request["content_type"] == asset_v1.ContentType.RESOURCE

    def test_relationships_print_related_asset(self, client, capsys):
        client.list_assets.return_value = [
            asset_v1.Asset(
                name="//compute.googleapis.com/projects/p/zones/z/instances/vm",
                related_asset=asset_v1.RelatedAsset(asset="//compute.googleapis.com/projects/p/zones/z/disks/d"),
            )
        ]

        list_assets.list_assets("my-project", [], "RELATIONSHIP", client=client)

        assert "relatedAsset" in capsys.readouterr().out

    def test_main_empty_asset_types(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_CLOUD_PROJECT", "my-project")
        with patch.object(list_assets, "list_assets") as mock_list:
            list_assets.main(["", "RELATIONSHIP"])
        mock_list.assert_called_once_with("my-project", [], "RELATIONSHIP")


# ==========================================
# IAM policies and analysis
# ==========================================

class TestEffectivePolicies:
    def test_scope_and_names(self, client, capsys):
        client.batch_get_effective_iam_policies.return_value = f"policy_results {{ full_resource_name: \"{BUCKET_ASSET}\" }}"

        get_batch_effective_iam_policies.get_batch_effective_iam_policies(
            "my-project", [BUCKET_ASSET], client=client
        )

        client.batch_get_effective_iam_policies.assert_called_once_with(
            request={"scope": "projects/my-project", "names": [BUCKET_ASSET]}
        )
        assert BUCKET_ASSET in capsys.readouterr().out


class TestAnalyzeIamPolicy:
    def test_analysis_query_targets_project(self):
        query = analyze_iam_policy.build_analysis_query("my-project")
        assert query["scope"] == "projects/my-project"
        assert query["resource_selector"]["full_resource_name"] == (
            "//cloudresourcemanager.googleapis.com/projects/my-project"
        )
        assert query["options"]["expand_groups"] is True

    def test_inline_analysis(self, client, capsys):
        client.analyze_iam_policy.return_value = "//cloudresourcemanager.googleapis.com/projects/my-project"

        analyze_iam_policy.analyze_iam_policy("my-project", client=client)

        request = client.analyze_iam_policy.call_args.kwargs["request"]
        assert request["analysis_query"]["scope"] == "projects/my-project"
        assert "//cloudresourcemanager.googleapis.com/projects" in capsys.readouterr().out

    def test_longrunning_gcs(self, client):
        analyze_iam_policy_longrunning_gcs.analyze_iam_policy_longrunning_gcs(
            "my-project", "gs://b/my-analysis.json", client=client
        )

        request = client.analyze_iam_policy_longrunning.call_args.kwargs["request"]
        assert request["output_config"] == {"gcs_destination": {"uri": "gs://b/my-analysis.json"}}
        client.analyze_iam_policy_longrunning.return_value.result.assert_called_once()

    def test_longrunning_bigquery(self, client):
        analyze_iam_policy_longrunning_bigquery.analyze_iam_policy_longrunning_bigquery(
            "my-project", "asset_python_ds", "analysis_python", client=client
        )

        request = client.analyze_iam_policy_longrunning.call_args.kwargs["request"]
        assert request["output_config"]["bigquery_destination"] == {
            "dataset": "projects/my-project/datasets/asset_python_ds",
            "table_prefix": "analysis_python",
        }
        client.analyze_iam_policy_longrunning.return_value.result.assert_called_once()

    def test_bigquery_table_ids(self):
        assert analyze_iam_policy_longrunning_bigquery.analysis_table_ids("analysis_python") == [
            "analysis_python_analysis",
            "analysis_python_analysis_result",
        ]
