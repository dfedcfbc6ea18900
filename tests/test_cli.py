"""Test the command line interface."""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from conftest import FakeProvider, make_item
from kubefind import __version__
from kubefind.cli.main import app
from kubefind.errors import ClusterConnectionError
from kubefind.model.kubernetes import ResourceKind

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_log_handlers():
    """Keep the CLI from installing stream handlers during tests."""
    with patch("kubefind.cli.main.configure_logging") as mock_configure:
        yield mock_configure


@pytest.fixture
def provider():
    return FakeProvider(
        {
            ResourceKind.PODS: [make_item("web", "prod", spec={"image": "nginx:1.21"})],
            ResourceKind.DEPLOYMENTS: [make_item("api", "prod", spec={"image": "nginx:1.25"})],
        }
    )


@pytest.fixture
def kubectl(provider):
    """Replace the kubectl client with the fake provider."""
    with patch("kubefind.core.application.K8sClient", return_value=provider) as mock_client:
        yield mock_client


class TestFindCommand:
    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_find(self, kubectl):
        result = runner.invoke(app, ["--kubeconfig", "/tmp/config"])

        assert result.exit_code == 1
        assert "what-to-search is required" in result.output
        kubectl.assert_not_called()

    def test_kubeconfig_from_environment(self, kubectl):
        result = runner.invoke(
            app, ["--find", "nginx"], env={"KUBECONFIG": "/tmp/from-env"}
        )

        assert result.exit_code == 0
        assert kubectl.call_args.kwargs["kubeconfig"] == "/tmp/from-env"

    def test_missing_kubeconfig(self, kubectl):
        result = runner.invoke(app, ["--find", "nginx"], env={"KUBECONFIG": ""})

        assert result.exit_code == 1
        assert "kubeconfig is required" in result.output

    def test_invalid_pattern(self, kubectl):
        result = runner.invoke(app, ["--kubeconfig", "/tmp/config", "--find", "[/a"])

        assert result.exit_code == 1
        assert "error in re.compile" in result.output

    def test_connection_error(self):
        with patch(
            "kubefind.core.application.K8sClient",
            side_effect=ClusterConnectionError("kubectl command not found"),
        ):
            result = runner.invoke(app, ["--kubeconfig", "/tmp/config", "--find", "nginx"])

        assert result.exit_code == 1
        assert "kubectl command not found" in result.output

    def test_options_reach_client(self, kubectl, provider):
        result = runner.invoke(
            app,
            [
                "--kubeconfig",
                "/tmp/config",
                "--find",
                "nginx",
                "--where",
                "deployments",
                "-n",
                "prod",
                "-c",
                "staging",
            ],
        )

        assert result.exit_code == 0
        kubectl.assert_called_once_with(
            kubeconfig="/tmp/config", context="staging", namespace="prod"
        )
        assert provider.calls == [(ResourceKind.DEPLOYMENTS, "prod")]

    def test_json_output(self, kubectl):
        result = runner.invoke(
            app,
            [
                "--kubeconfig",
                "/tmp/config",
                "--find",
                r"nginx:[0-9.]+",
                "--except",
                "/api$",
                "--radius",
                "0",
                "--format",
                "json",
            ],
        )

        assert result.exit_code == 0
        matches = json.loads(result.stdout)
        assert [(m["kind"], m["name"], m["snippet"]) for m in matches] == [
            ("Pods", "web", "nginx:1.21")
        ]

    def test_negative_radius_rejected(self, kubectl):
        result = runner.invoke(
            app, ["--kubeconfig", "/tmp/config", "--find", "nginx", "--radius", "-1"]
        )

        assert result.exit_code != 0
        kubectl.assert_not_called()

    def test_verbose_enables_debug(self, kubectl, no_log_handlers):
        runner.invoke(app, ["--kubeconfig", "/tmp/config", "--find", "nginx", "-v"])

        no_log_handlers.assert_called_once_with(True)
