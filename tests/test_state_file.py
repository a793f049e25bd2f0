"""
Unit tests for the desired state file
"""
import pytest

from helm_reconciler.config.state_file import load_state
from helm_reconciler.core.errors import StateFileError

STATE = """
helmRepos:
  bitnami: https://charts.bitnami.com/bitnami
apps:
  web:
    chart: bitnami/nginx
    version: 15.0.0
  api:
    chart: bitnami/nginx
    version: 15.0.0
  worker:
    chart: ./charts/worker
    version: 1.10
"""


class TestLoadState:
    """Tests for loading helmRepos and apps"""

    def test_loads_repos_and_apps(self, tmp_path):
        path = tmp_path / "state.yaml"
        path.write_text(STATE)
        state = load_state(path)
        assert state.helm_repos == {"bitnami": "https://charts.bitnami.com/bitnami"}
        assert state.apps["worker"] == {"chart": "./charts/worker", "version": "1.1"}

    def test_requests_grouped_by_chart_and_version(self, tmp_path):
        path = tmp_path / "state.yaml"
        path.write_text(STATE)
        requests = load_state(path).chart_requests()
        assert len(requests) == 2
        nginx = [r for r in requests if r.chart == "bitnami/nginx"][0]
        assert nginx.app_label == "web, api"
        assert nginx.version == "15.0.0"

    def test_empty_file(self, tmp_path):
        path = tmp_path / "state.yaml"
        path.write_text("")
        state = load_state(path)
        assert state.helm_repos == {}
        assert state.chart_requests() == []

    def test_app_without_chart(self, tmp_path):
        path = tmp_path / "state.yaml"
        path.write_text("apps:\n  web:\n    version: 1.0.0\n")
        with pytest.raises(StateFileError, match="web"):
            load_state(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "state.yaml"
        path.write_text("helmRepos: [oops\n")
        with pytest.raises(StateFileError):
            load_state(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(StateFileError):
            load_state(tmp_path / "nope.yaml")
