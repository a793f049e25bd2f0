"""
Unit tests for PluginProbe
"""
from helm_reconciler.core.plugin_probe import PluginProbe

PLUGIN_LIST = """NAME    VERSION DESCRIPTION
diff    3.1.3   Preview helm upgrade changes as a diff
gcs     0.3.9   Provides events to manage Google Cloud Storage charts repositories
"""


class TestPluginProbe:
    """Tests for plugin detection"""

    def test_installed_plugin(self, runner):
        runner.respond(["plugin", "list"], stdout=PLUGIN_LIST)
        assert PluginProbe(runner).exists("gcs") is True

    def test_missing_plugin(self, runner):
        runner.respond(["plugin", "list"], stdout=PLUGIN_LIST)
        assert PluginProbe(runner).exists("secrets") is False

    def test_listing_failure_means_absent(self, runner):
        runner.respond(["plugin", "list"], exit_code=1, stderr="error")
        assert PluginProbe(runner).exists("diff") is False

    def test_substring_matches(self, runner):
        """Substring matching is a known approximation"""
        runner.respond(["plugin", "list"], stdout=PLUGIN_LIST)
        assert PluginProbe(runner).exists("dif") is True
