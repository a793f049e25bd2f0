"""
Unit tests for GCS authentication
"""
import os
from pathlib import Path

from helm_reconciler.core import gcs_auth


class TestAuthenticate:
    """Tests for credential discovery"""

    def test_existing_credentials(self, monkeypatch):
        monkeypatch.setenv("GOOGLE_APPLICATION_CREDENTIALS", "/etc/gcp.json")
        msg, err = gcs_auth.authenticate()
        assert err is None
        assert "already set" in msg

    def test_no_credentials_assumes_public(self, monkeypatch):
        monkeypatch.delenv("GOOGLE_APPLICATION_CREDENTIALS", raising=False)
        monkeypatch.delenv("GCLOUD_CREDENTIALS", raising=False)
        msg, err = gcs_auth.authenticate()
        assert err is None
        assert "public" in msg

    def test_writes_inline_credentials(self, monkeypatch, tmp_path):
        monkeypatch.setenv("GOOGLE_APPLICATION_CREDENTIALS", "")
        monkeypatch.setenv("GCLOUD_CREDENTIALS", '{"type": "service_account"}')
        monkeypatch.setattr(gcs_auth.tempfile, "tempdir", str(tmp_path))
        msg, err = gcs_auth.authenticate()
        assert err is None
        cred_file = Path(os.environ["GOOGLE_APPLICATION_CREDENTIALS"])
        assert cred_file.parent == tmp_path
        assert cred_file.read_text() == '{"type": "service_account"}'
