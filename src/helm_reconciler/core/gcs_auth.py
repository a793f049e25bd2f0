"""Google Cloud Storage authentication for ``gs://`` helm repositories."""

from __future__ import annotations

import logging
import os
import tempfile

logger = logging.getLogger(__name__)


def authenticate() -> tuple[str, Exception | None]:
    """Make GCS credentials available to the helm-gcs plugin.

    Returns a message and an error. A missing credential is not an error:
    the bucket may be public, and the plugin reports access problems itself.
    """
    if os.environ.get("GOOGLE_APPLICATION_CREDENTIALS"):
        return "GOOGLE_APPLICATION_CREDENTIALS is already set in the environment", None

    credentials = os.environ.get("GCLOUD_CREDENTIALS", "")
    if not credentials:
        logger.debug("No GCS credentials found, assuming a public bucket")
        return "No GCS credentials found in the environment, assuming a public bucket", None

    try:
        fd, cred_file = tempfile.mkstemp(prefix="gcloud-", suffix=".json")
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(credentials)
    except OSError as e:
        return f"Cannot create GCS credentials file: {e}", e

    os.environ["GOOGLE_APPLICATION_CREDENTIALS"] = cred_file
    return f"GCS credentials written to {cred_file}", None
