"""Content probes — can the scan behind a catalog entry actually be fetched?

Catalog rows can outlive their files (an upload that never finished, a
file deleted by hand), so assignment asks a probe before serving a
document.  The probe hides whether scans live on local disk or in S3.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from errors.exceptions import ContentProbeError

logger = logging.getLogger(__name__)

_MISSING_CODES = {"404", "NoSuchKey", "NotFound"}


# ── Abstract Interface ───────────────────────────────────────


class ContentProbe(ABC):
    """Abstract probe; implement for each storage backend."""

    @abstractmethod
    def exists(self, content_ref: str) -> bool:
        """Whether the content behind *content_ref* is retrievable."""
        ...

    @abstractmethod
    def public_url(self, content_ref: str) -> str:
        """URL a browser can open to view the content."""
        ...


# ── Local Disk Implementation ────────────────────────────────


class LocalDiskContentProbe(ContentProbe):
    """Scans stored as files directly inside ``upload_dir``."""

    def __init__(self, upload_dir: str | Path, url_prefix: str = "/uploads") -> None:
        self._root = Path(upload_dir)
        self._url_prefix = url_prefix.rstrip("/")

    def _resolve(self, content_ref: str) -> Path | None:
        if not content_ref or ".." in content_ref or "\\" in content_ref:
            return None
        path = self._root / content_ref
        # Only serve files that stay inside the upload dir
        try:
            path.resolve().relative_to(self._root.resolve())
        except ValueError:
            return None
        return path

    def exists(self, content_ref: str) -> bool:
        path = self._resolve(content_ref)
        return path is not None and path.is_file()

    def public_url(self, content_ref: str) -> str:
        return f"{self._url_prefix}/{content_ref}"


# ── S3 Implementation ────────────────────────────────────────


class S3ContentProbe(ContentProbe):
    """Scans stored as objects in an S3 (or S3-compatible) bucket.

    A missing key is reported as ``False``; any other storage failure
    raises :class:`ContentProbeError` because "unknown" is not "missing".
    """

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        client=None,
    ) -> None:
        self._bucket = bucket
        self._region = region
        if client is None:
            kwargs: dict = {
                "config": Config(
                    region_name=region,
                    retries={"max_attempts": 3, "mode": "standard"},
                )
            }
            if endpoint_url:
                kwargs["endpoint_url"] = endpoint_url
            client = boto3.client("s3", **kwargs)
        self._client = client

    def exists(self, content_ref: str) -> bool:
        if not content_ref:
            return False
        try:
            self._client.head_object(Bucket=self._bucket, Key=content_ref)
        except ClientError as e:
            code = str(e.response.get("Error", {}).get("Code", ""))
            if code in _MISSING_CODES:
                return False
            logger.warning("S3 head_object failed for %s: %s", content_ref, e)
            raise ContentProbeError(content_ref, str(e)) from e
        except BotoCoreError as e:
            logger.warning("S3 unreachable while probing %s: %s", content_ref, e)
            raise ContentProbeError(content_ref, str(e)) from e
        return True

    def public_url(self, content_ref: str) -> str:
        return f"https://{self._bucket}.s3.{self._region}.amazonaws.com/{content_ref}"


# ── Module-level Singleton ───────────────────────────────────

_probe: ContentProbe | None = None


def get_content_probe() -> ContentProbe:
    """Get the probe configured by settings."""
    global _probe
    if _probe is None:
        from config.settings import get_settings

        settings = get_settings()
        if settings.content_backend == "s3" and settings.s3_bucket:
            _probe = S3ContentProbe(
                bucket=settings.s3_bucket,
                region=settings.s3_region,
                endpoint_url=settings.s3_endpoint_url or None,
            )
            logger.info("Initialized S3ContentProbe (bucket=%s)", settings.s3_bucket)
        else:
            upload_dir = Path(settings.upload_path)
            upload_dir.mkdir(parents=True, exist_ok=True)
            _probe = LocalDiskContentProbe(upload_dir)
            logger.info("Initialized LocalDiskContentProbe (%s)", upload_dir)
    return _probe
