"""Tests for local-disk and S3 content probes."""

from __future__ import annotations

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from errors.exceptions import ContentProbeError
from services.content_probe import LocalDiskContentProbe, S3ContentProbe


class FakeS3Client:
    """Minimal stand-in for a boto3 S3 client's ``head_object``."""

    def __init__(self, keys=(), error_code: str | None = None, exc: Exception | None = None):
        self.keys = set(keys)
        self.error_code = error_code
        self.exc = exc
        self.calls: list[tuple[str, str]] = []

    def head_object(self, Bucket, Key):
        self.calls.append((Bucket, Key))
        if self.exc is not None:
            raise self.exc
        if self.error_code is not None:
            raise ClientError({"Error": {"Code": self.error_code}}, "HeadObject")
        if Key not in self.keys:
            raise ClientError({"Error": {"Code": "404", "Message": "Not Found"}}, "HeadObject")
        return {"ContentLength": 1}


class TestLocalDiskContentProbe:
    def test_existing_file(self, tmp_path):
        (tmp_path / "deed-1.pdf").write_bytes(b"%PDF-1.4")
        probe = LocalDiskContentProbe(tmp_path)
        assert probe.exists("deed-1.pdf") is True

    def test_missing_file(self, tmp_path):
        assert LocalDiskContentProbe(tmp_path).exists("nope.pdf") is False

    def test_empty_ref(self, tmp_path):
        assert LocalDiskContentProbe(tmp_path).exists("") is False

    def test_directory_is_not_content(self, tmp_path):
        (tmp_path / "sub").mkdir()
        assert LocalDiskContentProbe(tmp_path).exists("sub") is False

    def test_path_traversal_rejected(self, tmp_path):
        upload = tmp_path / "uploads"
        upload.mkdir()
        (tmp_path / "secret.pdf").write_bytes(b"x")
        probe = LocalDiskContentProbe(upload)
        assert probe.exists("../secret.pdf") is False
        assert probe.exists(str(tmp_path / "secret.pdf")) is False

    def test_public_url(self, tmp_path):
        assert LocalDiskContentProbe(tmp_path).public_url("a.pdf") == "/uploads/a.pdf"


class TestS3ContentProbe:
    def test_existing_key(self):
        client = FakeS3Client(keys={"k1.pdf"})
        probe = S3ContentProbe("bucket", client=client)
        assert probe.exists("k1.pdf") is True
        assert client.calls == [("bucket", "k1.pdf")]

    def test_missing_key(self):
        probe = S3ContentProbe("bucket", client=FakeS3Client())
        assert probe.exists("gone.pdf") is False

    def test_no_such_key_code(self):
        probe = S3ContentProbe("bucket", client=FakeS3Client(error_code="NoSuchKey"))
        assert probe.exists("gone.pdf") is False

    def test_empty_ref_skips_request(self):
        client = FakeS3Client()
        assert S3ContentProbe("bucket", client=client).exists("") is False
        assert client.calls == []

    def test_access_denied_raises(self):
        probe = S3ContentProbe("bucket", client=FakeS3Client(error_code="403"))
        with pytest.raises(ContentProbeError) as exc_info:
            probe.exists("k1.pdf")
        assert exc_info.value.content_ref == "k1.pdf"

    def test_unreachable_raises(self):
        exc = EndpointConnectionError(endpoint_url="https://s3.example.invalid")
        probe = S3ContentProbe("bucket", client=FakeS3Client(exc=exc))
        with pytest.raises(ContentProbeError):
            probe.exists("k1.pdf")

    def test_public_url(self):
        probe = S3ContentProbe("deeds", region="us-west-2", client=FakeS3Client())
        assert probe.public_url("k1.pdf") == "https://deeds.s3.us-west-2.amazonaws.com/k1.pdf"
