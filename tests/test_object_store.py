"""
Unit tests for S3ObjectStore
"""

import boto3
import pytest
from botocore.stub import Stubber

from roster_services.errors import StorageError
from roster_services.object_store import S3ObjectStore, parse_public_url, public_url_for


def make_client(service):
    return boto3.client(
        service,
        region_name="us-east-2",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


class TestS3ObjectStore:
    """Tests for S3ObjectStore"""

    def setup_method(self):
        self.client = make_client("s3")
        self.stubber = Stubber(self.client)
        self.store = S3ObjectStore("scoreboards", client=self.client)

    def teardown_method(self):
        self.stubber.deactivate()

    def test_store_uses_filename_as_key(self):
        self.stubber.add_response(
            "put_object",
            {"ETag": '"abc"'},
            {"Bucket": "scoreboards", "Key": "game night.png", "Body": b"\x89PNG"},
        )
        self.stubber.activate()

        url = self.store.store("game night.png", b"\x89PNG")

        assert url == "https://scoreboards.s3.amazonaws.com/game%20night.png"
        self.stubber.assert_no_pending_responses()

    def test_store_overwrites_same_name(self):
        for body in (b"first", b"second"):
            self.stubber.add_response(
                "put_object",
                {"ETag": '"abc"'},
                {"Bucket": "scoreboards", "Key": "shot.jpg", "Body": body},
            )
        self.stubber.activate()

        assert self.store.store("shot.jpg", b"first") == self.store.store("shot.jpg", b"second")
        self.stubber.assert_no_pending_responses()

    def test_store_failure(self):
        self.stubber.add_client_error("put_object", service_error_code="AccessDenied", http_status_code=403)
        self.stubber.activate()

        with pytest.raises(StorageError):
            self.store.store("shot.jpg", b"data")

    def test_no_bucket_configured(self):
        store = S3ObjectStore("", client=self.client)

        with pytest.raises(StorageError):
            store.store("shot.jpg", b"data")


class TestPublicUrls:
    """Tests for public URL building and parsing"""

    def test_round_trip_with_special_characters(self):
        url = public_url_for("scoreboards", "folder/TOR vs EDM #1.png")
        location = parse_public_url(url)

        assert location.bucket == "scoreboards"
        assert location.key == "folder/TOR vs EDM #1.png"
        assert location.public_url == url

    def test_non_s3_url(self):
        assert parse_public_url("https://storage.googleapis.com/bucket/shot.png") is None

    def test_missing_key(self):
        assert parse_public_url("https://scoreboards.s3.amazonaws.com/") is None
