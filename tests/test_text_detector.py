"""
Unit tests for RekognitionTextDetector
"""

from unittest.mock import Mock

import boto3
import pytest
import requests
from botocore.stub import Stubber

from roster_services.errors import TextDetectionError
from roster_services.text_detector import RekognitionTextDetector


def detection(text, kind, index):
    return {"DetectedText": text, "Type": kind, "Id": index, "Confidence": 99.1}


class TestRekognitionTextDetector:
    """Tests for RekognitionTextDetector"""

    def setup_method(self):
        self.client = boto3.client(
            "rekognition",
            region_name="us-east-2",
            aws_access_key_id="testing",
            aws_secret_access_key="testing",
        )
        self.stubber = Stubber(self.client)
        self.session = Mock()
        self.detector = RekognitionTextDetector(client=self.client, http_session=self.session)

    def teardown_method(self):
        self.stubber.deactivate()

    def test_s3_url_referenced_in_place(self):
        self.stubber.add_response(
            "detect_text",
            {"TextDetections": [
                detection("EDM 2", "LINE", 0),
                detection("TOR 3", "LINE", 1),
                detection("EDM", "WORD", 2),
                detection("2", "WORD", 3),
                detection("TOR", "WORD", 4),
                detection("3", "WORD", 5),
            ]},
            {"Image": {"S3Object": {"Bucket": "scoreboards", "Name": "shot 1.png"}}},
        )
        self.stubber.activate()

        annotations = self.detector.detect_text("https://scoreboards.s3.amazonaws.com/shot%201.png")

        assert annotations[0].description == "EDM 2\nTOR 3"
        assert [a.description for a in annotations[1:]] == ["EDM", "2", "TOR", "3"]
        self.session.get.assert_not_called()

    def test_other_url_downloaded(self):
        response = Mock()
        response.content = b"\xff\xd8jpeg"
        self.session.get.return_value = response
        self.stubber.add_response(
            "detect_text",
            {"TextDetections": [detection("BOS", "LINE", 0), detection("BOS", "WORD", 1)]},
            {"Image": {"Bytes": b"\xff\xd8jpeg"}},
        )
        self.stubber.activate()

        annotations = self.detector.detect_text("https://cdn.example.com/shot.jpg")

        assert annotations[0].description == "BOS"
        self.session.get.assert_called_once_with("https://cdn.example.com/shot.jpg", timeout=None)

    def test_no_text(self):
        self.stubber.add_response("detect_text", {"TextDetections": []})
        self.stubber.activate()

        assert self.detector.detect_text("https://scoreboards.s3.amazonaws.com/blank.png") == []

    def test_service_error(self):
        self.stubber.add_client_error("detect_text", service_error_code="InvalidS3ObjectException")
        self.stubber.activate()

        with pytest.raises(TextDetectionError):
            self.detector.detect_text("https://scoreboards.s3.amazonaws.com/missing.png")

    def test_unreadable_url(self):
        self.session.get.side_effect = requests.ConnectionError("refused")

        with pytest.raises(TextDetectionError):
            self.detector.detect_text("https://cdn.example.com/shot.jpg")
