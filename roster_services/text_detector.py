import logging
from typing import Optional
import boto3
import requests
from botocore.exceptions import BotoCoreError, ClientError

from .errors import TextDetectionError
from .models import TextAnnotation
from .object_store import parse_public_url

logger = logging.getLogger(__name__)


class RekognitionTextDetector:
    """Service for detecting text in stored images with Amazon Rekognition."""

    def __init__(self, region_name: str = "us-east-2", client=None,
                 http_session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None):
        self.rekognition_client = client or boto3.client("rekognition", region_name=region_name)
        self.http_session = http_session or requests.Session()
        self.timeout = timeout
        logger.info("RekognitionTextDetector initialized")

    def _image_source(self, public_url: str) -> dict:
        """
        Build the Rekognition Image argument for a public URL.

        S3 URLs are referenced in place; anything else is downloaded.
        """
        location = parse_public_url(public_url)
        if location is not None:
            return {"S3Object": {"Bucket": location.bucket, "Name": location.key}}

        try:
            response = self.http_session.get(public_url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Failed to download {public_url}: {str(e)}")
            raise TextDetectionError(f"Image not readable at {public_url}") from e
        return {"Bytes": response.content}

    def detect_text(self, public_url: str) -> list[TextAnnotation]:
        """
        Run text detection on the image behind a public URL.

        Args:
            public_url: URL of an image readable by the OCR service

        Returns:
            Empty list if nothing was detected, otherwise the aggregate
            text annotation followed by one annotation per word

        Raises:
            TextDetectionError: If the OCR service call fails
        """
        image = self._image_source(public_url)

        try:
            response = self.rekognition_client.detect_text(Image=image)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Rekognition detect_text failed for {public_url}: {str(e)}")
            raise TextDetectionError(f"Text detection failed: {str(e)}") from e

        detections = response.get("TextDetections", [])
        lines = [d["DetectedText"] for d in detections if d.get("Type") == "LINE"]
        words = [d["DetectedText"] for d in detections if d.get("Type") == "WORD"]

        if not lines and not words:
            logger.info(f"No text detected in {public_url}")
            return []

        aggregate = "\n".join(lines) if lines else " ".join(words)
        logger.info(f"Detected {len(lines)} lines, {len(words)} words in {public_url}")

        return [TextAnnotation(description=aggregate)] + [
            TextAnnotation(description=word) for word in words
        ]
