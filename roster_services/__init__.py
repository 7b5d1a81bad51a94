from .errors import (
    RosterLookupError, ValidationError, NotFoundError,
    UpstreamError, StorageError, TextDetectionError, StatsApiError,
)
from .object_store import S3ObjectStore
from .text_detector import RekognitionTextDetector
from .team_resolver import TeamResolver, TEAM_IDS
from .stats_client import NhlStatsClient
from .boxscore import format_boxscore
from .pipeline import RosterPipeline

__all__ = [
    "RosterLookupError", "ValidationError", "NotFoundError",
    "UpstreamError", "StorageError", "TextDetectionError", "StatsApiError",
    "S3ObjectStore",
    "RekognitionTextDetector",
    "TeamResolver", "TEAM_IDS",
    "NhlStatsClient",
    "format_boxscore",
    "RosterPipeline",
]
