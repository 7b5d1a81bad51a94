"""
Upload-to-roster pipeline.

Stores an uploaded image, reads the text in it, picks the first team
abbreviation found and reports who is on ice in that team's current game.
Stages run strictly in sequence; blocking collaborator calls are moved
off the event loop one at a time.
"""

import asyncio
import logging
from typing import Protocol

from .errors import NotFoundError
from .models import BoxscoreView, TextAnnotation
from .team_resolver import TeamResolver

logger = logging.getLogger(__name__)

NO_TEXT_MESSAGE = "No text in image"


class ObjectStore(Protocol):
    def store(self, filename: str, data: bytes) -> str: ...


class TextDetector(Protocol):
    def detect_text(self, public_url: str) -> list[TextAnnotation]: ...


class StatsClient(Protocol):
    def resolve_current_game(self, team_id: int) -> int: ...

    def fetch_boxscore(self, game_id: int) -> BoxscoreView: ...


class RosterPipeline:
    """Runs one upload through storage, OCR, team lookup and boxscore fetch."""

    def __init__(self, store: ObjectStore, detector: TextDetector,
                 resolver: TeamResolver, stats: StatsClient):
        self.store = store
        self.detector = detector
        self.resolver = resolver
        self.stats = stats

    async def run(self, filename: str, data: bytes, request_id: str = "-") -> dict:
        """
        Process one uploaded image.

        Args:
            filename: Original upload filename
            data: Raw image bytes
            request_id: Identifier used to prefix log lines

        Returns:
            Boxscore view as a JSON-ready dict, or {} when no team is found

        Raises:
            NotFoundError: If the image contains no text
            UpstreamError: If storage, OCR or the stats API fails
        """
        public_url = await asyncio.to_thread(self.store.store, filename, data)
        logger.info(f"[{request_id}] Stored upload at {public_url}")

        annotations = await asyncio.to_thread(self.detector.detect_text, public_url)
        if not annotations:
            logger.info(f"[{request_id}] No text detected")
            raise NotFoundError(NO_TEXT_MESSAGE)

        text = annotations[0].description
        team_ids = self.resolver.resolve_teams(text)
        if not team_ids:
            logger.info(f"[{request_id}] No known team in detected text")
            return {}

        if len(team_ids) > 1:
            logger.info(f"[{request_id}] Multiple teams matched {team_ids}, using {team_ids[0]}")
        team_id = team_ids[0]

        game_id = await asyncio.to_thread(self.stats.resolve_current_game, team_id)
        logger.info(f"[{request_id}] Team {team_id} -> game {game_id}")

        boxscore = await asyncio.to_thread(self.stats.fetch_boxscore, game_id)
        logger.info(
            f"[{request_id}] Boxscore ready: {boxscore.home.name} "
            f"({len(boxscore.home.on_ice)} on ice) vs {boxscore.away.name} "
            f"({len(boxscore.away.on_ice)} on ice)"
        )
        return boxscore.to_response()
