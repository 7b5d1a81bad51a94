import logging
from typing import Optional
import requests

from .boxscore import format_boxscore
from .errors import StatsApiError
from .models import BoxscoreView, GameReference

logger = logging.getLogger(__name__)


class NhlStatsClient:
    """Client for the public NHL stats REST API."""

    def __init__(self, base_url: str = "https://statsapi.web.nhl.com/api/v1",
                 session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None):
        """
        Initialize the client.

        Args:
            base_url: API root, without trailing slash
            session: Optional requests session (a new one is created otherwise)
            timeout: Per-request timeout in seconds, None waits indefinitely
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout
        logger.info(f"NhlStatsClient initialized with base URL: {self.base_url}")

    def _get_json(self, path: str, params=None) -> dict:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"GET {url} failed: {str(e)}")
            raise StatsApiError(f"Request to {path} failed") from e

        if response.status_code != 200:
            logger.error(f"GET {url} returned {response.status_code}: {response.text}")
            raise StatsApiError(f"{path} returned HTTP {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"GET {url} returned invalid JSON ({str(e)}): {response.text}")
            raise StatsApiError(f"{path} returned invalid JSON") from e

    def get_current_game(self, team_id: int) -> GameReference:
        """
        Look up the game to report for a team.

        The next scheduled game is used only while it is live; otherwise
        the previous game is reported, even if a next game is scheduled.

        Raises:
            StatsApiError: On HTTP failure, invalid JSON or missing fields
        """
        payload = self._get_json(
            f"/teams/{team_id}",
            params=[("expand", "team.schedule.next"), ("expand", "team.schedule.previous")],
        )

        try:
            team = payload["teams"][0]
            next_schedule = team.get("nextGameSchedule")
            if next_schedule:
                next_game = next_schedule["dates"][0]["games"][0]
                status = next_game["status"]["abstractGameState"]
                if status == "Live":
                    return GameReference(game_id=next_game["gamePk"], status=status)

            previous_game = team["previousGameSchedule"]["dates"][0]["games"][0]
            return GameReference(
                game_id=previous_game["gamePk"],
                status=(previous_game.get("status") or {}).get("abstractGameState"),
            )
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
            logger.error(f"Schedule for team {team_id} missing expected field {str(e)}: {payload}")
            raise StatsApiError(f"Schedule for team {team_id} missing expected field") from e

    def resolve_current_game(self, team_id: int) -> int:
        """Return the game id of the team's live game, or its previous one."""
        game = self.get_current_game(team_id)
        logger.info(f"Team {team_id} resolved to game {game.game_id} (status={game.status})")
        return game.game_id

    def fetch_boxscore(self, game_id: int) -> BoxscoreView:
        """Fetch a game's boxscore and reduce it to the on-ice view."""
        payload = self._get_json(f"/game/{game_id}/boxscore")
        return format_boxscore(payload)
