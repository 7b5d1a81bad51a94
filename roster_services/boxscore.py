import logging

from .errors import StatsApiError
from .models import BoxscoreSide, BoxscoreView, OnIcePlayer

logger = logging.getLogger(__name__)

SIDES = ("home", "away")


def _format_side(side_data: dict) -> BoxscoreSide:
    players = side_data["players"]
    on_ice = []
    for player_id in side_data["onIce"]:
        # Roster entries are keyed "ID<playerId>"
        player = players[f"ID{player_id}"]
        on_ice.append(OnIcePlayer(
            full_name=player["person"]["fullName"],
            number=str(player["jerseyNumber"]),
        ))
    return BoxscoreSide(name=side_data["team"]["name"], on_ice=on_ice)


def format_boxscore(payload: dict) -> BoxscoreView:
    """
    Reduce a stats API boxscore payload to team names and on-ice players.

    Args:
        payload: Parsed JSON from /game/{id}/boxscore

    Returns:
        BoxscoreView with both sides in onIce order

    Raises:
        StatsApiError: If an expected key is missing
    """
    try:
        teams = payload["teams"]
        sides = {side: _format_side(teams[side]) for side in SIDES}
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        logger.error(f"Malformed boxscore payload, missing {str(e)}")
        raise StatsApiError(f"Boxscore missing expected field: {str(e)}") from e

    return BoxscoreView(**sides)
