"""
Peer grouping of teams relative to each division.
"""

from typing import List, Dict
from .models import Team, Level
from .config import DivisionConfig


def group_teams_by_did(teams: List[Team], divisions: List[DivisionConfig]) -> Dict[int, Dict[Level, List[Team]]]:
    """
    Split the league into division mates, conference mates and everyone else.

    All teams in a division share the same peer groups, so the grouping is
    done once per division rather than once per team. The DIV group includes
    the teams of the division itself.

    Args:
        teams: All teams being scheduled
        divisions: League divisions with their conference ids

    Returns:
        Dict[int, Dict[Level, List[Team]]]: Peer groups keyed by division id
    """
    grouped = {}

    for div in divisions:
        grouped[div.did] = {
            Level.DIV: [t for t in teams if t.did == div.did],
            Level.CONF: [t for t in teams if t.did != div.did and t.cid == div.cid],
            Level.OTHER: [t for t in teams if t.cid != div.cid],
        }

    return grouped
