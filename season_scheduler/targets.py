"""
Per-division game targets against each peer group.
"""

import logging
from typing import List, Dict
from .models import Team, Level, GameTargets
from .config import ScheduleConfigError

logger = logging.getLogger(__name__)


def get_num_games_targets(grouped: Dict[int, Dict[Level, List[Team]]],
                          num_games: int,
                          num_games_div: int,
                          num_games_conf: int,
                          num_active_teams: int) -> Dict[int, GameTargets]:
    """
    Work out how many games each team plays against every peer.

    Args:
        grouped: Output of group_teams_by_did
        num_games: Games per team in a season
        num_games_div: Games per team against division mates
        num_games_conf: Games per team against the rest of the conference
        num_active_teams: Active teams in the league

    Returns:
        Dict[int, GameTargets]: Targets keyed by division id. Empty divisions are skipped.
    """
    num_games_other = num_games - num_games_div - num_games_conf
    if num_games_other < 0:
        raise ScheduleConfigError("Can't have more division and conference games than total games")

    budgets = {
        Level.DIV: num_games_div,
        Level.CONF: num_games_conf,
        Level.OTHER: num_games_other,
    }

    targets = {}

    for did, groups in grouped.items():
        div_size = len(groups[Level.DIV])
        if div_size == 0:
            continue

        conf_size = len(groups[Level.CONF])

        # -1 for div size because that's the only group that includes the team itself
        denominators = {
            Level.DIV: div_size - 1,
            Level.CONF: conf_size,
            Level.OTHER: num_active_teams - conf_size - div_size,
        }

        per_team = {}
        excess = {}
        for level, budget in budgets.items():
            denominator = denominators[level]
            if denominator < 0:
                raise ScheduleConfigError(
                    f"Division {did} has a negative number of {level.value} peers; "
                    f"num_active_teams ({num_active_teams}) is too small"
                )
            if denominator == 0:
                if budget > 0:
                    raise ScheduleConfigError(
                        f"Division {did} has no {level.value} peers but {budget} {level.value} games are required"
                    )
                per_team[level] = 0
                excess[level] = 0
                continue

            per_team[level], excess[level] = divmod(budget, denominator)

        targets[did] = GameTargets(per_team=per_team, excess=excess)
        logger.debug("Division %s targets: per_team=%s excess=%s", did, per_team, excess)

    return targets
