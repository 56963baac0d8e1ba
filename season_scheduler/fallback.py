"""
Round-robin fallback used when no schedule meeting the game targets is found.
"""

import logging
import random
from typing import List, Optional, Tuple
from .models import Team

logger = logging.getLogger(__name__)


def generate_round_robin(tids: List[int]) -> List[List[Tuple[int, int]]]:
    """
    Generate one round-robin cycle using the circle method.

    Args:
        tids: Team ids

    Returns:
        List[List[Tuple[int, int]]]: Rounds of (home, away) pairs
    """
    if len(tids) < 2:
        return []

    # Ensure even number of teams (add bye if odd)
    teams: List[Optional[int]] = list(tids)
    if len(teams) % 2 == 1:
        teams.append(None)

    n_teams = len(teams)
    rounds = []

    for round_num in range(n_teams - 1):
        pairs = []
        for i in range(n_teams // 2):
            t1 = teams[i]
            t2 = teams[n_teams - 1 - i]

            # Skip bye games
            if t1 is None or t2 is None:
                continue

            # Alternate who hosts so the fixed team doesn't always play at home
            if (round_num + i) % 2 == 0:
                pairs.append((t1, t2))
            else:
                pairs.append((t2, t1))
        rounds.append(pairs)

        # Rotate teams (circle method)
        teams = [teams[0]] + [teams[-1]] + teams[1:-1]

    return rounds


def round_robin_fallback(teams: List[Team], num_games: int, rng: random.Random) -> List[Tuple[int, int]]:
    """
    Build a schedule by repeating round-robin cycles until num_games rounds exist.

    Ignores division and conference targets. Every second cycle swaps home and
    away. With an odd number of teams, the team on a bye sits out that round,
    so some teams end up with fewer than num_games games.

    Args:
        teams: All teams being scheduled
        num_games: Games per team in a season
        rng: Random source

    Returns:
        List[Tuple[int, int]]: (home, away) pairs
    """
    tids = [t.tid for t in teams]
    rng.shuffle(tids)

    cycle = generate_round_robin(tids)
    if not cycle:
        return []

    matchups = []
    for round_num in range(num_games):
        cycle_num, index = divmod(round_num, len(cycle))
        for home, away in cycle[index]:
            if cycle_num % 2 == 0:
                matchups.append((home, away))
            else:
                matchups.append((away, home))

    logger.info("Fallback schedule has %d games for %d teams", len(matchups), len(tids))
    return matchups
