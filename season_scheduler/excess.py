"""
Excess matchup resolution and home/away assignment of "either" games.

Everything before this step is deterministic. Here teams that still owe an
odd game in a peer group are paired up at random, then every pending game is
given a home side. A random ordering can paint itself into a corner, so a
failed attempt is thrown away and retried from the same starting point.
"""

import logging
import random
from typing import List, Dict, Optional, Set, Tuple
from .models import Team, Level, LEVELS, GameTargets, ScheduleCounts, Decided, Pending

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 100000


def finalize(teams: List[Team],
             grouped: Dict[int, Dict[Level, List[Team]]],
             targets: Dict[int, GameTargets],
             counts: ScheduleCounts,
             done: List[Decided],
             either: List[Pending],
             rng: random.Random,
             max_iterations: int = MAX_ITERATIONS) -> Tuple[Optional[List[Decided]], int]:
    """
    Add the excess matchups and decide home/away for every pending game.

    The inputs are never modified. Counts are only copied once an attempt
    has found all its excess matchups.

    Args:
        teams: All teams being scheduled
        grouped: Output of group_teams_by_did
        targets: Output of get_num_games_targets
        counts: Count tracker after the required matchups
        done: Decided matchups from make_required_matchups
        either: Pending matchups from make_required_matchups
        rng: Random source
        max_iterations: Attempts before giving up

    Returns:
        Tuple[Optional[List[Decided]], int]: Final matchups (None if no schedule
        was found) and the number of attempts used
    """
    iteration = 0

    while iteration < max_iterations:
        iteration += 1

        excess = _find_excess_matchups(teams, grouped, targets, rng)
        if excess is None:
            continue

        attempt_counts = counts.copy()
        for matchup in excess:
            attempt_counts.add_either(matchup.team_a, matchup.team_b, matchup.level)

        decided = balance_home_away(attempt_counts, list(either) + excess, rng)

        logger.info("Found excess matchups after %d attempt(s)", iteration)
        return list(done) + decided, iteration

    logger.warning("No schedule found after %d attempts", max_iterations)
    return None, iteration


def _find_excess_matchups(teams: List[Team],
                          grouped: Dict[int, Dict[Level, List[Team]]],
                          targets: Dict[int, GameTargets],
                          rng: random.Random) -> Optional[List[Pending]]:
    """
    Randomly pair up teams that still owe an excess game at some level.

    Returns:
        Optional[List[Pending]]: The excess matchups, or None if some team
        could not find enough partners
    """
    excess = []
    remaining = {t.tid: dict(targets[t.did].excess) for t in teams}
    paired: Set[Tuple[int, int, Level]] = set()

    for t in teams:
        teams_grouped = grouped[t.did]
        excess_remaining = remaining[t.tid]

        for level in LEVELS:
            if excess_remaining[level] == 0:
                continue

            group = teams_grouped[level]

            group_indexes = list(range(len(group)))
            rng.shuffle(group_indexes)

            for group_index in group_indexes:
                t2 = group[group_index]

                if t.tid == t2.tid:
                    continue

                # Make sure other team needs a game
                if remaining[t2.tid][level] == 0:
                    continue

                # At most one excess game per pair, otherwise it would be a per-team game
                pair = (min(t.tid, t2.tid), max(t.tid, t2.tid), level)
                if pair in paired:
                    continue

                paired.add(pair)
                excess.append(Pending(t.tid, t2.tid, level))

                excess_remaining[level] -= 1
                remaining[t2.tid][level] -= 1

                if excess_remaining[level] == 0:
                    break

            if excess_remaining[level] > 0:
                return None

    return excess


def balance_home_away(counts: ScheduleCounts, either: List[Pending], rng: random.Random) -> List[Decided]:
    """
    Give every pending game a home team.

    The team with fewer home games (relative to away games) at the game's
    level is more likely to host, so home/away stays balanced within
    div/conf/other.

    Args:
        counts: Count tracker, updated in place
        either: Pending matchups to resolve
        rng: Random source

    Returns:
        List[Decided]: One decided matchup per pending matchup
    """
    pending = list(either)
    rng.shuffle(pending)

    decided = []
    for matchup in pending:
        diff_a = counts.home_away_diff(matchup.team_a, matchup.level)
        diff_b = counts.home_away_diff(matchup.team_b, matchup.level)

        prob_a_home = 1.0 / (1.0 + 2.0 ** (diff_a - diff_b))
        game = matchup.decide(rng.random() < prob_a_home)

        counts.resolve_either(game.home, game.away, game.level)
        decided.append(game)

    return decided
