"""
Season schedule generation: targets, matchups, excess resolution and day packing.
"""

import logging
import random
from collections import Counter
from typing import Callable, List, Dict, Optional, Tuple
from .models import Team, LEVELS, Decided, ScheduleCounts, ScheduleResult
from .config import LeagueConfig
from .grouping import group_teams_by_did
from .targets import get_num_games_targets
from .matchups import make_required_matchups, get_matchup_summary
from .excess import finalize
from .days import compact_days
from .fallback import round_robin_fallback

logger = logging.getLogger(__name__)

FallbackGenerator = Callable[[List[Team], int, random.Random], List[Tuple[int, int]]]


def _prepare(teams: List[Team], config: LeagueConfig):
    num_active_teams = config.check_teams(teams)
    grouped = group_teams_by_did(teams, config.divisions)
    targets = get_num_games_targets(
        grouped,
        config.num_games,
        config.num_games_div,
        config.num_games_conf,
        num_active_teams,
    )
    return grouped, targets


def new_schedule_good(teams: List[Team], config: LeagueConfig, rng: random.Random) -> Tuple[Optional[List[Decided]], int]:
    """
    Generate matchups that hit the division/conference/other game targets.

    Args:
        teams: All teams being scheduled
        config: League configuration
        rng: Random source

    Returns:
        Tuple[Optional[List[Decided]], int]: Matchups (None if no schedule was
        found) and the number of resolver attempts used

    Raises:
        ScheduleConfigError: If the league structure and game budgets contradict each other
    """
    grouped, targets = _prepare(teams, config)
    counts = ScheduleCounts.for_teams(teams)

    done, either = make_required_matchups(teams, grouped, targets, counts)
    logger.debug("Required matchups: %s", get_matchup_summary(done + either))

    # Everything above is deterministic, below is where randomness is introduced
    return finalize(
        teams, grouped, targets, counts, done, either, rng,
        max_iterations=config.max_iterations,
    )


def new_schedule(teams: List[Team],
                 config: LeagueConfig,
                 rng: Optional[random.Random] = None,
                 fallback: FallbackGenerator = round_robin_fallback) -> ScheduleResult:
    """
    Generate a season schedule grouped into days.

    Falls back to a simpler generator if no schedule meeting the targets is found.

    Args:
        teams: All teams being scheduled
        config: League configuration
        rng: Random source (seeded from config.seed if not provided)
        fallback: Generator used when the excess resolver gives up

    Returns:
        ScheduleResult: Complete schedule
    """
    if rng is None:
        rng = random.Random(config.seed)

    matchups, iterations = new_schedule_good(teams, config, rng)

    if matchups is None:
        logger.warning("Falling back to %s", getattr(fallback, '__name__', repr(fallback)))
        pairs = fallback(teams, config.num_games, rng)
        used_fallback = True
    else:
        pairs = [m.as_pair() for m in matchups]
        used_fallback = False

    days = compact_days(pairs, rng)
    logger.info("Packed %d games into %d days", len(pairs), len(days))

    return ScheduleResult(days=days, used_fallback=used_fallback, iterations=iterations)


def validate_schedule(result: ScheduleResult, teams: List[Team], config: LeagueConfig) -> Dict[str, List[str]]:
    """
    Validate a completed schedule for constraint violations.

    Args:
        result: Schedule to validate
        teams: Teams the schedule was built for
        config: League configuration

    Returns:
        Dict[str, List[str]]: Validation results
    """
    violations = {
        'errors': [],
        'warnings': []
    }

    if not result.days:
        violations['errors'].append("No games scheduled")
        return violations

    # Check for scheduling conflicts
    for day_num, day in enumerate(result.days, start=1):
        tids_on_day = set()
        for matchup in day:
            for tid in matchup:
                if tid in tids_on_day:
                    violations['errors'].append(f"Team {tid} scheduled multiple games on day {day_num}")
                tids_on_day.add(tid)

    # Fallback schedules don't promise to meet the targets
    target_problems = violations['warnings'] if result.used_fallback else violations['errors']

    grouped, targets = _prepare(teams, config)
    by_tid = {t.tid: t for t in teams}

    games = Counter()
    pair_games = Counter()
    home_games = Counter()
    for home, away in result.matchups:
        games[home] += 1
        games[away] += 1
        pair_games[frozenset((home, away))] += 1
        home_games[(home, away)] += 1

    for t in teams:
        if games[t.tid] != config.num_games:
            target_problems.append(f"Team {t.tid} plays {games[t.tid]} games, expected {config.num_games}")

    for t in teams:
        for level in LEVELS:
            per_team = targets[t.did].per_team[level]
            for t2 in grouped[t.did][level]:
                if t2.tid <= t.tid:
                    continue

                # Each side hosts half its own target, the lower tid owns the odd game
                per_team2 = targets[t2.did].per_team[level]
                expected = per_team // 2 + per_team2 // 2 + per_team % 2

                num = pair_games[frozenset((t.tid, t2.tid))]
                if num not in (expected, expected + 1):
                    target_problems.append(
                        f"Teams {t.tid} and {t2.tid} play {num} {level.value} games, expected {expected} or {expected + 1}"
                    )

                home = home_games[(t.tid, t2.tid)]
                away = home_games[(t2.tid, t.tid)]
                if abs(home - away) > 1:
                    violations['warnings'].append(
                        f"Teams {t.tid} and {t2.tid} split {home}-{away} home games"
                    )

    unknown = set(games) - set(by_tid)
    if unknown:
        violations['errors'].append(f"Unknown teams in schedule: {sorted(unknown)}")

    return violations
