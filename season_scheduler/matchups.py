"""
Required matchup generation (games that split evenly across every peer).
"""

from typing import List, Dict, Tuple, Union
from .models import Team, Level, LEVELS, GameTargets, ScheduleCounts, Decided, Pending


def make_required_matchups(teams: List[Team],
                           grouped: Dict[int, Dict[Level, List[Team]]],
                           targets: Dict[int, GameTargets],
                           counts: ScheduleCounts) -> Tuple[List[Decided], List[Pending]]:
    """
    Make all the matchups implied by the per-team targets.

    Each team records its own home games against every peer; the matching
    away games are recorded when the loop reaches the peer. An odd per-team
    target leaves one game per pair whose home side is decided later.

    Args:
        teams: All teams being scheduled
        grouped: Output of group_teams_by_did
        targets: Output of get_num_games_targets
        counts: Count tracker, updated in place

    Returns:
        Tuple[List[Decided], List[Pending]]: Decided matchups and pending "either" matchups
    """
    done = []
    either = []

    for t in teams:
        teams_grouped = grouped[t.did]
        per_team = targets[t.did].per_team

        for level in LEVELS:
            num_home = per_team[level] // 2
            num_either = per_team[level] % 2

            for t2 in teams_grouped[level]:
                if t.tid == t2.tid:
                    continue

                for _ in range(num_home):
                    done.append(Decided(t.tid, t2.tid, level))
                    counts.add_decided(t.tid, t2.tid, level)

                # Only the lower tid records either games, so they aren't counted twice
                if t.tid < t2.tid:
                    for _ in range(num_either):
                        either.append(Pending(t.tid, t2.tid, level))
                        counts.add_either(t.tid, t2.tid, level)

    return done, either


def get_matchup_summary(matchups: List[Union[Decided, Pending]]) -> Dict:
    """
    Get summary statistics for matchups.

    Args:
        matchups: List of matchups

    Returns:
        Dict: Summary statistics
    """
    if not matchups:
        return {}

    level_counts = {}
    team_game_counts = {}

    for matchup in matchups:
        level_counts[matchup.level.value] = level_counts.get(matchup.level.value, 0) + 1

        if isinstance(matchup, Decided):
            pair = (matchup.home, matchup.away)
        else:
            pair = (matchup.team_a, matchup.team_b)
        for tid in pair:
            team_game_counts[tid] = team_game_counts.get(tid, 0) + 1

    summary = {
        'total_matchups': len(matchups),
        'levels': level_counts,
        'teams': len(team_game_counts),
        'avg_games_per_team': sum(team_game_counts.values()) / len(team_game_counts)
    }

    return summary
