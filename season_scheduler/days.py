"""
Packing a season's matchups into game days.
"""

import random
from typing import List, Tuple, Set

Matchup = Tuple[int, int]


def compact_days(matchups: List[Matchup], rng: random.Random) -> List[List[Matchup]]:
    """
    Order the schedule so that it takes fewer days to play.

    Greedy first fit: each matchup goes into the first day where neither
    team is already playing, otherwise a new day is opened.

    Args:
        matchups: (home, away) pairs
        rng: Random source

    Returns:
        List[List[Matchup]]: Days of matchups, no team twice in a day
    """
    shuffled = list(matchups)
    rng.shuffle(shuffled)

    days: List[List[Matchup]] = []
    tids_in_days: List[Set[int]] = []

    for home, away in shuffled:
        for day, tids in zip(days, tids_in_days):
            if home not in tids and away not in tids:
                day.append((home, away))
                tids.update((home, away))
                break
        else:
            days.append([(home, away)])
            tids_in_days.append({home, away})

    # Otherwise the most dense days would all be at the start of the season
    rng.shuffle(days)

    return days


def flatten_days(days: List[List[Matchup]]) -> List[Matchup]:
    """Flatten days back into a single ordered list of matchups."""
    return [matchup for day in days for matchup in day]
