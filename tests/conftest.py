"""
Shared fixtures for season scheduler tests.
"""

import random
import sys
from pathlib import Path

import pytest

# Add the season_scheduler package to the path
sys.path.append(str(Path(__file__).parent.parent))

from season_scheduler.config import LeagueConfig


def build_league(num_confs: int, divs_per_conf: int, teams_per_div: int, **kwargs) -> LeagueConfig:
    """Build a league config with evenly sized conferences and divisions."""
    conferences = [{"cid": cid, "name": f"Conf {cid}"} for cid in range(num_confs)]
    divisions = []
    tid = 0
    for cid in range(num_confs):
        for i in range(divs_per_conf):
            did = cid * divs_per_conf + i
            teams = []
            for _ in range(teams_per_div):
                teams.append({"tid": tid, "name": f"Team {tid}"})
                tid += 1
            divisions.append({"did": did, "cid": cid, "name": f"Div {did}", "teams": teams})

    return LeagueConfig(conferences=conferences, divisions=divisions, **kwargs)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def tiny_league():
    """4 teams, 2 divisions of 2, one conference, 2 division games each."""
    return build_league(1, 2, 2, num_games=2, num_games_div=2, num_games_conf=0)


@pytest.fixture
def nba_league():
    """30 teams, 2 conferences of 3 divisions of 5, default budgets."""
    return build_league(2, 3, 5, num_games=82, num_games_div=16, num_games_conf=36)
