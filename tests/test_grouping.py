"""
Tests for peer grouping.
"""

from conftest import build_league

from season_scheduler.grouping import group_teams_by_did
from season_scheduler.models import Level


def test_groups_are_disjoint_and_cover_league(nba_league):
    teams = nba_league.get_all_teams()
    grouped = group_teams_by_did(teams, nba_league.divisions)

    assert set(grouped) == {0, 1, 2, 3, 4, 5}
    for did, groups in grouped.items():
        tids = [t.tid for level in Level for t in groups[level]]
        assert sorted(tids) == sorted(t.tid for t in teams)
        assert len(groups[Level.DIV]) == 5
        assert len(groups[Level.CONF]) == 10
        assert len(groups[Level.OTHER]) == 15


def test_group_membership():
    config = build_league(2, 2, 2)
    teams = config.get_all_teams()
    grouped = group_teams_by_did(teams, config.divisions)

    assert [t.tid for t in grouped[0][Level.DIV]] == [0, 1]
    assert [t.tid for t in grouped[0][Level.CONF]] == [2, 3]
    assert [t.tid for t in grouped[0][Level.OTHER]] == [4, 5, 6, 7]
    assert [t.tid for t in grouped[3][Level.CONF]] == [4, 5]


def test_empty_division():
    config = build_league(1, 2, 2)
    teams = [t for t in config.get_all_teams() if t.did == 0]
    grouped = group_teams_by_did(teams, config.divisions)

    assert grouped[1][Level.DIV] == []
    assert [t.tid for t in grouped[1][Level.CONF]] == [0, 1]
