"""
Tests for configuration management.
"""

import pytest
import tempfile
import yaml
from pathlib import Path
import sys

# Add the season_scheduler package to the path
sys.path.append(str(Path(__file__).parent.parent))

from season_scheduler.config import LeagueConfig, ScheduleConfigError, load_config, save_config
from season_scheduler.models import Team


def _config_data():
    return {
        "num_games": 10,
        "num_games_div": 4,
        "num_games_conf": 2,
        "conferences": [{"cid": 0, "name": "East"}, {"cid": 1, "name": "West"}],
        "divisions": [
            {
                "did": 0,
                "cid": 0,
                "name": "North",
                "teams": [{"tid": 0, "name": "Team 1"}, {"tid": 1, "name": "Team 2"}]
            },
            {
                "did": 1,
                "cid": 1,
                "name": "South",
                "teams": [{"tid": 2, "name": "Team 3"}]
            }
        ]
    }


def test_basic_config_creation():
    """Test creating a basic configuration."""
    config = LeagueConfig(**_config_data())

    assert config.num_games == 10
    assert config.num_games_div == 4
    assert config.max_iterations == 100000
    assert config.seed is None
    assert len(config.divisions) == 2
    assert len(config.divisions[0].teams) == 2


def test_default_budgets():
    """Test the default season budgets."""
    config = LeagueConfig(divisions=[])

    assert config.num_games == 82
    assert config.num_games_div == 16
    assert config.num_games_conf == 36


def test_config_validation():
    """Test configuration validation."""
    # Negative budget
    with pytest.raises(ValueError):
        LeagueConfig(divisions=[], num_games_div=-1)

    # Duplicate division ids
    data = _config_data()
    data["divisions"][1]["did"] = 0
    with pytest.raises(ValueError, match="Duplicate division ids"):
        LeagueConfig(**data)

    # Duplicate team ids
    data = _config_data()
    data["divisions"][1]["teams"][0]["tid"] = 0
    with pytest.raises(ValueError, match="Duplicate team ids"):
        LeagueConfig(**data)

    # Unknown conference
    data = _config_data()
    data["divisions"][1]["cid"] = 7
    with pytest.raises(ValueError, match="unknown conference"):
        LeagueConfig(**data)


def test_config_load_save():
    """Test loading and saving configuration."""
    config_data = _config_data()

    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(config_data, f)
        temp_path = f.name

    save_path = temp_path.replace('.yaml', '_saved.yaml')

    try:
        loaded_config = load_config(temp_path)

        assert loaded_config.num_games == config_data["num_games"]
        assert len(loaded_config.divisions) == len(config_data["divisions"])

        save_config(loaded_config, save_path)

        saved_config = load_config(save_path)
        assert saved_config == loaded_config

    finally:
        import os
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        if os.path.exists(save_path):
            os.unlink(save_path)


def test_sample_league_loads():
    """Test the bundled sample league."""
    config = load_config(str(Path(__file__).parent.parent / "configs" / "sample_league.yaml"))

    assert len(config.divisions) == 6
    assert len(config.get_all_teams()) == 30
    assert config.seed == 42


def test_get_all_teams():
    """Test getting all teams from configuration."""
    config = LeagueConfig(**_config_data())
    all_teams = config.get_all_teams()

    assert all_teams == [
        Team(tid=0, did=0, cid=0, name="Team 1"),
        Team(tid=1, did=0, cid=0, name="Team 2"),
        Team(tid=2, did=1, cid=1, name="Team 3"),
    ]


def test_get_team_division():
    """Test getting team division."""
    config = LeagueConfig(**_config_data())

    assert config.get_team_division(0) == "North"
    assert config.get_team_division(2) == "South"
    assert config.get_team_division(99) is None
    assert config.get_division(1).name == "South"
    assert config.get_division(5) is None


def test_check_teams():
    """Test checking teams against the league structure."""
    config = LeagueConfig(**_config_data())
    teams = config.get_all_teams()

    assert config.check_teams(teams) == 3

    with pytest.raises(ScheduleConfigError, match="unknown division"):
        config.check_teams(teams + [Team(tid=9, did=4, cid=0)])

    with pytest.raises(ScheduleConfigError, match="conference"):
        config.check_teams([Team(tid=0, did=0, cid=1)])

    config.num_active_teams = 5
    with pytest.raises(ScheduleConfigError, match="num_active_teams"):
        config.check_teams(teams)
