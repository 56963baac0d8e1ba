"""
Configuration management for the season scheduler.
"""

from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List, Optional

from .models import Team


class ScheduleConfigError(ValueError):
    """League structure or game budgets are self-contradictory."""


class TeamConfig(BaseModel):
    """A team entry inside a division."""
    tid: int = Field(ge=0, description="Unique team identifier")
    name: Optional[str] = None


class ConferenceConfig(BaseModel):
    """A conference grouping several divisions."""
    cid: int
    name: str


class DivisionConfig(BaseModel):
    """A division and the conference it belongs to."""
    did: int
    cid: int
    name: str
    teams: List[TeamConfig] = Field(default_factory=list)


class LeagueConfig(BaseModel):
    """Main configuration for season schedule generation."""
    num_games: int = Field(default=82, ge=0, description="Games per team in a season")
    num_games_div: int = Field(default=16, ge=0, description="Games per team against division mates")
    num_games_conf: int = Field(default=36, ge=0, description="Games per team against the rest of the conference")
    num_active_teams: Optional[int] = Field(
        default=None, ge=0, description="Active teams in the league (defaults to the number of teams passed in)"
    )

    # Excess resolver retry bound
    max_iterations: int = Field(default=100000, ge=1, description="Attempts before giving up on excess matchups")

    # Random seed for reproducibility
    seed: Optional[int] = Field(default=None, description="Random seed (random each run when unset)")

    conferences: List[ConferenceConfig] = Field(default_factory=list)
    divisions: List[DivisionConfig] = Field(description="League divisions")

    @field_validator('divisions')
    @classmethod
    def validate_unique_divisions(cls, v):
        dids = [div.did for div in v]
        if len(dids) != len(set(dids)):
            raise ValueError(f"Duplicate division ids: {dids}")

        tids = [team.tid for div in v for team in div.teams]
        if len(tids) != len(set(tids)):
            raise ValueError(f"Duplicate team ids: {tids}")
        return v

    @model_validator(mode='after')
    def validate_conferences(self):
        if self.conferences:
            cids = {conf.cid for conf in self.conferences}
            for div in self.divisions:
                if div.cid not in cids:
                    raise ValueError(f"Division {div.name} references unknown conference {div.cid}")
        return self

    def get_all_teams(self) -> List[Team]:
        """Get all teams from all divisions, in configuration order."""
        teams = []
        for div in self.divisions:
            for team in div.teams:
                teams.append(Team(tid=team.tid, did=div.did, cid=div.cid, name=team.name))
        return teams

    def get_division(self, did: int) -> Optional[DivisionConfig]:
        """Get a division by id."""
        for div in self.divisions:
            if div.did == did:
                return div
        return None

    def get_team_division(self, tid: int) -> Optional[str]:
        """Get the division name for a given team."""
        for div in self.divisions:
            for team in div.teams:
                if team.tid == tid:
                    return div.name
        return None

    def check_teams(self, teams: List[Team]) -> int:
        """
        Make sure teams agree with the configured league structure.

        Returns:
            int: Number of active teams to use for the cross-conference denominator
        """
        for t in teams:
            div = self.get_division(t.did)
            if div is None:
                raise ScheduleConfigError(f"Team {t.tid} is in unknown division {t.did}")
            if div.cid != t.cid:
                raise ScheduleConfigError(
                    f"Team {t.tid} has conference {t.cid} but division {div.name} is in conference {div.cid}"
                )

        if self.num_active_teams is None:
            return len(teams)
        if self.num_active_teams != len(teams):
            raise ScheduleConfigError(
                f"num_active_teams is {self.num_active_teams} but {len(teams)} teams were given"
            )
        return self.num_active_teams


def load_config(config_path: str) -> LeagueConfig:
    """Load configuration from YAML file."""
    import yaml

    with open(config_path, 'r') as f:
        config_data = yaml.safe_load(f)

    return LeagueConfig(**config_data)


def save_config(config: LeagueConfig, config_path: str) -> None:
    """Save configuration to YAML file."""
    import yaml

    with open(config_path, 'w') as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, indent=2)
