"""
Data models for the season scheduler.
"""

import copy
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Tuple
from enum import Enum
import pandas as pd


class Level(Enum):
    """Relationship between two teams."""
    DIV = "div"
    CONF = "conf"
    OTHER = "other"


LEVELS = [Level.DIV, Level.CONF, Level.OTHER]


@dataclass(frozen=True)
class Team:
    """A team in the league."""
    tid: int
    did: int
    cid: int
    name: Optional[str] = None

    @property
    def label(self) -> str:
        return self.name or f"Team {self.tid}"


@dataclass
class GameTargets:
    """Per-division game targets against each peer group."""
    # Games against every single team in the group
    per_team: Dict[Level, int]
    # Games in the group that can't be spread evenly across all teams
    excess: Dict[Level, int]


@dataclass
class GameCount:
    """Home/away/either tally for one team at one level."""
    home: int = 0
    away: int = 0
    either: int = 0

    @property
    def total(self) -> int:
        return self.home + self.away + self.either


@dataclass
class ScheduleCounts:
    """
    Number of home/away/either games assigned to each team at each level.

    "either" means a game between two teams is definitely necessary but its
    home side is not decided yet.
    """
    counts: Dict[int, Dict[Level, GameCount]] = field(default_factory=dict)

    @classmethod
    def for_teams(cls, teams: List[Team]) -> "ScheduleCounts":
        return cls(counts={t.tid: {level: GameCount() for level in LEVELS} for t in teams})

    def get(self, tid: int, level: Level) -> GameCount:
        return self.counts[tid][level]

    def add_decided(self, home: int, away: int, level: Level):
        self.counts[home][level].home += 1
        self.counts[away][level].away += 1

    def add_either(self, tid_a: int, tid_b: int, level: Level):
        self.counts[tid_a][level].either += 1
        self.counts[tid_b][level].either += 1

    def resolve_either(self, home: int, away: int, level: Level):
        """Turn one either game between two teams into a home/away game."""
        self.counts[home][level].either -= 1
        self.counts[away][level].either -= 1
        self.add_decided(home, away, level)

    def home_away_diff(self, tid: int, level: Level) -> int:
        """Positive = more home games, negative = more away games."""
        c = self.counts[tid][level]
        return c.home - c.away

    def total(self, tid: int) -> int:
        return sum(c.total for c in self.counts[tid].values())

    def copy(self) -> "ScheduleCounts":
        return copy.deepcopy(self)


@dataclass(frozen=True)
class Decided:
    """A matchup with the home side fixed."""
    home: int
    away: int
    level: Level

    def as_pair(self) -> Tuple[int, int]:
        return (self.home, self.away)


@dataclass(frozen=True)
class Pending:
    """A matchup known to be played whose home side is not decided yet."""
    team_a: int
    team_b: int
    level: Level

    def decide(self, home_is_a: bool) -> Decided:
        if home_is_a:
            return Decided(self.team_a, self.team_b, self.level)
        return Decided(self.team_b, self.team_a, self.level)


@dataclass
class ScheduleResult:
    """A complete schedule grouped into days."""
    days: List[List[Tuple[int, int]]] = field(default_factory=list)
    used_fallback: bool = False
    iterations: int = 0

    @property
    def matchups(self) -> List[Tuple[int, int]]:
        """All games in day order."""
        return [matchup for day in self.days for matchup in day]

    def get_team_games(self, tid: int) -> List[Tuple[int, int]]:
        """Get all games for a specific team."""
        return [m for m in self.matchups if tid in m]

    def to_dataframe(self) -> pd.DataFrame:
        """Convert schedule to pandas DataFrame."""
        if not self.days:
            return pd.DataFrame(columns=['Day', 'Order', 'Home', 'Away'])

        data = []
        for day_num, day in enumerate(self.days, start=1):
            for order, (home, away) in enumerate(day, start=1):
                data.append({
                    'Day': day_num,
                    'Order': order,
                    'Home': home,
                    'Away': away,
                })

        return pd.DataFrame(data)

    def get_summary_stats(self) -> Dict[str, Any]:
        """Get summary statistics for the schedule."""
        if not self.days:
            return {}

        df = self.to_dataframe()
        home_counts = df['Home'].value_counts()
        away_counts = df['Away'].value_counts()
        games = home_counts.add(away_counts, fill_value=0).astype(int)
        games_per_day = df.groupby('Day').size()

        stats = {
            'total_games': len(df),
            'total_days': len(self.days),
            'total_teams': len(games),
            'games_per_team': {
                'min': int(games.min()),
                'max': int(games.max())
            },
            'games_per_day': {
                'min': int(games_per_day.min()),
                'max': int(games_per_day.max()),
                'mean': float(games_per_day.mean())
            },
            'home_games': home_counts.astype(int).to_dict(),
            'used_fallback': self.used_fallback,
        }

        return stats
