"""
Command-line interface for the season scheduler.
"""

import argparse
import logging
import random
import sys
import yaml
from pydantic import ValidationError
from .config import ScheduleConfigError, load_config
from .engine import new_schedule, validate_schedule
from .logging_config import setup_logging


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Season Scheduler - generate a full-season schedule for a league"
    )

    parser.add_argument(
        "--config",
        required=True,
        help="Path to YAML league configuration file"
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed (overrides the config file)"
    )

    parser.add_argument(
        "--show-days",
        action="store_true",
        help="Print every game day"
    )

    parser.add_argument(
        "--team",
        type=int,
        help="Print the games of one team"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )

    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        print("Loading configuration...")
        config = load_config(args.config)

        teams = config.get_all_teams()
        print(f"Loaded {len(teams)} teams in {len(config.divisions)} divisions")

        seed = args.seed if args.seed is not None else config.seed
        result = new_schedule(teams, config, rng=random.Random(seed))

        if result.used_fallback:
            print("WARNING: No schedule meeting the game targets was found, used fallback schedule")

        violations = validate_schedule(result, teams, config)

        if violations['errors']:
            print("ERRORS found in schedule:")
            for error in violations['errors']:
                print(f"  - {error}")
        else:
            print("No errors found in schedule!")

        if violations['warnings']:
            print("WARNINGS found in schedule:")
            for warning in violations['warnings']:
                print(f"  - {warning}")

        if args.show_days:
            names = {t.tid: t.label for t in teams}
            for day_num, day in enumerate(result.days, start=1):
                games = ", ".join(f"{names[away]} @ {names[home]}" for home, away in day)
                print(f"Day {day_num}: {games}")

        if args.team is not None:
            division = config.get_team_division(args.team)
            if division is None:
                print(f"WARNING: Unknown team {args.team}")
            else:
                names = {t.tid: t.label for t in teams}
                team_games = result.get_team_games(args.team)
                print(f"{names[args.team]} ({division}) plays {len(team_games)} games:")
                for home, away in team_games:
                    if home == args.team:
                        print(f"  vs {names[away]}")
                    else:
                        print(f"  @ {names[home]}")

        print("\n" + "="*50)
        print("SCHEDULING COMPLETE")
        print("="*50)

        stats = result.get_summary_stats()
        print(f"Total games scheduled: {stats.get('total_games', 0)}")
        print(f"Total days: {stats.get('total_days', 0)}")
        print(f"Total teams: {stats.get('total_teams', 0)}")
        if 'games_per_team' in stats:
            print(f"Games per team: {stats['games_per_team']['min']} to {stats['games_per_team']['max']}")
            print(f"Games per day: {stats['games_per_day']['min']} to {stats['games_per_day']['max']}")
        print(f"Resolver attempts: {result.iterations}")

        if violations['errors']:
            sys.exit(1)

    except FileNotFoundError as e:
        print(f"ERROR: File not found: {e}")
        sys.exit(1)
    except yaml.YAMLError as e:
        print(f"ERROR: Invalid YAML configuration: {e}")
        sys.exit(1)
    except (ValidationError, ScheduleConfigError) as e:
        print(f"ERROR: Invalid league configuration: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
