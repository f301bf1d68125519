"""Simulation CLI for Swiss Cut.

Plays random tournaments with the Random Tournament Generator and prints
the rounds and final standings.
"""

# Swiss Cut
# Copyright (C) 2025  Swiss Cut developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import sys
from typing import Any, Dict, List, Optional

from swisscut.constants import DEFAULT_ELIMINATION_THRESHOLD
from swisscut.persistence import save_tournament
from swisscut.testing.rtg import RandomTournamentGenerator, ResultPattern, RTGConfig
from swisscut.utils import setup_logger

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="swisscut-sim",
        description="Simulate Swiss Cut tournaments with random results",
    )
    parser.add_argument(
        "--players", type=int, default=8, help="Number of players (default: 8)"
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducibility")
    parser.add_argument(
        "--pattern",
        choices=[p.value for p in ResultPattern],
        default=ResultPattern.RANDOM.value,
        help="Result pattern (default: random)",
    )
    parser.add_argument(
        "--double-loss-rate",
        type=float,
        default=0.1,
        help="Chance of a double loss per match (default: 0.1)",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=DEFAULT_ELIMINATION_THRESHOLD,
        help=f"Losses before elimination (default: {DEFAULT_ELIMINATION_THRESHOLD})",
    )
    parser.add_argument(
        "--no-elimination",
        action="store_true",
        help="Points-only Swiss: never eliminate anyone",
    )
    parser.add_argument("--output", help="Save the finished tournament to this file")
    parser.add_argument(
        "--verbose", action="store_true", help="Print every round's pairings"
    )
    return parser


def print_rounds(rounds: List[Dict[str, Any]], names: Dict[str, str]) -> None:
    for round_info in rounds:
        print(f"{Colors.HEADER}Round {round_info['round_number']}{Colors.ENDC}")
        for result in round_info["results"]:
            print(
                f"  {names[result['player1_id']]:>14} vs "
                f"{names[result['player2_id']]:<14} {result['outcome']}"
            )
        if round_info["bye_player_id"]:
            print(f"  {names[round_info['bye_player_id']]:>14} bye")
        for player1_id, player2_id in round_info["rematches"]:
            print(
                f"  {Colors.WARNING}rematch: {names[player1_id]} vs "
                f"{names[player2_id]}{Colors.ENDC}"
            )


def print_standings(report: Dict[str, Any]) -> None:
    print(f"{Colors.BOLD}{'#':>3} {'Player':<16} {'Pts':>4} {'W':>3} {'L':>3}{Colors.ENDC}")
    for rank, player in enumerate(report["standings"], start=1):
        status = ""
        if player.dropped:
            status = f"{Colors.FAIL}dropped{Colors.ENDC}"
        elif player.eliminated:
            status = f"{Colors.FAIL}eliminated{Colors.ENDC}"
        print(
            f"{rank:>3} {player.name:<16} {player.points:>4} "
            f"{player.wins:>3} {player.losses:>3} {status}"
        )
    champion = report["champion"]
    if champion is not None:
        print(f"{Colors.OKGREEN}Champion: {champion.name}{Colors.ENDC}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.players < 2:
        print(f"{Colors.FAIL}At least 2 players are needed{Colors.ENDC}")
        return 2
    if not args.no_elimination and args.threshold < 1:
        print(f"{Colors.FAIL}--threshold must be at least 1{Colors.ENDC}")
        return 2

    config = RTGConfig(
        num_players=args.players,
        seed=args.seed,
        result_pattern=ResultPattern(args.pattern),
        double_loss_rate=args.double_loss_rate,
        elimination_threshold=None if args.no_elimination else args.threshold,
    )
    report = RandomTournamentGenerator(config).generate_complete_tournament()
    tournament = report["tournament"]

    if args.verbose:
        names = {p.id: p.name for p in tournament.players}
        print_rounds(report["rounds"], names)
    print_standings(report)
    for message in report["notifications"]:
        print(f"{Colors.WARNING}{message}{Colors.ENDC}")

    if args.output:
        path = save_tournament(tournament, args.output)
        print(f"Saved to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
