"""Command line entry for the session simulator."""

# Doubles Rota
# Copyright (C) 2025  Doubles Rota developers
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
import json
import sys
from typing import List, Optional

from doublesrota.constants import (
    DEFAULT_PAIRING_MODE,
    DEFAULT_ROTATION_FOCUS,
    DEFAULT_SKILL_MODE,
    DEFAULT_UNIQUENESS_IMPORTANCE,
    PAIRING_MODES,
    ROTATION_FOCI,
    SKILL_MODES,
)
from doublesrota.testing.simulator import SessionSimulator, SimConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="doubles-rota-sim",
        description="Simulate a doubles session and report fairness and variety.",
    )
    parser.add_argument("--players", type=int, default=10, help="Roster size")
    parser.add_argument("--rounds", type=int, default=8, help="Rounds to play")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--female-share", type=float, default=0.5)
    parser.add_argument("--happy-share", type=float, default=0.1)
    parser.add_argument("--churn", type=float, default=0.0)
    parser.add_argument(
        "--pairing-mode", choices=PAIRING_MODES, default=DEFAULT_PAIRING_MODE
    )
    parser.add_argument("--skill-mode", choices=SKILL_MODES, default=DEFAULT_SKILL_MODE)
    parser.add_argument(
        "--uniqueness",
        type=int,
        choices=(1, 2, 3),
        default=DEFAULT_UNIQUENESS_IMPORTANCE,
    )
    parser.add_argument(
        "--rotation-focus", choices=ROTATION_FOCI, default=DEFAULT_ROTATION_FOCUS
    )
    parser.add_argument(
        "--show-rounds", action="store_true", help="Print every generated round"
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.players < 0 or args.rounds < 0:
        print("Players and rounds must not be negative.", file=sys.stderr)
        return 2

    simulator = SessionSimulator(
        SimConfig(
            num_players=args.players,
            num_rounds=args.rounds,
            seed=args.seed,
            female_share=args.female_share,
            happy_to_sit_share=args.happy_share,
            churn_rate=args.churn,
            pairing_mode=args.pairing_mode,
            skill_mode=args.skill_mode,
            uniqueness_importance=args.uniqueness,
            rotation_focus=args.rotation_focus,
        )
    )
    report = simulator.run()

    if args.show_rounds:
        for round_data in simulator.state.rounds:
            print(f"Round {round_data.round_number}")
            for line in simulator.controller.round_lines(round_data):
                print(f"  {line}")

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(f"Rounds played:      {report.rounds_played}")
        print(f"Rounds aborted:     {report.aborted_rounds}")
        print(f"Games spread:       {report.games_spread}")
        print(f"Sits std deviation: {report.sits_stdev:.3f}")
        print(f"Max co-court count: {report.max_co_court}")
        print(f"Repeated pairs:     {report.repeat_co_court_pairs}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
