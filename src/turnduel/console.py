"""Terminal host for playing a duel against the AI.

Usage: turnduel [player_key] [enemy_key] [--fast]

The host is just another event subscriber: it prints narration and stats as
they are published and reads the player's choice from stdin on each turn.
"""

import sys
import time
from typing import Optional

from .core.config import load_engine_config
from .core.data import MATCH_STATE_NAMES, SIDE_NAMES, MatchState, Side, StatsSnapshot
from .core.engine import ManualScheduler
from .game.combat_engine import CombatEngine
from .game.entities import Matchup, load_roster


class TerminalHost:
    """Plays one match in the terminal, pacing steps in real time."""

    def __init__(self, engine: CombatEngine, scheduler: ManualScheduler, realtime: bool = True):
        self.engine = engine
        self.scheduler = scheduler
        self.realtime = realtime

        self.engine.on_log(print)
        self.engine.on_stats_changed(self._print_stats)

    def _print_stats(self, player: StatsSnapshot, enemy: StatsSnapshot) -> None:
        player_name = self.engine.player.name if self.engine.player else SIDE_NAMES[Side.PLAYER]
        enemy_name = self.engine.enemy.name if self.engine.enemy else SIDE_NAMES[Side.ENEMY]
        print(f"  {player_name:<16} HP {player.hp:>3}/{player.max_hp:<3}  MP {player.mana:>3}/{player.max_mana}")
        print(f"  {enemy_name:<16} HP {enemy.hp:>3}/{enemy.max_hp:<3}  MP {enemy.mana:>3}/{enemy.max_mana}")

    def _run_pending(self) -> None:
        """Run scheduled steps until the engine waits for input or the match ends."""
        while True:
            next_time = self.scheduler.next_task_time()
            if next_time is None:
                return
            if self.realtime:
                time.sleep(max(0.0, next_time - self.scheduler.current_time))
            self.scheduler.run_next()

    def _prompt_choice(self) -> Optional[int]:
        options = self.engine.available_skills()
        print("  0) Attack")
        for index, option in enumerate(options, start=1):
            suffix = "" if option.usable else " (not enough mana)"
            print(f"  {index}) {option.name}{suffix}")

        try:
            raw = input("> ").strip()
        except EOFError:
            return None

        if not raw.isdigit() or int(raw) > len(options):
            print(f"Enter a number from 0 to {len(options)}")
            return -1
        return int(raw)

    def play(self, matchup: Matchup) -> MatchState:
        self.engine.begin_match(
            matchup.player_template,
            matchup.enemy_template,
            matchup.player_basic_attack,
            matchup.enemy_basic_attack,
        )
        self._run_pending()

        while not self.engine.is_over:
            if self.engine.state != MatchState.PLAYER_TURN:
                self._run_pending()
                continue

            choice = self._prompt_choice()
            if choice is None:
                self.engine.abandon()
                break
            if choice < 0:
                continue

            if choice == 0:
                skill = matchup.player_basic_attack
            else:
                skill = self.engine.available_skills()[choice - 1].skill
            if self.engine.submit_player_action(skill):
                self._run_pending()
            else:
                print("That action is not available right now")

        return self.engine.state


def main(argv: Optional[list[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    realtime = "--fast" not in args
    keys = [arg for arg in args if not arg.startswith("--")]
    player_key = keys[0] if len(keys) > 0 else "knight"
    enemy_key = keys[1] if len(keys) > 1 else "wolf"

    try:
        config = load_engine_config()
        roster = load_roster()
        matchup = roster.matchup(player_key, enemy_key)
    except KeyError as e:
        print(f"Error: {e.args[0]}")
        print(f"Available combatants: {', '.join(sorted(roster.combatants))}")
        return 2
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    scheduler = ManualScheduler()
    engine = CombatEngine(config=config, scheduler=scheduler)
    host = TerminalHost(engine, scheduler, realtime=realtime)

    try:
        result = host.play(matchup)
        print(f"Match result: {MATCH_STATE_NAMES[result]}")
    except KeyboardInterrupt:
        print("\n\nMatch interrupted by user")
        return 130

    return 0 if result == MatchState.WON else 1


if __name__ == "__main__":
    sys.exit(main())
