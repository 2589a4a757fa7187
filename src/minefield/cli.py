"""
Command line driver for the Minefield engine.

Usage:
    python main.py play [--difficulty NAME | --width W --height H --mines N]
    python main.py simulate [--games N] [--difficulty NAME]
"""
import argparse
import logging
import random
import time
from typing import Callable, Iterable, Optional

from .agents import RandomAgent
from .config import BoardConfig, CUSTOM, DIFFICULTIES, InvalidBombCount
from .environment import MinesweeperEnv, WON, render_observation
from .session import GameSession

logger = logging.getLogger(__name__)

HELP_TEXT = "Commands: r X Y (reveal/chord), f X Y (flag), c X Y (chord), q (quit)"


# ============================================================================
# Interactive Play
# ============================================================================

def run_commands(
    session: GameSession,
    commands: Iterable[str],
    output: Callable[[str], None] = print,
) -> Optional[bool]:
    """
    Apply text commands to a session until the game ends.

    Args:
        session: Session to play on.
        commands: Lines such as ``"r 3 4"``; x is the row, y the column.
        output: Sink for user-facing text.

    Returns:
        True on a win, False on a loss, None if the commands ran out or
        the player quit.
    """
    for line in commands:
        parts = line.split()
        if not parts:
            continue
        verb = parts[0].lower()
        if verb == "q":
            return None
        if verb not in ("r", "f", "c") or len(parts) != 3:
            output(HELP_TEXT)
            continue
        try:
            x, y = int(parts[1]), int(parts[2])
        except ValueError:
            output(HELP_TEXT)
            continue

        if verb == "f":
            session.toggle_flag(x, y)
            hit_mine = False
        elif verb == "c":
            hit_mine = session.chord_reveal(x, y)
        else:
            hit_mine = session.tap(x, y)

        output(render_observation(session.get_observation()))
        output(f"Mines left: {session.remaining_mines}")

        if hit_mine:
            output("BOOM! You hit a mine.")
            return False
        if session.check_win():
            output("You cleared the board!")
            return True
    return None


def _input_lines() -> Iterable[str]:
    while True:
        try:
            yield input("> ")
        except EOFError:
            return


def play(args: argparse.Namespace) -> None:
    """Play one interactive game on the terminal."""
    config = _config_from_args(args)
    rng = random.Random(args.seed) if args.seed is not None else None
    session = GameSession.from_config(config, rng=rng)
    session.current_player = args.player

    print(
        f"Board: {config.height} rows x {config.width} columns, "
        f"{config.num_mines} mines"
    )
    print(HELP_TEXT)
    print(render_observation(session.get_observation()))

    start = time.monotonic()
    won = run_commands(session, _input_lines())
    session.current_time_in_seconds = int(time.monotonic() - start)

    if won:
        record_win(session)
        print(
            f"Time: {session.current_time_in_seconds}s "
            f"(best {session.best_time_in_seconds}s by {session.best_player})"
        )


def record_win(session: GameSession) -> None:
    """Copy the current time into the best-time fields if it is better."""
    best = session.best_time_in_seconds
    if best == 0 or session.current_time_in_seconds < best:
        session.best_time_in_seconds = session.current_time_in_seconds
        session.best_player = session.current_player


# ============================================================================
# Simulation
# ============================================================================

def simulate(args: argparse.Namespace) -> float:
    """Run the random agent for a number of games and report its win rate."""
    config = _config_from_args(args)
    env = MinesweeperEnv(config=config)
    agent = RandomAgent(config.height, config.width, seed=args.seed)

    wins = 0
    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        obs, _ = env.reset(seed=seed)
        agent.reset()
        done = False
        info = {}

        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            obs, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated

        if info.get("game_state") == WON:
            wins += 1
        logger.debug("Game %d finished: %s", game + 1, info.get("game_state"))

    win_rate = wins / args.games if args.games else 0.0
    print(f"Random agent: {wins}/{args.games} wins ({win_rate:.1%})")
    return win_rate


# ============================================================================
# Argument Parsing
# ============================================================================

def _config_from_args(args: argparse.Namespace) -> BoardConfig:
    overrides = (args.width, args.height, args.mines)
    if any(value is not None for value in overrides):
        base = DIFFICULTIES.get(args.difficulty, CUSTOM)
        return BoardConfig(
            width=base.width if args.width is None else args.width,
            height=base.height if args.height is None else args.height,
            num_mines=base.num_mines if args.mines is None else args.mines,
        )
    return DIFFICULTIES[args.difficulty]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Minefield engine")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_board_args(sub: argparse.ArgumentParser) -> None:
        sub.add_argument(
            "--difficulty",
            choices=sorted(DIFFICULTIES),
            default="custom",
            help="Preset board size",
        )
        sub.add_argument("--width", type=int, default=None, help="Columns")
        sub.add_argument("--height", type=int, default=None, help="Rows")
        sub.add_argument("--mines", type=int, default=None, help="Mine count")
        sub.add_argument("--seed", type=int, default=None, help="Random seed")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_board_args(play_parser)
    play_parser.add_argument("--player", default="Player", help="Player name")
    play_parser.set_defaults(func=play)

    sim_parser = subparsers.add_parser("simulate", help="Run the random agent")
    add_board_args(sim_parser)
    sim_parser.add_argument("--games", type=int, default=100, help="Number of games")
    sim_parser.set_defaults(func=simulate)

    return parser


def main(argv: Optional[list] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        args.func(args)
    except InvalidBombCount as error:
        parser.error(str(error))
    except ValueError as error:
        parser.error(f"invalid board: {error}")
    return 0
