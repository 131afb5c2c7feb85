"""
Command-line entry point: run a headless grid snake session.

The board is printed to the terminal after every tick and an automated
player does the steering.
"""

import argparse
import json
import logging
from typing import Dict, Optional

from gridsnake.config import GameConfig
from gridsnake.domain.game_state import GameState
from gridsnake.players import AVAILABLE_VARIANTS, get_player_class, list_variants
from gridsnake.players.base import Player
from gridsnake.services.game_session import GameSession
from gridsnake.services.tick_driver import TickDriver

logger = logging.getLogger(__name__)


def print_board(state: GameState) -> None:
    """Render callback: print the board and the score line."""
    print("\n" + state.print_board())
    print(f"Score: {state.score}  Length: {len(state.snake)}  Interval: {state.speed} ms\n")


def build_player(variant: str, config: GameConfig, script: Optional[str] = None) -> Player:
    return get_player_class(variant).build(rng=config.rng(), script=script)


def run_simulation(config: GameConfig, game_params: argparse.Namespace) -> Dict:
    """
    Runs a single session and returns a summary.

    Args:
        config: Board, speed and scoring settings.
        game_params: An object (like argparse.Namespace) with player, script,
                     ticks, realtime, quiet and json.

    Returns:
        A dictionary with the tick count, reset count and final state.
    """
    player = build_player(game_params.player, config, getattr(game_params, "script", None))
    # Boards would corrupt the JSON document on stdout
    quiet = game_params.quiet or getattr(game_params, "json", False)
    renderer = None if quiet else print_board
    session = GameSession(
        machine=config.build_machine(),
        driver=TickDriver(),
        renderer=renderer,
        player=player,
    )

    logger.info(
        "Starting %sx%s session with %s player for %s ticks",
        config.tile_count, config.tile_count, player.name, game_params.ticks,
    )

    if game_params.realtime:
        session.run(max_ticks=game_params.ticks)
        ticks = session.driver.ticks
    else:
        if renderer is not None:
            renderer(session.state)
        for _ in range(game_params.ticks):
            session.tick()
        ticks = game_params.ticks

    final_state = session.state
    return {
        "ticks": ticks,
        "resets": session.resets,
        "final_state": final_state.to_dict(),
    }


def main():
    parser = argparse.ArgumentParser(
        description="Run a headless grid snake session steered by an automated player."
    )
    parser.add_argument("--player", choices=AVAILABLE_VARIANTS, default="random",
                        help="Which automated player steers the snake: " + "; ".join(
                            f"{v['key']} = {v['description']}" for v in list_variants()))
    parser.add_argument("--script", type=str, default=None,
                        help="Key presses for the scripted player, one per tick (WASD, '-' to skip)")
    parser.add_argument("--ticks", type=int, default=100,
                        help="Number of ticks to run")
    parser.add_argument("--tile-count", type=int, default=None,
                        help="Board size in cells (overrides SNAKE_TILE_COUNT)")
    parser.add_argument("--speed", type=int, default=None,
                        help="Initial tick interval in ms (overrides SNAKE_INITIAL_SPEED_MS)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for food placement and the random player")
    parser.add_argument("--realtime", action="store_true",
                        help="Pace ticks with the tick driver instead of running them back to back")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print the board after each tick")
    parser.add_argument("--json", action="store_true",
                        help="Print only the final summary, as JSON")

    args = parser.parse_args()

    try:
        config = GameConfig.from_env()
    except ValueError as exc:
        parser.error(str(exc))
    if args.tile_count is not None:
        config.tile_count = args.tile_count
    if args.speed is not None:
        config.initial_speed = args.speed
    if args.seed is not None:
        config.seed = args.seed

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if args.ticks < 0:
        parser.error("--ticks must be zero or positive")

    try:
        result = run_simulation(config, args)
    except ValueError as exc:
        parser.error(str(exc))

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        state = result["final_state"]
        print(
            f"Finished {result['ticks']} ticks with {result['resets']} reset(s). "
            f"Final score: {state['score']}, length: {len(state['snake'])}"
        )


if __name__ == "__main__":
    main()
