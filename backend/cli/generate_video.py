#!/usr/bin/env python3
"""
CLI tool to record a headless funkysnake game as an MP4

Usage:
    python generate_video.py --seed <seed> [--player random|scripted]

Examples:
    # Random player, reproducible apples and moves
    python generate_video.py --seed 7 --player_seed 3

    # Scripted moves
    python generate_video.py --seed 0 --player scripted --moves "R,R,D,D,L"

    # Custom output path and video settings
    python generate_video.py --seed 7 --output ./my_video.mp4 --fps 15 --cell_size 20
"""

import os
import sys
import argparse
import logging

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import LOG_FORMAT, load_config  # noqa: E402
from main import SnakeGame, add_game_arguments, build_player, play_game  # noqa: E402
from services.video_generator import DEFAULT_FPS, SnakeVideoGenerator  # noqa: E402

logger = logging.getLogger(__name__)


def default_output_path(game_id: str) -> str:
    """Videos land in ./videos/<game_id>_replay.mp4 unless --output is given"""
    return os.path.join("videos", f"{game_id}_replay.mp4")


def main():
    parser = argparse.ArgumentParser(
        description='Record a headless funkysnake game as an MP4',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    add_game_arguments(parser)

    # Output options
    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output video file path (default: videos/<game_id>_replay.mp4)'
    )

    # Video settings
    parser.add_argument(
        '--fps',
        type=int,
        default=DEFAULT_FPS,
        help=f'Frames per second (default: {DEFAULT_FPS})'
    )
    parser.add_argument(
        '--cell_size',
        type=int,
        default=None,
        help='Cell size in pixels (default: SNAKE_CELL_SIZE)'
    )

    args = parser.parse_args()

    config = load_config()
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)

    try:
        player = build_player(args.player, seed=args.player_seed, moves=args.moves)
        game = SnakeGame(
            width=args.width,
            height=args.height,
            seed=args.seed,
            max_rounds=args.max_rounds,
            strategy=args.strategy
        )
        logger.info(f"Simulating game {game.game_id} with seed {game.seed}...")
        play_game(game, player)
        logger.info(f"Game finished: {game.game_result}")

        generator = SnakeVideoGenerator(
            fps=args.fps,
            cell_size=args.cell_size or config.cell_size
        )
        video_path = generator.generate_video(
            game.history,
            game_id=game.game_id,
            output_path=args.output or default_output_path(game.game_id)
        )

        logger.info(f"[OK] Video generated successfully: {video_path}")
        logger.info("Done!")

    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
