"""
Main entry point for generating LexiClash boards and checking words.

Usage:
    python -m lexiclash.main config.yaml
    python -m lexiclash.main --language he --difficulty EASY --embed שלום
    python -m lexiclash.main config.yaml --words CAT DOG --output results/round.json --verbose
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .alphabets import UnsupportedLanguage
from .board import render_grid
from .environment import GameRound, RoundConfig


def read_config_file(config_path: str) -> Dict[str, Any]:
    """Read a YAML config file into a plain dictionary."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_config(config_path: str) -> RoundConfig:
    """Load round configuration from a YAML file."""
    return RoundConfig(**read_config_file(config_path))


def build_config(args: argparse.Namespace) -> RoundConfig:
    """Merge command-line overrides into the (optional) YAML config."""
    data: Dict[str, Any] = read_config_file(args.config) if args.config else {}

    overrides = {
        "language": args.language,
        "difficulty": args.difficulty,
        "rows": args.rows,
        "cols": args.cols,
        "seed": args.seed,
        "words_to_embed": args.embed,
    }
    data.update({k: v for k, v in overrides.items() if v is not None})
    return RoundConfig(**data)


def play_words(game: GameRound, words: List[str], interval: float) -> None:
    """Submit words for the first player, `interval` seconds apart."""
    player_id = next(iter(game.players))
    game.start(now=0.0)
    for i, word in enumerate(words, start=1):
        now = i * interval
        if game.is_over(now):
            print(f"  Round over after {game.config.duration_seconds}s, {len(words) - i + 1} word(s) not submitted")
            break
        result = game.submit(player_id, word, now=now)
        if result.accepted:
            print(
                f"  + {result.word}: {result.score.total} "
                f"(base {result.score.base}, combo +{result.score.combo_bonus}, "
                f"combo level {result.new_combo_level})"
            )
        else:
            print(f"  - {word}: {result.reason}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate a LexiClash board and check words against it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  language: en
  difficulty: EASY
  seed: 42
  words_to_embed:
    - CAT
    - HOUSE
  players:
    - Alice
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML round configuration (optional)"
    )
    parser.add_argument("--language", "-l", help="Board language (en, he, sv, ja)")
    parser.add_argument("--difficulty", "-d", help="Difficulty preset (EASY, MEDIUM, HARD)")
    parser.add_argument("--rows", type=int, help="Grid rows (overrides difficulty)")
    parser.add_argument("--cols", type=int, help="Grid columns (overrides difficulty)")
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible board")
    parser.add_argument("--embed", nargs="+", help="Words to embed in the board")
    parser.add_argument("--words", nargs="+", default=[], help="Words to submit against the board")
    parser.add_argument(
        "--interval",
        type=float,
        default=1.0,
        help="Seconds between submitted words (default: 1.0)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the round result JSON"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug-level logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = build_config(args)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        game = GameRound.create(config)
    except UnsupportedLanguage as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(render_grid(game.grid))
    print()

    if args.words:
        print("Submissions:")
        play_words(game, args.words, args.interval)
        print()

    result = game.get_result()

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.model_dump_json(indent=2), encoding="utf-8")
        print(f"Results saved to: {output_path}")

    # Print summary
    print("=== Round Summary ===")
    print(f"Board: {config.rows}x{config.cols} ({config.language})")
    print(f"Embedded: {', '.join(result.embedded_words) or '-'}")
    for standing in result.leaderboard:
        print(f"{standing.name}: {standing.score} point(s), {len(standing.words)} word(s)")
    if result.winner:
        print(f"Winner: {result.winner}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
