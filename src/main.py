"""
Main entry point for generating Magic Four Squared puzzles.

Usage:
    python -m src.main config.yaml
    python -m src.main config.yaml --output puzzles/ --count 10 --verbose
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from .generator import GeneratorConfig, PuzzleGenerator


def load_config(config_path: str, **overrides) -> GeneratorConfig:
    """Load generator configuration from a YAML file, applying non-None overrides."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    data.update({key: value for key, value in overrides.items() if value is not None})
    return GeneratorConfig(**data)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate 4x4 word square puzzles with riddles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  wordlist: wordlists/eng-4.txt
  output: puzzles
  language: en
  count: 5
  difficulty: medium
  search_order: first_word
  model: gpt-4o
  temperature: 0.7
        """
    )
    parser.add_argument(
        "config",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--wordlist",
        help="Word list file (overrides config)"
    )
    parser.add_argument(
        "--output", "-o",
        help="Output directory for puzzles (overrides config)"
    )
    parser.add_argument(
        "--language",
        help="Language code, e.g. en or he (overrides config)"
    )
    parser.add_argument(
        "--count",
        type=int,
        help="Number of puzzles to generate, 1-100 (overrides config)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for the search (overrides config)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log progress to stderr"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(
            args.config,
            wordlist=args.wordlist,
            output=args.output,
            language=args.language,
            count=args.count,
            seed=args.seed,
        )
    except (OSError, yaml.YAMLError, ValidationError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        generator = PuzzleGenerator.create(config)
    except (OSError, ValueError) as e:
        print(f"Error loading word list: {e}", file=sys.stderr)
        return 1

    result = generator.run()

    if result.squares_found == 0:
        print("No magic squares found in the word list.", file=sys.stderr)
        print("Try using a larger word list or different words.", file=sys.stderr)
        return 1

    # Print summary
    print()
    print("=== Generation Summary ===")
    print(f"Words loaded: {result.words_loaded}")
    print(f"Squares found: {result.squares_found}")
    print(f"Puzzles written: {len(result.files)}")
    if result.rejected:
        print(f"Rejected: {result.rejected}")
    print(f"Output directory: {config.output}")
    print(f"Duration: {result.duration_seconds:.2f}s")
    for i, path in enumerate(result.files, start=1):
        print(f"  {i}. {Path(path).name}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
