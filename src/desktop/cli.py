"""
Minesweeper command-line launcher
"""

import argparse
import logging
import sys

from minefield import GameController, SettingsStore
from minefield.config import CUSTOM, DIFFICULTIES, Settings, clamp_custom

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Play Minesweeper')
    parser.add_argument('--difficulty', choices=list(DIFFICULTIES) + [CUSTOM],
                        help='Board preset (default: last one played)')
    parser.add_argument('--width', type=int, help='Custom board width (4-60)')
    parser.add_argument('--height', type=int, help='Custom board height (4-40)')
    parser.add_argument('--mines', type=int, help='Custom mine count')
    parser.add_argument('--data-file', help='Settings and best-times file '
                        '(default: ~/.minesweeper/settings.json)')
    parser.add_argument('--no-safe-first', action='store_true',
                        help='Allow the first click to hit a mine')
    parser.add_argument('--no-flood-fill', action='store_true',
                        help='Do not auto-reveal empty areas')
    parser.add_argument('--sound', action='store_true', help='Enable sound cues')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace, settings: Settings) -> Settings:
    """Apply command-line overrides on top of stored settings"""
    if args.width is not None or args.height is not None or args.mines is not None:
        settings.custom = clamp_custom(
            args.width if args.width is not None else settings.custom.width,
            args.height if args.height is not None else settings.custom.height,
            args.mines if args.mines is not None else settings.custom.mines,
        )
        settings.difficulty = CUSTOM
    elif args.difficulty:
        settings.difficulty = args.difficulty

    if args.no_safe_first:
        settings.safe_first = False
    if args.no_flood_fill:
        settings.flood_fill = False
    if args.sound:
        settings.sound_enabled = True
    return settings


def main(argv=None):
    """Main entry point for the minesweeper game"""
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    store = SettingsStore(args.data_file)
    settings = build_settings(args, store.load_settings())
    store.save_settings(settings)
    controller = GameController(store, settings)

    try:
        from .gui import MinesweeperGUI
        MinesweeperGUI(controller).run()
    except KeyboardInterrupt:
        logger.info("Game interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.error("Error running minesweeper: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
