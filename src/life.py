import argparse
import logging
import time

from termcolor import colored

from console import Console
from game_of_life import DEMO_SEED, PATTERNS, GameOfLife, place
import logutil

DEFAULT_WIDTH = 30
DEFAULT_HEIGHT = 30
TICK_INTERVAL = 0.4   # seconds between generations, also the key poll timeout
START_PAUSE = 3       # seconds the first frame stays up before the animation
FOOTER = 'Press any key to exit...'


def pattern_size(name):
    """(rows, cols) of the smallest box holding pattern `name`."""
    rows = max(r for r, _ in PATTERNS[name]) + 1
    cols = max(c for _, c in PATTERNS[name]) + 1
    return rows, cols


def build_board(width, height, pattern=None):
    """Create a board seeded with a named pattern in the middle, or the demo seed."""
    board = GameOfLife(width, height)
    if pattern is None:
        board.seed(DEMO_SEED)
    else:
        rows, cols = pattern_size(pattern)
        board.seed(place(pattern, (height - rows) // 2, (width - cols) // 2))
    return board


def run(board, console, interval=TICK_INTERVAL, max_generations=None):
    """Draw and tick until a key is pressed; return the generations advanced."""
    generations = 0
    while max_generations is None or generations < max_generations:
        key = console.poll_key(interval)
        if key is not None:
            logging.info('Exit requested at generation {}.'.format(board.generation))
            break
        console.draw(str(board) + FOOTER)
        board.tick()
        generations += 1
    return generations


def positive_int(text):
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError('must be a positive integer: {}'.format(text))
    return value


def non_negative_float(text):
    value = float(text)
    if value < 0:
        raise argparse.ArgumentTypeError('must not be negative: {}'.format(text))
    return value


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Conway's Game of Life in the terminal.")
    parser.add_argument('--width', type=positive_int, default=DEFAULT_WIDTH)
    parser.add_argument('--height', type=positive_int, default=DEFAULT_HEIGHT)
    parser.add_argument('--interval', type=non_negative_float, default=TICK_INTERVAL,
                        help='seconds between generations')
    parser.add_argument('--pause', type=non_negative_float, default=START_PAUSE,
                        help='seconds to show the first generation before animating')
    parser.add_argument('--pattern', choices=sorted(PATTERNS),
                        help='seed a named pattern in the middle instead of the demo seed')
    parser.add_argument('--generations', type=positive_int,
                        help='stop after this many generations')
    parser.add_argument('--log-file', default=logutil.LOG_PATH)
    parser.add_argument('--verbose', action='store_true', help='log every generation')
    args = parser.parse_args(argv)
    if args.pattern is not None:
        rows, cols = pattern_size(args.pattern)
        if rows > args.height or cols > args.width:
            parser.error('pattern {} needs at least {}x{} cells, the board is {}x{}'.format(
                args.pattern, cols, rows, args.width, args.height))
    return args


def main(argv=None):
    args = parse_args(argv)
    logutil.init_log('terminal', args.log_file, logging.DEBUG if args.verbose else logging.INFO)
    board = build_board(args.width, args.height, args.pattern)

    print(board)
    time.sleep(args.pause)

    logutil.timing()
    with Console() as console:
        generations = run(board, console, args.interval, args.generations)
    elapsed = logutil.timing()
    logging.info('Ran {} generations in {}.'.format(generations, elapsed))
    print(colored('Stopped', 'green', attrs=['bold']) + ' after {} generations ({}).'.format(generations, elapsed))
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
