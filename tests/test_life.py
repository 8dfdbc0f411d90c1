import io
import unittest
from unittest import mock

import life
import logutil
from game_of_life import DEMO_SEED, GameOfLife


class FakeConsole:

    def __init__(self, keys=()):
        self.keys = list(keys)
        self.frames = []
        self.timeouts = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.closed = True
        return False

    def poll_key(self, timeout):
        self.timeouts.append(timeout)
        return self.keys.pop(0) if self.keys else None

    def draw(self, text):
        self.frames.append(text)


class TestRun(unittest.TestCase):

    def test_stops_on_key(self):
        board = life.build_board(5, 5, 'blinker')
        first = str(board)
        console = FakeConsole([None, None, 'x'])
        generations = life.run(board, console, interval=0.25)
        self.assertEqual(generations, 2)
        self.assertEqual(board.generation, 2)
        self.assertEqual(len(console.frames), 2)
        self.assertEqual(console.frames[0], first + life.FOOTER)
        self.assertEqual(console.timeouts, [0.25, 0.25, 0.25])

    def test_key_before_first_frame(self):
        board = GameOfLife(3, 3)
        console = FakeConsole(['q'])
        self.assertEqual(life.run(board, console), 0)
        self.assertEqual(console.frames, [])
        self.assertEqual(board.generation, 0)

    def test_max_generations(self):
        board = life.build_board(5, 5, 'blinker')
        console = FakeConsole()
        self.assertEqual(life.run(board, console, interval=0, max_generations=5), 5)
        self.assertEqual(board.generation, 5)
        self.assertEqual(len(console.frames), 5)


class TestBuildBoard(unittest.TestCase):

    def test_demo_seed(self):
        board = life.build_board(life.DEFAULT_WIDTH, life.DEFAULT_HEIGHT)
        self.assertEqual(board.count_alive(), len(DEMO_SEED))

    def test_pattern_is_centred(self):
        board = life.build_board(5, 5, 'blinker')
        self.assertEqual(board.lines(alive='#', dead='.')[2], '.###.')
        self.assertEqual(board.count_alive(), 3)


class TestParseArgs(unittest.TestCase):

    def test_defaults(self):
        args = life.parse_args([])
        self.assertEqual(args.width, life.DEFAULT_WIDTH)
        self.assertEqual(args.height, life.DEFAULT_HEIGHT)
        self.assertEqual(args.interval, life.TICK_INTERVAL)
        self.assertIsNone(args.pattern)
        self.assertIsNone(args.generations)

    def test_rejects_zero_width(self):
        with mock.patch('sys.stderr'):
            with self.assertRaises(SystemExit):
                life.parse_args(['--width', '0'])

    def test_rejects_negative_interval(self):
        with mock.patch('sys.stderr'):
            with self.assertRaises(SystemExit) as cm:
                life.parse_args(['--interval', '-1'])
        self.assertEqual(cm.exception.code, 2)

    def test_rejects_negative_pause(self):
        with mock.patch('sys.stderr'):
            with self.assertRaises(SystemExit) as cm:
                life.parse_args(['--pause', '-0.5'])
        self.assertEqual(cm.exception.code, 2)

    def test_accepts_zero_timings(self):
        args = life.parse_args(['--interval', '0', '--pause', '0'])
        self.assertEqual(args.interval, 0.0)
        self.assertEqual(args.pause, 0.0)

    def test_rejects_pattern_larger_than_board(self):
        with mock.patch('sys.stderr'):
            with self.assertRaises(SystemExit) as cm:
                life.parse_args(['--pattern', 'beacon', '--width', '2', '--height', '2'])
        self.assertEqual(cm.exception.code, 2)

    def test_accepts_pattern_that_fits_exactly(self):
        args = life.parse_args(['--pattern', 'beacon', '--width', '4', '--height', '4'])
        self.assertEqual(life.pattern_size(args.pattern), (4, 4))

    def test_rejects_unknown_pattern(self):
        with mock.patch('sys.stderr'):
            with self.assertRaises(SystemExit):
                life.parse_args(['--pattern', 'spaceship'])


class TestMain(unittest.TestCase):

    def test_main_runs_requested_generations(self):
        console = FakeConsole()
        with mock.patch('life.Console', return_value=console), \
                mock.patch('life.logutil.init_log') as init_log, \
                mock.patch('life.time.sleep') as sleep, \
                mock.patch('sys.stdout', new_callable=io.StringIO) as stdout:
            status = life.main(['--pattern', 'block', '--generations', '3',
                                '--pause', '0.5', '--interval', '0', '--width', '6',
                                '--height', '6'])
        self.assertEqual(status, 0)
        init_log.assert_called_once()
        sleep.assert_called_once_with(0.5)
        self.assertEqual(len(console.frames), 3)
        self.assertTrue(console.closed)
        self.assertIn(' after 3 generations (', stdout.getvalue())


class TestTiming(unittest.TestCase):

    def test_timing_format(self):
        with mock.patch('logutil.time.time', return_value=3725):
            logutil.prev_t = 0
            self.assertEqual(logutil.timing(), '1:2:5')
            self.assertEqual(logutil.prev_t, 3725)


if __name__ == "__main__":
    unittest.main()
