import logging
import select
import sys
import termios
import tty

from termcolor import colored

ENTER_ALT_SCREEN = '\033[?1049h'
LEAVE_ALT_SCREEN = '\033[?1049l'
HIDE_CURSOR = '\033[?25l'
SHOW_CURSOR = '\033[?25h'
CLEAR = '\033[2J\033[H'


class Console:
    """Full-screen terminal session for drawing frames and catching key presses.

    Use it as a context manager: entering switches to the alternate screen,
    hides the cursor and puts stdin in cbreak mode so single key presses can
    be read without Enter. Leaving undoes all of it, also when the body raised.
    """

    def __init__(self, stdin=None, stdout=None, color='magenta'):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.color = color
        self._saved_attrs = None

    def __enter__(self):
        if self.stdin.isatty():
            fd = self.stdin.fileno()
            self._saved_attrs = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        else:
            logging.warning('stdin is not a terminal, key presses need Enter.')
        self._write(ENTER_ALT_SCREEN + HIDE_CURSOR)
        return self

    def __exit__(self, exc_type, exc, tb):
        if self._saved_attrs is not None:
            termios.tcsetattr(self.stdin.fileno(), termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None
        self._write(SHOW_CURSOR + LEAVE_ALT_SCREEN)
        return False

    def poll_key(self, timeout):
        """Wait up to `timeout` seconds for a key; return it, or None."""
        ready, _, _ = select.select([self.stdin], [], [], timeout)
        if not ready:
            return None
        key = self.stdin.read(1)
        logging.debug('Key pressed: {!r}'.format(key))
        return key

    def draw(self, text):
        """Clear the screen and write `text` from the top-left corner."""
        self._write(CLEAR + colored(text, self.color))

    def _write(self, text):
        self.stdout.write(text)
        self.stdout.flush()
