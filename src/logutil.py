# Simple logging util.

import logging
import pathlib
import time


LOG_PATH = 'terminal_life.log'


def init_log(title, log_path=None, lvl=logging.INFO):
    # Logs go to a file: anything written to the terminal would land in the frames.
    log_path = pathlib.Path(log_path or LOG_PATH)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(log_path),
        level=lvl,
        format='%(asctime)s | %(levelname)s | %(message)s')
    logging.info('Game of life [{}] started logging at {}.'.format(title, log_path))
    return log_path


prev_t = time.time()


def timing():
    """Time elapsed since the previous call, as h:m:s."""
    global prev_t
    t = time.time()
    t_sec = round(t - prev_t)
    (t_min, t_sec) = divmod(t_sec, 60)
    (t_hour, t_min) = divmod(t_min, 60)
    prev_t = t
    return '{}:{}:{}'.format(t_hour, t_min, t_sec)
