"""Module for initializing settings related to the built-in ledger logger
Functions:
-get_logger"""

import logging, coloredlogs
import os

VALID_LVLS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL', 'OFF']
_LOG_LVL = os.getenv('LOG_LEVEL', None)
if _LOG_LVL:
    assert _LOG_LVL in VALID_LVLS, "Log level {} not in valid levels {}".format(_LOG_LVL, VALID_LVLS)
    _LOG_LVL = -1 if _LOG_LVL == 'OFF' else getattr(logging, _LOG_LVL)
else:
    _LOG_LVL = logging.WARNING

_LOG_FILE = os.getenv('LOG_FILE', None)

format = '%(asctime)s.%(msecs)03d %(name)s[%(process)d] <{}> %(levelname)-2s %(message)s'.format(
    os.getenv('HOST_NAME', 'Node'))

"""
Custom Styling
"""

LEVEL_STYLES = {
    'critical': {'color': 'white', 'bold': True, 'background': 'red'},
    'error': {'color': 'red'},
    'warning': {'color': 'yellow'},
    'info': {'color': 'white'},
    'debug': {'color': 'green'},
}

FIELD_STYLES = {
    'asctime': {'color': 'green'},
    'hostname': {'color': 'magenta'},
    'levelname': {'color': 'black', 'bright': True},
    'name': {'color': 'blue'},
    'programname': {'color': 'cyan'}
}


class ColoredStreamHandler(logging.StreamHandler):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.setFormatter(
            coloredlogs.ColoredFormatter(format, level_styles=LEVEL_STYLES, field_styles=FIELD_STYLES)
        )


def _ignore(*args, **kwargs):
    pass


class MockLogger:
    def __getattr__(self, item):
        return _ignore


def _handlers():
    handlers = [ColoredStreamHandler()]

    if _LOG_FILE:
        log_dir = os.path.dirname(_LOG_FILE)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(_LOG_FILE, delay=True)
        file_handler.setFormatter(logging.Formatter(format))
        handlers.append(file_handler)

    return handlers


def get_logger(name=''):
    if _LOG_LVL < 0:
        return MockLogger()

    log = logging.getLogger(name)

    if not log.handlers:
        for handler in _handlers():
            log.addHandler(handler)
        log.propagate = False

    log.setLevel(_LOG_LVL)

    return log

