import logging
import sys

# ANSI colors for level names
COLORS = {
    'TRACE': '\033[90m',     # Gray
    'DEBUG': '\033[36m',     # Cyan
    'INFO': '\033[32m',      # Green
    'WARNING': '\033[33m',   # Yellow
    'ERROR': '\033[31m',     # Red
    'CRITICAL': '\033[35m',  # Magenta
    'RESET': '\033[0m',
}


class ColoredFormatter(logging.Formatter):
    def format(self, record):
        color = COLORS.get(record.levelname, '')
        reset = COLORS['RESET'] if color else ''
        # format a copy so other handlers see the plain level name
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname: <8}{reset}"
        return super().format(record)


# Standard levels for reference:
# CRITICAL = 50, ERROR = 40, WARNING = 30, INFO = 20, DEBUG = 10
TRACE = 5     # Below DEBUG, one line per emitted cell

logging.addLevelName(TRACE, 'TRACE')


def trace(self, message, *args, **kwargs):
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, stacklevel=2, **kwargs)


logging.Logger.trace = trace

handler = logging.StreamHandler(sys.stderr)
handler.setFormatter(ColoredFormatter('%(levelname)s | %(message)s'))

logger = logging.getLogger('treemapper')
logger.addHandler(handler)
logger.setLevel('INFO')


def set_verbosity(level):
    """Set log level and format based on verbosity (0=INFO, 1=DEBUG, 2+=TRACE)."""
    if level >= 1:
        # Verbose format with file:line
        handler.setFormatter(ColoredFormatter(
            '%(levelname)s | %(filename)s:%(lineno)d | %(message)s'
        ))
    else:
        handler.setFormatter(ColoredFormatter('%(levelname)s | %(message)s'))

    if level <= 0:
        logger.setLevel('INFO')
    elif level == 1:
        logger.setLevel('DEBUG')
    else:
        logger.setLevel('TRACE')
