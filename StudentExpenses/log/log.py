import logging
import sys

from PySide6.QtCore import QtMsgType, qInstallMessageHandler

from ..ui.actions import signals

LOG_LEVEL = logging.DEBUG
LOG_FORMAT = '[%(asctime)s] <%(module)s> %(levelname)s:  %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'

LEVELS = (
    logging.DEBUG,
    logging.INFO,
    logging.WARNING,
    logging.ERROR,
    logging.CRITICAL,
)


def set_logging_level(level):
    """
    Sets the logging level of the root logger and its handlers.

    Args:
        level (int): One of the standard logging levels.

    Raises:
        ValueError: If the level is not a standard logging level.
    """
    if not isinstance(level, int):
        raise ValueError('Logging level must be an integer.')
    if level not in LEVELS:
        raise ValueError('Invalid logging level. Use one of the standard logging levels, e.g., logging.DEBUG.')

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def qt_message_handler(mode, context, message):
    """
    Converts Qt messages to standard Python logging.
    """
    logger = logging.getLogger('Qt')
    message = message.strip()

    if mode == QtMsgType.QtDebugMsg:
        logger.debug(message)
    elif mode == QtMsgType.QtInfoMsg:
        logger.info(message)
    elif mode == QtMsgType.QtWarningMsg:
        logger.warning(message)
    elif mode == QtMsgType.QtCriticalMsg:
        logger.error(message)
    elif mode == QtMsgType.QtFatalMsg:
        logger.critical(message)
        sys.exit(1)


def setup_logging(enable_stream_handler=True, enable_qt_handler=True, log_level=LOG_LEVEL):
    """
    Configures the root logger and installs the Qt message handler.

    Args:
        enable_stream_handler (bool): Log to stdout.
        enable_qt_handler (bool): Route Qt's own messages through Python logging.
        log_level (int): The initial logging level.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Clear all handlers to avoid formatting conflicts
    root_logger.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    if enable_stream_handler:
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        stream_handler.setLevel(log_level)
        root_logger.addHandler(stream_handler)

    tank_handler = TankHandler()
    tank_handler.setFormatter(formatter)
    tank_handler.setLevel(log_level)
    root_logger.addHandler(tank_handler)

    if enable_qt_handler:
        qInstallMessageHandler(qt_message_handler)


class TankHandler(logging.Handler):
    """
    Logging handler that keeps formatted log messages in an in-memory tank.

    The log dock polls the tank to display the session's messages. Errors and
    criticals also ask the main window to reveal the log dock.

    Attributes:
        tank (list[tuple[int, str]]): Pairs of log level and formatted message.
    """

    def __init__(self):
        super().__init__()
        self.tank = []

    def emit(self, record):
        """
        Formats a log record and stores it in the tank.

        Args:
            record (logging.LogRecord): The log record to be processed.
        """
        try:
            message = self.format(record)
            self.tank.append((record.levelno, message))
            if record.levelno >= logging.ERROR:
                signals.showLogs.emit()
        except Exception:
            self.handleError(record)

    def get_logs(self, level=logging.NOTSET):
        """
        Returns the stored log messages at or above a logging level.

        Args:
            level (int, optional): The minimum logging level. Defaults to logging.NOTSET.

        Returns:
            list[str]: The formatted log messages.
        """
        return [msg for lvl, msg in self.tank if lvl >= level]

    def clear_logs(self):
        """
        Clears all the stored log messages from the tank.
        """
        self.tank.clear()


def get_handler():
    """Returns the TankHandler of the root logger.

    Raises:
        RuntimeError: If there isn't exactly one TankHandler installed.
    """
    handlers = [h for h in logging.getLogger().handlers if isinstance(h, TankHandler)]
    if not handlers:
        raise RuntimeError('TankHandler not found in root logger')
    if len(handlers) > 1:
        raise RuntimeError('Multiple TankHandlers found in root logger')
    return handlers[0]
