"""
Logging setup for nouncount.

Library modules only create named loggers; handlers are installed once by the
command-line front end through `setup_logging`.
"""
import logging
import sys
from datetime import datetime

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
DEBUG_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'

# Context values longer than this are cut off in debug output
MAX_CONTEXT_LENGTH = 200


def setup_logging(log_file=None, level=logging.WARNING, debug=False, stream=None):
    """
    Route log records to the console and, optionally, a log file.

    Args:
        log_file: Path of a file to append log records to. None logs to the
            console only.
        level: Logging level (default: WARNING, so parse output stays clean).
        debug: If True, use DEBUG level and include logger name, file and line.
        stream: Console stream (default: stderr, keeping stdout for results).

    Returns:
        The handlers that were installed on the root logger.
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if debug:
        level = logging.DEBUG
    formatter = logging.Formatter(DEBUG_LOG_FORMAT if debug else LOG_FORMAT)

    handlers = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

    logging.info("=" * 80)
    logging.info(f"nouncount run started - {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    if debug:
        logging.info("Debug logging enabled: every parsed sentence is logged with its segments")
    logging.info("=" * 80)

    return handlers


def log_with_context(message, context=None, level=logging.DEBUG, logger=None,
                     max_length=MAX_CONTEXT_LENGTH):
    """
    Log a message followed by one debug line per context item.

    Args:
        message: Main log message
        context: Dict of contextual information (e.g. sentence content, segments)
        level: Level of the main message (default: DEBUG)
        logger: Logger to write to (default: root logger)
        max_length: Longest context value printed before truncation
    """
    logger = logger or logging.getLogger()
    logger.log(level, message)

    if not context or not logger.isEnabledFor(logging.DEBUG):
        return

    for key, value in context.items():
        text = str(value)
        if len(text) > max_length:
            text = text[:max_length] + "..."
        logger.debug(f"  └─ {key}: {text}")
