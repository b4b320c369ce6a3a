from datetime import datetime
import os
import sys
import json
import logging
import tempfile

# Configure JSON logging


class JsonLogger(logging.Formatter):
    """Formatter that outputs JSON strings after parsing the log record."""

    def format(self, record):
        """
        Format the log record as a JSON string.

        Args:
            record: The log record to format

        Returns:
            str: JSON formatted log string
        """
        log_data = {
            'timestamp': datetime.now().isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'path': record.pathname,
            'line': record.lineno,
            'function': record.funcName
        }

        # Include extra data if available
        if hasattr(record, 'metrics'):
            log_data['metrics'] = record.metrics

        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': self.formatException(record.exc_info)
            }

        # Metrics may carry tuples or other non-JSON values, fall back to str
        return json.dumps(log_data, default=str)


def get_project_root():
    """
    Get the absolute path to the project root directory.

    Returns:
        str: Path to project root directory
    """
    current_dir = os.path.dirname(os.path.abspath(__file__))

    # loggers -> utils -> literate_randomizer -> project root
    return os.path.abspath(os.path.join(current_dir, '..', '..', '..'))


def setup_log_file(log_file_path):
    """
    Make sure the directory of a log file exists.

    Args:
        log_file_path (str): Path to the log file

    Returns:
        str: Path to write to; the temp directory when the requested
             directory cannot be created
    """
    log_dir = os.path.dirname(log_file_path)
    if log_dir and not os.path.exists(log_dir):
        try:
            os.makedirs(log_dir, exist_ok=True)
        except OSError as e:
            print(f"Error creating log directory {log_dir}: {e}", file=sys.stderr)
            log_file_path = os.path.join(
                tempfile.gettempdir(), os.path.basename(log_file_path))

    return log_file_path


def determine_log_path(log_file=None):
    """
    Determine the path for the log file.

    Args:
        log_file (str, optional): Specific log file path

    Returns:
        str: Path to use for logging
    """
    if log_file:
        return setup_log_file(log_file)

    log_dir = os.path.join(get_project_root(), 'logs')
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    default_log_file = os.path.join(
        log_dir, f"literate_randomizer_{timestamp}.log")

    return setup_log_file(default_log_file)


def close_handlers(logger):
    """Detach and close every handler of `logger`, releasing open log files."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def get_logger(logger_name, log_file=None, clear_existing=True, console_json=True,
               console_level=logging.INFO):
    """
    Get a configured logger instance with JSON formatting.

    Console output goes to stderr so generated text on stdout stays clean.
    With `clear_existing` the handlers are rebuilt from the arguments, so a
    later call with a different level or log file takes effect.

    Args:
        logger_name (str): Name for the logger
        log_file (str, optional): Path to the log file, "default" for a
                                  timestamped file under <project>/logs
        clear_existing (bool): Whether to replace existing handlers
        console_json (bool): Whether to use JSON formatting for console output
        console_level (int or str): Minimum level printed to the console

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if clear_existing:
        close_handlers(logger)

    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)

    if console_json:
        console_handler.setFormatter(JsonLogger())
    else:
        console_formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_handler.setFormatter(console_formatter)

    logger.addHandler(console_handler)

    # File handler always logs everything as JSON
    if log_file is not None:
        log_path = determine_log_path(None if log_file == "default" else log_file)
        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(JsonLogger())
        logger.addHandler(file_handler)

    return logger
