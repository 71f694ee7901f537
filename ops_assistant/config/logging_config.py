import json
import logging
import sys


class JsonFormatter(logging.Formatter):
    """
    Formats logs as JSON rows for better machine readability (Docker/ELK).
    """

    def format(self, record):
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "funcName": record.funcName,
            "line": record.lineno
        }

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_record)


def setup_logging(name: str = "ops_assistant",
                  log_level: int = logging.INFO,
                  use_json: bool = True) -> logging.Logger:
    _logger = logging.getLogger(name)
    _logger.setLevel(log_level)

    if not _logger.handlers:
        # stderr keeps the log stream apart from the console conversation on stdout
        _logger.addHandler(logging.StreamHandler(sys.stderr))

    if use_json:
        formatter = JsonFormatter(datefmt='%Y-%m-%d %H:%M:%S')
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    # Calling again reconfigures the existing handler instead of adding another one.
    for handler in _logger.handlers:
        handler.setLevel(log_level)
        handler.setFormatter(formatter)

    return _logger


# Create a default logger instance
logger = setup_logging()
