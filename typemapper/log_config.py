import atexit
import json
import logging
import logging.handlers
import queue
from typing import Optional

# Resolution runs on the caller's thread; records are handed off to the
# listener thread so a lookup never waits on stream I/O.
_log_queue: queue.SimpleQueue = queue.SimpleQueue()
queue_handler = logging.handlers.QueueHandler(_log_queue)

console_handler = logging.StreamHandler()

listener = logging.handlers.QueueListener(_log_queue, console_handler)
listener.start()
# drain what is still queued when the interpreter exits
atexit.register(listener.stop)

logger = logging.getLogger("typemapper")
logger.setLevel(logging.DEBUG)
logger.addHandler(queue_handler)


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        return json.dumps(payload)


def configure_logging(
    json_logging: bool = False, level: Optional[int] = None
) -> logging.Formatter:
    """
    Pick JSON or text output for resolver logs and, optionally, the level of
    the `typemapper` logger (DEBUG by default, which traces every cache miss).
    Returns the formatter now installed on the console handler.
    """
    formatter: logging.Formatter
    if json_logging:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)s [%(name)s] %(message)s"
        )
    console_handler.setFormatter(formatter)
    if level is not None:
        logger.setLevel(level)
    return formatter
