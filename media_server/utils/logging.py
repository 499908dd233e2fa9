"""Non-blocking queue-based logging setup."""

import atexit
import logging
import logging.handlers
import queue


def setup_logging(level: str = "INFO", log_file: str | None = None) -> logging.handlers.QueueListener:
    """Configure non-blocking logging using a queue.

    Log I/O happens on the listener thread so a slow console or disk never
    stalls request handling.

    Args:
        level: Root log level name (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file to log to in addition to stderr

    Returns the QueueListener so it can be stopped on shutdown.
    """
    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)  # Unlimited size
    queue_handler = logging.handlers.QueueHandler(log_queue)

    log_formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(log_formatter)
    handlers: list[logging.Handler] = [stream_handler]

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
        except OSError as e:
            logging.getLogger(__name__).warning(f"Cannot open log file {log_file}: {e}")
        else:
            file_handler.setFormatter(log_formatter)
            handlers.append(file_handler)

    # QueueListener handles the actual I/O in a separate thread
    queue_listener = logging.handlers.QueueListener(
        log_queue, *handlers, respect_handler_level=True
    )
    queue_listener.start()

    # Register cleanup on exit
    atexit.register(queue_listener.stop)

    # Configure root logger to use queue handler (non-blocking)
    logging.basicConfig(
        level=level.upper(),
        handlers=[queue_handler],
        force=True,
    )

    return queue_listener
