import logging
import sys

# Third-party loggers that stay at WARNING unless --debug is given
QUIET_LOGGERS = ("Crypto", "yaml")


def level_for(debug: bool = False, quiet: bool = False) -> int:
    if debug:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_logging(debug: bool = False, quiet: bool = False) -> int:
    """Route log records to stderr so stdout stays free for command output.

    Returns the level applied to the root logger.
    """
    level = level_for(debug=debug, quiet=quiet)
    handler = logging.StreamHandler(stream=sys.stderr)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Remove existing handlers to avoid duplicates on repeated CLI runs
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(level if debug else max(level, logging.WARNING))
    return level
