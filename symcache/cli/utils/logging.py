import logging
import sys


logger = logging.getLogger("symcache")


def configure_logging(debug: bool):
    """
    Configures the logging system based on the debug flag.
    """
    # sys.stdout may have been swapped since the last call (e.g. by CliRunner)
    for handler in list(logger.handlers):
        if getattr(handler, "_symcache_cli", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler._symcache_cli = True  # type: ignore[attr-defined]
    formatter = logging.Formatter("%(message)s")
    handler.setFormatter(formatter)

    log_level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(log_level)
    logger.addHandler(handler)
