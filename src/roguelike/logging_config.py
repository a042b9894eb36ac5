import logging
import os


def configure_logging(verbosity: int = 0) -> None:
    """Configure the root logger for the CLI.

    0 -> WARNING, 1 -> INFO, 2+ -> DEBUG. The RL_LOG_LEVEL env var, if set to
    a level name, wins over the verbosity count.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    level_name = os.getenv("RL_LOG_LEVEL")
    if level_name:
        level = getattr(logging, level_name.upper(), level)
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    )
