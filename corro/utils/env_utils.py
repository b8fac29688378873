import logging
import os
from typing import Optional

from dotenv import load_dotenv

from corro import config

logger = logging.getLogger(__name__)


def configure_env(env_file_name: Optional[str] = None) -> None:
    """
    Load CORRO_* settings from an env file and refresh `corro.config`.

    Args:
        env_file_name: Optional environment file name. If None, tries
            `.env.<CORRO_ENV>` and then `.env`.
    """
    if env_file_name is not None:
        load_dotenv(env_file_name, override=True)
        config.reload()
        return

    environment = os.getenv("CORRO_ENV", "debug")

    for env_file in [f".env.{environment}", ".env"]:
        if load_dotenv(env_file, override=True):
            logger.debug(f"Loaded {env_file} file successfully")
            break

    config.reload()
