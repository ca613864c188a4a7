import logging
import os
from typing import Optional

from dotenv import load_dotenv

from punjab.exceptions.common_exceptions import EnvInvalidException

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off", "")


def configure_env(env_file_name: Optional[str] = None) -> None:
    """
    Configure the application's environment.

    Args:
        env_file_name: Optional environment file name. If None, tries `.env.<ENV>` then `.env`.
    """
    if env_file_name is not None:
        load_dotenv(env_file_name, override=True)
        return

    environment = os.getenv("ENV", "debug")

    for env_file in [f".env.{environment}", ".env"]:
        if load_dotenv(env_file, override=True):
            logging.debug(f"☑️ Loaded {env_file} file successfully")
            return

    logging.debug("No .env file found, using process environment only")


def get_bool_env(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default

    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False

    raise EnvInvalidException(name, raw, supported_values=[*TRUE_VALUES, *FALSE_VALUES[:-1]])
