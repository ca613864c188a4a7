import logging
import os
import sys
from typing import Optional

from punjab.utils.autodiscovery import autodiscover_policies
from punjab.utils.env_utils import configure_env
from punjab.utils.logging import setup_logging

_booted = False


def boot(*,
    autodiscovery: bool = True,
    env_file_name: Optional[str] = None,
    log_file_name: Optional[str] = None,
) -> None:
    """
    Sets up the application.
    - Loads environment variables
    - Sets up logging
    - Runs policy autodiscovery if enabled

    Args:
        autodiscovery: Whether to attach policies to models by naming convention.
        env_file_name: Optional environment file to load instead of `.env.<ENV>` / `.env`.
        log_file_name: Optional log file name (defaults to `LOG_FILE_NAME` or `app.log`).
    """
    global _booted
    if _booted:
        return

    # Ensure project root is importable so app.models / app.policies can be resolved
    project_root = os.environ.get("PROJECT_ROOT") or os.getcwd()
    if project_root and project_root not in sys.path:
        sys.path.insert(0, project_root)

    configure_env(env_file_name)
    setup_logging(log_file_name)

    if autodiscovery:
        autodiscover_policies()

    _booted = True
    logging.debug("punjab booted")


def is_booted() -> bool:
    return _booted


def reset() -> None:
    """Forget a previous boot. Intended for tests."""
    global _booted
    _booted = False
