import os

from punjab.utils.env_utils import get_bool_env

# Read at use time so values loaded by `configure_env()` during boot apply.


def log_authorization_decisions() -> bool:
    """Log every authorization decision at DEBUG (denials from `ensure` are always logged at INFO)."""
    return get_bool_env("LOG_AUTHORIZATION_DECISIONS", False)


# Policy autodiscovery: app/models/post.py -> app.policies.post_policy.PostPolicy
def models_dir() -> str:
    return os.getenv("MODELS_DIR", "app/models")


def policies_package() -> str:
    return os.getenv("POLICIES_PACKAGE", "app.policies")
