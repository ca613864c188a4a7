import importlib
import inspect
import logging
import os
from pathlib import Path
from typing import Optional

from punjab import config
from punjab.contracts.policy import Policy
from punjab.decorators import register_policy
from punjab.exceptions.common_exceptions import EnvInvalidException
from punjab.utils.serialisation import pascal_case_to_snake_case


def autodiscover_policies(models_dir: Optional[str] = None, policies_package: Optional[str] = None) -> int:
    """
    Autodiscover models and register their corresponding policies.

    Example of naming conventions:
    ```
    - Model: app/models/post.py -> class Post
    - Policy: app/policies/post_policy.py -> class PostPolicy
    ```

    Args:
        models_dir: The directory containing the models (default: `MODELS_DIR`).
        policies_package: Dotted package containing the policies (default: `POLICIES_PACKAGE`).

    Returns:
        int: Number of policies registered.
    """
    project_root = Path(os.getenv("PROJECT_ROOT") or Path.cwd()).resolve()
    models_path = (project_root / (models_dir or config.models_dir())).resolve()
    policies_package = policies_package or config.policies_package()

    if not models_path.exists():
        logging.info(f"📁 No {models_path} directory found, skipping autodiscovery")
        return 0

    models_package = _models_package(models_path, project_root)
    registered = 0

    for model_file in sorted(models_path.glob("*.py")):
        if model_file.name.startswith("__"):
            continue

        module_path = f"{models_package}.{model_file.stem}"
        try:
            model_module = importlib.import_module(module_path)
        except ImportError as e:
            logging.warning(f"Skipping {module_path}: {e}")
            continue

        model_classes = [
            cls for _, cls in inspect.getmembers(model_module, inspect.isclass)
            if cls.__module__ == module_path
        ]

        for model_cls in model_classes:
            # Explicit @register_policy wins
            if "policy" in vars(model_cls):
                continue

            policy_cls = _find_policy(model_cls, policies_package)
            if policy_cls is None:
                continue

            register_policy(policy_cls)(model_cls)
            registered += 1
            logging.debug(f"✅ Auto-registered {policy_cls.__name__} for {model_cls.__name__}")

    if registered > 0:
        logging.debug(f"🎉 Autodiscovery completed! Registered {registered} polic{'y' if registered == 1 else 'ies'}")
    return registered


def _find_policy(model_cls: type, policies_package: str) -> Optional[type[Policy]]:
    policy_name = f"{model_cls.__name__}Policy"
    policy_module_path = f"{policies_package}.{pascal_case_to_snake_case(model_cls.__name__)}_policy"

    try:
        policy_module = importlib.import_module(policy_module_path)
    except ModuleNotFoundError as e:
        # Missing policy modules are expected; errors inside an existing one are not
        if e.name and (policy_module_path == e.name or policy_module_path.startswith(f"{e.name}.")):
            return None
        raise

    policy_cls = getattr(policy_module, policy_name, None)
    if inspect.isclass(policy_cls) and issubclass(policy_cls, Policy):
        return policy_cls
    return None


def _models_package(models_path: Path, project_root: Path) -> str:
    """Dotted package for a models directory inside the project root."""
    try:
        relative = models_path.relative_to(project_root)
    except ValueError:
        raise EnvInvalidException("MODELS_DIR", str(models_path)) from None

    if not relative.parts:
        raise EnvInvalidException("MODELS_DIR", str(models_path))
    return ".".join(relative.parts)
