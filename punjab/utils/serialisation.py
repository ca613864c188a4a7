import re
from datetime import datetime
from enum import Enum


def serialise(val):
    if isinstance(val, datetime):
        return val.isoformat()
    if isinstance(val, Enum):
        return val.value
    elif isinstance(val, (list, tuple)):
        return [serialise(item) for item in val]
    elif isinstance(val, dict):
        return {key: serialise(value) for key, value in val.items()}

    return val


def pascal_case_to_snake_case(pascal: type | str) -> str:
    """
    Convert a class name (CamelCase or PascalCase) to snake_case.

    Args:
        pascal: The class or class name as a string.

    Returns:
        str: The snake_case version of the class name.
    """
    if not isinstance(pascal, str):
        pascal = pascal.__name__
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', pascal)
    return re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()


def get_exception_error_type(exception: Exception) -> str:
    name = exception.__class__.__name__
    if name.endswith("Exception") and name != "Exception":
        name = name[: -len("Exception")]
    return pascal_case_to_snake_case(name)


def describe_target(target: object) -> str:
    """Readable name for a record or model class in log lines and messages."""
    if isinstance(target, type):
        return target.__name__
    return target.__class__.__name__
