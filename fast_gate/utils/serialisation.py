import re
from datetime import datetime


def serialise(val):
    if isinstance(val, datetime):
        return val.isoformat()
    elif isinstance(val, list):
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
    return pascal_case_to_snake_case(exception.__class__.__name__.replace('Exception', ''))
