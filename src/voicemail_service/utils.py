import json
import traceback
from typing import Any


def describe_error(error: Any) -> str:
    """
    Renders any failure value as a human-readable diagnostic string.

    Exceptions that were raised produce their full traceback, including
    chained causes. Exceptions that were never raised fall back to their
    message. Strings are returned unchanged and anything else is serialized
    to JSON.

    Args:
        error: An exception, a string, or an arbitrary value.

    Returns:
        str: The most detailed description available.
    """
    if isinstance(error, BaseException):
        if error.__traceback__ is not None:
            return "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            ).rstrip()
        return str(error) or repr(error)
    if isinstance(error, str):
        return error
    try:
        return json.dumps(error, default=str)
    except (TypeError, ValueError):
        return repr(error)
