from typing import Any, Callable, Sequence

from corro.core.localization import __

MessageFormatter = Callable[[str, Sequence[Any]], str]


def format_message(template: str, args: Sequence[Any]) -> str:
    """Default message formatter: translate the template, then fill `{0}`, `{1}`, ... from `args`."""
    return __(template, list(args))
