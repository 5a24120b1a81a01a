from __future__ import annotations

from typing import Optional


def parse_context(context: Optional[str]) -> dict[str, str]:
    """
    Parse "key=value,key2=value2" into a dict.

    Pairs are split on the first '='; keys and values are stripped. Pairs
    without '=' are skipped.
    """
    result: dict[str, str] = {}
    if not context:
        return result

    for pair in context.split(","):
        key, sep, value = pair.partition("=")
        if not sep:
            continue
        result[key.strip()] = value.strip()
    return result
