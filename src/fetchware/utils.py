from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from fetchware.models import RequestOptions


def set_header(options: RequestOptions, name: str, value: str) -> RequestOptions:
    """
    Set a single header on options, creating the header mapping on first use.
    Names are matched exactly; an existing value under the same name is replaced.
    """
    if options.headers is None:
        options.headers = {}
    options.headers[name] = value
    return options


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        value = "true" if value else "false"
    return quote(str(value), safe="")


def stringify_query(query: Mapping[str, Any] | str) -> str:
    """
    Convert a mapping into a URL query string (key=value&key2=value2).
    Strings are returned unchanged. Keys are sorted, sequences become
    repeated keys and a None value renders as the bare key.
    """
    if isinstance(query, str):
        return query

    parts: list[str] = []
    for key in sorted(query, key=str):
        value = query[key]
        name = quote(str(key), safe="")

        if value is None:
            parts.append(name)
        elif isinstance(value, (list, tuple)):
            parts.extend(f"{name}={_encode_value(v)}" for v in value if v is not None)
        else:
            parts.append(f"{name}={_encode_value(value)}")

    return "&".join(parts)
