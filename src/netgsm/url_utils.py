from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl, quote, urlsplit

from .errors import InvalidURL, UnsupportedParamValue


# encodeURIComponent leaves these unescaped on top of letters, digits and "-_.~".
COMPONENT_SAFE_CHARS = "!*'()"


def encode_component(text: str) -> str:
    return quote(text, safe=COMPONENT_SAFE_CHARS)


def _encode_key(key: str) -> str:
    return encode_component(key).replace("%5B", "[").replace("%5D", "]")


def _render_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _reject_nested(key: str, value: Any) -> None:
    if isinstance(value, Mapping) or isinstance(value, (list, tuple, set, frozenset)):
        raise UnsupportedParamValue(f"unsupported value for query param {key!r}: {type(value).__name__}")


def flatten_params(params: Mapping[str, Any] | None) -> dict[str, str]:
    """Flatten one level of mapping values into ``key[prop]`` pairs.

    ``None`` values are dropped. Mappings nested inside a mapping and any
    sequence value raise ``UnsupportedParamValue``.
    """
    out: dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, Mapping):
            for prop, inner in value.items():
                if inner is None:
                    continue
                item_key = f"{key}[{prop}]"
                _reject_nested(item_key, inner)
                out[item_key] = _render_scalar(inner)
            continue
        _reject_nested(str(key), value)
        out[str(key)] = _render_scalar(value)
    return out


def normalize_query_string(url: str, params: Mapping[str, Any] | None = None) -> str:
    """Merge ``params`` into the query of ``url`` and emit it sorted by key.

    Keys are percent-encoded with ``[`` and ``]`` kept literal, values are
    fully encoded. A URL with no ``?`` and no params comes back untouched; any
    other input always carries a ``?``, even when the query ends up empty.
    """
    if not isinstance(url, str):
        raise InvalidURL(f"url must be a string, got {type(url).__name__}")
    if "?" not in url and not params:
        return url

    try:
        parsed = urlsplit(url)
        existing = parse_qsl(parsed.query, keep_blank_values=True)
    except ValueError as exc:
        raise InvalidURL(f"cannot parse url: {url}") from exc

    query: dict[str, str] = {}
    for key, value in existing:
        # first occurrence wins for repeated keys
        query.setdefault(key, value)
    query.update(flatten_params(params))

    pairs = [f"{_encode_key(key)}={encode_component(query[key])}" for key in sorted(query)]
    base = url.split("?", 1)[0].split("#", 1)[0]
    return base + "?" + "&".join(pairs)
