import json
import typing as t

import tabulate

from .exceptions import SerializationError


def render(result, fields: t.Optional[t.Sequence[str]] = None, as_json=False) -> str:
    """Render the result of a command either as a json document or as human readable text.
    Records (dicts) and lists of records are rendered as a table with ``fields`` as columns, in
    the order in which they were received.
    """
    if as_json:
        return format_json(result)
    if isinstance(result, str):
        return result
    if fields is not None and isinstance(result, dict):
        result = [result]
    return format_anything(result, fields)


def format_json(obj) -> str:
    try:
        return json.dumps(obj, indent=2)
    except (TypeError, ValueError) as e:
        raise SerializationError(str(e)) from e


def format_anything(obj, fields):
    if isinstance(obj, list):
        return format_table(obj, fields)
    if fields is not None:
        return format_object(obj, fields)
    if isinstance(obj, dict):
        return format_object(obj, list(obj))
    return str(obj)


def format_object(obj, fields: t.Sequence[str]):
    lines = []
    max_field_len = max(len(f) for f in fields) if fields else 0
    for field in fields:
        lines.append(f"{field:<{max_field_len}s}: {get_value(obj, field)!s}")
    return "\n".join(lines)


def get_value(obj_or_dict, key, default=None):
    if isinstance(obj_or_dict, dict):
        return obj_or_dict.get(key, default)
    else:
        return getattr(obj_or_dict, key, default)


def format_table(objects, keys, default=""):
    if keys is None:
        keys = list(objects[0]) if objects else []
    rows = [[get_value(o, key, default) for key in keys] for o in objects]
    return tabulate.tabulate(rows, headers=keys, tablefmt="plain", disable_numparse=True)
