import re

_SNAKE_SEGMENT = re.compile(r"_([a-z0-9])")
_CAMEL_UPPER = re.compile(r"[A-Z]")


def camel_key(key):
    return _SNAKE_SEGMENT.sub(lambda m: m.group(1).upper(), key)


def snake_key(key):
    return _CAMEL_UPPER.sub(lambda m: f"_{m.group(0).lower()}", key)


def _convert(obj, rename):
    if isinstance(obj, list):
        return [_convert(item, rename) for item in obj]
    if isinstance(obj, dict):
        return {
            (rename(key) if isinstance(key, str) else key): _convert(value, rename)
            for key, value in obj.items()
        }
    return obj


def to_camel_case(obj):
    """Recursively renames snake_case dict keys to camelCase."""
    return _convert(obj, camel_key)


def to_snake_case(obj):
    """Recursively renames camelCase dict keys to snake_case."""
    return _convert(obj, snake_key)
