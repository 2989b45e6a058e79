from typing import Any, Set

VOLATILE_KEYS = {"id", "createdAt", "updatedAt", "expiresAt"}


def exclude_keys(data: Any, keys: Set[str] = VOLATILE_KEYS) -> Any:
    """Copy of a JSON value without the given keys, nested objects included"""
    if isinstance(data, dict):
        return {k: exclude_keys(v, keys) for k, v in data.items() if k not in keys}
    if isinstance(data, list):
        return [exclude_keys(item, keys) for item in data]
    return data
