"""
Object utilities for stable hashing and JSON serialization.

Request cache keys must be identical across calls with equal parameters,
so parameters are serialized with sorted keys before hashing.
"""

import hashlib
import json
from dataclasses import asdict, is_dataclass
from typing import Any, Mapping


def hash(obj: Any) -> str:
    """
    Return a stable SHA-256 hex digest of a JSON-serializable object.

    Args:
        obj: Object to hash. Dataclasses are converted to dictionaries.

    Returns:
        Hexadecimal digest string.
    """
    return hashlib.sha256(to_json(obj, sort_keys=True).encode("utf-8")).hexdigest()


def request_key(endpoint: str, params: Mapping[str, Any] | None = None) -> str:
    """
    Build the cache key for a data source request.

    Args:
        endpoint: Logical endpoint name (e.g. "paginatedTransactions").
        params: Request parameters, or None.

    Returns:
        Key of the form "<endpoint>:<digest>".
    """
    return f"{endpoint}:{hash(dict(params or {}))}"


def to_json(obj: Any, indent: int | None = None, sort_keys: bool = False) -> str:
    """
    Serialize an object to a JSON string.

    Falls back to to_dict(), __dict__ or str() for values json cannot encode.
    """
    if is_dataclass(obj) and not isinstance(obj, type):
        obj = asdict(obj)
    return json.dumps(
        obj, default=_default_serializer, indent=indent, sort_keys=sort_keys
    )


def _default_serializer(obj: Any) -> Any:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if hasattr(obj, "__dict__"):
        return obj.__dict__
    return str(obj)
