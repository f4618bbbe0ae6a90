"""Shared decoding helper for response models."""
from typing import Any, Callable, Dict, TypeVar

from ..exceptions import MalformedResponseError

T = TypeVar('T')


def decode(factory: Callable[[Dict[str, Any]], T], payload: Any) -> T:
    """
    Decode a JSON payload with ``factory``.
    
    Any missing key, wrongly typed value or out-of-range timestamp becomes
    MalformedResponseError.
    """
    if not isinstance(payload, dict):
        raise MalformedResponseError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )
    try:
        return factory(payload)
    except (KeyError, TypeError, ValueError, OverflowError, OSError) as e:
        name = getattr(factory, '__qualname__', repr(factory))
        raise MalformedResponseError(f"Cannot decode {name}: {e!r}") from e
