from typing import Optional, TypeVar

T = TypeVar('T')

def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default

def count_or_default(value: Optional[int], default: int, name: str) -> int:
    """Resolve an optional count argument, rejecting counts below one."""
    count = int(value_or_default(value, default))
    if count < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return count
