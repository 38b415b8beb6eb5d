from typing import Any, Dict, Iterable, List, Type, Union


def validate_type(value: Any, expected_type: Union[Type, tuple]) -> bool:
    """Validate value is of expected type."""
    return isinstance(value, expected_type)


def validate_range(value: float, min_val: float = None, max_val: float = None) -> bool:
    """Validate numeric value is within range."""
    if min_val is not None and value < min_val:
        return False
    if max_val is not None and value > max_val:
        return False
    return True


def validate_latitude(latitude_deg: float) -> bool:
    """Validate latitude lies in [-90, 90] degrees."""
    return validate_range(latitude_deg, -90.0, 90.0)


def validate_dict_keys(data: Dict, allowed_keys: Iterable[str]) -> List[str]:
    """Return the keys of data that are not in allowed_keys."""
    allowed = set(allowed_keys)
    return [key for key in data if key not in allowed]
