# SPDX-FileCopyrightText: 2022 WebSafe64 Developers
# SPDX-License-Identifier: Apache-2.0

"""Core typing methods and annotation type definitions."""


# type annotations
from typing import TypeVar, Any

# public interface
__all__ = ['coerce', 'coerce_bool', ]


ValueType = TypeVar('ValueType', str, int, float, bool, type(None))
def coerce(value: str) -> ValueType:
    """Automatically coerce string to typed value."""
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        pass
    if value.lower() in ('null', 'none', ):
        return None
    elif value.lower() in ('true', ):
        return True
    elif value.lower() in ('false', ):
        return False
    else:
        return value


def coerce_bool(value: Any) -> bool:
    """Interpret configuration `value` as a boolean (strings come from the environment)."""
    if isinstance(value, str):
        value = coerce(value)
    if isinstance(value, (bool, int)):
        return bool(value)
    raise ValueError(f'Expected boolean, found {value.__class__.__name__}({value!r})')
