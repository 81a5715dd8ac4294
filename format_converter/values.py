from __future__ import annotations

import json
from typing import Any, Dict, List, Union

# Parsed document tree: the shape json.loads produces.
Value = Union[str, int, float, bool, None, List[Any], Dict[str, Any]]


def scalar_text(value: Any) -> str:
    """Render a value as cell/element text.

    Strings pass through; other scalars use their JSON spelling so booleans
    and nulls come out as `true` / `null`. Whole-number floats drop their
    `.0` below 1e21. Containers become compact JSON.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    try:
        return json.dumps(value, ensure_ascii=False)
    except TypeError:
        return str(value)
