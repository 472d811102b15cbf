"""
Type name registry mapping type codes (and capacities) to engine type names.
"""

from __future__ import annotations

import bisect
from typing import Dict, List, Optional, Tuple

from ..errors import SchemaDefinitionError
from ..types import TypeCode

LENGTH_PLACEHOLDER = "$l"
PRECISION_PLACEHOLDER = "$p"
SCALE_PLACEHOLDER = "$s"


class TypeNames:
    """
    Per-dialect table of type names.

    Each type code may own several capacity-bounded entries, kept sorted by
    capacity, plus one capacity-less default. Templates may embed ``$l``,
    ``$p`` and ``$s``, replaced by the requested length, precision and scale.
    """

    def __init__(self) -> None:
        self._weighted: Dict[TypeCode, List[Tuple[int, str]]] = {}
        self._defaults: Dict[TypeCode, str] = {}

    def put(self, code: TypeCode, name: str, capacity: int | None = None) -> None:
        if capacity is None:
            self._defaults[code] = name
            return
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}")
        entries = self._weighted.setdefault(code, [])
        capacities = [entry[0] for entry in entries]
        index = bisect.bisect_left(capacities, capacity)
        if index < len(entries) and entries[index][0] == capacity:
            entries[index] = (capacity, name)
        else:
            entries.insert(index, (capacity, name))

    def get(
        self,
        code: TypeCode,
        length: int | None = None,
        precision: int = 0,
        scale: int = 0,
    ) -> Optional[str]:
        """
        Resolve the narrowest type name able to hold ``length``.

        ``length=None`` means no length was requested and only the default
        entry is considered.
        """
        if length is not None:
            for capacity, name in self._weighted.get(code, ()):
                if capacity >= length:
                    return self._render(name, length, precision, scale)
        default = self._defaults.get(code)
        if default is None:
            return None
        return self._render(default, length or 0, precision, scale)

    def get_default(self, code: TypeCode) -> Optional[str]:
        return self._defaults.get(code)

    def get_longest(self, code: TypeCode) -> Optional[str]:
        entries = self._weighted.get(code)
        if entries:
            capacity, name = entries[-1]
            return self._render(name, capacity, capacity, 0)
        return self._defaults.get(code)

    def __contains__(self, code: object) -> bool:
        return code in self._defaults or bool(self._weighted.get(code))  # type: ignore[arg-type]

    @staticmethod
    def _render(template: str, length: int, precision: int, scale: int) -> str:
        if PRECISION_PLACEHOLDER in template and precision <= 0:
            raise SchemaDefinitionError(f"Type '{template}' requires a positive precision.")
        return (
            template.replace(LENGTH_PLACEHOLDER, str(length))
            .replace(PRECISION_PLACEHOLDER, str(precision))
            .replace(SCALE_PLACEHOLDER, str(scale))
        )
