"""Comparison configuration for lexicographic schema sorting."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional, Sequence, Union

from gqlsort_py.errors import CollationError

SENSITIVITIES = ("base", "accent", "case", "variant")
CASE_FIRST_VALUES = ("upper", "lower", "false")


@dataclass(frozen=True)
class CompareOptions:
    """Locale and collator tuning for name comparison.

    Option names follow the ``Intl.Collator`` vocabulary:

    - ``sensitivity``: one of ``SENSITIVITIES`` (default ``"variant"``)
    - ``numeric``: compare digit runs by value
    - ``caseFirst``: one of ``CASE_FIRST_VALUES``
    - ``ignorePunctuation``: skip punctuation when comparing

    Instances are immutable and hashable: a locale list is stored as a tuple
    and the options as a read-only mapping.
    """
    locales: Optional[Union[str, Sequence[str]]] = None
    options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if self.locales is not None and not isinstance(self.locales, str):
            object.__setattr__(self, "locales", tuple(self.locales))
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))

    def __hash__(self):
        return hash((self.locales, tuple(sorted(self.options.items()))))

    @property
    def locale_list(self) -> list[str]:
        if self.locales is None:
            return []
        if isinstance(self.locales, str):
            return [self.locales]
        return list(self.locales)

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> CompareOptions:
        unknown = set(d) - {"locales", "options"}
        if unknown:
            raise CollationError(
                f"Unknown compare option keys: {', '.join(sorted(unknown))}"
            )
        return cls(locales=d.get("locales"), options=dict(d.get("options") or {}))


def coerce_compare_options(
    value: Union[CompareOptions, Mapping[str, Any], None],
) -> Optional[CompareOptions]:
    """Accept a CompareOptions, a plain dict of the same shape, or None."""
    if value is None or isinstance(value, CompareOptions):
        return value
    return CompareOptions.from_dict(value)
