"""Sort keys for ordering schema element names.

Without compare options names are ordered by code point, which is what
Python's ``sorted`` does for ``str``. With options, names are keyed by an ICU
collator for the requested locale (root collation when no locale is given),
tuned by the options of ``CompareOptions``:

- sensitivity maps to the collator strength (plus the case level for "case")
- numeric turns on numeric collation of digit runs
- caseFirst sets which case sorts first on the tertiary level
- ignorePunctuation makes punctuation and spaces ignorable

Every collated key ends with the name itself, so names that collate equal
still come out in one deterministic order.
"""
from __future__ import annotations

import logging
import re
from typing import Any, Callable, Mapping, Union

import icu

from gqlsort_py.errors import CollationError
from gqlsort_py.schema.options import (
    CASE_FIRST_VALUES,
    SENSITIVITIES,
    CompareOptions,
    coerce_compare_options,
)

logger = logging.getLogger(__name__)

SortKey = Callable[[str], Any]

LOCALE_TAG = re.compile(r"^[A-Za-z]{2,8}(-[A-Za-z0-9]{1,8})*$")

# sensitivity -> (strength, case level on)
SENSITIVITY_STRENGTHS = {
    "base": (icu.Collator.PRIMARY, False),
    "accent": (icu.Collator.SECONDARY, False),
    "case": (icu.Collator.PRIMARY, True),
    "variant": (icu.Collator.TERTIARY, False),
}

CASE_FIRST_ATTRIBUTES = {
    "upper": icu.UCollAttributeValue.UPPER_FIRST,
    "lower": icu.UCollAttributeValue.LOWER_FIRST,
    "false": icu.UCollAttributeValue.OFF,
}

KNOWN_OPTIONS = ("sensitivity", "numeric", "caseFirst", "ignorePunctuation")


def _check_locales(options: CompareOptions) -> list[str]:
    locales = options.locale_list
    for tag in locales:
        if not isinstance(tag, str) or not LOCALE_TAG.match(tag):
            raise CollationError(f"Incorrect locale information provided: {tag!r}")
    return locales


def _read_flag(options: Mapping[str, Any], name: str) -> bool:
    value = options.get(name, False)
    if not isinstance(value, bool):
        raise CollationError(f"Option {name!r} must be a boolean, got {value!r}")
    return value


def _read_choice(options: Mapping[str, Any], name: str, choices: tuple, default: str) -> str:
    value = options.get(name, default)
    if value not in choices:
        raise CollationError(
            f"Option {name!r} must be one of {', '.join(choices)}, got {value!r}"
        )
    return value


def _on_off(flag: bool) -> Any:
    return icu.UCollAttributeValue.ON if flag else icu.UCollAttributeValue.OFF


def create_collator(compare_options: CompareOptions) -> icu.Collator:
    """Create an ICU collator configured from ``compare_options``.

    The first locale tag is used, like ``Intl.Collator`` picking its best
    match; ICU falls back to the root collation for unknown languages.

    Raises:
        CollationError: if a locale tag or an option is invalid.
    """
    options = compare_options.options
    unknown = set(options) - set(KNOWN_OPTIONS)
    if unknown:
        raise CollationError(f"Unknown collator options: {', '.join(sorted(unknown))}")

    locales = _check_locales(compare_options)
    sensitivity = _read_choice(options, "sensitivity", SENSITIVITIES, "variant")
    numeric = _read_flag(options, "numeric")
    case_first = _read_choice(options, "caseFirst", CASE_FIRST_VALUES, "false")
    ignore_punctuation = _read_flag(options, "ignorePunctuation")

    locale = icu.Locale.forLanguageTag(locales[0]) if locales else icu.Locale.getRoot()
    collator = icu.Collator.createInstance(locale)

    strength, case_level = SENSITIVITY_STRENGTHS[sensitivity]
    collator.setStrength(strength)
    collator.setAttribute(icu.UCollAttribute.CASE_LEVEL, _on_off(case_level))
    collator.setAttribute(icu.UCollAttribute.NUMERIC_COLLATION, _on_off(numeric))
    collator.setAttribute(icu.UCollAttribute.CASE_FIRST, CASE_FIRST_ATTRIBUTES[case_first])
    collator.setAttribute(
        icu.UCollAttribute.ALTERNATE_HANDLING,
        icu.UCollAttributeValue.SHIFTED if ignore_punctuation
        else icu.UCollAttributeValue.NON_IGNORABLE,
    )

    logger.debug(
        "Ordering names by ICU collation (locale=%s, sensitivity=%s, numeric=%s, "
        "caseFirst=%s, ignorePunctuation=%s)",
        locales[0] if locales else "root", sensitivity, numeric, case_first,
        ignore_punctuation,
    )
    return collator


def build_sort_key(
    compare_options: Union[CompareOptions, Mapping[str, Any], None] = None,
) -> SortKey:
    """Build the key function used to order names.

    Args:
        compare_options: CompareOptions, a dict of the same shape, or None
            for plain code-point order.

    Returns:
        A function mapping a name to a sortable key.

    Raises:
        CollationError: if a locale tag or an option is invalid.
    """
    compare_options = coerce_compare_options(compare_options)
    if compare_options is None:
        logger.debug("Ordering names by code point")
        return str

    collator = create_collator(compare_options)

    def sort_key(name: str) -> tuple:
        return collator.getSortKey(name), name

    return sort_key


def sort_by(items, name_of: Callable[[Any], str], sort_key: SortKey) -> list:
    """Return ``items`` as a new list ordered by the key of each item's name."""
    return sorted(items, key=lambda item: sort_key(name_of(item)))


def sort_by_name(items, sort_key: SortKey) -> list:
    """Order objects carrying a ``name`` attribute."""
    return sort_by(items, lambda item: item.name, sort_key)
