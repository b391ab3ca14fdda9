# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************

from collections.abc import Iterable
from functools import cmp_to_key
from typing import TypeVar

from .precedence import EQUAL, GREATER, LESS, compare_versions
from .version import Version, to_version

V = TypeVar("V", str, Version)


def compare(a: str | Version, b: str | Version) -> int:
    """Three-way precedence comparison; raises InvalidVersion on bad input."""
    return compare_versions(to_version(a), to_version(b))


def gt(a: str | Version, b: str | Version) -> bool:
    return compare(a, b) == GREATER


def gte(a: str | Version, b: str | Version) -> bool:
    return compare(a, b) != LESS


def lt(a: str | Version, b: str | Version) -> bool:
    return compare(a, b) == LESS


def lte(a: str | Version, b: str | Version) -> bool:
    return compare(a, b) != GREATER


def eq(a: str | Version, b: str | Version) -> bool:
    return compare(a, b) == EQUAL


def _parse_all(versions: Iterable[V]) -> list[tuple[V, Version]]:
    # Everything is parsed up front, so one bad entry fails the whole call.
    return [(item, to_version(item)) for item in versions]


def sort_versions(versions: Iterable[V], reverse: bool = False) -> list[V]:
    """Return a new list with the given versions in precedence order.

    The sort is stable and the original items are returned, so strings stay
    strings. `reverse` keeps ties in their original order as well.
    """
    parsed = _parse_all(versions)
    key = cmp_to_key(compare_versions)
    parsed.sort(key=lambda pair: key(pair[1]), reverse=reverse)
    return [item for item, _ in parsed]


def max_version(versions: Iterable[V]) -> V | None:
    """Highest version, or None if there are none. Ties keep the first one."""
    parsed = _parse_all(versions)
    if not parsed:
        return None

    best_item, best = parsed[0]
    for item, v in parsed[1:]:
        if gt(v, best):
            best_item, best = item, v
    return best_item


def min_version(versions: Iterable[V]) -> V | None:
    """Lowest version, or None if there are none. Ties keep the first one."""
    parsed = _parse_all(versions)
    if not parsed:
        return None

    best_item, best = parsed[0]
    for item, v in parsed[1:]:
        if lt(v, best):
            best_item, best = item, v
    return best_item
