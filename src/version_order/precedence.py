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

"""
SemVer precedence (https://semver.org/#spec-item-11).

Build metadata never takes part in the comparison. Results are the usual
three-way integers so they can be fed to `functools.cmp_to_key`.
"""

import re
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .version import Version

LESS = -1
EQUAL = 0
GREATER = 1

_NUMERIC_ID = re.compile(r"[0-9]+")


def _is_numeric(identifier: str) -> bool:
    return _NUMERIC_ID.fullmatch(identifier) is not None


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare_prerelease(a: Sequence[str], b: Sequence[str]) -> int:
    """Compare two pre-release identifier sequences.

    An empty sequence is a final release and outranks any pre-release. When
    all preceding identifiers are equal, the longer sequence wins.
    """
    if not a and not b:
        return EQUAL
    if not a:
        return GREATER
    if not b:
        return LESS

    for i in range(max(len(a), len(b))):
        if i >= len(a):
            return LESS
        if i >= len(b):
            return GREATER

        left, right = a[i], b[i]
        if left == right:
            continue

        left_numeric = _is_numeric(left)
        right_numeric = _is_numeric(right)
        if left_numeric and not right_numeric:
            return LESS
        if right_numeric and not left_numeric:
            return GREATER

        if left_numeric and right_numeric:
            result = _cmp(int(left), int(right))
            if result != EQUAL:
                return result
            # "01" vs "1": numerically equal, which the grammar rules out.
            # Fall back to the strings so the order stays consistent with ==.

        result = _cmp(left, right)
        if result != EQUAL:
            return result

    return EQUAL


def compare_versions(a: "Version", b: "Version") -> int:
    for field in ("major", "minor", "patch"):
        result = _cmp(getattr(a, field), getattr(b, field))
        if result != EQUAL:
            return result
    return compare_prerelease(a.prerelease, b.prerelease)
