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

from dataclasses import dataclass
from pathlib import Path

from .operations import (
    compare,
    eq,
    gt,
    gte,
    lt,
    lte,
    max_version,
    min_version,
    sort_versions,
)
from .precedence import EQUAL, GREATER, LESS, compare_prerelease, compare_versions
from .version import InvalidVersion, Version, is_valid, parse, to_version

__all__ = [
    "EQUAL",
    "GREATER",
    "LESS",
    "InvalidVersion",
    "Version",
    "VersionEntry",
    "compare",
    "compare_prerelease",
    "compare_versions",
    "eq",
    "gt",
    "gte",
    "is_valid",
    "lt",
    "lte",
    "max_version",
    "min_version",
    "parse",
    "sort_versions",
    "to_version",
]


@dataclass
class VersionEntry:
    """A version string as given by the user, with where it came from."""

    value: str
    # Set only for entries read from a file; line numbers start at 1.
    file: Path | None = None
    line: int | None = None
