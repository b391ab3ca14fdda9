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

import re
from dataclasses import dataclass
from functools import total_ordering

import semver

from .precedence import EQUAL, LESS, compare_versions

# Only ASCII digits count; `\d` would also accept other Unicode digits.
_NUMERIC = r"0|[1-9][0-9]*"
_PRERELEASE_ID = rf"(?:{_NUMERIC}|[0-9]*[A-Za-z-][0-9A-Za-z-]*)"
_BUILD_ID = r"[0-9A-Za-z-]+"

_VERSION_RE = re.compile(
    rf"(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>{_PRERELEASE_ID}(?:\.{_PRERELEASE_ID})*))?"
    rf"(?:\+(?P<build>{_BUILD_ID}(?:\.{_BUILD_ID})*))?"
)


class InvalidVersion(ValueError):
    """Raised when a value that must be a semantic version does not parse."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid semantic version: {value!r}")
        self.value = value


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    # Carried along, but never part of precedence, equality or hashing.
    build: tuple[str, ...] = ()
    raw: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "prerelease", tuple(self.prerelease))
        object.__setattr__(self, "build", tuple(self.build))
        if not self.raw:
            object.__setattr__(self, "raw", self.format())

    def format(self) -> str:
        """Canonical rendering, e.g. `1.2.3-rc.1+build.5`."""
        s = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            s += "-" + ".".join(self.prerelease)
        if self.build:
            s += "+" + ".".join(self.build)
        return s

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    @property
    def semver(self) -> semver.Version:
        return semver.Version(
            major=self.major,
            minor=self.minor,
            patch=self.patch,
            prerelease=".".join(self.prerelease) or None,
            build=".".join(self.build) or None,
        )

    @classmethod
    def from_semver(cls, v: "semver.Version") -> "Version":
        return cls(
            major=v.major,
            minor=v.minor,
            patch=v.patch,
            prerelease=tuple(v.prerelease.split(".")) if v.prerelease else (),
            build=tuple(v.build.split(".")) if v.build else (),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) == EQUAL

    def __lt__(self, other: "Version") -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) == LESS

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def __str__(self) -> str:
        return self.raw


def parse(value: object) -> Version | None:
    """Parse a semantic version string.

    Surrounding whitespace and one leading `v`/`V` are ignored. Returns None
    for anything that is not a string matching the full grammar; never raises.
    """
    if not isinstance(value, str):
        return None

    s = value.strip()
    if s[:1] in ("v", "V"):
        s = s[1:]

    m = _VERSION_RE.fullmatch(s)
    if not m:
        return None

    prerelease = m.group("prerelease")
    build = m.group("build")
    return Version(
        major=int(m.group("major")),
        minor=int(m.group("minor")),
        patch=int(m.group("patch")),
        prerelease=tuple(prerelease.split(".")) if prerelease else (),
        build=tuple(build.split(".")) if build else (),
        raw=s,
    )


def is_valid(value: object) -> bool:
    return parse(value) is not None


def to_version(value: "str | Version") -> Version:
    """Return `value` as a Version, raising InvalidVersion if it does not parse."""
    if isinstance(value, Version):
        return value
    v = parse(value)
    if v is None:
        raise InvalidVersion(value)
    return v
