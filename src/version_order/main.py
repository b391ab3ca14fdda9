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

import argparse
import os
import sys
from pathlib import Path

from . import VersionEntry
from .gh_logging import Logger
from .operations import compare, max_version, min_version, sort_versions
from .version import InvalidVersion, is_valid

log = Logger(__name__)

COMMANDS = ("validate", "compare", "sort", "max", "min")


def parse_args(args: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Validate and order semantic versions."
    )
    parser.add_argument("command", choices=COMMANDS, help="What to do.")
    parser.add_argument(
        "versions",
        nargs="*",
        help="Versions to process. If not provided, they are read from --file "
        "or from the file named by $VERSION_ORDER_FILE.",
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="File with one version per line; blank lines and '#' comments "
        "are ignored.",
    )
    parser.add_argument(
        "--descending",
        action="store_true",
        help="Sort from highest to lowest.",
    )
    # Options may come before, between or after the versions.
    return parser.parse_intermixed_args(args)


def read_version_file(path: Path) -> list[VersionEntry]:
    if not path.exists():
        log.fatal(f"Version file {path} does not exist.")
    if not path.is_file():
        log.fatal(f"Version file {path} is not a file.")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        log.fatal(f"Could not read version file {path}: {e}")

    entries: list[VersionEntry] = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        value = line.strip()
        if not value or value.startswith("#"):
            continue
        entries.append(VersionEntry(value=value, file=path, line=line_no))
    return entries


def get_version_entries(args: argparse.Namespace) -> list[VersionEntry]:
    """Collect the versions to work on.

    Tries sources in order:
    1. Positional command-line arguments
    2. --file
    3. The file named by the VERSION_ORDER_FILE environment variable
    """
    if args.versions:
        log.debug("Using versions from command-line arguments.")
        return [VersionEntry(value=v) for v in args.versions]
    elif args.file:
        log.debug(f"Reading versions from {args.file}.")
        return read_version_file(args.file)
    elif env_file := os.getenv("VERSION_ORDER_FILE"):
        log.debug(f"Reading versions from $VERSION_ORDER_FILE ({env_file}).")
        return read_version_file(Path(env_file))
    else:
        log.debug("No versions provided.")
        return []


def validate(entries: list[VersionEntry]) -> None:
    for entry in entries:
        if is_valid(entry.value):
            log.ok(f"{entry.value} is a valid semantic version")
        else:
            log.warning(
                f"{entry.value!r} is not a valid semantic version",
                entry.file,
                entry.line,
            )


def run_ordering_command(p: argparse.Namespace, entries: list[VersionEntry]) -> None:
    values = [e.value for e in entries]
    try:
        if p.command == "compare":
            if len(values) != 2:
                log.fatal(f"compare needs exactly two versions, got {len(values)}.")
            print(compare(values[0], values[1]))
        elif p.command == "sort":
            for v in sort_versions(values, reverse=p.descending):
                print(v)
        else:
            pick = max_version if p.command == "max" else min_version
            result = pick(values)
            if result is None:
                log.info(f"No versions given; nothing to {p.command}.")
            else:
                print(result)
    except InvalidVersion as e:
        # Point at the offending line when the version came from a file.
        culprit = next((x for x in entries if x.value == e.value), None)
        if culprit:
            log.fatal(str(e), culprit.file, culprit.line)
        log.fatal(str(e))


def main(args: list[str]) -> None:
    """Main entry point: read versions, then validate or order them."""
    p = parse_args(args)
    entries = get_version_entries(p)

    if p.command == "validate":
        validate(entries)
    else:
        run_ordering_command(p, entries)

    if log.warnings:
        # If any warnings were issued, exit with non-zero code
        log.fatal(f"Completed with {len(log.warnings)} warnings.")


def run() -> None:
    main(args=sys.argv[1:])


if __name__ == "__main__":
    run()
