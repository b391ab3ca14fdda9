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

import os
from pathlib import Path
from typing import NoReturn

_GITHUB_LEVELS = {
    "debug": "debug",
    "info": "notice",
    "warning": "warning",
    "error": "error",
    "success": "notice",
}

_LOCAL_LEVELS = {
    "debug": "DEBUG",
    "info": "INFO",
    "warning": "WARNING",
    "error": "ERROR",
    "success": "SUCCESS",
}


def is_running_in_github_actions() -> bool:
    return "GITHUB_ACTIONS" in os.environ


def is_debug_enabled() -> bool:
    return bool(os.environ.get("VERSION_ORDER_DEBUG"))


class Logger:
    """Print-based logger that emits workflow annotations on GitHub Actions.

    Warnings are remembered, so a command can report them all and then fail.
    """

    def __init__(self, name: str):
        self.name = name
        self.warnings: list[str] = []

    def _loc(self, file: Path | None, line: int | None) -> str:
        if file and file.is_absolute() and file.is_relative_to(Path.cwd()):
            file = file.relative_to(Path.cwd())

        if is_running_in_github_actions():
            if file and line:
                return f" file={file},line={line}"
            if file:
                return f" file={file}"
            return ""

        if file and line:
            return f" {file}:{line}"
        if file:
            return f" {file}"
        return ""

    def _print(
        self, prefix: str, msg: str, file: Path | None = None, line: int | None = None
    ) -> None:
        location = self._loc(file, line)
        if is_running_in_github_actions():
            level = _GITHUB_LEVELS.get(prefix, prefix)
            print(f"::{level}{location}::{self.name} {msg}")
            return

        print(f"{_LOCAL_LEVELS.get(prefix, prefix)}:{location} {self.name} {msg}")

    def debug(self, msg: str) -> None:
        if is_debug_enabled():
            self._print("debug", msg)

    def info(self, msg: str) -> None:
        self._print("info", msg)

    def ok(self, msg: str) -> None:
        self._print("success", msg)

    def warning(
        self, msg: str, file: Path | None = None, line: int | None = None
    ) -> None:
        self.warnings.append(msg)
        self._print("warning", msg, file, line)

    def fatal(
        self, msg: str, file: Path | None = None, line: int | None = None
    ) -> NoReturn:
        self._print("error", msg, file, line)
        raise SystemExit(1)
