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
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from src.version_order.gh_logging import Logger
from src.version_order.main import main


class MockLogger(Logger):
    """Logger that captures messages for testing."""

    def __init__(self):
        super().__init__("test")
        self.debug_messages: list[str] = []
        self.info_messages: list[str] = []
        self.ok_messages: list[str] = []
        self.warning_messages: list[str] = []
        self.error_messages: list[str] = []
        self.locations: list[tuple[Path | None, int | None]] = []

    def _print(
        self, prefix: str, msg: str, file: Path | None = None, line: int | None = None
    ) -> None:
        if prefix == "debug":
            self.debug_messages.append(msg)
        elif prefix == "info":
            self.info_messages.append(msg)
        elif prefix == "success":
            self.ok_messages.append(msg)
        elif prefix == "warning":
            self.warning_messages.append(msg)
            self.locations.append((file, line))
        elif prefix == "error":
            self.error_messages.append(msg)
            self.locations.append((file, line))


@pytest.fixture
def mock_logger():
    """Create a mock logger and install it as the CLI logger."""
    logger = MockLogger()
    with patch("src.version_order.main.log", logger):
        yield logger


@pytest.fixture
def build_fake_filesystem(fs: Any):
    """Convenience helper to build a fake filesystem from a nested dict."""

    def _build(structure: dict[str, object], base_path: str = "") -> None:
        base = base_path or "/"
        for name, value in structure.items():
            path = f"{base.rstrip('/')}/{name}"
            if isinstance(value, dict):
                fs.makedirs(path, exist_ok=True)
                _build(value, path)
            else:
                fs.create_file(path, contents=value)

    return _build


@pytest.fixture
def run_cli(mock_logger, capsys):
    """Run the CLI and return (exit code, stdout lines)."""

    def _run(args: list[str]) -> tuple[int, list[str]]:
        try:
            main(args)
            code = 0
        except SystemExit as e:
            code = int(e.code or 0)
        return code, capsys.readouterr().out.splitlines()

    return _run
