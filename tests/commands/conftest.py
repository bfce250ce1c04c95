"""Command test fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result

from graphctl.cli import cli

type Invoke = Callable[..., Result]
type InvokeJson = Callable[..., dict[str, Any]]


@pytest.fixture
def invoke(cli_runner: CliRunner) -> Invoke:
    """Run the CLI with the given arguments."""

    def _invoke(*args: str, input: str | None = None) -> Result:
        return cli_runner.invoke(cli, list(args), input=input)

    return _invoke


@pytest.fixture
def invoke_json(invoke: Invoke) -> InvokeJson:
    """Run the CLI with ``--json`` and parse the payload from stdout or stderr."""

    def _invoke_json(*args: str) -> dict[str, Any]:
        result = invoke("--json", *args)
        payload = result.stdout if result.exit_code == 0 else result.stderr
        return json.loads(payload)

    return _invoke_json


@pytest.fixture
def seeded(invoke: Invoke, _isolated_workspace: None) -> None:
    """A-B(1), B-C(2), A-D(10), C-D(1) in the isolated workspace."""
    for node_id in "ABCD":
        assert invoke("node", "add", node_id).exit_code == 0
    for source, target, weight in (("A", "B", 1), ("B", "C", 2), ("A", "D", 10), ("C", "D", 1)):
        assert invoke("edge", "add", source, target, "--weight", str(weight)).exit_code == 0
