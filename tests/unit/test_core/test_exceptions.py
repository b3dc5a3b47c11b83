# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tests for the project exception hierarchy."""
from __future__ import annotations

import pytest

from stackvm.core.exceptions import (
    Fatal,
    StackVmError,
    ToolInvocationError,
    format_exception_for_cli,
)


@pytest.mark.unit
class TestExceptionHierarchy:
    """Test exception class hierarchy and basic functionality."""

    def test_base_exception_creation(self):
        err = StackVmError(code=1, msg="Test error")

        assert err.code == 1
        assert err.msg == "Test error"
        assert err.cause is None
        assert err.context == {}

    def test_fatal_positional(self):
        err = Fatal(2, "bad flag")

        assert isinstance(err, StackVmError)
        assert err.code == 2
        assert str(err) == "bad flag"

    def test_tool_invocation_error_fields(self):
        err = ToolInvocationError(
            code=3,
            msg="VBoxManage hostonlyif exited with status 3",
            command=["VBoxManage", "hostonlyif", "ipconfig", "vboxnet0"],
            output="VBoxManage: error: denied",
        )

        assert isinstance(err, StackVmError)
        assert not isinstance(err, Fatal)
        d = err.to_dict()
        assert d["type"] == "ToolInvocationError"
        assert d["code"] == 3
        assert d["command"][0] == "VBoxManage"
        assert d["output"] == "VBoxManage: error: denied"

    def test_exception_with_context(self):
        err = StackVmError(code=1, msg="Error", context={"adapter": "vboxnet0", "ip": "172.24.4.225"})

        assert err.context == {"adapter": "vboxnet0", "ip": "172.24.4.225"}

    def test_message_is_single_line(self):
        err = StackVmError(code=1, msg="line one\nline two\r\n  three")

        assert err.msg == "line one line two three"


@pytest.mark.unit
class TestExceptionExitCodes:
    def test_valid_exit_codes(self):
        for code in [0, 1, 2, 126, 127, 255]:
            assert StackVmError(code=code, msg="Test").code == code

    def test_out_of_range_codes_are_clamped(self):
        assert StackVmError(code=256, msg="Too high").code == 255
        assert StackVmError(code=-1, msg="Negative").code == 1

    def test_non_integer_code_defaults_to_one(self):
        assert StackVmError(code="x", msg="Bad").code == 1  # type: ignore[arg-type]


@pytest.mark.unit
class TestFormatForCli:
    def test_verbosity_levels(self):
        err = StackVmError(code=1, msg="Failed", cause=ValueError("inner"), context={"adapter": "vboxnet0"})

        assert format_exception_for_cli(err) == "Failed"
        assert "adapter='vboxnet0'" in format_exception_for_cli(err, verbose=1)
        assert "cause: ValueError: inner" in format_exception_for_cli(err, verbose=2)

    def test_foreign_exception(self):
        assert format_exception_for_cli(RuntimeError("plain")) == "plain"
        assert format_exception_for_cli(RuntimeError("plain"), verbose=2) == "RuntimeError: plain"
