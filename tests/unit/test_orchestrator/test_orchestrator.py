# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tests for the bring-up pipeline."""
from __future__ import annotations

import argparse
from unittest.mock import Mock

import pytest

from fakes.fake_logger import FakeLogger
from fakes.fake_vboxmanage import FakeVBoxManage
from stackvm.config.vm_config import VmConfig
from stackvm.core.exceptions import Fatal, ToolInvocationError
from stackvm.orchestrator.orchestrator import Orchestrator


def _args(**kw):
    base = dict(cmd=None, provider="virtualbox", dry_run=False, skip_handoff=False, no_provision=False, vagrant=None, vboxmanage=None)
    base.update(kw)
    return argparse.Namespace(**base)


def _orchestrator(vbox, handoff_rc=0, logger=None, **kw):
    handoff = Mock()
    handoff.run.return_value = handoff_rc
    orch = Orchestrator(logger or FakeLogger(), _args(**kw), VmConfig(), vbox=vbox, handoff=handoff)
    return orch, handoff


@pytest.mark.unit
class TestBringUp:
    def test_reconfigures_then_hands_off(self):
        vbox = FakeVBoxManage([("vboxnet0", "172.24.4.5")])
        orch, handoff = _orchestrator(vbox)

        rc = orch.run()

        assert rc == 0
        assert vbox.ipconfig_calls == [("vboxnet0", "172.24.4.225", "255.255.255.0")]
        handoff.run.assert_called_once_with("virtualbox")

    def test_handoff_exit_code_is_returned(self):
        orch, _handoff = _orchestrator(FakeVBoxManage([]), handoff_rc=1)

        assert orch.run() == 1

    def test_no_match_still_hands_off(self):
        vbox = FakeVBoxManage([("vboxnet0", "10.0.0.1")])
        orch, handoff = _orchestrator(vbox)

        assert orch.run() == 0
        assert vbox.ipconfig_calls == []
        handoff.run.assert_called_once()

    def test_reconfigure_failure_aborts_with_tool_status(self):
        vbox = FakeVBoxManage([("vboxnet0", "172.24.4.5")], ipconfig_rc=4, ipconfig_output="VBoxManage: error: locked")
        logger = FakeLogger()
        orch, handoff = _orchestrator(vbox, logger=logger)

        rc = orch.run()

        assert rc == 4
        handoff.run.assert_not_called()
        assert "VBoxManage: error: locked" in logger.messages("error")

    def test_inspection_failure_aborts(self):
        vbox = FakeVBoxManage(list_error=ToolInvocationError(code=127, msg="Command not found: VBoxManage"))
        orch, handoff = _orchestrator(vbox)

        assert orch.run() == 127
        assert vbox.ipconfig_calls == []
        handoff.run.assert_not_called()

    def test_other_provider_skips_network_check(self):
        vbox = FakeVBoxManage(list_error=AssertionError("must not be called"))
        orch, handoff = _orchestrator(vbox, provider="libvirt")

        assert orch.run() == 0
        assert vbox.list_calls == 0
        handoff.run.assert_called_once_with("libvirt")

    def test_provider_from_environment(self, monkeypatch):
        monkeypatch.setenv("VAGRANT_DEFAULT_PROVIDER", "libvirt")
        vbox = FakeVBoxManage([("vboxnet0", "172.24.4.5")])
        orch, handoff = _orchestrator(vbox, provider=None)

        orch.run()

        assert vbox.list_calls == 0
        handoff.run.assert_called_once_with("libvirt")

    def test_fallback_provider_runs_check(self):
        vbox = FakeVBoxManage([("vboxnet0", "172.24.4.5")])
        orch, handoff = _orchestrator(vbox, provider=None)

        orch.run()

        assert len(vbox.ipconfig_calls) == 1
        handoff.run.assert_called_once_with("virtualbox")

    def test_two_runs_reconfigure_once(self):
        vbox = FakeVBoxManage([("vboxnet0", "172.24.4.5")])

        for _ in range(2):
            orch, _handoff = _orchestrator(vbox)
            assert orch.run() == 0

        assert len(vbox.ipconfig_calls) == 1


@pytest.mark.unit
class TestCommands:
    def test_reconcile_skips_handoff(self):
        vbox = FakeVBoxManage([("vboxnet0", "172.24.4.5")])
        orch, handoff = _orchestrator(vbox, cmd="reconcile")

        assert orch.run() == 0
        assert len(vbox.ipconfig_calls) == 1
        handoff.run.assert_not_called()

    def test_skip_handoff_flag(self):
        orch, handoff = _orchestrator(FakeVBoxManage([]), skip_handoff=True)

        assert orch.run() == 0
        handoff.run.assert_not_called()

    def test_dry_run_does_not_reconfigure(self):
        vbox = FakeVBoxManage([("vboxnet0", "172.24.4.5")])
        orch, handoff = _orchestrator(vbox, dry_run=True)

        assert orch.run() == 0
        assert vbox.ipconfig_calls == []
        handoff.run.assert_not_called()

    def test_dry_run_with_other_provider_skips_handoff(self):
        orch, handoff = _orchestrator(FakeVBoxManage([]), provider="libvirt", dry_run=True)

        assert orch.run() == 0
        handoff.run.assert_not_called()

    def test_config_provider_ranks_below_environment(self, monkeypatch):
        handoff = Mock()
        handoff.run.return_value = 0
        vbox = FakeVBoxManage([])
        orch = Orchestrator(FakeLogger(), _args(provider=None), VmConfig(provider="libvirt"), vbox=vbox, handoff=handoff)

        orch.run()
        handoff.run.assert_called_with("libvirt")

        monkeypatch.setenv("VAGRANT_DEFAULT_PROVIDER", "virtualbox")
        orch.run()
        handoff.run.assert_called_with("virtualbox")
        assert vbox.list_calls == 1

    def test_check_is_read_only(self, monkeypatch):
        rendered = []
        monkeypatch.setattr("stackvm.modes.check_mode.CheckMode.render", lambda self, result: rendered.append(result))
        vbox = FakeVBoxManage([("vboxnet0", "172.24.4.5")])
        orch, handoff = _orchestrator(vbox, cmd="check")

        assert orch.run() == 0
        assert vbox.ipconfig_calls == []
        assert rendered[0].state.needs_reconfigure is True
        handoff.run.assert_not_called()

    def test_check_inspection_failure(self):
        vbox = FakeVBoxManage(list_error=ToolInvocationError(code=2, msg="VBoxManage list exited with status 2"))
        orch, _handoff = _orchestrator(vbox, cmd="check")

        assert orch.run() == 2

    def test_check_with_other_provider(self):
        orch, handoff = _orchestrator(FakeVBoxManage([]), cmd="check", provider="libvirt")

        assert orch.run() == 0
        handoff.run.assert_not_called()

    def test_unknown_command(self):
        orch, _handoff = _orchestrator(FakeVBoxManage([]), cmd="destroy")

        with pytest.raises(Fatal):
            orch.run()
