# SPDX-License-Identifier: GPL-2.0-or-later
from stackvm.core.exceptions import ToolInvocationError
from stackvm.network.hostonly import AdapterRecord


class FakeVBoxManage:
    """
    In-memory stand-in for stackvm.network.vboxmanage.VBoxManage.

    A successful ipconfig updates the stored adapter, like the real host would.
    """

    def __init__(self, adapters=(), *, ipconfig_rc=0, ipconfig_output="", list_error=None):
        self.adapters = [AdapterRecord(name, ip) for name, ip in adapters]
        self.ipconfig_rc = ipconfig_rc
        self.ipconfig_output = ipconfig_output
        self.list_error = list_error
        self.list_calls = 0
        self.ipconfig_calls = []

    def list_hostonlyifs(self):
        self.list_calls += 1
        if self.list_error is not None:
            raise self.list_error
        return list(self.adapters)

    def hostonlyif_ipconfig(self, name, ip, netmask):
        self.ipconfig_calls.append((name, ip, netmask))
        if self.ipconfig_rc != 0:
            raise ToolInvocationError(
                code=self.ipconfig_rc,
                msg=f"VBoxManage hostonlyif exited with status {self.ipconfig_rc}",
                command=["VBoxManage", "hostonlyif", "ipconfig", name, "--ip", ip, "--netmask", netmask],
                output=self.ipconfig_output,
            )
        self.adapters = [AdapterRecord(a.name, ip) if a.name == name else a for a in self.adapters]
        return ""
