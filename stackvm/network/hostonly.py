# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# stackvm/network/hostonly.py
"""
Host-only adapter records and subnet selection.

`VBoxManage list hostonlyifs` prints one paragraph per adapter:

    Name:            vboxnet0
    GUID:            786f6276-656e-4074-8000-0a0027000000
    DHCP:            Disabled
    IPAddress:       172.24.4.225
    NetworkMask:     255.255.255.0
    ...

    Name:            vboxnet1
    ...

Only `Name` and `IPAddress` matter here; every other key is read and dropped.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Union

DEFAULT_SUBNET_PREFIX = "172.24.4."
DEFAULT_CANONICAL_ADDRESS = "172.24.4.225"
DEFAULT_NETMASK = "255.255.255.0"

_KEY_NAME = "Name"
_KEY_IP = "IPAddress"


@dataclass(frozen=True)
class AdapterRecord:
    name: str = ""
    ip_address: str = ""


@dataclass(frozen=True)
class TargetState:
    selected_adapter: Optional[str] = None
    current_address: str = ""
    needs_reconfigure: bool = False

    @property
    def matched(self) -> bool:
        return self.selected_adapter is not None


@dataclass(frozen=True)
class NetworkTarget:
    """Where host-only adapters converge: subnet prefix, address, mask."""
    prefix: str = DEFAULT_SUBNET_PREFIX
    address: str = DEFAULT_CANONICAL_ADDRESS
    netmask: str = DEFAULT_NETMASK


class _RecordScanner:
    """
    Line scanner: accumulate key/value pairs, flush on a blank line or at
    end of input. A paragraph without any key/value line yields nothing.
    """

    def __init__(self) -> None:
        self._name = ""
        self._ip = ""
        self._seen = False

    def feed(self, line: str) -> Optional[AdapterRecord]:
        if not line.strip():
            return self.flush()

        key, sep, value = line.partition(":")
        if not sep:
            return None

        self._seen = True
        key = key.strip()
        if key == _KEY_NAME:
            self._name = value.strip()
        elif key == _KEY_IP:
            self._ip = value.strip()
        return None

    def flush(self) -> Optional[AdapterRecord]:
        if not self._seen:
            return None
        rec = AdapterRecord(name=self._name, ip_address=self._ip)
        self._name, self._ip, self._seen = "", "", False
        return rec


def iter_hostonlyifs(lines: Iterable[str]) -> Iterator[AdapterRecord]:
    scanner = _RecordScanner()
    for line in lines:
        rec = scanner.feed(line.rstrip("\r\n"))
        if rec is not None:
            yield rec
    rec = scanner.flush()
    if rec is not None:
        yield rec


def parse_hostonlyifs(output: Union[str, Iterable[str]]) -> List[AdapterRecord]:
    """
    Parse `VBoxManage list hostonlyifs` output into records, in listing
    order. Duplicate names are kept as separate records.
    """
    lines = output.splitlines() if isinstance(output, str) else output
    return list(iter_hostonlyifs(lines))


def select_target(
    adapters: Sequence[AdapterRecord],
    prefix: str = DEFAULT_SUBNET_PREFIX,
    canonical_address: str = DEFAULT_CANONICAL_ADDRESS,
) -> TargetState:
    """
    Pick the adapter sitting in `prefix` and decide whether it must be moved
    to `canonical_address`.

    When several adapters match, the last one in listing order wins.
    Records without a `Name` cannot be reconfigured and are never selected.
    """
    selected: Optional[AdapterRecord] = None
    for adapter in adapters:
        if adapter.name and adapter.ip_address.startswith(prefix):
            selected = adapter

    if selected is None:
        return TargetState()

    return TargetState(
        selected_adapter=selected.name,
        current_address=selected.ip_address,
        needs_reconfigure=selected.ip_address != canonical_address,
    )
