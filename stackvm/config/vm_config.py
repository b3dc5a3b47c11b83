# SPDX-License-Identifier: LGPL-3.0-or-later
# -*- coding: utf-8 -*-
# stackvm/config/vm_config.py
from __future__ import annotations

import argparse
import ipaddress
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from ..core.exceptions import Fatal
from ..network.hostonly import NetworkTarget

CACHE_SCOPES = ("box", "machine")

DEFAULT_BOX = "ubuntu/jammy64"
DEFAULT_HOSTNAME = "devstack"
DEFAULT_CPUS = 4
DEFAULT_MEMORY_MB = 8192
DEFAULT_DISK_SIZE = "40GB"
DEFAULT_PRIVATE_IP = "192.168.27.100"
DEFAULT_FORWARDED_PORTS = ({"guest": 80, "host": 8080}, {"guest": 6080, "host": 6080})
DEFAULT_PROVISION_SCRIPTS = ("provision/devstack.sh",)

# Scalar fields that may come from CLI flags as well as config files.
_SCALAR_FIELDS = (
    "box",
    "hostname",
    "cpus",
    "memory_mb",
    "disk_size",
    "private_ip",
    "cache_enabled",
    "cache_scope",
    "project_dir",
)

_STRING_FIELDS = ("box", "hostname", "disk_size", "private_ip", "cache_scope")


def _check_ipv4(label: str, value: str) -> None:
    try:
        ipaddress.IPv4Address(value)
    except ValueError as e:
        raise ValueError(f"{label} is not a valid IPv4 address: {value!r}") from e


@dataclass(frozen=True)
class ForwardedPort:
    guest: int
    host: int

    def __post_init__(self) -> None:
        for name, port in (("guest", self.guest), ("host", self.host)):
            if not 0 < int(port) <= 65535:
                raise ValueError(f"forwarded port {name} out of range: {port}")


@dataclass(frozen=True)
class VmConfig:
    """
    Declarative settings for the development VM.

    Only validated here; the values are handed to the provisioning stage
    verbatim through `to_env()`.
    """
    box: str = DEFAULT_BOX
    hostname: str = DEFAULT_HOSTNAME
    cpus: int = DEFAULT_CPUS
    memory_mb: int = DEFAULT_MEMORY_MB
    disk_size: str = DEFAULT_DISK_SIZE
    private_ip: str = DEFAULT_PRIVATE_IP
    forwarded_ports: List[ForwardedPort] = field(
        default_factory=lambda: [ForwardedPort(**p) for p in DEFAULT_FORWARDED_PORTS]
    )
    provision_scripts: List[str] = field(default_factory=lambda: list(DEFAULT_PROVISION_SCRIPTS))
    cache_enabled: bool = True
    cache_scope: str = "box"
    network: NetworkTarget = field(default_factory=NetworkTarget)
    project_dir: Path = field(default_factory=Path.cwd)
    # Config-file provider; ranks below --provider and $VAGRANT_DEFAULT_PROVIDER.
    provider: Optional[str] = None

    def __post_init__(self) -> None:
        for name in _STRING_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str):
                raise TypeError(f"{name} must be a string (got {type(value).__name__}: {value!r})")

        box = self.box.strip()
        if not box:
            raise ValueError("box must not be empty")
        object.__setattr__(self, "box", box)

        hostname = self.hostname.strip()
        if not hostname:
            raise ValueError("hostname must not be empty")
        object.__setattr__(self, "hostname", hostname)

        if int(self.cpus) < 1:
            raise ValueError(f"cpus must be >= 1 (got {self.cpus})")
        if int(self.memory_mb) < 512:
            raise ValueError(f"memory_mb must be >= 512 (got {self.memory_mb})")
        object.__setattr__(self, "cpus", int(self.cpus))
        object.__setattr__(self, "memory_mb", int(self.memory_mb))

        _check_ipv4("private_ip", self.private_ip)
        _check_ipv4("network.address", self.network.address)
        _check_ipv4("network.netmask", self.network.netmask)
        if not self.network.address.startswith(self.network.prefix):
            raise ValueError(
                f"network.address {self.network.address} is outside prefix {self.network.prefix!r}"
            )

        if self.cache_scope not in CACHE_SCOPES:
            raise ValueError(f"cache_scope must be one of {', '.join(CACHE_SCOPES)} (got {self.cache_scope!r})")

        object.__setattr__(self, "project_dir", Path(self.project_dir).expanduser().resolve())

        if self.provider is not None:
            object.__setattr__(self, "provider", str(self.provider).strip() or None)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "VmConfig":
        kw: Dict[str, Any] = {k: data[k] for k in _SCALAR_FIELDS if data.get(k) is not None}

        if data.get("provider") is not None:
            kw["provider"] = data["provider"]

        net = data.get("network") or {}
        if not isinstance(net, Mapping):
            raise Fatal(2, "network must be a mapping with prefix/address/netmask")
        if net:
            kw["network"] = NetworkTarget(
                prefix=str(net.get("prefix", NetworkTarget.prefix)),
                address=str(net.get("address", NetworkTarget.address)),
                netmask=str(net.get("netmask", NetworkTarget.netmask)),
            )

        try:
            if data.get("forwarded_ports") is not None:
                kw["forwarded_ports"] = [
                    ForwardedPort(guest=int(p["guest"]), host=int(p["host"])) for p in data["forwarded_ports"]
                ]
            if data.get("provision_scripts") is not None:
                kw["provision_scripts"] = [str(s) for s in data["provision_scripts"]]
            return cls(**kw)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise Fatal(2, f"Invalid VM config: {e}", cause=e) from e

    @classmethod
    def from_args(cls, args: argparse.Namespace, conf: Optional[Mapping[str, Any]] = None) -> "VmConfig":
        """Merged config with CLI flags on top."""
        data: Dict[str, Any] = dict(conf or {})
        for k in _SCALAR_FIELDS:
            v = getattr(args, k, None)
            if v is not None:
                data[k] = v
        return cls.from_dict(data)

    def to_env(self) -> Dict[str, str]:
        return {
            "STACKVM_BOX": self.box,
            "STACKVM_HOSTNAME": self.hostname,
            "STACKVM_CPUS": str(self.cpus),
            "STACKVM_MEMORY": str(self.memory_mb),
            "STACKVM_DISK_SIZE": self.disk_size,
            "STACKVM_PRIVATE_IP": self.private_ip,
            "STACKVM_PUBLIC_IP": self.network.address,
            "STACKVM_PUBLIC_NETMASK": self.network.netmask,
            "STACKVM_FORWARDED_PORTS": ",".join(f"{p.guest}:{p.host}" for p in self.forwarded_ports),
            "STACKVM_PROVISION_SCRIPTS": ",".join(self.provision_scripts),
            "STACKVM_CACHE_SCOPE": self.cache_scope if self.cache_enabled else "",
        }
