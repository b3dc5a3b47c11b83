# SPDX-License-Identifier: LGPL-3.0-or-later
# stackvm/orchestrator/provider.py
from __future__ import annotations

import os
from typing import Mapping, Optional

PROVIDER_VIRTUALBOX = "virtualbox"
PROVIDER_LIBVIRT = "libvirt"
PROVIDERS = (PROVIDER_VIRTUALBOX, PROVIDER_LIBVIRT)

DEFAULT_PROVIDER = PROVIDER_VIRTUALBOX
PROVIDER_ENV = "VAGRANT_DEFAULT_PROVIDER"

# Only VirtualBox backs the public network with a host-only adapter.
HOSTONLY_PROVIDER = PROVIDER_VIRTUALBOX


def resolve_provider(
    flag: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    fallback: str = DEFAULT_PROVIDER,
) -> str:
    """Explicit flag, then $VAGRANT_DEFAULT_PROVIDER, then `fallback`."""
    env = os.environ if env is None else env
    for candidate in (flag, env.get(PROVIDER_ENV)):
        if candidate and candidate.strip():
            return candidate.strip()
    return fallback


def needs_hostonly_adapter(provider: str) -> bool:
    return provider == HOSTONLY_PROVIDER
