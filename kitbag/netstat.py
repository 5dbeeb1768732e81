"""List network interfaces with their addresses and traffic counters."""

from __future__ import annotations

import socket
import sys
from typing import Optional, Sequence

import psutil


def family_name(family: int) -> str:
    """Name an address family as the report shows it."""
    if family == psutil.AF_LINK:
        return "AF_PACKET"
    if family == socket.AF_INET:
        return "AF_INET"
    if family == socket.AF_INET6:
        return "AF_INET6"
    return "???"


def interface_report() -> list[str]:
    """Return the report lines for every interface address."""
    counters = psutil.net_io_counters(pernic=True)
    lines = []
    for name, addresses in psutil.net_if_addrs().items():
        for address in addresses:
            family = int(address.family)
            lines.append(f"{name:<8} {family_name(family)}({family})")
            if family in (socket.AF_INET, socket.AF_INET6):
                lines.append(f"\taddress: [{address.address}]")
            elif family == psutil.AF_LINK:
                stats = counters.get(name)
                if stats is not None:
                    lines.append(
                        f"\ttx_packets\t= {stats.packets_sent:10d}; rx_packets\t= {stats.packets_recv:10d}"
                    )
                    lines.append(
                        f"\ttx_bytes\t= {stats.bytes_sent:10d}; rx_bytes\t\t= {stats.bytes_recv:10d}"
                    )
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the interface report."""
    try:
        lines = interface_report()
    except OSError as exc:
        print(f"interfaces: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())