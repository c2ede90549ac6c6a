"""
target_splitter.py
==================
Expands CIDR blocks and IP ranges into single addresses and splits a
target list into fixed-size batches, so a large scope can be handed to
several scanner workers.

A ':port' suffix on a block or range is carried over to every expanded
address. Targets that cannot be expanded (domains, single IPs, malformed
blocks) are passed through unchanged as one entry each.

Counting never expands: a /0 block is counted, not listed.
"""

import ipaddress
from itertools import islice
from typing import Iterator, List, Optional

from scopecheck.validators.batch_validators import iter_target_lines
from scopecheck.validators.target_validators import (
    is_valid_ipv4,
    split_host_port,
    validate_cidr,
    validate_ip_range,
)

DEFAULT_BATCH_SIZE = 50


class TargetSplitter:
    """
    Splits newline-separated targets into batches of at most batch_size
    expanded addresses.
    Example:
        splitter = TargetSplitter(batch_size=2)
        splitter.split_targets("10.0.0.1-10.0.0.3")
        -> ["10.0.0.1\\n10.0.0.2", "10.0.0.3"]
    """

    def __init__(self, batch_size: int = DEFAULT_BATCH_SIZE):
        """
        :param batch_size: Maximum addresses per batch; values below 1 fall
                           back to DEFAULT_BATCH_SIZE
        """
        if batch_size is None or batch_size <= 0:
            batch_size = DEFAULT_BATCH_SIZE
        self.batch_size = batch_size

    # ----------------------------------------------------------------------
    def split_targets(self, text: str) -> List[str]:
        """
        Return the original text as a single batch when it fits, otherwise
        newline-joined batches of expanded targets in input order.
        """
        if not self.need_split(text):
            return [text]

        batches = []
        targets = self.iter_all_targets(text)
        while True:
            batch = list(islice(targets, self.batch_size))
            if not batch:
                return batches
            batches.append("\n".join(batch))

    # ----------------------------------------------------------------------
    def iter_all_targets(self, text: str) -> Iterator[str]:
        """Lazily expand every target line. Duplicates are kept."""
        for _, line in iter_target_lines(text):
            yield from self._expand_line(line)

    def parse_all_targets(self, text: str) -> List[str]:
        return list(self.iter_all_targets(text))

    # ----------------------------------------------------------------------
    def get_target_count(self, text: str) -> int:
        """Number of addresses the text expands to, computed without expanding."""
        return sum(self._count_line(line) for _, line in iter_target_lines(text))

    def need_split(self, text: str) -> bool:
        return self.get_target_count(text) > self.batch_size

    # ----------------------------------------------------------------------
    @staticmethod
    def expand_cidr(cidr: str) -> Iterator[str]:
        """
        Expand a CIDR block to its addresses.

        Network and broadcast addresses are dropped when the block holds
        more than two addresses. An invalid block is returned as-is.
        """
        network = _network(cidr)
        if network is None:
            yield cidr
            return

        ips = network.hosts() if network.num_addresses > 2 else iter(network)
        for ip in ips:
            yield str(ip)

    @staticmethod
    def expand_ip_range(ip_range: str) -> Iterator[str]:
        """Expand an inclusive start-end range. An invalid range is returned as-is."""
        bounds = _range_bounds(ip_range)
        if bounds is None:
            yield ip_range
            return

        start, end = bounds
        for value in range(start, end + 1):
            yield str(ipaddress.IPv4Address(value))

    @staticmethod
    def count_cidr(cidr: str) -> int:
        network = _network(cidr)
        if network is None:
            return 1
        if network.num_addresses > 2:
            return network.num_addresses - 2
        return network.num_addresses

    @staticmethod
    def count_ip_range(ip_range: str) -> int:
        bounds = _range_bounds(ip_range)
        if bounds is None:
            return 1
        start, end = bounds
        return end - start + 1

    # ----------------------------------------------------------------------
    def _expand_line(self, line: str) -> Iterator[str]:
        host, port = split_host_port(line)
        addresses = None
        if "/" in host:
            if _network(host) is not None:
                addresses = self.expand_cidr(host)
        elif _is_range_shape(host):
            if _range_bounds(host) is not None:
                addresses = self.expand_ip_range(host)

        if addresses is None:
            yield line
            return

        suffix = f":{port}" if port is not None else ""
        for address in addresses:
            yield address + suffix

    def _count_line(self, line: str) -> int:
        host, _ = split_host_port(line)
        if "/" in host:
            return self.count_cidr(host)
        if _is_range_shape(host):
            return self.count_ip_range(host)
        return 1


# ----------------------------------------------------------------------
# Internal helpers
# ----------------------------------------------------------------------
def _is_range_shape(host: str) -> bool:
    # a hyphen may also belong to a domain label
    return "-" in host and is_valid_ipv4(host.split("-", 1)[0].strip())


def _network(cidr: str) -> Optional[ipaddress.IPv4Network]:
    if validate_cidr(cidr) is not None:
        return None
    return ipaddress.IPv4Network(cidr, strict=False)


def _range_bounds(ip_range: str):
    if validate_ip_range(ip_range) is not None:
        return None
    start_ip, end_ip = (part.strip() for part in ip_range.split("-"))
    return int(ipaddress.IPv4Address(start_ip)), int(ipaddress.IPv4Address(end_ip))
