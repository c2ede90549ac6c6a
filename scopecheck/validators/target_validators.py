"""
target_validators.py

Per-line validators for scan target specifications.

Accepted notations:
- Single IPv4 address      (192.168.1.10)
- CIDR block               (10.0.0.0/24)
- IPv4 range               (10.0.0.1-10.0.0.50)
- Domain name              (scanme.example.org)

Any of them may carry a trailing ":port". Blank lines and lines starting
with '#' are accepted silently.

Validators here return None when the target is valid, otherwise a single
human-readable message. They never raise for string input.
"""

import re
from typing import Optional, Tuple


# -------------------------------------------------
# Constants & Regex
# -------------------------------------------------

MIN_PORT = 1
MAX_PORT = 65535
MAX_MASK = 32
MAX_OCTET = 255
OCTET_COUNT = 4

COMMENT_PREFIX = "#"

_DIGITS_RE = re.compile(r"[0-9]+")

# labels: 1-63 chars, no leading/trailing hyphen; final label: letters only
_DOMAIN_RE = re.compile(
    r"([A-Za-z0-9]([A-Za-z0-9\-]{0,61}[A-Za-z0-9])?\.)+[A-Za-z]{2,}"
)

INVALID_TARGET_MESSAGE = (
    "invalid target format; expected a valid IP, CIDR, IP range, or domain name"
)


class TargetKind:
    """Structural classification of a single target line."""

    BLANK = "comment-or-blank"
    CIDR = "cidr"
    RANGE = "range"
    IP = "ip"
    DOMAIN = "domain"
    INVALID = "invalid"


# -------------------------------------------------
# Public Validators
# -------------------------------------------------

def validate_single_target(line: str) -> Optional[str]:
    """
    Validate one target line.

    Returns None if the line is valid (including blank and comment lines),
    otherwise the diagnostic message for the first rule it breaks.

    Example:
        >>> validate_single_target("10.0.0.0/24") is None
        True
        >>> validate_single_target("10.0/24")
        'incomplete IP address, missing 2 octet(s); example of correct format: 10.0.0.0/24'
    """
    kind, host = _classify(line)

    if kind == TargetKind.CIDR:
        return validate_cidr(host)
    if kind == TargetKind.RANGE:
        return validate_ip_range(host)
    if kind == TargetKind.IP:
        return validate_ipv4(host)
    if kind == TargetKind.INVALID:
        return INVALID_TARGET_MESSAGE
    return None


def classify_target(line: str) -> str:
    """
    Return the TargetKind of a line.

    The shape is decided before deep validation, so a malformed CIDR is
    still classified as TargetKind.CIDR.
    """
    kind, _ = _classify(line)
    return kind


def split_host_port(target: str) -> Tuple[str, Optional[int]]:
    """
    Split an optional trailing ':port' off a target.

    The suffix after the last colon counts as a port only when it is all
    digits and falls within 1-65535; otherwise the target is returned
    unchanged with port None.
    """
    host, sep, port_str = target.rpartition(":")
    if not sep or not _DIGITS_RE.fullmatch(port_str):
        return target, None

    # longer than "65535" once leading zeros are dropped: out of range
    if len(port_str.lstrip("0")) > len(str(MAX_PORT)):
        return target, None

    port = int(port_str)
    if MIN_PORT <= port <= MAX_PORT:
        return host, port
    return target, None


def validate_cidr(cidr: str) -> Optional[str]:
    """
    Validate CIDR notation (e.g. 192.168.1.0/24).

    The mask is checked first, then the number of octets, then each octet.
    An address part with missing octets gets a padded suggestion.
    """
    parts = cidr.split("/")
    if len(parts) != 2:
        return "invalid CIDR format"

    ip_part, mask_part = parts

    mask = _parse_number(mask_part, MAX_MASK)
    if mask is None:
        return f"invalid subnet mask: {mask_part}"

    octets = ip_part.split(".")
    if len(octets) < OCTET_COUNT:
        suggestion = suggest_cidr_fix(ip_part, mask_part)
        return (
            f"incomplete IP address, missing {OCTET_COUNT - len(octets)} octet(s); "
            f"example of correct format: {suggestion}"
        )
    if len(octets) > OCTET_COUNT:
        return f"IP address has {len(octets)} octets, expected {OCTET_COUNT}"

    return _octet_error(octets)


def suggest_cidr_fix(ip_part: str, mask_part: str) -> str:
    """
    Pad an incomplete CIDR address with zero octets.

    Example:
        >>> suggest_cidr_fix("10.0", "24")
        '10.0.0.0/24'
    """
    octets = ip_part.split(".")
    while len(octets) < OCTET_COUNT:
        octets.append("0")
    return ".".join(octets) + "/" + mask_part


def validate_ip_range(ip_range: str) -> Optional[str]:
    """
    Validate a full IPv4 range (start-end).

    Both ends must be valid IPv4 addresses and start must not exceed end.
    A range whose ends are equal is accepted.
    """
    parts = ip_range.split("-")
    if len(parts) != 2:
        return "invalid IP range format"

    start_ip = parts[0].strip()
    end_ip = parts[1].strip()

    if not is_valid_ipv4(start_ip):
        return f"start IP '{start_ip}' is invalid"
    if not is_valid_ipv4(end_ip):
        return f"end IP '{end_ip}' is invalid"

    if _octet_tuple(start_ip) > _octet_tuple(end_ip):
        return "start IP must not exceed end IP"

    return None


def validate_ipv4(value: str) -> Optional[str]:
    """
    Validate a plain IPv4 address, naming the first bad octet.

    Example:
        >>> validate_ipv4("10.0.0.400")
        "octet 4 '400' is invalid; expected a number between 0 and 255"
    """
    octets = value.split(".")
    if len(octets) != OCTET_COUNT:
        return INVALID_TARGET_MESSAGE
    return _octet_error(octets)


def is_valid_ipv4(value: str) -> bool:
    """Check for a dotted-quad IPv4 address with canonical octets."""
    octets = value.split(".")
    if len(octets) != OCTET_COUNT:
        return False
    return all(_parse_number(octet, MAX_OCTET) is not None for octet in octets)


def is_valid_domain(value: str) -> bool:
    """Check domain syntax only. Nothing is resolved."""
    return _DOMAIN_RE.fullmatch(value) is not None


# -------------------------------------------------
# Internal helpers
# -------------------------------------------------

def _classify(line: str) -> Tuple[str, str]:
    target = line.strip()
    if not target or target.startswith(COMMENT_PREFIX):
        return TargetKind.BLANK, target

    host, _ = split_host_port(target)

    if "/" in host:
        return TargetKind.CIDR, host

    if "-" in host:
        # a hyphen may also belong to a domain label
        left = host.split("-", 1)[0].strip()
        if is_valid_ipv4(left):
            return TargetKind.RANGE, host

    if _is_dotted_quad(host):
        return TargetKind.IP, host
    if is_valid_domain(host):
        return TargetKind.DOMAIN, host
    return TargetKind.INVALID, host


def _is_dotted_quad(value: str) -> bool:
    # four numeric parts, even if out of range
    octets = value.split(".")
    return len(octets) == OCTET_COUNT and all(_DIGITS_RE.fullmatch(o) for o in octets)


def _octet_error(octets) -> Optional[str]:
    for position, octet in enumerate(octets, 1):
        if _parse_number(octet, MAX_OCTET) is None:
            return (
                f"octet {position} '{octet}' is invalid; "
                f"expected a number between 0 and {MAX_OCTET}"
            )
    return None


def _parse_number(text: str, upper: int) -> Optional[int]:
    """Parse canonical decimal text in [0, upper]; None on any deviation."""
    if not _DIGITS_RE.fullmatch(text):
        return None
    # canonical text is never longer than the upper bound's digits
    if len(text) > len(str(upper)):
        return None
    value = int(text)
    if str(value) != text or value > upper:
        return None
    return value


def _octet_tuple(ip: str) -> Tuple[int, ...]:
    return tuple(int(octet) for octet in ip.split("."))
