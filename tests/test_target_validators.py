import pytest

from scopecheck.validators.target_validators import (
    INVALID_TARGET_MESSAGE,
    TargetKind,
    classify_target,
    is_valid_domain,
    is_valid_ipv4,
    split_host_port,
    suggest_cidr_fix,
    validate_cidr,
    validate_ip_range,
    validate_ipv4,
    validate_single_target,
)


@pytest.mark.parametrize("line", ["", "   ", "\t\n", "# comment", "   #indented comment", "#10.0.0.400"])
def test_blank_and_comment_lines_are_valid(line):
    assert validate_single_target(line) is None
    assert classify_target(line) == TargetKind.BLANK


@pytest.mark.parametrize("ip", [
    "0.0.0.0", "10.0.0.1", "192.168.1.1", "255.255.255.255", "1.2.3.4",
])
def test_valid_ipv4(ip):
    assert is_valid_ipv4(ip)
    assert validate_single_target(ip) is None


def test_every_octet_value_is_accepted():
    for value in range(256):
        assert validate_single_target(f"{value}.{255 - value}.{value}.0") is None


@pytest.mark.parametrize("ip", [
    "256.1.1.1", "1.2.3", "1.2.3.4.5", "01.2.3.4", "1.2.3.00", "+1.2.3.4",
    "1.2. 3.4", "1..3.4", "a.b.c.d", "",
])
def test_invalid_ipv4_syntax(ip):
    assert not is_valid_ipv4(ip)


def test_plain_ip_octet_out_of_range_names_position():
    message = validate_single_target("10.0.0.400")
    assert message == "octet 4 '400' is invalid; expected a number between 0 and 255"


def test_plain_ip_leading_zero_names_position():
    assert validate_ipv4("10.007.0.1") == "octet 2 '007' is invalid; expected a number between 0 and 255"


def test_three_numeric_octets_is_generic_error():
    assert validate_single_target("10.0.1") == INVALID_TARGET_MESSAGE


# -------------------------------------------------
# CIDR
# -------------------------------------------------

@pytest.mark.parametrize("mask", [0, 1, 8, 16, 24, 31, 32])
def test_valid_cidr(mask):
    assert validate_single_target(f"10.20.30.0/{mask}") is None
    assert classify_target(f"10.20.30.0/{mask}") == TargetKind.CIDR


@pytest.mark.parametrize("mask", ["33", "64", "-1", "", "abc", "024", "2 4"])
def test_cidr_bad_mask(mask):
    assert validate_cidr(f"10.0.0.0/{mask}") == f"invalid subnet mask: {mask}"


def test_cidr_mask_checked_before_address():
    assert validate_single_target("999.1/40") == "invalid subnet mask: 40"


def test_cidr_with_two_slashes():
    assert validate_single_target("10.0.0.0/24/8") == "invalid CIDR format"


@pytest.mark.parametrize("ip_part, missing, suggestion", [
    ("10.0", 2, "10.0.0.0/24"),
    ("10", 3, "10.0.0.0/24"),
    ("192.168.1", 1, "192.168.1.0/24"),
])
def test_cidr_incomplete_address_suggests_fix(ip_part, missing, suggestion):
    message = validate_single_target(f"{ip_part}/24")
    assert f"missing {missing} octet(s)" in message
    assert message.endswith(suggestion)


def test_suggest_cidr_fix_keeps_mask_and_has_four_octets():
    fixed = suggest_cidr_fix("172.16", "12")
    address, mask = fixed.split("/")
    assert mask == "12"
    assert len(address.split(".")) == 4
    assert fixed == "172.16.0.0/12"


def test_cidr_too_many_octets():
    assert validate_cidr("10.0.0.0.0/24") == "IP address has 5 octets, expected 4"


def test_cidr_bad_octet_reports_first_position():
    assert validate_cidr("10.300.0.999/24") == (
        "octet 2 '300' is invalid; expected a number between 0 and 255"
    )
    assert validate_cidr("10.0.00.0/24") == (
        "octet 3 '00' is invalid; expected a number between 0 and 255"
    )


def test_malformed_cidr_is_never_a_domain():
    assert classify_target("example.com/24") == TargetKind.CIDR
    assert validate_single_target("example.com/24").startswith("incomplete IP address")
    assert validate_single_target("a.b.c.d/24") == (
        "octet 1 'a' is invalid; expected a number between 0 and 255"
    )


# -------------------------------------------------
# Ranges
# -------------------------------------------------

@pytest.mark.parametrize("target", [
    "192.168.1.1-192.168.1.50",
    "10.0.0.5-10.0.0.5",
    "10.0.0.255-10.0.1.0",
    "9.255.255.255-10.0.0.0",
    "10.0.0.1 - 10.0.0.2",
])
def test_valid_ranges(target):
    assert classify_target(target) == TargetKind.RANGE
    assert validate_single_target(target) is None


def test_reversed_range_fails():
    assert validate_single_target("192.168.1.5-192.168.1.2") == "start IP must not exceed end IP"
    assert validate_single_target("10.0.1.0-10.0.0.255") == "start IP must not exceed end IP"


def test_range_compares_octets_numerically():
    assert validate_ip_range("10.0.0.9-10.0.0.10") is None


def test_range_bad_end():
    assert validate_single_target("10.0.0.1-10.0.0.256") == "end IP '10.0.0.256' is invalid"
    assert validate_single_target("10.0.0.1-50") == "end IP '50' is invalid"


def test_range_bad_start():
    assert validate_ip_range("10.0.0-10.0.0.5") == "start IP '10.0.0' is invalid"


def test_range_with_three_parts():
    assert validate_single_target("10.0.0.1-10.0.0.2-10.0.0.3") == "invalid IP range format"


def test_hyphen_without_ip_falls_through_to_domain():
    assert classify_target("my-host.example.com") == TargetKind.DOMAIN
    assert validate_single_target("my-host.example.com") is None


# -------------------------------------------------
# Domains
# -------------------------------------------------

@pytest.mark.parametrize("domain", [
    "example.com", "sub.example.co", "a.io", "xn--80ak6aa92e.com", "scan-me.example.org",
    "EXAMPLE.COM", "1password.com",
])
def test_valid_domains(domain):
    assert is_valid_domain(domain)
    assert validate_single_target(domain) is None


@pytest.mark.parametrize("domain", [
    "-bad.com", "bad-.com", "localhost", "example.c", "example.123",
    "not a domain_with_underscore", "exa_mple.com", "example..com", ".example.com",
    "a" * 64 + ".com",
])
def test_invalid_domains(domain):
    assert not is_valid_domain(domain)
    assert validate_single_target(domain) == INVALID_TARGET_MESSAGE


def test_label_of_63_chars_is_accepted():
    assert is_valid_domain("a" * 63 + ".com")


# -------------------------------------------------
# Ports
# -------------------------------------------------

@pytest.mark.parametrize("target, expected", [
    ("10.0.0.1:80", ("10.0.0.1", 80)),
    ("example.com:65535", ("example.com", 65535)),
    ("example.com:1", ("example.com", 1)),
    ("example.com:0", ("example.com:0", None)),
    ("example.com:65536", ("example.com:65536", None)),
    ("example.com:80a", ("example.com:80a", None)),
    ("example.com:", ("example.com:", None)),
    ("example.com", ("example.com", None)),
    ("a:b:443", ("a:b", 443)),
])
def test_split_host_port(target, expected):
    assert split_host_port(target) == expected


def test_targets_with_ports():
    assert validate_single_target("10.0.0.1:8080") is None
    assert validate_single_target("10.0.0.0/24:443") is None
    assert validate_single_target("example.com:443") is None
    assert validate_single_target("example.com:99999") == INVALID_TARGET_MESSAGE


def test_never_raises_on_garbage():
    for line in ["/", "-", ":", "::::", "/-:", "\x00", "10.0.0.1-", "-10.0.0.1", "💥.com", "1.2.3.4/"]:
        result = validate_single_target(line)
        assert result is None or isinstance(result, str)


@pytest.mark.parametrize("line", [
    "10.0.0.1:" + "1" * 5000,
    "10.0.0.0/" + "1" * 5000,
    "1" * 5000 + ".0.0.0",
    "10.0.0.1-10.0.0." + "9" * 5000,
])
def test_very_long_digit_runs_do_not_raise(line):
    assert isinstance(validate_single_target(line), str)


def test_long_digit_mask_and_octet_messages():
    assert validate_single_target("10.0.0.0/" + "1" * 5000) == "invalid subnet mask: " + "1" * 5000
    assert validate_single_target("1" * 5000 + ".0.0.0").startswith("octet 1 '111")


def test_port_with_leading_zeros_still_parsed():
    assert split_host_port("example.com:0000443") == ("example.com", 443)
    assert split_host_port("example.com:" + "9" * 6) == ("example.com:" + "9" * 6, None)
