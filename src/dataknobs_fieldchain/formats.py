"""Catalog of string format predicates registered with the default registry.
"""

from __future__ import annotations

import base64
import binascii
import ipaddress
import re
from datetime import datetime
from typing import Any
from urllib.parse import urlparse

from .predicates import predicates

_EMAIL = re.compile(r"^[A-Za-z0-9.!#$%&'*+/=?^_`{|}~-]+@[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?(?:\.[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?)+$")
_UUID = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-7][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$", re.IGNORECASE)
_UUID_VERSIONS = (1, 2, 3, 4, 5, 7)
_HOSTNAME_LABEL = re.compile(r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)$")
_TIME = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)(:([0-5]\d))?$")
_HEX = re.compile(r"^[0-9a-fA-F]+$")
_BASE64 = re.compile(r"^[A-Za-z0-9+/]*={0,2}$")
_BASE64_URLSAFE = re.compile(r"^[A-Za-z0-9_-]*={0,2}$")


def matches_datetime(value: str, fmt: str) -> bool:
    """Check that ``value`` parses with ``fmt`` and formats back unchanged."""
    try:
        return datetime.strptime(value, fmt).strftime(fmt) == value
    except ValueError:
        return False


def is_hostname(value: str) -> bool:
    if not value or len(value) > 253:
        return False
    return all(_HOSTNAME_LABEL.match(label) for label in value.rstrip(".").split("."))


def is_url(value: str) -> bool:
    parsed = urlparse(value)
    return bool(parsed.scheme) and bool(parsed.netloc)


def is_ip(value: str, version: int | None = None) -> bool:
    try:
        address = ipaddress.ip_address(value)
    except ValueError:
        return False
    return version is None or address.version == version


def is_base64(value: str, urlsafe: bool = False) -> bool:
    if _BASE64.match(value):
        try:
            return base64.b64encode(base64.b64decode(value, validate=True)).decode() == value
        except (binascii.Error, ValueError):
            pass
    if urlsafe and _BASE64_URLSAFE.match(value):
        padded = value + "=" * (-len(value) % 4)
        try:
            base64.urlsafe_b64decode(padded)
            return True
        except (binascii.Error, ValueError):
            return False
    return False


def _string_predicate(check):
    def predicate(value: Any, key: Any, payload: Any) -> bool:
        return isinstance(value, str) and bool(check(value))
    return predicate


FORMATS = {
    "email": (lambda v: _EMAIL.match(v), "Value must be a valid email address"),
    "url": (is_url, "Value must be a valid URL"),
    "uuid": (lambda v: _UUID.match(v), "Value must be a valid UUID"),
    "ip": (is_ip, "Value must be a valid IP address"),
    "ipv4": (lambda v: is_ip(v, 4), "Value must be a valid IPv4 address"),
    "ipv6": (lambda v: is_ip(v, 6), "Value must be a valid IPv6 address"),
    "hex": (lambda v: _HEX.match(v), "Value must be a valid hexadecimal string"),
    "base64": (is_base64, "Value must be a valid Base64 encoded string"),
    "base64_urlsafe": (
        lambda v: is_base64(v, urlsafe=True),
        "Value must be a valid URL-safe Base64 encoded string",
    ),
    "date": (lambda v: matches_datetime(v, "%Y-%m-%d"), "Value must be a valid date in format '%Y-%m-%d'"),
    "datetime": (
        lambda v: matches_datetime(v, "%Y-%m-%dT%H:%M:%S"),
        "Value must be a valid datetime in format '%Y-%m-%dT%H:%M:%S'",
    ),
    "time": (lambda v: _TIME.match(v), "Value must be a valid time in format HH:MM or HH:MM:SS"),
    "hostname": (is_hostname, "Value must be a valid hostname"),
    "domain": (lambda v: "." in v.strip(".") and is_hostname(v), "Value must be a valid domain name"),
}

for _version in _UUID_VERSIONS:
    FORMATS[f"uuid_v{_version}"] = (
        lambda v, version=_version: _UUID.match(v) is not None and v[14] == str(version),
        f"Value must be a valid UUID version {_version}",
    )

for _name, (_check, _message) in FORMATS.items():
    if not predicates.has(_name):
        predicates.register_predicate(_name, _string_predicate(_check), _message)
