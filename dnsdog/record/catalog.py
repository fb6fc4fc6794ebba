"""The record types that can be decoded, looked up by number or by name."""

from __future__ import annotations

from dataclasses import dataclass

from ..wire import Wire
from .address import A, AAAA
from .caa import CAA
from .eui import EUI48, EUI64
from .hinfo import HINFO
from .keys import OPENPGPKEY, SSHFP, TLSA
from .loc import LOC
from .names import CNAME, MX, NS, PTR, SRV
from .naptr import NAPTR
from .others import UnknownQtype
from .soa import SOA
from .txt import TXT
from .uri import URI

# OPT is deliberately absent: it is a pseudo-record read in its own way.
_RECORD_TYPES: tuple[type[Wire], ...] = (
    A, AAAA, CAA, CNAME, EUI48, EUI64, HINFO, LOC, MX, NAPTR,
    NS, OPENPGPKEY, PTR, SSHFP, SOA, SRV, TLSA, TXT, URI,
)

_BY_NUMBER: dict[int, type[Wire]] = {cls.RR_TYPE: cls for cls in _RECORD_TYPES}
_BY_NAME: dict[str, type[Wire]] = {cls.NAME: cls for cls in _RECORD_TYPES}


@dataclass(frozen=True)
class OtherRecord:
    """A record whose type cannot be decoded, kept as its raw bytes."""

    type_number: UnknownQtype
    data: bytes


def record_class(type_number: int) -> type[Wire] | None:
    """The record class that decodes the given type number, if there is one."""
    return _BY_NUMBER.get(type_number)


def record_class_by_name(name: str) -> type[Wire] | None:
    """The record class with the given type name, if there is one."""
    return _BY_NAME.get(name)