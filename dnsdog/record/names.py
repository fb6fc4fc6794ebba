"""Records whose data is chiefly a domain name: CNAME, NS, PTR, MX and SRV."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..labels import Labels, read_labels
from ..wire import Cursor, Wire, WrongLabelLength

logger = logging.getLogger(__name__)


def _check_length(stated_length: int, length_after_labels: int) -> None:
    if stated_length != length_after_labels:
        logger.warning(
            "Length is incorrect (stated length %d, length after labels %d)",
            stated_length, length_after_labels,
        )
        raise WrongLabelLength(stated_length, length_after_labels)
    logger.debug("Length is correct")


@dataclass(frozen=True)
class CNAME(Wire):
    """A CNAME record, which aliases one domain to another."""

    NAME = "CNAME"
    RR_TYPE = 5

    domain: Labels

    @classmethod
    def read(cls, stated_length: int, cursor: Cursor) -> CNAME:
        domain, domain_length = read_labels(cursor)
        logger.debug("Parsed domain -> %s", domain)
        _check_length(stated_length, domain_length)
        return cls(domain)


@dataclass(frozen=True)
class NS(Wire):
    """An NS record, which points a domain to a name server."""

    NAME = "NS"
    RR_TYPE = 2

    nameserver: Labels

    @classmethod
    def read(cls, stated_length: int, cursor: Cursor) -> NS:
        nameserver, nameserver_length = read_labels(cursor)
        logger.debug("Parsed nameserver -> %s", nameserver)
        _check_length(stated_length, nameserver_length)
        return cls(nameserver)


@dataclass(frozen=True)
class PTR(Wire):
    """A PTR record, which points to a canonical name; used for reverse lookups."""

    NAME = "PTR"
    RR_TYPE = 12

    cname: Labels

    @classmethod
    def read(cls, stated_length: int, cursor: Cursor) -> PTR:
        cname, cname_length = read_labels(cursor)
        logger.debug("Parsed cname -> %s", cname)
        _check_length(stated_length, cname_length)
        return cls(cname)


@dataclass(frozen=True)
class MX(Wire):
    """An MX record, naming a mail server for the domain with a preference."""

    NAME = "MX"
    RR_TYPE = 15

    preference: int
    exchange: Labels

    @classmethod
    def read(cls, stated_length: int, cursor: Cursor) -> MX:
        preference = cursor.read_u16()
        logger.debug("Parsed preference -> %d", preference)
        exchange, exchange_length = read_labels(cursor)
        logger.debug("Parsed exchange -> %s", exchange)
        _check_length(stated_length, 2 + exchange_length)
        return cls(preference, exchange)


@dataclass(frozen=True)
class SRV(Wire):
    """An SRV record, locating a service by host name and port."""

    NAME = "SRV"
    RR_TYPE = 33

    priority: int
    weight: int
    port: int
    target: Labels

    @classmethod
    def read(cls, stated_length: int, cursor: Cursor) -> SRV:
        priority = cursor.read_u16()
        weight = cursor.read_u16()
        port = cursor.read_u16()
        logger.debug("Parsed priority %d, weight %d, port %d", priority, weight, port)
        target, target_length = read_labels(cursor)
        logger.debug("Parsed target -> %s", target)
        _check_length(stated_length, 3 * 2 + target_length)
        return cls(priority, weight, port, target)