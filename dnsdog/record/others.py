"""Record types that are known by name or number but not decoded."""

from __future__ import annotations

from dataclasses import dataclass

# Type numbers, in ascending order, of record types that have a name but
# no decoder.
_NAMES_BY_NUMBER: dict[int, str] = {
    17: "RP", 18: "AFSDB", 24: "SIG", 25: "KEY", 36: "KX", 37: "CERT",
    39: "DNAME", 42: "APL", 43: "DS", 45: "IPSECKEY", 46: "RRSIG",
    47: "NSEC", 48: "DNSKEEYE", 49: "DHCID", 50: "NSEC3", 51: "NSEC3PARAM",
    53: "SMIMEA", 55: "HIP", 59: "CDS", 60: "CDNSKEY", 61: "OPENPGPKEY",
    62: "CSYNC", 249: "TKEY", 250: "TSIG", 251: "IXFR", 252: "AXFR",
    255: "ANY", 256: "URI", 32768: "TA", 32769: "DLV",
}

_NUMBERS_BY_NAME: dict[str, int] = {name: number for number, name in _NAMES_BY_NUMBER.items()}


@dataclass(frozen=True)
class UnknownQtype:
    """A record type number that cannot be decoded.

    ``name`` is set when the number is a known type that is still not
    parsed; it is None for completely unknown numbers.
    """

    number: int
    name: str | None = None

    @classmethod
    def from_number(cls, number: int) -> UnknownQtype:
        """Look up a type number, attaching its name if it is known."""
        return cls(number, _NAMES_BY_NUMBER.get(number))

    @property
    def heard_of(self) -> bool:
        """Whether the type number has a known name."""
        return self.name is not None

    def __str__(self) -> str:
        return self.name if self.name is not None else str(self.number)


def find_other_qtype_number(name: str) -> int | None:
    """The number of a known but undecoded record type, by name."""
    return _NUMBERS_BY_NAME.get(name)