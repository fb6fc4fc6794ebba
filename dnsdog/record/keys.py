"""Records holding keys and fingerprints: OPENPGPKEY, SSHFP and TLSA."""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass

from ..wire import Cursor, MandatedLength, Wire, WrongRecordLength

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OPENPGPKEY(Wire):
    """An OPENPGPKEY record, holding an OpenPGP key as raw bytes."""

    NAME = "OPENPGPKEY"
    RR_TYPE = 61

    key: bytes

    @classmethod
    def read(cls, stated_length: int, cursor: Cursor) -> OPENPGPKEY:
        if stated_length == 0:
            raise WrongRecordLength(stated_length, MandatedLength.at_least(1))
        key = cursor.read_exact(stated_length)
        logger.debug("Parsed key of %d bytes", len(key))
        return cls(key)

    def base64_key(self) -> str:
        """The key, base64-encoded."""
        return base64.b64encode(self.key).decode("ascii")


@dataclass(frozen=True)
class SSHFP(Wire):
    """An SSHFP record, holding the fingerprint of an SSH public key."""

    NAME = "SSHFP"
    RR_TYPE = 44

    algorithm: int
    fingerprint_type: int
    fingerprint: bytes

    @classmethod
    def read(cls, stated_length: int, cursor: Cursor) -> SSHFP:
        algorithm = cursor.read_u8()
        logger.debug("Parsed algorithm -> %d", algorithm)
        fingerprint_type = cursor.read_u8()
        logger.debug("Parsed fingerprint type -> %d", fingerprint_type)

        if stated_length <= 2:
            raise WrongRecordLength(stated_length, MandatedLength.at_least(3))

        fingerprint = cursor.read_exact(stated_length - 2)
        return cls(algorithm, fingerprint_type, fingerprint)

    def hex_fingerprint(self) -> str:
        """The fingerprint as lower-case hexadecimal."""
        return self.fingerprint.hex()


@dataclass(frozen=True)
class TLSA(Wire):
    """A TLSA record, associating a TLS certificate or key with a domain."""

    NAME = "TLSA"
    RR_TYPE = 52

    certificate_usage: int
    selector: int
    matching_type: int
    certificate_data: bytes

    @classmethod
    def read(cls, stated_length: int, cursor: Cursor) -> TLSA:
        certificate_usage = cursor.read_u8()
        selector = cursor.read_u8()
        matching_type = cursor.read_u8()
        logger.debug(
            "Parsed certificate usage %d, selector %d, matching type %d",
            certificate_usage, selector, matching_type,
        )

        if stated_length <= 3:
            raise WrongRecordLength(stated_length, MandatedLength.at_least(4))

        certificate_data = cursor.read_exact(stated_length - 3)
        return cls(certificate_usage, selector, matching_type, certificate_data)

    def hex_certificate_data(self) -> str:
        """The certificate data as lower-case hexadecimal."""
        return self.certificate_data.hex()