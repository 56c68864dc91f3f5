# SPDX-License-Identifier: MIT

"""
Secret hashing for the password and PIN stores.

New secrets are hashed with a salted passlib scheme. Hashes written by the
browser journal are 32-bit rolling checksums rendered as hex; they
are still accepted so existing credentials keep working, and callers should
replace them once ``needs_rehash`` reports True.
"""

import logging
import re

from passlib.context import CryptContext

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

_LEGACY_HASH_P = re.compile(r"^[0-9a-f]{1,8}$")


def legacy_checksum(secret: str) -> str:
    """
    The browser journal's checksum: ``hash = hash * 31 + code_unit`` over
    UTF-16 code units, wrapped to a signed 32-bit integer, absolute value
    as lowercase hex.
    """
    value = 0
    encoded = secret.encode("utf-16-le")
    for i in range(0, len(encoded), 2):
        code_unit = int.from_bytes(encoded[i : i + 2], "little")
        value = ((value << 5) - value + code_unit) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return format(abs(value), "x")


def is_legacy_hash(stored: str) -> bool:
    return _LEGACY_HASH_P.match(stored) is not None


def hash_secret(secret: str) -> str:
    return pwd_context.hash(secret)


def verify_secret(secret: str, stored: str) -> bool:
    if is_legacy_hash(stored):
        return legacy_checksum(secret) == stored
    if pwd_context.identify(stored) is None:
        logger.warning("Stored secret hash has an unrecognised format")
        return False
    return pwd_context.verify(secret, stored)


def needs_rehash(stored: str) -> bool:
    if is_legacy_hash(stored):
        return True
    return pwd_context.needs_update(stored)
