"""XRPL account address helpers: classic address checks and X-address decoding."""

from __future__ import annotations

import hashlib
from typing import NamedTuple, Optional

from ledger_balances.api.errors import ValidationError

XRPL_ALPHABET = "rpshnaf39wBUDNEGHJKLM4PQRST7VWXYZ2bcdeCg65jkm8oFqi1tuvAxyz"
_ALPHABET_INDEX = {char: index for index, char in enumerate(XRPL_ALPHABET)}

ACCOUNT_ID_PREFIX = b"\x00"
ACCOUNT_ID_LENGTH = 20
X_ADDRESS_MAIN_PREFIX = b"\x05\x44"
X_ADDRESS_TEST_PREFIX = b"\x04\x93"
MAX_TAG = 0xFFFFFFFF


class XAddressParts(NamedTuple):
    classic_address: str
    tag: Optional[int]
    is_test: bool


def _checksum(payload: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(payload).digest()).digest()[:4]


def _b58_encode(data: bytes) -> str:
    number = int.from_bytes(data, "big")
    chars = []
    while number:
        number, remainder = divmod(number, 58)
        chars.append(XRPL_ALPHABET[remainder])
    leading = len(data) - len(data.lstrip(b"\x00"))
    return XRPL_ALPHABET[0] * leading + "".join(reversed(chars))


def _b58_decode(text: str) -> bytes:
    number = 0
    for char in text:
        if char not in _ALPHABET_INDEX:
            raise ValueError(f"invalid base58 character: {char!r}")
        number = number * 58 + _ALPHABET_INDEX[char]
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    leading = len(text) - len(text.lstrip(XRPL_ALPHABET[0]))
    return b"\x00" * leading + body


def encode_check(payload: bytes) -> str:
    """Base58check-encode a payload with the XRPL alphabet."""

    return _b58_encode(payload + _checksum(payload))


def decode_check(text: str) -> bytes:
    """Decode a base58check string and verify its checksum."""

    raw = _b58_decode(text)
    if len(raw) < 5:
        raise ValueError("encoded value is too short")
    payload, checksum = raw[:-4], raw[-4:]
    if _checksum(payload) != checksum:
        raise ValueError("checksum mismatch")
    return payload


def decode_classic_address(address: str) -> bytes:
    """Return the 20-byte account id behind a classic address."""

    payload = decode_check(address)
    if len(payload) != ACCOUNT_ID_LENGTH + 1 or payload[:1] != ACCOUNT_ID_PREFIX:
        raise ValueError("not a classic account address")
    return payload[1:]


def encode_classic_address(account_id: bytes) -> str:
    """Encode a 20-byte account id as a classic r-address."""

    if len(account_id) != ACCOUNT_ID_LENGTH:
        raise ValueError("account id must be 20 bytes")
    return encode_check(ACCOUNT_ID_PREFIX + account_id)


def is_valid_classic_address(address: str) -> bool:
    """True when the address decodes to a checksummed 20-byte account id."""

    try:
        decode_classic_address(address)
    except ValueError:
        return False
    return True


def classic_to_x_address(classic_address: str, tag: Optional[int] = None, is_test: bool = False) -> str:
    """Pack a classic address and optional destination tag into an X-address."""

    if tag is not None and not 0 <= tag <= MAX_TAG:
        raise ValueError("tag must fit in 32 bits")
    account_id = decode_classic_address(classic_address)
    prefix = X_ADDRESS_TEST_PREFIX if is_test else X_ADDRESS_MAIN_PREFIX
    flag = b"\x00" if tag is None else b"\x01"
    tag_bytes = (tag or 0).to_bytes(8, "little")
    return encode_check(prefix + account_id + flag + tag_bytes)


def decode_x_address(x_address: str) -> XAddressParts:
    """Split an X-address into classic address, destination tag and network."""

    payload = decode_check(x_address)
    if len(payload) != 31:
        raise ValueError("not an X-address")

    prefix, account_id, flag, tag_bytes = payload[:2], payload[2:22], payload[22], payload[23:]
    if prefix == X_ADDRESS_MAIN_PREFIX:
        is_test = False
    elif prefix == X_ADDRESS_TEST_PREFIX:
        is_test = True
    else:
        raise ValueError("unknown X-address prefix")

    tag_value = int.from_bytes(tag_bytes, "little")
    if flag == 0:
        if tag_value != 0:
            raise ValueError("X-address without tag flag carries a tag")
        tag = None
    elif flag == 1:
        if tag_value > MAX_TAG:
            raise ValueError("X-address tag exceeds 32 bits")
        tag = tag_value
    else:
        raise ValueError("unsupported X-address flags")

    return XAddressParts(encode_classic_address(account_id), tag, is_test)


def is_valid_x_address(x_address: str) -> bool:
    try:
        decode_x_address(x_address)
    except ValueError:
        return False
    return True


def ensure_classic_address(address: str) -> str:
    """Return the classic form of an account address.

    Classic addresses are returned unchanged. X-addresses are decoded when they
    carry no destination tag; balances are not tracked per tag, so tagged
    X-addresses are rejected.
    """
    address = address.strip()
    if is_valid_classic_address(address):
        return address
    try:
        parts = decode_x_address(address)
    except ValueError as exc:
        raise ValidationError(f"Invalid account address: {address}") from exc
    if parts.tag is not None:
        raise ValidationError(
            "This command does not support the use of a tag. Use an address without a tag."
        )
    return parts.classic_address
