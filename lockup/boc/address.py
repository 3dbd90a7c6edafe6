# Copyright 2026 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import base64
import binascii
from dataclasses import dataclass
from typing import NamedTuple, Optional

from lockup.boc.consts import HASH_BYTES
from lockup.exception import InvalidAddress

BOUNCEABLE_TAG = 0x11
NON_BOUNCEABLE_TAG = 0x51
TEST_FLAG = 0x80

# flag + workchain + hash + crc16
FRIENDLY_ADDRESS_LEN_BYTES = 1 + 1 + HASH_BYTES + 2


def get_checksum(address_bytes: bytes) -> bytes:
    """ Calculate the CRC16 (XMODEM variant) of the address and return it as 2 bytes (big-endian)

        :param address_bytes: address before checksum
        :type address_bytes: bytes

        :return: checksum of the address
        :rtype: bytes
    """
    return binascii.crc_hqx(address_bytes, 0).to_bytes(2, byteorder='big')


@dataclass(frozen=True, slots=True)
class Address:
    """An internal address: a workchain id and the 256-bit hash of the account."""

    workchain: int
    hash: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.workchain, int) or not -128 <= self.workchain <= 127:
            raise InvalidAddress(f'workchain must be a signed 8-bit integer, got {self.workchain!r}')
        if not isinstance(self.hash, bytes) or len(self.hash) != HASH_BYTES:
            raise InvalidAddress(f'address hash must have {HASH_BYTES} bytes')

    @classmethod
    def parse(cls, text: str) -> 'Address':
        """Parse either the raw form (`0:<hex>`) or the user-friendly base64 form."""
        if ':' in text:
            return cls.parse_raw(text)
        return cls.parse_friendly(text).address

    @classmethod
    def parse_raw(cls, text: str) -> 'Address':
        workchain_str, _, hash_hex = text.partition(':')
        try:
            workchain = int(workchain_str)
            hash_bytes = bytes.fromhex(hash_hex)
        except ValueError:
            raise InvalidAddress(f'invalid raw address: {text!r}')
        return cls(workchain, hash_bytes)

    @classmethod
    def parse_friendly(cls, text: str) -> 'FriendlyAddress':
        """ Decode a user-friendly address, either url-safe or standard base64

        :raises InvalidAddress: if text is not valid base64, has the wrong size, an unknown flag or invalid checksum
        """
        try:
            data = base64.b64decode(text.replace('-', '+').replace('_', '/'), validate=True)
        except (binascii.Error, ValueError):
            raise InvalidAddress('Invalid base64 address')
        if len(data) != FRIENDLY_ADDRESS_LEN_BYTES:
            raise InvalidAddress(f'Address size must have {FRIENDLY_ADDRESS_LEN_BYTES} bytes')
        if data[-2:] != get_checksum(data[:-2]):
            raise InvalidAddress('Invalid checksum of address')
        tag = data[0]
        test_only = bool(tag & TEST_FLAG)
        tag &= ~TEST_FLAG
        if tag not in (BOUNCEABLE_TAG, NON_BOUNCEABLE_TAG):
            raise InvalidAddress(f'Unknown address flag: {tag:#04x}')
        workchain = int.from_bytes(data[1:2], byteorder='big', signed=True)
        address = cls(workchain, data[2:2 + HASH_BYTES])
        return FriendlyAddress(address=address, bounceable=tag == BOUNCEABLE_TAG, test_only=test_only)

    def to_raw_string(self) -> str:
        return f'{self.workchain}:{self.hash.hex()}'

    def to_string(
        self,
        *,
        bounceable: Optional[bool] = None,
        test_only: Optional[bool] = None,
        url_safe: Optional[bool] = None,
    ) -> str:
        """Render the user-friendly form, missing flags come from the global settings."""
        from lockup.conf.get_settings import get_global_settings
        settings = get_global_settings()
        if bounceable is None:
            bounceable = settings.BOUNCEABLE
        if test_only is None:
            test_only = settings.TESTNET
        if url_safe is None:
            url_safe = settings.URL_SAFE_ADDRESSES

        tag = BOUNCEABLE_TAG if bounceable else NON_BOUNCEABLE_TAG
        if test_only:
            tag |= TEST_FLAG
        data = bytes([tag]) + self.workchain.to_bytes(1, byteorder='big', signed=True) + self.hash
        data += get_checksum(data)
        if url_safe:
            return base64.urlsafe_b64encode(data).decode('ascii')
        return base64.b64encode(data).decode('ascii')

    def __str__(self) -> str:
        return self.to_string()


class FriendlyAddress(NamedTuple):
    """Result of parsing a user-friendly address, the flags are not part of the address itself."""
    address: Address
    bounceable: bool
    test_only: bool
