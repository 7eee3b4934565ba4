#!/usr/bin/python3

import enum
import functools
import logging

from typing import NamedTuple, Optional

from .util import HEXDIGITS, NOTATIONS, delimiters_in, group


log = logging.getLogger(__name__)


MACLENGTH = 48

# Bits of the first octet, counted from the least-significant end.
IG_BIT = 0x01
UL_BIT = 0x02
EUI_MASK = 0x03
ELI_MASK = 0x0F
ELI_BITS = 0x0A


class MACAddressValueError(ValueError):
    """Base class for every reason a MAC address fails to parse."""


class InvalidLength(MACAddressValueError):
    pass


class InvalidCharacter(MACAddressValueError):
    """A character is neither a hexadecimal digit nor one of the recognized
    delimiters. Unrecognized separators such as '_' or spaces land here,
    not in InvalidFormat.
    """


class InvalidFormat(MACAddressValueError):
    pass


class MACKind(enum.Enum):
    """Extended identifier family of a 48-bit address."""

    EUI = 'unique'
    ELI = 'local'
    UNKNOWN = 'unknown'

    def __str__(self):
        return self.value


@functools.total_ordering
class MACAddress:
    """A 48-bit media access control address.

    MAC addresses share the structure of IEEE 48-bit extended identifiers.
    An extended unique identifier (EUI) carries an organizationally unique
    identifier (OUI) in its first 24 bits, an extended local identifier
    (ELI) carries a company ID (CID) there instead.
    """

    __slots__ = ('_mac', '__weakref__')

    _ALL_ONES = (2**MACLENGTH) - 1
    _max_len = MACLENGTH

    def __init__(self, address):
        """Construct single MAC address.

        Address can be a string of 12 hexadecimal digits in plain
        (a0b1c2d3e4f5), hyphen (a0-b1-c2-d3-e4-f5), colon
        (a0:b1:c2:d3:e4:f5) or dot (a0b1.c2d3.e4f5) notation, an integer,
        or another MACAddress.
        """
        if isinstance(address, MACAddress):
            self._mac = address._mac
            return
        try:
            if isinstance(address, int) and not isinstance(address, bool):
                self._check_int_address(address)
                self._mac = address
                return
            if isinstance(address, str):
                self._mac = self._mac_int_from_string(address)
                return
        except MACAddressValueError as exc:
            log.debug('rejected %r: %s', address, exc)
            raise
        raise TypeError('%r is not a string or integer MAC address'
                        % (address,))

    def __int__(self):
        return self._mac

    def __str__(self):
        return self.to_colon_notation()

    def __repr__(self):
        return '%s(%r)' % (self.__class__.__name__, str(self))

    def __eq__(self, other):
        if not isinstance(other, MACAddress):
            return NotImplemented
        return self._mac == other._mac

    def __lt__(self, other):
        if not isinstance(other, MACAddress):
            return NotImplemented
        return self._mac < other._mac

    def __hash__(self):
        return hash(self._mac)

    @classmethod
    def _check_int_address(cls, address):
        if address < 0:
            msg = '%d (< 0) is not permitted as a MAC address'
            raise InvalidLength(msg % address)
        if address > cls._ALL_ONES:
            msg = '%d (>= 2**%d) is not permitted as a MAC address'
            raise InvalidLength(msg % (address, cls._max_len))

    @classmethod
    def _mac_int_from_string(cls, mac_str):
        if not mac_str:
            raise InvalidLength('Address cannot be empty')

        seps = delimiters_in(mac_str)
        if len(seps) > 1:
            msg = '%r mixes delimiters %s'
            raise InvalidFormat(msg % (mac_str, ' and '.join(
                repr(sep) for sep in sorted(seps))))
        sep = next(iter(seps), '')

        groups = mac_str.split(sep) if sep else [mac_str]
        digits = ''.join(groups)
        for char in digits:
            if char not in HEXDIGITS:
                msg = '%r contains %r, which is not a hexadecimal digit'
                raise InvalidCharacter(msg % (mac_str, char))
        if len(digits) != cls._max_len // 4:
            msg = '%r has %d hexadecimal digits, expected %d'
            raise InvalidLength(msg % (mac_str, len(digits),
                                       cls._max_len // 4))

        width = NOTATIONS[sep]
        if any(len(chunk) != width for chunk in groups):
            msg = '%r is not grouped as %d digits between each %r'
            raise InvalidFormat(msg % (mac_str, width, sep))
        return int(digits, 16)

    @property
    def _first_octet(self):
        return self._mac >> (self._max_len - 8)

    def to_binary_representation(self):
        """Return the 48 bits, most-significant bit of octet 0 first."""
        return format(self._mac, '0%db' % self._max_len)

    def to_decimal_representation(self):
        return self._mac

    def to_plain_notation(self):
        return '%012x' % self._mac

    def to_hyphen_notation(self):
        return group(self.to_plain_notation(), NOTATIONS['-'], '-')

    def to_colon_notation(self):
        return group(self.to_plain_notation(), NOTATIONS[':'], ':')

    def to_dot_notation(self):
        return group(self.to_plain_notation(), NOTATIONS['.'], '.')

    def to_fragments(self):
        """Return the leading and trailing 24 bits as a pair of integers.

        The leading fragment is an OUI when kind() is EUI and a CID when
        kind() is ELI. The trailing fragment identifies the interface.
        """
        half = self._max_len // 2
        return self._mac >> half, self._mac & ((1 << half) - 1)

    def kind(self):
        """Return the extended identifier family.

        EUI when both the U/L and I/G bits of the first octet are clear.
        ELI when the four low bits of the first octet are 1010, the
        locally administered unicast quadrant reserved for ELIs.
        """
        octet = self._first_octet
        if octet & EUI_MASK == 0:
            return MACKind.EUI
        if octet & ELI_MASK == ELI_BITS:
            return MACKind.ELI
        return MACKind.UNKNOWN

    def has_oui(self):
        return self.kind() is MACKind.EUI

    def has_cid(self):
        return self.kind() is MACKind.ELI

    def is_broadcast(self):
        return self._mac == self._ALL_ONES

    def is_multicast(self):
        """Layer-two group address, excluding the broadcast address."""
        return bool(self._first_octet & IG_BIT) and not self.is_broadcast()

    def is_unicast(self):
        return not self._first_octet & IG_BIT

    def is_uaa(self):
        """Universally administered: the U/L bit is clear."""
        return not self._first_octet & UL_BIT

    def is_laa(self):
        """Locally administered: the U/L bit is set."""
        return bool(self._first_octet & UL_BIT)


class ParseResult(NamedTuple):
    address: Optional[MACAddress]
    error: Optional[MACAddressValueError]

    @property
    def ok(self):
        return self.error is None


def parse(text):
    """Parse text into a ParseResult instead of raising on bad input."""
    try:
        return ParseResult(MACAddress(text), None)
    except MACAddressValueError as exc:
        return ParseResult(None, exc)
