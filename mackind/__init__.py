from .macaddress import (
    InvalidCharacter,
    InvalidFormat,
    InvalidLength,
    MACAddress,
    MACAddressValueError,
    MACKind,
    ParseResult,
    parse,
    )

__all__ = [
    'InvalidCharacter',
    'InvalidFormat',
    'InvalidLength',
    'MACAddress',
    'MACAddressValueError',
    'MACKind',
    'ParseResult',
    'parse',
    ]
