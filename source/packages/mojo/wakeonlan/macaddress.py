"""
.. module:: macaddress
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the HardwareAddress object which is used to parse and hold IEEE 802 MAC-48
               addresses.

.. moduleauthor:: Myron Walker <myron.walker@gmail.com>
"""

__author__ = "Myron Walker"
__copyright__ = "Copyright 2023, Myron W Walker"
__credits__ = []
__version__ = "1.0.0"
__maintainer__ = "Myron Walker"
__email__ = "myron.walker@gmail.com"
__status__ = "Development" # Prototype, Development or Production
__license__ = "MIT"

from typing import Tuple, Union

from mojo.wakeonlan.constants import HARDWARE_ADDRESS_LENGTH, REGEX_MAC_ADDRESS, REGEX_MAC_OCTET
from mojo.wakeonlan.exceptions import InvalidAddressFormat


class HardwareAddress:
    """
        The :class:`HardwareAddress` object holds the six octets of a MAC-48 address in network
        order.  Instances are immutable and compare by value.
    """

    __slots__ = ("_octets",)

    def __init__(self, octets: Union[bytes, bytearray, Tuple[int, ...]]):
        """
            Creates a hardware address from exactly six raw octets.

            :param octets: The six octets of the address in network order.
        """
        try:
            octets = bytes(octets)
        except (TypeError, ValueError) as conv_err:
            errmsg = "Unable to convert {!r} to hardware address octets.".format(octets)
            raise InvalidAddressFormat(errmsg, octets) from conv_err

        if len(octets) != HARDWARE_ADDRESS_LENGTH:
            errmsg = "A hardware address must be {} bytes, got {} bytes.".format(HARDWARE_ADDRESS_LENGTH, len(octets))
            raise InvalidAddressFormat(errmsg, octets)

        object.__setattr__(self, "_octets", octets)
        return

    def __setattr__(self, name, value):
        raise AttributeError("HardwareAddress objects are immutable.")

    def __bytes__(self) -> bytes:
        return self._octets

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HardwareAddress):
            return NotImplemented
        return self._octets == other._octets

    def __hash__(self) -> int:
        return hash(self._octets)

    def __len__(self) -> int:
        return len(self._octets)

    def __repr__(self) -> str:
        return "HardwareAddress({!r})".format(str(self))

    def __str__(self) -> str:
        return ":".join("{:02x}".format(octet) for octet in self._octets)

    @property
    def octets(self) -> bytes:
        return self._octets

    @classmethod
    def parse(cls, address: str) -> "HardwareAddress":
        return parse_hardware_address(address)


def parse_hardware_address(address: str) -> HardwareAddress:
    """
        Parses a MAC-48 address string such as '18-18-18-18-18-18' or '01:02:03:04:05:06' into a
        :class:`HardwareAddress`.  Each octet must be exactly two hex digits and the octets must
        be separated by ':' or '-'.  Dotted, bare and longer EUI-64 forms are rejected.

        :param address: The textual hardware address to parse.

        :returns: The parsed hardware address with the octets in the order they were given.

        :raises InvalidAddressFormat: If the address is not a strictly formatted MAC-48 address.
    """
    if not isinstance(address, str):
        errmsg = "{!r} is not a IEEE 802 MAC-48 address".format(address)
        raise InvalidAddressFormat(errmsg, address)

    if REGEX_MAC_ADDRESS.match(address) is None:
        errmsg = "{} is not a IEEE 802 MAC-48 address".format(address)
        raise InvalidAddressFormat(errmsg, address)

    octets = bytes(int(grp, 16) for grp in REGEX_MAC_OCTET.findall(address))
    if len(octets) != HARDWARE_ADDRESS_LENGTH:
        errmsg = "{} is not a IEEE 802 MAC-48 address".format(address)
        raise InvalidAddressFormat(errmsg, address)

    return HardwareAddress(octets)
