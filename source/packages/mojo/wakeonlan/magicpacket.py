"""
.. module:: magicpacket
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the MagicPacket object which is used to write out a wake-on-lan magic
               packet into an octet stream.

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

import struct

from mojo.wakeonlan.constants import (
    HARDWARE_ADDRESS_LENGTH,
    MAGIC_PACKET_LENGTH,
    MAGIC_PACKET_REPETITIONS,
    MAGIC_PACKET_SYNC_BYTE,
    MAGIC_PACKET_SYNC_LENGTH
)
from mojo.wakeonlan.macaddress import HardwareAddress, parse_hardware_address

# '>6B' header followed by sixteen '6s' address blocks, no padding
struct_magic_packet = struct.Struct(">{}B{}".format(
    MAGIC_PACKET_SYNC_LENGTH, "{}s".format(HARDWARE_ADDRESS_LENGTH) * MAGIC_PACKET_REPETITIONS))


class MagicPacket:
    """
        The :class:`MagicPacket` object is constituted of 6 bytes of 0xFF followed by 16 groups of
        the destination hardware address.

            [FF FF FF FF FF FF] + [mac] * 16   ( len 102 bytes )
    """

    __slots__ = ("_hwaddr",)

    def __init__(self, hwaddr: HardwareAddress):
        object.__setattr__(self, "_hwaddr", hwaddr)
        return

    def __setattr__(self, name, value):
        raise AttributeError("MagicPacket objects are immutable.")

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MagicPacket):
            return NotImplemented
        return self._hwaddr == other._hwaddr

    def __hash__(self) -> int:
        return hash(self._hwaddr)

    def __len__(self) -> int:
        return MAGIC_PACKET_LENGTH

    def __repr__(self) -> str:
        return "MagicPacket({!r})".format(str(self._hwaddr))

    @property
    def hardware_address(self) -> HardwareAddress:
        return self._hwaddr

    @property
    def header(self) -> bytes:
        return bytes([MAGIC_PACKET_SYNC_BYTE] * MAGIC_PACKET_SYNC_LENGTH)

    @property
    def payload(self) -> bytes:
        return self._hwaddr.octets * MAGIC_PACKET_REPETITIONS

    @classmethod
    def from_hardware_address(cls, hwaddr: HardwareAddress) -> "MagicPacket":
        return cls(hwaddr)

    def to_bytes(self) -> bytes:
        """
            Serializes the magic packet into its 102 byte wire representation.
        """
        header = [MAGIC_PACKET_SYNC_BYTE] * MAGIC_PACKET_SYNC_LENGTH
        blocks = [self._hwaddr.octets] * MAGIC_PACKET_REPETITIONS

        data = struct_magic_packet.pack(*header, *blocks)
        assert len(data) == MAGIC_PACKET_LENGTH, "Magic packet must be %d bytes." % MAGIC_PACKET_LENGTH

        return data


def build_magic_packet(mac_addr: str) -> MagicPacket:
    """
        Builds a :class:`MagicPacket` for the hardware address string provided.

        :param mac_addr: The MAC-48 address of the device to wake.

        :returns: The magic packet for the address.

        :raises InvalidAddressFormat: If the address is not a strictly formatted MAC-48 address.
    """
    hwaddr = parse_hardware_address(mac_addr)
    return MagicPacket.from_hardware_address(hwaddr)
