"""
.. module:: broadcast
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Module that contains broadcast helper functions for sending wake-on-lan magic packets.

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

from typing import Optional, Tuple

import logging
import socket

from mojo.wakeonlan.constants import MAGIC_PACKET_LENGTH
from mojo.wakeonlan.exceptions import ShortWriteError, SocketError
from mojo.wakeonlan.interfaces import SourceEndpoint, resolve_source
from mojo.wakeonlan.magicpacket import MagicPacket, build_magic_packet
from mojo.wakeonlan.resolution import DestinationEndpoint, resolve_destination

logger = logging.getLogger()


def send_magic_packet(payload: bytes, destination: DestinationEndpoint, source: Optional[SourceEndpoint] = None) -> int:
    """
        Sends a serialized magic packet as a single UDP datagram.  There is no retry and no
        acknowledgement, the packet is fire-and-forget.

        :param payload: The 102 byte serialized magic packet.
        :param destination: The endpoint to send the datagram to.
        :param source: An optional local endpoint to bind the socket to before sending.

        :returns: The number of bytes written.

        :raises SocketError: If the socket cannot be opened, bound or written to.
        :raises ShortWriteError: If the number of bytes written is not the magic packet length.
    """
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as os_err:
        err_msg = "Unable to open UDP socket. errno=%r" % os_err.errno
        raise SocketError(err_msg, os_err.errno) from os_err

    try:
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)

            if source is not None:
                logger.debug("Binding magic packet socket to interface=%s address=%s:%d",
                             source.ifname, source.ip, source.port)
                sock.bind(source.bind_address)

            sent = sock.sendto(payload, (destination.ip, destination.port))
        except OSError as os_err:
            err_msg = "Error sending magic packet to {}. {}".format(destination, os_err)
            raise SocketError(err_msg, os_err.errno) from os_err
    finally:
        sock.close()

    if sent != MAGIC_PACKET_LENGTH:
        raise ShortWriteError(sent)

    return sent


def prepare_magic_message(brodcast_addr: Optional[str], mac_addr: str, ifname: Optional[str] = None) -> Tuple[MagicPacket, DestinationEndpoint, Optional[SourceEndpoint]]:
    """
        Validates the hardware address, builds the magic packet and resolves the destination and
        optional source endpoints.  No socket is opened.

        :param brodcast_addr: The address to send the packet to, None selects '255.255.255.255'.
        :param mac_addr: The MAC-48 address of the device to wake.
        :param ifname: The optional name of the interface to send the packet out of.

        :returns: A tuple of (packet, destination, source) where source is None when no interface
                  was specified.
    """
    packet = build_magic_packet(mac_addr)

    destination = resolve_destination(brodcast_addr)

    source = None
    if ifname:
        source = resolve_source(ifname)

    return packet, destination, source


def broadcast_wake_on_lan_magic_message(brodcast_addr: Optional[str], mac_addr: str, ifname: Optional[str] = None) -> int:
    """
        Builds and sends a wake-on-lan magic packet for the specified hardware address.

            '[FF FF FF FF FF FF] + [mac] * 16   ( len 102 bytes )'

        All address validation and resolution happens before a socket is opened.

        :param brodcast_addr: The address to send the packet to, None selects '255.255.255.255'.
        :param mac_addr: The MAC-48 address of the device to wake.
        :param ifname: The optional name of the interface to send the packet out of, "eth0", "eth1",
                       etc.  None lets the OS pick the route and source address.

        :returns: The number of bytes sent.
    """
    packet, destination, source = prepare_magic_message(brodcast_addr, mac_addr, ifname=ifname)

    logger.info("Sending magic packet to MAC %s via %s", packet.hardware_address, destination)

    return send_magic_packet(packet.to_bytes(), destination, source=source)
