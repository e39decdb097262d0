"""
.. module:: exceptions
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains exceptions that can be raised for exceptional address, resolution and
               transport conditions encountered while sending wake-on-lan magic packets.

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

from typing import Optional

from mojo.wakeonlan.constants import MAGIC_PACKET_LENGTH

class WakeOnLanError(RuntimeError):
    """
        This error is the base error for all errors raised while building or sending a
        wake-on-lan magic packet.
    """

class InvalidAddressFormat(WakeOnLanError, ValueError):
    """
        This error is raised when a hardware address string is not an IEEE 802 MAC-48 address
        made up of six two digit hex groups separated by ':' or '-'.
    """
    def __init__(self, message, address, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.address = address
        return

class ResolutionError(WakeOnLanError):
    """
        This error is raised when a destination address cannot be resolved.
    """
    def __init__(self, message, address, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.address = address
        return

class InterfaceResolutionError(ResolutionError):
    """
        This error is raised when a source interface is missing or has no usable IPv4 address.
    """
    def __init__(self, message, ifname, *args, **kwargs):
        super().__init__(message, None, *args, **kwargs)
        self.ifname = ifname
        return

class SocketError(WakeOnLanError):
    """
        This error is raised when the UDP socket cannot be opened, bound or written to.
    """
    def __init__(self, message, errno: Optional[int]=None, *args, **kwargs):
        super().__init__(message, *args, **kwargs)
        self.errno = errno
        return

class ShortWriteError(SocketError):
    """
        This error is raised when the transport reports writing a byte count other than the
        length of a magic packet.  The datagram is not resent.
    """
    def __init__(self, actual: int, expected: int=MAGIC_PACKET_LENGTH, *args, **kwargs):
        message = "Magic packet sent was {} bytes (expected {} bytes sent), the packet may " \
            "not have been delivered correctly.".format(actual, expected)
        super().__init__(message, None, *args, **kwargs)
        self.actual = actual
        self.expected = expected
        return
