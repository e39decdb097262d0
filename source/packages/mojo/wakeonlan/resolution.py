"""
.. module:: resolution
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for resolving the destination address of magic packets.

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

from typing import NamedTuple, Optional

import logging
import socket

from mojo.wakeonlan.constants import DEFAULT_BROADCAST_ADDR, REGEX_IPV4_COMPONENTS, WAKE_ON_LAN_PORT
from mojo.wakeonlan.exceptions import ResolutionError

logger = logging.getLogger()


class DestinationEndpoint(NamedTuple):
    ip: str
    port: int

    def __str__(self) -> str:
        return "{}:{}".format(self.ip, self.port)


def is_ipv4_address(candidate: str) -> bool:
    """
        Checks to see if 'candidate' is an ipv4 address.

        :param candidate: A string that is to be checked to see if it is a valid IPv4 address.

        :returns: A boolean indicating if an IP address is an IPv4 address
    """
    is_ipv4 = False

    # The regex will ensure that all the component characters are integer characters
    # and that we have the correct number of components.
    mobj = REGEX_IPV4_COMPONENTS.match(candidate)
    if mobj is not None:
        addr_components = [ v for v in mobj.groups() ]
        if len(addr_components) == 4:
            is_ipv4 = True
            for nc in addr_components:
                cval = int(nc)
                if cval < 0 or cval > 255:
                    is_ipv4 = False
                    break

    return is_ipv4


def resolve_destination(ip: Optional[str] = None, port: int = WAKE_ON_LAN_PORT) -> DestinationEndpoint:
    """
        Resolves the endpoint a magic packet will be sent to.  The address is usually the default
        limited broadcast address '255.255.255.255' but can be overloaded with a subnet broadcast
        address, a unicast address or a host name.

        :param ip: The destination address, None or an empty string selects the default broadcast address.
        :param port: The destination UDP port.

        :returns: The resolved destination endpoint.

        :raises ResolutionError: If the address cannot be resolved to an IPv4 address.
    """
    if not ip:
        ip = DEFAULT_BROADCAST_ADDR

    if not isinstance(port, int) or port < 0 or port > 65535:
        errmsg = "Invalid destination port={!r} for address={}".format(port, ip)
        raise ResolutionError(errmsg, ip)

    if is_ipv4_address(ip):
        return DestinationEndpoint(ip, port)

    try:
        addr_info = socket.getaddrinfo(ip, port, socket.AF_INET, socket.SOCK_DGRAM)
    except (socket.gaierror, UnicodeError) as res_err:
        errmsg = "Unable to resolve destination address={}:{}".format(ip, port)
        raise ResolutionError(errmsg, ip) from res_err

    if len(addr_info) == 0:
        errmsg = "No IPv4 address found for destination address={}:{}".format(ip, port)
        raise ResolutionError(errmsg, ip)

    _, _, _, _, sockaddr = addr_info[0]
    resolved_ip = sockaddr[0]
    logger.debug("Resolved destination address=%s to ip=%s", ip, resolved_ip)

    return DestinationEndpoint(resolved_ip, port)
