"""
.. module:: interfaces
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains helper functions for selecting the local interface address magic packets
               are sent from.

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

from typing import List, NamedTuple, Union

import ipaddress
import logging

import netifaces

from mojo.wakeonlan.constants import EPHEMERAL_PORT
from mojo.wakeonlan.exceptions import InterfaceResolutionError

logger = logging.getLogger()


class SourceEndpoint(NamedTuple):
    ip: str
    port: int = EPHEMERAL_PORT
    ifname: str = ""

    @property
    def bind_address(self):
        return (self.ip, self.port)


def is_loopback_address(addr: str) -> bool:
    """
        Checks to see if 'addr' is an IPv4 loopback address.
    """
    is_loopback = False

    try:
        is_loopback = ipaddress.IPv4Address(addr).is_loopback
    except ValueError:
        is_loopback = False

    return is_loopback


def get_ipv4_addresses(ifname: str) -> List[str]:
    """
        Get the IPv4 addresses associated with the specified interface name.

        :param ifname: The interface name to lookup the IP addresses for.

        :returns: The list of IPv4 addresses associated with the specified interface name.

        :raises InterfaceResolutionError: If the interface does not exist or has no addresses.
    """
    if ifname not in netifaces.interfaces():
        errmsg = "No interface found with name {}".format(ifname)
        raise InterfaceResolutionError(errmsg, ifname)

    try:
        address_info = netifaces.ifaddresses(ifname)
    except ValueError as lookup_err:
        errmsg = "No interface found with name {}".format(ifname)
        raise InterfaceResolutionError(errmsg, ifname) from lookup_err

    if not address_info:
        errmsg = "No address associated with interface {}".format(ifname)
        raise InterfaceResolutionError(errmsg, ifname)

    addr_list = []
    for addr_info in address_info.get(netifaces.AF_INET, []):
        if "addr" in addr_info:
            addr_list.append(addr_info["addr"])

    return addr_list


def get_ipv4_address(ifname: str) -> Union[str, None]:
    """
        Get the first non-loopback IPv4 address associated with the specified interface name.

        :param ifname: The interface name to lookup the IP address for.

        :returns: The IPv4 address associated with the specified interface name or None
    """
    addr = None

    for candidate in get_ipv4_addresses(ifname):
        if not is_loopback_address(candidate):
            addr = candidate
            break

    return addr


def resolve_source(ifname: str) -> SourceEndpoint:
    """
        Resolves the local endpoint a magic packet should be sent from in order to force the
        packet out of a specific interface on a multi-homed host.

        :param ifname: The name of the interface to send from, "eth0", "eth1", etc.

        :returns: A source endpoint bound to the first non-loopback IPv4 address of the interface
                  with an ephemeral port.

        :raises InterfaceResolutionError: If the interface does not exist, has no addresses or has
                                          no non-loopback IPv4 address.
    """
    addr = get_ipv4_address(ifname)
    if addr is None:
        errmsg = "No address associated with interface {}".format(ifname)
        raise InterfaceResolutionError(errmsg, ifname)

    logger.debug("Resolved source interface=%s to ip=%s", ifname, addr)

    return SourceEndpoint(addr, EPHEMERAL_PORT, ifname)
