"""
.. module:: cli
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Command line entry point for sending wake-on-lan magic packets.

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

from typing import List, Optional

import argparse
import logging
import sys

from mojo.wakeonlan.broadcast import prepare_magic_message, send_magic_packet
from mojo.wakeonlan.constants import DEFAULT_BROADCAST_ADDR
from mojo.wakeonlan.exceptions import WakeOnLanError

EXAMPLES = """examples:
       wol 18-18-18-18-18-18 192.168.1.255
       wol 18-18-18-18-18-18
       wol -i eth0 18-18-18-18-18-18

Note: BROADCAST_IP default is {}
""".format(DEFAULT_BROADCAST_ADDR)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wol", description="Send a wake-on-lan magic packet.",
        epilog=EXAMPLES, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("mac_address", metavar="MAC_ADDRESS",
        help="The MAC-48 address of the device to wake, e.g. 18-18-18-18-18-18")
    parser.add_argument("broadcast_ip", metavar="BROADCAST_IP", nargs="?", default=DEFAULT_BROADCAST_ADDR,
        help="The address to send the magic packet to.")
    parser.add_argument("-i", "--interface", dest="interface", default=None,
        help="The network interface to send the magic packet from, e.g. eth0.")
    parser.add_argument("-v", "--verbose", action="store_true", default=False,
        help="Enable debug logging.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
        Runs the wake command and translates the outcome into a process exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    try:
        packet, destination, source = prepare_magic_message(args.broadcast_ip, args.mac_address, ifname=args.interface)

        print("Attempting to send a magic packet to MAC {}".format(args.mac_address))
        print("... Broadcasting to: {}".format(destination))

        send_magic_packet(packet.to_bytes(), destination, source=source)
    except WakeOnLanError as wol_err:
        print("Fatal error: {}".format(wol_err), file=sys.stderr)
        return 1

    print("Magic packet sent successfully to {}".format(args.mac_address))
    return 0


if __name__ == "__main__":
    sys.exit(main())
