"""
.. module:: constants
    :platform: Darwin, Linux, Unix, Windows
    :synopsis: Contains the constants that are used in association with wake-on-lan magic packets.

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

import re

# The limited broadcast address, reaches every host on the local segment
DEFAULT_BROADCAST_ADDR = "255.255.255.255"

# The discard protocol port conventionally used for wake-on-lan
WAKE_ON_LAN_PORT = 9

# Port zero asks the OS for an ephemeral port when binding a source address
EPHEMERAL_PORT = 0

HARDWARE_ADDRESS_LENGTH = 6

MAGIC_PACKET_SYNC_BYTE = 0xFF
MAGIC_PACKET_SYNC_LENGTH = 6
MAGIC_PACKET_REPETITIONS = 16
MAGIC_PACKET_LENGTH = MAGIC_PACKET_SYNC_LENGTH + (HARDWARE_ADDRESS_LENGTH * MAGIC_PACKET_REPETITIONS)

MAC_ADDRESS_DELIMITERS = ":-"

REGEX_MAC_ADDRESS = re.compile(r"^([0-9a-fA-F]{2}[" + MAC_ADDRESS_DELIMITERS + r"]){5}([0-9a-fA-F]{2})\Z")
REGEX_MAC_OCTET = re.compile(r"[0-9a-fA-F]{2}")

REGEX_IPV4_COMPONENTS = re.compile(r"^([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\.([0-9]{1,3})\Z")
