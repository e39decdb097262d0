import socket
import unittest

from unittest import mock

from mojo.wakeonlan.exceptions import ResolutionError
from mojo.wakeonlan.resolution import DestinationEndpoint, resolve_destination

class TestResolveDestination(unittest.TestCase):

    def test_default_is_limited_broadcast(self):
        endpoint = resolve_destination()
        assert endpoint == DestinationEndpoint("255.255.255.255", 9), f"Unexpected endpoint={endpoint}"
        return

    def test_empty_is_limited_broadcast(self):
        endpoint = resolve_destination("")
        assert endpoint.ip == "255.255.255.255"
        assert endpoint.port == 9
        return

    def test_subnet_broadcast(self):
        endpoint = resolve_destination("192.168.1.255")
        assert endpoint == ("192.168.1.255", 9)
        assert str(endpoint) == "192.168.1.255:9"
        return

    def test_hostname_is_resolved(self):
        addr_info = [(socket.AF_INET, socket.SOCK_DGRAM, 17, "", ("10.0.0.5", 9))]
        with mock.patch("mojo.wakeonlan.resolution.socket.getaddrinfo", return_value=addr_info) as getaddrinfo:
            endpoint = resolve_destination("wakeme.local")

        getaddrinfo.assert_called_once_with("wakeme.local", 9, socket.AF_INET, socket.SOCK_DGRAM)
        assert endpoint == ("10.0.0.5", 9)
        return

    def test_unresolvable_address(self):
        with mock.patch("mojo.wakeonlan.resolution.socket.getaddrinfo", side_effect=socket.gaierror(-2, "Name or service not known")):
            with self.assertRaises(ResolutionError) as ctx:
                resolve_destination("no.such.host.invalid")

        assert ctx.exception.address == "no.such.host.invalid"
        return

    def test_trailing_newline_is_not_a_literal(self):
        with mock.patch("mojo.wakeonlan.resolution.socket.getaddrinfo", side_effect=socket.gaierror(-2, "Name or service not known")) as getaddrinfo:
            with self.assertRaises(ResolutionError) as ctx:
                resolve_destination("192.168.1.255\n")

        getaddrinfo.assert_called_once_with("192.168.1.255\n", 9, socket.AF_INET, socket.SOCK_DGRAM)
        assert ctx.exception.address == "192.168.1.255\n"
        return

    def test_invalid_port(self):
        with self.assertRaises(ResolutionError):
            resolve_destination("255.255.255.255", port=70000)
        return


if __name__ == '__main__':
    unittest.main()
