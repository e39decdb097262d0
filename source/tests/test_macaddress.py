import unittest

from mojo.wakeonlan.exceptions import InvalidAddressFormat
from mojo.wakeonlan.macaddress import HardwareAddress, parse_hardware_address

class TestHardwareAddressPositive(unittest.TestCase):

    def test_parse_dash_separated(self):
        hwaddr = parse_hardware_address("18-18-18-18-18-18")
        assert hwaddr.octets == bytes([0x18] * 6), f"Unexpected octets={hwaddr.octets!r}"
        return

    def test_parse_colon_separated_keeps_order(self):
        hwaddr = parse_hardware_address("01:02:03:04:05:06")
        assert hwaddr.octets == b"\x01\x02\x03\x04\x05\x06", f"Unexpected octets={hwaddr.octets!r}"
        return

    def test_parse_is_case_insensitive(self):
        upper = parse_hardware_address("AA:BB:CC:DD:EE:FF")
        lower = parse_hardware_address("aa-bb-cc-dd-ee-ff")
        assert upper == lower, "Upper and lower case addresses should be equal."
        assert upper.octets == b"\xaa\xbb\xcc\xdd\xee\xff"
        return

    def test_str_is_canonical(self):
        hwaddr = HardwareAddress.parse("0A-1B-2C-3D-4E-5F")
        assert str(hwaddr) == "0a:1b:2c:3d:4e:5f", f"Unexpected str={hwaddr}"
        return

    def test_construct_from_raw_octets(self):
        hwaddr = HardwareAddress(b"\x00\x11\x22\x33\x44\x55")
        assert len(hwaddr) == 6
        assert bytes(hwaddr) == b"\x00\x11\x22\x33\x44\x55"
        return

    def test_is_immutable(self):
        hwaddr = parse_hardware_address("01:02:03:04:05:06")
        with self.assertRaises(AttributeError):
            hwaddr._octets = b"\x00" * 6
        return

    def test_is_hashable(self):
        addrs = { parse_hardware_address("01:02:03:04:05:06"), parse_hardware_address("01-02-03-04-05-06") }
        assert len(addrs) == 1, "Equal addresses should hash the same."
        return


class TestHardwareAddressNegative(unittest.TestCase):

    def assert_invalid(self, candidate):
        with self.assertRaises(InvalidAddressFormat) as ctx:
            parse_hardware_address(candidate)
        assert ctx.exception.address == candidate, "The error should identify the offending address."
        return

    def test_non_hex_characters(self):
        self.assert_invalid("gg:gg:gg:gg:gg:gg")
        return

    def test_too_few_groups(self):
        self.assert_invalid("01:02:03:04:05")
        return

    def test_too_many_groups(self):
        self.assert_invalid("01:02:03:04:05:06:07:08")
        return

    def test_single_digit_groups(self):
        self.assert_invalid("1:2:3:4:5:6")
        return

    def test_dot_separated(self):
        self.assert_invalid("0102.0304.0506")
        return

    def test_wrong_separator(self):
        self.assert_invalid("01 02 03 04 05 06")
        return

    def test_no_separator(self):
        self.assert_invalid("010203040506")
        return

    def test_trailing_characters(self):
        self.assert_invalid("01:02:03:04:05:06:")
        return

    def test_trailing_newline(self):
        self.assert_invalid("18-18-18-18-18-18\n")
        return

    def test_empty(self):
        self.assert_invalid("")
        return

    def test_invalid_message_names_address(self):
        with self.assertRaises(InvalidAddressFormat) as ctx:
            parse_hardware_address("zz-zz-zz-zz-zz-zz")
        assert "zz-zz-zz-zz-zz-zz" in str(ctx.exception)
        return

    def test_invalid_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_hardware_address("not a mac")
        return

    def test_not_a_string(self):
        with self.assertRaises(InvalidAddressFormat):
            parse_hardware_address(None)
        return

    def test_raw_octets_wrong_length(self):
        with self.assertRaises(InvalidAddressFormat):
            HardwareAddress(b"\x00\x11\x22\x33\x44\x55\x66\x77")
        return


if __name__ == '__main__':
    unittest.main()
