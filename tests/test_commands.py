"""Tests for C-Gate command builders."""

import pytest

from pycgate import InvalidAddress, NetworkAddress, OutOfRange
from pycgate import commands


class TestCommandBuilders:
    """Tests for command builder functions."""

    def test_ramp(self):
        assert commands.ramp("//SHAC/254/56/3", 50, 4) == "RAMP //SHAC/254/56/3 128 4s"

    def test_ramp_instant(self):
        assert commands.ramp("//SHAC/254/56/3", 100) == "RAMP //SHAC/254/56/3 255"

    def test_ramp_address_object(self):
        addr = NetworkAddress("SHAC", (254, 56, 3))
        assert commands.ramp(addr, 17) == "RAMP //SHAC/254/56/3 43"

    def test_ramp_bad_level(self):
        with pytest.raises(OutOfRange):
            commands.ramp("//SHAC/254/56/3", 101)

    def test_on_off(self):
        assert commands.on("//SHAC/254/56/3") == "ON //SHAC/254/56/3"
        assert commands.off("//SHAC/254/56/3") == "OFF //SHAC/254/56/3"

    def test_get_level(self):
        assert commands.get_level("//SHAC/254/56/3") == "GET //SHAC/254/56/3 level"

    def test_bad_address(self):
        with pytest.raises(InvalidAddress):
            commands.on("SHAC/254/56/3")

    def test_noop(self):
        assert commands.noop() == "NOOP"

    def test_tag_command(self):
        assert commands.tag_command(456, commands.get_level("//SHAC/254/56/3")) == (
            "[456] GET //SHAC/254/56/3 level"
        )

    @pytest.mark.parametrize("command_id", [-1, "1", True])
    def test_tag_command_bad_id(self, command_id):
        with pytest.raises(ValueError):
            commands.tag_command(command_id, "NOOP")
