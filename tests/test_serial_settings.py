import pytest

from liftscan.serial_settings import (
    Mode,
    Parity,
    PortSettings,
    SerialSettingsError,
    StopBits,
    device_path,
)


def test_defaults_match_documented_values():
    settings = PortSettings()
    assert settings.baud_rate == 9600
    assert settings.data_bits == 8
    assert settings.parity is Parity.NONE
    assert settings.stop_bits is StopBits.ONE
    assert settings.mode is Mode.SYNCHRONOUS
    assert settings.timeout == 0


def test_validate_returns_same_settings():
    settings = PortSettings(baud_rate=115200, timeout=5)
    assert settings.validate() is settings


@pytest.mark.parametrize("bits", [4, 9, 0])
def test_data_bits_out_of_range(bits):
    with pytest.raises(SerialSettingsError):
        PortSettings(data_bits=bits).validate()


@pytest.mark.parametrize("bits", [5, 6, 7, 8])
def test_data_bits_in_range(bits):
    settings = PortSettings(data_bits=bits)
    assert settings.validate().data_bits == bits


@pytest.mark.parametrize("rate", [9601, 14400, 123])
def test_non_standard_baud_rate(rate):
    with pytest.raises(SerialSettingsError):
        PortSettings(baud_rate=rate).validate()


@pytest.mark.parametrize("rate", [0, 50, 57600, 921600, 4000000])
def test_standard_baud_rates(rate):
    assert PortSettings(baud_rate=rate).validate().baud_rate == rate


@pytest.mark.parametrize("parity", [Parity.MARK, Parity.SPACE])
def test_unsupported_parity(parity):
    with pytest.raises(SerialSettingsError):
        PortSettings(parity=parity).validate()


@pytest.mark.parametrize("parity", [Parity.EVEN, Parity.ODD, Parity.NONE])
def test_supported_parity(parity):
    assert PortSettings(parity=parity).validate().parity is parity


def test_one_and_half_stop_bits_need_five_data_bits():
    with pytest.raises(SerialSettingsError):
        PortSettings(data_bits=6, stop_bits=StopBits.ONE_POINT_FIVE).validate()
    settings = PortSettings(data_bits=5, stop_bits=StopBits.ONE_POINT_FIVE)
    assert settings.validate().stop_bits is StopBits.ONE_POINT_FIVE


def test_two_stop_bits_accepted():
    settings = PortSettings(stop_bits=StopBits.TWO)
    assert settings.validate().stop_bits is StopBits.TWO


def test_device_path_default_name():
    assert device_path(0) == "/dev/ttyUSB0"


def test_device_path_custom_name():
    assert device_path(3, "ttyS") == "/dev/ttyS3"


@pytest.mark.parametrize("number", [-1, 70000])
def test_device_path_invalid_number(number):
    with pytest.raises(SerialSettingsError):
        device_path(number)


def test_settings_are_immutable():
    settings = PortSettings()
    with pytest.raises(AttributeError):
        settings.baud_rate = 19200  # type: ignore[misc]
    assert settings.baud_rate == 9600