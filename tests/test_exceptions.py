import enum

import pytest

from rtccore.exceptions import (
    BaseRTCException,
    CallConnectionError,
    ConnectionNotFound,
    CryptoError,
    FFmpegError,
    FileError,
    InvalidParams,
    InvalidUUID,
    RTCException,
    RTMPNeeded,
    SdpParseException,
    ShellError,
    SignalingError,
    SignalingUnsupported,
    StreamEOFError,
    TelegramServerError,
    wrap_rtc_error,
    wrap_sdp_parse_error,
)

ALL_CLASSES = [
    RTCException,
    SdpParseException,
    CallConnectionError,
    TelegramServerError,
    ConnectionNotFound,
    SignalingUnsupported,
    SignalingError,
    InvalidParams,
    CryptoError,
    RTMPNeeded,
    FileError,
    FFmpegError,
    ShellError,
    InvalidUUID,
    StreamEOFError,
]


@pytest.mark.parametrize("cls", ALL_CLASSES)
def test_every_error_is_caught_as_base_and_keeps_message(cls):
    base = BaseRTCException("something broke")
    error = cls("something broke")
    with pytest.raises(BaseRTCException) as info:
        raise error
    assert info.value is error
    assert str(info.value) == str(base) == "something broke"
    assert info.value.message == base.message
    assert type(info.value) is cls


def test_direct_subclass_construction_keeps_message():
    error = CryptoError("bad key")
    assert isinstance(error, BaseRTCException)
    assert error.message == "bad key"


def test_base_message_default_empty():
    assert str(BaseRTCException()) == ""


def test_wrap_rtc_error_with_string_type():
    error = wrap_rtc_error("INVALID_PARAMETER", "bad value")
    assert isinstance(error, RTCException)
    assert str(error) == "[INVALID_PARAMETER] bad value"


def test_wrap_rtc_error_with_enum_type_uses_name():
    class Kind(enum.Enum):
        NETWORK_ERROR = 3

    error = wrap_rtc_error(Kind.NETWORK_ERROR, "timed out")
    assert str(error) == "[NETWORK_ERROR] timed out"


def test_wrap_sdp_parse_error_without_line():
    error = wrap_sdp_parse_error("", "Expect line: v=")
    assert isinstance(error, SdpParseException)
    assert str(error) == "Expect line: v="


def test_wrap_sdp_parse_error_with_line():
    error = wrap_sdp_parse_error("a=bogus", "Invalid value.")
    assert str(error) == "Line: a=bogus.  Invalid value."


def test_wrapped_error_can_be_raised():
    error = wrap_rtc_error("X", "y")
    with pytest.raises(RTCException) as info:
        raise error
    assert info.value is error
    assert str(info.value) == "[X] y"