"""Exception hierarchy for connection, signalling, crypto and stream failures."""

from __future__ import annotations

__all__ = [
    "BaseRTCException",
    "RTCException",
    "SdpParseException",
    "CallConnectionError",
    "TelegramServerError",
    "ConnectionNotFound",
    "SignalingUnsupported",
    "SignalingError",
    "InvalidParams",
    "CryptoError",
    "RTMPNeeded",
    "FileError",
    "FFmpegError",
    "ShellError",
    "InvalidUUID",
    "StreamEOFError",
    "wrap_rtc_error",
    "wrap_sdp_parse_error",
]


class BaseRTCException(Exception):
    """Root of every error raised by this package; carries a text message."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class RTCException(BaseRTCException):
    """A failure reported by the real-time communication stack."""


class SdpParseException(BaseRTCException):
    """A session description or candidate could not be parsed."""


class CallConnectionError(BaseRTCException):
    """The call connection could not be established or was lost."""


class TelegramServerError(BaseRTCException):
    """The remote server answered with an error."""


class ConnectionNotFound(BaseRTCException):
    """No connection exists for the given identifier."""


class SignalingUnsupported(BaseRTCException):
    """The peer does not support the requested signalling protocol."""


class SignalingError(BaseRTCException):
    """Signalling data was malformed or rejected."""


class InvalidParams(BaseRTCException):
    """Parameters supplied to an operation are not valid."""


class CryptoError(BaseRTCException):
    """Key exchange or encryption failed."""


class RTMPNeeded(BaseRTCException):
    """The call requires an RTMP stream instead."""


class FileError(BaseRTCException):
    """A media file could not be opened or read."""


class FFmpegError(BaseRTCException):
    """The media converter failed."""


class ShellError(BaseRTCException):
    """A shell media source failed."""


class InvalidUUID(BaseRTCException):
    """An instance identifier is not known."""


class StreamEOFError(BaseRTCException):
    """A media stream reached its end."""


def wrap_rtc_error(error_type: object, message: str) -> RTCException:
    """Build an RTCException in the form ``[TYPE] message``."""
    name = getattr(error_type, "name", error_type)
    return RTCException(f"[{name}] {message}")


def wrap_sdp_parse_error(line: str, description: str) -> SdpParseException:
    """Build an SdpParseException, naming the offending line when there is one."""
    if not line:
        return SdpParseException(description)
    return SdpParseException(f"Line: {line}.  {description}")