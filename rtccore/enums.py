"""Enumerations for connection states, error codes, media inputs and logging."""

from __future__ import annotations

from enum import IntEnum, IntFlag

__all__ = [
    "IceState",
    "GatheringState",
    "SignalingState",
    "ConnectionState",
    "ErrorCode",
    "InputMode",
    "StreamType",
    "StreamStatus",
    "CallConnectionState",
    "LogLevel",
    "LogSource",
]


class IceState(IntEnum):
    """State of the ICE transport of a peer connection."""

    UNKNOWN = 0
    NEW = 1
    CHECKING = 2
    CONNECTED = 3
    COMPLETED = 4
    FAILED = 5
    DISCONNECTED = 6
    CLOSED = 7


class GatheringState(IntEnum):
    """State of ICE candidate gathering."""

    UNKNOWN = 0
    NEW = 1
    IN_PROGRESS = 2
    COMPLETE = 3


class SignalingState(IntEnum):
    """State of the offer/answer negotiation."""

    UNKNOWN = 0
    STABLE = 1
    HAVE_LOCAL_OFFER = 2
    HAVE_REMOTE_OFFER = 3
    HAVE_LOCAL_PRANSWER = 4
    HAVE_REMOTE_PRANSWER = 5
    CLOSED = 6


class ConnectionState(IntEnum):
    """Aggregate state of a peer connection."""

    UNKNOWN = 0
    NEW = 1
    CONNECTING = 2
    CONNECTED = 3
    DISCONNECTED = 4
    FAILED = 5
    CLOSED = 6


class ErrorCode(IntEnum):
    """Numeric error codes reported across the public call interface."""

    CONNECTION_ALREADY_EXISTS = -100
    CONNECTION_NOT_FOUND = -101
    CRYPTO_ERROR = -102
    MISSING_FINGERPRINT = -103
    SIGNALING_ERROR = -104
    SIGNALING_UNSUPPORTED = -105

    FILE_NOT_FOUND = -200
    ENCODER_NOT_FOUND = -201
    FFMPEG_NOT_FOUND = -202
    SHELL_ERROR = -203

    RTMP_NEEDED = -300
    INVALID_TRANSPORT = -301
    CONNECTION_FAILED = -302

    UNKNOWN_EXCEPTION = -1
    INVALID_UID = -2
    ERR_TOO_SMALL = -3
    ASYNC_NOT_READY = -4


class InputMode(IntFlag):
    """How a media input is read; members may be combined."""

    FILE = 1 << 0
    SHELL = 1 << 1
    FFMPEG = 1 << 2
    NO_LATENCY = 1 << 3


class StreamType(IntEnum):
    """Kind of media stream."""

    AUDIO = 0
    VIDEO = 1


class StreamStatus(IntEnum):
    """Playback status of a call's stream."""

    PLAYING = 0
    PAUSED = 1
    IDLING = 2


class CallConnectionState(IntEnum):
    """Connection state reported for a call."""

    CONNECTING = 0
    CONNECTED = 1
    TIMEOUT = 2
    FAILED = 3
    CLOSED = 4


class LogLevel(IntEnum):
    """Severity of a log message."""

    DEBUG = 1 << 0
    INFO = 1 << 1
    WARNING = 1 << 2
    ERROR = 1 << 3
    UNKNOWN = -1


class LogSource(IntEnum):
    """Origin of a log message."""

    WEBRTC = 1 << 0
    SELF = 1 << 1