"""Plain data models for candidates, servers, descriptions and media frames."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = [
    "IceCandidate",
    "PeerIceParameters",
    "RTCServer",
    "SdpType",
    "Description",
    "RTCOnDataEvent",
    "I420ImageData",
    "sdp_type_to_string",
]


@dataclass
class IceCandidate:
    """An ICE candidate together with the media section it belongs to."""

    mid: str
    m_line: int
    sdp: str


@dataclass
class PeerIceParameters:
    """ICE credentials of a peer."""

    ufrag: str = ""
    pwd: str = ""
    supports_renomination: bool = False


@dataclass
class RTCServer:
    """A STUN or TURN server reachable over UDP or TCP."""

    id: int = 0
    host: str = ""
    port: int = 0
    login: str = ""
    password: str = ""
    is_turn: bool = False
    is_tcp: bool = False


class SdpType(IntEnum):
    """Role of a session description in the offer/answer exchange."""

    OFFER = 0
    ANSWER = 1
    PRANSWER = 2
    ROLLBACK = 3


_SDP_TYPE_NAMES = {
    SdpType.OFFER: "offer",
    SdpType.ANSWER: "answer",
    SdpType.PRANSWER: "pranswer",
    SdpType.ROLLBACK: "rollback",
}


def sdp_type_to_string(sdp_type: SdpType) -> str:
    """Return the wire name of ``sdp_type``; raise ValueError for anything else."""
    if not isinstance(sdp_type, SdpType):
        raise ValueError("Invalid sdp type")
    return _SDP_TYPE_NAMES[sdp_type]


@dataclass(frozen=True)
class Description:
    """A session description and its type."""

    type: SdpType
    sdp: str


@dataclass
class RTCOnDataEvent:
    """A block of PCM audio to push into an audio track."""

    audio_data: bytes
    number_of_frames: int
    sample_rate: int = 48000
    bits_per_sample: int = 16
    channel_count: int = 1


@dataclass(frozen=True)
class I420ImageData:
    """A planar YUV 4:2:0 frame: a full-size Y plane then quarter-size U and V."""

    width: int
    height: int
    contents: bytes

    def __post_init__(self) -> None:
        for name, value in (("width", self.width), ("height", self.height)):
            if not 0 <= value <= 0xFFFF:
                raise ValueError(f"{name} out of range: {value}")
        needed = self.luminance_size() + 2 * self.chroma_size()
        if len(self.contents) < needed:
            raise ValueError(f"frame needs {needed} bytes, got {len(self.contents)}")

    def luminance_size(self) -> int:
        """Size in bytes of the Y plane."""
        return self.width * self.height

    def chroma_size(self) -> int:
        """Size in bytes of each of the U and V planes."""
        return self.luminance_size() // 4

    def data_y(self) -> bytes:
        return bytes(self.contents[: self.luminance_size()])

    def data_u(self) -> bytes:
        start = self.luminance_size()
        return bytes(self.contents[start : start + self.chroma_size()])

    def data_v(self) -> bytes:
        start = self.luminance_size() + self.chroma_size()
        return bytes(self.contents[start : start + self.chroma_size()])