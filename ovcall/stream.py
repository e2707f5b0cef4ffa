from dataclasses import dataclass, field
from typing import Any, ClassVar, TypeGuard

from aiortc import MediaStreamTrack

from .constants import StreamManagerRole, VideoType


@dataclass
class Connection:
    """
    The signaling connection a stream belongs to.
    """

    connectionId: str
    data: str = ''
    """
    Metadata attached to the connection by the server or the joining client.
    """

@dataclass
class Stream:
    """
    Live state of a media stream as reported by the transport layer.
    All of its fields may change at any time while the stream is alive.
    """

    streamId: str
    connection: Connection | None = None
    audioActive: bool = False
    """
    Whether the audio track is unmuted.
    """
    videoActive: bool = False
    """
    Whether the video track is unmuted.
    """
    typeOfVideo: VideoType | None = None
    """
    Source kind of the video track. None if the stream has no video or it is not classified yet.
    """
    tracks: list[MediaStreamTrack] = field(default_factory=list)

    @property
    def videoTrack(self) -> MediaStreamTrack | None:
        return next((t for t in self.tracks if t.kind == 'video'), None)

@dataclass
class StreamManager:
    """
    Handle of a stream owned by the transport layer, either a Publisher or a Subscriber.
    """
    role: ClassVar[StreamManagerRole]

    stream: Stream | None = None

@dataclass
class Publisher(StreamManager):
    role: ClassVar[StreamManagerRole] = 'publisher'

    remote: bool = False
    """
    Whether the published stream belongs to another peer.
    """

@dataclass
class Subscriber(StreamManager):
    role: ClassVar[StreamManagerRole] = 'subscriber'


def isPublisher(value: Any) -> TypeGuard[Publisher]:
    """
    Whether the handle sends media. Any object exposing ``role == 'publisher'`` is accepted.
    """
    if value is None:
        return False
    return isinstance(value, Publisher) or getattr(value, 'role', None) == 'publisher'
