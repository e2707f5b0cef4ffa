from .avatar import AvatarOptions, AvatarOptionsDict, VideoAvatar
from .capture import VideoSurfaceRegistry, videoElementId
from .common import CaptureError, OvCallError
from .constants import DEFAULT_NICKNAME, VideoType
from .participant import CaptureFrame, Participant, Position
from .stream import Connection, Publisher, Stream, StreamManager, Subscriber, isPublisher

__all__ = [
    'AvatarOptions',
    'AvatarOptionsDict',
    'CaptureError',
    'CaptureFrame',
    'Connection',
    'DEFAULT_NICKNAME',
    'OvCallError',
    'Participant',
    'Position',
    'Publisher',
    'Stream',
    'StreamManager',
    'Subscriber',
    'VideoAvatar',
    'VideoSurfaceRegistry',
    'VideoType',
    'isPublisher',
    'videoElementId',
]
