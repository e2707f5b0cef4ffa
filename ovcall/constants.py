from enum import Enum
from typing import Literal


class VideoType(str, Enum):
    """
    Source kind of the video track of a stream.
    """
    CAMERA = 'CAMERA'
    SCREEN = 'SCREEN'
    IPCAM = 'IPCAM'
    CUSTOM = 'CUSTOM'


StreamManagerRole = Literal['publisher', 'subscriber']

DEFAULT_NICKNAME = 'OpenVidu'
"""
Display name used when a participant has no nickname.
"""

VIDEO_ELEMENT_PREFIX = 'video-'

AvatarFormat = Literal['png', 'jpeg', 'webp']

AVATAR_SOURCE_X = 200
AVATAR_SOURCE_Y = 120
AVATAR_SOURCE_WIDTH = 285
AVATAR_SOURCE_HEIGHT = 285
AVATAR_SIZE = 100
