import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, TypeAlias

from .avatar import AvatarOptions, AvatarOptionsDict, ImageSource, VideoAvatar
from .common import CaptureError
from .constants import DEFAULT_NICKNAME, VideoType
from .log import PrefixLoggerAdapter, configLogger
from .stream import StreamManager, isPublisher
from .utils import ensure_future

logger = configLogger(logger=logging.getLogger('ovcall[participant]'))

CaptureFrame: TypeAlias = Callable[[str], ImageSource | None] | Callable[[str], Awaitable[ImageSource | None]]
"""
Capture provider. Returns the frame currently rendered for the given stream id.
"""


@dataclass
class Position:
    """
    Where the participant is placed in the layout. No bounds are enforced.
    """
    x: float = 0
    y: float = 0

    def update(self, x: float, y: float) -> None:
        self.x = x
        self.y = y


class Participant:
    """
    Packs all the information about a user of the session.

    Every query reads the stream handle again, since the transport layer updates it behind our back.
    """
    connectionId: str
    """
    The connection ID that is publishing the stream, as known when the participant was created.
    """
    nickname: str
    streamHandle: StreamManager | None
    """
    Publisher or Subscriber. Owned by the transport layer, it may be replaced or cleared at any time.
    """
    position: Position
    avatarImage: VideoAvatar | None
    cachedAvatarDataUri: str | None
    preferLargeVideo: bool | None
    audioGain: float
    captureFrame: CaptureFrame | None
    options: AvatarOptions

    def __init__(
        self,
        connectionId: str | None = None,
        streamHandle: StreamManager | None = None,
        nickname: str | None = None,
        *,
        captureFrame: CaptureFrame | None = None,
        options: AvatarOptions | AvatarOptionsDict | None = None,
    ) -> None:
        self.connectionId = connectionId or ''
        self.nickname = nickname or DEFAULT_NICKNAME
        self.streamHandle = streamHandle
        self.position = Position()
        self.avatarImage = None
        self.cachedAvatarDataUri = None
        self.preferLargeVideo = None
        self.audioGain = 1.0
        self.captureFrame = captureFrame
        self.options = AvatarOptions.fromConfigLike(options)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(connectionId={self.connectionId!r}, nickname={self.nickname!r}, streamHandle={self.streamHandle!r})'

    @property
    def logger(self) -> PrefixLoggerAdapter:
        return PrefixLoggerAdapter(logger, prefix=f'[{self.nickname}:{self.connectionId}] ')

    def isAudioActive(self) -> bool | None:
        """
        Return True if the audio track is active and False if it is muted.
        None when there is no publishing stream to ask.
        """
        if not isPublisher(self.streamHandle):
            return None
        stream = self.streamHandle.stream
        return stream.audioActive if stream is not None else None

    def isVideoActive(self) -> bool | None:
        """
        Return True if the video track is active and False if it is muted.
        None when there is no publishing stream to ask.
        """
        if not isPublisher(self.streamHandle):
            return None
        stream = self.streamHandle.stream
        return stream.videoActive if stream is not None else None

    def getConnectionId(self) -> str | None:
        """
        Return the connection ID of the live stream. It may differ from ``connectionId``.
        """
        stream = self.streamHandle.stream if self.streamHandle is not None else None
        connection = stream.connection if stream is not None else None
        return connection.connectionId if connection is not None else None

    resolveConnectionId = getConnectionId

    def getNickname(self) -> str:
        return self.nickname

    def getStreamManager(self) -> StreamManager | None:
        return self.streamHandle

    def getAvatar(self) -> str | None:
        if self.avatarImage is not None:
            return self.avatarImage.toDataURL(self.options.format)
        return self.cachedAvatarDataUri

    def isLocal(self) -> bool:
        return not self.isRemote()

    def isRemote(self) -> bool | None:
        """
        Return True if the stream is published by another peer.
        Only a publishing handle knows it, so a Subscriber yields None and counts as local.
        """
        if not isPublisher(self.streamHandle):
            return None
        return getattr(self.streamHandle, 'remote', None)

    def _typeOfVideo(self) -> VideoType | None:
        if not isPublisher(self.streamHandle):
            return None
        stream = self.streamHandle.stream
        return stream.typeOfVideo if stream is not None else None

    def isScreen(self) -> bool:
        return self._typeOfVideo() == VideoType.SCREEN

    def isCamera(self) -> bool:
        # a local participant without a classified stream is a camera
        return self._typeOfVideo() == VideoType.CAMERA or (self.isLocal() and not self.isScreen())

    def setStreamManager(self, streamManager: StreamManager | None) -> None:
        self.streamHandle = streamManager

    def setNickname(self, nickname: str) -> None:
        self.nickname = nickname or DEFAULT_NICKNAME

    def setLocation(self, x: float, y: float) -> None:
        self.position.update(x, y)

    def getLocation(self) -> Position:
        return self.position

    def isVideoSizeBig(self) -> bool | None:
        return self.preferLargeVideo

    def setVideoSizeBig(self, big: bool) -> None:
        self.preferLargeVideo = big

    def getAudioVolume(self) -> float:
        return self.audioGain

    def setAudioVolume(self, audioVolume: float) -> None:
        self.audioGain = audioVolume

    async def setUserAvatar(self, img: str | None = None) -> None:
        """
        Update the avatar of the participant.

        Args:
            img (str | None): data url of an image to use as fallback avatar. When omitted,
                the avatar is cut from the frame currently rendered for the stream of the participant.
        """
        if img:
            self.cachedAvatarDataUri = img
            return
        stream = self.streamHandle.stream if self.streamHandle is not None else None
        if stream is None:
            self.logger.warning('Unable to capture the avatar, no stream.')
            return
        if self.captureFrame is None:
            self.logger.warning('Unable to capture the avatar, no capture provider.')
            return
        o = self.options
        try:
            frame = await ensure_future(self.captureFrame, stream.streamId)
            if frame is None:
                self.logger.warning(f'Unable to capture the avatar, nothing rendered for stream {stream.streamId}.')
                return
            avatar = VideoAvatar(o.size, o.size)
            avatar.drawImage(frame, o.sourceX, o.sourceY, o.sourceWidth, o.sourceHeight, 0, 0, o.size, o.size)
        except CaptureError as e:
            self.logger.warning(f'Unable to capture the avatar: {e.message}')
            return
        except Exception as e:
            self.logger.warning(f'Unable to draw the avatar from stream {stream.streamId}, {e!r}')
            return
        self.avatarImage = avatar
        self.logger.debug(f'Avatar captured from stream {stream.streamId}.')

    def removeVideoAvatar(self) -> None:
        self.avatarImage = None
