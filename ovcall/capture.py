import asyncio
import logging

from aiortc import MediaStreamTrack
from aiortc.mediastreams import MediaStreamError
from av import VideoFrame

from .common import CaptureError
from .constants import VIDEO_ELEMENT_PREFIX
from .log import configLogger
from .stream import Stream

logger = configLogger(logger=logging.getLogger('ovcall[capture]'))


def videoElementId(streamId: str) -> str:
    return f'{VIDEO_ELEMENT_PREFIX}{streamId}'


class VideoSurfaceRegistry:
    """
    The video elements currently rendered by the client, addressed by ``video-<streamId>``.
    Each element is backed by the video track being rendered in it.
    The registry only references the tracks, it never stops them.
    """
    elements: dict[str, MediaStreamTrack]
    timeout: float

    def __init__(self, timeout: float = 5) -> None:
        self.elements = {}
        self.timeout = timeout

    def __contains__(self, elementId: str) -> bool:
        return elementId in self.elements

    def attach(self, streamId: str, track: MediaStreamTrack) -> str:
        if track.kind != 'video':
            raise ValueError(f'Only video track can be attached to a video element, but got a {track.kind} track.')
        elementId = videoElementId(streamId)
        if elementId in self.elements:
            logger.debug(f'Replace the track rendered in {elementId}.')
        self.elements[elementId] = track
        return elementId

    def attachStream(self, stream: Stream) -> str:
        """
        Render the video track of the stream in its video element.
        """
        track = stream.videoTrack
        if track is None:
            raise ValueError(f'Stream {stream.streamId} has no video track to render.')
        return self.attach(stream.streamId, track)

    def detach(self, streamId: str) -> MediaStreamTrack | None:
        return self.elements.pop(videoElementId(streamId), None)

    def get(self, elementId: str) -> MediaStreamTrack | None:
        return self.elements.get(elementId)

    async def captureFrame(self, streamId: str) -> VideoFrame:
        """
        Grab the next frame rendered in the video element of the stream.

        Args:
            streamId (str): id of the stream
        Return:
            The captured frame.
        Raises:
            CaptureError: The element does not exist, its track has ended or no frame arrived in time.
        """
        elementId = videoElementId(streamId)
        track = self.elements.get(elementId)
        if track is None:
            raise CaptureError(f'No video element {elementId}.', streamId)
        if track.readyState != 'live':
            raise CaptureError(f'The track rendered in {elementId} has ended.', streamId)
        try:
            frame = await asyncio.wait_for(track.recv(), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise CaptureError(f'No frame rendered in {elementId} after {self.timeout}s.', streamId) from e
        except MediaStreamError as e:
            raise CaptureError(f'The track rendered in {elementId} has ended.', streamId) from e
        if not isinstance(frame, VideoFrame):
            raise CaptureError(f'Unexpected frame type {type(frame).__name__} from {elementId}.', streamId)
        return frame
