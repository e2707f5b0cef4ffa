import asyncio
import fractions

from aiortc import MediaStreamTrack
from av import VideoFrame
from PIL import Image

AVATAR_COLOR = (255, 0, 0)
BACKGROUND_COLOR = (0, 0, 255)


def make_picture(width: int = 640, height: int = 480) -> Image.Image:
    """
    A blue picture with a red square covering the default avatar region.
    """
    image = Image.new('RGB', (width, height), BACKGROUND_COLOR)
    image.paste(AVATAR_COLOR, (200, 120, 485, 405))
    return image


class PictureTrack(MediaStreamTrack):
    kind = 'video'
    
    def __init__(self, image: Image.Image) -> None:
        super().__init__()
        self.image = image
        self.pts = 0
        
    async def recv(self) -> VideoFrame:
        frame = VideoFrame.from_image(self.image)
        frame.pts = self.pts
        frame.time_base = fractions.Fraction(1, 90000)
        self.pts += 3000
        return frame


class StalledTrack(MediaStreamTrack):
    kind = 'video'
    
    async def recv(self) -> VideoFrame:
        await asyncio.Event().wait()
        raise AssertionError('unreachable')


class SilentTrack(MediaStreamTrack):
    kind = 'audio'
    
    async def recv(self):
        raise AssertionError('unreachable')
