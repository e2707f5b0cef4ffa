import base64
import io
import sys
from dataclasses import dataclass

from av import VideoFrame
from PIL import Image

if sys.version_info < (3, 11):
    from typing_extensions import NotRequired, TypedDict
else:
    from typing import NotRequired, TypedDict

from .constants import (AVATAR_SIZE, AVATAR_SOURCE_HEIGHT, AVATAR_SOURCE_WIDTH,
                        AVATAR_SOURCE_X, AVATAR_SOURCE_Y, AvatarFormat)

ImageSource = Image.Image | VideoFrame


class AvatarOptionsDict(TypedDict):
    sourceX: NotRequired[int]
    sourceY: NotRequired[int]
    sourceWidth: NotRequired[int]
    sourceHeight: NotRequired[int]
    size: NotRequired[int]
    format: NotRequired[AvatarFormat]

@dataclass
class AvatarOptions:
    """
    Region of a captured frame used for the avatar and the size it is scaled to.
    """

    sourceX: int = AVATAR_SOURCE_X
    sourceY: int = AVATAR_SOURCE_Y
    sourceWidth: int = AVATAR_SOURCE_WIDTH
    sourceHeight: int = AVATAR_SOURCE_HEIGHT
    size: int = AVATAR_SIZE
    """
    Width and height of the square avatar.
    """
    format: AvatarFormat = 'png'
    """
    Image format of the exported data url.
    """

    @staticmethod
    def fromConfigLike(value: "AvatarOptions | AvatarOptionsDict | None") -> "AvatarOptions":
        if value is None:
            return AvatarOptions()
        if isinstance(value, AvatarOptions):
            return value
        return AvatarOptions(**value)


def toImage(source: ImageSource) -> Image.Image:
    if isinstance(source, VideoFrame):
        return source.to_image()
    return source


class VideoAvatar:
    """
    Renderable avatar image, a small drawing surface filled from a video frame.
    """
    width: int
    height: int
    className: str
    image: Image.Image

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.className = 'user-img'
        self.image = Image.new('RGBA', (width, height), (0, 0, 0, 0))

    def drawImage(self, source: ImageSource, sx: int, sy: int, sw: int, sh: int, dx: int, dy: int, dw: int, dh: int) -> None:
        """
        Copy the (sx, sy, sw, sh) region of the source scaled into the (dx, dy, dw, dh) region of this avatar.
        Parts of the source region outside the source image are left transparent.
        """
        src = toImage(source).convert('RGBA')
        region = src.crop((sx, sy, sx + sw, sy + sh)).resize((dw, dh), Image.Resampling.BILINEAR)
        self.image.paste(region, (dx, dy), region)

    def toDataURL(self, format: AvatarFormat = 'png') -> str:
        image = self.image
        if format == 'jpeg':
            image = image.convert('RGB')
        buf = io.BytesIO()
        image.save(buf, format=format.upper())
        return f'data:image/{format};base64,{base64.b64encode(buf.getvalue()).decode()}'
