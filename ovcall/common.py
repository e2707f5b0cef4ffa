class OvCallError(Exception):
    message: str
    
    def __init__(self, message: str, *args: object) -> None:
        self.message = message
        super().__init__(self.message, *args)


class CaptureError(OvCallError):
    """
    Raised by a capture provider when the video surface of a stream can not be sampled.
    """
    streamId: str | None
    
    def __init__(self, message: str, streamId: str | None = None, *args: object) -> None:
        super().__init__(message, *args)
        self.streamId = streamId
