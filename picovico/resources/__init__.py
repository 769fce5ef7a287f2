from .session import SessionState, VideoSession
from .uploads import HOSTED, UploadsResource

__all__ = ["SessionState", "VideoSession", "UploadsResource", "HOSTED"]
