"""Media item descriptors and overlay geometry for videos."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from . import config
from .layout import Rect


@dataclass(frozen=True, slots=True)
class MediaItem:
    """A photo or video shown in a mosaic.

    Attributes:
        file_name: Stored file of the photo or video.
        is_video: Whether the item plays back.
        thumbnail_file_name: Pre-generated still for videos.
        duration: Video length in seconds.
    """

    file_name: str
    is_video: bool = False
    thumbnail_file_name: Optional[str] = None
    duration: Optional[float] = None

    @classmethod
    def photo(cls, file_name: str) -> "MediaItem":
        return cls(file_name=file_name)

    @classmethod
    def video(cls, file_name: str, thumbnail_file_name: str, duration: float) -> "MediaItem":
        if duration < 0:
            raise ValueError("duration must be >= 0")
        return cls(
            file_name=file_name,
            is_video=True,
            thumbnail_file_name=thumbnail_file_name,
            duration=duration,
        )

    @property
    def display_file_name(self) -> str:
        """File to draw in the mosaic: the thumbnail for videos."""
        if self.is_video and self.thumbnail_file_name:
            return self.thumbnail_file_name
        return self.file_name


def format_duration(seconds: float) -> str:
    """Format *seconds* as ``m:ss`` or ``h:mm:ss``, truncating fractions."""
    total = int(seconds)
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def play_overlay_frame(frame: Rect, size: float = config.PLAY_OVERLAY_SIZE) -> Rect:
    """Square play button centered on *frame*."""
    return Rect(frame.mid_x - size / 2, frame.mid_y - size / 2, size, size)


def duration_badge_frame(frame: Rect, text_width: float) -> Rect:
    """Duration badge pinned to the bottom-right corner of *frame*."""
    width = text_width + config.DURATION_BADGE_PADDING
    height = config.DURATION_BADGE_HEIGHT
    margin = config.DURATION_BADGE_MARGIN
    return Rect(frame.max_x - width - margin, frame.max_y - height - margin, width, height)
