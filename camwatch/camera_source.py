"""Camera sources: webcams, video files and network streams."""

from __future__ import annotations

import enum
import logging
import re
import time
from typing import Any, Callable, Protocol, Union

import imageio.v2 as iio

log = logging.getLogger(__name__)


class CameraError(Exception):
    """Raised when a camera cannot be opened or read."""


class CameraType(enum.Enum):
    """Kind of video source a camera reads from."""

    WEBCAM = "webcam"
    VIDEO_FILE = "video_file"
    RTSP_STREAM = "rtsp_stream"
    IP_CAMERA = "ip_camera"


def camera_type_to_string(camera_type: CameraType) -> str:
    """Return the configuration name of a camera type."""
    return CameraType(camera_type).value


def camera_type_from_string(text: str) -> CameraType:
    """Parse a camera type name; unknown names fall back to a webcam."""
    try:
        return CameraType(text)
    except ValueError:
        return CameraType.WEBCAM


class Capture(Protocol):
    """What a camera needs from an opened video stream."""

    def read(self) -> Any | None: ...

    def release(self) -> None: ...

    def is_opened(self) -> bool: ...


Opener = Callable[[Union[int, str]], Capture]

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _device_index(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise CameraError(f"invalid webcam index: {text!r}")
    return int(match.group(1))


class ImageioCapture:
    """A video stream read frame by frame through imageio."""

    def __init__(self, uri: int | str) -> None:
        target = f"<video{uri}>" if isinstance(uri, int) else uri
        try:
            self._reader = iio.get_reader(target)
        except Exception as exc:
            raise CameraError(f"cannot open {target!r}: {exc}") from exc

    def read(self) -> Any | None:
        """Return the next frame, or None when the stream has ended."""
        if self._reader is None:
            return None
        try:
            return self._reader.get_next_data()
        except (IndexError, StopIteration, RuntimeError):
            return None

    def release(self) -> None:
        if self._reader is not None:
            self._reader.close()
            self._reader = None

    def is_opened(self) -> bool:
        return self._reader is not None


class CameraSource:
    """A named camera that can be opened, read and serialised."""

    RECONNECT_DELAY = 0.5

    def __init__(
        self,
        id: int,
        name: str,
        camera_type: CameraType,
        source: str,
        opener: Opener | None = None,
    ) -> None:
        self.id = id
        self.name = name
        self.camera_type = camera_type
        self._source = source
        self._opener: Opener = opener or ImageioCapture
        self._capture: Capture | None = None
        self.is_active = False

    def __repr__(self) -> str:
        return (
            f"CameraSource(id={self.id!r}, name={self.name!r}, "
            f"camera_type={self.camera_type!r}, source={self._source!r})"
        )

    @property
    def source(self) -> str:
        return self._source

    def is_opened(self) -> bool:
        return self._capture is not None and self._capture.is_opened()

    def set_source(self, source: str) -> None:
        """Change the source, reopening the camera if it was open."""
        was_opened = self.is_opened()
        if was_opened:
            self.close()
        self._source = source
        if was_opened:
            self.open()

    def open(self) -> None:
        """Open the stream; raise CameraError if it cannot be opened."""
        if self.is_opened():
            return
        try:
            if self.camera_type is CameraType.WEBCAM:
                uri: int | str = _device_index(self._source)
            else:
                uri = self._source
            capture = self._opener(uri)
            if not capture.is_opened():
                capture.release()
                raise CameraError(f"camera {self.name!r} could not be opened")
        except CameraError as exc:
            self.is_active = False
            log.error("Error opening camera %r: %s", self.name, exc)
            raise
        self._capture = capture
        self.is_active = True
        log.info("Camera %r opened successfully.", self.name)

    def close(self) -> None:
        if self.is_opened():
            assert self._capture is not None
            self._capture.release()
            self._capture = None
            self.is_active = False
            log.info("Camera %r closed.", self.name)

    def read(self) -> Any | None:
        """Return the next frame, or None if no frame could be read."""
        if not self.is_opened():
            raise CameraError(f"camera {self.name!r} is not open")
        assert self._capture is not None
        frame = self._capture.read()
        if frame is None:
            log.error("Failed to read frame from camera %r", self.name)
            self.is_active = False
        return frame

    def reconnect(self) -> None:
        log.info("Attempting to reconnect camera %r...", self.name)
        self.close()
        time.sleep(self.RECONNECT_DELAY)
        self.open()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": camera_type_to_string(self.camera_type),
            "source": self._source,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], opener: Opener | None = None) -> CameraSource:
        return cls(
            int(data["id"]),
            str(data["name"]),
            camera_type_from_string(data["type"]),
            str(data["source"]),
            opener,
        )