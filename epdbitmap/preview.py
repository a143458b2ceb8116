from __future__ import annotations

import threading
import time
from typing import Callable, List, Optional, Sequence

from PIL import Image

from .encoding import PackedBitmap

DEFAULT_FPS = 12.0
DARK = 0
LIGHT = 255


def render_bitmap(bitmap: PackedBitmap, scale: int = 1) -> Image.Image:
    """Render a packed bitmap as a grayscale image, dark pixels black."""
    bitmap.validate()
    img = Image.new("L", (bitmap.width, bitmap.height), LIGHT)
    pixels = img.load()
    for y in range(bitmap.height):
        for x in range(bitmap.width):
            if bitmap.bit(x, y):
                pixels[x, y] = DARK
    if scale > 1:
        img = img.resize((bitmap.width * scale, bitmap.height * scale), Image.NEAREST)
    return img


def fit_scale(width: int, height: int, canvas_width: int, canvas_height: int) -> float:
    """Scale factor that fits a frame on a canvas without enlarging it."""
    return min(canvas_width / width, canvas_height / height, 1)


def save_preview_gif(
    frames: Sequence[PackedBitmap],
    path: str,
    fps: float = DEFAULT_FPS,
    scale: int = 1,
) -> None:
    """Save frames as a looping GIF.

    Pillow folds identical consecutive frames into one and sums their
    durations, so the file may hold fewer frames than ``frames`` while the
    total play time stays ``len(frames) / fps``.
    """
    if not frames:
        raise ValueError("No frames to preview")
    images = [render_bitmap(frame, scale) for frame in frames]
    duration = int(round(1000 / fps))
    images[0].save(
        path,
        format="GIF",
        save_all=True,
        append_images=images[1:],
        duration=duration,
        loop=0,
    )


class PreviewSession:
    """Cycles rendered frames to a callback on a background thread.

    One session owns one timer; calling ``start`` again restarts playback
    from the first frame.
    """

    def __init__(
        self,
        frames: Sequence[PackedBitmap],
        on_frame: Callable[[Image.Image], None],
        fps: float = DEFAULT_FPS,
        scale: int = 1,
    ) -> None:
        if not frames:
            raise ValueError("No frames to preview")
        if fps <= 0:
            raise ValueError("fps must be positive")
        self._images: List[Image.Image] = [render_bitmap(frame, scale) for frame in frames]
        self._on_frame = on_frame
        self._interval = 1.0 / fps
        self._lock = threading.Lock()
        self._index = 0
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def frame_count(self) -> int:
        return len(self._images)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        self.stop()
        with self._lock:
            self._index = 0
        self._stop_event = threading.Event()
        self._thread = threading.Thread(target=self._loop, args=(self._stop_event,), daemon=True)
        self._thread.start()

    def stop(self) -> None:
        thread = self._thread
        if thread is None:
            return
        self._stop_event.set()
        if thread is not threading.current_thread():
            thread.join()
        self._thread = None

    def step(self) -> int:
        """Show the next frame and return its index."""
        with self._lock:
            index = self._index
            self._index = (index + 1) % len(self._images)
        self._on_frame(self._images[index])
        return index

    def _loop(self, stop_event: threading.Event) -> None:
        next_time = time.perf_counter()
        while not stop_event.is_set():
            self.step()
            next_time += self._interval
            delay = next_time - time.perf_counter()
            if delay < 0:
                next_time = time.perf_counter()
                delay = 0
            stop_event.wait(delay)
