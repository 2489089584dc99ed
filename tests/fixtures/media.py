"""
In-memory media doubles: video element and HLS library.

FakeHlsLibrary tracks the instances it creates so tests can assert that
at most one instance is alive at any time.
"""

from typing import Callable, Optional

from cinestream.core.ports.media import (
    HLS_MIME_TYPE,
    IHlsInstance,
    IHlsLibrary,
    IVideoElement,
)


class FakeVideoElement(IVideoElement):
    """Records every call made by the playback layer."""

    def __init__(self, native_hls: bool = False) -> None:
        self.native_hls = native_hls
        self.source: Optional[str] = None
        self.provider: Optional[str] = None
        self.calls: list[str] = []
        self.play_count = 0

    def pause(self) -> None:
        self.calls.append("pause")

    def clear_source(self) -> None:
        self.calls.append("clear_source")
        self.source = None

    def set_source(self, url: str) -> None:
        self.calls.append("set_source")
        self.source = url

    def play(self) -> None:
        self.calls.append("play")
        self.play_count += 1

    def can_play_type(self, mime_type: str) -> bool:
        return self.native_hls and mime_type == HLS_MIME_TYPE


class FakeHlsInstance(IHlsInstance):
    def __init__(self, library: "FakeHlsLibrary") -> None:
        self._library = library
        self.source: Optional[str] = None
        self.media: Optional[IVideoElement] = None
        self.destroyed = False
        self._callbacks: list[Callable[[], None]] = []

    def load_source(self, url: str) -> None:
        self.source = url

    def attach_media(self, video: IVideoElement) -> None:
        self.media = video

    def on_manifest_parsed(self, callback: Callable[[], None]) -> None:
        self._callbacks.append(callback)

    def emit_manifest_parsed(self) -> None:
        for callback in self._callbacks:
            callback()

    def destroy(self) -> None:
        self.destroyed = True
        self._library.live.remove(self)


class FakeHlsLibrary(IHlsLibrary):
    def __init__(self, supported: bool = True) -> None:
        self.supported = supported
        self.created: list[FakeHlsInstance] = []
        self.live: list[FakeHlsInstance] = []

    def is_supported(self) -> bool:
        return self.supported

    def create(self) -> FakeHlsInstance:
        instance = FakeHlsInstance(self)
        self.created.append(instance)
        self.live.append(instance)
        return instance
