from __future__ import annotations

from PySide6.QtCore    import Qt, QUrl, Slot # type: ignore
from PySide6.QtMultimedia        import QAudioOutput, QMediaPlayer # type: ignore
from PySide6.QtMultimediaWidgets import QVideoWidget # type: ignore
from PySide6.QtWidgets import QHBoxLayout, QPushButton, QVBoxLayout, QWidget # type: ignore

from jetstream.settings import ICON, SAMPLE_VIDEO_URL
from jetstream.gui.context import AppContext
from jetstream.utils import log_debug


class VideoPlayerScreen(QWidget):
    """Full-screen player for the sample stream with play/pause controls."""

    def __init__(self, ctx: AppContext, source: str = SAMPLE_VIDEO_URL, parent: QWidget | None = None):
        super().__init__(parent)
        self.source = source

        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        self.video = QVideoWidget()
        root.addWidget(self.video, 1)

        controls = QHBoxLayout()
        controls.setContentsMargins(48, 8, 48, 24)
        self.play_button = QPushButton(ICON("pause"), "Pause")
        self.play_button.clicked.connect(self.toggle_playback)
        self.back_button = QPushButton(ICON("arrow-left"), "Back")
        self.back_button.clicked.connect(lambda: ctx.nav.navigate_up())
        controls.addWidget(self.back_button, 0, Qt.AlignLeft)
        controls.addStretch()
        controls.addWidget(self.play_button, 0, Qt.AlignRight)
        root.addLayout(controls)

        self.audio  = QAudioOutput(self)
        self.player = QMediaPlayer(self)
        self.player.setAudioOutput(self.audio)
        self.player.setVideoOutput(self.video)
        self.player.errorOccurred.connect(self._on_error)
        self.player.setSource(QUrl(source))

    def on_enter(self) -> None:
        self.player.play()

    def on_leave(self) -> None:
        self.player.stop()

    @Slot()
    def toggle_playback(self) -> None:
        if self.player.playbackState() == QMediaPlayer.PlayingState:
            self.player.pause()
            self.play_button.setText("Play")
            self.play_button.setIcon(ICON("play"))
        else:
            self.player.play()
            self.play_button.setText("Pause")
            self.play_button.setIcon(ICON("pause"))

    @Slot(QMediaPlayer.Error, str)
    def _on_error(self, error, message: str) -> None:
        log_debug(f"video player error ({error}): {message} [{self.source}]")
