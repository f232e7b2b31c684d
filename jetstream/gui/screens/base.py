from __future__ import annotations
from typing import List

from PySide6.QtCore    import QEasingCurve, QPropertyAnimation, Signal, Slot # type: ignore
from PySide6.QtWidgets import QFrame, QScrollArea, QVBoxLayout, QWidget # type: ignore

from jetstream.gui.controller import first_visible_item, is_top_bar_visible


class ScrollingScreen(QScrollArea):
    """
    Vertical list of sections that reports top-bar visibility while it
    scrolls and can animate back to the first section.
    """
    top_bar_visibility_changed = Signal(bool)

    def __init__(self, threshold: int, parent: QWidget | None = None):
        super().__init__(parent)
        self.threshold = threshold
        self.setFrameShape(QFrame.NoFrame)
        self.setWidgetResizable(True)

        self._content = QWidget()
        self.sections = QVBoxLayout(self._content)
        self.sections.setContentsMargins(48, 24, 48, 24)
        self.sections.setSpacing(24)
        self.setWidget(self._content)

        self._tracked: List[QWidget] = []
        self._has_header = False
        self._top_bar_visible = True
        self.verticalScrollBar().valueChanged.connect(self._on_scrolled)

    def add_section(self, widget: QWidget, header: bool = False) -> None:
        """
        Append a section. Header sections sit above the list and are left
        out of the first-visible-item measurement, so offsets are counted
        from the top of the first regular section.
        """
        self.sections.addWidget(widget)
        if header:
            self._has_header = True
        else:
            self._tracked.append(widget)

    def finish(self) -> None:
        self.sections.addStretch()

    def section_spans(self) -> List[tuple[int, int]]:
        """(top, height) of every shown regular section, in content coordinates."""
        spans = [(w.y(), w.height()) for w in self._tracked if not w.isHidden()]
        if spans and not self._has_header:
            # the top margin belongs to item 0
            top, height = spans[0]
            spans[0] = (0, top + height)
        return spans

    def is_top_bar_visible(self) -> bool:
        return self._top_bar_visible

    @Slot(int)
    def _on_scrolled(self, value: int) -> None:
        index, offset = first_visible_item(self.section_spans(), value)
        visible = is_top_bar_visible(index, offset, self.threshold)
        if visible != self._top_bar_visible:
            self._top_bar_visible = visible
            self.top_bar_visibility_changed.emit(visible)

    @Slot()
    def scroll_to_top(self, animated: bool = True) -> None:
        bar = self.verticalScrollBar()
        if not animated or not self.isVisible():
            bar.setValue(0)
            return
        anim = QPropertyAnimation(bar, b"value", self)
        anim.setDuration(250)
        anim.setEasingCurve(QEasingCurve.OutCubic)
        anim.setEndValue(0)
        anim.start(QPropertyAnimation.DeleteWhenStopped)
