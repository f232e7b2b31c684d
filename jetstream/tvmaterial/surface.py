from __future__ import annotations
from typing import Optional, Tuple

from PySide6.QtCore    import Qt, Signal, QEvent, QPropertyAnimation # type: ignore
from PySide6.QtGui     import QColor # type: ignore
from PySide6.QtWidgets import QFrame, QGraphicsDropShadowEffect, QWidget # type: ignore

from jetstream.tvmaterial.interaction import InteractionFlags, InteractionState
from jetstream.tvmaterial.list_item_defaults import (
    ListItemDefaults, ListItemStyle, ResolvedListItemStyle,
)

_ACTIVATE_KEYS = (Qt.Key_Return, Qt.Key_Enter, Qt.Key_Space, Qt.Key_Select)


class StyledSurface(QFrame):
    """
    Focusable frame that redraws itself from a `ListItemStyle` whenever its
    enabled / focused / pressed / selected flags change.

    Glow is drawn with a drop-shadow effect, scale by resizing around
    *base_size* (when given).
    """
    clicked = Signal()

    def __init__(
        self,
        style: ListItemStyle | None = None,
        base_size: Optional[Tuple[int, int]] = None,
        object_name: str = "ListItem",
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self.setObjectName(object_name)
        self.setFocusPolicy(Qt.StrongFocus)
        self.setAttribute(Qt.WA_StyledBackground, True)

        self._style  = style or ListItemDefaults.style()
        self._flags  = InteractionFlags(enabled=self.isEnabled())
        self._base_size = base_size
        self._resolved: ResolvedListItemStyle | None = None

        self._shadow = QGraphicsDropShadowEffect(self)
        self._shadow.setOffset(0, 0)
        self._shadow.setBlurRadius(0)
        self.setGraphicsEffect(self._shadow)

        self._apply_style()

    # ------------------------------------------------------------------ API
    def item_style(self) -> ListItemStyle:
        return self._style

    def set_item_style(self, style: ListItemStyle) -> None:
        self._style = style
        self._apply_style()

    def state(self) -> InteractionState:
        return self._flags.state

    def resolved_style(self) -> ResolvedListItemStyle:
        return self._resolved

    def isSelected(self) -> bool:
        return self._flags.selected

    def setSelected(self, selected: bool) -> None:
        if self._flags.selected != selected:
            self._flags.selected = selected
            self._apply_style()

    # ------------------------------------------------------------------ Qt
    def focusInEvent(self, event):
        super().focusInEvent(event)
        self._set_flag("focused", True)

    def focusOutEvent(self, event):
        super().focusOutEvent(event)
        self._flags.pressed = False
        self._set_flag("focused", False)

    def enterEvent(self, event):
        super().enterEvent(event)
        if self.isEnabled():
            self.setFocus(Qt.MouseFocusReason)

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton and self.isEnabled():
            self._set_flag("pressed", True)
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton and self._flags.pressed:
            self._set_flag("pressed", False)
            if self.rect().contains(event.position().toPoint()):
                self._on_activated()
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def keyPressEvent(self, event):
        if event.key() in _ACTIVATE_KEYS and not event.isAutoRepeat() and self.isEnabled():
            self._set_flag("pressed", True)
            event.accept()
            return
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event):
        if event.key() in _ACTIVATE_KEYS and not event.isAutoRepeat() and self._flags.pressed:
            self._set_flag("pressed", False)
            self._on_activated()
            event.accept()
            return
        super().keyReleaseEvent(event)

    def changeEvent(self, event):
        super().changeEvent(event)
        if event.type() == QEvent.Type.EnabledChange:
            self._flags.enabled = self.isEnabled()
            if not self._flags.enabled:
                self._flags.pressed = False
            self._apply_style()

    # ---------------------------------------------------------------- misc
    def _on_activated(self) -> None:
        self.clicked.emit()

    def _set_flag(self, name: str, value: bool) -> None:
        if getattr(self._flags, name) != value:
            setattr(self._flags, name, value)
            self._apply_style()

    def _apply_style(self) -> None:
        resolved = self._style.resolve(self._flags.state)
        previous, self._resolved = self._resolved, resolved
        self.setStyleSheet(resolved.stylesheet(f"QFrame#{self.objectName()}"))

        if self._base_size:
            w, h = self._base_size
            self.setFixedSize(round(w * resolved.scale), round(h * resolved.scale))

        self._shadow.setColor(QColor(resolved.glow.color))
        target = 0 if resolved.glow.is_none else resolved.glow.elevation * 2
        if previous is None or not self.isVisible():
            self._shadow.setBlurRadius(target)
            return
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(target)
        anim.start(QPropertyAnimation.DeleteWhenStopped)
