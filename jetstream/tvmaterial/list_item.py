from __future__ import annotations

from PySide6.QtCore    import Qt # type: ignore
from PySide6.QtGui     import QIcon # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QGraphicsOpacityEffect, QHBoxLayout, QLabel, QVBoxLayout, QWidget,
)

from jetstream.tvmaterial.list_item_defaults import ListItemDefaults as D, ListItemStyle
from jetstream.tvmaterial.surface import StyledSurface


def _dim(label: QLabel, opacity: float) -> QLabel:
    effect = QGraphicsOpacityEffect(label)
    effect.setOpacity(opacity)
    label.setGraphicsEffect(effect)
    return label


class ListItem(StyledSurface):
    """
    TV list item: optional leading icon, overline / headline / supporting
    lines and a trailing text, drawn per interaction state.
    """

    def __init__(
        self,
        headline: str,
        overline: str | None = None,
        supporting: str | None = None,
        leading_icon: QIcon | None = None,
        trailing: str | None = None,
        dense: bool = False,
        selected: bool = False,
        style: ListItemStyle | None = None,
        parent: QWidget | None = None,
    ):
        super().__init__(style=style, object_name="ListItem", parent=parent)

        root = QHBoxLayout(self)
        hpad, vpad = D.CONTENT_PADDING
        root.setContentsMargins(hpad, vpad, hpad, vpad)
        root.setSpacing(0)

        # ── leading ─────────────────────────────────────────────────────
        self.leading_label: QLabel | None = None
        if leading_icon is not None:
            size = D.ICON_SIZE_DENSE if dense else D.ICON_SIZE
            self.leading_label = _dim(QLabel(), D.LEADING_CONTENT_OPACITY)
            self.leading_label.setPixmap(leading_icon.pixmap(size, size))
            root.addWidget(self.leading_label, 0, Qt.AlignVCenter)
            root.addSpacing(D.LEADING_CONTENT_END_PADDING)

        # ── text column ─────────────────────────────────────────────────
        column = QVBoxLayout()
        column.setSpacing(2)
        self.overline_label = None
        if overline:
            self.overline_label = _dim(QLabel(overline), D.OVERLINE_CONTENT_OPACITY)
            column.addWidget(self.overline_label)

        self.headline_label = QLabel(headline)
        self.headline_label.setStyleSheet("font-weight: 600;")
        column.addWidget(self.headline_label)

        self.supporting_label = None
        if supporting:
            self.supporting_label = _dim(QLabel(supporting), D.SUPPORTING_CONTENT_OPACITY)
            self.supporting_label.setWordWrap(True)
            column.addWidget(self.supporting_label)
        root.addLayout(column, 1)

        # ── trailing ────────────────────────────────────────────────────
        self.trailing_label = None
        if trailing:
            root.addSpacing(D.TRAILING_CONTENT_START_PADDING)
            self.trailing_label = QLabel(trailing, alignment=Qt.AlignRight | Qt.AlignVCenter)
            root.addWidget(self.trailing_label)

        self.setMinimumHeight(self.min_container_height(
            has_leading=leading_icon is not None,
            line_count=1 + bool(overline) + bool(supporting),
        ))
        if selected:
            self.setSelected(True)

    def headline(self) -> str:
        return self.headline_label.text()

    @staticmethod
    def min_container_height(has_leading: bool, line_count: int) -> int:
        if line_count >= 3:
            return D.MIN_CONTAINER_HEIGHT_THREE_LINE
        if line_count == 2:
            return D.MIN_CONTAINER_HEIGHT_TWO_LINE
        if has_leading:
            return D.MIN_CONTAINER_HEIGHT_LEADING_CONTENT
        return D.MIN_CONTAINER_HEIGHT
