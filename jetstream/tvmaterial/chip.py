from __future__ import annotations

from PySide6.QtCore    import Qt, Signal # type: ignore
from PySide6.QtWidgets import QHBoxLayout, QLabel, QWidget # type: ignore

from jetstream.tvmaterial.list_item_defaults import ListItemDefaults, ListItemStyle
from jetstream.tvmaterial.surface import StyledSurface
from jetstream.tvmaterial.theme import (
    Border, ColorScheme, DEFAULT_SCHEME, RoundedCornerShape,
)


def filter_chip_style(scheme: ColorScheme = DEFAULT_SCHEME) -> ListItemStyle:
    """Outlined chip; filled with the secondary container once selected."""
    shape = RoundedCornerShape(8)
    outline = Border(width=1, color=scheme.border, radius=shape.radius)
    return ListItemDefaults.style(
        shape=ListItemDefaults.shape(shape=shape),
        colors=ListItemDefaults.colors(
            selected_container_color=scheme.secondary_container,
            selected_content_color=scheme.on_secondary_container,
            focused_selected_container_color=scheme.inverse_surface,
            scheme=scheme,
        ),
        border=ListItemDefaults.border(
            border=outline,
            focused_border=Border(width=0, radius=shape.radius),
            selected_border=Border(width=0, radius=shape.radius),
            scheme=scheme,
        ),
        scale=ListItemDefaults.scale(focused_scale=1.1),
    )


class FilterChip(StyledSurface):
    """Toggle chip; activation flips the selected flag."""
    toggled = Signal(bool)

    def __init__(self, text: str, selected: bool = False, parent: QWidget | None = None):
        super().__init__(style=filter_chip_style(), object_name="FilterChip", parent=parent)
        row = QHBoxLayout(self)
        row.setContentsMargins(16, 6, 16, 6)
        self.label = QLabel(text, alignment=Qt.AlignCenter)
        row.addWidget(self.label)
        if selected:
            self.setSelected(True)

    def text(self) -> str:
        return self.label.text()

    def _on_activated(self) -> None:
        self.setSelected(not self.isSelected())
        self.toggled.emit(self.isSelected())
        super()._on_activated()
