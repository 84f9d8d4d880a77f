"""
PyQt6 inspector host for serialized dictionaries.

Renders a ``DictionaryView`` as a two-column key/value table with add, remove
and move buttons. Rows whose keys fail validation are tinted by severity and
list their messages in a tooltip. Simple key/value types (numbers, strings,
bools, enums) are edited in place; other elements are shown read-only.
"""

import logging
from typing import Any, Optional, Tuple

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QColor
from PyQt6.QtWidgets import (
    QAbstractItemView, QHBoxLayout, QHeaderView, QLabel, QPushButton,
    QTableWidget, QTableWidgetItem, QVBoxLayout, QWidget,
)

from pyqt_serialdict.core.key_utils import (
    is_class, is_enum, is_optional, is_simple_type, resolve_optional, type_name,
)
from pyqt_serialdict.editor import (
    DictionaryProperty, DictionaryView, EntryView, MessageType, SerializedDictionaryDrawer,
)

logger = logging.getLogger(__name__)

KEY_COLUMN = 0
VALUE_COLUMN = 1

TRUE_STRINGS = ("true", "1", "yes", "on")
FALSE_STRINGS = ("false", "0", "no", "off")

# Status colors (RGB) with the alpha used for row tinting
MESSAGE_COLORS = {
    MessageType.INFO: (0, 170, 255),
    MessageType.WARNING: (255, 170, 0),
    MessageType.ERROR: (255, 0, 0),
}
ROW_TINT_ALPHA = 60

_SEVERITY = [MessageType.NONE, MessageType.INFO, MessageType.WARNING, MessageType.ERROR]


def get_message_color(message_type: MessageType) -> Optional[QColor]:
    """Resolve a message type to a row tint, None for no tint."""
    rgb = MESSAGE_COLORS.get(message_type)
    if rgb is None:
        return None
    return QColor(*rgb, ROW_TINT_ALPHA)


def format_element(value: Any) -> str:
    if value is None:
        return ""
    if is_enum(type(value)):
        return value.name
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def parse_element(text: str, element_type: Optional[type], current: Any) -> Any:
    """
    Parse cell text into an element of ``element_type``.

    Undeclared types follow the type of the current element, strings otherwise.

    Raises:
        ValueError: If the text does not parse or the type is not inline-editable
    """
    if is_optional(element_type) and text == "":
        return None

    target = resolve_optional(element_type)
    if target is None:
        target = type(current) if current is not None else str

    if not is_class(target):
        raise ValueError(f"{type_name(target)} cannot be edited inline")
    if is_enum(target):
        try:
            return target[text.strip()]
        except KeyError as e:
            raise ValueError(f"{text!r} is not a member of {target.__name__}") from e
    if issubclass(target, bool):
        lowered = text.strip().lower()
        if lowered in TRUE_STRINGS:
            return True
        if lowered in FALSE_STRINGS:
            return False
        raise ValueError(f"{text!r} is not a boolean")
    if issubclass(target, bytes):
        return text.encode("utf-8")
    if is_simple_type(target):
        return target(text.strip()) if target is not str else target(text)
    raise ValueError(f"{type_name(target)} cannot be edited inline")


def is_inline_editable(element_type: Optional[type], current: Any) -> bool:
    if element_type is not None:
        return is_simple_type(element_type)
    return current is None or is_simple_type(type(current))


class DictionaryInspectorWidget(QWidget):
    """
    Inspector panel for one ``DictionaryProperty``.

    Implements ``InspectorHostProtocol``: every user edit marks the widget
    dirty and triggers a drawer pass, which validates and applies the edit.

    Usage:
        prop = DictionaryProperty(character, "inventory")
        inspector = DictionaryInspectorWidget(prop, parent=self)
        inspector.entries_changed.connect(self._on_inventory_edited)
        layout.addWidget(inspector)
    """

    entries_changed = pyqtSignal()  # emitted after edits were applied to the dictionary

    def __init__(
        self,
        dictionary_property: DictionaryProperty,
        drawer: Optional[SerializedDictionaryDrawer] = None,
        parent=None,
    ):
        super().__init__(parent)
        self._property = dictionary_property
        self._drawer = drawer or SerializedDictionaryDrawer(host=self)
        self._view: Optional[DictionaryView] = None
        self._pending_change = False

        self._setup_ui()
        self._setup_connections()
        self.refresh()

    @property
    def dictionary_property(self) -> DictionaryProperty:
        return self._property

    @property
    def view(self) -> Optional[DictionaryView]:
        return self._view

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(5, 5, 5, 5)
        layout.setSpacing(4)

        self.header_label = QLabel()
        font = self.header_label.font()
        font.setBold(True)
        self.header_label.setFont(font)
        layout.addWidget(self.header_label)

        self.table_widget = QTableWidget(0, 2)
        self.table_widget.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table_widget.setSelectionMode(QAbstractItemView.SelectionMode.ExtendedSelection)
        self.table_widget.verticalHeader().setVisible(False)
        self.table_widget.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        layout.addWidget(self.table_widget, 1)

        self.empty_label = QLabel()
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.empty_label)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.add_button = QPushButton("+")
        self.add_button.setToolTip("Add entry")
        self.remove_button = QPushButton("−")
        self.remove_button.setToolTip("Remove selected entries")
        self.move_up_button = QPushButton("▲")
        self.move_up_button.setToolTip("Move entry up")
        self.move_down_button = QPushButton("▼")
        self.move_down_button.setToolTip("Move entry down")
        for button in (self.add_button, self.remove_button, self.move_up_button, self.move_down_button):
            button.setFixedWidth(28)
            button_row.addWidget(button)
        layout.addLayout(button_row)

    def _setup_connections(self):
        self.table_widget.itemChanged.connect(self._on_item_changed)
        self.add_button.clicked.connect(self.add_entry)
        self.remove_button.clicked.connect(self.remove_selected)
        self.move_up_button.clicked.connect(lambda: self.move_selected(-1))
        self.move_down_button.clicked.connect(lambda: self.move_selected(1))

    # ========== INSPECTOR HOST ==========

    def draw(self, view: DictionaryView) -> bool:
        self._view = view
        self._render(view)
        changed = self._pending_change
        self._pending_change = False
        return changed

    def is_undo_or_redo(self) -> bool:
        return False

    def create_default(self, element_type: type) -> Any:
        return element_type()

    # ========== RENDERING ==========

    def refresh(self) -> None:
        """Run a drawer pass; a pass that applied edits is followed by one more to show fresh warnings."""
        if self._drawer.on_gui(self._property):
            self._drawer.on_gui(self._property)
            self.entries_changed.emit()

    def _render(self, view: DictionaryView) -> None:
        self.header_label.setVisible(view.display_header)
        self.header_label.setText(view.header)
        self.empty_label.setText(view.empty_label)
        self.empty_label.setVisible(view.is_empty)

        entries = view.entries()
        self.table_widget.blockSignals(True)
        try:
            self.table_widget.setHorizontalHeaderLabels([view.key_label or "Key", view.value_label])
            self.table_widget.setRowCount(len(entries))
            for entry in entries:
                self._render_entry(view, entry)
        finally:
            self.table_widget.blockSignals(False)

    def _render_entry(self, view: DictionaryView, entry: EntryView) -> None:
        tooltip = "\n".join(warning.text for warning in entry.warnings)
        severity = max((warning.type for warning in entry.warnings), key=_SEVERITY.index,
                       default=MessageType.NONE)
        tint = get_message_color(severity)

        cells: Tuple[Tuple[int, Any, Optional[type]], ...] = (
            (KEY_COLUMN, entry.key, view.key_type),
            (VALUE_COLUMN, entry.value, view.value_type),
        )
        for column, element, element_type in cells:
            item = self.table_widget.item(entry.index, column)
            if item is None:
                # Reused across passes so itemChanged never sees a deleted item
                item = QTableWidgetItem()
                self.table_widget.setItem(entry.index, column, item)

            item.setText(format_element(element))
            item.setToolTip(tooltip)
            item.setData(Qt.ItemDataRole.BackgroundRole, tint)

            flags = Qt.ItemFlag.ItemIsSelectable | Qt.ItemFlag.ItemIsEnabled
            if is_inline_editable(element_type, element):
                flags |= Qt.ItemFlag.ItemIsEditable
            item.setFlags(flags)

    # ========== USER ACTIONS ==========

    def _mark_changed(self) -> None:
        self._pending_change = True
        self.refresh()

    def _selected_rows(self):
        return sorted(index.row() for index in self.table_widget.selectionModel().selectedRows())

    def add_entry(self) -> None:
        if self._view is None:
            return
        self._view.add()
        self._mark_changed()

    def remove_selected(self) -> None:
        rows = self._selected_rows()
        if self._view is None or not rows:
            return
        self._view.remove(rows)
        self.table_widget.clearSelection()
        self._mark_changed()

    def move_selected(self, offset: int) -> None:
        rows = self._selected_rows()
        if self._view is None or len(rows) != 1:
            return

        old_index = rows[0]
        new_index = old_index + offset
        if not 0 <= new_index < self._property.array_size:
            return

        self._view.reorder(old_index, new_index)
        self._mark_changed()
        self.table_widget.selectRow(new_index)

    def _on_item_changed(self, item: QTableWidgetItem) -> None:
        if self._view is None:
            return

        row, column = item.row(), item.column()
        is_key = column == KEY_COLUMN
        element_type = self._view.key_type if is_key else self._view.value_type
        current = (self._property.keys if is_key else self._property.values)[row]

        try:
            parsed = parse_element(item.text(), element_type, current)
        except ValueError as e:
            logger.warning(f"Rejected edit of '{self._property.property_path}' row {row}: {e}")
            self._render(self._view)
            return

        if is_key:
            self._view.set_key(row, parsed)
        else:
            self._view.set_value(row, parsed)
        self._mark_changed()
