from PySide6.QtCore import QAbstractTableModel, Qt, QModelIndex, QTimer
from PySide6.QtGui import QBrush, QColor
from PySide6.QtWidgets import (QTableView, QWidget, QVBoxLayout, QHBoxLayout,
                               QPushButton, QInputDialog, QMessageBox, QCheckBox)

from lc3.disasm import disassemble

PC_HIGHLIGHT = QColor(255, 240, 160)


class MemoryModel(QAbstractTableModel):
    """All 65536 words as rows: hex value and disassembly. Read-only."""
    HEADERS = ("Value", "Instruction")

    def __init__(self, vm, parent=None):
        super().__init__(parent)
        self.vm = vm
        self.view = vm.memory_view()

    def rowCount(self, parent=QModelIndex()):
        return 0 if parent.isValid() else len(self.view)

    def columnCount(self, parent=QModelIndex()):
        return len(self.HEADERS)

    def data(self, index, role=Qt.DisplayRole):
        if not index.isValid():
            return None
        addr = index.row()
        if role == Qt.DisplayRole:
            word = self.view[addr]
            if index.column() == 0:
                return f"{word:04X}"
            return disassemble(word, addr)
        if role == Qt.BackgroundRole and addr == self.vm.pc:
            return QBrush(PC_HIGHLIGHT)
        return None

    def headerData(self, section, orientation, role=Qt.DisplayRole):
        if role != Qt.DisplayRole:
            return None
        if orientation == Qt.Vertical:
            return f"x{section:04X}"
        return self.HEADERS[section]

    def refresh(self):
        top_left = self.index(0, 0)
        bottom_right = self.index(self.rowCount() - 1, self.columnCount() - 1)
        self.dataChanged.emit(top_left, bottom_right)


class MemoryPanel(QWidget):
    """Scrollable memory view that can follow the PC."""
    def __init__(self, vm, parent=None):
        super().__init__(parent)
        self.vm = vm

        layout = QVBoxLayout(self)

        self.model = MemoryModel(vm, self)
        self.table_view = QTableView(self)
        self.table_view.setModel(self.model)
        self.table_view.setSelectionBehavior(QTableView.SelectRows)
        self.table_view.verticalHeader().setDefaultSectionSize(20)
        self.table_view.horizontalHeader().setStretchLastSection(True)
        layout.addWidget(self.table_view)

        controls = QHBoxLayout()
        self.btn_goto = QPushButton("Go to Address")
        self.btn_goto.clicked.connect(self.goto_address)
        controls.addWidget(self.btn_goto)

        self.follow_pc = QCheckBox("Follow PC")
        self.follow_pc.setChecked(True)
        controls.addWidget(self.follow_pc)
        controls.addStretch(1)
        layout.addLayout(controls)

        self.timer = QTimer(self)
        self.timer.timeout.connect(self.refresh)
        self.timer.start(500)  # ms
        self.scroll_to(self.vm.pc)

    def refresh(self):
        """Refresh the memory view"""
        self.model.refresh()
        if self.follow_pc.isChecked():
            self.scroll_to(self.vm.pc)

    def scroll_to(self, addr: int):
        index = self.model.index(addr & 0xFFFF, 0)
        self.table_view.scrollTo(index, QTableView.PositionAtCenter)

    def goto_address(self):
        """Scroll to an address typed in hex"""
        text, ok = QInputDialog.getText(self, "Go to Address",
                                        "Address (hex, e.g. 3000 or x3000):",
                                        text=f"{self.vm.pc:04X}")
        if not ok:
            return
        try:
            addr = int(text.strip().lstrip("xX"), 16)
        except ValueError:
            QMessageBox.warning(self, "Invalid Input",
                                "Please enter a valid hexadecimal address.")
            return
        self.follow_pc.setChecked(False)
        self.scroll_to(addr)
        self.table_view.selectRow(addr & 0xFFFF)
