"""Executed-instruction log; the last row (the next instruction) is bold."""
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QTableWidget, QTableWidgetItem, QVBoxLayout, QWidget


class HistoryPanel(QWidget):
    HEADERS = ["Tick", "Address", "Instruction"]

    def __init__(self, session, parent=None):
        super().__init__(parent)
        self.session = session
        self.table = QTableWidget(0, len(self.HEADERS))
        self.table.setHorizontalHeaderLabels(self.HEADERS)
        self.table.verticalHeader().setVisible(False)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.setEditTriggers(QTableWidget.NoEditTriggers)

        layout = QVBoxLayout(self)
        layout.addWidget(self.table)
        self.refresh()

    def refresh(self):
        entries = self.session.entries()
        self.table.setRowCount(len(entries))
        bold = QFont()
        bold.setBold(True)
        for row, entry in enumerate(entries):
            cells = (str(entry.tick), f"x{entry.address:04X}", entry.text)
            for col, text in enumerate(cells):
                item = QTableWidgetItem(text)
                if row == len(entries) - 1:
                    item.setFont(bold)
                self.table.setItem(row, col, item)
        if entries:
            self.table.scrollToBottom()
