from PySide6.QtWidgets import QWidget, QLabel, QLineEdit, QGridLayout
from PySide6.QtCore import Qt, QTimer

from lc3.consts import GENERAL_REGS, REGISTER_NAMES
from lc3.disasm import format_cond


class RegisterPanel(QWidget):
    """
    R0–R7, PC, COND and IR in a read-only grid.
    Refreshed every 200 ms from the machine's register snapshot.
    """
    def __init__(self, vm, parent=None):
        super().__init__(parent)
        self.vm = vm
        self.edits = []

        layout = QGridLayout(self)
        for row, name in enumerate(REGISTER_NAMES + ["IR"]):
            lbl = QLabel(name)
            edit = QLineEdit()
            edit.setReadOnly(True)
            edit.setAlignment(Qt.AlignRight)
            edit.setObjectName(name)
            layout.addWidget(lbl, row, 0)
            layout.addWidget(edit, row, 1)
            self.edits.append(edit)
        layout.setColumnStretch(1, 1)

        self.timer = QTimer(self)
        self.timer.timeout.connect(self.update_view)
        self.timer.start(200)   # ms
        self.update_view()

    def update_view(self):
        regs = self.vm.registers()
        for i in range(GENERAL_REGS):
            self.edits[i].setText(f"{regs[i]:04X}")
        pc, cond = regs[GENERAL_REGS], regs[GENERAL_REGS + 1]
        self.edits[GENERAL_REGS].setText(f"{pc:04X}")
        self.edits[GENERAL_REGS + 1].setText(format_cond(cond))
        self.edits[GENERAL_REGS + 2].setText(f"{self.vm.ir:04X}")
