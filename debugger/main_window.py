from PySide6.QtWidgets import QMainWindow, QDockWidget, QApplication
from PySide6.QtCore import Qt
from .register_panel import RegisterPanel
from .memory_panel import MemoryPanel
from .history_panel import HistoryPanel
from .control_panel import ControlPanel
from .session import Debugger
import sys


class MainWindow(QMainWindow):
    def __init__(self, session: Debugger):
        super().__init__()
        self.session = session
        vm = session.vm
        self.setWindowTitle("LC-3 Debugger")

        # central widget: memory
        self.memory_panel = MemoryPanel(vm)
        self.setCentralWidget(self.memory_panel)

        # dock 1: registers
        reg_dock = QDockWidget("Registers", self)
        self.register_panel = RegisterPanel(vm)
        reg_dock.setWidget(self.register_panel)
        self.addDockWidget(Qt.LeftDockWidgetArea, reg_dock)

        # dock 2: instruction history
        hist_dock = QDockWidget("Instructions", self)
        self.history_panel = HistoryPanel(session)
        hist_dock.setWidget(self.history_panel)
        self.addDockWidget(Qt.RightDockWidgetArea, hist_dock)

        # dock 3: controls
        ctrl_dock = QDockWidget("Control", self)
        self.control_panel = ControlPanel(session, vm.config.run_interval_ms)
        ctrl_dock.setWidget(self.control_panel)
        self.addDockWidget(Qt.BottomDockWidgetArea, ctrl_dock)

        self.control_panel.stepped.connect(self.refresh)

    def refresh(self):
        self.register_panel.update_view()
        self.history_panel.refresh()
        self.memory_panel.refresh()


def run(session: Debugger) -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    mw = MainWindow(session)
    mw.resize(1280, 960)
    mw.show()
    return app.exec()
