import logging

from PySide6.QtWidgets import QWidget, QPushButton, QHBoxLayout, QLabel
from PySide6.QtCore import QTimer, Signal

from lc3.errors import LC3Error

logger = logging.getLogger(__name__)


class ControlPanel(QWidget):
    """
    Step / Run / Pause / Reset buttons and a status label.
    Run drives Debugger.tick() from a QTimer until the machine stops.
    """
    stepped = Signal()

    def __init__(self, session, interval_ms=50, parent=None):
        super().__init__(parent)
        self.session = session

        self.btn_step  = QPushButton("Step")
        self.btn_run   = QPushButton("Run")
        self.btn_pause = QPushButton("Pause")
        self.btn_reset = QPushButton("Reset")
        self.status    = QLabel("Ready")

        lay = QHBoxLayout(self)
        for b in (self.btn_step, self.btn_run,
                  self.btn_pause, self.btn_reset, self.status):
            lay.addWidget(b)

        # connections
        self.btn_step.clicked.connect(self.step_once)
        self.btn_run.clicked.connect(self.run)
        self.btn_pause.clicked.connect(self.pause)
        self.btn_reset.clicked.connect(self.reset)

        # timer for continuous run
        self.timer = QTimer(self)
        self.timer.timeout.connect(self.step_once)
        self.timer.setInterval(interval_ms)
        self.update_status()

    def update_status(self):
        vm = self.session.vm
        if vm.fault is not None:
            self.status.setText(f"Fault: {vm.fault}")
        elif not vm.running:
            self.status.setText("Halted")
        else:
            self.status.setText(f"PC=x{vm.pc:04X}  next: {self.session.current.text}")

    def step_once(self):
        try:
            self.session.tick()
        except LC3Error as e:
            logger.debug("step stopped: %s", e)
        if not self.session.vm.running:
            self.timer.stop()
        self.update_status()
        self.stepped.emit()

    def run(self):
        if self.session.vm.running:
            self.timer.start()
            self.status.setText("Running")

    def pause(self):
        self.timer.stop()
        self.update_status()

    def reset(self):
        self.timer.stop()
        self.session.reset()
        self.update_status()
        self.stepped.emit()
