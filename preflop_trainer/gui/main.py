"""Entry point for the trainer GUI.

Usage:
    python -m preflop_trainer.gui.main
"""

from __future__ import annotations

import logging
import sys

from PySide6.QtWidgets import QApplication

from preflop_trainer.core.config import load_config
from preflop_trainer.gui.main_window import MainWindow
from preflop_trainer.gui.presenter import TrainerPresenter
from preflop_trainer.gui.styles import APP_STYLESHEET
from preflop_trainer.training.session import TrainerSession


def main() -> None:
    config = load_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Preflop Trainer")
    app.setStyleSheet(APP_STYLESHEET)

    window = MainWindow()
    presenter = TrainerPresenter(view=window, session=TrainerSession(config))

    # Wire UI signals to presenter
    window.action_clicked.connect(presenter.on_action_clicked)
    window.sizing_clicked.connect(presenter.on_sizing_clicked)
    window.next_requested.connect(presenter.on_next_round)
    window.restart_requested.connect(presenter.on_restart)
    window.intro_dismissed.connect(presenter.on_intro_dismissed)

    window.show()
    presenter.start()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
