"""Main window implementing the TrainerView protocol."""

from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from preflop_trainer.gui.styles import SUIT_COLORS, VERDICT_COLORS
from preflop_trainer.interface.intro_flag import INTRO_TEXT
from preflop_trainer.strategy.bet_sizing import SizingOption
from preflop_trainer.training.dealer import RoundState
from preflop_trainer.training.scoring import ScoreState, Verdict
from preflop_trainer.utils.card import Card


class MainWindow(QMainWindow):
    """Top-level window.

    Layout:
      - Hand panel: cards, seat, scenario, pot and amount to call
      - Choice row: action buttons, or raise-size buttons after a raise
      - Feedback panel and scoreboard
    """

    action_clicked = Signal(str)
    sizing_clicked = Signal(float)
    next_requested = Signal()
    restart_requested = Signal()
    intro_dismissed = Signal()

    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("Preflop Trainer")
        self.setMinimumSize(560, 460)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(8)

        hand_group = QGroupBox("Your Hand")
        hand_layout = QVBoxLayout(hand_group)
        self._cards_label = QLabel()
        self._cards_label.setObjectName("cards")
        self._cards_label.setAlignment(Qt.AlignCenter)
        self._cards_label.setTextFormat(Qt.RichText)
        self._hand_name_label = QLabel()
        self._hand_name_label.setAlignment(Qt.AlignCenter)
        self._spot_label = QLabel()
        self._spot_label.setAlignment(Qt.AlignCenter)
        hand_layout.addWidget(self._cards_label)
        hand_layout.addWidget(self._hand_name_label)
        hand_layout.addWidget(self._spot_label)
        layout.addWidget(hand_group)

        self._choice_row = QHBoxLayout()
        layout.addLayout(self._choice_row)

        self._verdict_label = QLabel()
        self._verdict_label.setWordWrap(True)
        self._verdict_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self._verdict_label)

        self._feedback_label = QLabel()
        self._feedback_label.setWordWrap(True)
        layout.addWidget(self._feedback_label, stretch=1)

        bottom = QHBoxLayout()
        self._score_label = QLabel()
        bottom.addWidget(self._score_label, stretch=1)
        restart = QPushButton("Restart")
        restart.clicked.connect(lambda: self.restart_requested.emit())
        bottom.addWidget(restart)
        self._next_button = QPushButton("Next Hand")
        self._next_button.clicked.connect(lambda: self.next_requested.emit())
        bottom.addWidget(self._next_button)
        layout.addLayout(bottom)

    def _clear_choices(self) -> None:
        while self._choice_row.count():
            item = self._choice_row.takeAt(0)
            if item.widget():
                item.widget().deleteLater()

    @staticmethod
    def _card_html(card: Card) -> str:
        color = SUIT_COLORS[card.suit.value]
        return f'<span style="color:{color}">{card}</span>'

    # --- TrainerView protocol implementation ---

    def show_intro(self) -> None:
        QMessageBox.information(self, "How it works", INTRO_TEXT)
        self.intro_dismissed.emit()

    def show_round(
        self,
        round_state: RoundState,
        hand_name: str,
        action_labels: list[tuple[str, str]],
    ) -> None:
        hand = round_state.hand
        self._cards_label.setText(
            f"{self._card_html(hand.card_a)}&nbsp;{self._card_html(hand.card_b)}"
        )
        self._hand_name_label.setText(hand_name)
        to_call = (
            "free" if round_state.is_free_check
            else f"{round_state.effective_to_call:g}"
        )
        self._spot_label.setText(
            f"{round_state.position.label} · {round_state.scenario.label} · "
            f"Pot {round_state.scenario.pot:g} · To call {to_call}"
        )
        self._verdict_label.clear()
        self._verdict_label.setStyleSheet("")
        self._feedback_label.clear()
        self._next_button.setEnabled(False)

        self._clear_choices()
        for value, text in action_labels:
            button = QPushButton(text)
            button.clicked.connect(lambda checked=False, v=value: self.action_clicked.emit(v))
            self._choice_row.addWidget(button)

    def show_sizing_options(self, options: list[SizingOption]) -> None:
        self._clear_choices()
        for option in options:
            button = QPushButton(f"{option.label}\n{option.amount:g}")
            button.clicked.connect(
                lambda checked=False, a=option.amount: self.sizing_clicked.emit(a)
            )
            self._choice_row.addWidget(button)

    def show_verdict(self, verdict: Verdict) -> None:
        self._clear_choices()
        bg, fg = VERDICT_COLORS[verdict.tier.value]
        self._verdict_label.setText(verdict.tier.value.title())
        self._verdict_label.setStyleSheet(
            f"background: {bg}; color: {fg}; font-size: 16px; "
            "font-weight: bold; border-radius: 6px; padding: 6px;"
        )
        text = verdict.explanation
        if verdict.sizing_explanation:
            text += "\n\n" + verdict.sizing_explanation
        self._feedback_label.setText(text)
        self._next_button.setEnabled(True)

    def show_score(self, score: ScoreState) -> None:
        self._score_label.setText(score.summary())

    def show_error(self, message: str) -> None:
        self._feedback_label.setText(f"Error: {message}")
