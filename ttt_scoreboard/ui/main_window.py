from ..game_logic import GameLogic, InProgress, Player, Won, status_text, subtitle_text
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, store=None):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.game_logic = GameLogic(store)
        self.board_widget = BoardWidget(self.game_logic, parent=self)

        self._setup_ui()
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic Tac Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
            QLabel#badge { color: #aaa; letter-spacing: 2px; }
            QLabel#scoreValue { font-weight: bold; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_header()              # title, status, score
        self.main_layout.addWidget(self.header_widget)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # new round + reset score
        self.main_layout.addWidget(self.controls_bottom_widget)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        round_action = QAction("New Round", self)
        round_action.triggered.connect(self.new_round)
        reset_action = QAction("Reset Score", self)
        reset_action.triggered.connect(self.reset_score)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        for act in (round_action, reset_action): game_menu.addAction(act)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_header(self):
        # badge, title, subtitle, status line, scoreboard
        self.header_widget = QWidget()
        vl = QVBoxLayout(self.header_widget)
        badge = QLabel("TIC TAC TOE"); badge.setObjectName("badge")
        title = QLabel("Play on the same device")
        f = QFont(); f.setPointSize(18); f.setBold(True); title.setFont(f)
        self.subtitle_label = QLabel("")
        self.status_label = QLabel("")
        f = QFont(); f.setPointSize(12); f.setBold(True); self.status_label.setFont(f)
        self.status_label.setAccessibleName("Game status")
        for w in (badge, title, self.subtitle_label, self.status_label):
            w.setAlignment(Qt.AlignCenter)
            vl.addWidget(w)

        score_row = QHBoxLayout()
        self.score_labels = {}
        for player in Player:
            card = QHBoxLayout()
            card.addWidget(QLabel(f"Player {player.value}"))
            value = QLabel("0"); value.setObjectName("scoreValue")
            value.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
            card.addWidget(value)
            self.score_labels[player] = value
            score_row.addLayout(card)
        vl.addLayout(score_row)

    def _create_bottom_controls(self):
        # new round + reset score buttons
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.new_round_button = QPushButton("New round"); self.new_round_button.clicked.connect(self.new_round)
        self.reset_score_button = QPushButton("Reset score"); self.reset_score_button.clicked.connect(self.reset_score)
        self.new_round_button.setSizePolicy(QSizePolicy.Preferred, QSizePolicy.Fixed)
        for w in (None, self.new_round_button, self.reset_score_button, None):
            if w: hl.addWidget(w)
            else: hl.addStretch(1)

    def _refresh(self):
        # re-read engine state into widgets
        status = self.game_logic.status
        style = "color: #eee;"
        if isinstance(status, Won):  style = "color: lime;"
        elif isinstance(status, InProgress):
            style = "color: #8acaff;" if status.next_player == Player.X else "color: #ff8a8a;"
        self.status_label.setStyleSheet(style)
        self.status_label.setText(status_text(status))
        self.subtitle_label.setText(subtitle_text(status))
        for player, label in self.score_labels.items():
            label.setText(str(self.game_logic.score[player]))
        self.board_widget.set_accept_clicks(isinstance(status, InProgress))
        self.board_widget.refresh()

    @Slot(int)
    def _on_cell_clicked(self, index):
        res = self.game_logic.apply_move(index)
        if res != "invalid":
            self._refresh()

    @Slot()
    def new_round(self):
        # whoever was up next after the last move opens
        self.game_logic.reset_round(self.game_logic.next_player)
        self._refresh()

    @Slot()
    def reset_score(self):
        self.game_logic.reset_all()
        self._refresh()
