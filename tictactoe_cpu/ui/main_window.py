from ..session import GameSession
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot


class TicTacToeWindow(QMainWindow):
    """
    main window: board, status line, play again
    """
    def __init__(self, session=None):
        """
        init session, ui widgets, signals
        """
        super().__init__()
        self.session = session or GameSession(parent=self)
        self.board_widget = BoardWidget(parent=self)

        self._setup_ui()
        self.session.view_changed.connect(self._on_view_changed)
        self.board_widget.cell_activated.connect(self.session.on_cell_activated)
        self.session.start()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe vs Computer")
        self.setStyleSheet("QMainWindow { background-color: #222; }")
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self._create_status_controls()     # status + play again
        self.main_layout.addWidget(self.controls_top_widget)
        self.main_layout.addWidget(self.board_widget, 1)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.session.reset)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_status_controls(self):
        # status label + play again button
        self.controls_top_widget = QWidget()
        hl = QHBoxLayout(self.controls_top_widget)
        self.controls_top_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.play_again_button = QPushButton("Play Again")
        self.play_again_button.clicked.connect(self.session.on_reset_requested)
        hl.addWidget(self.message_label)
        hl.addStretch(1)
        hl.addWidget(self.play_again_button)

    def _update_message(self, text, is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:  style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    @Slot(object)
    def _on_view_changed(self, view):
        # redraw everything from the render model
        self.board_widget.set_view(view)
        self._update_message(view.status, is_success=view.can_reset,
                             is_turn=view.accept_clicks)
        self.play_again_button.setVisible(view.can_reset)
        self.play_again_button.setEnabled(view.can_reset)

    def closeEvent(self, event):
        # no stray opponent move after close
        self.session.timer.cancel()
        event.accept()
