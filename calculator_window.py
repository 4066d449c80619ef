# calculator_window.py
# Python 3.x, PyQt5
# PEP 8 준수, 문자열은 기본 ' ' 사용

import sys
import argparse
import logging
from typing import Optional

from PyQt5.QtCore import Qt
from PyQt5.QtGui import QFont
from PyQt5.QtWidgets import (
    QApplication,
    QWidget,
    QGridLayout,
    QVBoxLayout,
    QPushButton,
    QLineEdit,
)

# 동일 디렉터리의 계산 엔진 사용
from calculator import Calculator, CLEAR, OPERATORS, EQUALS, DELETE, SIGN, PERCENT

logger = logging.getLogger('calculator')

BUTTONS = [
    ['C', '±', '%',   '÷'],
    ['7', '8', '9',   '×'],
    ['4', '5', '6',   '−'],
    ['1', '2', '3',   '+'],
    ['0', '.', 'DEL', '='],
]

# 어두운 색상 테마
WINDOW_BG = '#282828'
DISPLAY_BG = '#141414'


def button_color(label: str) -> str:
    if label in OPERATORS:
        return '#ffa000'
    if label == CLEAR:
        return '#dc3232'
    if label == EQUALS:
        return '#32c832'
    if label in (SIGN, PERCENT, DELETE):
        return '#646464'
    return '#464646'


def setup_logger(log_path: Optional[str] = None, level: int = logging.INFO) -> logging.Logger:
    """콘솔(과 선택적으로 UTF-8 파일)로 로그를 남기는 로거를 설정한다."""
    if logger.handlers:
        return logger

    logger.setLevel(level)
    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # 콘솔
    sh = logging.StreamHandler(sys.stdout)
    sh.setLevel(level)
    sh.setFormatter(formatter)
    logger.addHandler(sh)

    # 파일(UTF-8)
    if log_path:
        fh = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        fh.setLevel(level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger


class CalculatorWindow(QWidget):
    """PyQt5 UI: 버튼 → Calculator.apply() → 표시부"""

    def __init__(self, engine: Optional[Calculator] = None) -> None:
        super().__init__()
        self.engine = engine if engine is not None else Calculator()
        self.buttons = {}
        self._build_ui()

    def _build_ui(self) -> None:
        self.setWindowTitle('Advanced Calculator')
        self.setStyleSheet(f'background-color: {WINDOW_BG};')
        root = QVBoxLayout()
        root.setContentsMargins(20, 20, 20, 20)
        root.setSpacing(10)
        self.setLayout(root)

        # 표시부
        self.display = QLineEdit()
        self.display.setReadOnly(True)
        self.display.setAlignment(Qt.AlignRight)
        font = QFont(self.display.font())
        font.setPointSize(28)
        font.setBold(True)
        self.display.setFont(font)
        self.display.setStyleSheet(
            f'background-color: {DISPLAY_BG}; color: white; border: none; padding: 10px;'
        )
        self.display.setText(self.engine.display_text())
        root.addWidget(self.display)

        grid = QGridLayout()
        grid.setSpacing(10)
        root.addLayout(grid)

        for r, row in enumerate(BUTTONS):
            for c, label in enumerate(row):
                btn = QPushButton(label)
                btn.setMinimumHeight(64)
                btn.setCursor(Qt.PointingHandCursor)
                btn.setStyleSheet(
                    f'QPushButton {{ background-color: {button_color(label)}; color: white;'
                    ' font-size: 20pt; font-weight: bold; border: none; }'
                    ' QPushButton:hover { background-color: #303030; }'
                    ' QPushButton:disabled { color: #808080; }'
                )
                # clicked는 checked(bool) 인자를 내보내므로 첫 인자를 흡수하도록 작성
                btn.clicked.connect(lambda checked=False, ch=label: self.on_button(ch))
                grid.addWidget(btn, r, c)
                self.buttons[label] = btn

        self.resize(450, 600)

    def on_button(self, ch: str) -> None:
        outcome = self.engine.apply(ch)
        self.display.setText(outcome.display)
        # 오류 상태에서는 C만 입력 가능
        for label, btn in self.buttons.items():
            btn.setEnabled(outcome.ok or label == CLEAR)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='사칙연산 데스크톱 계산기')
    parser.add_argument('--log', default=None,
                        help='로그 파일 경로(기본값: 콘솔만 사용)')
    parser.add_argument('--verbose', action='store_true',
                        help='DEBUG 수준으로 토큰 처리 로그를 출력')
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    setup_logger(args.log, logging.DEBUG if args.verbose else logging.INFO)
    app = QApplication(sys.argv[:1])
    w = CalculatorWindow()
    w.show()
    logger.info('calculator started')
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
