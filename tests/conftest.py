import os

import pytest

# 화면 없이 Qt 위젯 테스트
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


@pytest.fixture
def engine():
    from calculator import Calculator
    return Calculator()
