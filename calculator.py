# calculator.py
# Python 3.x
# 계산 엔진: UI 없이 토큰 단위로 동작하는 사칙연산 상태 기계, PEP 8 준수, 문자열은 기본 ' ' 사용

import logging
import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN, localcontext
from typing import NamedTuple, Optional

logger = logging.getLogger('calculator')

ERROR_TEXT = 'ERROR'
FRACTION_DIGITS = 11  # 소수부 최대 자릿수
_QUANTUM = Decimal(1).scaleb(-FRACTION_DIGITS)

# 오류 종류 태그
DIVIDE_BY_ZERO = 'DIVIDE_BY_ZERO'
INVALID_NUMBER = 'INVALID_NUMBER'
OVERFLOW = 'OVERFLOW'

# 버튼 토큰
DIGITS = tuple('0123456789')
ADD, SUBTRACT, MULTIPLY, DIVIDE = '+', '−', '×', '÷'
OPERATORS = (ADD, SUBTRACT, MULTIPLY, DIVIDE)
EQUALS = '='
CLEAR = 'C'
DELETE = 'DEL'
SIGN = '±'
PERCENT = '%'
DOT = '.'
TOKENS = DIGITS + OPERATORS + (EQUALS, CLEAR, DELETE, SIGN, PERCENT, DOT)

# ASCII 표기 연산자도 허용
_OPERATOR_ALIASES = {'-': SUBTRACT, '*': MULTIPLY, '/': DIVIDE}


class Outcome(NamedTuple):
    """apply() 결과: 표시 문자열과 오류 태그(정상이면 None)"""

    display: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_number(text: str) -> float:
    """표시 문자열을 float로 변환한다. 유한한 수가 아니면 ValueError."""
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f'not a finite number: {text!r}')
    return value


def format_number(value: float) -> str:
    """소수부 최대 11자리, 뒤쪽 0과 불필요한 소수점을 제거한 고정소수점 문자열."""
    if not math.isfinite(value):
        raise OverflowError(f'result out of range: {value!r}')
    # double의 정확한 2진 값 기준으로 반올림
    d = Decimal(value)
    if d.as_tuple().exponent < -FRACTION_DIGITS:
        with localcontext() as ctx:
            ctx.prec = 64
            d = d.quantize(_QUANTUM, rounding=ROUND_HALF_EVEN)
    s = format(d, 'f')
    if '.' in s:
        s = s.rstrip('0').rstrip('.')
    return s


class Calculator:
    """연산 엔진: 표시 버퍼, 피연산자, 대기 연산자, 새 숫자 입력 여부, 오류 상태"""

    def __init__(self) -> None:
        self.reset()

    # 사칙연산
    def add(self, a: float, b: float) -> float:
        return a + b

    def subtract(self, a: float, b: float) -> float:
        return a - b

    def multiply(self, a: float, b: float) -> float:
        return a * b

    def divide(self, a: float, b: float) -> float:
        if b == 0:
            raise ZeroDivisionError('divide by zero')
        return a / b

    def reset(self) -> None:
        self._cur = '0'  # 표시 버퍼
        self._first = 0.0
        self._second = 0.0
        self._op = None  # 대기 연산자
        self._start_new = True  # True면 다음 숫자가 버퍼를 대체
        self._error = None  # 오류 태그

    @property
    def is_error(self) -> bool:
        return self._error is not None

    def display_text(self) -> str:
        return self._cur

    def apply(self, token: str) -> Outcome:
        token = _OPERATOR_ALIASES.get(token, token)
        if token not in TOKENS:
            raise ValueError(f'unknown token: {token!r}')

        if self._error is not None and token != CLEAR:
            return self._outcome()

        logger.debug('token %s (display=%s)', token, self._cur)
        try:
            self._dispatch(token)
        except ZeroDivisionError as e:
            self._set_error(DIVIDE_BY_ZERO, e)
        except OverflowError as e:
            self._set_error(OVERFLOW, e)
        except (ValueError, InvalidOperation) as e:
            self._set_error(INVALID_NUMBER, e)
        return self._outcome()

    def _dispatch(self, token: str) -> None:
        if token in DIGITS:
            self._input_digit(token)
        elif token in OPERATORS:
            self._set_operator(token)
        elif token == EQUALS:
            self._equal()
        elif token == CLEAR:
            self.reset()
        elif token == DELETE:
            self._delete()
        elif token == SIGN:
            self._negative_positive()
        elif token == PERCENT:
            self._percent()
        elif token == DOT:
            self._input_dot()

    def _input_digit(self, d: str) -> None:
        if self._start_new:
            self._cur = d
            self._start_new = False
        else:
            self._cur += d

    def _set_operator(self, op: str) -> None:
        # 연쇄 계산 없음: 현재 버퍼로 첫 피연산자를 다시 잡고 연산자만 교체
        self._first = parse_number(self._cur)
        self._op = op
        self._start_new = True

    def _equal(self) -> None:
        second = parse_number(self._cur)
        text = format_number(self._apply_op(self._first, second, self._op))
        self._second = second
        self._cur = text
        self._start_new = True

    def _delete(self) -> None:
        if len(self._cur) > 1:
            self._cur = self._cur[:-1]
        else:
            self._cur = '0'

    def _negative_positive(self) -> None:
        self._cur = format_number(-parse_number(self._cur))

    def _percent(self) -> None:
        self._cur = format_number(parse_number(self._cur) / 100)

    def _input_dot(self) -> None:
        if DOT not in self._cur:
            self._cur += DOT

    # 내부 유틸
    def _apply_op(self, a: float, b: float, op: Optional[str]) -> float:
        if op == ADD:
            return self.add(a, b)
        if op == SUBTRACT:
            return self.subtract(a, b)
        if op == MULTIPLY:
            return self.multiply(a, b)
        if op == DIVIDE:
            return self.divide(a, b)
        # 대기 연산자가 없으면 0
        return 0.0

    def _set_error(self, kind: str, exc: Exception) -> None:
        logger.warning('error state (%s): %s', kind, exc)
        self._error = kind
        self._cur = ERROR_TEXT

    def _outcome(self) -> Outcome:
        return Outcome(self._cur, self._error)
