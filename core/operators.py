"""core/operators.py"""
import numpy as np
import logging

from core.exceptions import DivisionByZeroError, ExpressionSyntaxError

logger = logging.getLogger(__name__)


class Operators:
    """所有操作符的静态方法集合"""

    # 二元操作符========================================
    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(all='ignore'):
            return np.float64(operand1) + np.float64(operand2)

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(all='ignore'):
            return np.float64(operand1) - np.float64(operand2)

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(all='ignore'):
            return np.float64(operand1) * np.float64(operand2)

    @staticmethod
    def div(operand1, operand2):
        """除法操作符：右操作数恰好为0时报错，不做 EPSILON 保护"""
        if operand2 == 0:
            raise DivisionByZeroError("Cannot divide by zero.")
        with np.errstate(all='ignore'):
            return np.float64(operand1) / np.float64(operand2)

    # 符号 -> 方法名
    SYMBOLS = {
        '+': 'add',
        '-': 'sub',
        '×': 'mul',
        '÷': 'div',
    }

    @staticmethod
    def apply(symbol, operand1, operand2):
        """按符号分派；operand1 是左操作数，operand2 是右操作数"""
        method_name = Operators.SYMBOLS.get(symbol)
        if method_name is None:
            logger.debug(f"Unknown binary operator: {symbol!r}")
            raise ExpressionSyntaxError(f"Invalid operator: {symbol!r}")
        return getattr(Operators, method_name)(operand1, operand2)
