"""操作符测试"""
import numpy as np
import pytest

from core.exceptions import DivisionByZeroError, ExpressionSyntaxError
from core.operators import Operators


class TestOperators:

    def test_basic_arithmetic(self):
        assert Operators.add(2, 3) == 5
        assert Operators.sub(2, 3) == -1
        assert Operators.mul(2, 3) == 6
        assert Operators.div(3, 2) == 1.5

    def test_apply_dispatches_by_symbol(self):
        assert Operators.apply('+', 1, 2) == 3
        assert Operators.apply('-', 1, 2) == -1
        assert Operators.apply('×', 4, 2) == 8
        assert Operators.apply('÷', 4, 2) == 2

    def test_divide_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            Operators.div(1, 0)
        with pytest.raises(DivisionByZeroError):
            Operators.div(0, -0.0)

    def test_unknown_symbol(self):
        with pytest.raises(ExpressionSyntaxError):
            Operators.apply('^', 2, 3)

    def test_overflow_yields_infinity(self):
        assert np.isinf(Operators.mul(1e308, 10))
