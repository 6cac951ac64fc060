"""core/calculator.py - 唯一的对外入口"""
import logging

import numpy as np

from core.exceptions import EvaluationError, InvalidExpressionError, InvalidResultError
from core.rpn_evaluator import RPNEvaluator
from core.shunting_yard import ShuntingYard
from core.token_system import Tokenizer

logger = logging.getLogger(__name__)


class Calculator:
    """无状态的中缀表达式计算器，可在多个线程中并发调用"""

    @staticmethod
    def evaluate(expression):
        """
        Args:
            expression: 中缀表达式字符串，例如 "2+3×4"
        Returns:
            float 结果
        Raises:
            InvalidExpressionError: 任何阶段失败（语法、除零、NaN/Infinity）
        """
        try:
            tokens = Tokenizer.tokenize(expression)
            postfix = ShuntingYard.to_postfix(tokens)
            result = RPNEvaluator.evaluate_postfix(postfix)

            if np.isnan(result) or np.isinf(result):
                raise InvalidResultError("Invalid operation result.")

            return float(result)
        except EvaluationError as e:
            logger.debug(f"Failed to evaluate {expression!r}: {type(e).__name__}: {e}")
            raise InvalidExpressionError() from e


evaluate = Calculator.evaluate
