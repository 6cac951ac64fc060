"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.exceptions import ExpressionSyntaxError
from core.operators import Operators

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate_postfix(token_sequence):
        """
        评估后缀Token序列
        Args:
            token_sequence: ShuntingYard输出的后缀Token序列
        Returns:
            numpy.float64 结果
        Raises:
            ExpressionSyntaxError: 操作数不足，或结束时栈中不是恰好一个值
            DivisionByZeroError: 除数为0
        """
        stack = []

        for token in token_sequence:
            if token.is_number:
                stack.append(token.value)
                continue

            if len(stack) < 2:
                logger.debug(f"Insufficient operands for {token.name}")
                raise ExpressionSyntaxError("Syntax Error.")

            # 先弹出的是右操作数
            operand2 = stack.pop()
            operand1 = stack.pop()
            stack.append(Operators.apply(token.name, operand1, operand2))

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise ExpressionSyntaxError("Syntax Error.")

        return stack[0]
