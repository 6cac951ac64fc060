"""core/shunting_yard.py - 中缀转后缀（调度场算法）"""
import logging

logger = logging.getLogger(__name__)


class ShuntingYard:
    """把中缀Token序列转换为后缀（RPN）序列"""

    @staticmethod
    def to_postfix(tokens):
        """
        Args:
            tokens: Tokenizer输出的中缀Token序列
        Returns:
            后缀顺序的Token列表

        不做任何数值或语法检查，连续操作符、首尾操作符、空输入都原样传递，
        由后缀求值阶段报错。
        """
        output = []
        operator_stack = []  # 自底向上优先级单调不增

        for token in tokens:
            if token.is_number:
                output.append(token)
                continue

            # >= 使同级操作符左结合
            while operator_stack and operator_stack[-1].precedence >= token.precedence:
                output.append(operator_stack.pop())
            operator_stack.append(token)

        while operator_stack:
            output.append(operator_stack.pop())

        logger.debug(f"Postfix: {' '.join(str(t) for t in output)}")
        return output
