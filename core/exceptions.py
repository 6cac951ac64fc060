"""core/exceptions.py"""


class EvaluationError(Exception):
    """内部求值错误的基类，只在 core 内部流动"""


class ExpressionSyntaxError(EvaluationError):
    """后缀序列不合法：操作数不足、结束时栈中不是恰好一个值、未知操作符"""


class DivisionByZeroError(EvaluationError):
    """除法的右操作数恰好为0"""


class InvalidResultError(EvaluationError):
    """最终结果为 NaN 或无穷大"""


class InvalidExpressionError(Exception):
    """对外唯一的失败类型，具体原因统一折叠为这一种"""

    def __init__(self, message="Invalid Expression"):
        super().__init__(message)
