"""核心模块 - Token系统、调度场转换、RPN评估器和操作符"""
from .token_system import TokenType, Token, TOKEN_DEFINITIONS, Tokenizer
from .shunting_yard import ShuntingYard
from .rpn_evaluator import RPNEvaluator
from .operators import Operators
from .exceptions import (
    EvaluationError, ExpressionSyntaxError, DivisionByZeroError,
    InvalidResultError, InvalidExpressionError
)
from .calculator import Calculator, evaluate

__all__ = [
    'TokenType', 'Token', 'TOKEN_DEFINITIONS', 'Tokenizer',
    'ShuntingYard', 'RPNEvaluator', 'Operators',
    'EvaluationError', 'ExpressionSyntaxError', 'DivisionByZeroError',
    'InvalidResultError', 'InvalidExpressionError',
    'Calculator', 'evaluate'
]
