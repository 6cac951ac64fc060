"""core/token_system.py"""
from enum import Enum
import logging

import numpy as np

from config.config import OPERATOR_CONFIG, NUMBER_CONFIG

logger = logging.getLogger(__name__)


class TokenType(Enum):
    NUMBER = "number"  # 数字字面量
    OPERATOR = "operator"  # 操作符


class Token:
    """不可变的Token：数字或操作符，没有值以外的身份"""

    __slots__ = ('type', 'name', 'value', 'precedence')

    def __init__(self, token_type, name, value=None, precedence=None):
        object.__setattr__(self, 'type', token_type)
        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'value', value)
        object.__setattr__(self, 'precedence', precedence)

    def __setattr__(self, key, value):
        raise AttributeError("Token is immutable")

    def __delattr__(self, key):
        raise AttributeError("Token is immutable")

    @classmethod
    def number(cls, value):
        return cls(TokenType.NUMBER, 'number', value=np.float64(value))

    @property
    def is_number(self):
        return self.type == TokenType.NUMBER

    @property
    def is_operator(self):
        return self.type == TokenType.OPERATOR

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.name, self.value) == (other.type, other.name, other.value)

    def __hash__(self):
        return hash((self.type, self.name, self.value))

    def __repr__(self):
        if self.is_number:
            return f"Token({self.type.name}, {float(self.value)!r})"
        return f"Token({self.type.name}, {self.name!r})"

    def __str__(self):
        return repr(float(self.value)) if self.is_number else self.name


# 操作符Token定义，按符号索引
TOKEN_DEFINITIONS = {
    symbol: Token(TokenType.OPERATOR, symbol, precedence=OPERATOR_CONFIG["precedence"][symbol])
    for symbol in OPERATOR_CONFIG["symbols"]
}


def is_operator_symbol(char):
    return char in TOKEN_DEFINITIONS


class Tokenizer:
    """把中缀表达式字符串切分成Token序列"""

    @staticmethod
    def _flush(buffer, tokens):
        """把数字缓冲区作为Number Token输出；无法解析的字面量（如 '.'、'1.2.3'）直接丢弃"""
        if not buffer:
            return
        try:
            tokens.append(Token.number(float(buffer)))
        except ValueError:
            logger.debug(f"Dropping malformed number literal: {buffer!r}")

    @staticmethod
    def tokenize(expression):
        """
        从左到右逐字符扫描
        Args:
            expression: 中缀表达式，例如 "5×2+10"
        Returns:
            Token列表；其他字符（空格、字母、括号等）被静默忽略，不会报错
        """
        if not isinstance(expression, str):
            raise TypeError(f"expression must be str, not {type(expression).__name__}")

        digits = NUMBER_CONFIG["digits"]
        decimal_point = NUMBER_CONFIG["decimal_point"]

        tokens = []
        buffer = ""
        for char in expression:
            if char in digits or char == decimal_point:
                buffer += char
            elif is_operator_symbol(char):
                Tokenizer._flush(buffer, tokens)
                buffer = ""
                tokens.append(TOKEN_DEFINITIONS[char])
            # 其余字符既不缓冲也不输出

        Tokenizer._flush(buffer, tokens)

        logger.debug(f"Tokenized {expression!r} into {len(tokens)} tokens")
        return tokens
