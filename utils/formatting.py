"""utils/formatting.py"""
import numpy as np

from config.config import DISPLAY_CONFIG


def format_result(value, max_integer_digits=None):
    """
    把计算结果转换为显示字符串
    整数值去掉小数部分（4.0 -> "4"，-0.0 -> "0"），其余用最短往返表示
    """
    if max_integer_digits is None:
        max_integer_digits = DISPLAY_CONFIG["max_integer_digits"]

    value = float(value)
    if np.isfinite(value) and value.is_integer() and abs(value) < 10 ** max_integer_digits:
        return str(int(value))
    return repr(value)
