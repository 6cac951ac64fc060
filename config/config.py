"""配置文件"""

# 操作符参数
OPERATOR_CONFIG = {
    "symbols": "+-×÷",
    # 数值越大结合越紧；同级左结合
    "precedence": {
        "+": 1,
        "-": 1,
        "×": 2,
        "÷": 2,
    },
}

# 数字字面量
NUMBER_CONFIG = {
    "digits": "0123456789",  # 只接受ASCII数字
    "decimal_point": ".",
}

# 结果显示
DISPLAY_CONFIG = {
    "error_text": "Error",
    "max_integer_digits": 15,  # 超过这个位数的整数值用repr显示
}

# 命令行
CLI_CONFIG = {
    "prompt": "> ",
    "exit_commands": ("quit", "exit"),
}

LOGGING_CONFIG = {
    "level": "WARNING",
    "format": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    symbols = OPERATOR_CONFIG["symbols"]
    precedence = OPERATOR_CONFIG["precedence"]
    assert set(symbols) == set(precedence), "每个操作符都必须有优先级"
    assert all(p > 0 for p in precedence.values()), "优先级必须为正数"
    assert len(NUMBER_CONFIG["decimal_point"]) == 1, "小数点必须是单个字符"
    number_chars = set(NUMBER_CONFIG["digits"]) | set(NUMBER_CONFIG["decimal_point"])
    assert not number_chars & set(symbols), "数字字符不能与操作符重叠"
    assert DISPLAY_CONFIG["max_integer_digits"] > 0, "max_integer_digits 必须为正数"
    return True
