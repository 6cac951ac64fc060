"""调度场转换测试"""
from core.shunting_yard import ShuntingYard
from core.token_system import Tokenizer


def postfix(expression):
    return [str(t) for t in ShuntingYard.to_postfix(Tokenizer.tokenize(expression))]


class TestShuntingYard:

    def test_single_number(self):
        assert postfix("7") == ['7.0']

    def test_higher_precedence_binds_tighter(self):
        assert postfix("2+3×4") == ['2.0', '3.0', '4.0', '×', '+']
        assert postfix("2×3+4") == ['2.0', '3.0', '×', '4.0', '+']

    def test_same_precedence_is_left_associative(self):
        assert postfix("8-3-2") == ['8.0', '3.0', '-', '2.0', '-']
        assert postfix("12÷4×3") == ['12.0', '4.0', '÷', '3.0', '×']

    def test_mixed_expression(self):
        assert postfix("1+2×3-4÷2") == ['1.0', '2.0', '3.0', '×', '+', '4.0', '2.0', '÷', '-']

    def test_empty_input(self):
        assert ShuntingYard.to_postfix([]) == []

    def test_malformed_input_passes_through(self):
        assert postfix("+") == ['+']
        assert postfix("5+") == ['5.0', '+']
        assert postfix("5++3") == ['5.0', '+', '3.0', '+']

    def test_does_not_mutate_input(self):
        tokens = Tokenizer.tokenize("1+2×3")
        before = list(tokens)
        ShuntingYard.to_postfix(tokens)
        assert tokens == before
