"""
Тесты алгебраических свойств BigInt

Проверяемые инварианты (на фиксированном детерминированном корпусе):
1. Нормализация идемпотентна
2. Аддитивная единица и обратный элемент
3. Коммутативность + и *
4. a - b == a + (-b)
5. Мультипликативная единица и поглощение нулём
6. Деление усекает к нулю
7. Полный порядок согласован со знаком разности
8. Сквозные сценарии
"""

import itertools
import operator

import pytest

from src.core.contracts import validate_big_int_canonical
from src.core.domain import BigInt, divide, parse_literal
from src.core.math.errors import DivisionByZeroError

CORPUS = [
    "0", "1", "-1", "2", "-2", "7", "-7", "9", "10", "-10", "99", "-100",
    "999", "1000", "-123456789", "98765432109876543210",
    "-12373213123112312312312312353536546", "12398123781182371287381723722",
]

PAIRS = list(itertools.product(CORPUS, repeat=2))

OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def big(text: str) -> BigInt:
    return parse_literal(text).unwrap()


class TestNormalizationProperties:
    """Идемпотентность канонической формы."""

    @pytest.mark.parametrize("text", CORPUS)
    def test_reparse_is_identity(self, text: str) -> None:
        value = big(text)
        assert big(str(value)) == value

    @pytest.mark.parametrize("text", CORPUS)
    def test_output_is_canonical(self, text: str) -> None:
        validate_big_int_canonical(str(big(text)))

    @pytest.mark.parametrize("padding", ["0", "00", "0000000"])
    def test_leading_zeros_ignored(self, padding: str) -> None:
        assert big(padding + "7") == big("7")
        assert big("-" + padding + "7") == big("-7")
        assert big("-" + padding) == big("0")


class TestAdditiveProperties:
    """Свойства сложения и вычитания."""

    @pytest.mark.parametrize("text", CORPUS)
    def test_additive_identity(self, text: str) -> None:
        assert big(text) + BigInt() == big(text)

    @pytest.mark.parametrize("text", CORPUS)
    def test_additive_inverse(self, text: str) -> None:
        result = big(text) + (-big(text))
        assert result == BigInt()
        assert result.sign is False

    @pytest.mark.parametrize("lhs, rhs", PAIRS)
    def test_addition_commutative(self, lhs: str, rhs: str) -> None:
        assert big(lhs) + big(rhs) == big(rhs) + big(lhs)

    @pytest.mark.parametrize("lhs, rhs", PAIRS)
    def test_subtraction_via_negation(self, lhs: str, rhs: str) -> None:
        assert big(lhs) - big(rhs) == big(lhs) + (-big(rhs))


class TestMultiplicativeProperties:
    """Свойства умножения и деления."""

    @pytest.mark.parametrize("text", CORPUS)
    def test_multiplicative_identity(self, text: str) -> None:
        assert big(text) * big("1") == big(text)

    @pytest.mark.parametrize("text", CORPUS)
    def test_absorption(self, text: str) -> None:
        result = big(text) * BigInt()
        assert result == BigInt()
        assert result.sign is False

    @pytest.mark.parametrize("lhs, rhs", PAIRS)
    def test_multiplication_commutative(self, lhs: str, rhs: str) -> None:
        assert big(lhs) * big(rhs) == big(rhs) * big(lhs)

    @pytest.mark.parametrize("lhs, rhs", [(a, b) for a, b in PAIRS if b != "0"])
    def test_division_truncates_toward_zero(self, lhs: str, rhs: str) -> None:
        quotient = abs(int(lhs)) // abs(int(rhs))
        if (int(lhs) < 0) != (int(rhs) < 0):
            quotient = -quotient
        assert str(big(lhs) / big(rhs)) == str(quotient)

    @pytest.mark.parametrize("text", CORPUS)
    def test_division_by_zero_always_fails(self, text: str) -> None:
        with pytest.raises(DivisionByZeroError):
            big(text) / BigInt()
        assert divide(big(text), BigInt()).quotient is None


class TestOrderingProperties:
    """Полный порядок."""

    @pytest.mark.parametrize("lhs, rhs", PAIRS)
    def test_trichotomy(self, lhs: str, rhs: str) -> None:
        a, b = big(lhs), big(rhs)
        assert [a < b, a == b, a > b].count(True) == 1

    @pytest.mark.parametrize("lhs, rhs", PAIRS)
    def test_consistent_with_subtraction_sign(self, lhs: str, rhs: str) -> None:
        a, b = big(lhs), big(rhs)
        difference = a - b
        assert (a < b) == difference.is_negative
        assert (a == b) == difference.is_zero

    @pytest.mark.parametrize("lhs, rhs", PAIRS)
    def test_matches_int_ordering(self, lhs: str, rhs: str) -> None:
        assert (big(lhs) <= big(rhs)) == (int(lhs) <= int(rhs))
        assert (big(lhs) >= big(rhs)) == (int(lhs) >= int(rhs))


class TestEndToEndScenarios:
    """Сквозные сценарии на литералах."""

    @pytest.mark.parametrize(
        "lhs, op, rhs, expected",
        [
            ("999", "+", "1", "1000"),
            ("1000", "-", "1", "999"),
            ("123", "*", "456", "56088"),
            ("-100", "/", "7", "-14"),
            ("0", "-", "0", "0"),
            ("-7", "/", "2", "-3"),
        ],
    )
    def test_vectors(self, lhs: str, op: str, rhs: str, expected: str) -> None:
        a, b = BigInt.from_text(lhs), BigInt.from_text(rhs)
        assert str(OPERATORS[op](a, b)) == expected

    def test_negative_zero_literal(self) -> None:
        assert str(BigInt.from_text("-0")) == "0"

    def test_five_divided_by_zero(self) -> None:
        with pytest.raises(DivisionByZeroError):
            BigInt.from_text("5") / BigInt.from_text("0")

    def test_large_operands_match_int(self) -> None:
        a_text = "-12373213123112312312312312353536546"
        b_text = "12398123781182371287381723722"
        a, b = big(a_text), big(b_text)
        a_int, b_int = int(a_text), int(b_text)

        assert str(a + b) == str(a_int + b_int)
        assert str(a - b) == str(a_int - b_int)
        assert str(a * b) == str(a_int * b_int)
        assert str(a / b) == str(-(abs(a_int) // b_int))
