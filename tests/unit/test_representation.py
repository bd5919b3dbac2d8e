"""
Тесты для Representation & Normalization

Проверяет:
1. Нормализацию (ведущие нули, отрицательный ноль)
2. Идемпотентность нормализации
3. Проверку литералов и причины отклонения
4. Каноническую текстовую запись
"""

import pytest

from src.core.math.representation import (
    ZERO,
    LiteralDiagnostic,
    LiteralError,
    SignedDigits,
    check_literal,
    is_zero,
    magnitude,
    negate,
    normalize,
    parse_digits,
    render,
)

# =============================================================================
# ТЕСТЫ НОРМАЛИЗАЦИИ
# =============================================================================


class TestNormalize:
    """Тесты для normalize"""

    def test_strips_leading_zeros(self) -> None:
        """Ведущие нули удаляются"""
        assert normalize(False, "007") == SignedDigits(False, "7")
        assert normalize(True, "000120") == SignedDigits(True, "120")

    def test_all_zeros_become_single_zero(self) -> None:
        """Строка из нулей → "0" """
        assert normalize(False, "0000") == ZERO

    def test_negative_zero_forced_non_negative(self) -> None:
        """Отрицательный ноль невозможен"""
        result = normalize(True, "000")
        assert result.sign is False
        assert result.digits == "0"

    def test_trailing_zeros_preserved(self) -> None:
        """Нули в конце значимы"""
        assert normalize(False, "1000") == SignedDigits(False, "1000")

    def test_idempotent(self) -> None:
        """Повторная нормализация ничего не меняет"""
        for sign, raw in [(False, "0042"), (True, "9"), (True, "00"), (False, "10")]:
            once = normalize(sign, raw)
            assert normalize(once.sign, once.digits) == once

    def test_empty_digits_raises(self) -> None:
        """Пустая строка цифр — ошибка программиста"""
        with pytest.raises(ValueError, match="must not be empty"):
            normalize(False, "")


class TestHelpers:
    """Тесты для magnitude / negate / is_zero"""

    def test_magnitude_strips_sign(self) -> None:
        assert magnitude(SignedDigits(True, "123")) == "123"
        assert magnitude(SignedDigits(False, "123")) == "123"

    def test_negate(self) -> None:
        assert negate(SignedDigits(False, "5")) == SignedDigits(True, "5")
        assert negate(SignedDigits(True, "5")) == SignedDigits(False, "5")

    def test_negate_zero_stays_non_negative(self) -> None:
        assert negate(ZERO) == ZERO

    def test_is_zero(self) -> None:
        assert is_zero(ZERO)
        assert not is_zero(SignedDigits(True, "1"))


# =============================================================================
# ТЕСТЫ ЛИТЕРАЛОВ
# =============================================================================


class TestCheckLiteral:
    """Тесты для check_literal"""

    @pytest.mark.parametrize("text", ["0", "-0", "7", "-7", "007", "123456789012345678901234567890"])
    def test_valid_literals(self, text: str) -> None:
        """Валидные литералы не дают диагностики"""
        assert check_literal(text) is None

    @pytest.mark.parametrize("text", [None, ""])
    def test_empty(self, text) -> None:
        """Пустой вход / None → EMPTY"""
        diagnostic = check_literal(text)
        assert diagnostic is not None
        assert diagnostic.reason is LiteralError.EMPTY

    def test_lone_sign(self) -> None:
        """Одинокий '-' → LONE_SIGN"""
        diagnostic = check_literal("-")
        assert diagnostic.reason is LiteralError.LONE_SIGN

    @pytest.mark.parametrize(
        "text, position",
        [
            ("12a", 2),
            ("+5", 0),
            (" 5", 0),
            ("5 ", 1),
            ("1,000", 1),
            ("--5", 1),
            ("-1.5", 2),
            ("0x10", 1),
        ],
    )
    def test_non_digit(self, text: str, position: int) -> None:
        """Недопустимый символ → NON_DIGIT с индексом"""
        diagnostic = check_literal(text)
        assert diagnostic.reason is LiteralError.NON_DIGIT
        assert diagnostic.position == position

    def test_non_ascii_digit_rejected(self) -> None:
        """Не-ASCII цифры не принимаются"""
        diagnostic = check_literal("١٢٣")
        assert diagnostic.reason is LiteralError.NON_DIGIT

    def test_diagnostic_messages(self) -> None:
        """Сообщения диагностики описывают причину"""
        assert "empty" in LiteralDiagnostic(LiteralError.EMPTY, "").message
        assert "sign without digits" in check_literal("-").message
        message = check_literal("12a").message
        assert "'a'" in message
        assert "position 2" in message


class TestParseDigits:
    """Тесты для parse_digits"""

    def test_parses_and_normalizes(self) -> None:
        assert parse_digits("-007") == (SignedDigits(True, "7"), None)
        assert parse_digits("42") == (SignedDigits(False, "42"), None)

    def test_negative_zero_literal(self) -> None:
        """'-0' разбирается в канонический ноль"""
        value, diagnostic = parse_digits("-0")
        assert diagnostic is None
        assert value == ZERO
        assert value.sign is False

    def test_invalid_falls_back_to_zero(self) -> None:
        """Невалидный литерал → ноль + диагностика"""
        value, diagnostic = parse_digits("-")
        assert value == ZERO
        assert diagnostic.reason is LiteralError.LONE_SIGN


class TestRender:
    """Тесты для render"""

    def test_positive(self) -> None:
        assert render(SignedDigits(False, "123")) == "123"

    def test_negative(self) -> None:
        assert render(SignedDigits(True, "123")) == "-123"

    def test_zero(self) -> None:
        assert render(ZERO) == "0"
