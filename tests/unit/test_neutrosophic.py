"""
Тесты для Neutrosophic Numbers — арифметика a + bI при I² = I

Проверяет:
1. Литеральные случаи сложения, умножения и pow_mod
2. Положительность (включая граничный случай a + b = 0)
3. Immutability и структурное равенство (frozen=True)
4. Strict-валидацию компонент
5. Нарушения контракта pow_mod (нулевой модуль, отрицательная степень)
"""

import pytest
from pydantic import ValidationError

from src.core.math import bigint_safeguards
from src.core.math import (
    NeutrosophicDomainViolation,
    NeutrosophicNumber,
    add,
    multiply,
    pow_mod,
)


def nn(a: int, b: int) -> NeutrosophicNumber:
    return NeutrosophicNumber.new(a, b)


# =============================================================================
# ТЕСТЫ МОДЕЛИ
# =============================================================================


class TestNeutrosophicModel:
    """Тесты модели NeutrosophicNumber"""

    def test_construction(self) -> None:
        """Конструирование хранит компоненты как есть"""
        x = nn(7, -3)
        assert x.a == 7
        assert x.b == -3

    def test_negative_and_zero_allowed(self) -> None:
        """Отрицательные и нулевые значения допустимы"""
        assert nn(0, 0).a == 0
        assert nn(-5, -6).b == -6

    def test_big_components(self) -> None:
        """Компоненты произвольной точности"""
        big = 2**4096 + 17
        x = nn(big, -big)
        assert x.a == big
        assert x.a + x.b == 0

    def test_immutable(self) -> None:
        """Модель immutable (frozen=True)"""
        x = nn(1, 2)
        with pytest.raises(ValidationError):
            x.a = 5  # type: ignore

    def test_structural_equality(self) -> None:
        """Равенство покомпонентное"""
        assert nn(1, 2) == nn(1, 2)
        assert nn(1, 2) != nn(2, 1)
        assert nn(1, 2) != nn(1, 3)

    def test_hashable(self) -> None:
        """Равные значения имеют равный hash"""
        assert hash(nn(3, 4)) == hash(nn(3, 4))
        assert len({nn(3, 4), nn(3, 4), nn(4, 3)}) == 2

    def test_strict_rejects_float(self) -> None:
        """float не приводится к int молча"""
        with pytest.raises(ValidationError):
            NeutrosophicNumber(a=1.0, b=2)  # type: ignore

    def test_strict_rejects_str(self) -> None:
        """str не приводится к int молча"""
        with pytest.raises(ValidationError):
            NeutrosophicNumber(a="1", b=2)  # type: ignore

    def test_str_rendering(self) -> None:
        """Строковое представление a + bI"""
        assert str(nn(3, 18)) == "3 + 18I"
        assert str(nn(3, -1)) == "3 - 1I"
        assert str(nn(0, 0)) == "0 + 0I"

    def test_truncated(self) -> None:
        """Усечённый вывод действительной части"""
        x = nn(12345678901234567890, 1)
        assert x.truncated(5) == "12345..."
        assert nn(42, 0).truncated(50) == "42..."


# =============================================================================
# ТЕСТЫ АРИФМЕТИКИ
# =============================================================================


class TestAddition:
    """Тесты сложения"""

    def test_literal_case(self) -> None:
        """(1+2I) + (3+4I) == 4+6I"""
        assert add(nn(1, 2), nn(3, 4)) == nn(4, 6)

    def test_operator_matches_function(self) -> None:
        """Оператор + делегирует в add()"""
        assert nn(1, 2) + nn(3, 4) == add(nn(1, 2), nn(3, 4))

    def test_operands_unchanged(self) -> None:
        """Операнды не изменяются"""
        x, y = nn(1, 2), nn(3, 4)
        add(x, y)
        assert x == nn(1, 2)
        assert y == nn(3, 4)

    def test_zero_is_identity(self) -> None:
        """0 + 0I — нейтральный элемент"""
        assert add(nn(-9, 11), nn(0, 0)) == nn(-9, 11)

    def test_unsupported_operand(self) -> None:
        """Сложение с int не поддерживается"""
        with pytest.raises(TypeError):
            nn(1, 2) + 3  # type: ignore


class TestMultiplication:
    """Тесты умножения (I² = I)"""

    def test_literal_case(self) -> None:
        """(1+2I) * (3+4I) == 3+18I (ac=3, ad+bc+bd = 4+6+8 = 18)"""
        assert multiply(nn(1, 2), nn(3, 4)) == nn(3, 18)

    def test_operator_matches_function(self) -> None:
        """Оператор * делегирует в multiply()"""
        assert nn(1, 2) * nn(3, 4) == multiply(nn(1, 2), nn(3, 4))

    def test_idempotent_indeterminacy(self) -> None:
        """I * I == I"""
        i = nn(0, 1)
        assert multiply(i, i) == i

    def test_one_is_identity(self) -> None:
        """1 + 0I — единица"""
        assert multiply(nn(5, -7), nn(1, 0)) == nn(5, -7)

    def test_negative_components(self) -> None:
        """(-2+3I) * (4-5I) = -8 + (10 + 12 - 15)I = -8 + 7I"""
        assert multiply(nn(-2, 3), nn(4, -5)) == nn(-8, 7)


# =============================================================================
# ТЕСТЫ POW_MOD
# =============================================================================


class TestPowMod:
    """Тесты split-формулы pow_mod"""

    def test_literal_case(self) -> None:
        """(2+1I)^(3+0I) mod (5+0I) == 3 + (-1)I

        Действительная часть: 2³ mod 5 = 3
        Неопределённая: (3³ mod 5) - 3 = 2 - 3 = -1
        """
        assert pow_mod(nn(2, 1), nn(3, 0), nn(5, 0)) == nn(3, -1)

    def test_method_matches_function(self) -> None:
        """g.pow_mod(x, p) == pow_mod(g, x, p)"""
        g, x, p = nn(2, 1), nn(3, 0), nn(5, 0)
        assert g.pow_mod(x, p) == pow_mod(g, x, p)

    def test_components_formula(self) -> None:
        """Компоненты результата соответствуют замкнутой формуле"""
        g, x, p = nn(123, 45), nn(67, 8), nn(1009, 14)
        term1 = pow(123, 67, 1009)
        term2 = pow(123 + 45, 67 + 8, 1009 + 14)
        assert pow_mod(g, x, p) == nn(term1, term2 - term1)

    def test_real_exponent_matches_repeated_multiplication(self) -> None:
        """При x = n + 0I и большом модуле совпадает с g * g * ... * g"""
        # (a+bI)^n = aⁿ + ((a+b)ⁿ - aⁿ)I
        g = nn(2, 1)
        cube = multiply(multiply(g, g), g)
        assert cube == nn(8, 19)
        assert pow_mod(g, nn(3, 0), nn(1000, 0)) == cube

    def test_indeterminate_exponent_differs_from_multiplication(self) -> None:
        """Степень с x₂ != 0 — split-формула, а не алгебраическая степень"""
        # term1 = 2^1 mod 1000 = 2, term2 = 3^2 mod 1000 = 9
        assert pow_mod(nn(2, 1), nn(1, 1), nn(1000, 0)) == nn(2, 7)

    def test_zero_exponent(self) -> None:
        """x = 0 + 0I: обе подзадачи равны 1 (при модуле > 1)"""
        assert pow_mod(nn(9, 4), nn(0, 0), nn(7, 3)) == nn(1, 0)

    def test_negative_modulus_floor_semantics(self) -> None:
        """Отрицательный модуль: результат в (m, 0]"""
        # 3² mod -5 = -1, (3+0)^2 mod -5 = -1
        assert pow_mod(nn(3, 0), nn(2, 0), nn(-5, 0)) == nn(-1, 0)

    def test_negative_exponent_indeterminate_part_allowed(self) -> None:
        """x₂ < 0 допустимо, пока x₁ >= 0 и x₁ + x₂ >= 0"""
        # term1 = 2^5 mod 7 = 4, term2 = 3^2 mod 7 = 2
        assert pow_mod(nn(2, 1), nn(5, -3), nn(7, 0)) == nn(4, -2)

    def test_operands_unchanged(self) -> None:
        """Операнды не изменяются"""
        g, x, p = nn(2, 1), nn(3, 0), nn(5, 0)
        pow_mod(g, x, p)
        assert (g, x, p) == (nn(2, 1), nn(3, 0), nn(5, 0))


class TestPowModContract:
    """Нарушения контракта pow_mod — фатальная ошибка"""

    def test_zero_real_modulus(self) -> None:
        """p₁ == 0 → NeutrosophicDomainViolation"""
        with pytest.raises(NeutrosophicDomainViolation, match="modulus.a must be non-zero"):
            pow_mod(nn(2, 1), nn(3, 0), nn(0, 5))

    def test_zero_modulus_sum(self) -> None:
        """p₁ + p₂ == 0 → NeutrosophicDomainViolation"""
        with pytest.raises(NeutrosophicDomainViolation, match=r"modulus.a \+ modulus.b"):
            pow_mod(nn(2, 1), nn(3, 0), nn(5, -5))

    def test_negative_real_exponent(self) -> None:
        """x₁ < 0 → NeutrosophicDomainViolation (не модульный обратный)"""
        with pytest.raises(NeutrosophicDomainViolation, match="exp.a must be non-negative"):
            pow_mod(nn(2, 1), nn(-1, 5), nn(5, 0))

    def test_negative_exponent_sum(self) -> None:
        """x₁ + x₂ < 0 → NeutrosophicDomainViolation"""
        with pytest.raises(NeutrosophicDomainViolation, match=r"exp.a \+ exp.b"):
            pow_mod(nn(2, 1), nn(1, -2), nn(5, 0))

    def test_each_operand_checked_once(self, monkeypatch) -> None:
        """Модуль и степень каждой подзадачи проверяются ровно один раз"""
        checked: list[str] = []
        original = bigint_safeguards.validate_modulus

        def recording_validate(modulus: int, name: str) -> None:
            checked.append(name)
            original(modulus, name)

        monkeypatch.setattr(bigint_safeguards, "validate_modulus", recording_validate)
        pow_mod(nn(2, 1), nn(3, 4), nn(11, 2))

        assert checked == ["modulus.a", "modulus.a + modulus.b"]


# =============================================================================
# ТЕСТЫ ПОЛОЖИТЕЛЬНОСТИ
# =============================================================================


class TestIsPositive:
    """Тесты is_positive: a > 0 ∧ a + b > 0"""

    def test_one_is_positive(self) -> None:
        """1 + 0I положительно"""
        assert nn(1, 0).is_positive() is True

    def test_sum_zero_not_positive(self) -> None:
        """1 - 1I: a > 0, но a + b = 0"""
        assert nn(1, -1).is_positive() is False

    def test_zero_real_not_positive(self) -> None:
        """a = 0 не положительно даже при b > 0"""
        assert nn(0, 10).is_positive() is False

    def test_negative_real_not_positive(self) -> None:
        """a < 0 не положительно"""
        assert nn(-1, 100).is_positive() is False

    def test_negative_indeterminate_allowed(self) -> None:
        """b < 0 допустимо, если a + b > 0"""
        assert nn(10, -9).is_positive() is True
