"""
BigInt Safeguards — контракты для операций над целыми произвольной точности

Модуль обеспечивает корректность всех целочисленных примитивов, на которых
построена neutrosophic-арифметика:
- Безопасное модульное возведение в степень (modpow) с проверкой контракта
- Валидация ширины (bit size) случайных компонент
- Утилиты отображения больших чисел (усечение до N цифр)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нулевой модуль никогда не доходит до pow() (NeutrosophicDomainViolation)
2. Отрицательная степень никогда не доходит до pow() (NeutrosophicDomainViolation)
3. Результат modpow следует floor-семантике:
   [0, m) для m > 0, (m, 0] для m < 0
4. Все операции детерминированы и воспроизводимы
"""

from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Ширина компонент p, g, x и challenge y (бит)
DEFAULT_BIT_SIZE: Final[int] = 2048

# Количество десятичных цифр при выводе параметров в консоль
DISPLAY_DIGITS: Final[int] = 50


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NeutrosophicDomainViolation(Exception):
    """
    Нарушение контракта modpow: нулевой модуль или отрицательная степень.

    Это ошибка программирования, а не ожидаемый исход протокола:
    публичные параметры должны быть провалидированы до использования.
    Продолжение с вырожденным модулем даёт бессмысленный результат,
    поэтому исключение НЕ перехватывается ядром и пропагирует до вызывающего.
    """
    pass


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_modulus(modulus: int, name: str) -> None:
    """
    Валидация модуля для modpow.

    Отрицательный модуль допустим (результат лежит в (m, 0]),
    нулевой модуль — нарушение контракта.

    Args:
        modulus: Проверяемый модуль
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        NeutrosophicDomainViolation: Если modulus == 0
    """
    if modulus == 0:
        raise NeutrosophicDomainViolation(
            f"{name} must be non-zero, got {modulus} (degenerate modulus)"
        )


def validate_exponent(exponent: int, name: str) -> None:
    """
    Валидация степени для modpow.

    Поведение при отрицательной степени не определено: вместо неявного
    перехода к модульному обратному (как делает pow() в Python)
    фиксируем это как нарушение контракта.

    Args:
        exponent: Проверяемая степень
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        NeutrosophicDomainViolation: Если exponent < 0
    """
    if exponent < 0:
        raise NeutrosophicDomainViolation(
            f"{name} must be non-negative, got {exponent} (negative exponent is undefined)"
        )


def validate_bit_size(bit_size: int) -> None:
    """
    Валидация ширины случайных компонент.

    Args:
        bit_size: Ширина в битах

    Raises:
        ValueError: Если bit_size не положительное целое (bool отклоняется)
    """
    if isinstance(bit_size, bool) or not isinstance(bit_size, int):
        raise ValueError(f"bit_size must be an integer, got {bit_size!r}")

    if bit_size <= 0:
        raise ValueError(f"bit_size must be positive, got {bit_size}")


# =============================================================================
# БЕЗОПАСНЫЙ MODPOW
# =============================================================================


def safe_pow_mod(
    base: int,
    exponent: int,
    modulus: int,
    exponent_name: str = "exponent",
    modulus_name: str = "modulus",
) -> int:
    """
    Модульное возведение в степень с проверкой контракта.

    Формула:
        base^exponent mod modulus (floor-семантика остатка)

    Args:
        base: Основание (может быть отрицательным)
        exponent: Степень (>= 0)
        modulus: Модуль (!= 0)
        exponent_name: Имя степени в сообщении об ошибке
        modulus_name: Имя модуля в сообщении об ошибке

    Returns:
        Результат в [0, modulus) при modulus > 0, в (modulus, 0] при modulus < 0

    Raises:
        NeutrosophicDomainViolation: При нулевом модуле или отрицательной степени

    Examples:
        >>> safe_pow_mod(2, 3, 5)
        3
        >>> safe_pow_mod(3, 3, 5)
        2
        >>> safe_pow_mod(3, 2, -5)
        -1
    """
    validate_modulus(modulus, modulus_name)
    validate_exponent(exponent, exponent_name)
    return pow(base, exponent, modulus)


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def bit_length_bound(bit_size: int) -> int:
    """
    Исключающая верхняя граница компоненты заданной ширины.

    Ширина не проверяется: вызывающий код валидирует её через
    validate_bit_size.

    Args:
        bit_size: Ширина в битах (> 0)

    Returns:
        2^bit_size

    Examples:
        >>> bit_length_bound(8)
        256
    """
    return 1 << bit_size


def truncate_digits(value: int, digits: int = DISPLAY_DIGITS) -> str:
    """
    Усечение десятичной записи числа для вывода в консоль.

    Args:
        value: Число произвольной точности
        digits: Максимальное количество символов до многоточия

    Returns:
        Первые digits символов десятичной записи и "..."

    Examples:
        >>> truncate_digits(1234567, 3)
        '123...'
        >>> truncate_digits(12, 3)
        '12...'
    """
    if digits <= 0:
        raise ValueError(f"digits must be positive, got {digits}")

    return f"{str(value)[:digits]}..."
