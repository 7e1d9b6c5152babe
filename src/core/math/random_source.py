"""
Random Source — генерация случайных neutrosophic-чисел

Единственная абстракция источника случайности: UniformBigIntSource
(равномерный генератор больших неотрицательных целых заданной ширины).
Источник передаётся явно в каждую функцию генерации, глобального
генератора нет.

ИЗВЕСТНОЕ ОГРАНИЧЕНИЕ:
    По умолчанию используется random.Random (general-purpose PRNG).
    Для демонстрации этого достаточно; production-использование требует
    криптостойкого источника (random.SystemRandom также удовлетворяет
    UniformBigIntSource), но источник по умолчанию намеренно не заменяется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. a и b выбираются независимо и равномерно из [0, 2^bit_size)
2. Порядок выборки фиксирован: сначала a, затем b (детерминизм при seed)
"""

import random
from typing import Optional, Protocol, runtime_checkable

from src.core.math.bigint_safeguards import bit_length_bound, validate_bit_size
from src.core.math.neutrosophic import NeutrosophicNumber


# =============================================================================
# ИСТОЧНИК СЛУЧАЙНОСТИ
# =============================================================================


@runtime_checkable
class UniformBigIntSource(Protocol):
    """Равномерный генератор неотрицательных целых в [0, 2^k)."""

    def getrandbits(self, k: int, /) -> int:
        ...


def make_source(seed: Optional[int] = None) -> random.Random:
    """
    Источник по умолчанию.

    Args:
        seed: Seed для воспроизводимости (None — seed из энтропии ОС)

    Returns:
        random.Random, удовлетворяющий UniformBigIntSource
    """
    return random.Random(seed)


# =============================================================================
# ГЕНЕРАЦИЯ
# =============================================================================


def _draw_component(source: UniformBigIntSource, bit_size: int, bound: int) -> int:
    # Неотрицательная выборка используется как знаковый int напрямую;
    # выход за [0, 2^bit_size) означает неисправный источник
    value = source.getrandbits(bit_size)
    if not 0 <= value < bound:
        raise ValueError(
            f"random source returned {value.bit_length()}-bit value "
            f"outside [0, 2^{bit_size})"
        )
    return value


def generate_random_neutrosophic(
    source: UniformBigIntSource, bit_size: int
) -> NeutrosophicNumber:
    """
    Случайное neutrosophic-число с компонентами заданной ширины.

    Используется для ключей, модуля, генератора и challenge протокола.

    Args:
        source: Источник случайности (UniformBigIntSource)
        bit_size: Ширина компонент a и b в битах (> 0)

    Returns:
        NeutrosophicNumber с a, b ∈ [0, 2^bit_size)

    Raises:
        ValueError: Если bit_size <= 0 или источник вернул значение вне диапазона
    """
    validate_bit_size(bit_size)
    bound = bit_length_bound(bit_size)

    a_val = _draw_component(source, bit_size, bound)
    b_val = _draw_component(source, bit_size, bound)
    return NeutrosophicNumber.new(a_val, b_val)
