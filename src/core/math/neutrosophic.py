"""
Neutrosophic Numbers — Арифметика a + bI при I² = I

Immutable Pydantic модель neutrosophic-числа и операции над ней:
- Сложение (покомпонентное)
- Умножение (с подстановкой I² = I)
- Модульное возведение в степень (split-формула протокола N-1-R ZKP)
- Проверка положительности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все операции возвращают новый экземпляр, операнды не изменяются
2. Равенство структурное: a₁ == a₂ и b₁ == b₂
3. pow_mod воспроизводит split-формулу побитово (от неё зависит протокол)
4. is_positive — рекомендательный предикат, НЕ инвариант типа

ФОРМУЛЫ:
    (a₁ + b₁I) + (a₂ + b₂I) = (a₁+a₂) + (b₁+b₂)I
    (a₁ + b₁I) * (a₂ + b₂I) = a₁a₂ + (a₁b₂ + b₁a₂ + b₁b₂)I

    (g₁ + g₂I)^(x₁ + x₂I) mod (p₁ + p₂I) =
        g₁^x₁ mod p₁ + I * [((g₁+g₂)^(x₁+x₂) mod (p₁+p₂)) - (g₁^x₁ mod p₁)]

    positive(a + bI) ⇔ a > 0 ∧ a + b > 0
"""

from pydantic import BaseModel, Field

from src.core.math.bigint_safeguards import (
    DISPLAY_DIGITS,
    safe_pow_mod,
    truncate_digits,
)


# =============================================================================
# NEUTROSOPHIC NUMBER MODEL
# =============================================================================


class NeutrosophicNumber(BaseModel):
    """
    Neutrosophic-число вида a + bI.

    I — символ неопределённости с идемпотентным свойством I² = I.
    Компоненты — целые произвольной точности (Python int), допускаются
    отрицательные и нулевые значения.

    Immutable модель (frozen=True): все операции создают новый экземпляр.
    strict=True: float/str/bool не приводятся к int молча.
    """

    a: int = Field(..., description="Действительная часть")
    b: int = Field(..., description="Коэффициент при неопределённости I")

    model_config = {"frozen": True, "strict": True}

    @classmethod
    def new(cls, a: int, b: int) -> "NeutrosophicNumber":
        """Конструирование без дополнительной валидации."""
        return cls(a=a, b=b)

    def __str__(self) -> str:
        if self.b < 0:
            return f"{self.a} - {-self.b}I"
        return f"{self.a} + {self.b}I"

    def __add__(self, other: "NeutrosophicNumber") -> "NeutrosophicNumber":
        if not isinstance(other, NeutrosophicNumber):
            return NotImplemented
        return add(self, other)

    def __mul__(self, other: "NeutrosophicNumber") -> "NeutrosophicNumber":
        if not isinstance(other, NeutrosophicNumber):
            return NotImplemented
        return multiply(self, other)

    def is_positive(self) -> bool:
        """
        Проверка положительности neutrosophic-числа.

        a + bI положительно тогда и только тогда, когда a > 0 и a + b > 0.

        Returns:
            True если оба условия выполнены

        Examples:
            >>> NeutrosophicNumber.new(1, 0).is_positive()
            True
            >>> NeutrosophicNumber.new(1, -1).is_positive()
            False
        """
        return self.a > 0 and (self.a + self.b) > 0

    def pow_mod(
        self, exp: "NeutrosophicNumber", modulus: "NeutrosophicNumber"
    ) -> "NeutrosophicNumber":
        """Модульное возведение в степень, self — основание. См. pow_mod()."""
        return pow_mod(self, exp, modulus)

    def truncated(self, digits: int = DISPLAY_DIGITS) -> str:
        """Усечённая десятичная запись действительной части (для вывода)."""
        return truncate_digits(self.a, digits)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(x: NeutrosophicNumber, y: NeutrosophicNumber) -> NeutrosophicNumber:
    """
    Сложение: (a₁+a₂) + (b₁+b₂)I.

    Покомпонентное, коммутативное и ассоциативное. Переполнение невозможно.

    Examples:
        >>> add(NeutrosophicNumber.new(1, 2), NeutrosophicNumber.new(3, 4))
        NeutrosophicNumber(a=4, b=6)
    """
    return NeutrosophicNumber.new(x.a + y.a, x.b + y.b)


def multiply(x: NeutrosophicNumber, y: NeutrosophicNumber) -> NeutrosophicNumber:
    """
    Умножение с подстановкой I² = I: a₁a₂ + (a₁b₂ + b₁a₂ + b₁b₂)I.

    Перекрёстные слагаемые и слагаемое при I² (равное I) сворачиваются
    в коэффициент при I.

    Examples:
        >>> multiply(NeutrosophicNumber.new(1, 2), NeutrosophicNumber.new(3, 4))
        NeutrosophicNumber(a=3, b=18)
    """
    ac = x.a * y.a
    ad = x.a * y.b
    bc = x.b * y.a
    bd = x.b * y.b
    return NeutrosophicNumber.new(ac, ad + bc + bd)


def pow_mod(
    base: NeutrosophicNumber,
    exp: NeutrosophicNumber,
    modulus: NeutrosophicNumber,
) -> NeutrosophicNumber:
    """
    Neutrosophic модульное возведение в степень (split-формула).

    Это НЕ степень через повторное neutrosophic-умножение, а фиксированная
    замкнутая формула:
        term1 = g₁^x₁ mod p₁
        term2 = (g₁+g₂)^(x₁+x₂) mod (p₁+p₂)
        result = term1 + (term2 - term1)I

    Действительная часть отслеживает только действительную подзадачу,
    коэффициент при I — разность между "суммарной" подзадачей и действительной.

    Args:
        base: Основание g
        exp: Степень x
        modulus: Модуль p

    Returns:
        Новый NeutrosophicNumber(term1, term2 - term1)

    Raises:
        NeutrosophicDomainViolation: p₁ == 0, p₁+p₂ == 0, x₁ < 0 или x₁+x₂ < 0

    Examples:
        >>> g = NeutrosophicNumber.new(2, 1)
        >>> x = NeutrosophicNumber.new(3, 0)
        >>> p = NeutrosophicNumber.new(5, 0)
        >>> pow_mod(g, x, p)
        NeutrosophicNumber(a=3, b=-1)
    """
    base_sum = base.a + base.b
    exp_sum = exp.a + exp.b
    modulus_sum = modulus.a + modulus.b

    # Действительная часть: g₁^x₁ mod p₁
    term1 = safe_pow_mod(base.a, exp.a, modulus.a, "exp.a", "modulus.a")

    # Основной терм неопределённой части: (g₁+g₂)^(x₁+x₂) mod (p₁+p₂)
    term2 = safe_pow_mod(
        base_sum, exp_sum, modulus_sum, "exp.a + exp.b", "modulus.a + modulus.b"
    )

    return NeutrosophicNumber.new(term1, term2 - term1)
