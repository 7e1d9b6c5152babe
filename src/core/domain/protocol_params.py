"""
Protocol Parameters — Публичные параметры и конфигурация N-1-R ZKP

Immutable Pydantic модели:
- ProtocolConfig: ширина параметров, seed, количество прогонов
- PublicParameters: публичные g, p и публичный ключ b = g^x mod p

ВНИМАНИЕ: упрощённая настройка исключительно для алгебраической демонстрации.
В реальной криптосистеме p должен быть большим простым (или иметь
специальную структуру), а g — генератором группы по модулю p.
Понятие "neutrosophic простого" теоретическое и здесь не проверяется:
проверяется только положительность p и g.
"""

from typing import Optional

from pydantic import BaseModel, Field

from src.core.math.bigint_safeguards import DEFAULT_BIT_SIZE, DISPLAY_DIGITS
from src.core.math.neutrosophic import NeutrosophicNumber


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidPublicParameters(Exception):
    """
    Публичные параметры p или g не являются положительными.

    Запуск прерывается с диагностикой; автоматический повтор генерации
    с другими параметрами не выполняется (вызывающий перезапускает сам).
    """
    pass


# =============================================================================
# CONFIGURATION
# =============================================================================


class ProtocolConfig(BaseModel):
    """Конфигурация запуска протокола."""

    bit_size: int = Field(
        DEFAULT_BIT_SIZE, gt=0, description="Ширина компонент p, g, x, y (бит)"
    )
    seed: Optional[int] = Field(
        None, description="Seed источника случайности (None — недетерминированно)"
    )
    trials: int = Field(100, gt=0, description="Количество раундов в статистическом прогоне")
    display_digits: int = Field(
        DISPLAY_DIGITS, ge=1, description="Количество цифр при выводе параметров"
    )

    model_config = {"frozen": True}


# =============================================================================
# PUBLIC PARAMETERS
# =============================================================================


def validate_public_base(p: NeutrosophicNumber, g: NeutrosophicNumber) -> None:
    """
    Проверка положительности публичных параметров.

    Args:
        p: Публичный модуль
        g: Публичный генератор

    Raises:
        InvalidPublicParameters: Если p или g не положительны
    """
    failed = [name for name, value in (("p", p), ("g", g)) if not value.is_positive()]
    if failed:
        raise InvalidPublicParameters(
            f"The generated public parameters {' and '.join(failed)} "
            f"are not positive neutrosophic numbers (need a > 0 and a + b > 0). "
            f"Please run again."
        )


class PublicParameters(BaseModel):
    """
    Публичные параметры протокола.

    Модель не проверяет положительность при конструировании:
    generate_parameters вызывает validate_public_base до вывода b.
    """

    g: NeutrosophicNumber = Field(..., description="Публичный генератор")
    p: NeutrosophicNumber = Field(..., description="Публичный neutrosophic модуль")
    b: NeutrosophicNumber = Field(..., description="Публичный ключ b = g^x mod p")
    bit_size: int = Field(..., gt=0, description="Ширина параметров (бит)")

    model_config = {"frozen": True}
