"""Key Generation — генерация публичных параметров и секрета Peggy.

Порядок выборки фиксирован (p, g, x), что обеспечивает воспроизводимость
всей последовательности генерация → протокол при фиксированном seed.
"""

import logging

from src.core.domain.protocol_params import PublicParameters, validate_public_base
from src.core.math.neutrosophic import NeutrosophicNumber
from src.core.math.random_source import UniformBigIntSource, generate_random_neutrosophic

logger = logging.getLogger(__name__)


def generate_parameters(
    source: UniformBigIntSource, bit_size: int
) -> tuple[PublicParameters, NeutrosophicNumber]:
    """Генерация p, g, x и публичного ключа b = g^x mod p.

    Args:
        source: источник случайности
        bit_size: ширина компонент (бит)

    Returns:
        (PublicParameters, x_secret)

    Raises:
        InvalidPublicParameters: p или g не положительны (без повтора)
    """
    p = generate_random_neutrosophic(source, bit_size)
    g = generate_random_neutrosophic(source, bit_size)
    x_secret = generate_random_neutrosophic(source, bit_size)

    validate_public_base(p, g)

    # Peggy вычисляет свой публичный ключ
    b = g.pow_mod(x_secret, p)

    logger.debug(
        "Generated %d-bit parameters: p=%s g=%s b=%s",
        bit_size,
        p.truncated(16),
        g.truncated(16),
        b.truncated(16),
    )
    return PublicParameters(g=g, p=p, b=b, bit_size=bit_size), x_secret


def generate_impostor_secret(
    source: UniformBigIntSource, bit_size: int
) -> NeutrosophicNumber:
    """Независимо сгенерированный секрет для нечестной Peggy."""
    return generate_random_neutrosophic(source, bit_size)
