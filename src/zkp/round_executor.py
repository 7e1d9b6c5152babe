"""ZKP Round Executor — один раунд Neutrosophic 1-Round ZKP (N-1-R ZKP).

Peggy (prover) доказывает Victor (verifier) знание секрета x,
не раскрывая его. Обе стороны моделируются прямыми вызовами функций.

Раунд (без повторов, без состояния между вызовами):
1. Victor: случайный секрет y той же ширины, что и параметры
2. Victor: challenge c = g^y mod p
3. Peggy:  ответ r = c^x mod p (секрет проверяемой стороны)
4. Victor: r' = b^y mod p (только публичные значения и y)
5. Victor: r == r' (структурное равенство обеих компонент)

Ожидаемое свойство: при совпадении секретов (g^y)^x = (g^x)^y = b^y
сохраняется split-формулой покомпонентно. Формальных оценок полноты
и стойкости нет: это исследовательская демонстрация.

Провал верификации при неверном секрете — ожидаемый исход
(IMPOSTOR), а не ошибка системы.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.core.domain.protocol_params import PublicParameters
from src.core.math.bigint_safeguards import DEFAULT_BIT_SIZE
from src.core.math.neutrosophic import NeutrosophicNumber
from src.core.math.random_source import UniformBigIntSource, generate_random_neutrosophic

logger = logging.getLogger(__name__)


class ProverRole(str, Enum):
    """Роль проверяемой стороны."""

    HONEST = "honest"
    IMPOSTOR = "impostor"

    def outcome_as_expected(self, verified: bool) -> bool:
        """Успех ожидается только для честной Peggy."""
        return verified if self is ProverRole.HONEST else not verified

    def summary_as_expected(self, summary: "TrialSummary") -> bool:
        """Каждый раунд серии завершился ожидаемым для роли исходом."""
        expected_rounds = (
            summary.successes if self.outcome_as_expected(True) else summary.failures
        )
        return expected_rounds == summary.trials


@dataclass(frozen=True)
class RoundTranscript:
    """Транскрипт одного раунда."""

    challenge: NeutrosophicNumber
    prover_response: NeutrosophicNumber
    verifier_value: NeutrosophicNumber
    verified: bool


@dataclass(frozen=True)
class TrialSummary:
    """Итог серии независимых раундов с одним секретом."""

    trials: int
    successes: int

    @property
    def failures(self) -> int:
        return self.trials - self.successes

    @property
    def success_rate(self) -> float:
        return self.successes / self.trials


def execute_round(
    g: NeutrosophicNumber,
    p: NeutrosophicNumber,
    b: NeutrosophicNumber,
    x: NeutrosophicNumber,
    source: UniformBigIntSource,
    bit_size: int = DEFAULT_BIT_SIZE,
) -> RoundTranscript:
    """Выполнение раунда с сохранением промежуточных значений.

    Args:
        g: публичный генератор
        p: публичный модуль
        b: публичный ключ g^x mod p
        x: секрет проверяемой стороны (настоящий или поддельный)
        source: источник случайности Victor
        bit_size: ширина challenge-секрета y

    Returns:
        RoundTranscript

    Raises:
        NeutrosophicDomainViolation: вырожденный модуль (пропагирует из pow_mod)
    """
    # Шаг 1 (Victor): случайный секрет y
    y = generate_random_neutrosophic(source, bit_size)

    # Шаг 2 (Victor): challenge c = g^y mod p, отправляется Peggy
    c = g.pow_mod(y, p)

    # Шаг 3 (Peggy): ответ r = c^x mod p
    r_prover = c.pow_mod(x, p)

    # Шаг 4 (Victor): r' = b^y mod p
    r_verifier = b.pow_mod(y, p)

    verified = r_prover == r_verifier
    logger.debug("Round finished: verified=%s", verified)

    return RoundTranscript(
        challenge=c,
        prover_response=r_prover,
        verifier_value=r_verifier,
        verified=verified,
    )


def neutrosophic_one_round_zkp_protocol(
    g: NeutrosophicNumber,
    p: NeutrosophicNumber,
    b: NeutrosophicNumber,
    x: NeutrosophicNumber,
    source: UniformBigIntSource,
    bit_size: int = DEFAULT_BIT_SIZE,
) -> bool:
    """Один раунд протокола: True если Victor принял ответ Peggy."""
    return execute_round(g, p, b, x, source, bit_size).verified


def run_trials(
    params: PublicParameters,
    secret: NeutrosophicNumber,
    source: UniformBigIntSource,
    trials: int,
    bit_size: Optional[int] = None,
) -> TrialSummary:
    """Серия независимых раундов с одним и тем же секретом.

    Каждый раунд берёт свежий challenge из source; ширина challenge
    равна bit_size, по умолчанию ширине параметров.
    """
    if trials <= 0:
        raise ValueError(f"trials must be positive, got {trials}")
    if bit_size is None:
        bit_size = params.bit_size

    successes = sum(
        neutrosophic_one_round_zkp_protocol(
            params.g, params.p, params.b, secret, source, bit_size
        )
        for _ in range(trials)
    )
    logger.debug("Trials finished: %d/%d verified", successes, trials)
    return TrialSummary(trials=trials, successes=successes)
