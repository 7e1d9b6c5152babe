"""N-1-R ZKP — Neutrosophic 1-Round Zero-Knowledge Proof.

- Генерация публичных параметров p, g и ключа b = g^x mod p
- Один раунд challenge–response между Peggy (prover) и Victor (verifier)
- Серии независимых раундов для статистической проверки
"""

from .keygen import generate_impostor_secret, generate_parameters
from .round_executor import (
    ProverRole,
    RoundTranscript,
    TrialSummary,
    execute_round,
    neutrosophic_one_round_zkp_protocol,
    run_trials,
)

__all__ = [
    "generate_parameters",
    "generate_impostor_secret",
    "ProverRole",
    "RoundTranscript",
    "TrialSummary",
    "execute_round",
    "neutrosophic_one_round_zkp_protocol",
    "run_trials",
]
