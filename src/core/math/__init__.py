"""
Core math modules для N-1-R ZKP

Neutrosophic-арифметика и целочисленные примитивы с контрактами корректности.
"""

# BigInt Safeguards
from src.core.math.bigint_safeguards import (
    # Constants
    DEFAULT_BIT_SIZE,
    DISPLAY_DIGITS,
    # Exceptions
    NeutrosophicDomainViolation,
    # Modpow
    safe_pow_mod,
    # Utilities
    bit_length_bound,
    truncate_digits,
    # Validation
    validate_bit_size,
    validate_exponent,
    validate_modulus,
)

# Neutrosophic Numbers
from src.core.math.neutrosophic import (
    NeutrosophicNumber,
    add,
    multiply,
    pow_mod,
)

# Random Source
from src.core.math.random_source import (
    UniformBigIntSource,
    generate_random_neutrosophic,
    make_source,
)

__all__ = [
    # BigInt Safeguards — Constants
    "DEFAULT_BIT_SIZE",
    "DISPLAY_DIGITS",
    # BigInt Safeguards — Exceptions
    "NeutrosophicDomainViolation",
    # BigInt Safeguards — Modpow
    "safe_pow_mod",
    # BigInt Safeguards — Utilities
    "bit_length_bound",
    "truncate_digits",
    # BigInt Safeguards — Validation
    "validate_bit_size",
    "validate_exponent",
    "validate_modulus",
    # Neutrosophic Numbers — Types
    "NeutrosophicNumber",
    # Neutrosophic Numbers — Functions
    "add",
    "multiply",
    "pow_mod",
    # Random Source — Types
    "UniformBigIntSource",
    # Random Source — Functions
    "generate_random_neutrosophic",
    "make_source",
]
