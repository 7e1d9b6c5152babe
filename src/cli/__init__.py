"""CLI для Neutrosophic 1-Round ZKP.

Команды:
    nzkp demo    — честная Peggy и Peggy без секрета, по одному раунду
    nzkp trials  — статистический прогон раундов для обеих ролей
    nzkp version — версия пакета
"""

__version__ = "0.1.0"
