"""
Numerical Safeguards — Integer & Float Primitives

Модуль обеспечивает численную устойчивость всех операций над Microns:
- Границы знакового 32-битного целого (i32)
- Проверка float на NaN/Inf
- Усечение к нулю (truncation) вместо округления
- Целочисленное деление с усечением к нулю (а не floor, как `//` в Python)
- Валидация попадания целого в диапазон i32

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат всегда либо валидный i32, либо исключение (без wrap-around)
2. Усечение всегда к нулю: trunc(1.9) = 1, trunc(-1.9) = -1
3. Деление на ноль никогда не возвращает значение
4. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# ГРАНИЦЫ I32
# =============================================================================

# Минимальное значение знакового 32-битного целого
I32_MIN: Final[int] = -(2**31)

# Максимальное значение знакового 32-битного целого
I32_MAX: Final[int] = 2**31 - 1


# =============================================================================
# ПРОВЕРКИ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_nan(value: float | int) -> bool:
    """
    Проверка на NaN без OverflowError для больших int.

    math.isnan(10**400) бросает OverflowError, поэтому int
    проверяется отдельно (int никогда не бывает NaN).
    """
    if isinstance(value, int):
        return False
    return math.isnan(value)


def is_real_number(value: object) -> bool:
    """
    Проверка, что значение является числом int/float (но не bool).

    bool является подклассом int в Python, но как скаляр измерения
    не имеет смысла и отклоняется.
    """
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float))


# =============================================================================
# I32 ПРОВЕРКИ И УСЕЧЕНИЕ
# =============================================================================


def fits_i32(value: int) -> bool:
    """
    Проверка, что целое помещается в знаковый 32-битный диапазон.

    Examples:
        >>> fits_i32(0)
        True
        >>> fits_i32(2**31 - 1)
        True
        >>> fits_i32(2**31)
        False
    """
    return I32_MIN <= value <= I32_MAX


def trunc_to_int(value: float) -> int:
    """
    Усечение float к нулю (отбрасывание дробной части).

    НЕ округление и НЕ floor:
        trunc_to_int(1.9)  -> 1
        trunc_to_int(-1.9) -> -1  (floor дал бы -2)

    Args:
        value: Конечное значение float

    Returns:
        Целая часть значения

    Raises:
        ValueError: Если value равен NaN или Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"value must be a valid float (not NaN/Inf), got {value}")

    return int(math.trunc(value))


def div_trunc(numerator: int, denominator: int) -> int:
    """
    Целочисленное деление с усечением к нулю.

    Оператор `//` в Python округляет к минус бесконечности
    (-7 // 2 == -4), здесь же результат усекается к нулю (-7 / 2 -> -3),
    как в целочисленной арифметике фиксированной разрядности.

    Args:
        numerator: Делимое
        denominator: Делитель (не ноль)

    Returns:
        Частное, усечённое к нулю

    Raises:
        ZeroDivisionError: Если denominator == 0

    Examples:
        >>> div_trunc(7, 2)
        3
        >>> div_trunc(-7, 2)
        -3
        >>> div_trunc(7, -2)
        -3
        >>> div_trunc(-7, -2)
        3
    """
    if denominator == 0:
        raise ZeroDivisionError("integer division by zero")

    quotient = abs(numerator) // abs(denominator)

    # Знак результата: минус только если знаки операндов различаются
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_i32(value: int, name: str) -> None:
    """
    Валидация, что значение является int в диапазоне i32.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        TypeError: Если value не int (или bool)
        ValueError: Если value вне диапазона [I32_MIN, I32_MAX]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")

    if not fits_i32(value):
        raise ValueError(f"{name} must be in [{I32_MIN}, {I32_MAX}], got {value}")


def validate_in_open_range(
    value: float,
    name: str,
    lower: float,
    upper: float,
) -> None:
    """
    Валидация, что значение строго внутри интервала (lower, upper).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        lower: Нижняя граница (исключена)
        upper: Верхняя граница (исключена)

    Raises:
        ValueError: Если value равен NaN или вне интервала
    """
    if is_nan(value):
        raise ValueError(f"{name} must not be NaN, got {value}")

    if not lower < value:
        raise ValueError(f"{name} must be > {lower}, got {value}")

    if not value < upper:
        raise ValueError(f"{name} must be < {upper}, got {value}")
