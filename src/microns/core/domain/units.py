"""
MicronUnits — Централизованный модуль конверсии единиц длины

Единственный допустимый способ преобразований между:
- mm (float, миллиметры, внешнее представление)
- raw (int i32, микроны = 1/1000 mm, внутреннее представление)

ЗАПРЕЩЕНО умножать/делить на 1000 вне этого модуля.
Масштаб фиксирован и не настраивается.
"""

from typing import Final

from microns.core.math.numerical_safeguards import (
    I32_MAX,
    I32_MIN,
    is_nan,
    trunc_to_int,
    validate_i32,
    validate_in_open_range,
)

# =============================================================================
# МАСШТАБ
# =============================================================================

# Количество микрон в одном миллиметре
MICRONS_PER_MM: Final[float] = 1000.0


# =============================================================================
# ГРАНИЦЫ В MM
# =============================================================================
# Границы сравниваются во float-представлении: вблизи границы
# float теряет точность, поэтому сравнение с raw-границами некорректно.

# Float-эквивалент минимального raw (-2147483.648 mm)
MIN_MM: Final[float] = I32_MIN / MICRONS_PER_MM

# Float-эквивалент максимального raw (2147483.647 mm)
MAX_MM: Final[float] = I32_MAX / MICRONS_PER_MM


# =============================================================================
# ПРЕДИКАТ ВАЛИДНОСТИ
# =============================================================================


def is_convertible_mm(value: float) -> bool:
    """
    Проверка, может ли float быть безопасно конвертирован в raw.

    Условие: value не NaN и MIN_MM < value < MAX_MM (строго).
    Inf не проходит сравнение с границами.

    Args:
        value: Значение в миллиметрах

    Returns:
        True если конверсия определена

    Examples:
        >>> is_convertible_mm(1.5)
        True
        >>> is_convertible_mm(float("nan"))
        False
        >>> is_convertible_mm(MAX_MM)
        False
    """
    if is_nan(value):
        return False

    return MIN_MM < value < MAX_MM


def validate_convertible_mm(value: float, name: str = "value_mm") -> None:
    """
    Валидация предиката is_convertible_mm с диагностическим сообщением.

    Raises:
        ValueError: Если value равен NaN или вне (MIN_MM, MAX_MM)
    """
    validate_in_open_range(value, name, MIN_MM, MAX_MM)


# =============================================================================
# БАЗОВЫЕ КОНВЕРТЕРЫ
# =============================================================================


def mm_to_raw(value_mm: float) -> int:
    """
    Конверсия: mm (float) → raw микроны (int)

    Алгоритм: trunc(value_mm * 1000.0), усечение к нулю.

        0.0019  -> 1   (не 2)
        -0.0019 -> -1  (не -2)

    Args:
        value_mm: Значение в миллиметрах

    Returns:
        Целое число микрон в диапазоне i32

    Raises:
        ValueError: Если value_mm не проходит is_convertible_mm
    """
    validate_convertible_mm(value_mm)
    return trunc_to_int(value_mm * MICRONS_PER_MM)


def raw_to_mm(raw: int, validate: bool = True) -> float:
    """
    Конверсия: raw микроны (int) → mm (float)

    Всегда представимо во float, проверка диапазона mm не нужна.

    Args:
        raw: Целое число микрон (i32)
        validate: Проверять raw на i32 (False для уже валидированного Microns.raw)

    Returns:
        raw / 1000.0
    """
    if validate:
        validate_i32(raw, "raw")
    return raw / MICRONS_PER_MM
