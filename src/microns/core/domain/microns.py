"""
Microns — Значение фиксированной точности (scaled integer)

Хранит физическую величину (миллиметры) как знаковое 32-битное целое
в единицах 1/1000 mm (микроны). Повторные операции не накапливают
ошибку округления float; значения точны, сравнимы и хешируемы.

Конверсии:
- float → Microns: trunc(mm * 1000.0), усечение к нулю (не округление)
- Microns → float: raw / 1000.0

Арифметика (Microns ⊕ Microns и Microns ⊕ скаляр):
- +, -: точная целочисленная арифметика над raw
- *, / со скаляром: через float, затем обратная конверсия
- *, / с Microns: произведение/частное raw (см. ниже)

ИЗВЕСТНАЯ ОСОБЕННОСТЬ МОДЕЛИ:
Microns * Microns и Microns / Microns работают над raw как над
безразмерными целыми. Физически это mm² (или безразмерное отношение),
а не длина. Поведение сохранено намеренно, отдельного типа "площадь" нет.

Сериализация: pydantic dataclass, сериализуется как {"raw": <int>}.
"""

from dataclasses import dataclass
from typing import ClassVar

import structlog
from pydantic import Field
from pydantic.dataclasses import dataclass as pydantic_dataclass

from microns.core.domain.exceptions import (
    MicronsAbsOverflow,
    MicronsDivideByZero,
    MicronsOutOfRange,
    MicronsOverflow,
)
from microns.core.domain.units import (
    MAX_MM,
    MIN_MM,
    is_convertible_mm,
    mm_to_raw,
    raw_to_mm,
)
from microns.core.math.numerical_safeguards import (
    I32_MAX,
    I32_MIN,
    div_trunc,
    fits_i32,
    is_nan,
    is_real_number,
)

logger = structlog.get_logger(__name__)


# =============================================================================
# REJECT REASONS
# =============================================================================

REJECT_NOT_A_NUMBER_TYPE = "not_a_number_type"
REJECT_NAN_INPUT = "nan_input"
REJECT_BELOW_MIN = "below_min"
REJECT_ABOVE_MAX = "above_max"


def _reject_reason(value: object) -> str | None:
    """Причина отказа конверсии или None, если конверсия определена."""
    if not is_real_number(value):
        return REJECT_NOT_A_NUMBER_TYPE
    if is_nan(value):
        return REJECT_NAN_INPUT
    if value <= MIN_MM:
        return REJECT_BELOW_MIN
    if value >= MAX_MM:
        return REJECT_ABOVE_MAX
    return None


# =============================================================================
# MICRONS
# =============================================================================


@pydantic_dataclass(frozen=True, order=True)
class Microns:
    """
    Длина в микронах (1/1000 mm), хранимая как i32.

    Равенство, порядок и хеш определены структурно по raw.
    Immutable (frozen=True): все операции возвращают новый экземпляр.

    Прямое создание Microns(raw) принимает любой int из диапазона i32;
    bool, float и значения вне i32 отклоняются pydantic-валидацией.
    """

    raw: int = Field(default=0, ge=I32_MIN, le=I32_MAX, strict=True)

    ZERO: ClassVar["Microns"]
    MIN: ClassVar["Microns"]
    MAX: ClassVar["Microns"]

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    @classmethod
    def from_float(cls, value: float) -> "Microns":
        """
        Конверсия mm (float) → Microns с усечением к нулю.

        Args:
            value: Значение в миллиметрах

        Returns:
            Microns(trunc(value * 1000.0))

        Raises:
            TypeError: Если value не int/float (bool отклоняется)
            MicronsOutOfRange: Если value равен NaN или вне (MIN_MM, MAX_MM)

        Examples:
            >>> Microns.from_float(0.0019)
            Microns(raw=1)
            >>> Microns.from_float(-0.0019)
            Microns(raw=-1)
        """
        reason = _reject_reason(value)

        if reason == REJECT_NOT_A_NUMBER_TYPE:
            raise TypeError(f"Microns expects a float in mm, got {type(value).__name__}")

        if reason is not None:
            logger.debug("microns_conversion_rejected", value=value, reason=reason)
            raise MicronsOutOfRange(
                f"Cannot convert {value!r} mm to Microns: must be non-NaN and "
                f"within ({MIN_MM}, {MAX_MM}) ({reason})"
            )

        return cls(mm_to_raw(value))

    from_mm = from_float

    @classmethod
    def try_from_float(cls, value: float) -> "MicronsConversion":
        """
        Конверсия без исключений: результат с флагом accepted.

        Для внешнего ввода, где отказ является ожидаемым исходом.

        Returns:
            MicronsConversion(accepted=True, value=Microns(...)) или
            MicronsConversion(accepted=False, value=None, reject_reason=...)
        """
        reason = _reject_reason(value)

        if reason is not None:
            return MicronsConversion(
                accepted=False,
                value=None,
                reject_reason=reason,
                details=f"{value!r} is not convertible to Microns ({reason})",
            )

        micron_value = cls(mm_to_raw(value))
        return MicronsConversion(
            accepted=True,
            value=micron_value,
            reject_reason="",
            details=f"{value!r} mm -> {micron_value.raw} um",
        )

    def to_float(self) -> float:
        """Конверсия Microns → mm (raw / 1000.0). Всегда представимо."""
        return raw_to_mm(self.raw, validate=False)

    to_mm = to_float

    def __float__(self) -> float:
        return self.to_float()

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    @classmethod
    def _checked(cls, value: int, operation: str) -> "Microns":
        """Результат целочисленной операции, если он помещается в i32."""
        if not fits_i32(value):
            raise MicronsOverflow(
                f"Microns {operation} overflow: result {value} outside [{I32_MIN}, {I32_MAX}]"
            )
        return cls(value)

    def __add__(self, other: object) -> "Microns":
        if isinstance(other, Microns):
            return Microns._checked(self.raw + other.raw, "add")
        if is_real_number(other):
            return self + Microns.from_float(other)
        return NotImplemented

    def __sub__(self, other: object) -> "Microns":
        if isinstance(other, Microns):
            return Microns._checked(self.raw - other.raw, "sub")
        if is_real_number(other):
            return self - Microns.from_float(other)
        return NotImplemented

    def __mul__(self, other: object) -> "Microns":
        # Microns * Microns: произведение raw (размерность mm², см. модуль)
        if isinstance(other, Microns):
            return Microns._checked(self.raw * other.raw, "mul")
        if is_real_number(other):
            try:
                factor = float(other)
            except OverflowError:
                # int вне диапазона float: ненулевое произведение заведомо вне i32
                if self.raw == 0:
                    return Microns.ZERO
                reason = REJECT_ABOVE_MAX if (self.raw > 0) == (other > 0) else REJECT_BELOW_MIN
                logger.debug("microns_conversion_rejected", value=f"{self.raw} * int", reason=reason)
                raise MicronsOutOfRange(
                    f"Cannot multiply {self!r} by int outside float range ({reason})"
                ) from None
            return Microns.from_float(self.to_float() * factor)
        return NotImplemented

    def __truediv__(self, other: object) -> "Microns":
        if isinstance(other, Microns):
            if other.raw == 0:
                logger.debug("microns_divide_by_zero", dividend=self.raw, divisor="Microns(0)")
                raise MicronsDivideByZero(f"Cannot divide {self!r} by Microns(raw=0)")
            return Microns._checked(div_trunc(self.raw, other.raw), "div")
        if is_real_number(other):
            if other == 0:
                logger.debug("microns_divide_by_zero", dividend=self.raw, divisor=other)
                raise MicronsDivideByZero(f"Cannot divide {self!r} by scalar {other!r}")
            try:
                divisor = float(other)
            except OverflowError:
                # |raw| < 2**31 при делителе > 1e308: частное меньше микрона, усекается к нулю
                return Microns.ZERO
            return Microns.from_float(self.to_float() / divisor)
        return NotImplemented

    def __neg__(self) -> "Microns":
        return Microns._checked(-self.raw, "neg")

    def __pos__(self) -> "Microns":
        return self

    def abs(self) -> "Microns":
        """
        Абсолютное значение.

        Raises:
            MicronsAbsOverflow: Для Microns.MIN (-2**31 не имеет пары в i32)
        """
        if self.raw == I32_MIN:
            raise MicronsAbsOverflow(
                f"abs() of Microns.MIN ({I32_MIN}) has no i32 representation"
            )
        return Microns(abs(self.raw))

    def __abs__(self) -> "Microns":
        return self.abs()

    def saturating_abs(self) -> "Microns":
        """Абсолютное значение с насыщением: abs(MIN) -> MAX."""
        if self.raw == I32_MIN:
            return Microns.MAX
        return Microns(abs(self.raw))

    # -------------------------------------------------------------------------
    # Отображение
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        """Точное отображение в mm без промежуточного float: 1500 -> '1.500mm'."""
        sign = "-" if self.raw < 0 else ""
        whole, frac = divmod(abs(self.raw), 1000)
        return f"{sign}{whole}.{frac:03d}mm"


Microns.ZERO = Microns(0)
Microns.MIN = Microns(I32_MIN)
Microns.MAX = Microns(I32_MAX)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class MicronsConversion:
    """Результат try_from_float."""

    accepted: bool
    value: Microns | None
    reject_reason: str

    # Детали
    details: str
