"""
Microns Exceptions — таксономия ошибок

Все ошибки наследуют MicronsError (ArithmeticError) и дополнительно
соответствующий встроенный тип, чтобы вызывающий код мог ловить
их как стандартные исключения Python.

Политика: ошибка немедленная и полная для одной операции.
Никаких fallback-значений, никаких повторов.
"""


class MicronsError(ArithmeticError):
    """Базовая ошибка операций над Microns."""

    pass


class MicronsOutOfRange(MicronsError, ValueError):
    """
    Float не может быть конвертирован в Microns.

    Вход равен NaN или лежит вне (MIN_MM, MAX_MM).
    Проверка выполняется ДО конверсии.
    """

    pass


class MicronsDivideByZero(MicronsError, ZeroDivisionError):
    """
    Деление на Microns с raw == 0 или на скаляр 0.0.

    Никогда не возвращается "осмысленное" значение вроде Microns(0).
    """

    pass


class MicronsAbsOverflow(MicronsError, OverflowError):
    """
    abs(Microns.MIN): у -2**31 нет положительного представления в i32.

    Для насыщения до Microns.MAX используйте saturating_abs().
    """

    pass


class MicronsOverflow(MicronsError, OverflowError):
    """Целочисленный результат вышел за пределы i32 (без wrap-around)."""

    pass
