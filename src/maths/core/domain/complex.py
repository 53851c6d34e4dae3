"""
Complex — Immutable комплексное число с extended-семантикой IEEE-754

Модуль определяет единственный value type Complex:
- Представление (real, image) и фабрика из полярных координат
- Предикаты NaN/Inf/finite, модуль и аргумент
- Арифметика (negate/add/subtract/multiply/divide) с явной пропагацией NaN/Inf
- Трансцендентные функции (reciprocal/exp/log/pow/sqrt/sqrt1z)
- Равенство (включая int/float), total order, hash, форматирование

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна операция не бросает исключение: ошибки выражаются через NaN/Inf
2. Любой NaN-операнд даёт Complex.NAN
3. Деление на комплексный ноль даёт NaN, а не Inf
4. Экземпляры неизменяемы (frozen=True), каждая операция возвращает новый объект
5. Равные значения имеют равный hash, в том числе Complex(x, 0) и x

ФОРМУЛЫ:
    exp(a + bi)  = polar(exp(a), b)
    log(a + bi)  = ln|a + bi| + arg(a + bi)i
    pow(z, x)    = exp(log(z) * x)
    sqrt(a + bi) = (t, b / 2t),                 a >= 0
                 = (|b| / 2t, sign(b) * t),     a < 0
                   где t = sqrt((|a| + |z|) / 2)
"""

import math
import numbers
from typing import Any, ClassVar, Final, Union

from pydantic import BaseModel, Field

from maths.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    compare_floats,
    copy_sign,
    ieee_divide,
    safe_cos,
    safe_exp,
    safe_log,
    safe_sin,
    to_float,
)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Hash для любого значения с NaN-компонентой.
# NaN не равен ничему, поэтому достаточно стабильной константы.
NAN_HASH: Final[int] = 0


# Порядок компонент для позиционного конструктора
_COMPONENTS: Final[tuple[str, str]] = ("real", "image")

# Входы с max(|a|, |b|) ниже порога масштабируются в sqrt, чтобы
# промежуточное t не уходило в subnormal-диапазон
SQRT_RESCALE_THRESHOLD: Final[float] = 2.0**-1000

# Масштаб 2^106 для входа даёт 2^53 для корня (степени двойки точны)
SQRT_SCALE_UP: Final[float] = 2.0**106
SQRT_SCALE_DOWN: Final[float] = 2.0**-53


# Операнд арифметики: Complex или любое число Python (int, float, Fraction, complex)
ComplexLike = Union["Complex", numbers.Complex]


# =============================================================================
# COMPLEX MODEL
# =============================================================================


class Complex(BaseModel):
    """
    Комплексное число a + bi.

    Immutable модель (frozen=True). Компоненты принимаются как есть:
    NaN и Inf валидны и несут смысл. Нечисловые компоненты отклоняются
    pydantic (ValidationError), int расширяется до float.

    Examples:
        >>> z = Complex(3, 4)
        >>> z.abs()
        5.0
        >>> str(z * Complex(2, 0))
        '(6.0 + 8.0i)'
    """

    real: float = Field(..., description="Действительная часть")
    image: float = Field(..., description="Мнимая часть")

    model_config = {"frozen": True, "ser_json_inf_nan": "constants"}

    # Именованные константы (инициализируются после объявления класса)
    I: ClassVar["Complex"]
    ZERO: ClassVar["Complex"]
    ONE: ClassVar["Complex"]
    TWO: ClassVar["Complex"]
    PI: ClassVar["Complex"]
    E: ClassVar["Complex"]
    NAN: ClassVar["Complex"]
    INFINITY: ClassVar["Complex"]

    def __init__(self, *args: float, **data: Any) -> None:
        # Позиционные аргументы сопоставляются с (real, image);
        # отсутствующие и невалидные поля отклоняет pydantic (ValidationError)
        if len(args) > len(_COMPONENTS):
            raise TypeError(
                f"Complex takes at most {len(_COMPONENTS)} positional arguments "
                f"({len(args)} given)"
            )
        for name, value in zip(_COMPONENTS, args):
            if name in data:
                raise TypeError(f"Complex got multiple values for argument {name!r}")
            data[name] = value
        super().__init__(**data)

    # =========================================================================
    # КОНСТРУИРОВАНИЕ
    # =========================================================================

    @classmethod
    def polar(cls, radius: float, theta: float) -> "Complex":
        """
        Complex из полярных координат.

        Формула: (radius * cos(theta), radius * sin(theta))

        Args:
            radius: Модуль (без ограничений домена)
            theta: Угол в радианах (без ограничений домена)

        Returns:
            Новый Complex; NaN-компоненты при NaN/Inf входах или переполнении
        """
        return cls(radius * safe_cos(theta), radius * safe_sin(theta))

    @classmethod
    def from_complex(cls, value: numbers.Complex) -> "Complex":
        """
        Complex из любого числа Python (int, float, Fraction, complex).

        Числа вне диапазона float (например, 10**400) становятся ±Inf.

        Examples:
            >>> Complex.from_complex(2)
            Complex(real=2.0, image=0.0)
            >>> Complex.from_complex(1 - 2j)
            Complex(real=1.0, image=-2.0)
        """
        return cls(to_float(value.real), to_float(value.imag))

    @property
    def imag(self) -> float:
        """Синоним image (протокол чисел Python)."""
        return self.image

    # =========================================================================
    # ПРЕДИКАТЫ И МОДУЛЬ
    # =========================================================================

    @property
    def is_nan(self) -> bool:
        """True если хотя бы одна компонента NaN."""
        return math.isnan(self.real) or math.isnan(self.image)

    @property
    def is_infinite(self) -> bool:
        """True если не NaN и хотя бы одна компонента бесконечна."""
        return not self.is_nan and (math.isinf(self.real) or math.isinf(self.image))

    @property
    def is_finite(self) -> bool:
        """True если не NaN и обе компоненты конечны."""
        return not self.is_nan and math.isfinite(self.real) and math.isfinite(self.image)

    def abs(self) -> float:
        """
        Модуль комплексного числа |a + bi|.

        Обе компоненты проверяются независимо: сначала на NaN, затем на Inf.
        Для конечных значений используется math.hypot, который не
        переполняется на больших компонентах (в отличие от sqrt(a*a + b*b)).

        Returns:
            - NaN если is_nan
            - +Inf если is_infinite
            - sqrt(a^2 + b^2) иначе
        """
        if self.is_nan:
            return math.nan

        if self.is_infinite:
            return math.inf

        return math.hypot(self.real, self.image)

    def argument(self) -> float:
        """
        Аргумент (угол к положительной действительной оси).

        Мнимая часть -0.0 приводится к 0.0, поэтому точки отрицательной
        действительной оси дают pi, а не -pi.

        Returns:
            atan2(image, real) в диапазоне (-pi, pi]
        """
        image = self.image if self.image != 0.0 else 0.0
        return math.atan2(image, self.real)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def negate(self) -> "Complex":
        """Унарный минус: (-a, -b); NaN → NaN."""
        if self.is_nan:
            return Complex.NAN

        return Complex(-self.real, -self.image)

    def add(self, other: ComplexLike) -> "Complex":
        """
        Сложение по компонентам.

        Бесконечности комбинируются по правилам float (Inf + -Inf = NaN).
        """
        other = _widen(other)
        if self.is_nan or other.is_nan:
            return Complex.NAN

        return Complex(self.real + other.real, self.image + other.image)

    def subtract(self, other: ComplexLike) -> "Complex":
        """Вычитание по компонентам."""
        other = _widen(other)
        if self.is_nan or other.is_nan:
            return Complex.NAN

        return Complex(self.real - other.real, self.image - other.image)

    def multiply(self, other: ComplexLike) -> "Complex":
        """
        Произведение (ac - bd, ad + bc).

        Если у любого операнда есть бесконечная компонента, возвращается
        Complex.INFINITY (а не покомпонентный результат с Inf * 0 = NaN).

        Args:
            other: Второй множитель

        Returns:
            NaN если любой операнд NaN, INFINITY если любой бесконечен,
            иначе произведение
        """
        other = _widen(other)
        if self.is_nan or other.is_nan:
            return Complex.NAN

        if self.is_infinite or other.is_infinite:
            return Complex.INFINITY

        return Complex(
            self.real * other.real - self.image * other.image,
            self.real * other.image + self.image * other.real,
        )

    def divide(self, other: ComplexLike) -> "Complex":
        """
        Деление по алгоритму Smith.

        Вместо |divisor|^2 используется отношение q меньшей компоненты
        делителя к большей, что исключает промежуточное переполнение.

        Args:
            other: Делитель

        Returns:
            - NaN если любой операнд NaN
            - NaN если делитель (0, 0)
            - ZERO если делитель бесконечен, а делимое нет
            - частное иначе

        Examples:
            >>> Complex(3, 4).divide(Complex(2, 0))
            Complex(real=1.5, image=2.0)
        """
        other = _widen(other)
        if self.is_nan or other.is_nan:
            return Complex.NAN

        c = other.real
        d = other.image
        if c == 0.0 and d == 0.0:
            return Complex.NAN

        if other.is_infinite and not self.is_infinite:
            return Complex.ZERO

        # Знаменатели ниже не меньше max(|c|, |d|) > 0
        if abs(c) < abs(d):
            q = c / d
            denominator = c * q + d
            return Complex(
                (self.real * q + self.image) / denominator,
                (self.image * q - self.real) / denominator,
            )

        q = d / c
        denominator = d * q + c
        return Complex(
            (self.image * q + self.real) / denominator,
            (self.image - self.real * q) / denominator,
        )

    # =========================================================================
    # ТРАНСЦЕНДЕНТНЫЕ ФУНКЦИИ
    # =========================================================================

    def conjugate(self) -> "Complex":
        """Сопряжённое число: conj(a + bi) = a - bi."""
        return Complex(self.real, -self.image)

    def reciprocal(self) -> "Complex":
        """
        Мультипликативная обратная величина 1 / (a + bi).

        Та же схема масштабирования, что и в divide: ветвление по большей
        по модулю компоненте.

        Returns:
            - NaN если is_nan
            - INFINITY для (0, 0)
            - ZERO если is_infinite
            - 1 / z иначе
        """
        if self.is_nan:
            return Complex.NAN

        if self.real == 0.0 and self.image == 0.0:
            return Complex.INFINITY

        if self.is_infinite:
            return Complex.ZERO

        if abs(self.real) < abs(self.image):
            q = self.real / self.image
            scale = 1.0 / (self.real * q + self.image)
            return Complex(scale * q, -scale)

        q = self.image / self.real
        scale = 1.0 / (self.image * q + self.real)
        return Complex(scale, -scale * q)

    def exp(self) -> "Complex":
        """
        Экспонента: exp(a + bi) = exp(a) * cos(b) + exp(a) * sin(b)i.

        Переполнение exp(a) даёт +Inf, а не OverflowError.
        """
        if self.is_nan:
            return Complex.NAN

        return Complex.polar(safe_exp(self.real), self.image)

    def log(self) -> "Complex":
        """
        Натуральный логарифм (главная ветвь).

        Формула: log(a + bi) = ln|a + bi| + arg(a + bi)i

        Returns:
            NaN если is_nan; для нуля действительная часть равна -Inf
        """
        if self.is_nan:
            return Complex.NAN

        return Complex(safe_log(self.abs()), self.argument())

    def pow(self, exponent: ComplexLike) -> "Complex":
        """
        Возведение в степень: exp(log(z) * exponent).

        Поведение на NaN/Inf наследуется от log, multiply и exp.
        """
        return self.log().multiply(exponent).exp()

    def sqrt(self) -> "Complex":
        """
        Квадратный корень (главная ветвь).

        Устойчивая half-angle формула: для a < 0 действительная часть
        вычисляется через |b| / 2t, что исключает катастрофическое
        сокращение вблизи отрицательной действительной оси.

        Знак мнимой части для a < 0 берётся от b по конвенции copy_sign:
        ноль (в том числе -0.0) считается положительным.

        Returns:
            - NaN если is_nan
            - ZERO для (0, 0)
            - sqrt(z) иначе

        Examples:
            >>> Complex(-4, 0).sqrt()
            Complex(real=0.0, image=2.0)
        """
        if self.is_nan:
            return Complex.NAN

        if self.real == 0.0 and self.image == 0.0:
            return Complex.ZERO

        if max(abs(self.real), abs(self.image)) < SQRT_RESCALE_THRESHOLD:
            root = Complex(self.real * SQRT_SCALE_UP, self.image * SQRT_SCALE_UP).sqrt()
            return Complex(root.real * SQRT_SCALE_DOWN, root.image * SQRT_SCALE_DOWN)

        # Половины складываются раздельно: (|a| + |z|) переполняется около 1e308
        t = math.sqrt(abs(self.real) / 2.0 + self.abs() / 2.0)
        if self.real >= 0.0:
            return Complex(t, ieee_divide(self.image, 2.0 * t))

        return Complex(
            ieee_divide(abs(self.image), 2.0 * t),
            copy_sign(1.0, self.image) * t,
        )

    def sqrt1z(self) -> "Complex":
        """sqrt(1 - z^2)."""
        return Complex.ONE.subtract(self.multiply(self)).sqrt()

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def compare_to(self, other: "Complex") -> int:
        """
        Лексикографическое сравнение: сначала real, затем image.

        Порядок тотальный: NaN-компонента больше любого числа и равна NaN,
        -0.0 равен 0.0.

        Returns:
            -1, 0 или +1
        """
        result = compare_floats(self.real, other.real)
        if result != 0:
            return result

        return compare_floats(self.image, other.image)

    def is_close(
        self,
        other: ComplexLike,
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Приближённое равенство с учётом машинной точности.

        Алгоритм (как math.isclose):
            |z - w| <= max(rel_tol * max(|z|, |w|), abs_tol)

        NaN не близок ничему; бесконечные значения близки только при
        точном равенстве.

        Args:
            other: Значение для сравнения
            rel_tol: Относительная толерантность (default: 1e-9)
            abs_tol: Абсолютная толерантность (default: 1e-12)

        Returns:
            True если значения близки
        """
        other = _widen(other)
        if self.is_nan or other.is_nan:
            return False

        if self == other:
            return True

        if self.is_infinite or other.is_infinite:
            return False

        diff = self.subtract(other).abs()
        return diff <= max(rel_tol * max(self.abs(), other.abs()), abs_tol)

    def _equals_number(self, other: numbers.Complex) -> bool:
        # Совпадение с числом только при image, точно равной нулю
        # (для builtin complex сравнивается и мнимая часть)
        return self.image == other.imag and self.real == other.real

    # =========================================================================
    # ПРОТОКОЛ PYTHON
    # =========================================================================

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Complex):
            return self.real == other.real and self.image == other.image
        if isinstance(other, numbers.Complex):
            return self._equals_number(other)
        return NotImplemented

    def __hash__(self) -> int:
        if self.is_nan:
            return NAN_HASH
        # Совпадает с hash(x) для Complex(x, 0) и с hash(complex(a, b))
        return hash(complex(self.real, self.image))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, Complex):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return f"({self.real} + {self.image}i)"

    def __complex__(self) -> complex:
        return complex(self.real, self.image)

    def __abs__(self) -> float:
        return self.abs()

    def __neg__(self) -> "Complex":
        return self.negate()

    def __add__(self, other: Any) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return _widen(other).add(self)

    def __sub__(self, other: Any) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return _widen(other).subtract(self)

    def __mul__(self, other: Any) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return _widen(other).multiply(self)

    def __truediv__(self, other: Any) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Any) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return _widen(other).divide(self)

    def __pow__(self, other: Any) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return self.pow(other)

    def __rpow__(self, other: Any) -> "Complex":
        if not _is_operand(other):
            return NotImplemented
        return _widen(other).pow(self)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

Complex.I = Complex(0.0, 1.0)
Complex.ZERO = Complex(0.0, 0.0)
Complex.ONE = Complex(1.0, 0.0)
Complex.TWO = Complex(2.0, 0.0)
Complex.PI = Complex(math.pi, 0.0)
Complex.E = Complex(math.e, 0.0)
Complex.NAN = Complex(math.nan, math.nan)
Complex.INFINITY = Complex(math.inf, math.inf)


# =============================================================================
# ПРИВЕДЕНИЕ ОПЕРАНДОВ
# =============================================================================


def _is_operand(value: Any) -> bool:
    return isinstance(value, (Complex, numbers.Complex))


def _widen(value: ComplexLike) -> Complex:
    """Расширение числа Python до Complex; TypeError для прочих типов."""
    if isinstance(value, Complex):
        return value
    if isinstance(value, numbers.Complex):
        return Complex.from_complex(value)
    raise TypeError(f"unsupported operand type for Complex: {type(value).__name__!r}")
