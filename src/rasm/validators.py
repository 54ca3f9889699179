"""
Validation functions for attrs.
"""

from typing import Any

from attrs import define, field

__all__ = ["range_", "pair_of"]


@define(repr=False, frozen=True)
class _RangeValidator:
    minimum: Any = field()
    maximum: Any = field()

    def __call__(self, inst: Any, attr: Any, value: Any) -> None:
        try:
            in_range = self.minimum <= value and value <= self.maximum
        except TypeError:
            in_range = False

        if not in_range:
            raise ValueError(
                "'{name}' must be in range [{minimum!r}, {maximum!r}], got {value!r}".format(
                    name=attr.name,
                    minimum=self.minimum,
                    maximum=self.maximum,
                    value=value,
                )
            )

    def __repr__(self) -> str:
        return "<range_ validator with [{minimum!r}, {maximum!r}]>".format(
            minimum=self.minimum, maximum=self.maximum
        )


def range_(minimum: Any, maximum: Any) -> _RangeValidator:
    """
    A validator that raises a :exc:`ValueError` if the initializer is called
    with a value that does not belong in the [minimum, maximum] range. The
    check is performed using ``minimum <= value and value <= maximum``
    """
    return _RangeValidator(minimum, maximum)


@define(repr=False, frozen=True)
class _PairValidator:
    minimum: Any = field()
    maximum: Any = field()

    def __call__(self, inst: Any, attr: Any, value: Any) -> None:
        if value is None:
            return
        if len(value) != 2:
            raise ValueError(
                "'%s' must have exactly two items, got %r" % (attr.name, value)
            )
        check = _RangeValidator(self.minimum, self.maximum)
        for item in value:
            check(inst, attr, item)


def pair_of(minimum: Any, maximum: Any) -> _PairValidator:
    """
    A validator for optional two-item sequences whose items lie in the
    [minimum, maximum] range.
    """
    return _PairValidator(minimum, maximum)
