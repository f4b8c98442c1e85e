"""
Pad — дополнение конечной последовательности до минимальной длины.
"""

from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class Pad(Generic[T]):
    """
    Ленивый адаптер: элементы underlying, затем filler до длины size.

    Длина результата = max(len(underlying), size). Повторная итерация
    возможна только если underlying сам повторно итерируем (list, str),
    для одноразового итератора второй проход вернёт только filler'ы.

    Examples:
        >>> list(Pad("101", 5, "0"))
        ['1', '0', '1', '0', '0']
        >>> list(Pad([1, 2, 3], 2, 0))
        [1, 2, 3]
    """

    def __init__(self, underlying: Iterable[T], size: int, filler: T):
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self.underlying = underlying
        self.size = size
        self.filler = filler

    def __iter__(self) -> Iterator[T]:
        emitted = 0
        for item in self.underlying:
            emitted += 1
            yield item
        while emitted < self.size:
            emitted += 1
            yield self.filler
