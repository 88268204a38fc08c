from typing import List, Sequence, TypeVar

from secure_random.core.entropy import EntropySource
from secure_random.core.exceptions import EmptyChoiceSetError
from secure_random.core.sampling.primitives import next_int32

T = TypeVar("T")


def select_items(source: EntropySource, choices: Sequence[T], count: int) -> List[T]:
    """
    Draw `count` items from `choices` with replacement.

    Each output position gets its own independent uniform index draw.
    """
    if count < 0:
        raise ValueError("count must be non-negative")
    if count == 0:
        return []
    if len(choices) == 0:
        raise EmptyChoiceSetError(count)

    output = [None] * count
    for i in range(count):
        output[i] = choices[next_int32(source, 0, len(choices))]
    return output


def shuffle(source: EntropySource, values: Sequence[T]) -> List[T]:
    """Returns a new list holding `values` in a uniformly random order (Fisher-Yates)."""
    shuffled = list(values)
    for i in range(len(shuffled) - 1, 0, -1):
        j = next_int32(source, 0, i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
