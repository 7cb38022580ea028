"""
Base class declarations for geocalc
"""

__all__ = ['Point3DBase']

from typing import Dict, Iterator, Tuple, Union

import numpy as np
from typing_extensions import Self


class Point3DBase:
    """
    An immutable, ordered triple of floats expressed in a single reference frame.

    Subclasses name their three components through `_fields` and expose them as
    read-only properties. Two instances are equal only if they share the same
    concrete type and identical components, so a vector in one frame never
    compares equal to a vector in another.
    """

    __slots__ = ('_values',)

    _fields: Tuple[str, str, str] = ('first', 'second', 'third')

    def __init__(
        self,
        first: Union[float, int, str],
        second: Union[float, int, str],
        third: Union[float, int, str],
    ):
        object.__setattr__(self, '_values', (float(first), float(second), float(third)))

    def __setattr__(self, name, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if type(other) is not type(self):
            return False

        return self._values == other._values

    def __hash__(self):
        return hash((self.__class__.__name__, self._values))

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __len__(self) -> int:
        return 3

    def __getitem__(self, item):
        return self._values[item]

    def __repr__(self):
        return f'<{self.__class__.__name__}({", ".join(map(str, self._values))})>'

    def __reduce__(self):
        return self.__class__, self._values

    @classmethod
    def from_array(cls, arr) -> Self:
        """
        Creates an instance from any array-like holding exactly three values.

        Args:
            arr:
                A list, tuple, or numpy array of three numbers

        Returns:
            An instance of the calling class
        """
        values = np.asarray(arr, dtype=np.float64).ravel()
        if values.shape != (3,):
            raise ValueError(
                f'{cls.__name__} requires exactly 3 values, received {values.size}'
            )

        return cls(*values.tolist())

    def to_array(self) -> np.ndarray:
        """Converts the components to a float64 numpy array of shape (3,)"""
        return np.array(self._values, dtype=np.float64)

    def to_dict(self) -> Dict[str, float]:
        """Maps each component name to its value, e.g. {'x': ..., 'y': ..., 'z': ...}"""
        return dict(zip(self._fields, self._values))

    def to_float(self) -> Tuple[float, float, float]:
        """
        Converts the point to a tuple of floats, in component order.

        Returns:
            Tuple of length 3
        """
        return self._values
