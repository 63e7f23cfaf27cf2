# -- In-Memory Render Resources -- #

'''
Plain Python implementations of the render host protocols.

Used by the CLI runner, the Plotly figures and the tests as a headless
stand-in for a drawing surface.
'''

from __future__ import annotations

from typing import Sequence

import numpy as np


class PolylineBuffer:
    '''
    Fixed-capacity polyline backed by an (n, 3) numpy array.

    Satisfies the Polyline protocol.
    '''

    def __init__(self, count: int = 0) -> None:
        self.enabled: bool = True
        self._points = np.zeros((count, 3))

    @property
    def pointCount(self) -> int:
        return self._points.shape[0]

    @property
    def points(self) -> np.ndarray:
        '''Copy of the current points, shape (n, 3).'''
        return self._points.copy()

    def setPointCount(self, count: int) -> None:
        '''Resize the buffer; existing slots are discarded.'''
        self._points = np.zeros((count, 3))

    def setPoint(self, index: int, point: Sequence[float]) -> None:
        x, y = point[0], point[1]
        z = point[2] if len(point) > 2 else 0.0
        self._points[index] = (x, y, z)

    def getPoint(self, index: int) -> tuple[float, float, float]:
        x, y, z = self._points[index]
        return (float(x), float(y), float(z))


class LabelBuffer:
    '''Text label that remembers the last string written to it.'''

    def __init__(self, text: str = '') -> None:
        self.text = text

    def setText(self, text: str) -> None:
        self.text = text


class PointBuffer:
    '''Point marker holding a single local position.'''

    def __init__(self) -> None:
        self.position: tuple[float, float, float] = (0.0, 0.0, 0.0)

    def setPosition(self, point: Sequence[float]) -> None:
        z = point[2] if len(point) > 2 else 0.0
        self.position = (float(point[0]), float(point[1]), float(z))
