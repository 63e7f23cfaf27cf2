# -- Render Host Protocols -- #

'''
Protocols describing the externally owned resources the demos write into.

The host (an in-memory buffer, a Plotly figure, a Manim mobject) owns each
resource. The core only resizes polylines and overwrites their slots, sets
label text, and moves point markers.
'''

from __future__ import annotations

from typing import Protocol, Sequence


class Polyline(Protocol):
    '''
    A drawable line made of an indexed, host-sized list of points.
    '''

    enabled: bool

    def setPointCount(self, count: int) -> None:
        '''Resize the point buffer to count slots.'''
        ...

    def setPoint(self, index: int, point: Sequence[float]) -> None:
        '''Overwrite slot index with an (x, y, z) point.'''
        ...

    def getPoint(self, index: int) -> tuple[float, float, float]:
        '''Read back slot index.'''
        ...


class TextLabel(Protocol):
    '''A text widget showing a single string.'''

    def setText(self, text: str) -> None:
        ...


class PointTarget(Protocol):
    '''A marker positioned by the core (rotating circle points).'''

    def setPosition(self, point: Sequence[float]) -> None:
        ...
