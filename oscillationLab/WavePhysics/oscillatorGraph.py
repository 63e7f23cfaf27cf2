# -- Oscillator Time Graph -- #

'''
Scrolling displacement-vs-time graph for a pair of oscillators.

Each trace shows the last timeWindow seconds of A*cos(theta): sample i
looks back tau_i = i/(n-1) * timeWindow seconds, so the newest value sits
at the graph origin and older values trail to the right.
'''

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from oscillationLab.WavePhysics import constants as c
from oscillationLab.WavePhysics.oscillator import Oscillator
from oscillationLab.WavePhysics.protocols import Polyline


def sampleOscillatorGraph(
    reference: Oscillator,
    phaseDegrees: float,
    elapsed: float,
    timeWindow: float = c.graphTimeWindow,
    resolution: int = c.graphResolution,
    verticalScale: float = c.graphVerticalScale,
    horizontalScale: float = c.graphHorizontalScale,
    origin: Sequence[float] = (0.0, 0.0, 0.0),
) -> np.ndarray:
    '''
    Sample one trace of the time graph.

    Frequency and amplitude come from the reference oscillator so both
    traces share a time base; only the phase differs per trace.

    Parameters:
    -----------
    reference : Oscillator
        Oscillator supplying frequency and amplitude
    phaseDegrees : float
        Phase of this trace in degrees
    elapsed : float
        Time since the graph started
    timeWindow : float
        Seconds visible on the graph
    resolution : int
        Number of points (>= 2)
    verticalScale : float
        Scale applied to displacement
    horizontalScale : float
        Graph units per second
    origin : Sequence[float]
        Graph origin (x, y, z)

    Returns:
    --------
    np.ndarray : Points of shape (resolution, 3)
    '''
    phaseRad = phaseDegrees * c.deg2Rad
    fraction = np.arange(resolution, dtype=float) / (resolution - 1)
    tau = fraction * timeWindow

    angle = (elapsed - tau) * reference.frequency * 2.0 * math.pi + phaseRad
    y = reference.amplitude * np.cos(angle) * verticalScale
    x = tau * horizontalScale

    ox, oy = origin[0], origin[1]
    oz = origin[2] if len(origin) > 2 else 0.0
    return np.column_stack((ox + x, oy + y, np.full_like(x, oz)))


class OscillatorGraph:
    '''
    Draws the time graphs of oscillators A and B into two polylines.

    Elapsed time is measured from the host time passed to start().
    '''

    def __init__(
        self,
        oscillatorA: Oscillator,
        oscillatorB: Oscillator,
        lineA: Polyline | None,
        lineB: Polyline | None,
        timeWindow: float = c.graphTimeWindow,
        resolution: int = c.graphResolution,
        verticalScale: float = c.graphVerticalScale,
        horizontalScale: float = c.graphHorizontalScale,
        origin: Sequence[float] = (0.0, 0.0, 0.0),
    ) -> None:
        self.oscillatorA = oscillatorA
        self.oscillatorB = oscillatorB
        self.lineA = lineA
        self.lineB = lineB
        self.timeWindow = timeWindow
        self.resolution = resolution
        self.verticalScale = verticalScale
        self.horizontalScale = horizontalScale
        self.origin = tuple(origin)
        self.startTime = 0.0

    def start(self, hostTime: float = 0.0) -> None:
        self.startTime = hostTime
        for line in (self.lineA, self.lineB):
            if line is not None:
                line.setPointCount(self.resolution)

    def _trace(self, phaseDegrees: float, elapsed: float) -> np.ndarray:
        return sampleOscillatorGraph(
            self.oscillatorA, phaseDegrees, elapsed,
            self.timeWindow, self.resolution,
            self.verticalScale, self.horizontalScale, self.origin,
        )

    def update(self, hostTime: float) -> tuple[np.ndarray, np.ndarray]:
        '''
        Recompute both traces and write them into the present lines.

        Returns:
        --------
        tuple[np.ndarray, np.ndarray] : Trace A and trace B points
        '''
        elapsed = hostTime - self.startTime
        traceA = self._trace(self.oscillatorA.phaseShiftDegrees, elapsed)
        traceB = self._trace(self.oscillatorB.phaseShiftDegrees, elapsed)

        for line, trace in ((self.lineA, traceA), (self.lineB, traceB)):
            if line is None:
                continue
            for i, point in enumerate(trace):
                line.setPoint(i, point)

        return traceA, traceB
