# -- Uniform Circular Motion -- #

'''
Reference circle and rotating radii linking circular motion to the waves.

A point moving uniformly on a circle of radius A projects onto an axis
as A*cos(omega*t + theta). Two such points (offset by theta) are drawn
on a circle left of the wave domain, with connector segments running to
the matching sample of each wave.
'''

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from oscillationLab.WavePhysics.waveSettings import STATIONARY


@dataclass
class RotatingPoints:
    '''Circle center and the two rotating points at one instant.'''

    center: np.ndarray
    point1: np.ndarray
    point2: np.ndarray
    angle1: float
    angle2: float

    @property
    def radiusLine1(self) -> np.ndarray:
        return np.array([self.center, self.point1])

    @property
    def radiusLine2(self) -> np.ndarray:
        return np.array([self.center, self.point2])


def sampleCircle(radius: float, xOffset: float, segmentCount: int) -> np.ndarray:
    '''
    Closed polyline around a circle centered at (xOffset, 0, 0).

    Parameters:
    -----------
    radius : float
        Circle radius (the wave amplitude)
    xOffset : float
        Center x coordinate
    segmentCount : int
        Number of segments M; M + 1 points are returned so the last
        point closes the loop

    Returns:
    --------
    np.ndarray : Points of shape (M + 1, 3)
    '''
    angles = np.arange(segmentCount + 1, dtype=float) / segmentCount * 2.0 * math.pi
    return np.column_stack((
        xOffset + radius * np.cos(angles),
        radius * np.sin(angles),
        np.zeros_like(angles),
    ))


def rotatingPoints(
    amplitude: float,
    angularFrequency: float,
    t: float,
    theta: float,
    xOffset: float,
) -> RotatingPoints:
    '''
    Positions of the two rotating points.

    Point 1 leads by theta: angle1 = omega*t + theta, angle2 = omega*t.

    Parameters:
    -----------
    amplitude : float
        Circle radius
    angularFrequency : float
        Angular frequency omega
    t : float
        Elapsed (speed-scaled) time
    theta : float
        Phase offset in radians
    xOffset : float
        Circle center x coordinate

    Returns:
    --------
    RotatingPoints : Center, both points and their angles
    '''
    angle1 = angularFrequency * t + theta
    angle2 = angularFrequency * t

    center = np.array([xOffset, 0.0, 0.0])
    p1 = np.array([xOffset + amplitude * math.cos(angle1), amplitude * math.sin(angle1), 0.0])
    p2 = np.array([xOffset + amplitude * math.cos(angle2), amplitude * math.sin(angle2), 0.0])

    return RotatingPoints(center=center, point1=p1, point2=p2, angle1=angle1, angle2=angle2)


def connectorIndex(model: str, sampleCount: int, t: float, slideFrequency: float) -> int:
    '''
    Wave sample index a connector attaches to.

    Moving waves pass through x = 0, so the connector anchors at index 0.
    A stationary pattern does not move, so the anchor slides back and
    forth along it on a slow sine to trace the pattern.

    Parameters:
    -----------
    model : str
        Display model
    sampleCount : int
        Number of wave samples N
    t : float
        Elapsed time
    slideFrequency : float
        Slide rate [Hz]

    Returns:
    --------
    int : Index in [0, N - 1]
    '''
    if model != STATIONARY:
        return 0

    fraction = 0.5 * (1.0 + math.sin(2.0 * math.pi * slideFrequency * t))
    return int(round((sampleCount - 1) * fraction))


def connectorSegment(point: np.ndarray, wavePoints: np.ndarray, index: int) -> np.ndarray:
    '''Segment from a rotating point to the wave sample at index, shape (2, 3).'''
    target = np.array([wavePoints[index][0], wavePoints[index][1], 0.0])
    return np.array([np.asarray(point, dtype=float), target])
