# -- Dual-Wave Sampler -- #

'''
Samples two equal-amplitude waves and their superposition along a line.

For N sample points across a domain of length L:

    x_i   = (i / (N - 1)) * L
    phase = k*x - omega*t      (moving / traveling wave)
    phase = k*x                (stationary pattern, time independent)
    y1    = A * cos(phase)
    y2    = A * cos(phase + theta)
    ySum  = y1 + y2            (pointwise linear superposition)

Every call produces complete sequences; nothing is carried between frames.
Requires N >= 2.
'''

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from oscillationLab.WavePhysics import constants as c
from oscillationLab.WavePhysics.waveSettings import WaveSettings, MOVING, STATIONARY, NONE


@dataclass
class WaveFrame:
    '''
    Sampled wave state at one instant.

    y arrays are unscaled physical values; the point properties apply
    verticalScale and append z = 0 for writing into polylines.
    '''

    x: np.ndarray
    y1: np.ndarray
    y2: np.ndarray
    ySum: np.ndarray
    model: str
    showSum: bool
    time: float
    verticalScale: float = 1.0

    @property
    def sampleCount(self) -> int:
        return self.x.shape[0]

    @property
    def wavesVisible(self) -> bool:
        '''Base waves are drawn only in moving or stationary mode.'''
        return self.model != NONE

    @property
    def sumVisible(self) -> bool:
        return self.showSum

    def _points(self, y: np.ndarray) -> np.ndarray:
        return np.column_stack((self.x, y * self.verticalScale, np.zeros_like(self.x)))

    @property
    def wave1Points(self) -> np.ndarray:
        return self._points(self.y1)

    @property
    def wave2Points(self) -> np.ndarray:
        return self._points(self.y2)

    @property
    def sumPoints(self) -> np.ndarray:
        return self._points(self.ySum)


######################################################################
# -- Sampling Primitives -- #
######################################################################

def sampleXCoordinates(sampleCount: int, domainLength: float) -> np.ndarray:
    '''
    Evenly spaced x coordinates from 0 to domainLength inclusive.

    Parameters:
    -----------
    sampleCount : int
        Number of samples N (N >= 2)
    domainLength : float
        Domain length L

    Returns:
    --------
    np.ndarray : x_i = (i / (N - 1)) * L, shape (N,)
    '''
    indices = np.arange(sampleCount, dtype=float)
    return indices / (sampleCount - 1) * domainLength


def wavePhase(x, t: float, waveNumber: float, angularFrequency: float, model: str = MOVING):
    '''
    Phase term for the selected wave model.

    Parameters:
    -----------
    x : float | np.ndarray
        Horizontal position(s)
    t : float
        Elapsed (speed-scaled) time
    waveNumber : float
        Spatial wavenumber k
    angularFrequency : float
        Angular frequency omega
    model : str
        'moving' for k*x - omega*t, 'stationary' for k*x

    Returns:
    --------
    float | np.ndarray : Phase in radians
    '''
    if model == STATIONARY:
        return waveNumber * x
    return waveNumber * x - angularFrequency * t


######################################################################
# -- Frame Sampling -- #
######################################################################

def sampleWaves(
    settings: WaveSettings,
    amplitude: float,
    thetaDegrees: float,
    t: float,
    model: str | None = None,
    showSum: bool | None = None,
) -> WaveFrame:
    '''
    Sample both waves and their sum at time t.

    Parameters:
    -----------
    settings : WaveSettings
        Sampling configuration
    amplitude : float
        Shared wave amplitude A
    thetaDegrees : float
        Phase offset of the second wave in degrees
    t : float
        Elapsed time, already multiplied by settings.speed
    model : str | None
        Overrides settings.model when given
    showSum : bool | None
        Overrides settings.showSum when given

    Returns:
    --------
    WaveFrame : Sampled x, y1, y2 and ySum. ySum is all zeros when the
        sum is hidden; y1 and y2 are all zeros in 'none' mode.
    '''
    if model is None:
        model = settings.model
    if showSum is None:
        showSum = settings.showSum

    theta = thetaDegrees * c.deg2Rad
    x = sampleXCoordinates(settings.sampleCount, settings.domainLength)

    if model in (MOVING, STATIONARY):
        phase = wavePhase(x, t, settings.waveNumber, settings.angularFrequency, model)
        y1 = amplitude * np.cos(phase)
        y2 = amplitude * np.cos(phase + theta)
    else:
        y1 = np.zeros_like(x)
        y2 = np.zeros_like(x)

    if showSum:
        ySum = y1 + y2
    else:
        ySum = np.zeros_like(x)

    return WaveFrame(
        x=x, y1=y1, y2=y2, ySum=ySum,
        model=model,
        showSum=showSum,
        time=t,
        verticalScale=settings.verticalScale,
    )
