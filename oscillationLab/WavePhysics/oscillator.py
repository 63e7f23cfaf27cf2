# -- Single Oscillator -- #

'''
Simple harmonic oscillator evaluated from closed-form trigonometry.

The oscillator angle advances uniformly with time:

    theta(t) = 2*pi*f*t + phi

and is shown either as uniform circular motion (A cos theta, A sin theta)
or as its projection on the x-axis (A cos theta, 0), which is simple
harmonic motion.
'''

from __future__ import annotations

import math
from dataclasses import dataclass

from oscillationLab.WavePhysics import constants as c


@dataclass
class Oscillator:
    '''
    A single oscillator driven by an external time source.

    Parameters:
    -----------
    amplitude : float
        Peak displacement. Negative values flip the waveform.
    frequency : float
        Cycles per unit time
    phaseShiftDegrees : float
        Phase offset phi in degrees, normally within [0, 360]
    useCircularMotion : bool
        Move on the full circle instead of the projected axis
    projectToAxis : bool
        Move along the x-axis when circular motion is off
    '''

    amplitude: float = 1.0
    frequency: float = 1.0
    phaseShiftDegrees: float = 0.0
    useCircularMotion: bool = False
    projectToAxis: bool = True

    @property
    def phaseShiftRadians(self) -> float:
        '''Phase offset phi in radians.'''
        return self.phaseShiftDegrees * c.deg2Rad

    @property
    def angularFrequency(self) -> float:
        '''Angular frequency omega = 2*pi*f [rad per unit time].'''
        return 2.0 * math.pi * self.frequency

    def angle(self, t: float) -> float:
        '''
        Oscillator angle theta = 2*pi*f*t + phi.

        Parameters:
        -----------
        t : float
            Elapsed time

        Returns:
        --------
        float : Angle in radians
        '''
        return t * self.frequency * 2.0 * math.pi + self.phaseShiftRadians

    def projectedValue(self, t: float) -> float:
        '''Projected SHM displacement A*cos(theta).'''
        return self.amplitude * math.cos(self.angle(t))

    def position(self, t: float) -> tuple[float, float, float] | None:
        '''
        Local position of the oscillating body at time t.

        Parameters:
        -----------
        t : float
            Elapsed time

        Returns:
        --------
        tuple[float, float, float] | None : (x, y, 0), or None when neither
            circular motion nor axis projection is enabled and the body
            keeps its previous position
        '''
        theta = self.angle(t)

        if self.useCircularMotion:
            return (
                self.amplitude * math.cos(theta),
                self.amplitude * math.sin(theta),
                0.0,
            )
        elif self.projectToAxis:
            return (self.amplitude * math.cos(theta), 0.0, 0.0)

        return None
