# -- Wave Scene Binding -- #

'''
Per-frame driver connecting controls, sampler and circle to render resources.

The host calls start() once, then update(elapsed) every frame with its
elapsed time. Each call reads the current control values, recomputes all
samples and overwrites every present resource. A resource left as None
is skipped; everything else still updates.
'''

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from oscillationLab.WavePhysics.circleMotion import (
    RotatingPoints,
    connectorIndex,
    connectorSegment,
    rotatingPoints,
    sampleCircle,
)
from oscillationLab.WavePhysics.controls import ControlSnapshot, WaveControlPanel
from oscillationLab.WavePhysics.protocols import Polyline, PointTarget
from oscillationLab.WavePhysics.waveSampler import WaveFrame, sampleWaves
from oscillationLab.WavePhysics.waveSettings import WaveSettings


@dataclass
class SceneResources:
    '''Externally owned render resources; any of them may be absent.'''

    wave1: Polyline | None = None
    wave2: Polyline | None = None
    sumWave: Polyline | None = None
    circle: Polyline | None = None
    radiusLine1: Polyline | None = None
    radiusLine2: Polyline | None = None
    connector1: Polyline | None = None
    connector2: Polyline | None = None
    point1: PointTarget | None = None
    point2: PointTarget | None = None


@dataclass
class SceneFrame:
    '''Everything computed for one frame.'''

    controls: ControlSnapshot
    wave: WaveFrame
    circle: np.ndarray
    rotating: RotatingPoints
    connectorIndex: int
    connector1: np.ndarray
    connector2: np.ndarray


def writePolyline(line: Polyline | None, points: np.ndarray) -> None:
    '''Write points into an already sized polyline; no-op when line is None.'''
    if line is None:
        return
    for i, point in enumerate(points):
        line.setPoint(i, point)


class WaveScene:
    '''
    Dual-wave superposition scene with reference circle.

    Parameters:
    -----------
    settings : WaveSettings
        Sampling configuration; its model and showSum are replaced each
        frame by the control toggles
    controls : WaveControlPanel
        Slider and toggle state
    resources : SceneResources
        Host render resources
    '''

    def __init__(
        self,
        settings: WaveSettings | None = None,
        controls: WaveControlPanel | None = None,
        resources: SceneResources | None = None,
    ) -> None:
        self.settings = settings if settings is not None else WaveSettings()
        self.controls = controls if controls is not None else WaveControlPanel()
        self.resources = resources if resources is not None else SceneResources()

    def start(self) -> None:
        '''Size the host buffers and start the control panel.'''
        res = self.resources
        n = self.settings.sampleCount

        for line in (res.wave1, res.wave2, res.sumWave):
            if line is not None:
                line.setPointCount(n)

        if res.circle is not None:
            res.circle.setPointCount(self.settings.circleSampleCount + 1)

        for line in (res.radiusLine1, res.radiusLine2):
            if line is not None:
                line.setPointCount(2)

        self.controls.start()

    def update(self, elapsed: float) -> SceneFrame:
        '''
        Recompute and redraw the scene for one frame.

        Parameters:
        -----------
        elapsed : float
            Host elapsed time; multiplied by settings.speed

        Returns:
        --------
        SceneFrame : The computed frame
        '''
        snap = self.controls.snapshot()
        t = elapsed * self.settings.speed

        wave = sampleWaves(
            self.settings, snap.amplitude, snap.thetaDegrees, t,
            model=snap.model, showSum=snap.showSum,
        )
        self._drawWaves(wave)

        circle = sampleCircle(snap.amplitude, self.settings.circleXOffset, self.settings.circleSampleCount)
        if self.resources.circle is not None:
            self.resources.circle.setPointCount(self.settings.circleSampleCount + 1)
            writePolyline(self.resources.circle, circle)

        rotating = rotatingPoints(
            snap.amplitude, self.settings.angularFrequency, t,
            snap.thetaRadians, self.settings.circleXOffset,
        )
        index = connectorIndex(wave.model, wave.sampleCount, t, self.settings.slideFrequency)
        connector1 = connectorSegment(rotating.point1, wave.wave1Points, index)
        connector2 = connectorSegment(rotating.point2, wave.wave2Points, index)
        self._drawRotating(rotating, connector1, connector2)

        return SceneFrame(
            controls=snap,
            wave=wave,
            circle=circle,
            rotating=rotating,
            connectorIndex=index,
            connector1=connector1,
            connector2=connector2,
        )

    def _drawWaves(self, wave: WaveFrame) -> None:
        res = self.resources

        # Resolution may change between frames
        for line in (res.wave1, res.wave2, res.sumWave):
            if line is not None:
                line.setPointCount(wave.sampleCount)

        writePolyline(res.wave1, wave.wave1Points)
        writePolyline(res.wave2, wave.wave2Points)
        writePolyline(res.sumWave, wave.sumPoints)

        for line in (res.wave1, res.wave2):
            if line is not None:
                line.enabled = wave.wavesVisible
        if res.sumWave is not None:
            res.sumWave.enabled = wave.sumVisible

    def _drawRotating(
        self,
        rotating: RotatingPoints,
        connector1: np.ndarray,
        connector2: np.ndarray,
    ) -> None:
        res = self.resources

        # Radius lines and connectors hang off the points
        if res.point1 is None or res.point2 is None:
            return

        res.point1.setPosition(rotating.point1)
        res.point2.setPosition(rotating.point2)

        writePolyline(res.radiusLine1, rotating.radiusLine1)
        writePolyline(res.radiusLine2, rotating.radiusLine2)

        for line, segment in ((res.connector1, connector1), (res.connector2, connector2)):
            if line is not None:
                line.setPointCount(2)
                writePolyline(line, segment)
