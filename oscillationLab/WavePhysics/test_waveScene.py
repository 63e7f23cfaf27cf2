# -- Wave Scene Tests -- #

'''
Tests for the per-frame scene binding against in-memory resources.
'''

import numpy as np
import pytest

from oscillationLab.WavePhysics.buffers import LabelBuffer, PointBuffer, PolylineBuffer
from oscillationLab.WavePhysics.controls import WaveControlPanel
from oscillationLab.WavePhysics.waveScene import SceneResources, WaveScene
from oscillationLab.WavePhysics.waveSettings import WaveSettings, MOVING, STATIONARY, NONE


def fullResources() -> SceneResources:
    return SceneResources(
        wave1=PolylineBuffer(),
        wave2=PolylineBuffer(),
        sumWave=PolylineBuffer(),
        circle=PolylineBuffer(),
        radiusLine1=PolylineBuffer(),
        radiusLine2=PolylineBuffer(),
        connector1=PolylineBuffer(),
        connector2=PolylineBuffer(),
        point1=PointBuffer(),
        point2=PointBuffer(),
    )


def buildScene(**settingsKwargs) -> WaveScene:
    settings = WaveSettings(sampleCount=21, circleSampleCount=12, **settingsKwargs)
    scene = WaveScene(settings, WaveControlPanel(), fullResources())
    scene.start()
    return scene


def testStartSizesBuffers():
    scene = buildScene()
    res = scene.resources

    assert res.wave1.pointCount == res.wave2.pointCount == res.sumWave.pointCount == 21
    assert res.circle.pointCount == 13
    assert res.radiusLine1.pointCount == res.radiusLine2.pointCount == 2


def testUpdateWritesWaveBuffers():
    scene = buildScene()
    frame = scene.update(0.7)
    res = scene.resources

    np.testing.assert_array_equal(res.wave1.points, frame.wave.wave1Points)
    np.testing.assert_array_equal(res.wave2.points, frame.wave.wave2Points)
    np.testing.assert_array_equal(res.circle.points, frame.circle)
    assert res.wave1.enabled and res.wave2.enabled
    assert frame.wave.model == MOVING


def testSumToggle():
    scene = buildScene()
    res = scene.resources

    frame = scene.update(0.3)
    assert not res.sumWave.enabled
    np.testing.assert_array_equal(res.sumWave.points[:, 1], 0.0)

    scene.controls.sumToggle.setIsOn(True)
    frame = scene.update(0.3)
    assert res.sumWave.enabled
    np.testing.assert_array_equal(res.sumWave.points[:, 1], frame.wave.y1 + frame.wave.y2)


def testModeFollowsToggles():
    scene = buildScene()
    controls = scene.controls

    controls.movingToggle.setIsOn(False)
    controls.stationaryToggle.setIsOn(True)
    assert scene.update(1.0).wave.model == STATIONARY

    controls.stationaryToggle.setIsOn(False)
    frame = scene.update(1.0)
    assert frame.wave.model == NONE
    assert not scene.resources.wave1.enabled
    np.testing.assert_array_equal(scene.resources.wave1.points[:, 1], 0.0)


def testModeHasNoHistory():
    first = buildScene()
    first.controls.movingToggle.setIsOn(False)
    first.controls.stationaryToggle.setIsOn(True)
    first.update(0.5)
    first.controls.stationaryToggle.setIsOn(False)
    first.controls.movingToggle.setIsOn(True)

    fresh = buildScene()
    np.testing.assert_array_equal(first.update(2.0).wave.y1, fresh.update(2.0).wave.y1)


def testSpeedScalesTime():
    scene = buildScene(speed=2.0)
    frame = scene.update(0.25)
    assert frame.wave.time == pytest.approx(0.5)


def testRotatingPointsAndConnectors():
    scene = buildScene()
    frame = scene.update(0.0)
    res = scene.resources

    np.testing.assert_allclose(res.point1.position, frame.rotating.point1)
    np.testing.assert_allclose(res.point2.position, frame.rotating.point2)
    np.testing.assert_array_equal(res.radiusLine1.points, frame.rotating.radiusLine1)
    assert res.connector1.pointCount == 2

    # Moving mode connects to the wave sample at x = 0
    assert frame.connectorIndex == 0
    assert res.connector1.getPoint(1) == pytest.approx((0.0, frame.wave.y1[0], 0.0))
    assert res.connector2.getPoint(0) == pytest.approx(tuple(frame.rotating.point2))


def testMissingPointSkipsRotatingResources():
    scene = buildScene()
    scene.resources.point2 = None
    scene.update(0.4)
    res = scene.resources

    assert res.point1.position == (0.0, 0.0, 0.0)
    np.testing.assert_array_equal(res.radiusLine1.points, 0.0)
    assert res.connector1.pointCount == 0
    # Waves and circle still update
    assert res.wave1.points[:, 1].any()
    assert res.circle.points.any()


def testAllResourcesMissing():
    scene = WaveScene(WaveSettings(sampleCount=10), WaveControlPanel(), SceneResources())
    scene.start()
    frame = scene.update(1.5)
    assert frame.wave.sampleCount == 10


def testLabelsStartWithScene():
    controls = WaveControlPanel(amplitudeLabel=LabelBuffer(), thetaLabel=LabelBuffer())
    scene = WaveScene(WaveSettings(sampleCount=4), controls, SceneResources())
    scene.start()
    assert controls.amplitudeLabel.text == 'Amplitude = 1.00'


def testZeroAmplitudeCollapsesScene():
    scene = buildScene(showSum=True)
    scene.controls.amplitudeSlider.setValue(0.0)
    scene.controls.sumToggle.setIsOn(True)
    frame = scene.update(3.3)

    for y in (frame.wave.y1, frame.wave.y2, frame.wave.ySum):
        np.testing.assert_allclose(y, 0.0)
    np.testing.assert_allclose(frame.circle[:, 0], -3.0)
    np.testing.assert_allclose(frame.circle[:, 1], 0.0)
    np.testing.assert_allclose(frame.rotating.point1, [-3.0, 0.0, 0.0])


@pytest.mark.parametrize('before, after', [(10, 20), (20, 10)])
def testResolutionChangeResizesWaveBuffers(before, after):
    scene = buildScene()
    scene.settings.sampleCount = before
    scene.start()
    scene.update(0.0)

    scene.settings.sampleCount = after
    frame = scene.update(0.1)
    res = scene.resources

    for line in (res.wave1, res.wave2, res.sumWave):
        assert line.pointCount == after
    np.testing.assert_array_equal(res.wave1.points, frame.wave.wave1Points)
    assert res.wave2.getPoint(after - 1)[0] == scene.settings.domainLength
