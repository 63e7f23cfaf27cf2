# -- Wave Sampler Tests -- #

'''
Tests for x sampling, phase models and two-wave superposition.
'''

import math

import numpy as np
import pytest

from oscillationLab.WavePhysics.waveSampler import sampleWaves, sampleXCoordinates, wavePhase
from oscillationLab.WavePhysics.waveSettings import WaveSettings, MOVING, STATIONARY, NONE


@pytest.mark.parametrize('sampleCount, domainLength', [(2, 1.0), (5, 10.0), (400, 10.0), (37, 3.3)])
def testXCoordinatesEvenlySpaced(sampleCount, domainLength):
    x = sampleXCoordinates(sampleCount, domainLength)

    assert x.shape == (sampleCount,)
    assert x[0] == 0.0
    assert x[-1] == domainLength
    assert np.all(np.diff(x) > 0)
    np.testing.assert_allclose(np.diff(x), domainLength / (sampleCount - 1))


def testConcreteMovingScenario():
    settings = WaveSettings(sampleCount=5, domainLength=10.0, frequency=1.0)
    frame = sampleWaves(settings, amplitude=1.0, thetaDegrees=90.0, t=0.0, model=MOVING)

    np.testing.assert_allclose(frame.x, [0.0, 2.5, 5.0, 7.5, 10.0])
    phase = (2.0 * math.pi / 10.0) * frame.x
    np.testing.assert_allclose(frame.y1, np.cos(phase), atol=1e-12)
    np.testing.assert_allclose(frame.y2, np.cos(phase + math.pi / 2.0), atol=1e-12)
    assert frame.y1[0] == 1.0
    assert frame.y2[0] == pytest.approx(0.0, abs=1e-12)


def testSumIsPointwiseSuperposition():
    settings = WaveSettings(sampleCount=64, showSum=True)
    frame = sampleWaves(settings, 0.73, 131.0, 2.41)

    np.testing.assert_array_equal(frame.ySum, frame.y1 + frame.y2)
    assert frame.sumVisible


def testHiddenSumWritesZeros():
    settings = WaveSettings(sampleCount=32, showSum=False)
    frame = sampleWaves(settings, 1.0, 0.0, 0.5)

    assert not frame.sumVisible
    np.testing.assert_array_equal(frame.ySum, np.zeros(32))
    np.testing.assert_array_equal(frame.sumPoints[:, 1], np.zeros(32))


def testStandingWaveIndependentOfTime():
    settings = WaveSettings(sampleCount=50, model=STATIONARY)
    early = sampleWaves(settings, 0.9, 60.0, 0.0)
    late = sampleWaves(settings, 0.9, 60.0, 3.7)

    np.testing.assert_array_equal(early.y1, late.y1)
    np.testing.assert_array_equal(early.y2, late.y2)


def testTravelingPhaseDecreasesWithTime():
    k = 2.0 * math.pi / 10.0
    omega = 2.0 * math.pi
    for x in (0.0, 2.5, 9.0):
        times = [0.0, 0.1, 0.75, 4.0]
        phases = [wavePhase(x, t, k, omega, MOVING) for t in times]
        assert all(later < earlier for earlier, later in zip(phases, phases[1:]))


def testStationaryPhaseIgnoresTime():
    assert wavePhase(3.0, 0.0, 1.5, 9.0, STATIONARY) == wavePhase(3.0, 5.0, 1.5, 9.0, STATIONARY)


def testNoModeZerosBaseWaves():
    settings = WaveSettings(sampleCount=20, showSum=True)
    frame = sampleWaves(settings, 1.0, 45.0, 1.2, model=NONE)

    assert not frame.wavesVisible
    assert not frame.y1.any()
    assert not frame.y2.any()
    assert not frame.ySum.any()


@pytest.mark.parametrize('model', [MOVING, STATIONARY, NONE])
def testZeroAmplitudeCollapses(model):
    settings = WaveSettings(sampleCount=16, showSum=True)
    frame = sampleWaves(settings, 0.0, 200.0, 4.2, model=model)

    for y in (frame.y1, frame.y2, frame.ySum):
        np.testing.assert_allclose(y, 0.0)


def testPointsApplyVerticalScale():
    settings = WaveSettings(sampleCount=8, verticalScale=2.0, showSum=True)
    frame = sampleWaves(settings, 0.5, 30.0, 0.0)

    points = frame.wave1Points
    assert points.shape == (8, 3)
    np.testing.assert_array_equal(points[:, 0], frame.x)
    np.testing.assert_allclose(points[:, 1], frame.y1 * 2.0)
    np.testing.assert_array_equal(points[:, 2], 0.0)


def testSettingsModelUsedByDefault():
    settings = WaveSettings(sampleCount=10, model=STATIONARY)
    frame = sampleWaves(settings, 1.0, 0.0, 1.3)
    assert frame.model == STATIONARY
    np.testing.assert_allclose(frame.y1, np.cos(settings.waveNumber * frame.x))
