# -- Control Tests -- #

'''
Tests for sliders, toggles and the wave control panel.
'''

import pytest

from oscillationLab.WavePhysics.buffers import LabelBuffer
from oscillationLab.WavePhysics.controls import (
    ControlSnapshot,
    Slider,
    Toggle,
    ToggleGroup,
    WaveControlPanel,
    displayModel,
    formatTheta,
)
from oscillationLab.WavePhysics.waveSettings import MOVING, STATIONARY, NONE


def testSliderClampsAndNotifies():
    slider = Slider(0.0, 1.0, 0.5)
    seen = []
    slider.addListener(seen.append)

    slider.setValue(2.0)
    slider.setValue(-1.0)
    slider.value = 0.25

    assert seen == [1.0, 0.0, 0.25]
    assert slider.value == 0.25


def testSliderIgnoresUnchangedValue():
    slider = Slider(0.0, 360.0, 90.0)
    seen = []
    slider.addListener(seen.append)
    slider.setValue(90.0)
    assert seen == []


def testSliderClampsInitialValue():
    assert Slider(0.0, 1.0, 3.0).value == 1.0


def testToggleNotifies():
    toggle = Toggle()
    seen = []
    toggle.addListener(seen.append)
    toggle.setIsOn(True)
    toggle.isOn = True
    toggle.isOn = False
    assert seen == [True, False]


def testToggleGroupIsMutuallyExclusive():
    moving, stationary = Toggle(True), Toggle(False)
    ToggleGroup(moving, stationary)

    stationary.setIsOn(True)
    assert stationary.isOn and not moving.isOn

    stationary.setIsOn(False)
    assert not moving.isOn and not stationary.isOn


@pytest.mark.parametrize('showMoving, showStationary, expected', [
    (True, False, MOVING),
    (False, True, STATIONARY),
    (True, True, MOVING),
    (False, False, NONE),
])
def testDisplayModel(showMoving, showStationary, expected):
    assert displayModel(showMoving, showStationary) == expected


def testPanelDefaults():
    panel = WaveControlPanel()
    snap = panel.snapshot()

    assert snap == ControlSnapshot(1.0, 90.0, True, False, False)
    assert snap.model == MOVING
    assert snap.thetaRadians == pytest.approx(1.5707963)
    assert panel.amplitudeSlider.minValue == 0.0
    assert panel.amplitudeSlider.maxValue == 1.0
    assert panel.thetaSlider.maxValue == 360.0


def testPanelLabels():
    amplitudeLabel, thetaLabel = LabelBuffer(), LabelBuffer()
    panel = WaveControlPanel(amplitudeLabel=amplitudeLabel, thetaLabel=thetaLabel)
    panel.start()

    assert amplitudeLabel.text == 'Amplitude = 1.00'
    assert thetaLabel.text == 'θ in degrees= 90 = 1.57 radians'

    panel.amplitudeSlider.setValue(0.333)
    panel.thetaSlider.setValue(180.0)

    assert amplitudeLabel.text == 'Amplitude = 0.33'
    assert thetaLabel.text == 'θ in degrees= 180 = 3.14 radians'


def testPanelWithoutLabels():
    panel = WaveControlPanel()
    panel.start()
    panel.thetaSlider.setValue(45.0)
    assert panel.snapshot().thetaDegrees == 45.0


def testFormatTheta():
    assert formatTheta(360.0) == 'θ in degrees= 360 = 6.28 radians'


def testGroupedModeToggles():
    panel = WaveControlPanel()
    panel.groupModeToggles()
    panel.stationaryToggle.setIsOn(True)
    assert panel.snapshot().model == STATIONARY


def testPanelStartTwiceSubscribesOnce():
    class CountingLabel(LabelBuffer):
        def __init__(self):
            super().__init__()
            self.writes = 0

        def setText(self, text):
            super().setText(text)
            self.writes += 1

    label = CountingLabel()
    panel = WaveControlPanel(amplitudeLabel=label)
    panel.start()
    panel.start()
    assert panel.started

    label.writes = 0
    panel.amplitudeSlider.setValue(0.5)
    assert label.writes == 1
    assert label.text == 'Amplitude = 0.50'
