# -- UI Parameter Mirror -- #

'''
Host-agnostic sliders, toggles and the control panel for the wave demo.

The host forwards widget events into these objects; listeners run
synchronously on the caller's thread, the same thread that later calls
the per-frame update. Sliders clamp to their own range and perform no
other validation.
'''

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from oscillationLab.WavePhysics import constants as c
from oscillationLab.WavePhysics.oscillator import Oscillator
from oscillationLab.WavePhysics.protocols import TextLabel
from oscillationLab.WavePhysics.waveSettings import MOVING, STATIONARY, NONE


######################################################################
# -- Widgets -- #
######################################################################

class Slider:
    '''Scalar control clamped to [minValue, maxValue].'''

    def __init__(self, minValue: float = 0.0, maxValue: float = 1.0, value: float = 0.0) -> None:
        self.minValue = minValue
        self.maxValue = maxValue
        self._value = self._clamp(value)
        self._listeners: list[Callable[[float], None]] = []

    def _clamp(self, value: float) -> float:
        return max(self.minValue, min(self.maxValue, value))

    @property
    def value(self) -> float:
        return self._value

    @value.setter
    def value(self, newValue: float) -> None:
        self.setValue(newValue)

    def setValue(self, newValue: float) -> None:
        '''Clamp and store newValue, notifying listeners if it changed.'''
        newValue = self._clamp(newValue)
        if newValue == self._value:
            return
        self._value = newValue
        for listener in list(self._listeners):
            listener(newValue)

    def addListener(self, callback: Callable[[float], None]) -> None:
        self._listeners.append(callback)


class Toggle:
    '''Boolean control.'''

    def __init__(self, isOn: bool = False) -> None:
        self._isOn = isOn
        self._listeners: list[Callable[[bool], None]] = []
        self.group: ToggleGroup | None = None

    @property
    def isOn(self) -> bool:
        return self._isOn

    @isOn.setter
    def isOn(self, newValue: bool) -> None:
        self.setIsOn(newValue)

    def setIsOn(self, newValue: bool) -> None:
        newValue = bool(newValue)
        if newValue == self._isOn:
            return
        self._isOn = newValue
        if newValue and self.group is not None:
            self.group.notifyToggleOn(self)
        for listener in list(self._listeners):
            listener(newValue)

    def addListener(self, callback: Callable[[bool], None]) -> None:
        self._listeners.append(callback)


class ToggleGroup:
    '''
    Makes member toggles mutually exclusive.

    Turning one member on turns the others off. All members may be off
    at once, which leaves the demo in 'none' mode.
    '''

    def __init__(self, *toggles: Toggle) -> None:
        self.toggles: list[Toggle] = []
        for toggle in toggles:
            self.register(toggle)

    def register(self, toggle: Toggle) -> None:
        toggle.group = self
        self.toggles.append(toggle)

    def notifyToggleOn(self, active: Toggle) -> None:
        for toggle in self.toggles:
            if toggle is not active:
                toggle.setIsOn(False)


######################################################################
# -- Control Snapshot -- #
######################################################################

def displayModel(showMoving: bool, showStationary: bool) -> str:
    '''Resolve the toggle pair into a display model; moving wins ties.'''
    if showMoving:
        return MOVING
    elif showStationary:
        return STATIONARY
    return NONE


def formatAmplitude(value: float) -> str:
    return f'Amplitude = {value:.2f}'


def formatTheta(valueDeg: float) -> str:
    return f'θ in degrees= {valueDeg:.0f} = {valueDeg * c.deg2Rad:.2f} radians'


@dataclass(frozen=True)
class ControlSnapshot:
    '''Control values read once at the start of a frame.'''

    amplitude: float
    thetaDegrees: float
    showMoving: bool
    showStationary: bool
    showSum: bool

    @property
    def model(self) -> str:
        return displayModel(self.showMoving, self.showStationary)

    @property
    def thetaRadians(self) -> float:
        return self.thetaDegrees * c.deg2Rad


@dataclass
class WaveControlPanel:
    '''
    Amplitude and phase sliders plus the mode and sum toggles.

    Labels are optional; a missing label is simply not updated.
    '''

    amplitudeSlider: Slider = field(default_factory=lambda: Slider(
        c.amplitudeMin, c.amplitudeMax, c.amplitudeDefault))
    thetaSlider: Slider = field(default_factory=lambda: Slider(
        c.thetaMinDeg, c.thetaMaxDeg, c.thetaDefaultDeg))
    movingToggle: Toggle = field(default_factory=lambda: Toggle(True))
    stationaryToggle: Toggle = field(default_factory=lambda: Toggle(False))
    sumToggle: Toggle = field(default_factory=lambda: Toggle(False))
    amplitudeLabel: TextLabel | None = None
    thetaLabel: TextLabel | None = None
    started: bool = field(default=False, init=False)

    def start(self) -> None:
        '''
        Write the initial label text and subscribe the labels to their sliders.

        Later calls only refresh the label text.
        '''
        self._refreshAmplitudeLabel(self.amplitudeSlider.value)
        self._refreshThetaLabel(self.thetaSlider.value)

        if self.started:
            return
        self.started = True

        self.amplitudeSlider.addListener(self._refreshAmplitudeLabel)
        self.thetaSlider.addListener(self._refreshThetaLabel)

    def _refreshAmplitudeLabel(self, value: float) -> None:
        if self.amplitudeLabel is not None:
            self.amplitudeLabel.setText(formatAmplitude(value))

    def _refreshThetaLabel(self, value: float) -> None:
        if self.thetaLabel is not None:
            self.thetaLabel.setText(formatTheta(value))

    def groupModeToggles(self) -> ToggleGroup:
        '''Make the moving and stationary toggles mutually exclusive.'''
        return ToggleGroup(self.movingToggle, self.stationaryToggle)

    def snapshot(self) -> ControlSnapshot:
        return ControlSnapshot(
            amplitude=self.amplitudeSlider.value,
            thetaDegrees=self.thetaSlider.value,
            showMoving=self.movingToggle.isOn,
            showStationary=self.stationaryToggle.isOn,
            showSum=self.sumToggle.isOn,
        )


######################################################################
# -- Oscillator Controls -- #
######################################################################

class OscillationController:
    '''
    Binds phase, frequency and amplitude sliders to a pair of oscillators.

    The phase slider drives oscillator B only, so oscillator A is the
    reference the phase difference is measured from.
    '''

    def __init__(
        self,
        oscillatorA: Oscillator,
        oscillatorB: Oscillator,
        phaseSlider: Slider,
        frequencySlider: Slider,
        amplitudeSlider: Slider,
    ) -> None:
        self.oscillatorA = oscillatorA
        self.oscillatorB = oscillatorB
        self.phaseSlider = phaseSlider
        self.frequencySlider = frequencySlider
        self.amplitudeSlider = amplitudeSlider

    def start(self) -> None:
        self.phaseSlider.addListener(self._onPhaseChanged)
        self.frequencySlider.addListener(self._onFrequencyChanged)
        self.amplitudeSlider.addListener(self._onAmplitudeChanged)

    def _onPhaseChanged(self, value: float) -> None:
        self.oscillatorB.phaseShiftDegrees = value

    def _onFrequencyChanged(self, value: float) -> None:
        self.oscillatorA.frequency = value
        self.oscillatorB.frequency = value

    def _onAmplitudeChanged(self, value: float) -> None:
        self.oscillatorA.amplitude = value
        self.oscillatorB.amplitude = value
