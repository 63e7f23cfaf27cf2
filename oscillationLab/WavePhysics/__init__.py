# -- WavePhysics Package -- #

'''
Wave and oscillation physics for the classroom demos.

Closed-form simple harmonic motion, traveling and standing waves,
two-wave superposition and uniform circular motion, sampled into
polylines once per rendered frame.
'''

__version__ = '0.1.0'

from oscillationLab.WavePhysics.oscillator import Oscillator
from oscillationLab.WavePhysics.waveSettings import WaveSettings
from oscillationLab.WavePhysics.waveSampler import WaveFrame, sampleWaves, sampleXCoordinates
from oscillationLab.WavePhysics.circleMotion import sampleCircle, rotatingPoints
from oscillationLab.WavePhysics.controls import (
    Slider,
    Toggle,
    ToggleGroup,
    WaveControlPanel,
    OscillationController,
)
from oscillationLab.WavePhysics.oscillatorGraph import OscillatorGraph, sampleOscillatorGraph
from oscillationLab.WavePhysics.waveScene import WaveScene, SceneResources, SceneFrame
