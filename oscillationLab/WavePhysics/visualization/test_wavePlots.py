# -- Wave Plot Tests -- #

'''
Tests for the Plotly figures.
'''

import numpy as np
import plotly.graph_objects as go

from oscillationLab.WavePhysics.controls import ControlSnapshot, WaveControlPanel
from oscillationLab.WavePhysics.oscillator import Oscillator
from oscillationLab.WavePhysics.oscillatorGraph import sampleOscillatorGraph
from oscillationLab.WavePhysics.visualization.wavePlots import (
    plotOscillatorGraph,
    plotWaveAnimation,
    plotWaveFrame,
)
from oscillationLab.WavePhysics.waveScene import WaveScene
from oscillationLab.WavePhysics.waveSettings import WaveSettings


def testWaveFrameFigure():
    settings = WaveSettings(sampleCount=25)
    scene = WaveScene(settings, WaveControlPanel())
    scene.start()
    frame = scene.update(0.5)

    fig = plotWaveFrame(frame, settings)

    assert isinstance(fig, go.Figure)
    names = [trace.name for trace in fig.data]
    assert names[:4] == ['Wave 1', 'Wave 2', 'Sum', 'Circle']
    np.testing.assert_allclose(fig.data[0].y, frame.wave.wave1Points[:, 1])
    # Sum hidden by default
    assert fig.data[2].visible == 'legendonly'


def testWaveAnimationFrames():
    settings = WaveSettings(sampleCount=10, circleSampleCount=8)
    snapshot = ControlSnapshot(0.8, 45.0, False, True, True)

    fig = plotWaveAnimation(settings, snapshot, duration=1.0, nFrames=5)

    assert len(fig.frames) == 5
    assert len(fig.layout.sliders[0].steps) == 5
    # Stationary frames do not change over time
    np.testing.assert_allclose(fig.frames[0].data[0].y, fig.frames[-1].data[0].y)
    assert fig.data[2].visible is True


def testOscillatorGraphFigure():
    osc = Oscillator()
    traceA = sampleOscillatorGraph(osc, 0.0, 1.0, resolution=20)
    traceB = sampleOscillatorGraph(osc, 90.0, 1.0, resolution=20)

    fig = plotOscillatorGraph(traceA, traceB)

    assert len(fig.data) == 2
    assert fig.data[1].name == 'Oscillator B'
