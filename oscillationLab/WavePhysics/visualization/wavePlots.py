# -- Wave Demo Plots -- #

'''
Plotly figures for the superposition scene and the oscillator graph.
'''

from __future__ import annotations

import numpy as np
import plotly.graph_objects as go

from oscillationLab.WavePhysics.controls import ControlSnapshot, WaveControlPanel
from oscillationLab.WavePhysics.visualization import theme
from oscillationLab.WavePhysics.waveScene import SceneFrame, WaveScene
from oscillationLab.WavePhysics.waveSettings import WaveSettings


def _frameTraces(frame: SceneFrame) -> list[go.Scatter]:
    '''Scatter traces for one scene frame, in a fixed order.'''
    wave = frame.wave
    w1 = wave.wave1Points
    w2 = wave.wave2Points
    ws = wave.sumPoints
    rot = frame.rotating

    return [
        go.Scatter(
            x=w1[:, 0], y=w1[:, 1], mode='lines', name='Wave 1',
            line=dict(color=theme.WAVE1_COLOR, width=2),
            visible=True if wave.wavesVisible else 'legendonly',
        ),
        go.Scatter(
            x=w2[:, 0], y=w2[:, 1], mode='lines', name='Wave 2',
            line=dict(color=theme.WAVE2_COLOR, width=2),
            visible=True if wave.wavesVisible else 'legendonly',
        ),
        go.Scatter(
            x=ws[:, 0], y=ws[:, 1], mode='lines', name='Sum',
            line=dict(color=theme.SUM_COLOR, width=2),
            visible=True if wave.sumVisible else 'legendonly',
        ),
        go.Scatter(
            x=frame.circle[:, 0], y=frame.circle[:, 1], mode='lines', name='Circle',
            line=dict(color=theme.CIRCLE_COLOR, width=1),
            showlegend=False,
        ),
        go.Scatter(
            x=rot.radiusLine1[:, 0], y=rot.radiusLine1[:, 1], mode='lines+markers',
            name='Radius 1', line=dict(color=theme.WAVE1_COLOR, width=2),
            showlegend=False,
        ),
        go.Scatter(
            x=rot.radiusLine2[:, 0], y=rot.radiusLine2[:, 1], mode='lines+markers',
            name='Radius 2', line=dict(color=theme.WAVE2_COLOR, width=2),
            showlegend=False,
        ),
        go.Scatter(
            x=frame.connector1[:, 0], y=frame.connector1[:, 1], mode='lines',
            name='Connector 1', line=dict(color=theme.CONNECTOR_COLOR, width=1, dash='dot'),
            showlegend=False,
        ),
        go.Scatter(
            x=frame.connector2[:, 0], y=frame.connector2[:, 1], mode='lines',
            name='Connector 2', line=dict(color=theme.CONNECTOR_COLOR, width=1, dash='dot'),
            showlegend=False,
        ),
    ]


def _layout(fig: go.Figure, settings: WaveSettings, title: str) -> None:
    left = settings.circleXOffset - 1.5
    right = settings.domainLength + 0.5
    fig.add_hline(y=0, line=dict(color=theme.REFERENCE_LINE, dash='dash', width=1))
    fig.update_layout(
        title=title,
        xaxis=dict(title='x', range=[left, right]),
        yaxis=dict(title='y', range=[-2.2, 2.2], scaleanchor='x', scaleratio=1),
        template=theme.TEMPLATE,
        height=450,
    )


def plotWaveFrame(frame: SceneFrame, settings: WaveSettings) -> go.Figure:
    '''
    Snapshot of the superposition scene.

    Parameters:
    -----------
    frame : SceneFrame
        Frame returned by WaveScene.update
    settings : WaveSettings
        Settings used to produce the frame

    Returns:
    --------
    go.Figure : Plotly figure
    '''
    fig = go.Figure(data=_frameTraces(frame))
    snap = frame.controls
    _layout(
        fig, settings,
        f'Superposition ({frame.wave.model}, A={snap.amplitude:.2f}, '
        f'θ={snap.thetaDegrees:.0f}°, t={frame.wave.time:.2f})',
    )
    return fig


def plotWaveAnimation(
    settings: WaveSettings,
    snapshot: ControlSnapshot,
    duration: float = 2.0,
    nFrames: int = 40,
) -> go.Figure:
    '''
    Animated superposition scene with play button and time slider.

    Parameters:
    -----------
    settings : WaveSettings
        Sampling configuration
    snapshot : ControlSnapshot
        Fixed control values for the whole animation
    duration : float
        Elapsed time covered by the animation
    nFrames : int
        Number of animation frames

    Returns:
    --------
    go.Figure : Plotly figure with frames
    '''
    controls = WaveControlPanel()
    controls.amplitudeSlider.setValue(snapshot.amplitude)
    controls.thetaSlider.setValue(snapshot.thetaDegrees)
    controls.movingToggle.setIsOn(snapshot.showMoving)
    controls.stationaryToggle.setIsOn(snapshot.showStationary)
    controls.sumToggle.setIsOn(snapshot.showSum)

    scene = WaveScene(settings, controls)
    scene.start()

    times = np.linspace(0.0, duration, nFrames)
    sceneFrames = [scene.update(float(t)) for t in times]

    fig = go.Figure(
        data=_frameTraces(sceneFrames[0]),
        frames=[
            go.Frame(data=_frameTraces(sf), name=f'{t:.3f}')
            for t, sf in zip(times, sceneFrames)
        ],
    )
    _layout(fig, settings, f'Superposition ({snapshot.model})')

    frameMs = 1000.0 * duration / max(nFrames - 1, 1)
    fig.update_layout(
        updatemenus=[dict(
            type='buttons',
            showactive=False,
            buttons=[
                dict(label='Play', method='animate',
                     args=[None, dict(frame=dict(duration=frameMs, redraw=True), fromcurrent=True)]),
                dict(label='Pause', method='animate',
                     args=[[None], dict(frame=dict(duration=0, redraw=False), mode='immediate')]),
            ],
        )],
        sliders=[dict(
            currentvalue=dict(prefix='t = '),
            steps=[
                dict(method='animate', label=f'{t:.2f}',
                     args=[[f'{t:.3f}'], dict(mode='immediate', frame=dict(duration=0, redraw=True))])
                for t in times
            ],
        )],
    )
    return fig


def plotOscillatorGraph(traceA: np.ndarray, traceB: np.ndarray) -> go.Figure:
    '''
    Displacement-vs-time graph of two oscillators.

    Parameters:
    -----------
    traceA : np.ndarray
        Points from sampleOscillatorGraph for oscillator A, shape (n, 3)
    traceB : np.ndarray
        Points for oscillator B

    Returns:
    --------
    go.Figure : Plotly figure
    '''
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=traceA[:, 0], y=traceA[:, 1], mode='lines', name='Oscillator A',
        line=dict(color=theme.WAVE1_COLOR, width=2),
    ))
    fig.add_trace(go.Scatter(
        x=traceB[:, 0], y=traceB[:, 1], mode='lines', name='Oscillator B',
        line=dict(color=theme.WAVE2_COLOR, width=2),
    ))
    fig.add_hline(y=0, line=dict(color=theme.REFERENCE_LINE, dash='dash', width=1))
    fig.update_layout(
        title='Oscillator Displacement History',
        xaxis_title='Time ago (scaled)',
        yaxis_title='Displacement',
        template=theme.TEMPLATE,
        height=400,
    )
    return fig
