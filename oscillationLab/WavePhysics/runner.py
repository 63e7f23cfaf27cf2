# -- WavePhysics Demo Runner -- #

'''
Command-line entry point for the wave superposition demo.

Drives the scene headlessly with in-memory buffers, prints a summary of
the requested frame, and optionally opens a Plotly figure.

Usage:
    python -m oscillationLab.WavePhysics                        # Moving waves, t = 0
    python -m oscillationLab.WavePhysics --mode stationary --sum
    python -m oscillationLab.WavePhysics --amplitude 0.5 --theta 180 --time 1.25
    python -m oscillationLab.WavePhysics --json settings.json --animate
    python -m oscillationLab.WavePhysics --oscillators --frequency 0.5
'''

from __future__ import annotations

import argparse

from oscillationLab.WavePhysics import constants as c
from oscillationLab.WavePhysics.buffers import LabelBuffer, PointBuffer, PolylineBuffer
from oscillationLab.WavePhysics.controls import OscillationController, Slider, WaveControlPanel
from oscillationLab.WavePhysics.oscillator import Oscillator
from oscillationLab.WavePhysics.oscillatorGraph import OscillatorGraph
from oscillationLab.WavePhysics.waveScene import SceneFrame, SceneResources, WaveScene
from oscillationLab.WavePhysics.waveSettings import WaveSettings, MODELS, MOVING, STATIONARY


def buildParser() -> argparse.ArgumentParser:
    '''Build the CLI argument parser.'''
    parser = argparse.ArgumentParser(
        description='WavePhysics -- Wave superposition and circular motion demo',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        '--json', type=str, default=None,
        help='Path to a WaveSettings JSON file',
    )
    parser.add_argument(
        '--save-json', type=str, default=None,
        help='Write the effective settings to this JSON file',
    )
    parser.add_argument(
        '--amplitude', type=float, default=c.amplitudeDefault,
        help=f'Wave amplitude, clamped to [{c.amplitudeMin:g}, {c.amplitudeMax:g}] (default: {c.amplitudeDefault:g})',
    )
    parser.add_argument(
        '--theta', type=float, default=c.thetaDefaultDeg,
        help=f'Phase offset of wave 2 in degrees (default: {c.thetaDefaultDeg:g})',
    )
    parser.add_argument(
        '--mode', type=str, default=None, choices=list(MODELS),
        help='Display model (default: from settings, moving)',
    )
    parser.add_argument(
        '--sum', action='store_true',
        help='Show the superposed sum wave',
    )
    parser.add_argument(
        '--time', type=float, default=0.0,
        help='Elapsed time of the frame (default: 0)',
    )
    parser.add_argument(
        '--frequency', type=float, default=None,
        help='Oscillation frequency (default: from settings)',
    )
    parser.add_argument(
        '--oscillators', action='store_true',
        help='Run the two-oscillator graph demo instead of the wave scene',
    )
    parser.add_argument(
        '--animate', action='store_true',
        help='Open an animated figure instead of a snapshot',
    )
    parser.add_argument(
        '--no-plot', action='store_true',
        help='Skip figure generation (console output only)',
    )

    return parser


def loadSettings(args: argparse.Namespace) -> WaveSettings:
    '''Load settings from JSON or defaults, then apply CLI overrides.'''
    settings = WaveSettings.fromJson(args.json) if args.json else WaveSettings.default()

    if args.mode is not None:
        settings.model = args.mode
    if args.sum:
        settings.showSum = True
    if args.frequency is not None:
        settings.frequency = args.frequency

    return settings


def buildControls(settings: WaveSettings, amplitude: float, thetaDeg: float) -> WaveControlPanel:
    '''Control panel preset to the given values, with in-memory labels.'''
    controls = WaveControlPanel(amplitudeLabel=LabelBuffer(), thetaLabel=LabelBuffer())
    controls.amplitudeSlider.setValue(amplitude)
    controls.thetaSlider.setValue(thetaDeg)
    controls.movingToggle.setIsOn(settings.model == MOVING)
    controls.stationaryToggle.setIsOn(settings.model == STATIONARY)
    controls.sumToggle.setIsOn(settings.showSum)
    return controls


def buildResources() -> SceneResources:
    '''Headless render resources for every scene element.'''
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


def animationDuration(frequency: float, cycles: float = 2.0) -> float:
    '''Time covering the given number of cycles; cycles itself when frequency is 0.'''
    if frequency == 0.0:
        return cycles
    return cycles / abs(frequency)


def printFrameSummary(frame: SceneFrame) -> None:
    '''Print the key values of a computed frame.'''
    wave = frame.wave
    rot = frame.rotating
    mid = wave.sampleCount // 2

    print('-' * 58)
    print(f'  FRAME  t = {wave.time:.3f}   model = {wave.model}')
    print('-' * 58)
    print(f'  Samples:           {wave.sampleCount:10d}')
    print(f'  x range:           {wave.x[0]:10.3f} .. {wave.x[-1]:.3f}')
    print(f'  y1 at x=0:         {wave.y1[0]:10.4f}')
    print(f'  y2 at x=0:         {wave.y2[0]:10.4f}')
    print(f'  y1 at x={wave.x[mid]:<9.3f} {wave.y1[mid]:10.4f}')
    print(f'  y2 at x={wave.x[mid]:<9.3f} {wave.y2[mid]:10.4f}')
    if wave.sumVisible:
        print(f'  max |y1 + y2|:     {abs(wave.ySum).max():10.4f}')
    print(f'  Point 1:           ({rot.point1[0]:.3f}, {rot.point1[1]:.3f})')
    print(f'  Point 2:           ({rot.point2[0]:.3f}, {rot.point2[1]:.3f})')
    print(f'  Connector index:   {frame.connectorIndex:10d}')
    print('-' * 58)


def runWaveDemo(
    settings: WaveSettings,
    amplitude: float,
    thetaDeg: float,
    elapsed: float,
    showPlot: bool = True,
    animate: bool = False,
) -> SceneFrame:
    '''
    Run one frame of the superposition scene and report it.

    Parameters:
    -----------
    settings : WaveSettings
        Sampling configuration
    amplitude : float
        Amplitude slider value
    thetaDeg : float
        Theta slider value in degrees
    elapsed : float
        Host elapsed time
    showPlot : bool
        Whether to open a Plotly figure
    animate : bool
        Open an animation rather than a snapshot

    Returns:
    --------
    SceneFrame : The computed frame
    '''
    controls = buildControls(settings, amplitude, thetaDeg)
    scene = WaveScene(settings, controls, buildResources())
    scene.start()
    frame = scene.update(elapsed)

    print()
    settings.printSummary()
    print(f'  {controls.amplitudeLabel.text}')
    print(f'  {controls.thetaLabel.text}')
    printFrameSummary(frame)

    if showPlot:
        from oscillationLab.WavePhysics.visualization.wavePlots import plotWaveAnimation, plotWaveFrame

        if animate:
            fig = plotWaveAnimation(settings, frame.controls, duration=animationDuration(settings.frequency))
        else:
            fig = plotWaveFrame(frame, settings)
        fig.show()
        print('  Figure opened in browser.')

    return frame


def runOscillatorDemo(
    frequency: float,
    amplitude: float,
    phaseDeg: float,
    elapsed: float,
    showPlot: bool = True,
) -> tuple:
    '''
    Run the two-oscillator graph demo: A is the reference, B is phase shifted.

    Returns:
    --------
    tuple : (oscillatorA, oscillatorB, traceA, traceB)
    '''
    oscA = Oscillator()
    oscB = Oscillator()

    phaseSlider = Slider(c.thetaMinDeg, c.thetaMaxDeg, 0.0)
    frequencySlider = Slider(0.1, 5.0, oscA.frequency)
    amplitudeSlider = Slider(c.amplitudeMin, c.amplitudeMax, oscA.amplitude)

    controller = OscillationController(oscA, oscB, phaseSlider, frequencySlider, amplitudeSlider)
    controller.start()
    phaseSlider.setValue(phaseDeg)
    frequencySlider.setValue(frequency)
    amplitudeSlider.setValue(amplitude)

    graph = OscillatorGraph(oscA, oscB, PolylineBuffer(), PolylineBuffer())
    graph.start(0.0)
    traceA, traceB = graph.update(elapsed)

    posA = oscA.position(elapsed)
    posB = oscB.position(elapsed)

    print()
    print('=' * 58)
    print('  OSCILLATOR PAIR')
    print('=' * 58)
    print(f'  Frequency:         {oscA.frequency:10.3f}')
    print(f'  Amplitude:         {oscA.amplitude:10.3f}')
    print(f'  Phase B:           {oscB.phaseShiftDegrees:10.1f} deg')
    print('-' * 58)
    print(f'  A position:        ({posA[0]:.4f}, {posA[1]:.4f})')
    print(f'  B position:        ({posB[0]:.4f}, {posB[1]:.4f})')
    print('=' * 58)

    if showPlot:
        from oscillationLab.WavePhysics.visualization.wavePlots import plotOscillatorGraph

        plotOscillatorGraph(traceA, traceB).show()
        print('  Figure opened in browser.')

    return oscA, oscB, traceA, traceB


def main(argv: list[str] | None = None) -> None:
    '''CLI entry point.'''
    args = buildParser().parse_args(argv)
    settings = loadSettings(args)

    if args.save_json:
        settings.toJson(args.save_json)
        print(f'Settings written to {args.save_json}')

    if args.oscillators:
        runOscillatorDemo(
            settings.frequency, args.amplitude, args.theta, args.time,
            showPlot=not args.no_plot,
        )
        return

    runWaveDemo(
        settings, args.amplitude, args.theta, args.time,
        showPlot=not args.no_plot,
        animate=args.animate,
    )


if __name__ == '__main__':
    main()
