# -- Circular Motion Scene -- #

'''
Manim animation linking uniform circular motion to simple harmonic motion.

Oscillator A moves on a circle; oscillator B, sharing its frequency and
phase, is projected on the x-axis directly below. A dashed line joins
them so the projection is visible. Halfway through, the phase slider
shifts B by 90 degrees.
'''

import numpy as np
from manim import (
    Scene, Text, Circle, Dot, DashedLine, Line, ValueTracker,
    Write, Create, FadeIn, FadeOut,
    UP, DOWN,
    always_redraw, linear,
)

from oscillationLab.WavePhysics.controls import OscillationController, Slider
from oscillationLab.WavePhysics.oscillator import Oscillator
from oscillationLab.WaveAnimations.utils.manimTheme import (
    BG_COLOR, WHITE, WAVE1_COLOR, WAVE2_COLOR, CIRCLE_COLOR, REFERENCE_LINE,
)

CIRCLE_CENTER = np.array([0.0, 1.0, 0.0])
AXIS_CENTER = np.array([0.0, -2.0, 0.0])
RADIUS = 2.0


class CircularMotionScene(Scene):
    '''Uniform circular motion and its projection onto an axis.'''

    def construct(self) -> None:
        self.camera.background_color = BG_COLOR

        circular = Oscillator(amplitude=RADIUS, frequency=0.25, useCircularMotion=True)
        projected = Oscillator(amplitude=RADIUS, frequency=0.25)

        phaseSlider = Slider(0.0, 360.0, 0.0)
        controller = OscillationController(
            circular, projected,
            phaseSlider,
            Slider(0.05, 2.0, circular.frequency),
            Slider(0.0, RADIUS, RADIUS),
        )
        controller.start()

        time = ValueTracker(0)

        title = Text('Uniform Circular Motion', font_size=40, color=WHITE).to_edge(UP, buff=0.3)
        self.play(Write(title), run_time=1.0)

        circle = Circle(radius=RADIUS, color=CIRCLE_COLOR, stroke_width=1.5).move_to(CIRCLE_CENTER)
        axis = Line(
            AXIS_CENTER + np.array([-RADIUS - 0.5, 0, 0]),
            AXIS_CENTER + np.array([RADIUS + 0.5, 0, 0]),
            color=REFERENCE_LINE,
            stroke_width=1,
        )
        self.play(Create(circle), Create(axis), run_time=1.0)

        def circularPoint() -> np.ndarray:
            return CIRCLE_CENTER + np.array(circular.position(time.get_value()))

        def projectedPoint() -> np.ndarray:
            return AXIS_CENTER + np.array(projected.position(time.get_value()))

        bodyA = always_redraw(lambda: Dot(circularPoint(), radius=0.1, color=WAVE1_COLOR))
        bodyB = always_redraw(lambda: Dot(projectedPoint(), radius=0.1, color=WAVE2_COLOR))
        radius = always_redraw(lambda: Line(CIRCLE_CENTER, circularPoint(), color=WAVE1_COLOR))
        link = always_redraw(lambda: DashedLine(
            circularPoint(), projectedPoint(), color=REFERENCE_LINE, stroke_width=1,
        ))

        self.play(FadeIn(bodyA), FadeIn(bodyB), FadeIn(radius), FadeIn(link), run_time=0.8)
        self.play(time.animate.increment_value(8.0), run_time=8.0, rate_func=linear)

        phaseText = Text('Phase shift 90°', font_size=24, color=WAVE2_COLOR).to_edge(DOWN, buff=0.4)
        phaseSlider.setValue(90.0)
        self.play(FadeIn(phaseText), run_time=0.5)
        self.play(time.animate.increment_value(8.0), run_time=8.0, rate_func=linear)

        self.play(*[FadeOut(mob) for mob in self.mobjects], run_time=1.0)
        self.wait(0.5)
