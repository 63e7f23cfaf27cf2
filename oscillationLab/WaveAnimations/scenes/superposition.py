# -- Wave Superposition Scene -- #

'''
Manim animation of two-wave superposition driven by WaveScene.

Sequence (~20 seconds):
1. Title card with the two wave equations
2. Moving waves with the reference circle and rotating radii
3. Sum wave switched on
4. Phase offset swept from 90 to 180 degrees (destructive interference)
5. Switch to the stationary pattern with the sliding connector
'''

import numpy as np
from manim import (
    Scene, Text, MathTex, VGroup, ValueTracker,
    Write, FadeIn, FadeOut,
    UP, DOWN, LEFT, RIGHT,
    linear,
)

from oscillationLab.WavePhysics.controls import WaveControlPanel
from oscillationLab.WavePhysics.waveScene import WaveScene
from oscillationLab.WavePhysics.waveSettings import WaveSettings
from oscillationLab.WaveAnimations.utils.manimTheme import BG_COLOR, WHITE, CYAN
from oscillationLab.WaveAnimations.components.waveLines import (
    MobjectLabel, createSceneResources, sceneGroup, updateScene,
)

# Shifts the circle (x = -3) and wave domain (0..10) into the frame
SCENE_SHIFT = np.array([-2.8, -0.5, 0.0])


class WaveSuperpositionScene(Scene):
    '''
    Two equal waves offset by theta, their sum, and the circle view.

    Control changes are made through the same slider and toggle objects
    a GUI would use, so the animation exercises the demo end to end.
    '''

    def construct(self) -> None:
        self.camera.background_color = BG_COLOR

        settings = WaveSettings.lowResolution()
        amplitudeLabel = MobjectLabel(fontSize=20)
        thetaLabel = MobjectLabel(fontSize=20, color=CYAN)
        controls = WaveControlPanel(amplitudeLabel=amplitudeLabel, thetaLabel=thetaLabel)
        controls.groupModeToggles()

        resources = createSceneResources()
        waveScene = WaveScene(settings, controls, resources)
        waveScene.start()

        time = ValueTracker(0)

        # -------------------------------------------------------
        # 1. Title Card
        # -------------------------------------------------------
        title = Text('Superposition of Waves', font_size=44, color=WHITE)
        title.to_edge(UP, buff=0.4)

        equation = MathTex(
            r'y_1 = A\cos(kx - \omega t) \qquad y_2 = A\cos(kx - \omega t + \theta)',
            font_size=30,
            color=CYAN,
        )
        equation.next_to(title, DOWN, buff=0.3)

        self.play(Write(title), run_time=1.0)
        self.play(Write(equation), run_time=1.0)
        self.wait(0.5)
        self.play(FadeOut(title), equation.animate.scale(0.7).to_edge(UP, buff=0.2), run_time=0.8)

        # -------------------------------------------------------
        # 2. Moving Waves + Circle
        # -------------------------------------------------------
        group = sceneGroup(resources)
        labels = VGroup(amplitudeLabel.mobject, thetaLabel.mobject)
        amplitudeLabel.mobject.to_corner(DOWN + LEFT, buff=0.4)
        thetaLabel.mobject.next_to(amplitudeLabel.mobject, RIGHT, buff=0.8)

        def sceneUpdater(mob):
            updateScene(waveScene, time.get_value())
            mob.shift(SCENE_SHIFT)

        sceneUpdater(group)
        self.play(FadeIn(group), FadeIn(labels), run_time=1.0)
        group.add_updater(sceneUpdater)

        self.play(time.animate.increment_value(3.0), run_time=3.0, rate_func=linear)

        # -------------------------------------------------------
        # 3. Sum Wave
        # -------------------------------------------------------
        controls.sumToggle.setIsOn(True)
        self.play(time.animate.increment_value(3.0), run_time=3.0, rate_func=linear)

        # -------------------------------------------------------
        # 4. Phase Sweep
        # -------------------------------------------------------
        theta = ValueTracker(controls.thetaSlider.value)

        def thetaUpdater(mob):
            controls.thetaSlider.setValue(theta.get_value())

        labels.add_updater(thetaUpdater)
        self.play(
            theta.animate.set_value(180.0),
            time.animate.increment_value(3.0),
            run_time=3.0,
            rate_func=linear,
        )
        labels.remove_updater(thetaUpdater)
        self.play(time.animate.increment_value(2.0), run_time=2.0, rate_func=linear)

        # -------------------------------------------------------
        # 5. Stationary Pattern
        # -------------------------------------------------------
        controls.thetaSlider.setValue(90.0)
        controls.stationaryToggle.setIsOn(True)

        modeLabel = Text('Stationary pattern', font_size=22, color=WHITE)
        modeLabel.to_corner(DOWN + RIGHT, buff=0.4)
        self.play(FadeIn(modeLabel), run_time=0.5)
        self.play(time.animate.increment_value(5.0), run_time=5.0, rate_func=linear)

        group.remove_updater(sceneUpdater)
        self.play(*[FadeOut(mob) for mob in self.mobjects], run_time=1.0)
        self.wait(0.5)
