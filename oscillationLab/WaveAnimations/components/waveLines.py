# -- Wave Line Components -- #

'''
Manim adapters that let WaveScene draw straight into mobjects.

MobjectPolyline wraps a VMobject in the Polyline protocol, MobjectPoint
wraps a Dot as a PointTarget and MobjectLabel wraps Text. The scene writes
points into the adapters; sync() pushes them to the mobject once per
frame.
'''

from typing import Sequence

import numpy as np
from manim import VMobject, VGroup, Dot, Text, ManimColor, LEFT

from oscillationLab.WavePhysics.waveScene import SceneResources, WaveScene
from oscillationLab.WaveAnimations.utils.manimTheme import (
    WAVE1_COLOR, WAVE2_COLOR, SUM_COLOR, CIRCLE_COLOR, CONNECTOR_COLOR,
)


#--------------------------------------------------------------------#
# -- Protocol Adapters -- #
#--------------------------------------------------------------------#

class MobjectPolyline:
    '''
    Polyline protocol over a Manim VMobject drawn as straight corners.

    Parameters:
    -----------
    color : ManimColor
        Stroke color
    strokeWidth : float
        Stroke width
    '''

    def __init__(self, color: ManimColor, strokeWidth: float = 2.5) -> None:
        self.mobject = VMobject()
        self.mobject.set_stroke(color=color, width=strokeWidth)
        self.strokeWidth = strokeWidth
        self.enabled = True
        self._points = np.zeros((0, 3))

    def setPointCount(self, count: int) -> None:
        if count != self._points.shape[0]:
            self._points = np.zeros((count, 3))

    def setPoint(self, index: int, point: Sequence[float]) -> None:
        z = point[2] if len(point) > 2 else 0.0
        self._points[index] = (point[0], point[1], z)

    def getPoint(self, index: int) -> tuple:
        return tuple(float(v) for v in self._points[index])

    def sync(self) -> None:
        '''Push buffered points and visibility to the mobject.'''
        if self._points.shape[0] >= 2:
            self.mobject.set_points_as_corners(self._points)
        self.mobject.set_stroke(opacity=1.0 if self.enabled else 0.0)


class MobjectPoint:
    '''PointTarget protocol over a Manim Dot.'''

    def __init__(self, color: ManimColor, radius: float = 0.08) -> None:
        self.mobject = Dot(radius=radius, color=color)

    def setPosition(self, point: Sequence[float]) -> None:
        z = point[2] if len(point) > 2 else 0.0
        self.mobject.move_to(np.array([point[0], point[1], z]))

    def sync(self) -> None:
        pass


#--------------------------------------------------------------------#
# -- Scene Resources -- #
#--------------------------------------------------------------------#

def createSceneResources() -> SceneResources:
    '''
    Build a full set of mobject-backed resources for WaveScene.

    Returns:
    --------
    SceneResources : Resources whose adapters expose .mobject
    '''
    return SceneResources(
        wave1=MobjectPolyline(WAVE1_COLOR),
        wave2=MobjectPolyline(WAVE2_COLOR),
        sumWave=MobjectPolyline(SUM_COLOR, strokeWidth=3.0),
        circle=MobjectPolyline(CIRCLE_COLOR, strokeWidth=1.5),
        radiusLine1=MobjectPolyline(WAVE1_COLOR, strokeWidth=2.0),
        radiusLine2=MobjectPolyline(WAVE2_COLOR, strokeWidth=2.0),
        connector1=MobjectPolyline(CONNECTOR_COLOR, strokeWidth=1.0),
        connector2=MobjectPolyline(CONNECTOR_COLOR, strokeWidth=1.0),
        point1=MobjectPoint(WAVE1_COLOR),
        point2=MobjectPoint(WAVE2_COLOR),
    )


def _adapters(resources: SceneResources) -> list:
    return [
        r for r in (
            resources.wave1, resources.wave2, resources.sumWave, resources.circle,
            resources.radiusLine1, resources.radiusLine2,
            resources.connector1, resources.connector2,
            resources.point1, resources.point2,
        )
        if r is not None
    ]


def sceneGroup(resources: SceneResources) -> VGroup:
    '''All resource mobjects in drawing order.'''
    return VGroup(*[adapter.mobject for adapter in _adapters(resources)])


def updateScene(scene: WaveScene, elapsed: float):
    '''
    Advance the wave scene to elapsed time and sync every mobject.

    Returns:
    --------
    SceneFrame : The computed frame
    '''
    frame = scene.update(elapsed)
    for adapter in _adapters(scene.resources):
        adapter.sync()
    return frame


class MobjectLabel:
    '''TextLabel protocol over a Manim Text, rebuilt when the text changes.'''

    def __init__(self, fontSize: float = 22, color: ManimColor = CIRCLE_COLOR) -> None:
        self.fontSize = fontSize
        self.color = color
        self.text = ''
        self.mobject = Text('label', font_size=fontSize, color=color)

    def setText(self, text: str) -> None:
        if text == self.text:
            return
        self.text = text
        newText = Text(text, font_size=self.fontSize, color=self.color)
        newText.move_to(self.mobject.get_center()).align_to(self.mobject, LEFT)
        self.mobject.become(newText)
