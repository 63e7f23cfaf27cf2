# -- WaveAnimations Package -- #

'''
Manim animations for the wave physics demos.

Scenes are rendered through render.py, which shells out to manim so this
package can be imported without manim installed:
    python -m oscillationLab.WaveAnimations.render --list
'''

from oscillationLab.WaveAnimations.render import renderScene, renderAll, SCENES
