# -- Oscillation Lab Package -- #

'''
Master package for the wave physics classroom demos.

Sub-packages:
    - WavePhysics: Oscillators, wave sampling, controls and Plotly figures
    - WaveAnimations: Manim animation scenes built on WavePhysics
'''
