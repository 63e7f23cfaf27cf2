# -- WaveAnimations Scenes -- #

'''
Manim scenes:
    - WaveSuperpositionScene: two waves, their sum, and the reference circle
    - CircularMotionScene: uniform circular motion projected to SHM
'''
