# -- Manim Animation Theme -- #

'''
Centralized color theme for all WaveAnimations Manim scenes.

Mirrors the WavePhysics Plotly theme so figures and animations match.
'''

from manim import ManimColor

#--------------------------------------------------------------------#
# -- Primary Color Palette (Material Design) -- #
#--------------------------------------------------------------------#

BLUE = ManimColor('#42A5F5')
RED = ManimColor('#EF5350')
GREEN = ManimColor('#66BB6A')
ORANGE = ManimColor('#FFA726')
CYAN = ManimColor('#26C6DA')

# Neutrals
WHITE = ManimColor('#E0E0E0')
REFERENCE_LINE = ManimColor('#888888')

#--------------------------------------------------------------------#
# -- Scene Colors -- #
#--------------------------------------------------------------------#

WAVE1_COLOR = BLUE
WAVE2_COLOR = RED
SUM_COLOR = GREEN
CIRCLE_COLOR = WHITE
CONNECTOR_COLOR = REFERENCE_LINE
BG_COLOR = ManimColor('#1a1a2e')
