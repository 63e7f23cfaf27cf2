# -- Visualization Theme -- #

'''
Centralized dark-mode theme for the WavePhysics Plotly figures.

Wave colors follow the classroom convention: wave 1 blue, wave 2 red,
their sum green.
'''

# Plotly template
TEMPLATE = 'plotly_dark'

# Primary color palette (Material Design, visible on dark backgrounds)
BLUE = '#42A5F5'
RED = '#EF5350'
GREEN = '#66BB6A'
ORANGE = '#FFA726'
PURPLE = '#AB47BC'
CYAN = '#26C6DA'

# Neutrals
WHITE = '#E0E0E0'
REFERENCE_LINE = '#888888'

# Semantic wave colors
WAVE1_COLOR = BLUE
WAVE2_COLOR = RED
SUM_COLOR = GREEN
CIRCLE_COLOR = WHITE
CONNECTOR_COLOR = REFERENCE_LINE
