# -- Default Constants for Wave Demonstrations -- #

'''
Default configuration values for the wave and oscillation demos.

Values match the classroom scene setup so a fresh session
looks identical across the in-memory, Plotly and Manim hosts.
'''

import math

######################################################################
# -- Unit Conversion -- #
######################################################################

# Degrees to radians
deg2Rad: float = math.pi / 180.0

######################################################################
# -- Wave Sampling -- #
######################################################################

# Number of points in each wave polyline
defaultResolution: int = 400

# Horizontal length of the sampled domain [units]
defaultWaveLength: float = 10.0

# Oscillation frequency [cycles per unit time]
defaultFrequency: float = 1.0

# Multiplier applied to elapsed time before sampling
defaultSpeed: float = 1.0

# Multiplier applied to y values when written to a polyline
defaultVerticalScale: float = 1.0

######################################################################
# -- Reference Circle -- #
######################################################################

# Number of segments in the reference circle (points = segments + 1)
defaultCircleResolution: int = 100

# Circle center x offset, placed left of the wave domain
defaultCircleXOffset: float = -3.0

# Rate at which the standing-wave connector anchor slides [Hz]
defaultSlideFrequency: float = 0.1

######################################################################
# -- Slider Ranges -- #
######################################################################

amplitudeMin: float = 0.0
amplitudeMax: float = 1.0
amplitudeDefault: float = 1.0

thetaMinDeg: float = 0.0
thetaMaxDeg: float = 360.0
thetaDefaultDeg: float = 90.0

######################################################################
# -- Oscillator Time Graph -- #
######################################################################

# Seconds visible on the graph
graphTimeWindow: float = 5.0

# Number of points across the window
graphResolution: int = 200

graphVerticalScale: float = 1.0
graphHorizontalScale: float = 2.0
