# -- Visualization Subpackage -- #

'''
Plotly figures for wave frames, oscillator graphs and time animations.
'''
