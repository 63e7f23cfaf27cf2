# -- Wave Settings Dataclass -- #

'''
Configuration for the dual-wave superposition demo.

Collects every value the sampler and circle visualization need that is
not driven by a UI control: display model, sum overlay, resolution,
domain length, timing and circle placement. Presets and JSON I/O follow
the same pattern as the other parameter dataclasses in the toolkit.
'''

from __future__ import annotations

import json
import math
from dataclasses import dataclass

from oscillationLab.WavePhysics import constants as c

# Display models
MOVING = 'moving'
STATIONARY = 'stationary'
NONE = 'none'

MODELS = (MOVING, STATIONARY, NONE)


@dataclass
class WaveSettings:
    '''
    Sampling and display settings for the wave demo.

    Preconditions (not checked at runtime):
        sampleCount >= 2, domainLength > 0, circleSampleCount >= 1
    '''

    #--------------------------------------------------------------------#
    # -- Display -- #
    #--------------------------------------------------------------------#
    # Wave model: 'moving' (k*x - w*t), 'stationary' (k*x) or 'none'
    model: str = MOVING

    # Show the superposed y1 + y2 line
    showSum: bool = False

    #--------------------------------------------------------------------#
    # -- Sampling -- #
    #--------------------------------------------------------------------#
    # Points per wave polyline
    sampleCount: int = c.defaultResolution

    # Sampled domain length, also the wavelength used for k
    domainLength: float = c.defaultWaveLength

    # Oscillation frequency [cycles per unit time]
    frequency: float = c.defaultFrequency

    # Elapsed-time multiplier
    speed: float = c.defaultSpeed

    # Vertical scale applied when writing wave points
    verticalScale: float = c.defaultVerticalScale

    #--------------------------------------------------------------------#
    # -- Circle -- #
    #--------------------------------------------------------------------#
    circleXOffset: float = c.defaultCircleXOffset
    circleSampleCount: int = c.defaultCircleResolution

    # Slide rate of the standing-wave connector anchor [Hz]
    slideFrequency: float = c.defaultSlideFrequency

    #--------------------------------------------------------------------#
    # -- Computed Properties -- #
    #--------------------------------------------------------------------#
    @property
    def angularFrequency(self) -> float:
        '''Angular frequency omega = 2*pi*f.'''
        return 2.0 * math.pi * self.frequency

    @property
    def waveNumber(self) -> float:
        '''Wavenumber k = 2*pi / wavelength.'''
        return 2.0 * math.pi / self.domainLength

    @property
    def waveSpeed(self) -> float:
        '''Phase speed omega / k.'''
        return self.angularFrequency / self.waveNumber

    #--------------------------------------------------------------------#
    # -- Factory Presets -- #
    #--------------------------------------------------------------------#
    @classmethod
    def default(cls) -> WaveSettings:
        '''Moving waves at full classroom resolution, sum hidden.'''
        return cls()

    @classmethod
    def standingWave(cls) -> WaveSettings:
        '''Stationary pattern with the sum overlay shown.'''
        return cls(model=STATIONARY, showSum=True)

    @classmethod
    def lowResolution(cls) -> WaveSettings:
        '''Coarse sampling for quick previews and animations.'''
        return cls(sampleCount=100, circleSampleCount=48)

    #--------------------------------------------------------------------#
    # -- JSON I/O -- #
    #--------------------------------------------------------------------#
    def toDict(self) -> dict:
        '''Nested dictionary form used for JSON export.'''
        return {
            'display': {
                'model': self.model,
                'showSum': self.showSum,
            },
            'sampling': {
                'sampleCount': self.sampleCount,
                'domainLength': self.domainLength,
                'frequency': self.frequency,
                'speed': self.speed,
                'verticalScale': self.verticalScale,
            },
            'circle': {
                'xOffset': self.circleXOffset,
                'sampleCount': self.circleSampleCount,
                'slideFrequency': self.slideFrequency,
            },
        }

    @classmethod
    def fromDict(cls, data: dict) -> WaveSettings:
        '''Build settings from a nested dictionary, defaulting missing keys.'''
        display = data.get('display', {})
        sampling = data.get('sampling', {})
        circle = data.get('circle', {})

        return cls(
            model=display.get('model', MOVING),
            showSum=display.get('showSum', False),
            sampleCount=sampling.get('sampleCount', c.defaultResolution),
            domainLength=sampling.get('domainLength', c.defaultWaveLength),
            frequency=sampling.get('frequency', c.defaultFrequency),
            speed=sampling.get('speed', c.defaultSpeed),
            verticalScale=sampling.get('verticalScale', c.defaultVerticalScale),
            circleXOffset=circle.get('xOffset', c.defaultCircleXOffset),
            circleSampleCount=circle.get('sampleCount', c.defaultCircleResolution),
            slideFrequency=circle.get('slideFrequency', c.defaultSlideFrequency),
        )

    def toJson(self, filePath: str) -> None:
        '''
        Export settings to a JSON file.

        Parameters:
        -----------
        filePath : str
            Output file path
        '''
        with open(filePath, 'w') as f:
            json.dump(self.toDict(), f, indent=4)

    @classmethod
    def fromJson(cls, filePath: str) -> WaveSettings:
        '''
        Load settings from a JSON file.

        Parameters:
        -----------
        filePath : str
            Path to JSON settings file

        Returns:
        --------
        WaveSettings : Loaded settings
        '''
        with open(filePath, 'r') as f:
            data = json.load(f)
        return cls.fromDict(data)

    #--------------------------------------------------------------------#
    # -- Display -- #
    #--------------------------------------------------------------------#
    def printSummary(self) -> None:
        '''Print settings to console in a formatted table.'''
        print('=' * 58)
        print('  WAVE SETTINGS SUMMARY')
        print('=' * 58)
        print(f'  Model:             {self.model:>10}')
        print(f'  Show Sum:          {str(self.showSum):>10}')
        print('-' * 58)
        print(f'  Sample Count:      {self.sampleCount:10d}')
        print(f'  Domain Length:     {self.domainLength:10.2f}')
        print(f'  Frequency:         {self.frequency:10.2f}  (omega = {self.angularFrequency:.3f})')
        print(f'  Wavenumber k:      {self.waveNumber:10.4f}')
        print(f'  Phase Speed:       {self.waveSpeed:10.2f}')
        print(f'  Time Speed:        {self.speed:10.2f}')
        print('-' * 58)
        print(f'  Circle X Offset:   {self.circleXOffset:10.2f}')
        print(f'  Circle Samples:    {self.circleSampleCount:10d}')
        print('=' * 58)
