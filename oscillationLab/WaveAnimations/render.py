# -- Animation Render Script -- #

'''
CLI tool for rendering WaveAnimations Manim scenes.

Usage:
    python -m oscillationLab.WaveAnimations.render --scene superposition
    python -m oscillationLab.WaveAnimations.render --scene circular_motion
    python -m oscillationLab.WaveAnimations.render --all --quality low
    python -m oscillationLab.WaveAnimations.render --list
'''

import argparse
import os
import shutil
import subprocess
import sys


######################################################################
# -- Scene Registry -- #
######################################################################

SCENES = {
    'superposition': {
        'file': 'scenes/superposition.py',
        'class': 'WaveSuperpositionScene',
        'description': 'Two-wave superposition with reference circle',
    },
    'circular_motion': {
        'file': 'scenes/circularMotion.py',
        'class': 'CircularMotionScene',
        'description': 'Uniform circular motion projected to SHM',
    },
}

QUALITY_FLAGS = {
    'low': '-ql',       # 480p, 15fps
    'medium': '-qm',    # 720p, 30fps
    'high': '-qh',      # 1080p, 60fps
    'fourk': '-qk',     # 4K, 60fps
}


######################################################################
# -- Helpers -- #
######################################################################

def checkFfmpeg() -> bool:
    '''
    Report whether ffmpeg is on PATH; manim needs it to write video.

    Returns:
    --------
    bool : True if ffmpeg was found
    '''
    if shutil.which('ffmpeg') is not None:
        return True
    print('  Warning: ffmpeg not found on PATH. Scenes will fail to write video.')
    return False



def _packageDir() -> str:
    '''Directory containing this package.'''
    return os.path.abspath(os.path.dirname(__file__))


def buildRenderCommand(sceneName: str, quality: str = 'high') -> list[str]:
    '''
    Build the manim command line for a registered scene.

    Parameters:
    -----------
    sceneName : str
        Key from SCENES dict
    quality : str
        Quality preset: low, medium, high, fourk

    Returns:
    --------
    list[str] : Command suitable for subprocess.run
    '''
    sceneInfo = SCENES[sceneName]
    packageDir = _packageDir()
    return [
        sys.executable, '-m', 'manim', 'render',
        QUALITY_FLAGS.get(quality, '-qh'),
        '--media_dir', os.path.join(packageDir, 'media'),
        os.path.join(packageDir, sceneInfo['file']),
        sceneInfo['class'],
    ]


def renderScene(sceneName: str, quality: str = 'high') -> bool:
    '''
    Render a single Manim scene.

    Parameters:
    -----------
    sceneName : str
        Key from SCENES dict
    quality : str
        Quality preset: low, medium, high, fourk

    Returns:
    --------
    bool : True if rendering succeeded, False otherwise
    '''
    if sceneName not in SCENES:
        print(f'Error: Unknown scene "{sceneName}"')
        print(f'Available scenes: {", ".join(SCENES.keys())}')
        return False

    sceneInfo = SCENES[sceneName]
    cmd = buildRenderCommand(sceneName, quality)

    print(f'\nRendering: {sceneInfo["description"]}')
    print(f'  File:    {sceneInfo["file"]}')
    print(f'  Class:   {sceneInfo["class"]}')
    print(f'  Quality: {quality} ({cmd[4]})')
    print()

    try:
        subprocess.run(cmd, cwd=_packageDir(), check=True)
    except subprocess.CalledProcessError as e:
        print(f'\nFailed to render {sceneName}: {e}')
        return False

    print(f'\nCompleted: {sceneName}')
    return True


def renderAll(quality: str = 'high') -> dict:
    '''
    Render all registered scenes.

    Returns:
    --------
    dict : Mapping of scene name to success (bool)
    '''
    checkFfmpeg()
    return {name: renderScene(name, quality) for name in SCENES}


######################################################################
# -- Main -- #
######################################################################

def main(argv: list[str] | None = None) -> None:
    '''CLI entry point for rendering Manim scenes.'''
    parser = argparse.ArgumentParser(
        description='Render WaveAnimations Manim scenes',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            'Available scenes:\n'
            + '\n'.join(
                f'  {name:<22s} {info["description"]}'
                for name, info in SCENES.items()
            )
        ),
    )

    parser.add_argument(
        '--scene', '-s',
        choices=list(SCENES.keys()),
        help='Scene to render',
    )
    parser.add_argument(
        '--all', '-a',
        action='store_true',
        help='Render all scenes',
    )
    parser.add_argument(
        '--quality', '-q',
        choices=list(QUALITY_FLAGS.keys()),
        default='high',
        help='Render quality (default: high = 1080p)',
    )
    parser.add_argument(
        '--list', '-l',
        action='store_true',
        help='List available scenes and exit',
    )

    args = parser.parse_args(argv)

    if args.list:
        print('Available scenes:')
        for name, info in SCENES.items():
            print(f'  {name:<22s} {info["description"]}')
        return

    if not args.scene and not args.all:
        parser.print_help()
        return

    if args.all:
        print('Rendering all scenes...')
        results = renderAll(args.quality)

        print('\n' + '=' * 50)
        print('Render Summary:')
        for name, success in results.items():
            status = 'OK' if success else 'FAILED'
            print(f'  {name:<22s} [{status}]')
    else:
        checkFfmpeg()
        renderScene(args.scene, args.quality)


if __name__ == '__main__':
    main()
