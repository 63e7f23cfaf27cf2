# -- Render CLI Tests -- #

'''
Tests for the render script; manim itself is never launched.
'''

import subprocess
import sys

from oscillationLab.WaveAnimations import render


def testSceneRegistryFilesExist():
    import os

    for info in render.SCENES.values():
        assert os.path.isfile(os.path.join(render._packageDir(), info['file']))


def testBuildRenderCommand():
    cmd = render.buildRenderCommand('superposition', 'low')

    assert cmd[:4] == [sys.executable, '-m', 'manim', 'render']
    assert cmd[4] == '-ql'
    assert cmd[-1] == 'WaveSuperpositionScene'
    assert cmd[-2].endswith('superposition.py')


def testUnknownSceneFails(capsys):
    assert render.renderScene('nope') is False
    assert 'Unknown scene' in capsys.readouterr().out


def testRenderSceneReportsFailure(monkeypatch, capsys):
    def fakeRun(cmd, cwd, check):
        raise subprocess.CalledProcessError(1, cmd)

    monkeypatch.setattr(render.subprocess, 'run', fakeRun)
    assert render.renderScene('circular_motion', 'low') is False
    assert 'Failed to render circular_motion' in capsys.readouterr().out


def testRenderAll(monkeypatch):
    calls = []
    monkeypatch.setattr(render.subprocess, 'run', lambda cmd, cwd, check: calls.append(cmd))
    monkeypatch.setattr(render, 'checkFfmpeg', lambda: True)

    results = render.renderAll('medium')

    assert results == {name: True for name in render.SCENES}
    assert all(cmd[4] == '-qm' for cmd in calls)


def testListScenes(capsys):
    render.main(['--list'])
    out = capsys.readouterr().out
    assert 'superposition' in out
    assert 'circular_motion' in out


def testCheckFfmpeg(monkeypatch, capsys):
    monkeypatch.setattr(render.shutil, 'which', lambda name: '/usr/bin/ffmpeg')
    assert render.checkFfmpeg() is True
    assert capsys.readouterr().out == ''

    monkeypatch.setattr(render.shutil, 'which', lambda name: None)
    assert render.checkFfmpeg() is False
    assert 'ffmpeg not found' in capsys.readouterr().out
