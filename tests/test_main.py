"""
Tests for the interactive console menu, driven with scripted input.
"""
from main import run_menu
from src.emg_sources import ArraySource


def _script(*answers):
    answers = iter(answers)
    return lambda _prompt: next(answers)


def _run(*answers, source=None):
    lines = []
    code = run_menu(input_fn=_script(*answers), output=lines.append,
                    source=source or ArraySource([1.0] * 5))
    return code, lines


def test_full_run_prints_features():
    code, lines = _run('5', '3', '1')
    assert code == 0
    assert 'G1 = Fist' in lines
    assert 'EMG Signal generated for Fist gesture:' in lines
    assert any(line.startswith('RMS: ') for line in lines)
    assert 'MAV: 0.000000' in lines


def test_invalid_gesture_number():
    code, lines = _run('5', '3', '9')
    assert code == 1
    assert lines[-1].startswith('[X] Invalid input')


def test_non_numeric_sample_size():
    code, lines = _run('lots')
    assert code == 1
    assert 'lots' in lines[-1]


def test_non_positive_window_size():
    code, _ = _run('5', '0', '2')
    assert code == 1


def test_too_many_samples_for_source():
    code, _ = _run('10', '3', '2')
    assert code == 1


def test_input_ends_early():
    def closed_stdin(_prompt):
        raise EOFError

    lines = []
    code = run_menu(input_fn=closed_stdin, output=lines.append, source=ArraySource([1.0] * 5))
    assert code == 1
    assert lines[-1].startswith('[X] Invalid input')
