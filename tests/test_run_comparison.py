import logging

import pytest

import run_comparison


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    yield
    logger = logging.getLogger('peak_ga')
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


def test_main_prints_both_reports(tmp_path, capsys):
    code = run_comparison.main(['--population-size', '8', '--generations', '3',
                                '--seed', '5', '--results-dir', str(tmp_path / 'out')])
    assert code == 0

    out = capsys.readouterr().out
    assert out.index('roulette selection') < out.index('elite selection')
    assert (tmp_path / 'out' / 'comparison_report.txt').exists()
    assert list((tmp_path / 'out').glob('comparison_results_*.json'))
    assert list((tmp_path / 'logs').glob('comparison_*.log'))


def test_no_save_writes_no_reports(tmp_path):
    code = run_comparison.main(['--population-size', '5', '--generations', '2',
                                '--results-dir', str(tmp_path / 'out'), '--no-save'])
    assert code == 0
    assert not list((tmp_path / 'out').glob('*.json'))


def test_invalid_configuration_exit_code(tmp_path):
    code = run_comparison.main(['--mutation-rate', '1.5', '--results-dir', str(tmp_path / 'out')])
    assert code == 2


def test_defaults_match_config():
    args = run_comparison.parse_args([])
    assert (args.population_size, args.generations, args.mutation_rate) == (100, 1000, 0.1)
    assert args.fitness == 'peak'


def test_unknown_log_level_is_rejected(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        run_comparison.main(['--log-level', 'LOUD', '--generations', '1',
                             '--results-dir', str(tmp_path / 'out')])
    assert excinfo.value.code == 2
    assert 'LOUD' in capsys.readouterr().err


def test_log_level_is_case_insensitive():
    assert run_comparison.parse_args(['--log-level', 'debug']).log_level == 'DEBUG'
