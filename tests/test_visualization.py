import matplotlib
matplotlib.use('Agg')

from peak_ga.algorithms import compare_selection_strategies
from peak_ga.visualization import ComparisonVisualizer


def test_generate_all_plots(tmp_path, small_config):
    results = compare_selection_strategies(small_config)
    paths = ComparisonVisualizer(tmp_path / 'plots').generate_all_plots(results)
    assert [p.name for p in paths] == ['fitness_histories.png', 'diversity_histories.png']
    assert all(p.exists() and p.stat().st_size > 0 for p in paths)
