import os

import pytest

from betacf.plotting import plot_t_distribution


def test_plot_t_distribution(tmp_path):
    out = plot_t_distribution([1, 5, 30], output_dir=str(tmp_path))
    assert out.endswith("t_distribution.png")
    assert os.path.exists(out)


def test_plot_t_distribution_validates_inputs(tmp_path):
    with pytest.raises(ValueError):
        plot_t_distribution([], output_dir=str(tmp_path))
    with pytest.raises(ValueError):
        plot_t_distribution([3], output_dir=str(tmp_path), x_range=(2.0, -2.0))


def test_plot_t_distribution_closes_figure_when_save_fails(tmp_path, monkeypatch):
    import matplotlib.pyplot as plt
    from matplotlib.figure import Figure

    def failing_savefig(self, *args, **kwargs):
        raise OSError("disk full")

    plt.close("all")
    monkeypatch.setattr(Figure, "savefig", failing_savefig)
    with pytest.raises(OSError):
        plot_t_distribution([3], output_dir=str(tmp_path))
    assert plt.get_fignums() == []
