import matplotlib.pyplot as plt
import pytest

from id3_lab import cli
from id3_lab.baseline import baseline_accuracy
from id3_lab.core.builder import build
from id3_lab.core.tree import Leaf
from id3_lab.plots.tree_plot import plot_tree


def test_cli_builtin_table(capsys):
    """Test running without a data file falls back to play-tennis."""
    cli.main([])
    out = capsys.readouterr().out
    assert "[info] No data file given" in out
    assert "Read 14 records from play-tennis" in out
    assert "Training accuracy: 100.00%" in out
    assert "Accuracy:" in out


def test_cli_on_file(tennis_csv, capsys):
    """Test loading a file and printing gains and the tree."""
    acc = cli.run(cli._parser().parse_args([
        "--data", str(tennis_csv), "--train-fraction", "0.7", "--seed", "3",
        "--show-gains", "--print-tree",
    ]))
    out = capsys.readouterr().out
    assert 0.0 <= acc <= 100.0
    assert "Entropy(play-tennis) = 0.940" in out
    assert "Gain(outlook) = 0.247" in out
    assert "Building tree on 10 records (4 held out)" in out
    assert "[" in out and "?]" in out


def test_cli_error_exits(tmp_path):
    """Test core errors become a SystemExit with an [error] message."""
    path = tmp_path / "empty.txt"
    path.write_text("y,a\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        cli.main(["--data", str(path)])
    assert str(exc.value.code).startswith("[error]")


def test_cli_plot_and_baseline(tmp_path, capsys):
    """Test the plot and the scikit-learn comparison flags."""
    out_png = tmp_path / "tree.png"
    cli.main(["--plot", "--out", str(out_png), "--compare-sklearn"])
    out = capsys.readouterr().out
    assert out_png.exists()
    assert "scikit-learn entropy tree:" in out
    plt.close("all")


def test_plot_tree(tennis, tmp_path):
    """Test plotting a full tree and a lone leaf."""
    fig = plot_tree(build(tennis), out=str(tmp_path / "a.png"))
    assert (tmp_path / "a.png").exists()
    plt.close(fig)
    fig = plot_tree(Leaf("yes"))
    assert fig is not None
    plt.close(fig)


def test_baseline_fits_training(tennis):
    """Test the reference tree reproduces the training labels."""
    assert baseline_accuracy(tennis, tennis) == 100.0
