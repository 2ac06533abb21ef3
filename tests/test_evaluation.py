import pytest

from id3_lab.core.builder import build
from id3_lab.core.errors import InsufficientData
from id3_lab.evaluation import accuracy, evaluate, train_test_split


def _rows(ds):
    return sorted(tuple(sorted(r.items())) for r in ds)


def test_split_is_disjoint_and_exhaustive(tennis):
    """Test every record lands in exactly one part."""
    training, testing = train_test_split(tennis, 0.5, seed=0)
    assert len(training) == 7
    assert len(testing) == 7
    assert _rows(list(training) + list(testing)) == _rows(tennis)
    assert not set(_rows(training)) & set(_rows(testing))


def test_split_sizes_follow_fraction(tennis):
    training, testing = train_test_split(tennis, 0.7, seed=1)
    assert (len(training), len(testing)) == (10, 4)


def test_split_is_reproducible(tennis):
    """Test the same seed gives the same split."""
    a = train_test_split(tennis, 0.5, seed=7)
    b = train_test_split(tennis, 0.5, seed=7)
    assert _rows(a[0]) == _rows(b[0])
    assert [r["outlook"] for r in a[1]] == [r["outlook"] for r in b[1]]


@pytest.mark.parametrize("fraction", [0.01, 0.5, 0.99])
def test_two_records_always_split_in_two(make_dataset, fraction):
    """Test neither part is ever empty once there are two records."""
    ds = make_dataset(["y", "a"], [["yes", "x"], ["no", "z"]])
    training, testing = train_test_split(ds, fraction, seed=3)
    assert (len(training), len(testing)) == (1, 1)


def test_split_errors(make_dataset, tennis):
    """Test too few records and out-of-range fractions."""
    with pytest.raises(InsufficientData):
        train_test_split(make_dataset(["y", "a"], [["yes", "x"]]), 0.5)
    for bad in (0.0, 1.0, 1.5, -0.1):
        with pytest.raises(ValueError):
            train_test_split(tennis, bad)


def test_accuracy_on_empty_testing(tennis, make_dataset):
    """Test accuracy of an empty partition is undefined."""
    tree = build(tennis)
    with pytest.raises(InsufficientData):
        accuracy(tree, make_dataset(list(tennis[0].keys()), []))


def test_accuracy_percent(tennis):
    """Test accuracy is reported as a percentage."""
    tree = build(tennis.where("outlook", "overcast"))  # always says "yes"
    assert accuracy(tree, tennis) == pytest.approx(100.0 * 9 / 14)


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_evaluate_play_tennis(tennis, seed):
    """Test the harness end to end; the tree always fits its training part."""
    result = evaluate(tennis, 0.5, seed=seed, on_unseen="default")
    assert result.n_train + result.n_test == 14
    assert result.correct + result.incorrect == result.n_test
    assert 0.0 <= result.accuracy <= 100.0
    assert result.train_accuracy == 100.0
    assert result.build_s >= 0.0


def test_evaluate_too_small(make_dataset):
    with pytest.raises(InsufficientData):
        evaluate(make_dataset(["y", "a"], [["yes", "x"]]))
