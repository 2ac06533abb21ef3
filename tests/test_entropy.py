import math

import pytest

from id3_lab.core.entropy import entropy, gain, gain_table
from id3_lab.core.errors import InvalidInput, MissingAttribute


def test_entropy_single_label_is_zero(make_dataset):
    """Test a pure set has exactly zero entropy."""
    ds = make_dataset(["y", "a"], [["yes", "x"]] * 5)
    assert entropy(ds) == 0.0


@pytest.mark.parametrize("k", [2, 3, 4, 5])
def test_entropy_even_split_is_log2_k(make_dataset, k):
    """Test an even split over k labels has log2(k) bits."""
    rows = [[f"c{i}", "x"] for i in range(k)] * 3
    assert entropy(make_dataset(["y", "a"], rows)) == pytest.approx(math.log2(k))


def test_entropy_empty_is_invalid(make_dataset):
    """Test entropy of no records raises InvalidInput (a ValueError)."""
    ds = make_dataset(["y", "a"], [])
    with pytest.raises(InvalidInput):
        entropy(ds)
    with pytest.raises(ValueError):
        entropy(ds)


def test_play_tennis_entropy_and_gains(tennis):
    """Test the textbook numbers for the play-tennis table."""
    assert entropy(tennis) == pytest.approx(0.940, abs=1e-3)
    assert gain(tennis, "outlook") == pytest.approx(0.246, abs=1e-3)
    assert gain(tennis, "humidity") == pytest.approx(0.151, abs=1e-3)
    assert gain(tennis, "wind") == pytest.approx(0.048, abs=1e-3)
    assert gain(tennis, "temperature") == pytest.approx(0.029, abs=1e-3)


def test_gain_never_negative(tennis):
    """Test information gain is non-negative for every attribute and subset."""
    for value in tennis.values_of("outlook"):
        subset = tennis.where("outlook", value)
        for a in tennis.attributes:
            assert gain(subset, a) >= 0.0


def test_gain_zero_when_split_changes_nothing(make_dataset):
    """Test an attribute independent of the label gives no gain."""
    ds = make_dataset(["y", "a"], [["yes", "x"], ["no", "x"], ["yes", "z"], ["no", "z"]])
    assert gain(ds, "a") == pytest.approx(0.0, abs=1e-12)
    assert gain(ds, "a") >= 0.0


def test_gain_perfect_split_equals_entropy(make_dataset):
    """Test an attribute that determines the label recovers all the entropy."""
    ds = make_dataset(["y", "a"], [["yes", "x"], ["no", "z"], ["yes", "x"], ["no", "z"]])
    assert gain(ds, "a") == pytest.approx(entropy(ds))


def test_gain_errors(tennis, make_dataset):
    """Test gain on empty input or an unknown attribute."""
    with pytest.raises(InvalidInput):
        gain(make_dataset(["y", "a"], []), "a")
    with pytest.raises(MissingAttribute):
        gain(tennis, "colour")


def test_gain_table(tennis):
    """Test per-attribute metrics keep the requested order and count values."""
    table = gain_table(tennis, ["wind", "outlook"])
    assert [m["name"] for m in table] == ["wind", "outlook"]
    assert table[0]["value_counts"] == {"strong": 6, "weak": 8}
    assert table[1]["ig"] == pytest.approx(gain(tennis, "outlook"))
