import pandas as pd
import pytest

from disjoint_set.config import ConnectivityConfig
from disjoint_set.frame import edges_from_dataframe
from disjoint_set.graph import Edge, count_components, minimum_spanning_tree


def test_edges_from_dataframe_reads_weights():
    frame = pd.DataFrame({"source": [0, 1, 0], "target": [1, 2, 2], "weight": [1.5, 2.0, 0.5]})
    edges = edges_from_dataframe(frame)
    assert edges == [Edge(0, 1, 1.5), Edge(1, 2, 2.0), Edge(0, 2, 0.5)]
    assert minimum_spanning_tree(3, edges).total_weight == pytest.approx(2.0)


def test_edges_from_dataframe_without_weight_column():
    frame = pd.DataFrame({"source": [0, 2], "target": [1, 3]})
    edges = edges_from_dataframe(frame)
    assert edges == [Edge(0, 1, 1.0), Edge(2, 3, 1.0)]
    assert count_components(5, edges) == 3


def test_edges_from_dataframe_custom_columns():
    frame = pd.DataFrame({"a": ["0", "1"], "b": ["1", "2"], "cost": ["3", "4"]})
    config = ConnectivityConfig(source_column="a", target_column="b", weight_column="cost")
    assert edges_from_dataframe(frame, config) == [Edge(0, 1, 3.0), Edge(1, 2, 4.0)]


def test_edges_from_dataframe_can_ignore_weights():
    frame = pd.DataFrame({"source": [0], "target": [1], "weight": [9.0]})
    config = ConnectivityConfig(weight_column=None)
    assert edges_from_dataframe(frame, config) == [Edge(0, 1, 1.0)]


def test_missing_id_column_raises_key_error():
    frame = pd.DataFrame({"source": [0]})
    with pytest.raises(KeyError):
        edges_from_dataframe(frame)


def test_missing_custom_weight_column_raises_key_error():
    frame = pd.DataFrame({"source": [0], "target": [1]})
    with pytest.raises(KeyError):
        edges_from_dataframe(frame, ConnectivityConfig(weight_column="cost"))


def test_missing_ids_are_rejected():
    frame = pd.DataFrame({"source": [0, None], "target": [1, 2]})
    with pytest.raises(ValueError):
        edges_from_dataframe(frame)


def test_fractional_ids_are_rejected():
    frame = pd.DataFrame({"source": [0.5], "target": [1]})
    with pytest.raises(ValueError):
        edges_from_dataframe(frame)


@pytest.mark.parametrize("bad", [float("inf"), float("-inf")])
def test_infinite_ids_are_rejected(bad):
    frame = pd.DataFrame({"source": [bad], "target": [1]})
    with pytest.raises(ValueError):
        edges_from_dataframe(frame)


def test_boolean_id_column_is_rejected():
    frame = pd.DataFrame({"source": [True], "target": [False]})
    with pytest.raises(ValueError):
        edges_from_dataframe(frame)


def test_boolean_ids_in_mixed_column_are_rejected():
    frame = pd.DataFrame({"source": [0, True], "target": [1, 2]})
    with pytest.raises(ValueError):
        edges_from_dataframe(frame)
