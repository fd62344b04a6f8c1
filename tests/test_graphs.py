import pytest

from dsalab.graphs import (
    INFINITY,
    SAMPLE_WEIGHTS,
    bellman_ford,
    format_report,
    main,
)


def test_sample_distances():
    assert bellman_ford(SAMPLE_WEIGHTS, 0).distances == (0, 6, 0, 8)


def test_sample_path_uses_negative_edge():
    assert bellman_ford(SAMPLE_WEIGHTS, 0).path(3) == [0, 1, 2, 3]


def test_report_first_line():
    report = format_report(bellman_ford(SAMPLE_WEIGHTS, 0))
    assert report.splitlines()[0] == "A - A Destination Reached. Cost = 0"
    assert len(report.splitlines()) == len(SAMPLE_WEIGHTS)


@pytest.mark.parametrize("source", range(len(SAMPLE_WEIGHTS)))
def test_source_is_at_distance_zero(source):
    result = bellman_ford(SAMPLE_WEIGHTS, source)
    assert result.distances[source] == 0
    assert result.path(source) == [source]


@pytest.mark.parametrize("source", range(len(SAMPLE_WEIGHTS)))
def test_no_edge_can_improve_a_distance(source):
    result = bellman_ford(SAMPLE_WEIGHTS, source)
    for u, row in enumerate(SAMPLE_WEIGHTS):
        for v, weight in enumerate(row):
            if u != v and weight != INFINITY and result.distances[u] != INFINITY:
                assert result.distances[v] <= result.distances[u] + weight


def test_path_cost_equals_distance():
    result = bellman_ford(SAMPLE_WEIGHTS, 0)
    for vertex in range(len(SAMPLE_WEIGHTS)):
        route = result.path(vertex)
        cost = sum(SAMPLE_WEIGHTS[u][v] for u, v in zip(route, route[1:]))
        assert cost == result.distances[vertex]


def test_unreachable_vertex():
    result = bellman_ford(SAMPLE_WEIGHTS, 3)
    assert result.distances[0] == INFINITY
    assert result.path(0) == [0]


def test_negative_cycle_is_rejected():
    weights = [[0, 1], [-2, 0]]
    with pytest.raises(ValueError):
        bellman_ford(weights, 0)


def test_non_square_matrix_is_rejected():
    with pytest.raises(ValueError):
        bellman_ford([[0, 1], [1]], 0)


def test_unknown_source_is_rejected():
    with pytest.raises(IndexError):
        bellman_ford(SAMPLE_WEIGHTS, 4)


def test_main_prints_report(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == format_report(bellman_ford(SAMPLE_WEIGHTS, 0))


def test_main_rejects_unknown_vertex():
    with pytest.raises(SystemExit):
        main(["--source", "Z"])