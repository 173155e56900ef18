import math

import pytest

from tinkerbox.graphs import (
    Edge,
    KeyedQueue,
    bellman_ford,
    breadth_first_search,
    dijkstra,
    find_lowest_cost,
    main,
)

EDGES = [
    Edge(1, 2, 5),
    Edge(1, 3, 3),
    Edge(3, 4, 1),
    Edge(4, 6, 2),
    Edge(2, 4, 3),
    Edge(2, 6, 2),
]

GRAPH = {
    "start": [("a", 5), ("b", 2)],
    "a": [("fin", 2)],
    "b": [("a", 1), ("fin", 4)],
    "fin": [],
}

COSTS = {"a": 6, "b": 2, "fin": math.inf}

PEOPLE = {
    "you": ["Alice", "Tom"],
    "Alice": ["Magie"],
    "Tom": ["Daniel", "Clara"],
    "Clara": ["Alice", "Ken"],
    "Magie": ["you"],
    "Daniel": [],
    "Ken": [],
}


def test_bellman_ford_satisfies_every_edge():
    distance = bellman_ford(EDGES, 1)
    assert distance[1] == 0
    for edge in EDGES:
        assert distance[edge.target] <= distance[edge.source] + edge.weight


def test_bellman_ford_shortest_to_last_node():
    assert bellman_ford(EDGES, 1)[6] == 6


def test_bellman_ford_direct_edge_and_unreachable():
    distance = bellman_ford([Edge("a", "b", 1), Edge("c", "d", 2)], "a")
    assert distance["b"] == 1
    assert math.isinf(distance["c"])
    assert math.isinf(distance["d"])


def test_find_lowest_cost_picks_cheapest_unprocessed():
    assert find_lowest_cost(COSTS, set()) == "b"
    assert find_lowest_cost(COSTS, {"b"}) == "a"


def test_find_lowest_cost_none_when_only_infinite_left():
    assert find_lowest_cost(COSTS, {"a", "b"}) is None


def test_find_lowest_cost_respects_ceiling():
    assert find_lowest_cost({"x": 100}, set()) is None
    assert find_lowest_cost({"x": 99}, set()) == "x"


def test_dijkstra_finish_cost():
    assert dijkstra(GRAPH, COSTS)["fin"] == 5


def test_dijkstra_never_raises_costs_and_keeps_input():
    result = dijkstra(GRAPH, COSTS)
    for node, cost in COSTS.items():
        assert result[node] <= cost
    assert math.isinf(COSTS["fin"])


def test_breadth_first_search_finds_seller():
    checked = breadth_first_search(PEOPLE, "you", "Ken")
    assert checked[-1] == "Ken"
    assert checked[:2] == ["Alice", "Tom"]
    assert len(set(checked)) == len(checked)
    assert "Daniel" in checked


def test_breadth_first_search_missing_target():
    assert breadth_first_search(PEOPLE, "you", "Zoe") is None


def test_breadth_first_search_unknown_person_raises():
    with pytest.raises(KeyError):
        breadth_first_search({"you": ["ghost"]}, "you", "Ken")


def test_keyed_queue_dequeues_in_key_order():
    queue = KeyedQueue()
    queue.enqueue("you", ["Tom", "Magie", "Marie"])
    queue.enqueue("Tom", ["Clarie", "Daniel"])
    assert len(queue) == 2
    assert queue.dequeue() == ("Tom", ["Clarie", "Daniel"])
    assert queue.dequeue() == ("you", ["Tom", "Magie", "Marie"])
    assert len(queue) == 0


def test_keyed_queue_enqueue_replaces():
    queue = KeyedQueue()
    queue.enqueue("you", ["Tom"])
    queue.enqueue("you", ["Marie"])
    assert queue.items() == [("you", ["Marie"])]


def test_keyed_queue_empty_dequeue_raises():
    with pytest.raises(IndexError):
        KeyedQueue().dequeue()


def test_main_search_reports_seller(capsys):
    assert main(["bfs"]) == 0
    out = capsys.readouterr().out
    assert "check for Alice..." in out
    assert "Ken is a seller" in out


def test_main_dijkstra_prints_answer(capsys):
    main(["dijkstra"])
    assert "ANSWER:" in capsys.readouterr().out