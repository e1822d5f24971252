"""
Pytest fixtures for route_graph tests.

Provides small hand-built route networks:
- india: Mumbai-Hyderabad, Mumbai-Delhi, Hyderabad-Chennai
- split: two disjoint components (CityA-CityB, CityC-CityD)
- loop: a single self-loop on CityA
- diamond: two equally short routes between a and d
"""

import pytest

from route_graph import GraphStore


@pytest.fixture
def india():
    store = GraphStore()
    store.add_edge("Mumbai", "Hyderabad")
    store.add_edge("Mumbai", "Delhi")
    store.add_edge("Hyderabad", "Chennai")
    return store


@pytest.fixture
def split():
    store = GraphStore()
    store.add_edge("CityA", "CityB")
    store.add_edge("CityC", "CityD")
    return store


@pytest.fixture
def loop():
    store = GraphStore()
    store.add_edge("CityA", "CityA")
    return store


@pytest.fixture
def diamond():
    """a-b-d and a-c-d, both two hops."""
    store = GraphStore()
    store.add_edge("a", "b")
    store.add_edge("a", "c")
    store.add_edge("b", "d")
    store.add_edge("c", "d")
    return store


@pytest.fixture
def routes_csv(tmp_path):
    """A flight export with the cities in columns 3 and 7."""
    path = tmp_path / "flight_data.csv"
    path.write_text(
        "id,airline,flight,source_city,departure,stops,arrival,destination_city\n"
        "1,AI,AI-101,  Mumbai ,Morning,zero,Night,HYDERABAD\n"
        "2,AI,AI-102,Mumbai,Morning,zero,Night,Delhi\n"
        "3,6E,6E-201,Hyderabad,Evening,one,Night, chennai\n"
        "4,6E,6E-202,,Evening,one,Night,Delhi\n"
        "5,UK,UK-301,Delhi,Evening,one\n",
        encoding="utf-8",
    )
    return path
