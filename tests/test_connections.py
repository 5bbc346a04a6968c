import _bootstrap  # noqa: F401

import pytest

from lyric_rhymes.analysis import analyze
from lyric_rhymes.connections import ConnectionOptions, generate_connections


def test_couplet_has_one_connection():
    connections = generate_connections(analyze("cat\nhat"))
    assert len(connections) == 1
    connection = connections[0]
    assert (connection.source.word, connection.target.word) == ("cat", "hat")
    assert connection.distance == 1
    assert connection.density == pytest.approx(1.0)


def test_empty_input_gives_no_connections():
    assert generate_connections([]) == []
    assert generate_connections(analyze("")) == []


def test_fan_out_follows_complexity(make_word, make_group):
    group = make_group("g", "perfect", [make_word(line) for line in range(10)])
    connections = generate_connections([group], ConnectionOptions(complexity_level=1))
    # every word links to at most two later words
    assert len(connections) == 8 * 2 + 1
    assert all(c.target.line - c.source.line <= 2 for c in connections)


def test_long_distances_are_skipped(make_word, make_group):
    group = make_group("g", "perfect", [make_word(0), make_word(16)])
    assert generate_connections([group], ConnectionOptions(complexity_level=1)) == []
    assert len(generate_connections([group], ConnectionOptions(complexity_level=2))) == 1


def test_density_averages_line_coverage(make_word, make_group):
    group = make_group("g", "perfect", [make_word(0), make_word(1), make_word(2)])
    connections = generate_connections([group])
    densities = {(c.source.line, c.target.line): c.density for c in connections}
    assert densities[(0, 1)] == pytest.approx(2.5)
    assert densities[(1, 2)] == pytest.approx(2.5)
    assert densities[(0, 2)] == pytest.approx(7 / 3)


def test_focus_word_fans_out(make_word, make_group):
    group = make_group("g", "perfect", [make_word(0), make_word(1), make_word(2)])
    connections = generate_connections([group], ConnectionOptions(focus_word_key="1-0"))
    assert len(connections) == 2
    assert all(c.source.key == "1-0" for c in connections)


def test_focus_word_outside_groups(make_word, make_group):
    group = make_group("g", "perfect", [make_word(0), make_word(1)])
    assert generate_connections([group], ConnectionOptions(focus_word_key="7-3")) == []


def test_ordering_prefers_strength_then_distance(make_word, make_group):
    weak = make_group("weak", "family", [make_word(0), make_word(1)], strength=0.7)
    strong = make_group("strong", "perfect", [make_word(2), make_word(5), make_word(6)], strength=0.9)
    connections = generate_connections([weak, strong])
    assert [c.group.id for c in connections] == ["strong", "strong", "strong", "weak"]
    assert [c.distance for c in connections[:3]] == [1, 3, 4]


def test_hovered_word_is_prioritised(make_word, make_group):
    weak = make_group("weak", "family", [make_word(0), make_word(1)], strength=0.7)
    strong = make_group("strong", "perfect", [make_word(2), make_word(3)], strength=0.9)
    connections = generate_connections([strong, weak], ConnectionOptions(hovered_word_key="0-0"))
    assert connections[0].group.id == "weak"


def test_result_is_truncated(make_word, make_group):
    group = make_group("g", "perfect", [make_word(line) for line in range(10)])
    connections = generate_connections([group], ConnectionOptions(max_connections=3))
    assert len(connections) == 3
    assert generate_connections([group], ConnectionOptions(max_connections=0)) == []


def test_filters(make_word, make_group):
    end = make_group("end", "perfect", [make_word(0), make_word(1)])
    internal = make_group(
        "internal",
        "slant",
        [make_word(0, 1, is_end_rhyme=False), make_word(1, 1, is_end_rhyme=False)],
        strength=0.5,
    )
    groups = [end, internal]

    def ids(options):
        return {c.group.id for c in generate_connections(groups, options)}

    assert ids(ConnectionOptions(type_filter={"slant"})) == {"internal"}
    assert ids(ConnectionOptions(show_end_rhymes=False)) == {"internal"}
    assert ids(ConnectionOptions(show_internal_rhymes=False)) == {"end"}
    assert ids(ConnectionOptions(selected_group_id="end")) == {"end"}


def test_connection_members_belong_to_group(verse):
    for connection in generate_connections(analyze(verse)):
        assert connection.group.has_word(connection.source)
        assert connection.group.has_word(connection.target)
        assert connection.source.identity != connection.target.identity


@pytest.mark.parametrize(
    "kwargs",
    [
        {"complexity_level": 0},
        {"complexity_level": 6},
        {"max_connections": -1},
        {"type_filter": {"perfect", "rhyming"}},
    ],
)
def test_invalid_options(kwargs):
    with pytest.raises(ValueError):
        ConnectionOptions(**kwargs)


def test_connection_serialises_without_nested_group():
    connection = generate_connections(analyze("cat\nhat"))[0]
    data = connection.to_dict()
    assert data["group_id"] == "perfect-aet"
    assert data["source"]["word"] == "cat"
    assert data["distance"] == 1
