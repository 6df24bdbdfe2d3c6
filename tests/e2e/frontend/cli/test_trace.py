"""End-to-end tests for `catdoc trace path` and `catdoc trace domain`."""

import json

# pylint: disable=magic-value-comparison


def lines(output):
    """Non-empty output lines."""
    return [line for line in output.splitlines() if line.strip()]


class TestTracePath:
    """Tests for `catdoc trace path`."""

    @staticmethod
    def test_shortest_path(invoke, snapshot_file):
        """The direct morphism is the shortest route."""
        result = invoke(
            ["trace", "path", "field", "group", "--category", "math",
             "--snapshot", str(snapshot_file)]
        )
        assert result.exit_code == 0
        assert lines(result.output) == ["field -[additive_group_of_field]-> group"]

    @staticmethod
    def test_all_paths(invoke, snapshot_file):
        """--all lists every simple path, shortest first."""
        result = invoke(
            ["trace", "path", "field", "group", "--category", "math", "--all",
             "--snapshot", str(snapshot_file)]
        )
        assert result.exit_code == 0
        assert lines(result.output) == [
            "field -[additive_group_of_field]-> group",
            "field -[underlying_ring]-> ring -[additive_group]-> group",
        ]

    @staticmethod
    def test_max_depth(invoke, snapshot_file):
        """--max-depth prunes longer paths."""
        result = invoke(
            ["trace", "path", "field", "group", "--category", "math", "--all",
             "--max-depth", "1", "--snapshot", str(snapshot_file)]
        )
        assert lines(result.output) == ["field -[additive_group_of_field]-> group"]

    @staticmethod
    def test_same_object(invoke, snapshot_file):
        """An object reaches itself through its identity."""
        result = invoke(
            ["trace", "path", "ring", "ring", "--category", "math",
             "--snapshot", str(snapshot_file)]
        )
        assert result.exit_code == 0
        assert lines(result.output) == ["ring -[id_ring]-> ring"]

    @staticmethod
    def test_no_path(invoke, snapshot_file):
        """Morphisms are directed; the reverse trip fails with exit code 1."""
        result = invoke(
            ["trace", "path", "group", "field", "--category", "math",
             "--snapshot", str(snapshot_file)]
        )
        assert result.exit_code == 1
        assert "No path from group to field." in result.output

    @staticmethod
    def test_unknown_category(invoke, snapshot_file):
        """An unknown category id is a usage error."""
        result = invoke(
            ["trace", "path", "a", "b", "--category", "nope",
             "--snapshot", str(snapshot_file)]
        )
        assert result.exit_code == 1
        assert "Category 'nope' not found in snapshot." in result.output

    @staticmethod
    def test_json(invoke, snapshot_file):
        """--json prints the trace."""
        result = invoke(
            ["trace", "path", "field", "group", "--category", "math", "--all",
             "--json", "--snapshot", str(snapshot_file)]
        )
        trace = json.loads(result.output)
        assert trace["found"] is True
        assert trace["shortestPathLength"] == 1
        assert [[m["id"] for m in p] for p in trace["paths"]] == [
            ["f2g"],
            ["f2r", "r2g"],
        ]


class TestTraceDomain:
    """Tests for `catdoc trace domain`."""

    @staticmethod
    def test_functor_route(invoke, snapshot_file):
        """A concept is carried into the code category by the functor."""
        result = invoke(
            ["trace", "domain", "field", "code", "--snapshot", str(snapshot_file)]
        )
        assert result.exit_code == 0
        assert lines(result.output) == ["field =[Implementation]=> FieldClass"]

    @staticmethod
    def test_already_in_target(invoke, snapshot_file):
        """An object inside the target category needs no step."""
        result = invoke(
            ["trace", "domain", "field", "math", "--snapshot", str(snapshot_file)]
        )
        assert result.exit_code == 0
        assert lines(result.output) == ["field (already in target category)"]

    @staticmethod
    def test_no_route(invoke, snapshot_file):
        """No functor leaves the code category."""
        result = invoke(
            ["trace", "domain", "FieldClass", "math", "--snapshot", str(snapshot_file)]
        )
        assert result.exit_code == 1
        assert "No route from FieldClass to math." in result.output

    @staticmethod
    def test_json(invoke, snapshot_file):
        """--json prints every route with typed steps."""
        result = invoke(
            ["trace", "domain", "ring", "code", "--json",
             "--snapshot", str(snapshot_file)]
        )
        assert json.loads(result.output) == {
            "source": "ring",
            "targetCategory": "code",
            "found": True,
            "paths": [
                {
                    "steps": [
                        {"type": "functor", "id": "impl", "name": "Implementation"}
                    ],
                    "resultObject": "RingClass",
                }
            ],
        }
