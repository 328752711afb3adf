"""Tests for ambush_graph.parsers — edge-list format."""

import pytest

from ambush_graph.parsers import EdgeListParser, parse_edge_list


class TestParseEdgeList:
    def test_single_edge(self):
        parsed = parse_edge_list("a -> b")
        g = parsed.graph
        assert g.node_count() == 2
        assert g.children(parsed.handle("a")) == [parsed.handle("b")]
        assert parsed.head == parsed.handle("a")

    def test_chain(self):
        parsed = parse_edge_list("a -> b -> c")
        g = parsed.graph
        assert g.children(parsed.handle("b")) == [parsed.handle("c")]
        assert g.edge_count() == 2

    def test_join_prefix(self):
        parsed = parse_edge_list("a -> &sync -> b")
        g = parsed.graph
        sync = parsed.handle("&sync")
        assert g.is_join(sync)
        assert g.name(sync) == ""
        assert not g.is_join(parsed.handle("a"))

    def test_same_join_identifier_shared(self):
        parsed = parse_edge_list("a -> &j\nb -> &j")
        assert parsed.graph.node_count() == 3
        assert len(parsed.graph.parents(parsed.handle("&j"))) == 2

    def test_comments_and_blank_lines(self):
        src = "# build graph\n\nstart -> compile  # the slow bit\n\n"
        parsed = parse_edge_list(src)
        assert parsed.graph.node_count() == 2

    def test_lone_node(self):
        parsed = parse_edge_list("solo")
        assert parsed.graph.node_count() == 1
        assert parsed.graph.name(parsed.head) == "solo"

    def test_identifier_characters(self):
        parsed = parse_edge_list("step.1 -> svc:fetch-all -> out_2")
        assert set(parsed.handles) == {"step.1", "svc:fetch-all", "out_2"}

    def test_leading_dash_identifier(self):
        parsed = parse_edge_list("-pre -> main -> &-sync")
        assert parsed.graph.name(parsed.handle("-pre")) == "-pre"
        assert parsed.graph.is_join(parsed.handle("&-sync"))

    def test_arrow_without_spaces(self):
        parsed = parse_edge_list("a->b")
        assert parsed.graph.children(parsed.handle("a")) == [parsed.handle("b")]

    def test_explicit_head(self):
        parsed = parse_edge_list("a -> b\nc -> b", head="c")
        assert parsed.head == parsed.handle("c")

    def test_unknown_head(self):
        with pytest.raises(ValueError, match="Head node"):
            parse_edge_list("a -> b", head="zzz")

    def test_invalid_identifier_reports_line(self):
        with pytest.raises(ValueError, match="line 2"):
            parse_edge_list("a -> b\nb -> c d")

    def test_dangling_arrow(self):
        with pytest.raises(ValueError):
            parse_edge_list("a ->")

    def test_self_loop(self):
        with pytest.raises(ValueError, match="line 1"):
            parse_edge_list("a -> a")

    def test_empty(self):
        with pytest.raises(ValueError, match="empty"):
            parse_edge_list("# nothing here\n")

    def test_unknown_handle_lookup(self):
        parsed = EdgeListParser().parse("a -> b")
        with pytest.raises(ValueError):
            parsed.handle("c")
