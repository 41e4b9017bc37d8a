"""Unit tests for link assembly."""

import logging

from shader_export.core.types import ChildDescriptor, LinkRef
from shader_export.export.links import MAX_LINK_POSITIONS, LinkAssembler, is_position


class TestLinkAssembler:
    """Test the three link shapes."""

    def test_empty_build_is_none(self):
        """Test that no links means None, not an empty mapping."""
        assert LinkAssembler().build() is None

    def test_single_reference(self):
        """Test that an unindexed child is stored directly."""
        links = LinkAssembler()
        links.add("c", None, "X")
        assert links.build() == {"c": LinkRef("X")}

    def test_single_reference_last_write_wins(self):
        """Test that a second unindexed child replaces the first."""
        links = LinkAssembler()
        links.add("c", None, "X")
        links.add("c", None, "Y")
        assert links.build() == {"c": LinkRef("Y")}

    def test_ordered_with_holes(self):
        """Test that positions are padded with holes."""
        links = LinkAssembler()
        links.add("a", 0, "X")
        links.add("a", 2, "Y")
        assert links.build() == {"a": [LinkRef("X"), None, LinkRef("Y")]}

    def test_ordered_out_of_order(self):
        """Test that later positions may be filled first."""
        links = LinkAssembler()
        links.add("a", 1, "Y")
        links.add("a", 0, "X")
        assert links.build() == {"a": [LinkRef("X"), LinkRef("Y")]}

    def test_keyed(self):
        """Test that non-integer indices produce a keyed mapping."""
        links = LinkAssembler()
        links.add("b", "x", "X")
        links.add("b", "y", "Y")
        assert links.build() == {"b": {"x": LinkRef("X"), "y": LinkRef("Y")}}

    def test_bool_index_is_keyed(self):
        """Test that booleans are not treated as positions."""
        assert not is_position(True)
        links = LinkAssembler()
        links.add("b", True, "X")
        assert links.build() == {"b": {"True": LinkRef("X")}}

    def test_properties_are_independent(self):
        """Test that each property keeps its own shape."""
        links = LinkAssembler()
        links.add("a", 0, "X")
        links.add("b", "k", "Y")
        links.add("c", None, "Z")
        assert links.build() == {
            "a": [LinkRef("X")],
            "b": {"k": LinkRef("Y")},
            "c": LinkRef("Z"),
        }

    def test_add_all(self):
        """Test adding descriptors in bulk."""
        links = LinkAssembler().add_all(
            [ChildDescriptor("a", "X", 0), ChildDescriptor("a", "Y", 1)]
        )
        assert links.build() == {"a": [LinkRef("X"), LinkRef("Y")]}


class TestShapeConflicts:
    """Test that mixed index families never raise."""

    def test_keyed_then_positional(self, caplog):
        """Test that a positional index into a keyed link is stored as a key."""
        links = LinkAssembler()
        with caplog.at_level(logging.WARNING):
            links.add("p", "k", "X")
            links.add("p", 0, "Y")
        assert links.build() == {"p": {"k": LinkRef("X"), "0": LinkRef("Y")}}
        assert "positional index" in caplog.text

    def test_positional_then_keyed(self, caplog):
        """Test that a keyed index into an ordered link is dropped."""
        links = LinkAssembler()
        with caplog.at_level(logging.WARNING):
            links.add("p", 0, "X")
            links.add("p", "k", "Y")
        assert links.build() == {"p": [LinkRef("X")]}
        assert "non-positional index" in caplog.text

    def test_single_then_indexed(self, caplog):
        """Test that an indexed write replaces a single reference."""
        links = LinkAssembler()
        with caplog.at_level(logging.WARNING):
            links.add("p", None, "X")
            links.add("p", 1, "Y")
        assert links.build() == {"p": [None, LinkRef("Y")]}
        assert "single reference" in caplog.text

    def test_negative_index_dropped(self, caplog):
        """Test that negative positions are ignored."""
        links = LinkAssembler()
        with caplog.at_level(logging.WARNING):
            links.add("p", 0, "X")
            links.add("p", -1, "Y")
        assert links.build() == {"p": [LinkRef("X")]}
        assert "out-of-range" in caplog.text

    def test_huge_index_dropped(self, caplog):
        """Test that a far-out position is dropped instead of padding the list."""
        links = LinkAssembler()
        with caplog.at_level(logging.WARNING):
            links.add("p", 10**8, "X")
        assert links.build() is None
        assert "out-of-range" in caplog.text

    def test_position_bound(self):
        """Test that the last allowed position is kept and the next one dropped."""
        links = LinkAssembler()
        links.add("p", MAX_LINK_POSITIONS - 1, "X")
        links.add("p", MAX_LINK_POSITIONS, "Y")
        result = links.build()["p"]
        assert len(result) == MAX_LINK_POSITIONS
        assert result[-1] == LinkRef("X")
        assert result.count(None) == MAX_LINK_POSITIONS - 1

    def test_huge_index_keeps_existing_links(self):
        """Test that a dropped position leaves earlier entries untouched."""
        links = LinkAssembler()
        links.add("p", 1, "X")
        links.add("p", 10**8, "Y")
        assert links.build() == {"p": [None, LinkRef("X")]}
