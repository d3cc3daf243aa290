"""Tests for models/circuit.py - CircuitModel editing operations."""

import pytest
from gridspice.models.circuit import CircuitModel
from gridspice.models.element import ElementKind
from gridspice.tests.conftest import P, scene


class TestRouting:
    def test_route_records_wire_and_groups(self, model):
        wire = model.route(P(0, 0), P(3, 3), True)
        assert model.rendered_wires == [wire]
        assert model.anchors == [P(3, 3), P(0, 0)]
        assert len(model.node_groups) == 1
        assert len(model.node_groups[0]) == 7

    def test_route_y_first_mirrors(self, model):
        model.route(P(0, 0), P(3, 3), False)
        assert P(0, 3) in model.node_groups[0]
        assert P(3, 0) not in model.node_groups[0]

    def test_disjoint_wires_two_groups(self, model):
        model.route(P(0, 0), P(1, 0), True)
        model.route(P(0, 1), P(1, 1), True)
        assert sorted(model.node_groups, key=min) == [
            frozenset({P(0, 0), P(1, 0)}),
            frozenset({P(0, 1), P(1, 1)}),
        ]

    def test_find_group(self, model):
        model.route(P(0, 0), P(2, 0), True)
        assert model.find_group(P(1, 0)) == 0
        assert model.find_group(P(5, 5)) is None


class TestRemoveNode:
    def test_remove_ten_unit_wire(self, model):
        model.route(P(0, 0), P(10, 0), True)
        removed = model.remove_node(P(0, 0))

        assert removed == frozenset(P(x, 0) for x in range(11))
        assert len(model.wire_graph) == 0
        assert model.node_groups == []
        assert model.rendered_wires == []
        assert model.anchors == []

    def test_remove_only_touched_group(self, model):
        model.route(P(0, 0), P(3, 0), True)
        model.route(P(0, 5), P(3, 5), True)
        model.remove_node(P(2, 5))

        assert model.node_groups == [frozenset(P(x, 0) for x in range(4))]
        assert len(model.rendered_wires) == 1
        assert model.anchors == [P(3, 0), P(0, 0)]

    def test_remove_from_middle_of_wire(self, model):
        model.route(P(0, 0), P(4, 4), True)
        model.remove_node(P(4, 2))
        assert len(model.wire_graph) == 0

    def test_remove_outside_any_group_is_noop(self, model):
        model.route(P(0, 0), P(2, 0), True)
        assert model.remove_node(P(9, 9)) is None
        assert len(model.wire_graph) == 3
        assert len(model.rendered_wires) == 1


class TestElements:
    def test_add_element_allocates_ids(self, model):
        ids = [model.add_element(ElementKind.RESISTOR, scene(i * 6, 0)).element_id
               for i in range(3)]
        assert ids == [0, 1, 2]

    def test_remove_element_reuses_id(self, model):
        for i in range(3):
            model.add_element(ElementKind.RESISTOR, scene(i * 6, 0))
        model.remove_element(1)
        assert model.add_element(ElementKind.CAPACITOR, scene(0, 9)).element_id == 1

    def test_remove_element_drops_terminal_anchors(self, model):
        resistor = model.add_element(ElementKind.RESISTOR, scene(2, 0))
        assert resistor.terminals == [P(0, 0), P(4, 0)]
        model.route(P(4, 0), P(8, 0), True)
        model.route(P(8, 0), P(8, 3), True)

        model.remove_element(resistor.element_id)

        assert P(4, 0) not in model.anchors
        assert model.anchors == [P(8, 0), P(8, 3)]
        # Grouping is not recomputed until the next topology edit
        assert P(4, 0) in model.node_groups[0]

    def test_wire_deletable_after_its_anchors_are_removed(self, model):
        model.add_element(ElementKind.RESISTOR, scene(2, 0))
        model.route(P(0, 0), P(4, 0), True)
        model.remove_element(0)
        assert model.anchors == []

        model.route(P(10, 10), P(11, 10), True)

        grouped = set().union(*model.node_groups)
        assert grouped == set(model.wire_graph)
        assert model.find_group(P(2, 0)) is not None

        removed = model.remove_node(P(2, 0))
        assert removed == frozenset(P(x, 0) for x in range(5))
        assert len(model.rendered_wires) == 1
        assert model.node_groups == [frozenset({P(10, 10), P(11, 10)})]

    def test_element_on_unanchored_wire_stays_connected(self, model):
        model.add_element(ElementKind.CAPACITOR, scene(2, 0))
        model.route(P(0, 0), P(4, 0), True)
        model.remove_element(0)
        model.regroup()

        resistor = model.add_element(ElementKind.RESISTOR, scene(2, 0))
        group = model.find_group(P(0, 0))
        assert group is not None
        assert all(model.find_group(t) == group for t in resistor.terminals)

    def test_remove_missing_element_is_noop(self, model):
        model.route(P(0, 0), P(2, 0), True)
        assert model.remove_element(3) is None
        assert model.anchors == [P(2, 0), P(0, 0)]

    def test_set_value(self, model):
        element = model.add_element(ElementKind.RESISTOR, scene(0, 0))
        assert model.set_value(element.element_id, "2.2k")
        assert element.value == pytest.approx(2200.0)

    def test_set_value_ground_rejected(self, model):
        ground = model.add_element(ElementKind.GROUND, scene(0, 0))
        assert model.set_value(ground.element_id, 1.0) is False

    def test_set_value_missing_element(self, model):
        assert model.set_value(42, 1.0) is False


class TestQueries:
    def test_drag_points_include_wires_and_terminals(self, model):
        model.add_element(ElementKind.GROUND, scene(10, 11))
        model.route(P(0, 0), P(1, 0), True)
        assert model.drag_points() == [P(0, 0), P(1, 0), P(10, 10)]

    def test_assemble_without_ground(self, model):
        model.add_element(ElementKind.RESISTOR, scene(2, 0))
        model.route(P(0, 0), P(4, 0), True)
        assert model.assemble() is None

    def test_assemble_divider(self, divider_model):
        netlist = divider_model.assemble()
        assert netlist is not None
        assert netlist.node_count == 3
        assert len(netlist.devices) == 3

    def test_clear(self, divider_model):
        divider_model.clear()
        assert len(divider_model.wire_graph) == 0
        assert divider_model.anchors == []
        assert divider_model.node_groups == []
        assert divider_model.rendered_wires == []
        assert len(divider_model.registry) == 0


def assert_partition(model):
    union = set()
    for group in model.node_groups:
        assert union.isdisjoint(group)
        union |= group
    assert union == set(model.wire_graph)


def test_groups_partition_graph_after_edits():
    model = CircuitModel()
    edits = [
        lambda: model.route(P(0, 0), P(5, 5), True),
        lambda: model.add_element(ElementKind.RESISTOR, scene(7, 5)),
        lambda: model.route(P(5, 0), P(0, 5), False),
        lambda: model.route(P(5, 5), P(9, 5), True),
        lambda: model.route(P(10, 10), P(12, 10), True),
        lambda: model.remove_element(0),
        lambda: model.regroup(),
        lambda: model.remove_node(P(11, 10)),
        lambda: model.add_element(ElementKind.GROUND, scene(9, 6)),
        lambda: model.route(P(2, 8), P(2, 12), False),
        lambda: model.add_element(ElementKind.RESISTOR, scene(2, 10), rotation=90.0),
        # Drops both anchors of the vertical wire
        lambda: model.remove_element(1),
        lambda: model.route(P(9, 5), P(9, 8), False),
        lambda: model.remove_node(P(2, 10)),
        lambda: model.remove_element(0),
        lambda: model.remove_node(P(7, 5)),
    ]
    for edit in edits:
        edit()
        assert_partition(model)
    assert len(model.wire_graph) == 0
