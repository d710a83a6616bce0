import pytest

from dccirc.circuit_elements import Battery, Capacitor, Parallel, Resistor, Series, Wire
from dccirc.exceptions import DegenerateGeometryError
from dccirc.geometry import Segment
from dccirc.layout import (Extent, circuit_length, circuit_width, extent, layout_circuit,
                           series_split)

LEAVES = [Wire(), Battery(1.0), Resistor(2.0), Capacitor(3.0)]


def _chain(*elements):
    tree = elements[0]
    for element in elements[1:]:
        tree = Series(tree, element)
    return tree


class TestExtent:
    @pytest.mark.parametrize("leaf", LEAVES)
    def test_leaf_is_one_by_one(self, leaf):
        assert extent(leaf) == Extent(1, 1)

    def test_series_lengths_add_widths_max(self):
        tall = Parallel(Wire(), Wire())
        tree = Series(tall, _chain(Wire(), Wire(), Wire()))
        assert circuit_length(tree) == circuit_length(tall) + 3
        assert circuit_width(tree) == 2

    def test_parallel_widths_add_lengths_max(self):
        tree = Parallel(_chain(Wire(), Wire(), Wire()), Parallel(Wire(), Wire()))
        assert circuit_width(tree) == 1 + 2
        assert circuit_length(tree) == 3

    def test_example_circuit(self, example_tree):
        assert extent(example_tree) == Extent(5, 3)


class TestSeriesSplit:
    def test_proportional(self):
        assert series_split(1, 3, 50, 950) == pytest.approx(275)
        assert series_split(1, 1, 0, 100) == pytest.approx(50)

    def test_proportional_stays_inside_span(self):
        for left, right in [(1, 1), (1, 9), (9, 1), (4, 5)]:
            split = series_split(left, right, 800, 900)
            assert 800 < split < 900

    # The legacy divider f * (x1 + x2) is kept selectable; it is not an
    # interpolation and only matches the proportional one when x1 == 0.
    def test_legacy_formula(self):
        assert series_split(1, 3, 50, 950, mode='legacy') == pytest.approx(250)

    def test_legacy_matches_proportional_at_zero_origin(self):
        assert (series_split(2, 3, 0, 500, mode='legacy')
                == pytest.approx(series_split(2, 3, 0, 500)))

    def test_unknown_mode(self):
        with pytest.raises(ValueError):
            series_split(1, 1, 0, 10, mode='midpoint')


class TestLayoutCircuit:
    def test_wire_spans_whole_range(self):
        assert layout_circuit(Wire(), 50, 950, 400) == [Segment(50.0, 400.0, 950.0, 400.0, 3.0)]

    def test_series_draws_left_then_right(self):
        segments = layout_circuit(Series(Wire(), _chain(Wire(), Wire(), Wire())), 0, 400, 0)
        assert [s.x1 for s in segments] == pytest.approx([0, 100, 200, 300])
        assert [s.x2 for s in segments] == pytest.approx([100, 200, 300, 400])

    def test_parallel_offsets_and_bus_bars(self):
        segments = layout_circuit(Parallel(Wire(), Wire()), 0, 100, 0)
        top, bottom, left_bar, right_bar = segments
        assert top == Segment(0.0, 60.0, 100.0, 60.0, 3.0)
        assert bottom == Segment(0.0, -60.0, 100.0, -60.0, 3.0)
        for bar, x in [(left_bar, 0.0), (right_bar, 100.0)]:
            assert bar.x1 == x
            assert bar.x2 == pytest.approx(x)
            assert bar.y1 == -60.0
            assert bar.y2 == pytest.approx(60.0)
            assert bar.stroke_width == 2.0

    def test_parallel_offsets_use_branch_width(self):
        tree = Parallel(Parallel(Wire(), Wire()), Wire())
        segments = layout_circuit(tree, 0, 100, 0)
        # top branch (2 units) centered 120 up, bottom (1 unit) 60 down
        assert [s.y1 for s in segments[:2]] == [120.0 + 60.0, 120.0 - 60.0]
        assert segments[4].y1 == -60.0
        outer_bar = segments[5]
        assert outer_bar.y1 == -60.0
        assert outer_bar.y2 == pytest.approx(120.0)

    def test_unit_pixels_override(self):
        segments = layout_circuit(Parallel(Wire(), Wire()), 0, 100, 0, unit_pixels=10)
        assert segments[0].y1 == 10.0
        assert segments[1].y1 == -10.0

    def test_example_segment_count(self, example_tree):
        # 2 wires, 4 resistors (7 each), 1 capacitor and 2 batteries (6 each), 2 x 2 bus bars
        assert len(layout_circuit(example_tree, 50, 950, 400)) == 2 + 4 * 7 + 3 * 6 + 4

    def test_deterministic(self, example_tree):
        first = layout_circuit(example_tree, 50, 950, 400)
        second = layout_circuit(example_tree, 50, 950, 400)
        assert first == second

    def test_legacy_differs_away_from_zero(self, example_tree):
        assert (layout_circuit(example_tree, 50, 950, 400, series_split='legacy')
                != layout_circuit(example_tree, 50, 950, 400))

    def test_unknown_drawing_parameter(self):
        with pytest.raises(ValueError):
            layout_circuit(Wire(), 0, 100, 0, line_colour='red')

    def test_invalid_series_split(self):
        with pytest.raises(ValueError):
            layout_circuit(Wire(), 0, 100, 0, series_split='midpoint')


class TestDegenerateGeometry:
    def test_empty_span(self):
        with pytest.raises(DegenerateGeometryError):
            layout_circuit(Wire(), 10, 10, 0)

    def test_reversed_span(self):
        with pytest.raises(DegenerateGeometryError) as excinfo:
            layout_circuit(Resistor(1.0), 100, 0, 0)
        assert excinfo.value.x1 == 100
        assert excinfo.value.x2 == 0

    def test_legacy_split_can_leave_the_span(self):
        tree = Series(Wire(), _chain(Wire(), Wire(), Wire()))
        with pytest.raises(DegenerateGeometryError):
            layout_circuit(tree, 800, 900, 0, series_split='legacy')

    def test_proportional_split_never_degenerates(self):
        tree = Series(Wire(), _chain(Wire(), Wire(), Wire()))
        assert len(layout_circuit(tree, 800, 900, 0)) == 4
