import pytest

from naviz.state import (
    AtomState,
    Config,
    HPosition,
    LegendEntry,
    LineConfig,
    State,
    VPosition,
)


def test_vposition_get():
    assert VPosition.TOP.get("a", "b") == "a"
    assert VPosition.BOTTOM.get("a", "b") == "b"


def test_hposition_get():
    assert HPosition.LEFT.get(1, 2) == 1
    assert HPosition.RIGHT.get(1, 2) == 2


def test_vposition_inverse_is_involution():
    assert VPosition.TOP.inverse() is VPosition.BOTTOM
    assert VPosition.BOTTOM.inverse() is VPosition.TOP
    assert VPosition.TOP.inverse().inverse() is VPosition.TOP
    assert VPosition.BOTTOM.inverse().inverse() is VPosition.BOTTOM


def test_hposition_inverse_is_involution():
    assert HPosition.LEFT.inverse() is HPosition.RIGHT
    assert HPosition.RIGHT.inverse() is HPosition.LEFT
    assert HPosition.LEFT.inverse().inverse() is HPosition.LEFT
    assert HPosition.RIGHT.inverse().inverse() is HPosition.RIGHT


def test_inverse_values():
    assert VPosition.TOP.inverse() is VPosition.BOTTOM
    assert HPosition.RIGHT.inverse() is HPosition.LEFT


def test_example_config_extent_and_grid():
    config = Config.example()
    assert config.content_extent == ((0.0, 0.0), (100.0, 120.0))
    assert config.machine.grid.step == (20.0, 20.0)
    assert config.machine.grid.legend.labels == ("x", "y")
    assert config.machine.grid.legend.position == (VPosition.BOTTOM, HPosition.LEFT)


def test_example_config_traps():
    traps = Config.example().machine.traps
    assert traps.positions[0] == (0.0, 0.0)
    xs = {x for x, _ in traps.positions}
    assert xs == {x * 14.0 for x in range(8)}
    ys = {y for _, y in traps.positions}
    assert {0.0, 17.0, 38.0, 85.0} <= ys
    assert len(traps.positions) == len(xs) * len(ys)
    assert traps.radius == 3.0
    assert traps.line_width == 0.5


def test_example_config_zones():
    zones = Config.example().machine.zones
    assert [z.start for z in zones] == [(-10.0, -10.0), (-10.0, 30.0), (-10.0, 80.0)]
    assert zones[1].line.color == (255, 122, 0, 255)
    assert zones[0].line.color == zones[2].line.color


def test_example_config_legend():
    legend = Config.example().legend
    assert [s.name for s in legend.entries] == ["Zones", "Atoms", "Foo"]
    assert [e.text for e in legend.entries[0].entries] == ["Top", "Middle", "Bottom"]
    assert legend.entries[2].entries == [LegendEntry("Bar", None)]
    assert legend.heading_skip == 80.0
    assert legend.entry_skip == 64.0


def test_example_config_fonts():
    config = Config.example()
    assert config.time.font.size == 48.0
    assert config.atoms.label.family == "Fira Mono"
    assert config.atoms.shuttle == LineConfig(1.0, 10.0, 0.5, (180, 180, 180, 255))


def test_example_configs_are_independent():
    first = Config.example()
    second = Config.example()
    first.legend.entries.clear()
    assert len(second.legend.entries) == 3


def test_line_config_is_immutable():
    line = Config.example().atoms.shuttle
    with pytest.raises(AttributeError):
        line.width = 2.0
    assert line.width == 1.0


def test_example_state():
    state = State.example()
    assert state.time == "Time: 42 us"
    assert [a.label for a in state.atoms] == [str(i) for i in range(17)]
    assert state.atoms[0].position == (0.0, 0.0)
    assert not state.atoms[0].shuttle


def test_example_state_atoms_in_range():
    for atom in State.example().atoms:
        x, y = atom.position
        assert 0.0 <= x < 97.0
        assert 0.0 <= y < 113.0
        assert atom.size == 3.0
        assert atom.color == (255, 128, 32, 255)


def test_example_state_shuttling_atoms():
    shuttling = [a.label for a in State.example().atoms if a.shuttle]
    assert shuttling == ["2", "4", "6", "9", "11", "13", "16"]


def test_atom_state_fields():
    atom = AtomState((1.0, 2.0), 3.0, (1, 2, 3, 4), True, "q")
    assert atom.position == (1.0, 2.0)
    assert atom.label == "q"