"""Component index tests."""

from __future__ import annotations

from scarb_eject.project.components import ComponentIndex


def test_index_skips_core_and_unresolvable_references(snapshot) -> None:
    metadata = snapshot.validate(snapshot.hello_world())
    unit = metadata.compilation_units[0]

    index = ComponentIndex.build(metadata, unit)

    assert [index.graph.nodes[n]["component"].name for n in index.graph] == ["hello"]
    assert index.positions() == [1]
    # The self reference resolves; the core reference does not.
    assert [c.name for c in index.dependencies_of(1)] == ["hello"]
    assert index.dependencies_of(0) == []


def test_package_lookup_by_id(snapshot) -> None:
    metadata = snapshot.validate(snapshot.hello_world())
    unit = metadata.compilation_units[0]
    index = ComponentIndex.build(metadata, unit)

    hello = unit.components[1]
    assert index.package_of(hello).name == "hello"

    stray = unit.components[1].model_copy(update={"package": "nope 0.0.0"})
    assert index.package_of(stray) is None
