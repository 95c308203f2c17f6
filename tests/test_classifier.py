import pytest
from conftest import RecordingAcceptor
from transport.classifier import (
    NeighborKind, classify, classify_entity, connected_acceptors, connected_peers
)
from transport.directions import Direction, VALID_DIRECTIONS
from transport.ecs.components import TransmissionType

def test_isolated_node_has_six_empty_slots(grid, node):
    slots = classify(grid, node)
    assert len(slots) == 6
    assert [s.direction for s in slots] == VALID_DIRECTIONS
    assert all(s.kind is NeighborKind.EMPTY and s.entity is None for s in slots)

def test_peer_acceptor_and_empty(grid, node, place_peer, place_acceptor):
    peer = place_peer(Direction.UP)
    acceptor = place_acceptor(Direction.EAST)

    slots = classify(grid, node)
    assert slots[Direction.UP.ordinal].kind is NeighborKind.PEER
    assert slots[Direction.UP.ordinal].entity == peer
    assert slots[Direction.EAST.ordinal].kind is NeighborKind.ACCEPTOR
    assert slots[Direction.EAST.ordinal].acceptor is acceptor
    assert slots[Direction.DOWN.ordinal].kind is NeighborKind.EMPTY

def test_dual_capability_neighbor_is_a_peer(grid, node, place_acceptor):
    place_acceptor(Direction.NORTH, transmission=TransmissionType.FLUID)
    slot = classify(grid, node)[Direction.NORTH.ordinal]
    assert slot.kind is NeighborKind.PEER
    assert slot.acceptor is None

def test_foreign_transmitter_is_neither_peer_nor_acceptor(grid, node, place_acceptor, place_peer):
    place_acceptor(Direction.WEST, transmission=TransmissionType.GAS)
    place_peer(Direction.SOUTH, transmission=TransmissionType.ENERGY)
    slots = classify(grid, node)
    assert slots[Direction.WEST.ordinal].kind is NeighborKind.EMPTY
    assert slots[Direction.SOUTH.ordinal].kind is NeighborKind.EMPTY

def test_classification_follows_node_transmission(grid, node, place_peer):
    place_peer(Direction.UP, transmission=TransmissionType.GAS)
    assert classify(grid, node, TransmissionType.GAS)[Direction.UP.ordinal].kind is NeighborKind.PEER
    assert classify(grid, node, TransmissionType.FLUID)[Direction.UP.ordinal].kind is NeighborKind.EMPTY

def test_entity_without_capabilities_is_empty(grid):
    bare = grid.registry.new_entity()
    assert classify_entity(bare, TransmissionType.FLUID) is NeighborKind.EMPTY
    assert classify_entity(None, TransmissionType.FLUID) is NeighborKind.EMPTY

def test_classification_is_idempotent(grid, node, place_peer, place_acceptor):
    place_peer(Direction.DOWN)
    place_acceptor(Direction.EAST)
    place_acceptor(Direction.WEST, transmission=TransmissionType.FLUID)
    assert classify(grid, node) == classify(grid, node)

def test_classification_sees_world_changes(grid, node, place_acceptor):
    assert classify(grid, node)[Direction.EAST.ordinal].kind is NeighborKind.EMPTY
    place_acceptor(Direction.EAST)
    assert classify(grid, node)[Direction.EAST.ordinal].kind is NeighborKind.ACCEPTOR

def test_equal_acceptors_keep_their_own_directions(grid, node, place_acceptor):
    # Two slots referencing the same acceptor object must not be confused.
    shared = RecordingAcceptor()
    place_acceptor(Direction.UP, shared)
    place_acceptor(Direction.EAST, shared)
    slots = [s for s in classify(grid, node) if s.kind is NeighborKind.ACCEPTOR]
    assert [s.direction for s in slots] == [Direction.UP, Direction.EAST]

def test_projections(grid, node, place_peer, place_acceptor):
    peer = place_peer(Direction.UP)
    acceptor = place_acceptor(Direction.EAST)

    peers = connected_peers(grid, node)
    acceptors = connected_acceptors(grid, node)
    assert peers[Direction.UP.ordinal] == peer
    assert peers.count(None) == 5
    assert acceptors[Direction.EAST.ordinal] is acceptor
    assert acceptors.count(None) == 5
