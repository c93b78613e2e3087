"""Character index tests."""

from netplan.src.layout import CharacterIndex, Face, FaceEntry, Position, Room


def make_room(room_id, **faces):
    return Room(room_id=room_id, name=f"R{room_id}", width=3, height=2, depth=2,
                faces={Face[name.upper()]: entries for name, entries in faces.items()})


def test_positions_grouped_by_symbol_face_and_room():
    rooms = [
        make_room(0, right=[FaceEntry(0, 0, 'a'), FaceEntry(1, 1, 'a')], top=[FaceEntry(2, 0, 'b')]),
        make_room(1, left=[FaceEntry(1, 0, 'a')]),
    ]
    index = CharacterIndex.from_rooms(rooms)

    assert index.rooms_with('a', Face.RIGHT) == {0: [Position(0, 0), Position(1, 1)]}
    assert index.rooms_with('a', Face.LEFT) == {1: [Position(1, 0)]}
    assert index.positions('b', Face.TOP, 0) == [Position(2, 0)]


def test_unknown_lookups_are_empty():
    index = CharacterIndex.from_rooms([make_room(0, top=[FaceEntry(0, 0, 'x')])])
    assert index.rooms_with('q', Face.TOP) == {}
    assert index.rooms_with('x', Face.FLOOR) == {}
    assert index.positions('x', Face.TOP, 5) == []


def test_symbols_sorted():
    index = CharacterIndex()
    for symbol in "zbA":
        index.add(symbol, Face.FLOOR, 0, Position(0, 0))
    assert index.symbols() == ['A', 'b', 'z']
    assert len(index) == 3
    assert 'b' in index
    assert 'c' not in index


def test_append_order_is_kept():
    index = CharacterIndex()
    index.add('a', Face.BACK, 2, Position(1, 1))
    index.add('a', Face.BACK, 2, Position(0, 0))
    assert index.positions('a', Face.BACK, 2) == [Position(1, 1), Position(0, 0)]


def test_positions_returns_a_copy():
    index = CharacterIndex()
    index.add('a', Face.BACK, 0, Position(0, 0))
    index.positions('a', Face.BACK, 0).append(Position(5, 5))
    assert index.positions('a', Face.BACK, 0) == [Position(0, 0)]


def test_rooms_do_not_share_the_callers_faces_dict():
    faces = {Face.RIGHT: [FaceEntry(0, 0, 'a')]}
    first = Room(room_id=0, name="R0", width=1, height=1, depth=1, faces=faces)
    second = Room(room_id=1, name="R1", width=1, height=1, depth=1, faces=faces)

    assert faces == {Face.RIGHT: [FaceEntry(0, 0, 'a')]}
    assert first.faces is not faces
    assert first.faces is not second.faces
    assert first.entries(Face.RIGHT) == (FaceEntry(0, 0, 'a'),)
    assert first.entries(Face.LEFT) == ()
