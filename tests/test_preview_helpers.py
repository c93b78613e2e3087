"""
Viewer helper tests: camera math, marker geometry, picking and hover text.

None of these need a display or an OpenGL context.
"""

import colorsys

import numpy as np
import pytest

from netplan.src.layout import Face, FaceEntry, Room
from netplan.src.ui import HoverState, INITIAL_TEXT, NO_DESCRIPTION_TEXT, ViewerSettings
from netplan.src.ui.preview import (
    Marker,
    MeshBuilder,
    OrbitCamera,
    build_marker_mesh,
    build_room_wireframe,
    marker_for_entry,
    pick_marker,
    scene_bounds,
    symbol_color,
)


def unit_room(room_id=0, position=(0.0, 0.0, 0.0), **faces):
    room = Room(room_id=room_id, name=f"R{room_id}", width=1, height=1, depth=1,
                faces={Face[name.upper()]: entries for name, entries in faces.items()})
    room.set_position(position)
    return room


def box(symbol, center, half=(0.5, 0.5, 0.5)):
    return Marker(symbol, 0, Face.FLOOR, center, half)


class TestOrbitCamera:

    def test_view_matrix_moves_target_in_front_of_camera(self):
        camera = OrbitCamera()
        camera.target = np.array([1.0, 2.0, 3.0], dtype=np.float32)
        camera.distance = 10.0
        target = np.append(camera.target, 1.0)
        assert np.allclose(camera.get_view_matrix() @ target, [0.0, 0.0, -10.0, 1.0], atol=1e-4)

    def test_view_matrix_maps_eye_to_origin(self):
        camera = OrbitCamera()
        eye = np.append(camera.get_position(), 1.0)
        assert np.allclose(camera.get_view_matrix() @ eye, [0.0, 0.0, 0.0, 1.0], atol=1e-4)

    def test_front_preset_looks_down_negative_z(self):
        camera = OrbitCamera()
        camera.set_preset_view('front')
        assert np.allclose(camera.get_forward(), [0.0, 0.0, -1.0], atol=1e-6)

    def test_pitch_is_clamped(self):
        camera = OrbitCamera()
        camera.rotate(0, 10000)
        assert camera.pitch == camera.max_pitch
        camera.rotate(0, -10000)
        assert camera.pitch == camera.min_pitch

    def test_zoom_keeps_minimum_distance(self):
        camera = OrbitCamera()
        camera.zoom(-5.0)
        assert camera.distance == camera.min_distance

    def test_fit_to_bounds_centres_target(self):
        camera = OrbitCamera()
        camera.fit_to_bounds((-1.0, -2.0, -3.0), (3.0, 2.0, 1.0))
        assert np.allclose(camera.target, [1.0, 0.0, -1.0])
        assert camera.distance > 0

    def test_pan_moves_target(self):
        camera = OrbitCamera()
        before = camera.target.copy()
        camera.pan(50, 0)
        assert not np.allclose(camera.target, before)

    def test_centre_ray_points_at_target(self):
        camera = OrbitCamera()
        camera.set_aspect(800, 600)
        origin, direction = camera.screen_ray(400, 300, 800, 600)
        assert np.allclose(origin, camera.get_position(), atol=1e-5)
        assert np.allclose(direction, camera.get_forward(), atol=1e-5)

    def test_edge_ray_projects_to_edge(self):
        camera = OrbitCamera()
        camera.set_aspect(800, 600)
        origin, direction = camera.screen_ray(800, 300, 800, 600)
        point = np.append(origin + direction * 5.0, 1.0)
        clip = camera.get_projection_matrix() @ camera.get_view_matrix() @ point
        assert clip[0] / clip[3] == pytest.approx(1.0, abs=1e-4)
        assert clip[1] / clip[3] == pytest.approx(0.0, abs=1e-4)


class TestMarkers:

    def test_symbol_color(self):
        hue = (ord('a') * 10007) % 360
        assert symbol_color('a') == pytest.approx(colorsys.hls_to_rgb(hue / 360.0, 0.5, 1.0))

    def test_highlight_is_lighter(self):
        assert sum(symbol_color('k', lightness=0.8)) > sum(symbol_color('k'))

    def test_marker_sits_inside_its_face(self):
        room = unit_room(position=(1.0, 0.0, 0.0))
        marker = marker_for_entry(room, Face.LEFT, 0, 0, 'a')
        assert marker.center == pytest.approx((0.6, 0.0, 0.0))
        assert marker.half_extents == pytest.approx((0.1, 0.5, 0.5))
        assert marker.bounds_min[0] == pytest.approx(0.5)

    def test_floor_marker(self):
        room = unit_room()
        marker = marker_for_entry(room, Face.FLOOR, 0, 0, 'r', thickness=0.4)
        assert marker.center == pytest.approx((0.0, -0.3, 0.0))
        assert marker.half_extents == pytest.approx((0.5, 0.2, 0.5))

    def test_collect_markers(self):
        rooms = [
            unit_room(0, top=[FaceEntry(0, 0, 'x')], right=[FaceEntry(0, 0, 'a')]),
            unit_room(1, (1.0, 0.0, 0.0), left=[FaceEntry(0, 0, 'a')]),
        ]
        markers = MeshBuilder().collect_markers(rooms)
        assert [(m.room_id, m.face, m.symbol) for m in markers] == [
            (0, Face.TOP, 'x'), (0, Face.RIGHT, 'a'), (1, Face.LEFT, 'a'),
        ]

    def test_marker_thickness_comes_from_settings(self):
        rooms = [unit_room(0, floor=[FaceEntry(0, 0, 'r')])]
        builder = MeshBuilder(ViewerSettings(marker_thickness=0.4))
        (marker,) = builder.collect_markers(rooms)
        assert marker.center == pytest.approx((0.0, -0.3, 0.0))
        assert marker.half_extents == pytest.approx((0.5, 0.2, 0.5))

    def test_marker_mesh_layout(self):
        markers = [box('a', (0.0, 0.0, 0.0)), box('b', (2.0, 0.0, 0.0))]
        mesh = build_marker_mesh(markers)
        assert mesh.vertices.shape == (48, 9)
        assert mesh.indices.shape == (24, 3)
        assert mesh.bounds_min == pytest.approx((-0.5, -0.5, -0.5))
        assert mesh.bounds_max == pytest.approx((2.5, 0.5, 0.5))

    def test_highlight_only_recolors_that_symbol(self):
        markers = [box('a', (0.0, 0.0, 0.0)), box('b', (2.0, 0.0, 0.0))]
        settings = ViewerSettings()
        mesh = build_marker_mesh(markers, highlight='b', settings=settings)
        assert np.allclose(mesh.vertices[0, 6:9], symbol_color('a', settings.base_lightness))
        assert np.allclose(mesh.vertices[24, 6:9], symbol_color('b', settings.highlight_lightness))

    def test_empty_mesh(self):
        mesh = build_marker_mesh([])
        assert mesh.is_empty
        assert mesh.triangle_count == 0


class TestPicking:

    def test_nearest_marker_wins(self):
        near = box('n', (0.0, 0.0, 0.0))
        far = box('f', (0.0, 0.0, 3.0))
        assert pick_marker((0.0, 0.0, -10.0), (0.0, 0.0, 1.0), [far, near]) is near

    def test_miss(self):
        markers = [box('a', (0.0, 0.0, 0.0))]
        assert pick_marker((5.0, 0.0, -10.0), (0.0, 0.0, 1.0), markers) is None

    def test_marker_behind_ray_is_ignored(self):
        markers = [box('a', (0.0, 0.0, 0.0))]
        assert pick_marker((0.0, 0.0, 5.0), (0.0, 0.0, 1.0), markers) is None

    def test_ray_starting_inside_marker(self):
        marker = box('a', (0.0, 0.0, 0.0))
        assert pick_marker((0.0, 0.0, 0.0), (1.0, 1.0, 0.0), [marker]) is marker

    def test_camera_ray_picks_marker_at_target(self):
        camera = OrbitCamera()
        camera.set_aspect(640, 480)
        marker = box('t', (0.0, 0.0, 0.0), half=(0.1, 0.1, 0.1))
        origin, direction = camera.screen_ray(320, 240, 640, 480)
        assert pick_marker(origin, direction, [marker]) is marker


class TestRoomGeometry:

    def test_wireframe(self):
        rooms = [unit_room(0), unit_room(1, (2.0, 0.0, 0.0))]
        vertices, indices = build_room_wireframe(rooms)
        assert vertices.shape == (16, 3)
        assert indices.shape == (24, 2)
        assert indices.max() == 15

    def test_empty_wireframe(self):
        vertices, indices = build_room_wireframe([])
        assert len(vertices) == 0
        assert len(indices) == 0

    def test_scene_bounds(self):
        rooms = [unit_room(0), unit_room(1, (2.0, -1.0, 0.0))]
        bounds_min, bounds_max = scene_bounds(rooms)
        assert bounds_min == pytest.approx((-0.5, -1.5, -0.5))
        assert bounds_max == pytest.approx((2.5, 0.5, 0.5))


class TestHoverState:

    def test_initial_text(self):
        assert HoverState().text == INITIAL_TEXT == "Hover objects to read their descriptions."

    def test_hover_described_symbol(self):
        state = HoverState({'a': 'A lamp.'})
        assert state.hover('a') == 'A lamp.'
        assert state.highlighted == 'a'

    def test_hover_undescribed_symbol(self):
        state = HoverState({'a': 'A lamp.'})
        assert state.hover('q') == NO_DESCRIPTION_TEXT == "No description available."

    def test_leave_keeps_last_text(self):
        state = HoverState({'a': 'A lamp.'})
        state.hover('a')
        assert state.leave() == 'A lamp.'
        assert state.highlighted is None

    def test_descriptions_are_copied(self):
        descriptions = {'a': 'A lamp.'}
        state = HoverState(descriptions)
        descriptions['a'] = 'Changed.'
        assert state.hover('a') == 'A lamp.'
