import numpy as np
import pytest
from PIL import Image

from fractalterrain.skybox import Skybox, SkyboxFace, SkyboxLoadError, skybox_faces


def _write_image(path, size=(4, 3), color=(10, 20, 30), mode="RGB"):
    Image.new(mode, size, color).save(path)
    return path


def test_six_faces_of_four_corners():
    faces = skybox_faces()
    assert len(faces) == 6
    assert all(len(f.vertices) == 4 and len(f.tex_coords) == 4 for f in faces)


def test_vertices_lie_on_unit_cube():
    for face in skybox_faces():
        for vertex in face.vertices:
            assert all(abs(c) == 1.0 for c in vertex)


def test_each_face_is_planar_on_a_cube_side():
    for face in skybox_faces():
        shared = [
            axis
            for axis in range(3)
            if len({v[axis] for v in face.vertices}) == 1
        ]
        assert len(shared) == 1


def test_tex_coords_within_unit_square():
    for face in skybox_faces():
        for u, v in face.tex_coords:
            assert 0.0 <= u <= 1.0
            assert 0.0 <= v <= 1.0


def test_first_face_matches_source_layout():
    first = skybox_faces()[0]
    assert first.tex_coords[0] == pytest.approx((0.5, 2.0 / 3.0))
    assert first.vertices[0] == (1.0, 1.0, -1.0)


def test_corners_pairs_coords_and_vertices():
    face = skybox_faces()[1]
    corners = face.corners()
    assert [c[0] for c in corners] == list(face.tex_coords)
    assert [c[1] for c in corners] == list(face.vertices)


def test_load_image(tmp_path):
    path = _write_image(tmp_path / "sky.png", size=(4, 3), color=(10, 20, 30))
    sky = Skybox(path)
    assert (sky.width, sky.height) == (4, 3)
    assert sky.data.shape == (3, 4, 3)
    assert np.all(sky.data == np.array([10, 20, 30], dtype=np.uint8))


def test_load_converts_to_rgb(tmp_path):
    path = _write_image(tmp_path / "sky.png", size=(2, 2), color=(5, 6, 7, 128), mode="RGBA")
    sky = Skybox(path)
    assert sky.data.shape == (2, 2, 3)
    assert sky.data[0, 0].tolist() == [5, 6, 7]


def test_faces_method_matches_function(tmp_path):
    sky = Skybox(_write_image(tmp_path / "sky.png"))
    assert sky.faces() == skybox_faces()
    assert all(isinstance(f, SkyboxFace) for f in sky.faces())


def test_missing_file_raises(tmp_path):
    with pytest.raises(SkyboxLoadError):
        Skybox(tmp_path / "missing.tga")


def test_not_an_image_raises(tmp_path):
    path = tmp_path / "sky.png"
    path.write_bytes(b"not an image")
    with pytest.raises(SkyboxLoadError):
        Skybox(path)