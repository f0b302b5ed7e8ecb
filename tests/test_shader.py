import numpy as np
import pytest

from orbitview.shader import (
    Shader,
    ShaderError,
    _matrix_value,
    _vector_value,
    read_shader_sources,
)

VERTEX = "#version 150\nvoid main() { gl_Position = vec4(0.0); }\n"
FRAGMENT = "#version 150\nout vec4 color;\nvoid main() { color = vec4(1.0); }\n"


@pytest.fixture
def shader_files(tmp_path):
    vs = tmp_path / "test_vs.glsl"
    fs = tmp_path / "test_fs.glsl"
    vs.write_text(VERTEX)
    fs.write_text(FRAGMENT)
    return vs, fs


def test_read_sources_round_trip(shader_files):
    vs, fs = shader_files
    assert read_shader_sources(vs, fs) == (VERTEX, FRAGMENT, None)


def test_read_sources_with_geometry(shader_files, tmp_path):
    vs, fs = shader_files
    gs = tmp_path / "test_gs.glsl"
    gs.write_text("geometry")
    assert read_shader_sources(str(vs), str(fs), str(gs))[2] == "geometry"


def test_missing_vertex_file_raises(shader_files, tmp_path):
    _, fs = shader_files
    with pytest.raises(ShaderError):
        read_shader_sources(tmp_path / "missing.glsl", fs)


def test_missing_geometry_file_raises(shader_files, tmp_path):
    vs, fs = shader_files
    with pytest.raises(ShaderError):
        read_shader_sources(vs, fs, tmp_path / "missing.glsl")


def test_shader_with_missing_file_raises(shader_files, tmp_path):
    vs, _ = shader_files
    with pytest.raises(ShaderError):
        Shader(vs, tmp_path / "missing.glsl")


def test_vector_from_scalars_and_sequence_agree():
    assert _vector_value(3, (1, 2, 3)) == _vector_value(3, ([1, 2, 3],))
    assert _vector_value(4, (np.array([0.5, 0.25, 1.0, 1.0]),)) == (0.5, 0.25, 1.0, 1.0)


def test_vector_wrong_size_raises():
    with pytest.raises(ValueError):
        _vector_value(4, ((1.0, 2.0, 3.0),))
    with pytest.raises(ValueError):
        _vector_value(2, (1.0, 2.0, 3.0))


def test_matrix_is_column_major():
    assert _matrix_value(2, [[1, 2], [3, 4]]) == (1.0, 3.0, 2.0, 4.0)


def test_matrix_translation_lands_in_last_column():
    m = np.identity(4)
    m[:3, 3] = [7.0, 8.0, 9.0]
    flat = _matrix_value(4, m)
    assert flat[12:15] == (7.0, 8.0, 9.0)
    assert len(flat) == 16


def test_matrix_wrong_shape_raises():
    with pytest.raises(ValueError):
        _matrix_value(4, np.identity(3))