"""Unit tests for the I/O layer.

Tests for PathScriptReader and GeometryWriter.
"""

import json
from pathlib import Path

import pytest

from pathgeom.config import ExportConfig, GeometryConfig
from pathgeom.core.arc import ArcTessellator
from pathgeom.core.builder import PathBuilder
from pathgeom.core.compiler import CompiledShape
from pathgeom.core.exporter import GeometryExporter
from pathgeom.domain import ColliderKind, Point, WindingDirection
from pathgeom.exceptions import GeometrySaveError, ScriptLoadError
from pathgeom.io import GeometryWriter, PathScriptReader

SQUARE_COMMANDS = [
    {"op": "move_to", "to": [0, 0]},
    {"op": "line_to", "to": [1, 0]},
    {"op": "line_to", "to": [1, 1]},
    {"op": "line_to", "to": [0, 1]},
    {"op": "close"},
]


def write_script(tmp_path: Path, data, name: str = "level.json") -> Path:
    script_path = tmp_path / name
    script_path.write_text(json.dumps(data), encoding="utf-8")
    return script_path


def compiled_square(collider: ColliderKind = ColliderKind.POLYLINE) -> CompiledShape:
    builder = PathBuilder()
    builder.move_to(Point(0.0, 0.0))
    builder.line_to(Point(1.0, 0.0))
    builder.line_to(Point(1.0, 1.0))
    builder.line_to(Point(0.0, 1.0))
    path = builder.close()
    return CompiledShape(name="square", geometry=GeometryExporter(path).compile(collider))


class TestPathScriptReader:
    """Tests for PathScriptReader class."""

    def test_init(self):
        """Test PathScriptReader initialization."""
        path = Path("level.json")
        reader = PathScriptReader(path)
        assert reader._script_path == path
        assert reader._script is None

    def test_load_nonexistent_file(self):
        """Test loading a nonexistent file raises FileNotFoundError."""
        reader = PathScriptReader(Path("nonexistent.json"))
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_script_before_load(self):
        """Test accessing the script before loading raises RuntimeError."""
        reader = PathScriptReader(Path("level.json"))
        with pytest.raises(RuntimeError, match="Script not loaded"):
            _ = reader.script

    def test_build_paths_before_load(self):
        """Test building paths before loading raises RuntimeError."""
        reader = PathScriptReader(Path("level.json"))
        with pytest.raises(RuntimeError, match="Script not loaded"):
            reader.build_paths()

    def test_load_valid_script(self, tmp_path):
        """Test loading a script with one shape."""
        script_path = write_script(
            tmp_path, {"shapes": [{"name": "square", "commands": SQUARE_COMMANDS}]}
        )
        reader = PathScriptReader(script_path)
        script = reader.load()

        assert len(script.shapes) == 1
        assert reader.shape_names == ["square"]

    def test_build_paths(self, tmp_path):
        """Test replaying a shape into a closed path."""
        script_path = write_script(
            tmp_path, {"shapes": [{"name": "square", "commands": SQUARE_COMMANDS}]}
        )
        reader = PathScriptReader(script_path)
        reader.load()
        paths = reader.build_paths()

        square = paths["square"]
        assert len(square) == 4
        assert square.edges == ((0, 1), (1, 2), (2, 3), (3, 0))
        assert square.winding_direction() == WindingDirection.COUNTER_CLOCKWISE

    def test_reverse_flag(self, tmp_path):
        """Test a clockwise shape is reversed when the script asks for it."""
        clockwise = [
            {"op": "move_to", "to": [0, 0]},
            {"op": "line_to", "to": [0, 1]},
            {"op": "line_to", "to": [1, 1]},
            {"op": "line_to", "to": [1, 0]},
            {"op": "close"},
        ]
        script_path = write_script(
            tmp_path, {"shapes": [{"name": "cw", "reverse": True, "commands": clockwise}]}
        )
        reader = PathScriptReader(script_path)
        reader.load()
        path = reader.build_paths()["cw"]

        assert path.winding_direction() == WindingDirection.COUNTER_CLOCKWISE
        assert path.edges[0] == (0, 3)

    def test_arc_command(self, tmp_path):
        """Test arc commands tessellate with the given segment count."""
        commands = [
            {"op": "move_to", "to": [1, 0]},
            {
                "op": "arc_to",
                "to": [0, 1],
                "center": [0, 0],
                "segments": 6,
                "direction": "counter_clockwise",
            },
            {"op": "line_to", "to": [0, 0]},
            {"op": "close"},
        ]
        script_path = write_script(tmp_path, {"shapes": [{"name": "wedge", "commands": commands}]})
        reader = PathScriptReader(script_path)
        reader.load()
        wedge = reader.build_paths()["wedge"]

        assert len(wedge) == 1 + 6 + 1
        assert wedge.vertices[6].x == pytest.approx(0.0, abs=1e-12)
        assert wedge.vertices[6].y == pytest.approx(1.0)

    def test_builder_factory_sets_default_segments(self, tmp_path):
        """Test arcs without a segment count use the factory's tessellator."""
        commands = [
            {"op": "move_to", "to": [1, 0]},
            {"op": "arc_to", "to": [0, 1], "center": [0, 0]},
            {"op": "line_to", "to": [0, 0]},
            {"op": "close"},
        ]
        script_path = write_script(tmp_path, {"shapes": [{"name": "wedge", "commands": commands}]})
        tessellator = ArcTessellator(GeometryConfig(arc_segments=4))
        reader = PathScriptReader(script_path, builder_factory=lambda: PathBuilder(tessellator))
        reader.load()

        assert len(reader.build_paths()["wedge"]) == 1 + 4 + 1

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON raises ScriptLoadError."""
        script_path = tmp_path / "broken.json"
        script_path.write_text("{ not json", encoding="utf-8")
        with pytest.raises(ScriptLoadError, match="invalid JSON"):
            PathScriptReader(script_path).load()

    def test_unknown_command(self, tmp_path):
        """Test an unknown op fails validation."""
        script_path = write_script(
            tmp_path, {"shapes": [{"name": "bad", "commands": [{"op": "curve_to"}]}]}
        )
        with pytest.raises(ScriptLoadError, match="validation error"):
            PathScriptReader(script_path).load()

    def test_zero_arc_segments(self, tmp_path):
        """Test an arc with zero segments fails validation."""
        commands = [
            {"op": "move_to", "to": [1, 0]},
            {"op": "arc_to", "to": [0, 1], "center": [0, 0], "segments": 0},
        ]
        script_path = write_script(tmp_path, {"shapes": [{"name": "bad", "commands": commands}]})
        with pytest.raises(ScriptLoadError, match="validation error"):
            PathScriptReader(script_path).load()

    def test_empty_commands(self, tmp_path):
        """Test a shape without commands fails validation."""
        script_path = write_script(tmp_path, {"shapes": [{"name": "empty", "commands": []}]})
        with pytest.raises(ScriptLoadError):
            PathScriptReader(script_path).load()

    def test_duplicate_names(self, tmp_path):
        """Test duplicate shape names are rejected."""
        shape = {"name": "wall", "commands": SQUARE_COMMANDS}
        script_path = write_script(tmp_path, {"shapes": [shape, shape]})
        with pytest.raises(ScriptLoadError, match="duplicate shape names: wall"):
            PathScriptReader(script_path).load()

    def test_unclosed_shape(self, tmp_path):
        """Test a shape that never closes fails to build."""
        script_path = write_script(
            tmp_path, {"shapes": [{"name": "open", "commands": SQUARE_COMMANDS[:-1]}]}
        )
        reader = PathScriptReader(script_path)
        reader.load()
        with pytest.raises(ScriptLoadError, match="shape 'open'"):
            reader.build_paths()

    def test_command_after_close(self, tmp_path):
        """Test drawing after close fails to build."""
        commands = SQUARE_COMMANDS + [{"op": "line_to", "to": [2, 2]}]
        script_path = write_script(tmp_path, {"shapes": [{"name": "late", "commands": commands}]})
        reader = PathScriptReader(script_path)
        reader.load()
        with pytest.raises(ScriptLoadError, match="Cannot line_to while path is closed"):
            reader.build_paths()

    def test_line_before_move(self, tmp_path):
        """Test drawing before move_to fails to build."""
        commands = [{"op": "line_to", "to": [1, 0]}]
        script_path = write_script(tmp_path, {"shapes": [{"name": "early", "commands": commands}]})
        reader = PathScriptReader(script_path)
        reader.load()
        with pytest.raises(ScriptLoadError, match="shape 'early'"):
            reader.build_paths()


class TestGeometryWriter:
    """Tests for GeometryWriter class."""

    def test_get_geometry_path(self):
        """Test default output path generation."""
        result = GeometryWriter.get_geometry_path(Path("/levels/level.json"))
        assert result == Path("/levels/level-geometry.json")

    def test_get_geometry_path_relative(self):
        """Test output path keeps a relative directory."""
        result = GeometryWriter.get_geometry_path(Path("walls.json"))
        assert result == Path("walls-geometry.json")

    def test_to_document(self):
        """Test document layout."""
        writer = GeometryWriter(Path("out.json"))
        document = writer.to_document([compiled_square()])

        assert document["generator"].startswith("pathgeom ")
        [shape] = document["shapes"]
        assert shape["name"] == "square"
        assert shape["fill"]["topology"] == "triangle_list"
        assert len(shape["fill"]["positions"]) == 6
        assert shape["wireframe"]["topology"] == "line_list"
        assert len(shape["wireframe"]["positions"]) == 8
        assert shape["collider"]["kind"] == "polyline"

    def test_include_z(self):
        """Test include_z widens mesh positions."""
        writer = GeometryWriter(Path("out.json"), ExportConfig(include_z=True))
        document = writer.to_document([compiled_square()])

        positions = document["shapes"][0]["fill"]["positions"]
        assert all(len(p) == 3 and p[2] == 0.0 for p in positions)

    def test_save(self, tmp_path):
        """Test saving writes a readable JSON file."""
        output = tmp_path / "level-geometry.json"
        GeometryWriter(output).save([compiled_square(ColliderKind.TRIMESH)])

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["shapes"][0]["collider"]["kind"] == "trimesh"
        assert data["shapes"][0]["collider"]["indices"] == [[3, 0, 1], [3, 1, 2]]

    def test_save_empty(self, tmp_path):
        """Test saving with no shapes writes an empty list."""
        output = tmp_path / "empty.json"
        GeometryWriter(output).save([])
        assert json.loads(output.read_text(encoding="utf-8"))["shapes"] == []

    def test_save_to_missing_directory(self, tmp_path):
        """Test an unwritable path raises GeometrySaveError."""
        output = tmp_path / "missing" / "out.json"
        with pytest.raises(GeometrySaveError):
            GeometryWriter(output).save([compiled_square()])
