"""Path script reader.

A path script is a JSON document listing named shapes, each as a sequence
of drawing commands:

    {
      "shapes": [
        {
          "name": "tile",
          "reverse": false,
          "commands": [
            {"op": "move_to", "to": [0, 0]},
            {"op": "line_to", "to": [1, 0]},
            {"op": "arc_to", "to": [0, 1], "center": [0, 0],
             "segments": 8, "direction": "counter_clockwise"},
            {"op": "close"}
          ]
        }
      ]
    }

Documents are validated with pydantic and replayed through PathBuilder.
"""

import json
from collections.abc import Callable
from pathlib import Path as FilePath
from typing import Annotated, Literal

from pydantic import BaseModel, Field, ValidationError

from pathgeom.core.builder import PathBuilder, PathState
from pathgeom.domain import Path, Point, WindingDirection
from pathgeom.exceptions import PathStateError, ScriptLoadError

Coordinate = tuple[float, float]


class MoveToCommand(BaseModel):
    op: Literal["move_to"]
    to: Coordinate


class LineToCommand(BaseModel):
    op: Literal["line_to"]
    to: Coordinate


class ArcToCommand(BaseModel):
    op: Literal["arc_to"]
    to: Coordinate
    center: Coordinate
    segments: int | None = Field(default=None, ge=1)
    direction: Literal["clockwise", "counter_clockwise"] = "counter_clockwise"

    @property
    def winding(self) -> WindingDirection:
        if self.direction == "clockwise":
            return WindingDirection.CLOCKWISE
        return WindingDirection.COUNTER_CLOCKWISE


class CloseCommand(BaseModel):
    op: Literal["close"]


PathCommand = Annotated[
    MoveToCommand | LineToCommand | ArcToCommand | CloseCommand,
    Field(discriminator="op"),
]


class ShapeScript(BaseModel):
    """Commands for one named shape."""

    name: str = Field(min_length=1)
    commands: list[PathCommand] = Field(min_length=1)
    reverse: bool = Field(
        default=False,
        description="Reverse the winding order after closing",
    )


class PathScript(BaseModel):
    """A whole path script document."""

    shapes: list[ShapeScript] = Field(default_factory=list)


def _point(coord: Coordinate) -> Point:
    return Point(coord[0], coord[1])


def replay_shape(shape: ShapeScript, builder: PathBuilder) -> Path:
    """Run a shape's commands through a builder.

    Args:
        shape: Validated shape commands
        builder: Fresh builder to draw with

    Returns:
        The closed path, reversed if the shape asks for it

    Raises:
        PathStateError: If a command is issued in the wrong builder phase
    """
    for command in shape.commands:
        if isinstance(command, MoveToCommand):
            builder.move_to(_point(command.to))
        elif isinstance(command, LineToCommand):
            builder.line_to(_point(command.to))
        elif isinstance(command, ArcToCommand):
            builder.arc_to(
                _point(command.to),
                _point(command.center),
                command.segments,
                command.winding,
            )
        else:
            builder.close()

    if builder.state is not PathState.CLOSED:
        raise PathStateError("finish the shape", builder.state.value)

    if shape.reverse:
        return builder.reverse_winding_order()
    return builder.path


class PathScriptReader:
    """Loads path scripts and builds their closed paths.

    Example:
        reader = PathScriptReader(FilePath("level.json"))
        reader.load()
        shapes = reader.build_paths()
    """

    def __init__(
        self,
        script_path: FilePath,
        builder_factory: Callable[[], PathBuilder] = PathBuilder,
    ) -> None:
        """Initialize the reader.

        Args:
            script_path: Path to the JSON script
            builder_factory: Creates the builder used for each shape
        """
        self._script_path = script_path
        self._builder_factory = builder_factory
        self._script: PathScript | None = None

    def load(self) -> PathScript:
        """Read and validate the script.

        Returns:
            The validated script

        Raises:
            FileNotFoundError: If the script does not exist
            ScriptLoadError: If the script is not valid JSON or fails validation
        """
        if not self._script_path.exists():
            raise FileNotFoundError(f"Path script not found: {self._script_path}")

        try:
            data = json.loads(self._script_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ScriptLoadError(str(self._script_path), f"invalid JSON: {e}") from e

        try:
            self._script = PathScript.model_validate(data)
        except ValidationError as e:
            raise ScriptLoadError(
                str(self._script_path), f"{e.error_count()} validation error(s)\n{e}"
            ) from e

        names = [shape.name for shape in self._script.shapes]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ScriptLoadError(
                str(self._script_path), f"duplicate shape names: {', '.join(duplicates)}"
            )

        return self._script

    @property
    def script(self) -> PathScript:
        if self._script is None:
            raise RuntimeError("Script not loaded. Call load() first.")
        return self._script

    @property
    def shape_names(self) -> list[str]:
        return [shape.name for shape in self.script.shapes]

    def build_paths(self) -> dict[str, Path]:
        """Replay every shape into a closed path.

        Returns:
            Closed paths keyed by shape name, in script order

        Raises:
            ScriptLoadError: If a shape's commands are out of order
        """
        paths: dict[str, Path] = {}
        for shape in self.script.shapes:
            try:
                paths[shape.name] = replay_shape(shape, self._builder_factory())
            except PathStateError as e:
                raise ScriptLoadError(
                    str(self._script_path), f"shape '{shape.name}': {e}"
                ) from e
        return paths
