"""Scene objects — read-only snapshots of what the modelling store holds.

The engine only ever reads these.  Field names are snake_case; the camelCase
names used by the modelling store (``shapeType``, ``manningN``,
``createdAt`` ...) are accepted as aliases so an exported snapshot validates
as-is.  Optional numeric fields stay ``None`` here; defaults are applied in
one place, by the normalize step of each calculator.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

StructureType = Literal["shape", "channel", "transition", "chute"]
ShapeType = Literal["box", "cylinder", "sphere", "cone", "torus"]
SectionType = Literal["rectangular", "trapezoidal", "triangular"]
TransitionSectionType = Literal["rectangular", "trapezoidal"]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def or_default(value: float | None, default: float) -> float:
    """*value* as a float, or *default* when the snapshot left it unset."""
    return default if value is None else float(value)


class _SnapshotModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


class Vector3(_SnapshotModel):
    x: float = 1.0
    y: float = 1.0
    z: float = 1.0


class Transform(_SnapshotModel):
    """Only the scale participates in quantity takeoff."""

    scale: Vector3 = Field(default_factory=Vector3)


class MaterialProperties(_SnapshotModel):
    color: Optional[str] = None
    opacity: float = 1.0


class SceneObject(_SnapshotModel):
    """Fields common to every object in the scene."""

    id: str
    name: str = ""
    type: StructureType
    created_at: datetime = Field(default_factory=_utc_now)
    updated_at: datetime = Field(default_factory=_utc_now)
    visible: bool = True
    locked: bool = False


class ShapeObject(SceneObject):
    """A primitive solid."""

    type: Literal["shape"] = "shape"
    shape_type: str
    """Known values: box, cylinder, sphere, cone, torus."""

    parameters: dict[str, float] = Field(default_factory=dict)
    """Raw, unscaled parameters keyed as the store keys them
    (width, height, depth, radius, bottomRadius, topRadius, majorRadius,
    minorRadius, segments)."""

    transform: Transform = Field(default_factory=Transform)
    material: MaterialProperties = Field(default_factory=MaterialProperties)


class ChannelSection(_SnapshotModel):
    type: Optional[str] = None
    width: Optional[float] = None
    bottom_width: Optional[float] = None
    depth: Optional[float] = None
    side_slope: Optional[float] = None


class ChannelObject(SceneObject):
    """Prismatic open channel."""

    type: Literal["channel"] = "channel"
    section: Optional[ChannelSection] = None
    length: Optional[float] = None
    thickness: Optional[float] = None
    free_board: Optional[float] = None
    slope: Optional[float] = None
    manning_n: Optional[float] = None


class TransitionSection(_SnapshotModel):
    """One end (inlet or outlet) of a transition."""

    section_type: str
    width: Optional[float] = None
    depth: Optional[float] = None
    side_slope: Optional[float] = None
    wall_thickness: Optional[float] = None


class TransitionObject(SceneObject):
    """Tapered reach joining two channel sections."""

    type: Literal["transition"] = "transition"
    transition_type: Optional[str] = None
    length: Optional[float] = None
    start_elevation: float = 0.0
    end_elevation: float = 0.0
    inlet: Optional[TransitionSection] = None
    outlet: Optional[TransitionSection] = None


class ChuteObject(SceneObject):
    """High-slope channel (rapida).  ``side_slope == 0`` means rectangular."""

    type: Literal["chute"] = "chute"
    chute_type: Optional[str] = None
    length: Optional[float] = None
    drop: Optional[float] = None
    width: Optional[float] = None
    depth: Optional[float] = None
    side_slope: Optional[float] = None
    thickness: Optional[float] = None
    slope: Optional[float] = None
    manning_n: Optional[float] = None


AnySceneObject = Annotated[
    Union[ShapeObject, ChannelObject, TransitionObject, ChuteObject],
    Field(discriminator="type"),
]

_SCENE_OBJECT_ADAPTER: TypeAdapter[Any] = TypeAdapter(AnySceneObject)


def parse_scene_object(data: dict[str, Any]) -> SceneObject:
    """Validate a raw mapping into the matching scene object model.

    Raises ``pydantic.ValidationError`` if *data* is not a scene object of a
    supported kind.
    """
    return _SCENE_OBJECT_ADAPTER.validate_python(data)
