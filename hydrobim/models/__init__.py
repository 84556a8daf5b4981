"""Input snapshots and derived quantity models."""

from hydrobim.models.metrics import Metrics, SectionProperties, ShapeDimensions
from hydrobim.models.scene import (
    AnySceneObject,
    ChannelObject,
    ChannelSection,
    ChuteObject,
    MaterialProperties,
    SceneObject,
    ShapeObject,
    Transform,
    TransitionObject,
    TransitionSection,
    Vector3,
    parse_scene_object,
)

__all__ = [
    "AnySceneObject",
    "ChannelObject",
    "ChannelSection",
    "ChuteObject",
    "MaterialProperties",
    "Metrics",
    "SceneObject",
    "SectionProperties",
    "ShapeDimensions",
    "ShapeObject",
    "Transform",
    "TransitionObject",
    "TransitionSection",
    "Vector3",
    "parse_scene_object",
]
