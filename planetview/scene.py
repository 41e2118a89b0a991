"""Scene of two spinning planets: models, lights, input handling and per-frame uniforms."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

import numpy as np

from planetview import vecmath
from planetview.camera import Camera, Movement
from planetview.objfile import Mesh, ObjFormatError, load_obj
from planetview.texture import TextureError, TextureImage, load_texture

log = logging.getLogger(__name__)

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 768
NEAR_PLANE = 0.1
FAR_PLANE = 200.0
PLANET_SCALE = 1.5
CLEAR_COLOR = (0.01, 0.01, 0.02, 1.0)
CAMERA_START = (0.0, 1.0, 15.0)

CLOSE_KEY = "escape"
KEY_BINDINGS: tuple[tuple[str, Movement], ...] = (
    ("w", Movement.FORWARD),
    ("s", Movement.BACKWARD),
    ("a", Movement.LEFT),
    ("d", Movement.RIGHT),
    ("space", Movement.UP),
    ("left_shift", Movement.DOWN),
)


@dataclass
class Material:
    """Phong lighting coefficients: ambient, diffuse, specular and shininess."""

    ka: float = 0.1
    kd: float = 0.9
    ks: float = 0.4
    ns: float = 20.0


@dataclass
class TextureSlot:
    """A texture image bound to a named material map such as ``diffuse``."""

    kind: str
    image: TextureImage

    @property
    def uniform_name(self) -> str:
        """Name of the shader sampler this texture feeds."""
        return f"{self.kind}Map"


@dataclass
class Model:
    """A mesh together with its material and textures."""

    mesh: Mesh
    material: Material = field(default_factory=Material)
    textures: list[TextureSlot] = field(default_factory=list)

    def add_texture(self, path, kind: str) -> TextureSlot:
        """Load an image and attach it as the ``kind`` map; raises TextureError on failure."""
        slot = TextureSlot(kind, load_texture(path))
        self.textures.append(slot)
        return slot

    @property
    def vertex_count(self) -> int:
        return len(self.mesh)

    def sampler_units(self) -> dict[str, int]:
        """Map each sampler uniform name to the texture unit it is bound to."""
        return {slot.uniform_name: unit for unit, slot in enumerate(self.textures)}


def planet_transform(offset, time: float, speed: float, axis) -> np.ndarray:
    """Model matrix of a planet placed at ``offset``, scaled, and spun about ``axis``."""
    matrix = vecmath.translate(np.identity(4), offset)
    matrix = vecmath.scale(matrix, PLANET_SCALE)
    return vecmath.rotate(matrix, time * speed, axis)


@dataclass(eq=False)
class SceneObject:
    """A model placed in the world, spinning at ``spin_speed`` radians per second."""

    model: Model
    offset: np.ndarray
    spin_speed: float
    spin_axis: np.ndarray
    transform: np.ndarray | None = None

    def __post_init__(self) -> None:
        self.offset = np.asarray(self.offset, dtype=np.float64)
        self.spin_axis = np.asarray(self.spin_axis, dtype=np.float64)
        if self.transform is None:
            self.transform = planet_transform(self.offset, 0.0, self.spin_speed, self.spin_axis)


@dataclass(eq=False)
class PointLight:
    """A coloured point light."""

    position: np.ndarray
    color: np.ndarray


@dataclass(eq=False)
class Lighting:
    """The main light plus a set of coloured point lights."""

    global_position: np.ndarray
    global_color: np.ndarray
    point_lights: list[PointLight] = field(default_factory=list)


def default_lighting() -> Lighting:
    """Warm main light above and in front, a blue fill in front and a red fill behind."""
    return Lighting(
        global_position=vecmath.vec3(0.0, 10.0, 10.0),
        global_color=vecmath.vec3(0.8, 0.8, 0.7),
        point_lights=[
            PointLight(vecmath.vec3(0.0, 0.0, 10.0), vecmath.vec3(0.1, 0.2, 0.7)),
            PointLight(vecmath.vec3(0.0, 0.0, -10.0), vecmath.vec3(0.7, 0.2, 0.1)),
        ],
    )


class MouseTracker:
    """Turns absolute cursor positions into camera rotations."""

    def __init__(self, camera: Camera, last_x: float = SCREEN_WIDTH / 2.0,
                 last_y: float = SCREEN_HEIGHT / 2.0):
        self.camera = camera
        self.last_x = float(last_x)
        self.last_y = float(last_y)
        self.first = True

    def move(self, xpos: float, ypos: float) -> None:
        """Rotate the camera by the cursor movement since the previous position."""
        xpos = float(xpos)
        ypos = float(ypos)
        if self.first:
            self.last_x = xpos
            self.last_y = ypos
            self.first = False
        xoffset = xpos - self.last_x
        yoffset = self.last_y - ypos
        self.last_x = xpos
        self.last_y = ypos
        self.camera.process_mouse_movement(xoffset, yoffset)

    def scroll(self, yoffset: float) -> None:
        """Zoom the camera by a scroll-wheel offset."""
        self.camera.process_mouse_scroll(float(yoffset))


def movements_for_keys(keys: Iterable[str]) -> list[Movement]:
    """Camera movements for the pressed keys, in a fixed order."""
    pressed = {key.lower() for key in keys}
    return [movement for key, movement in KEY_BINDINGS if key in pressed]


def apply_keys(camera: Camera, keys: Iterable[str], delta_time: float) -> bool:
    """Move ``camera`` for the pressed keys; return True if closing was requested."""
    pressed = {key.lower() for key in keys}
    for movement in movements_for_keys(pressed):
        camera.process_keyboard(movement, delta_time)
    return CLOSE_KEY in pressed


def aspect_ratio(width: int, height: int) -> float:
    """Width over height, or 1 when the height is zero."""
    if height == 0:
        return 1.0
    return float(width) / float(height)


@dataclass(eq=False)
class Scene:
    """Everything needed to draw a frame: camera, lights and placed objects."""

    camera: Camera
    lighting: Lighting
    objects: list[SceneObject] = field(default_factory=list)
    clear_color: tuple[float, float, float, float] = CLEAR_COLOR

    def update(self, time: float) -> None:
        """Set every object's spin for the given time in seconds."""
        for obj in self.objects:
            obj.transform = planet_transform(obj.offset, time, obj.spin_speed, obj.spin_axis)

    def projection(self, width: int, height: int) -> np.ndarray:
        """Perspective projection for the camera's zoom and the framebuffer size."""
        return vecmath.perspective(
            math.radians(self.camera.zoom), aspect_ratio(width, height), NEAR_PLANE, FAR_PLANE
        )

    def frame_uniforms(self, width: int, height: int) -> dict:
        """Shader uniform values for one frame, with a per-object list under ``objects``."""
        lights = self.lighting.point_lights
        return {
            "view": self.camera.view_matrix(),
            "projection": self.projection(width, height),
            "viewPos": np.array(self.camera.position, dtype=np.float64),
            "globalLightPos": np.array(self.lighting.global_position, dtype=np.float64),
            "globalLightColor": np.array(self.lighting.global_color, dtype=np.float64),
            "pointLightPositions": np.array([light.position for light in lights],
                                            dtype=np.float64).reshape(-1, 3),
            "pointLightColors": np.array([light.color for light in lights],
                                         dtype=np.float64).reshape(-1, 3),
            "objects": [
                {
                    "model": obj.transform,
                    "ka": obj.model.material.ka,
                    "kd": obj.model.material.kd,
                    "ks": obj.model.material.ks,
                    "Ns": obj.model.material.ns,
                    "samplers": obj.model.sampler_units(),
                    "vertex_count": obj.model.vertex_count,
                }
                for obj in self.objects
            ],
        }


@dataclass(frozen=True)
class _PlanetSpec:
    mesh: str
    textures: tuple[tuple[str, str], ...]
    offset: tuple[float, float, float]
    speed: float
    axis: tuple[float, float, float]
    material: Material


_PLANETS = (
    _PlanetSpec(
        mesh="moon.obj",
        textures=(("diffuse", "moon_diffuse.png"), ("specular", "moon_specular.png")),
        offset=(-3.0, 0.0, 0.0),
        speed=0.2,
        axis=(0.0, 1.0, 0.0),
        material=Material(),
    ),
    _PlanetSpec(
        mesh="moon.obj",
        textures=(("diffuse", "mars_diffuse.png"), ("specular", "mars_specular.png")),
        offset=(3.0, 0.0, 0.0),
        speed=-0.3,
        axis=(0.0, 1.0, 0.1),
        material=Material(ka=0.1, kd=0.9, ks=0.5),
    ),
)


def _load_model(asset_dir: Path, spec: _PlanetSpec) -> Model | None:
    path = asset_dir / spec.mesh
    try:
        mesh = load_obj(path)
    except (OSError, ObjFormatError) as exc:
        log.warning("could not load model %s: %s", path, exc)
        return None
    if len(mesh) == 0:
        log.warning("model %s has no vertices", path)
        return None
    model = Model(mesh, Material(spec.material.ka, spec.material.kd,
                                 spec.material.ks, spec.material.ns))
    for kind, name in spec.textures:
        try:
            model.add_texture(asset_dir / name, kind)
        except TextureError as exc:
            log.warning("model failed to add texture: %s", exc)
    return model


def build_scene(asset_dir) -> Scene:
    """Load the two planets from ``asset_dir``; planets whose mesh fails are left out."""
    asset_dir = Path(asset_dir)
    objects = []
    for spec in _PLANETS:
        model = _load_model(asset_dir, spec)
        if model is None:
            continue
        objects.append(
            SceneObject(model, vecmath.vec3(*spec.offset), spec.speed, vecmath.vec3(*spec.axis))
        )
    return Scene(
        camera=Camera(vecmath.vec3(*CAMERA_START)),
        lighting=default_lighting(),
        objects=objects,
    )