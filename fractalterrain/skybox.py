"""A textured cube drawn around the viewer as the sky."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike

import numpy as np
from PIL import Image

Point2 = tuple[float, float]
Point3 = tuple[float, float, float]

_TOP = 2.0 / 3.0
_BOTTOM = 1.0 / 3.0


class SkyboxLoadError(OSError):
    """Raised when the sky texture cannot be read."""


@dataclass(frozen=True)
class SkyboxFace:
    """One quad of the sky cube: four texture coordinates and four corners."""

    tex_coords: tuple[Point2, Point2, Point2, Point2]
    vertices: tuple[Point3, Point3, Point3, Point3]

    def corners(self) -> list[tuple[Point2, Point3]]:
        """Texture coordinate and vertex of each corner, in drawing order."""
        return list(zip(self.tex_coords, self.vertices))


_FACES: tuple[SkyboxFace, ...] = (
    # Top.
    SkyboxFace(
        ((0.5, _TOP), (0.25, _TOP), (0.25, 1.0), (0.5, 1.0)),
        ((1.0, 1.0, -1.0), (-1.0, 1.0, -1.0), (-1.0, 1.0, 1.0), (1.0, 1.0, 1.0)),
    ),
    # Back (-Z).
    SkyboxFace(
        ((0.5, _TOP), (0.25, _TOP), (0.25, _BOTTOM), (0.5, _BOTTOM)),
        ((1.0, 1.0, -1.0), (-1.0, 1.0, -1.0), (-1.0, -1.0, -1.0), (1.0, -1.0, -1.0)),
    ),
    # Right (+X).
    SkyboxFace(
        ((0.5, _TOP), (0.75, _TOP), (0.75, _BOTTOM), (0.5, _BOTTOM)),
        ((1.0, 1.0, -1.0), (1.0, 1.0, 1.0), (1.0, -1.0, 1.0), (1.0, -1.0, -1.0)),
    ),
    # Left (-X).
    SkyboxFace(
        ((0.25, _TOP), (0.0, _TOP), (0.0, _BOTTOM), (0.25, _BOTTOM)),
        ((-1.0, 1.0, -1.0), (-1.0, 1.0, 1.0), (-1.0, -1.0, 1.0), (-1.0, -1.0, -1.0)),
    ),
    # Front (+Z).
    SkyboxFace(
        ((0.75, _TOP), (1.0, _TOP), (1.0, _BOTTOM), (0.75, _BOTTOM)),
        ((1.0, 1.0, 1.0), (-1.0, 1.0, 1.0), (-1.0, -1.0, 1.0), (1.0, -1.0, 1.0)),
    ),
    # Bottom.
    SkyboxFace(
        ((0.5, _BOTTOM), (0.25, _BOTTOM), (0.25, 0.0), (0.5, 0.0)),
        ((1.0, -1.0, -1.0), (-1.0, -1.0, -1.0), (-1.0, -1.0, 1.0), (1.0, -1.0, 1.0)),
    ),
)


def skybox_faces() -> list[SkyboxFace]:
    """The six faces of the unit sky cube, mapped onto a horizontal-cross texture."""
    return list(_FACES)


class Skybox:
    """A sky texture loaded as RGB pixels, with the cube faces it is drawn on."""

    def __init__(self, path: str | PathLike[str]) -> None:
        try:
            with Image.open(path) as image:
                rgb = image.convert("RGB")
        except (OSError, ValueError) as exc:
            raise SkyboxLoadError(f"cannot load sky texture {path!s}: {exc}") from exc
        self.width, self.height = rgb.size
        self.data: np.ndarray = np.asarray(rgb, dtype=np.uint8)

    def faces(self) -> list[SkyboxFace]:
        """The faces to draw the texture on."""
        return skybox_faces()