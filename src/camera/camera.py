# camera/camera.py
import logging
import math
from typing import Tuple
from core.vector import Color3, Point3, Vector3
from core.ray import Ray
from core.interval import INFINITY, Interval
from geometry.hittable import Hittable

logger = logging.getLogger(__name__)

Image = Tuple[Tuple[Color3, ...], ...]

WHITE = Color3(1.0, 1.0, 1.0)
SKY_BLUE = Color3(0.5, 0.7, 1.0)


class Camera:
    """
    A fixed pinhole camera looking down -z from its center.

    All viewport geometry is derived from aspect_ratio and image_width at
    construction and is not changed by rendering. Pixel row 0 is the top
    of the image.
    """
    def __init__(self, aspect_ratio: float, image_width: int,
                 center: Point3 = None):
        if aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
        if image_width <= 0:
            raise ValueError(f"image_width must be positive, got {image_width}")

        self.aspect_ratio = aspect_ratio
        self.image_width = int(image_width)
        self.image_height = max(1, math.floor(self.image_width / aspect_ratio))
        self.center = center if center is not None else Point3(0, 0, 0)

        self.focal_length = 1.0
        self.viewport_height = 2.0
        # Uses the real pixel ratio, which can differ from aspect_ratio
        # after image_height is rounded down.
        self.viewport_width = self.viewport_height * self.image_width / self.image_height

        # v points down so that row 0 maps to the top edge
        self.viewport_u = Vector3(self.viewport_width, 0, 0)
        self.viewport_v = Vector3(0, -self.viewport_height, 0)

        self.pixel_du = self.viewport_u / self.image_width
        self.pixel_dv = self.viewport_v / self.image_height

        viewport_upper_left = (self.center -
                               Vector3(0, 0, self.focal_length) -
                               self.viewport_u / 2 -
                               self.viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + 0.5 * (self.pixel_du + self.pixel_dv)

    def get_ray(self, i: int, j: int) -> Ray:
        """
        Generates the ray from the camera center through the center of
        pixel (i, j), where i is the column and j the row.
        """
        pixel_center = self.pixel00_loc + i * self.pixel_du + j * self.pixel_dv
        return Ray(self.center, pixel_center - self.center)

    def ray_color(self, ray: Ray, world: Hittable) -> Color3:
        """
        Returns the color seen along the ray: the hit normal mapped into
        [0, 1] on a hit, otherwise a white to sky-blue vertical gradient.
        """
        rec = world.hit(ray, Interval(0, INFINITY))
        if rec is not None:
            return 0.5 * (rec.normal + WHITE)

        unit_direction = ray.direction.normalize()
        a = 0.5 * (unit_direction.y + 1.0)
        return (1.0 - a) * WHITE + a * SKY_BLUE

    def render(self, world: Hittable) -> Image:
        """
        Renders the world and returns the image as a tuple of rows, row 0
        first, each row a tuple of image_width colors. Components are not
        clamped.
        """
        logger.info("Rendering %dx%d image", self.image_width, self.image_height)
        rows = []
        for j in range(self.image_height):
            logger.debug("Scanlines remaining: %d", self.image_height - j)
            rows.append(tuple(self.ray_color(self.get_ray(i, j), world)
                              for i in range(self.image_width)))
        logger.info("Render finished")
        return tuple(rows)

    def __repr__(self) -> str:
        return (f"Camera(aspect_ratio={self.aspect_ratio}, "
                f"image_width={self.image_width}, center={self.center!r})")
