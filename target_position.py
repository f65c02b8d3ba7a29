import logging
from typing import Optional
from PyQt6.QtCore import QRectF, QPointF, QSizeF, QMarginsF

from config import Config
from coordinate_converter import CoordinateConverter

_LOGGER = logging.getLogger(Config.LOGGER_NAME)


class InvalidConfiguration(ValueError):
    """Raised when the calculator has no reference frame to map into"""


def _clamp(value: float, lower: float, upper: float) -> float:
    return min(max(value, lower), upper)


class TargetPositionCalculator:
    """Position and bounds of a showcase target inside the overlay.

    Rectangles are expressed in the coordinate space of ``reference_frame``
    (the root overlay widget). Results are cached until the owner sets
    ``dimensions_dirty`` after a layout change, resize or rotation; the
    calculator never invalidates itself.
    """

    def __init__(self, target_element, reference_frame, screen_bounds: QSizeF,
                 padding: Optional[QMarginsF] = None, root_element=None):
        if reference_frame is None:
            raise InvalidConfiguration("reference_frame must be the root overlay widget")

        self.target_element = target_element
        self.reference_frame = reference_frame
        self.screen_bounds = QSizeF(screen_bounds)  # == reference_frame size
        self.padding = QMarginsF(padding if padding is not None else Config.DEFAULT_PADDING)
        # Reserved ancestor for an alternate coordinate space, not read yet
        self.root_element = root_element
        self.coord_converter = CoordinateConverter(reference_frame)

        # Cache state
        self.cached_highlight_rect: Optional[QRectF] = None
        self.cached_overlay_rect: Optional[QRectF] = None
        self.dimensions_dirty = True

    def mark_dirty(self):
        """Force recomputation on the next read"""
        self.dimensions_dirty = True

    def compute_overlay_rect(self) -> QRectF:
        """Target bounding box in reference frame space, no padding or clamping"""
        if self.target_element is None:
            return QRectF()
        return self.coord_converter.element_rect(self.target_element)

    def get_highlight_rect(self) -> QRectF:
        """Overlay rect grown by padding, each edge clamped to the screen"""
        if self.target_element is None:
            return QRectF()
        if self.cached_highlight_rect is not None and not self.dimensions_dirty:
            return self.cached_highlight_rect

        rect = self.compute_overlay_rect()
        width = self.screen_bounds.width()
        height = self.screen_bounds.height()
        # Edges are clamped independently; an inverted result is accepted
        left = _clamp(rect.left() - self.padding.left(), 0.0, width)
        top = _clamp(rect.top() - self.padding.top(), 0.0, height)
        right = _clamp(rect.right() + self.padding.right(), 0.0, width)
        bottom = _clamp(rect.bottom() + self.padding.bottom(), 0.0, height)

        self.dimensions_dirty = False
        self.cached_highlight_rect = QRectF(QPointF(left, top), QPointF(right, bottom))
        _LOGGER.debug("Highlight rect recomputed: ltrb=(%s, %s, %s, %s)", left, top, right, bottom)
        return self.cached_highlight_rect

    def get_rect_in_overlay_space(self) -> QRectF:
        """Exact target bounds, shares the dirty flag with the highlight cache"""
        if self.target_element is None:
            return QRectF()
        if self.cached_overlay_rect is not None and not self.dimensions_dirty:
            return self.cached_overlay_rect

        rect = self.compute_overlay_rect()
        self.dimensions_dirty = False
        self.cached_overlay_rect = rect
        _LOGGER.debug("Overlay rect recomputed: %s", rect)
        return self.cached_overlay_rect

    @property
    def top(self) -> float:
        return self.get_highlight_rect().top()

    @property
    def bottom(self) -> float:
        return self.get_highlight_rect().bottom()

    @property
    def left(self) -> float:
        return self.get_highlight_rect().left()

    @property
    def right(self) -> float:
        return self.get_highlight_rect().right()

    @property
    def width(self) -> float:
        return self.get_highlight_rect().width()

    @property
    def height(self) -> float:
        return self.get_highlight_rect().height()

    @property
    def horizontal_center(self) -> float:
        return (self.left + self.right) * Config.CENTER_FACTOR

    def top_left_in_overlay_space(self) -> QPointF:
        return self.get_rect_in_overlay_space().topLeft()

    def center_in_overlay_space(self) -> QPointF:
        return self.get_rect_in_overlay_space().center()
