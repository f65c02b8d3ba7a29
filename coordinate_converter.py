from PyQt6.QtCore import QRectF, QPointF, QSizeF

from config import Config


class CoordinateConverter:
    """Handles coordinate conversion between element space and reference frame space"""

    def __init__(self, reference_frame):
        self.reference_frame = reference_frame

    def shares_window(self, element) -> bool:
        """True when the reference frame is the element or one of its ancestors"""
        return element is self.reference_frame or self.reference_frame.isAncestorOf(element)

    def local_to_reference(self, element, point_or_rect):
        """Convert element-local coordinates to reference frame coordinates"""
        if isinstance(point_or_rect, QPointF):
            if self.shares_window(element):
                return QPointF(element.mapTo(self.reference_frame, point_or_rect))
            # Overlay lives in its own top-level window
            global_point = element.mapToGlobal(point_or_rect)
            return QPointF(self.reference_frame.mapFromGlobal(global_point))
        elif isinstance(point_or_rect, QRectF):
            reference_top_left = self.local_to_reference(element, point_or_rect.topLeft())
            return QRectF(reference_top_left, point_or_rect.size())

    def element_rect(self, element) -> QRectF:
        """Element bounding box expressed in reference frame coordinates"""
        origin = self.local_to_reference(element, QPointF(Config.LOCAL_ORIGIN))
        return QRectF(origin, QSizeF(element.size()))
