from PyQt6.QtCore import QMarginsF, QPointF


class Config:
    DEFAULT_PADDING = QMarginsF(0, 0, 0, 0)
    LOCAL_ORIGIN = QPointF(0, 0)
    CENTER_FACTOR = 0.5
    LOGGER_NAME = "Showcase.TargetPosition"
