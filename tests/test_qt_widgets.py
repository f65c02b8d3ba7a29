import pytest
from PyQt6.QtCore import QMarginsF, QRectF, QSizeF

from target_position import TargetPositionCalculator


@pytest.mark.pyqt_required
def test_nested_widget_highlight(qapp):
    from PyQt6.QtWidgets import QWidget

    overlay = QWidget()
    overlay.setGeometry(0, 0, 400, 800)
    container = QWidget(overlay)
    container.setGeometry(30, 40, 300, 300)
    target = QWidget(container)
    target.setGeometry(70, 160, 50, 20)

    calc = TargetPositionCalculator(
        target, overlay, QSizeF(overlay.size()), padding=QMarginsF(10, 5, 10, 5)
    )
    assert calc.get_rect_in_overlay_space() == QRectF(100, 200, 50, 20)
    assert calc.get_highlight_rect() == QRectF(90, 195, 70, 30)
    assert calc.horizontal_center == 125

    container.move(0, 0)
    calc.mark_dirty()
    assert calc.get_highlight_rect() == QRectF(60, 155, 70, 30)

    overlay.deleteLater()
