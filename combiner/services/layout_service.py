from __future__ import annotations

from typing import Sequence

from combiner.errors import EmptyDimensionError
from combiner.models.image_model import Dimensions, ImageData


class LayoutService:
    def aggregate(self, images: Sequence[ImageData]) -> Dimensions:
        """
        Суммы высот и ширин по всем изображениям и максимумы по каждой оси.
        Обе суммы считаются всегда, какая из них нужна, решает сторона склейки.
        """
        total_height = total_width = 0
        max_height = max_width = 0
        for item in images:
            total_height += item.height
            total_width += item.width
            max_height = max(max_height, item.height)
            max_width = max(max_width, item.width)

        if total_height == 0 and total_width == 0:
            raise EmptyDimensionError("Суммарные высота и ширина не могут быть равны 0")

        return Dimensions(
            total_height=total_height,
            total_width=total_width,
            max_height=max_height,
            max_width=max_width,
        )
