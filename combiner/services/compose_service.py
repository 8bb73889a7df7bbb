from __future__ import annotations

from typing import Optional, Sequence, Union

import numpy as np
from PIL import Image

from combiner.models.image_model import ImageData
from combiner.models.options_model import StackMode
from combiner.services.layout_service import LayoutService


class ComposeService:
    def __init__(self, layout_service: Optional[LayoutService] = None) -> None:
        self._layout = layout_service or LayoutService()

    # ---------- Вспомогательные функции ----------
    def _image_to_rgba_np(self, image: Image.Image) -> np.ndarray:
        """
        Возвращает numpy-массив uint8 формы (H, W, 4).
        """
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return np.asarray(image, dtype=np.uint8)

    # ---------- Склейка ----------
    def compose(self, images: Sequence[ImageData], mode: Union[StackMode, str]) -> Image.Image:
        """
        Склеивает изображения в один RGBA-холст:
        - bottom: ширина = max(ширин), высота = сумма высот, курсор идёт вниз
        - right: ширина = сумма ширин, высота = max(высот), курсор идёт вправо
        Пиксели источника полностью заменяют пиксели холста (без смешивания).
        Незакрашенная область остаётся прозрачной (0, 0, 0, 0).
        """
        # validate before anything is allocated
        stack_mode = StackMode.parse(mode)
        dims = self._layout.aggregate(images)
        width, height = dims.canvas_size(stack_mode)

        canvas = np.zeros((height, width, 4), dtype=np.uint8)
        x, y = 0, 0
        for item in images:
            pixels = self._image_to_rgba_np(item.pil_image)
            canvas[y:y + item.height, x:x + item.width] = pixels
            if stack_mode is StackMode.BOTTOM:
                y += item.height
            else:
                x += item.width

        return Image.fromarray(canvas)
