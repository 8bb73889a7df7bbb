"""Модели данных для изображений.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image

from combiner.models.options_model import StackMode


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель входного изображения и его метаданные.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Декодированное изображение PIL (RGBA), уже отвязанное от файла.
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL исходного файла, например "RGB".
        source_format: Формат, определённый по содержимому ("PNG" | "JPEG").
        size_bytes: Размер файла, если доступен.
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
    mode: str
    source_format: str
    size_bytes: Optional[int]


@dataclass(frozen=True)
class Dimensions:
    """Суммы и максимумы размеров по набору изображений."""
    total_height: int
    total_width: int
    max_height: int
    max_width: int

    def canvas_size(self, mode: StackMode) -> Tuple[int, int]:
        """Размер холста `(width, height)` для стороны склейки."""
        if mode is StackMode.BOTTOM:
            return self.max_width, self.total_height
        return self.total_width, self.max_height
