"""Контроллер склейки: оркестрация сервисов загрузки, компоновки и записи.

SOLID:
- SRP: класс управляет порядком шагов конвейера (без логики обработки изображений).
- DIP: зависит от сервисов как от ролей; конкретные реализации подставляются полями.
Clean Code:
- Ошибки сервисов не перехватываются: первая же прерывает запуск.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

from PIL import Image

from combiner.errors import InputFileError
from combiner.models.image_model import ImageData
from combiner.models.options_model import CombineOptions
from combiner.services.compose_service import ComposeService
from combiner.services.encode_service import EncodeService
from combiner.services.image_service import ImageService

logger = logging.getLogger(__name__)


@dataclass
class CombineController:
    """Связывает шаги конвейера: load → aggregate/compose → encode."""
    _image_service: ImageService = field(default_factory=ImageService)
    _compose_service: ComposeService = field(default_factory=ComposeService)
    _encode_service: EncodeService = field(default_factory=EncodeService)

    def run(self, options: CombineOptions) -> Path:
        """Выполняет склейку по настройкам и возвращает путь записанного файла."""
        self._warn_extension_mismatch(options)
        images = self.load_images(options.files)
        canvas = self.compose(images, options)
        out = self._encode_service.encode(canvas, options.output_format, options.out_path)
        logger.info("Wrote %s (%s, %dx%d)", out, options.output_format.value, canvas.width, canvas.height)
        return out

    def load_images(self, files: Sequence[Path]) -> List[ImageData]:
        """Загружает файлы в порядке аргументов, каталоги пропускает."""
        images: List[ImageData] = []
        for file_path in files:
            path = Path(file_path)
            try:
                path.stat()
            except OSError as exc:
                raise InputFileError(f"Не удалось прочитать {path}: {exc}") from exc
            if path.is_dir():
                logger.info("Skipping directory %s", path)
                continue
            images.append(self._image_service.load_image(path))
        return images

    def compose(self, images: Sequence[ImageData], options: CombineOptions) -> Image.Image:
        canvas = self._compose_service.compose(images, options.stack_mode)
        logger.info(
            "Combined %d image(s) to the %s: canvas %dx%d",
            len(images), options.stack_mode.value, canvas.width, canvas.height,
        )
        return canvas

    # ---- Helpers ----
    def _warn_extension_mismatch(self, options: CombineOptions) -> None:
        suffix = options.out_path.suffix.lower()
        if suffix not in options.output_format.extensions:
            logger.warning(
                "Output %s does not match format %s, writing %s data anyway",
                options.out_path, options.output_format.value, options.output_format.pil_format,
            )
