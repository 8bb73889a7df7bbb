from __future__ import annotations

from pathlib import Path
from typing import Callable, Tuple

import pytest
from PIL import Image

from combiner.models.image_model import ImageData

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)


@pytest.fixture
def make_image(tmp_path: Path) -> Callable[..., Path]:
    """Фабрика: сохраняет однотонное изображение `height`x`width` и возвращает путь."""
    counter = {"n": 0}

    def _make(
        height: int,
        width: int,
        color: Tuple[int, ...] = RED,
        fmt: str = "PNG",
        name: str | None = None,
    ) -> Path:
        counter["n"] += 1
        if name is None:
            ext = "png" if fmt == "PNG" else "jpg"
            name = f"img{counter['n']}.{ext}"
        path = tmp_path / name
        mode = "RGBA" if fmt == "PNG" else "RGB"
        Image.new(mode, (width, height), color=color[: len(mode)]).save(path, format=fmt)
        return path

    return _make


@pytest.fixture
def make_data() -> Callable[..., ImageData]:
    """Фабрика `ImageData` в памяти, без диска."""

    def _make(height: int, width: int, color: Tuple[int, int, int, int] = RED) -> ImageData:
        image = Image.new("RGBA", (width, height), color=color)
        return ImageData(
            path=Path(f"mem-{height}x{width}.png"),
            pil_image=image,
            width=width,
            height=height,
            mode="RGBA",
            source_format="PNG",
            size_bytes=None,
        )

    return _make
