"""Точка входа в приложение."""
from combiner.app import CombinerApp


def main() -> int:
    """Разбирает командную строку и запускает склейку."""
    return CombinerApp().run()


if __name__ == "__main__":
    raise SystemExit(main())
