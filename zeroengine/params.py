"""Start-up parameters of an application."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TITLE = "Zero Engine"
DEFAULT_HEIGHT = 600
DEFAULT_WIDTH = 800


@dataclass(frozen=True)
class AppParams:
    """Title and size of the application window."""

    app_title: str = DEFAULT_TITLE
    window_height: int = DEFAULT_HEIGHT
    window_width: int = DEFAULT_WIDTH

    def __post_init__(self) -> None:
        for field_name in ("window_height", "window_width"):
            value = getattr(self, field_name)
            if value < 0:
                raise ValueError(f"{field_name} must not be negative, got {value}")