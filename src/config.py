from __future__ import annotations
"""
Render configuration: canvas geometry and sampling parameters shared by every
scenario. Values are passed explicitly into the render functions; a JSON file
can override the defaults (`--config path.json`).
"""
import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

Color = Tuple[int, int, int, int]

# Fixed palette. Stored as straight (non-premultiplied) RGBA.
BACKGROUND: Color = (255, 255, 255, 255)
LINE_COLOR: Color = (80, 80, 80, 255)
FILL_COLOR: Color = (255, 0, 0, 100)


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class RenderConfig:
    width: int = 255
    height: int = 255
    radius_ratio: float = 0.8
    divisions: int = 5
    radial_step: float = 0.1
    arc_spacing: float = 0.5

    @property
    def center(self) -> Tuple[int, int]:
        c = self.width // 2
        return (c, c)

    @property
    def radius(self) -> float:
        # 80% of half-width with the default ratio
        return float(self.width) * self.radius_ratio * 0.5

    def as_dict(self) -> Dict[str, Any]:
        d = {f.name: getattr(self, f.name) for f in fields(self)}
        d['center'] = list(self.center)
        d['radius'] = self.radius
        return d


_INT_FIELDS = ('width', 'height', 'divisions')
_FLOAT_FIELDS = ('radius_ratio', 'radial_step', 'arc_spacing')


def _coerce(key: str, value: Any) -> Any:
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be a number, got {value!r}")
    if key in _INT_FIELDS and isinstance(value, float) and not value.is_integer():
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    try:
        out = int(value) if key in _INT_FIELDS else float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{key} must be a number, got {value!r}") from e
    if out <= 0:
        raise ConfigError(f"{key} must be positive, got {value!r}")
    return out


def config_from_dict(data: Dict[str, Any], base: Optional[RenderConfig] = None) -> RenderConfig:
    """Apply known keys from `data` over `base` (defaults if None).

    Unknown keys are reported and ignored.
    """
    cfg = base or RenderConfig()
    updates = {}
    for key, value in data.items():
        if key in _INT_FIELDS or key in _FLOAT_FIELDS:
            updates[key] = _coerce(key, value)
        else:
            print(f"[Warning] Unknown config key '{key}' ignored.")
    return replace(cfg, **updates)


def load_config(path: Optional[str]) -> RenderConfig:
    if not path:
        return RenderConfig()
    fp = Path(path)
    try:
        with open(fp, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config {fp}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"malformed config {fp}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config {fp} must contain a JSON object")
    return config_from_dict(data)
