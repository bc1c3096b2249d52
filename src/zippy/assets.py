"""
assets.py: Loads optional sprites, sounds and font for the client.

Nothing here is required: any file that is missing or unreadable is logged
and left as None, and the renderer/audio fall back accordingly.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Optional

import pygame

from .constants import ASSET_DIR, FONT_FILE, IMAGE_FILES, SOUND_FILES

logger = logging.getLogger(__name__)


@dataclass
class Assets:
    images: Dict[str, Optional[pygame.Surface]] = field(default_factory=dict)
    sounds: Dict[str, Optional[pygame.mixer.Sound]] = field(default_factory=dict)
    font_path: Optional[str] = None

    def image(self, name: str) -> Optional[pygame.Surface]:
        return self.images.get(name)


def _load_image(path: str) -> Optional[pygame.Surface]:
    try:
        image = pygame.image.load(path)
    except (pygame.error, OSError) as e:
        logger.warning("Image not loaded (%s): %s", path, e)
        return None
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def _load_sound(path: str):
    if not pygame.mixer.get_init():
        return None
    try:
        return pygame.mixer.Sound(path)
    except (pygame.error, OSError) as e:
        logger.warning("Sound not loaded (%s): %s", path, e)
        return None


def load_assets(asset_dir: str = ASSET_DIR) -> Assets:
    """Loads every known asset from asset_dir. Never raises."""
    assets = Assets()
    for name, filename in IMAGE_FILES.items():
        assets.images[name] = _load_image(os.path.join(asset_dir, filename))
    for name, filename in SOUND_FILES.items():
        assets.sounds[name] = _load_sound(os.path.join(asset_dir, filename))

    font_path = os.path.join(asset_dir, FONT_FILE)
    if os.path.exists(font_path):
        assets.font_path = font_path
    else:
        logger.info("Font %s not found, using the default font", font_path)

    loaded = sum(1 for v in list(assets.images.values()) + list(assets.sounds.values()) if v)
    logger.info("Loaded %d of %d assets from %s",
                loaded, len(IMAGE_FILES) + len(SOUND_FILES), asset_dir)
    return assets
