from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from enum import Enum

from art_framer.config import settings

logger = logging.getLogger(__name__)


class TextureVerdict(str, Enum):
    UNKNOWN = "unknown"
    VALID = "valid"
    INVALID = "invalid"


class TextureValidator:
    """
    Memoized best-effort validity verdicts for texture URLs.

    A path seen for the first time is classified by its scheme only: anything
    starting with an accepted prefix is optimistically treated as valid. The
    loader that actually fetches the texture reports the real outcome back
    through ``mark_valid`` / ``mark_invalid``. Verdicts never expire.
    """

    def __init__(self, *, scheme_prefixes: Iterable[str] | None = None) -> None:
        if scheme_prefixes is None:
            scheme_prefixes = settings.texture_url_scheme_prefixes
        self.scheme_prefixes = tuple(prefix.lower() for prefix in scheme_prefixes)
        self._verdicts: dict[str, TextureVerdict] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._verdicts)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and path in self._verdicts

    def _default_verdict(self, path: str) -> TextureVerdict:
        if path.lower().startswith(self.scheme_prefixes):
            return TextureVerdict.VALID
        return TextureVerdict.INVALID

    def verdict(self, path: object) -> TextureVerdict:
        if not isinstance(path, str):
            return TextureVerdict.UNKNOWN
        return self._verdicts.get(path, TextureVerdict.UNKNOWN)

    def validate(self, path: object) -> bool:
        if not isinstance(path, str):
            return False

        with self._lock:
            cached = self._verdicts.get(path)
            if cached is None:
                cached = self._default_verdict(path)
                self._verdicts[path] = cached
                logger.debug("Texture path %s classified as %s", path, cached.value)
        return cached is TextureVerdict.VALID

    def validate_batch(self, paths: Iterable[object] | None) -> list[str]:
        if not paths or isinstance(paths, str) or not isinstance(paths, Iterable):
            return []
        return [path for path in paths if self.validate(path)]

    def _mark(self, path: object, verdict: TextureVerdict) -> None:
        if not isinstance(path, str) or not path:
            return
        with self._lock:
            previous = self._verdicts.get(path)
            self._verdicts[path] = verdict
        if previous is not verdict:
            logger.info("Texture path %s marked %s", path, verdict.value)

    def mark_valid(self, path: object) -> None:
        self._mark(path, TextureVerdict.VALID)

    def mark_invalid(self, path: object) -> None:
        self._mark(path, TextureVerdict.INVALID)

    def clear_cache(self) -> None:
        with self._lock:
            cleared = len(self._verdicts)
            self._verdicts.clear()
        logger.info("Cleared %d cached texture verdicts", cleared)


texture_validator = TextureValidator()


def validate_texture_path(path: object) -> bool:
    return texture_validator.validate(path)


def validate_texture_paths(paths: Iterable[object] | None) -> list[str]:
    return texture_validator.validate_batch(paths)


def mark_texture_path_as_valid(path: object) -> None:
    texture_validator.mark_valid(path)


def mark_texture_path_as_invalid(path: object) -> None:
    texture_validator.mark_invalid(path)


def clear_texture_validation_cache() -> None:
    texture_validator.clear_cache()
