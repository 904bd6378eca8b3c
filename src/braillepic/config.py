import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

from braillepic.errors import ConfigurationError

DEFAULT_THRESHOLD = 20

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderOptions:
    width: int = 0  # characters, 0 = fit to the terminal / aspect ratio
    height: int = 0  # characters, 0 = fit to the terminal / aspect ratio
    threshold: int = DEFAULT_THRESHOLD  # luminance 0-255, 0 = default
    colour: bool = True
    background: int | None = None  # ANSI-256 code, None = terminal background
    dither: bool = False
    frame: bool = False

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ConfigurationError(f"Size must not be negative: {self.width}x{self.height}")
        if not 0 <= self.threshold <= 255:
            raise ConfigurationError(f"Threshold must be between 0 and 255: {self.threshold}")
        if self.background is not None and not 0 <= self.background <= 255:
            raise ConfigurationError(f"Background must be an ANSI-256 code: {self.background}")


def resolve_options(options: RenderOptions, environ: Mapping[str, str] | None = None) -> RenderOptions:
    """Apply defaults and environment overrides, returning a new RenderOptions.

    A non-empty NO_COLOR (https://no-color.org) turns colour off.
    """
    if environ is None:
        environ = os.environ

    changes = {}
    if options.threshold == 0:
        changes["threshold"] = DEFAULT_THRESHOLD
    if options.colour and environ.get("NO_COLOR"):
        logger.debug("NO_COLOR is set, disabling colour output")
        changes["colour"] = False
    return replace(options, **changes) if changes else options


@dataclass(frozen=True)
class CliSettings:
    log_level: str

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CliSettings":
        if environ is None:
            environ = os.environ
        return cls(log_level=environ.get("BRAILLEPIC_LOG_LEVEL", "WARNING").upper())


def configure_logging(level: str = "WARNING") -> logging.Logger:
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    return logging.getLogger("braillepic")
