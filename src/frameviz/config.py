# src/frameviz/config.py
from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Literal
import configparser
import logging
import os

logger = logging.getLogger(__name__)

TableViewMode = Literal["simple", "rich"]

DEFAULT_CHART_WIDTH = 800
DEFAULT_CHART_HEIGHT = 600
DEFAULT_GOOGLE_PACKAGES = ("corechart",)
DEFAULT_GOOGLE_LOADER_URL = "https://www.gstatic.com/charts/loader.js"
DEFAULT_IMAGE_DPI = 100

DEFAULT_TABLE_VIEW_MODE: TableViewMode = "rich"
DEFAULT_PAGE_SIZE = 20
DEFAULT_MAX_ROWS = 1000
DEFAULT_TABULATOR_VERSION = "5.5.0"

DEFAULT_FLOAT_PRECISION = 4

_MAX_ROWS_INF = 2**31 - 1


@dataclass(frozen=True, slots=True)
class Settings:
    # Charts
    default_width: int = DEFAULT_CHART_WIDTH
    default_height: int = DEFAULT_CHART_HEIGHT
    google_packages: tuple[str, ...] = DEFAULT_GOOGLE_PACKAGES
    google_loader_url: str = DEFAULT_GOOGLE_LOADER_URL
    image_dpi: int = DEFAULT_IMAGE_DPI

    # Tables
    table_view_mode: TableViewMode = DEFAULT_TABLE_VIEW_MODE
    page_size: int = DEFAULT_PAGE_SIZE
    max_rows: int = DEFAULT_MAX_ROWS
    tabulator_version: str = DEFAULT_TABULATOR_VERSION

    # Cell formatting
    float_precision: int = DEFAULT_FLOAT_PRECISION
    thousands_separator: bool = True


def _strip_quotes(s: str) -> str:
    s = s.strip()
    if len(s) >= 2 and ((s[0] == s[-1] == "'") or (s[0] == s[-1] == '"')):
        return s[1:-1].strip()
    return s


def _parse_listish(raw: str) -> list[str]:
    """
    Accept comma separated and/or multi-line values.
    """
    out: list[str] = []
    for line in raw.splitlines():
        for part in line.split(","):
            part = _strip_quotes(part)
            if part:
                out.append(part)
    return out


def _parse_int(raw: str, *, default: int, min_value: int) -> int:
    try:
        value = int(float(_strip_quotes(raw)))
    except (ValueError, OverflowError):
        return default
    if value < min_value:
        return default
    return value


def _parse_int_or_inf(raw: str, *, default: int, min_value: int) -> int:
    s = _strip_quotes(raw).lower()
    if s in ("", "inf", "infinity", "none", "all"):
        return _MAX_ROWS_INF
    return _parse_int(s, default=default, min_value=min_value)


def _parse_bool(
    cfg: configparser.ConfigParser,
    section: str,
    key: str,
    default: bool,
) -> bool:
    try:
        return cfg.getboolean(section, key, fallback=default)
    except ValueError:
        logger.debug("Ignoring invalid boolean for [%s] %s", section, key)
        return default


def _resolve_ini_path() -> Path | None:
    """
    Resolution order:
      1) env var FRAMEVIZ_INI
      2) ./frameviz.ini (cwd)
      3) None
    """
    env_path = os.environ.get("FRAMEVIZ_INI")
    if env_path:
        p = Path(env_path).expanduser()
        if p.exists() and p.is_file():
            return p

    cwd_ini = Path.cwd() / "frameviz.ini"
    if cwd_ini.exists() and cwd_ini.is_file():
        return cwd_ini

    return None


def load_settings() -> Settings:
    """
    Load optional frameviz.ini and return Settings.

    Missing sections and keys keep their defaults; values that do not parse
    fall back to the default for that key.
    """
    ini_path = _resolve_ini_path()
    defaults = Settings()
    if ini_path is None:
        return defaults

    cfg = configparser.ConfigParser(inline_comment_prefixes=(";", "#"))
    cfg.read(ini_path)
    logger.debug("Loaded frameviz settings from %s", ini_path)

    # --- charts -----------------------------------------------------------
    section = "chart-settings"
    default_width = _parse_int(
        cfg.get(section, "default_width", fallback=str(defaults.default_width)),
        default=defaults.default_width,
        min_value=1,
    )
    default_height = _parse_int(
        cfg.get(section, "default_height", fallback=str(defaults.default_height)),
        default=defaults.default_height,
        min_value=1,
    )
    google_packages = tuple(
        _parse_listish(cfg.get(section, "google_packages", fallback=""))
    ) or defaults.google_packages
    google_loader_url = (
        _strip_quotes(cfg.get(section, "google_loader_url", fallback=""))
        or defaults.google_loader_url
    )
    image_dpi = _parse_int(
        cfg.get(section, "image_dpi", fallback=str(defaults.image_dpi)),
        default=defaults.image_dpi,
        min_value=1,
    )

    # --- tables -----------------------------------------------------------
    section = "table-settings"
    mode = _strip_quotes(
        cfg.get(section, "table_view_mode", fallback=defaults.table_view_mode)
    ).lower()
    table_view_mode: TableViewMode = (
        mode if mode in ("simple", "rich") else defaults.table_view_mode  # type: ignore[assignment]
    )
    page_size = _parse_int(
        cfg.get(section, "page_size", fallback=str(defaults.page_size)),
        default=defaults.page_size,
        min_value=1,
    )
    max_rows = _parse_int_or_inf(
        cfg.get(section, "max_rows", fallback=str(defaults.max_rows)),
        default=defaults.max_rows,
        min_value=1,
    )
    tabulator_version = (
        _strip_quotes(cfg.get(section, "tabulator_version", fallback=""))
        or defaults.tabulator_version
    )

    # --- formatting -------------------------------------------------------
    section = "format-settings"
    float_precision = _parse_int(
        cfg.get(section, "float_precision", fallback=str(defaults.float_precision)),
        default=defaults.float_precision,
        min_value=0,
    )
    thousands_separator = _parse_bool(
        cfg, section, "thousands_separator", defaults.thousands_separator
    )

    return Settings(
        default_width=default_width,
        default_height=default_height,
        google_packages=google_packages,
        google_loader_url=google_loader_url,
        image_dpi=image_dpi,
        table_view_mode=table_view_mode,
        page_size=page_size,
        max_rows=max_rows,
        tabulator_version=tabulator_version,
        float_precision=float_precision,
        thousands_separator=thousands_separator,
    )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = load_settings()
    return _SETTINGS


def reload_settings() -> Settings:
    global _SETTINGS
    _SETTINGS = None
    return get_settings()


def get_table_view_mode() -> TableViewMode:
    return get_settings().table_view_mode


def set_table_view_mode(mode: TableViewMode) -> None:
    """
    Set how DataFrames are shown in the notebook.

    - "simple": static HTML table.
    - "rich": Tabulator JS grid with local pagination.
    """
    global _SETTINGS
    if mode not in ("simple", "rich"):
        raise ValueError("table_view_mode must be 'simple' or 'rich'")
    _SETTINGS = replace(get_settings(), table_view_mode=mode)
