# Configuration helpers for the drawing backends
#
# A single module-level ConfigParser holds the defaults shipped in
# plotters_qt.ini, overridden by the user file ~/.plotters_qt.
# Backends read it through the typed getters below
# (``import plotters_qt.utils_core as Utils``).

__all__ = [
    # Metadata
    "__version__", "__prg__",
    # Paths
    "prgpath", "iniSystem", "iniUser",
    # Globals
    "config", "_BACKEND_SECTION",
    # Functions
    "loadConfiguration", "addSection",
    "getStr", "getBool", "setBool", "setStr",
    "fillRule", "antialias",
]

import configparser
import logging
import os

from .BackendTypes import FILL_RULES, FILL_WINDING

__version__ = "0.3.0"
__prg__ = "plotters_qt"

prgpath = os.path.abspath(os.path.dirname(__file__))
iniSystem = os.path.join(prgpath, f"{__prg__}.ini")
iniUser = os.path.expanduser(f"~/.{__prg__}")

config = configparser.ConfigParser(interpolation=None)

_BACKEND_SECTION = "Backend"


# -----------------------------------------------------------------------------
# Load configuration
# -----------------------------------------------------------------------------
def loadConfiguration(systemOnly=False, paths=None):
    """Read the system ini and, unless systemOnly, the user ini.

    Args:
        systemOnly: Skip the user file.
        paths: Extra ini files read last (highest priority).

    Returns:
        List of files that were successfully read.
    """
    files = [iniSystem] if systemOnly else [iniSystem, iniUser]
    if paths:
        files.extend(paths)
    return config.read(files)


# -----------------------------------------------------------------------------
# add section if it doesn't exist
# -----------------------------------------------------------------------------
def addSection(section):
    if not config.has_section(section):
        config.add_section(section)


# -----------------------------------------------------------------------------
def getStr(section, name, default=""):
    try:
        return config.get(section, name)
    except (configparser.Error, ValueError):
        return default


# -----------------------------------------------------------------------------
def getBool(section, name, default=False):
    try:
        return bool(int(config.get(section, name)))
    except (configparser.Error, ValueError):
        return default


# -----------------------------------------------------------------------------
def setBool(section, name, value):
    addSection(section)
    config.set(section, name, str(int(value)))


# -----------------------------------------------------------------------------
def setStr(section, name, value):
    addSection(section)
    config.set(section, name, str(value))


# -----------------------------------------------------------------------------
# Backend settings
# -----------------------------------------------------------------------------
def fillRule():
    """Configured fill rule for polygons and filled circles."""
    rule = getStr(_BACKEND_SECTION, "fillrule", FILL_WINDING).strip().lower()
    if rule not in FILL_RULES:
        logging.warning("Unknown fill rule '%s' in [%s], using '%s'",
                        rule, _BACKEND_SECTION, FILL_WINDING)
        return FILL_WINDING
    return rule


def antialias():
    """Whether Paintable.render() enables antialiasing."""
    return getBool(_BACKEND_SECTION, "antialias", True)


loadConfiguration()
