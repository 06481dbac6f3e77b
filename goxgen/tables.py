"""Static lookup tables for event handlers and controlled properties."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Map html-style handler names to the runtime's event names
EVENT_MAP: Mapping[str, str] = MappingProxyType(
    {
        "onAbort": "abort",
        "onCancel": "cancel",
        "onCanPlay": "canplay",
        "onCanPlaythrough": "canplaythrough",
        "onChange": "change",
        "onClick": "click",
        "onCueChange": "cuechange",
        "onDblClick": "dblclick",
        "onDurationChange": "durationchange",
        "onEmptied": "emptied",
        "onEnded": "ended",
        "onInput": "input",
        "onInvalid": "invalid",
        "onKeyDown": "keydown",
        "onKeyPress": "keypress",
        "onKeyUp": "keyup",
        "onLoadedData": "loadeddata",
        "onLoadedMetadata": "loadedmetadata",
        "onLoadStart": "loadstart",
        "onMouseDown": "mousedown",
        "onMouseEnter": "mouseenter",
        "onMouseleave": "mouseleave",
        "onMouseMove": "mousemove",
        "onMouseOut": "mouseout",
        "onMouseOver": "mouseover",
        "onMouseUp": "mouseup",
        "onMouseWheel": "mousewheel",
        "onPause": "pause",
        "onPlay": "play",
        "onPlaying": "playing",
        "onProgress": "progress",
        "onRateChange": "ratechange",
        "onReset": "reset",
        "onSeeked": "seeked",
        "onSeeking": "seeking",
        "onSelect": "select",
        "onShow": "show",
        "onStalled": "stalled",
        "onSubmit": "submit",
        "onSuspend": "suspend",
        "onTimeUpdate": "timeupdate",
        "onToggle": "toggle",
        "onVolumeChange": "volumechange",
        "onWaiting": "waiting",
    }
)

# Attributes the runtime controls as properties rather than plain attributes
ATTR_MAP: Mapping[str, str] = MappingProxyType(
    {
        "autofocus": "autofocus",
        "checked": "checked",
        "class": "class",
        "for": "htmlFor",
        "href": "href",
        "id": "id",
        "placeholder": "placeholder",
        "src": "src",
        "type": "type",
        "value": "value",
    }
)


def is_event(name: str) -> bool:
    return name in EVENT_MAP


def controlled_property(name: str) -> str | None:
    """Return the runtime property name for *name*, or None if uncontrolled."""
    return ATTR_MAP.get(name)
