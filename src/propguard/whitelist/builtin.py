"""
Built-in whitelist categories.

This module contains PURE DATA: prop names that are always acceptable,
whatever a component declares. Plain strings are literal names; compiled
expressions match anywhere in the name.

Organization:
1. FRAMEWORK_INTERNAL - Props the host consumes itself
2. DATA_ATTRIBUTES - data-* attributes
3. ARIA_ATTRIBUTES - aria-* attributes and role
4. EVENT_HANDLERS - onXxx callbacks
5. MARKUP_ATTRIBUTES - HTML attributes
6. GRAPHICS_ATTRIBUTES - SVG attributes
"""

import re

# =============================================================================
# 1. FRAMEWORK INTERNAL
# =============================================================================

FRAMEWORK_INTERNAL = (
    "children",
    "key",
    "ref",
    "className",
    "style",
    "dangerouslySetInnerHTML",
    "suppressContentEditableWarning",
    "suppressHydrationWarning",
    "defaultValue",
    "defaultChecked",
)

# =============================================================================
# 2. DATA ATTRIBUTES
# =============================================================================

DATA_ATTRIBUTES = (
    re.compile(r"^data-"),
)

# =============================================================================
# 3. ARIA ATTRIBUTES
# =============================================================================

ARIA_ATTRIBUTES = (
    re.compile(r"^aria-"),
    "role",
)

# =============================================================================
# 4. EVENT HANDLERS
# =============================================================================

EVENT_HANDLERS = (
    re.compile(r"^on[A-Z]"),
)

# =============================================================================
# 5. MARKUP ATTRIBUTES
# =============================================================================

MARKUP_ATTRIBUTES = (
    "accept", "acceptCharset", "accessKey", "action", "allowFullScreen",
    "allowTransparency", "alt", "async", "autoComplete", "autoFocus",
    "autoPlay", "capture", "cellPadding", "cellSpacing", "challenge",
    "charSet", "checked", "cite", "classID", "colSpan", "cols", "content",
    "contentEditable", "contextMenu", "controls", "coords", "crossOrigin",
    "data", "dateTime", "default", "defer", "dir", "disabled", "download",
    "draggable", "encType", "form", "formAction", "formEncType",
    "formMethod", "formNoValidate", "formTarget", "frameBorder", "headers",
    "height", "hidden", "high", "href", "hrefLang", "htmlFor", "httpEquiv",
    "icon", "id", "inputMode", "integrity", "is", "keyParams", "keyType",
    "kind", "label", "lang", "list", "loop", "low", "manifest",
    "marginHeight", "marginWidth", "max", "maxLength", "media",
    "mediaGroup", "method", "min", "minLength", "multiple", "muted", "name",
    "noValidate", "nonce", "open", "optimum", "pattern", "placeholder",
    "poster", "preload", "profile", "radioGroup", "readOnly", "rel",
    "required", "reversed", "rowSpan", "rows", "sandbox", "scope", "scoped",
    "scrolling", "seamless", "selected", "shape", "size", "sizes", "span",
    "spellCheck", "src", "srcDoc", "srcLang", "srcSet", "start", "step",
    "summary", "tabIndex", "target", "title", "type", "useMap", "value",
    "width", "wmode", "wrap",
)

# =============================================================================
# 6. GRAPHICS ATTRIBUTES
# =============================================================================

GRAPHICS_ATTRIBUTES = (
    "clipPath", "cx", "cy", "d", "dx", "dy", "fill", "fillOpacity",
    "fontFamily", "fontSize", "fx", "fy", "gradientTransform",
    "gradientUnits", "markerEnd", "markerMid", "markerStart", "offset",
    "opacity", "patternContentUnits", "patternUnits", "points",
    "preserveAspectRatio", "r", "rx", "ry", "spreadMethod", "stopColor",
    "stopOpacity", "stroke", "strokeDasharray", "strokeLinecap",
    "strokeOpacity", "strokeWidth", "textAnchor", "transform", "version",
    "viewBox", "x1", "x2", "x", "xlinkActuate", "xlinkArcrole",
    "xlinkHref", "xlinkRole", "xlinkShow", "xlinkTitle", "xlinkType",
    "xmlBase", "xmlLang", "xmlSpace", "y1", "y2", "y",
)

# Category name -> specs, in the order the "all" union concatenates them.
BUILTIN_CATEGORIES = {
    "framework-internal": FRAMEWORK_INTERNAL,
    "data-attributes": DATA_ATTRIBUTES,
    "aria-attributes": ARIA_ATTRIBUTES,
    "event-handlers": EVENT_HANDLERS,
    "markup-attributes": MARKUP_ATTRIBUTES,
    "graphics-attributes": GRAPHICS_ATTRIBUTES,
}

ALL_CATEGORY = "all"
