"""Attribute and class name normalization."""

from __future__ import annotations


class Identifier(str):
    """An attribute name written as a Python identifier (keyword argument).

    Only identifiers are kebab-cased for DOM nodes; plain strings pass
    through so any attribute name can still be spelled out.
    """


def kebab(name: str) -> str:
    """Convert camelCase or snake_case to kebab-case.

    Digits and existing hyphens pass through, so ``WebkitTransition`` becomes
    ``-webkit-transition``.
    """
    parts = []
    for c in name:
        if c.islower() or c.isnumeric() or c == "-":
            parts.append(c)
        elif c == "_":
            parts.append("-")
        else:
            parts.append("-" + c.lower())
    return "".join(parts)


def identifier_name(name: str) -> str:
    # class_ / for_ spell reserved words as keyword arguments
    if len(name) > 1 and name.endswith("_"):
        return name[:-1]
    return name


# All camelCase attribute names from HTML 4, HTML 5, SVG 1.1, SVG Tiny 1.2, and SVG 2
HTML_SVG_CAMELS = {
    x.lower(): x
    for x in [
        "preserveAspectRatio", "requiredExtensions", "systemLanguage",
        "externalResourcesRequired", "attributeName", "attributeType", "calcMode",
        "keySplines", "keyTimes", "repeatCount", "repeatDur", "requiredFeatures",
        "requiredFonts", "requiredFormats", "baseFrequency", "numOctaves", "stitchTiles",
        "focusHighlight", "lengthAdjust", "textLength", "glyphRef", "gradientTransform",
        "gradientUnits", "spreadMethod", "tableValues", "pathLength", "clipPathUnits",
        "stdDeviation", "viewBox", "viewTarget", "zoomAndPan", "initialVisibility",
        "syncBehavior", "syncMaster", "syncTolerance", "transformBehavior", "keyPoints",
        "defaultAction", "startOffset", "mediaCharacterEncoding", "mediaContentEncodings",
        "mediaSize", "mediaTime", "maskContentUnits", "maskUnits", "baseProfile",
        "contentScriptType", "contentStyleType", "playbackOrder", "snapshotTime",
        "syncBehaviorDefault", "syncToleranceDefault", "timelineBegin", "edgeMode",
        "kernelMatrix", "kernelUnitLength", "preserveAlpha", "targetX", "targetY",
        "patternContentUnits", "patternTransform", "patternUnits", "xChannelSelector",
        "yChannelSelector", "diffuseConstant", "surfaceScale", "refX", "refY",
        "markerHeight", "markerUnits", "markerWidth", "filterRes", "filterUnits",
        "primitiveUnits", "specularConstant", "specularExponent", "limitingConeAngle",
        "pointsAtX", "pointsAtY", "pointsAtZ", "hatchContentUnits", "hatchUnits",
    ]
}


def dom_attr_name(name: str) -> str:
    """Normalize a DOM attribute name written as an identifier."""
    name = identifier_name(name)
    return HTML_SVG_CAMELS.get(name.lower()) or kebab(name)


def css_property_name(name: str) -> str:
    if isinstance(name, Identifier):
        name = identifier_name(name)
    return kebab(name)
