"""Built-in prefix table consumed as the default registry."""

from __future__ import annotations

from nopix.registry.models import DEFAULT_UNIT, PropertyDescriptor, PropertyRegistry

# prefix, css property, variable stem, scaled
BUILTIN_DESCRIPTORS: tuple[PropertyDescriptor, ...] = (
    # Typography
    PropertyDescriptor("text-", "font-size", "fontSize", True),
    PropertyDescriptor("font-", "font-weight", "fontWeight", False),
    PropertyDescriptor("leading-", "line-height", "lineHeight", True),
    PropertyDescriptor("tracking-", "letter-spacing", "letterSpacing", True),
    PropertyDescriptor("decoration-", "text-decoration-thickness", "textDecorationThickness", True),
    PropertyDescriptor("underline-offset-", "text-underline-offset", "textUnderlineOffset", True),
    PropertyDescriptor("text-shadow-", "text-shadow", "textShadow", True),
    PropertyDescriptor("text-edge-", "text-edge", "textEdge", False),
    PropertyDescriptor("text-indent-edge-", "text-indent-edge", "textIndentEdge", True),
    PropertyDescriptor("text-justify-", "text-justify", "textJustify", False),
    PropertyDescriptor("text-align-last-", "text-align-last", "textAlignLast", False),
    PropertyDescriptor(
        "text-emphasis-position-", "text-emphasis-position", "textEmphasisPosition", False
    ),
    PropertyDescriptor("text-overflow-", "text-overflow", "textOverflow", False),
    PropertyDescriptor("text-size-adjust-", "text-size-adjust", "textSizeAdjust", False),
    PropertyDescriptor("text-wrap-mode-", "text-wrap-mode", "textWrapMode", False),
    PropertyDescriptor("text-spacing-", "text-spacing", "textSpacing", False),
    PropertyDescriptor(
        "font-variation-", "font-variation-settings", "fontVariationSettings", False
    ),
    PropertyDescriptor("font-optical-sizing-", "font-optical-sizing", "fontOpticalSizing", False),
    PropertyDescriptor("font-feature-", "font-feature-settings", "fontFeatureSettings", False),
    PropertyDescriptor("font-kerning-", "font-kerning", "fontKerning", False),
    PropertyDescriptor("font-palette-", "font-palette", "fontPalette", False),
    PropertyDescriptor("font-stretch-", "font-stretch", "fontStretch", False),
    PropertyDescriptor("font-synthesis-", "font-synthesis", "fontSynthesis", False),
    PropertyDescriptor("hyphenate-character-", "hyphenate-character", "hyphenateCharacter", False),
    PropertyDescriptor(
        "hyphenate-limit-chars-", "hyphenate-limit-chars", "hyphenateLimitChars", False
    ),
    PropertyDescriptor("initial-letter-", "initial-letter", "initialLetter", False),

    # Spacing and Sizing
    PropertyDescriptor("p-", "padding", "padding", True),
    PropertyDescriptor("pt-", "padding-top", "paddingTop", True),
    PropertyDescriptor("pb-", "padding-bottom", "paddingBottom", True),
    PropertyDescriptor("pl-", "padding-left", "paddingLeft", True),
    PropertyDescriptor("pr-", "padding-right", "paddingRight", True),
    PropertyDescriptor("m-", "margin", "margin", True),
    PropertyDescriptor("mt-", "margin-top", "marginTop", True),
    PropertyDescriptor("mb-", "margin-bottom", "marginBottom", True),
    PropertyDescriptor("ml-", "margin-left", "marginLeft", True),
    PropertyDescriptor("mr-", "margin-right", "marginRight", True),
    PropertyDescriptor("w-", "width", "width", True),
    PropertyDescriptor("h-", "height", "height", True),
    PropertyDescriptor("min-w-", "min-width", "minWidth", True),
    PropertyDescriptor("max-w-", "max-width", "maxWidth", True),
    PropertyDescriptor("min-h-", "min-height", "minHeight", True),
    PropertyDescriptor("max-h-", "max-height", "maxHeight", True),
    PropertyDescriptor("gap-", "gap", "gap", True),
    PropertyDescriptor("col-gap-", "column-gap", "columnGap", True),
    PropertyDescriptor("row-gap-", "row-gap", "rowGap", True),
    PropertyDescriptor("size-", "size", "size", True),

    # Borders and Shadows
    PropertyDescriptor("border-", "border-width", "borderWidth", True),
    PropertyDescriptor("rounded-", "border-radius", "borderRadius", True),
    PropertyDescriptor("shadow-", "box-shadow", "boxShadow", True),
    PropertyDescriptor("drop-shadow-", "drop-shadow", "dropShadow", True),
    PropertyDescriptor("outline-", "outline-width", "outlineWidth", True),
    PropertyDescriptor("ring-", "ring-width", "ringWidth", True),
    PropertyDescriptor("ring-offset-", "ring-offset-width", "ringOffsetWidth", True),
    PropertyDescriptor("border-image-width-", "border-image-width", "borderImageWidth", True),
    PropertyDescriptor("border-image-outset-", "border-image-outset", "borderImageOutset", True),
    PropertyDescriptor("border-image-slice-", "border-image-slice", "borderImageSlice", False),
    PropertyDescriptor("border-spacing-", "border-spacing", "borderSpacing", True),
    PropertyDescriptor("column-rule-", "column-rule-width", "columnRuleWidth", True),

    # Layout and Positioning
    PropertyDescriptor("top-", "top", "top", True),
    PropertyDescriptor("right-", "right", "right", True),
    PropertyDescriptor("bottom-", "bottom", "bottom", True),
    PropertyDescriptor("left-", "left", "left", True),
    PropertyDescriptor("inset-", "inset", "inset", True),
    PropertyDescriptor("translate-x-", "translate-x", "translateX", True),
    PropertyDescriptor("translate-y-", "translate-y", "translateY", True),
    PropertyDescriptor("rotate-", "rotate", "rotate", False),
    PropertyDescriptor("scale-", "scale", "scale", False),
    PropertyDescriptor("skew-x-", "skew-x", "skewX", False),
    PropertyDescriptor("skew-y-", "skew-y", "skewY", False),
    PropertyDescriptor("transform-origin-", "transform-origin", "transformOrigin", True),
    PropertyDescriptor("perspective-", "perspective", "perspective", True),
    PropertyDescriptor("perspective-origin-", "perspective-origin", "perspectiveOrigin", True),

    # Grid and Flexbox
    PropertyDescriptor("grid-cols-", "grid-template-columns", "gridTemplateColumns", True),
    PropertyDescriptor("grid-rows-", "grid-template-rows", "gridTemplateRows", True),
    PropertyDescriptor("row-start-", "grid-row-start", "gridRowStart", False),
    PropertyDescriptor("row-end-", "grid-row-end", "gridRowEnd", False),
    PropertyDescriptor("col-start-", "grid-column-start", "gridColumnStart", False),
    PropertyDescriptor("col-end-", "grid-column-end", "gridColumnEnd", False),
    PropertyDescriptor("flex-", "flex", "flex", False),
    PropertyDescriptor("basis-", "flex-basis", "flexBasis", True),

    # Background and Images
    PropertyDescriptor("bg-", "background", "background", False),
    PropertyDescriptor("bg-pos-x-", "background-position-x", "backgroundPositionX", True),
    PropertyDescriptor("bg-pos-y-", "background-position-y", "backgroundPositionY", True),
    PropertyDescriptor("bg-repeat-", "background-repeat", "backgroundRepeat", False),
    PropertyDescriptor("bg-clip-", "background-clip", "backgroundClip", False),
    PropertyDescriptor("mask-size-", "mask-size", "maskSize", True),
    PropertyDescriptor("mask-position-", "mask-position", "maskPosition", True),
    PropertyDescriptor("mask-border-width-", "mask-border-width", "maskBorderWidth", True),
    PropertyDescriptor("mask-border-outset-", "mask-border-outset", "maskBorderOutset", True),
    PropertyDescriptor("mask-border-slice-", "mask-border-slice", "maskBorderSlice", False),

    # Animation and Transition
    PropertyDescriptor("transition-", "transition", "transition", False),
    PropertyDescriptor("animation-", "animation", "animation", False),
    PropertyDescriptor("animation-duration-", "animation-duration", "animationDuration", False),
    PropertyDescriptor("animation-delay-", "animation-delay", "animationDelay", False),
    PropertyDescriptor(
        "animation-timing-", "animation-timing-function", "animationTimingFunction", False
    ),

    # Scrolling
    PropertyDescriptor("scroll-m-", "scroll-margin", "scrollMargin", True),
    PropertyDescriptor("scroll-mt-", "scroll-margin-top", "scrollMarginTop", True),
    PropertyDescriptor("scroll-mb-", "scroll-margin-bottom", "scrollMarginBottom", True),
    PropertyDescriptor("scroll-ml-", "scroll-margin-left", "scrollMarginLeft", True),
    PropertyDescriptor("scroll-mr-", "scroll-margin-right", "scrollMarginRight", True),
    PropertyDescriptor("scroll-p-", "scroll-padding", "scrollPadding", True),
    PropertyDescriptor("scroll-pt-", "scroll-padding-top", "scrollPaddingTop", True),
    PropertyDescriptor("scroll-pb-", "scroll-padding-bottom", "scrollPaddingBottom", True),
    PropertyDescriptor("scroll-pl-", "scroll-padding-left", "scrollPaddingLeft", True),
    PropertyDescriptor("scroll-pr-", "scroll-padding-right", "scrollPaddingRight", True),
    PropertyDescriptor("scroll-snap-m-", "scroll-snap-margin", "scrollSnapMargin", True),
    PropertyDescriptor("scroll-snap-align-", "scroll-snap-align", "scrollSnapAlign", False),
    PropertyDescriptor("scroll-snap-stop-", "scroll-snap-stop", "scrollSnapStop", False),
    PropertyDescriptor("scroll-snap-type-", "scroll-snap-type", "scrollSnapType", False),
    PropertyDescriptor("scroll-behavior-", "scroll-behavior", "scrollBehavior", False),
    PropertyDescriptor("scroll-timeline-", "scroll-timeline", "scrollTimeline", False),
    PropertyDescriptor("scrollbar-width-", "scrollbar-width", "scrollbarWidth", True),
    PropertyDescriptor("scrollbar-gutter-", "scrollbar-gutter", "scrollbarGutter", True),

    # Miscellaneous
    PropertyDescriptor("accent-", "accent-color", "accentColor", False),
    PropertyDescriptor("align-", "vertical-align", "verticalAlign", True),
    PropertyDescriptor("appearance-", "appearance", "appearance", False),
    PropertyDescriptor("aspect-", "aspect-ratio", "aspectRatio", False),
    PropertyDescriptor("backdrop-", "backdrop-filter", "backdropFilter", True),
    PropertyDescriptor("baseline-shift-", "baseline-shift", "baselineShift", True),
    PropertyDescriptor("blur-", "blur", "blur", True),
    PropertyDescriptor("caption-side-", "caption-side", "captionSide", False),
    PropertyDescriptor("clear-", "clear", "clear", False),
    PropertyDescriptor("clip-path-", "clip-path", "clipPath", True),
    PropertyDescriptor("columns-", "columns", "columns", True),
    PropertyDescriptor("container-type-", "container-type", "containerType", False),
    PropertyDescriptor("container-name-", "container-name", "containerName", False),
    PropertyDescriptor("content-", "content", "content", False),
    PropertyDescriptor("counter-increment-", "counter-increment", "counterIncrement", False),
)


def builtin_registry() -> PropertyRegistry:
    """Return the registry shipped with the package."""
    return PropertyRegistry(descriptors=BUILTIN_DESCRIPTORS, unit=DEFAULT_UNIT)
