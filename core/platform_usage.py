# =============================================================================
# core/platform_usage.py  —  Per-platform usage documentation
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds static "how to install and render a Hugeicons icon" docs for each
#   supported UI platform, and renders them as markdown for the
#   hugeicons://docs/platforms/{platform} resources.
#
# WHY STATIC DATA?
#   The snippets change only when the component packages change, so a table
#   in code is easier to review than a remote docs fetch, and it works
#   offline.
# =============================================================================

from typing import Optional

from core.models import PlatformUsage, PropSpec


CORE_PACKAGES = [
    "@hugeicons-pro/core-stroke-rounded",
    "@hugeicons-pro/core-stroke-sharp",
    "@hugeicons-pro/core-stroke-standard",
    "@hugeicons-pro/core-solid-rounded",
    "@hugeicons-pro/core-solid-sharp",
    "@hugeicons-pro/core-solid-standard",
    "@hugeicons-pro/core-bulk-rounded",
    "@hugeicons-pro/core-duotone-rounded",
    "@hugeicons-pro/core-twotone-rounded",
]


def _web_props(class_prop: str, color_default: str = "currentColor",
               color_description: str = "Icon color (CSS color value)") -> list[PropSpec]:
    """Prop table shared by the JS component packages.

    They differ only in the name of the CSS class prop and, for React Native,
    in the color default.
    """
    props = [
        PropSpec("icon", "IconSvgObject",
                 "The main icon component imported from an icon package",
                 default="Required"),
        PropSpec("altIcon", "IconSvgObject",
                 "Alternative icon component from an icon package for states, "
                 "interactions, or animations"),
        PropSpec("showAlt", "boolean",
                 "When true, displays the altIcon instead of the main icon",
                 default="false"),
        PropSpec("size", "number", "Icon size in pixels", default="24"),
        PropSpec("color", "string", color_description, default=color_default),
        PropSpec("strokeWidth", "number",
                 "Width of the icon strokes (works with stroke-style icons)",
                 default="1.5"),
    ]
    if class_prop:
        props.append(PropSpec(class_prop, "string", "Additional CSS classes"))
    return props


PLATFORM_USAGE: dict[str, PlatformUsage] = {
    "react": PlatformUsage(
        platform="react",
        install_command="npm install @hugeicons/react",
        packages=CORE_PACKAGES,
        basic_usage="""import { HugeiconsIcon } from '@hugeicons/react'
import { Notification03Icon } from '@hugeicons/core-free-icons'

function App() {
    return <HugeiconsIcon icon={Notification03Icon} size={24} color="currentColor" strokeWidth={1.5} />
}""",
        props=_web_props("className"),
    ),
    "vue": PlatformUsage(
        platform="vue",
        install_command="npm install @hugeicons/vue",
        packages=CORE_PACKAGES,
        basic_usage="""<script setup>
import { HugeiconsIcon } from '@hugeicons/vue'
import { Notification03Icon } from '@hugeicons/core-free-icons'
</script>

<template>
    <HugeiconsIcon :icon="Notification03Icon" :size="24" color="currentColor" :strokeWidth="1.5" />
</template>""",
        props=_web_props("class"),
    ),
    "angular": PlatformUsage(
        platform="angular",
        install_command="npm install @hugeicons/angular",
        packages=CORE_PACKAGES,
        basic_usage="""// your.component.ts
import { Component } from '@angular/core'
import { Notification03Icon } from '@hugeicons/core-free-icons'

@Component({
    selector: 'app-example',
    template: `<hugeicons-icon [icon]="notification03Icon" [size]="24" color="currentColor" [strokeWidth]="1.5"></hugeicons-icon>`,
})
export class ExampleComponent {
    notification03Icon = Notification03Icon
}""",
        props=_web_props("class"),
    ),
    "svelte": PlatformUsage(
        platform="svelte",
        install_command="npm install @hugeicons/svelte",
        packages=CORE_PACKAGES,
        basic_usage="""<script>
  import { HugeiconsIcon } from '@hugeicons/svelte'
  import { Notification03Icon } from '@hugeicons/core-free-icons'
</script>

<HugeiconsIcon icon={Notification03Icon} size={24} color="currentColor" strokeWidth={1.5} />""",
        props=_web_props("class"),
    ),
    "react-native": PlatformUsage(
        platform="react-native",
        install_command="npm install @hugeicons/react-native",
        packages=CORE_PACKAGES,
        basic_usage="""import { HugeiconsIcon } from '@hugeicons/react-native'
import { Notification03Icon } from '@hugeicons/core-free-icons'

export default function App() {
  return <HugeiconsIcon icon={Notification03Icon} size={24} color="#000000" strokeWidth={1.5} />
}""",
        # No CSS in React Native, so no class prop.
        props=_web_props("", color_default="#000000",
                         color_description="Icon color (color string)"),
    ),
    "flutter": PlatformUsage(
        platform="flutter",
        install_command="hugeicons: ^0.0.10",
        packages=[],
        basic_usage="""import 'package:hugeicons/hugeicons.dart';

// Example usage in a widget
HugeIcon(
  icon: HugeIcons.strokeRoundedHome01,
  color: Colors.red,
  size: 30.0,
),""",
        props=[
            PropSpec("icon", "HugeIcons",
                     "The icon to display from HugeIcons collection", default="Required"),
            PropSpec("size", "double", "Icon size in logical pixels", default="24.0"),
            PropSpec("color", "Color", "Icon color from Flutter Colors",
                     default="Colors.black"),
        ],
    ),
}

_CODE_FENCE_LANGUAGE = {
    "react": "jsx",
    "vue": "vue",
    "angular": "typescript",
    "svelte": "svelte",
    "react-native": "jsx",
    "flutter": "dart",
}


def list_platforms() -> list[str]:
    """All platform keys, in documentation order."""
    return list(PLATFORM_USAGE)


def get_platform_usage(platform: str) -> Optional[PlatformUsage]:
    """Look up a platform's docs ("React " and "react" are the same).

    Returns None for unknown platforms so the caller can list alternatives.
    """
    if not platform:
        return None
    return PLATFORM_USAGE.get(platform.strip().lower())


def usage_to_markdown(usage: PlatformUsage) -> str:
    """Render one platform's docs as a markdown page."""
    install_fence = "yaml" if usage.platform == "flutter" else "bash"
    lines = [
        f"# Hugeicons for {usage.platform}",
        "",
        "## Installation",
        "",
        f"```{install_fence}",
        usage.install_command,
        "```",
    ]

    if usage.packages:
        lines += ["", "### Icon packages", ""]
        lines += [f"- `{package}`" for package in usage.packages]

    lines += [
        "",
        "## Basic usage",
        "",
        f"```{_CODE_FENCE_LANGUAGE.get(usage.platform, '')}",
        usage.basic_usage,
        "```",
    ]

    if usage.props:
        lines += [
            "",
            "## Props",
            "",
            "| Prop | Type | Default | Description |",
            "|------|------|---------|-------------|",
        ]
        for prop in usage.props:
            default = f"`{prop.default}`" if prop.default else "-"
            lines.append(f"| `{prop.name}` | `{prop.type}` | {default} | {prop.description} |")

    return "\n".join(lines) + "\n"
