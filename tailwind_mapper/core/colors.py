"""Default Tailwind color palette."""

from types import MappingProxyType
from typing import Dict, List, Mapping

SHADES = ['50', '100', '200', '300', '400', '500', '600', '700', '800', '900']

# Prefixes of the utilities that take a palette color
COLOR_PREFIXES = ['text', 'bg', 'border']

DEFAULT_PALETTE: Mapping[str, Mapping[str, str]] = MappingProxyType({
    'slate': MappingProxyType({
        '50': '#f8fafc', '100': '#f1f5f9', '200': '#e2e8f0', '300': '#cbd5e1',
        '400': '#94a3b8', '500': '#64748b', '600': '#475569', '700': '#334155',
        '800': '#1e293b', '900': '#0f172a',
    }),
    'gray': MappingProxyType({
        '50': '#f9fafb', '100': '#f3f4f6', '200': '#e5e7eb', '300': '#d1d5db',
        '400': '#9ca3af', '500': '#6b7280', '600': '#4b5563', '700': '#374151',
        '800': '#1f2937', '900': '#111827',
    }),
    'red': MappingProxyType({
        '50': '#fef2f2', '100': '#fee2e2', '200': '#fecaca', '300': '#fca5a5',
        '400': '#f87171', '500': '#ef4444', '600': '#dc2626', '700': '#b91c1c',
        '800': '#991b1b', '900': '#7f1d1d',
    }),
    'green': MappingProxyType({
        '50': '#f0fdf4', '100': '#dcfce7', '200': '#bbf7d0', '300': '#86efac',
        '400': '#4ade80', '500': '#22c55e', '600': '#16a34a', '700': '#15803d',
        '800': '#166534', '900': '#14532d',
    }),
    'blue': MappingProxyType({
        '50': '#eff6ff', '100': '#dbeafe', '200': '#bfdbfe', '300': '#93c5fd',
        '400': '#60a5fa', '500': '#3b82f6', '600': '#2563eb', '700': '#1d4ed8',
        '800': '#1e40af', '900': '#1e3a8a',
    }),
})


def color_usage(name: str, shades: Mapping[str, str]) -> List[str]:
    """List the utility classes a palette color is available as."""
    return [
        f"{prefix}-{name}-{shade}"
        for shade in shades
        for prefix in COLOR_PREFIXES
    ]


def palette_values(prefix: str, palette: Mapping[str, Mapping[str, str]] = DEFAULT_PALETTE) -> Dict[str, str]:
    """Map every hex value of a palette to its ``<prefix>-<name>-<shade>`` class."""
    values = {}
    for name, shades in palette.items():
        for shade, hex_value in shades.items():
            values.setdefault(hex_value, f"{prefix}-{name}-{shade}")
    return values

# Exported names
__all__ = ['SHADES', 'COLOR_PREFIXES', 'DEFAULT_PALETTE', 'color_usage', 'palette_values']
