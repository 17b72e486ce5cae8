"""Color token utilities."""
import re

DEFAULT_COLOR = "bg-gray-500"

HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")


def normalize_color(value: str) -> str:
    """
    Convert color input to a background token.

    Hex values from a color picker are wrapped as arbitrary-value tokens,
    anything else is kept verbatim.

    Examples:
        >>> normalize_color("#22c55e")
        'bg-[#22c55e]'
        >>> normalize_color("bg-blue-500")
        'bg-blue-500'
    """
    value = value.strip()
    if HEX_COLOR.match(value):
        return f"bg-[{value}]"
    return value


def label_color_for(background: str) -> str:
    """
    Derive the label token matching a background token.

    Examples:
        >>> label_color_for("bg-blue-500")
        'text-blue-500'
        >>> label_color_for("bg-[#22c55e]")
        'text-[#22c55e]'
    """
    if background.startswith("bg-"):
        return "text-" + background[len("bg-"):]
    return background
