"""
RGBA color type used for color tweens.

Channels are stored as integers 0-255 for r, g, b and a float 0-1 for alpha.
``lerp`` mutates in place and returns self so the scheduler can reuse one
output buffer per animated property.
"""

import re
from typing import Any, Iterator, Mapping, Optional, Sequence, Tuple, Union

from .exceptions import ColorParseError

ColorLike = Union["Color", str, Sequence[float], Mapping[str, float], int]

_NUM = r"([+-]?[0-9]*\.?[0-9]+)"
_ALPHA = r"(?:\s*[,/]\s*([0-9]*\.?[0-9]+%?))?"

_RGB_RE = re.compile(
    r"^rgba?\(\s*" + _NUM + r"(%?)\s*[, ]\s*" + _NUM + r"(%?)\s*[, ]\s*" + _NUM + r"(%?)" + _ALPHA + r"\s*\)$"
)
_HSL_RE = re.compile(
    r"^(hsla?|hsba?)\(\s*" + _NUM + r"(?:deg)?\s*[, ]\s*" + _NUM + r"%?\s*[, ]\s*" + _NUM + r"%?" + _ALPHA + r"\s*\)$"
)

NAMED_COLORS = {
    "aliceblue": 0xF0F8FF, "antiquewhite": 0xFAEBD7, "aqua": 0x00FFFF,
    "aquamarine": 0x7FFFD4, "azure": 0xF0FFFF, "beige": 0xF5F5DC,
    "bisque": 0xFFE4C4, "black": 0x000000, "blanchedalmond": 0xFFEBCD,
    "blue": 0x0000FF, "blueviolet": 0x8A2BE2, "brown": 0xA52A2A,
    "burlywood": 0xDEB887, "cadetblue": 0x5F9EA0, "chartreuse": 0x7FFF00,
    "chocolate": 0xD2691E, "coral": 0xFF7F50, "cornflowerblue": 0x6495ED,
    "cornsilk": 0xFFF8DC, "crimson": 0xDC143C, "cyan": 0x00FFFF,
    "darkblue": 0x00008B, "darkcyan": 0x008B8B, "darkgoldenrod": 0xB8860B,
    "darkgray": 0xA9A9A9, "darkgreen": 0x006400, "darkgrey": 0xA9A9A9,
    "darkkhaki": 0xBDB76B, "darkmagenta": 0x8B008B, "darkolivegreen": 0x556B2F,
    "darkorange": 0xFF8C00, "darkorchid": 0x9932CC, "darkred": 0x8B0000,
    "darksalmon": 0xE9967A, "darkseagreen": 0x8FBC8F, "darkslateblue": 0x483D8B,
    "darkslategray": 0x2F4F4F, "darkslategrey": 0x2F4F4F, "darkturquoise": 0x00CED1,
    "darkviolet": 0x9400D3, "deeppink": 0xFF1493, "deepskyblue": 0x00BFFF,
    "dimgray": 0x696969, "dimgrey": 0x696969, "dodgerblue": 0x1E90FF,
    "firebrick": 0xB22222, "floralwhite": 0xFFFAF0, "forestgreen": 0x228B22,
    "fuchsia": 0xFF00FF, "gainsboro": 0xDCDCDC, "ghostwhite": 0xF8F8FF,
    "gold": 0xFFD700, "goldenrod": 0xDAA520, "gray": 0x808080,
    "green": 0x008000, "greenyellow": 0xADFF2F, "grey": 0x808080,
    "honeydew": 0xF0FFF0, "hotpink": 0xFF69B4, "indianred": 0xCD5C5C,
    "indigo": 0x4B0082, "ivory": 0xFFFFF0, "khaki": 0xF0E68C,
    "lavender": 0xE6E6FA, "lavenderblush": 0xFFF0F5, "lawngreen": 0x7CFC00,
    "lemonchiffon": 0xFFFACD, "lightblue": 0xADD8E6, "lightcoral": 0xF08080,
    "lightcyan": 0xE0FFFF, "lightgoldenrodyellow": 0xFAFAD2, "lightgray": 0xD3D3D3,
    "lightgreen": 0x90EE90, "lightgrey": 0xD3D3D3, "lightpink": 0xFFB6C1,
    "lightsalmon": 0xFFA07A, "lightseagreen": 0x20B2AA, "lightskyblue": 0x87CEFA,
    "lightslategray": 0x778899, "lightslategrey": 0x778899, "lightsteelblue": 0xB0C4DE,
    "lightyellow": 0xFFFFE0, "lime": 0x00FF00, "limegreen": 0x32CD32,
    "linen": 0xFAF0E6, "magenta": 0xFF00FF, "maroon": 0x800000,
    "mediumaquamarine": 0x66CDAA, "mediumblue": 0x0000CD, "mediumorchid": 0xBA55D3,
    "mediumpurple": 0x9370DB, "mediumseagreen": 0x3CB371, "mediumslateblue": 0x7B68EE,
    "mediumspringgreen": 0x00FA9A, "mediumturquoise": 0x48D1CC, "mediumvioletred": 0xC71585,
    "midnightblue": 0x191970, "mintcream": 0xF5FFFA, "mistyrose": 0xFFE4E1,
    "moccasin": 0xFFE4B5, "navajowhite": 0xFFDEAD, "navy": 0x000080,
    "oldlace": 0xFDF5E6, "olive": 0x808000, "olivedrab": 0x6B8E23,
    "orange": 0xFFA500, "orangered": 0xFF4500, "orchid": 0xDA70D6,
    "palegoldenrod": 0xEEE8AA, "palegreen": 0x98FB98, "paleturquoise": 0xAFEEEE,
    "palevioletred": 0xDB7093, "papayawhip": 0xFFEFD5, "peachpuff": 0xFFDAB9,
    "peru": 0xCD853F, "pink": 0xFFC0CB, "plum": 0xDDA0DD,
    "powderblue": 0xB0E0E6, "purple": 0x800080, "rebeccapurple": 0x663399,
    "red": 0xFF0000, "rosybrown": 0xBC8F8F, "royalblue": 0x4169E1,
    "saddlebrown": 0x8B4513, "salmon": 0xFA8072, "sandybrown": 0xF4A460,
    "seagreen": 0x2E8B57, "seashell": 0xFFF5EE, "sienna": 0xA0522D,
    "silver": 0xC0C0C0, "skyblue": 0x87CEEB, "slateblue": 0x6A5ACD,
    "slategray": 0x708090, "slategrey": 0x708090, "snow": 0xFFFAFA,
    "springgreen": 0x00FF7F, "steelblue": 0x4682B4, "tan": 0xD2B48C,
    "teal": 0x008080, "thistle": 0xD8BFD8, "tomato": 0xFF6347,
    "turquoise": 0x40E0D0, "violet": 0xEE82EE, "wheat": 0xF5DEB3,
    "white": 0xFFFFFF, "whitesmoke": 0xF5F5F5, "yellow": 0xFFFF00,
    "yellowgreen": 0x9ACD32,
}


def _round(value: float) -> int:
    # Half-up rounding, so 127.5 -> 128 regardless of parity
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)


def _clamp_channel(value: float) -> int:
    return max(0, min(255, _round(value)))


def _clamp_alpha(value: float) -> float:
    return max(0.0, min(1.0, float(value)))


def _parse_alpha(token: Optional[str]) -> float:
    if not token:
        return 1.0
    if token.endswith("%"):
        return _clamp_alpha(float(token[:-1]) / 100)
    return _clamp_alpha(float(token))


def _hue_to_rgb(h: float, s: float, l: float) -> Tuple[int, int, int]:
    s /= 100.0
    l /= 100.0
    a = s * min(l, 1 - l)

    def f(n):
        k = (n + h / 30) % 12
        return l - a * max(-1.0, min(k - 3, 9 - k, 1.0))

    return _clamp_channel(255 * f(0)), _clamp_channel(255 * f(8)), _clamp_channel(255 * f(4))


def _hsb_to_rgb(h: float, s: float, b: float) -> Tuple[int, int, int]:
    s /= 100.0
    b /= 100.0
    h = ((h % 360) + 360) % 360
    i = int(h // 60) % 6
    f = h / 60 - int(h // 60)
    p = b * (1 - s)
    q = b * (1 - f * s)
    t = b * (1 - (1 - f) * s)
    r, g, bl = [(b, t, p), (q, b, p), (p, b, t), (p, q, b), (t, p, b), (b, p, q)][i]
    return _clamp_channel(r * 255), _clamp_channel(g * 255), _clamp_channel(bl * 255)


def parse_hex(value: str) -> Tuple[int, int, int, float]:
    """
    Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``.

    Raises:
        ColorParseError: On wrong length or non-hex digits
    """
    digits = value.strip().lstrip("#")
    if len(digits) in (3, 4):
        digits = "".join(c * 2 for c in digits)
    if len(digits) not in (6, 8):
        raise ColorParseError("Invalid hex color", value=value)
    try:
        r = int(digits[0:2], 16)
        g = int(digits[2:4], 16)
        b = int(digits[4:6], 16)
        a = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    except ValueError:
        raise ColorParseError("Invalid hex color", value=value) from None
    return r, g, b, a


def parse_color_string(value: str) -> Tuple[int, int, int, float]:
    """
    Parse any supported color string into (r, g, b, a).

    Supports hex, rgb()/rgba(), hsl()/hsla(), hsb()/hsba() and CSS named
    colors. An empty string is opaque black.

    Raises:
        ColorParseError: If the string is not a recognised color
    """
    text = value.strip().lower()
    if not text:
        return 0, 0, 0, 1.0

    if text.startswith("#"):
        return parse_hex(text)

    if text.startswith("rgb"):
        match = _RGB_RE.match(text)
        if not match:
            raise ColorParseError(f"Colour {value} could not be parsed", value=value)
        channels = []
        for number, percent in (match.group(1, 2), match.group(3, 4), match.group(5, 6)):
            number = float(number)
            channels.append(_clamp_channel(number * 2.55 if percent else number))
        return channels[0], channels[1], channels[2], _parse_alpha(match.group(7))

    if text.startswith("hsl") or text.startswith("hsb"):
        match = _HSL_RE.match(text)
        if not match:
            raise ColorParseError(f"Colour {value} could not be parsed", value=value)
        kind = match.group(1)
        h, s, l = float(match.group(2)), float(match.group(3)), float(match.group(4))
        convert = _hsb_to_rgb if kind.startswith("hsb") else _hue_to_rgb
        r, g, b = convert(h, s, l)
        return r, g, b, _parse_alpha(match.group(5))

    if text == "transparent":
        return 0, 0, 0, 0.0

    if text in NAMED_COLORS:
        packed = NAMED_COLORS[text]
        return (packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF, 1.0

    raise ColorParseError(f"Colour {value} could not be parsed", value=value)


class Color:
    """
    RGBA color.

    Construct from a string (hex, named, rgb/rgba, hsl/hsla, hsb/hsba),
    from components ``Color(r, g, b[, a])``, from a sequence, a mapping
    with r/g/b/a keys, or another Color.

    Example:
        red = Color("#ff0000")
        mid = red.clone().lerp(Color("lime"), 0.5)
        str(mid)  # "rgba(128, 128, 0, 1)"
    """

    __slots__ = ("r", "g", "b", "a")

    def __init__(self, r: Any = None, g: Optional[float] = None,
                 b: Optional[float] = None, a: Optional[float] = None):
        self.r, self.g, self.b, self.a = 0, 0, 0, 1.0
        if r is not None:
            self.set(r, g, b, a)

    def set(self, r: Any, g: Optional[float] = None,
            b: Optional[float] = None, a: Optional[float] = None) -> "Color":
        """Set channels from any supported input. Returns self."""
        if isinstance(r, Color):
            self.r, self.g, self.b, self.a = r.r, r.g, r.b, r.a
            return self
        if isinstance(r, str):
            self.r, self.g, self.b, self.a = parse_color_string(r)
            return self
        if isinstance(r, Mapping):
            r, g, b, a = r.get("r", 0), r.get("g", 0), r.get("b", 0), r.get("a", 1.0)
        elif isinstance(r, (list, tuple)):
            if len(r) not in (3, 4):
                raise ColorParseError("Color sequences need 3 or 4 components", value=r)
            r, g, b, a = (list(r) + [1.0])[:4]

        try:
            self.r = _clamp_channel(float(r or 0))
            self.g = _clamp_channel(float(g or 0))
            self.b = _clamp_channel(float(b or 0))
            self.a = 1.0 if a is None else _clamp_alpha(a)
        except (TypeError, ValueError):
            raise ColorParseError("Invalid color components", value=(r, g, b, a)) from None
        return self

    def copy_from(self, other: "Color") -> "Color":
        """Copy another color's channels into this one. Returns self."""
        self.r, self.g, self.b, self.a = other.r, other.g, other.b, other.a
        return self

    def clone(self) -> "Color":
        """Creates a copy of this color."""
        return Color().copy_from(self)

    def lerp(self, target: ColorLike, progress: float = 0.5) -> "Color":
        """
        Move this color towards ``target`` by ``progress`` (0-1), in place.

        Args:
            target: Color or anything Color() accepts
            progress: Interpolation factor, clamped to [0, 1]

        Returns:
            self, for chaining
        """
        other = target if isinstance(target, Color) else Color(target)
        if progress <= 0:
            return self
        if progress >= 1:
            return self.copy_from(other)

        q = 1.0 - progress
        self.r = _clamp_channel(self.r * q + other.r * progress)
        self.g = _clamp_channel(self.g * q + other.g * progress)
        self.b = _clamp_channel(self.b * q + other.b * progress)
        self.a = _clamp_alpha(self.a * q + other.a * progress)
        return self

    @property
    def hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @property
    def int(self) -> int:
        return (self.r << 16) | (self.g << 8) | self.b

    def to_tuple(self) -> Tuple[int, int, int, float]:
        return self.r, self.g, self.b, self.a

    def to_string(self) -> str:
        alpha = round(self.a, 4)
        return f"rgba({self.r}, {self.g}, {self.b}, {alpha:g})"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b}, {self.a:g})"

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_tuple())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    __hash__ = None

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        return cls(*parse_hex(value))

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float, a: float = 1.0) -> "Color":
        return cls(*_hue_to_rgb(h, s, l), a)

    @classmethod
    def from_hsb(cls, h: float, s: float, b: float, a: float = 1.0) -> "Color":
        return cls(*_hsb_to_rgb(h, s, b), a)

    @classmethod
    def from_int(cls, value: int) -> "Color":
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def from_named(cls, name: str) -> "Color":
        if name.lower() not in NAMED_COLORS:
            raise ColorParseError(f"Unknown color name: {name}", value=name)
        return cls.from_int(NAMED_COLORS[name.lower()])


__all__ = [
    "Color",
    "ColorLike",
    "NAMED_COLORS",
    "parse_hex",
    "parse_color_string",
]
