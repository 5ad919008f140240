from dataclasses import dataclass


@dataclass(frozen=True)
class Rgb:
    r: int  # Range: [0, 255]
    g: int  # Range: [0, 255]
    b: int  # Range: [0, 255]

    def __iter__(self):
        return iter((self.r, self.g, self.b))


@dataclass(frozen=True)
class Xy:
    x: float  # Range: [0, 1]
    y: float  # Range: [0, 1]

    def __iter__(self):
        return iter((self.x, self.y))


@dataclass(frozen=True)
class Hsb:
    h: float  # Range: [0, 360)
    s: float  # Range: [0, 1]
    b: float  # Range: [0, 1]
