"""Perlin gradient noise over the reference permutation table.

Values are deterministic functions of the input coordinates only; there is
no seed. Output is roughly in [-1, 1] and exactly 0 on integer lattice points.
"""

import math

PERMUTATION = (
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225,
    140, 36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148,
    247, 120, 234, 75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32,
    57, 177, 33, 88, 237, 149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175,
    74, 165, 71, 134, 139, 48, 27, 166, 77, 146, 158, 231, 83, 111, 229, 122,
    60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40, 244, 102, 143, 54,
    65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18, 169,
    200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64,
    52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212,
    207, 206, 59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213,
    119, 248, 152, 2, 44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9,
    129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224, 232, 178, 185, 112, 104,
    218, 246, 97, 228, 251, 34, 242, 193, 238, 210, 144, 12, 191, 179, 162, 241,
    81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214, 31, 181, 199, 106, 157,
    184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150, 254, 138, 236, 205, 93,
    222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66, 215, 61, 156, 180,
)

# Doubled so corner lookups up to index 511 never wrap.
_P = PERMUTATION * 2


def fade(t: float) -> float:
    """Quintic smoothstep 6t^5 - 15t^4 + 10t^3."""
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(t: float, a: float, b: float) -> float:
    return a + t * (b - a)


def grad(hash_value: int, x: float, y: float, z: float) -> float:
    """Dot the offset with one of the 12 cube-edge gradients picked by the hash."""
    h = hash_value & 15
    if h == 0 or h == 12:
        return x + y
    if h == 1 or h == 14:
        return y - x
    if h == 2:
        return x - y
    if h == 3:
        return -x - y
    if h == 4:
        return x + z
    if h == 5:
        return z - x
    if h == 6:
        return x - z
    if h == 7:
        return -x - z
    if h == 8:
        return y + z
    if h == 9 or h == 13:
        return z - y
    if h == 10:
        return y - z
    # 11 and 15
    return -y - z


def noise3(x: float, y: float, z: float) -> float:
    fx = math.floor(x)
    fy = math.floor(y)
    fz = math.floor(z)
    X = fx & 255
    Y = fy & 255
    Z = fz & 255
    x -= fx
    y -= fy
    z -= fz
    u = fade(x)
    v = fade(y)
    w = fade(z)

    A = _P[X] + Y
    AA = _P[A] + Z
    AB = _P[A + 1] + Z
    B = _P[X + 1] + Y
    BA = _P[B] + Z
    BB = _P[B + 1] + Z

    near = _lerp(
        v,
        _lerp(u, grad(_P[AA], x, y, z), grad(_P[BA], x - 1, y, z)),
        _lerp(u, grad(_P[AB], x, y - 1, z), grad(_P[BB], x - 1, y - 1, z)),
    )
    far = _lerp(
        v,
        _lerp(u, grad(_P[AA + 1], x, y, z - 1), grad(_P[BA + 1], x - 1, y, z - 1)),
        _lerp(u, grad(_P[AB + 1], x, y - 1, z - 1), grad(_P[BB + 1], x - 1, y - 1, z - 1)),
    )
    return _lerp(w, near, far)


def noise1(x: float) -> float:
    return noise3(x, 0.0, 0.0)


def noise2(x: float, y: float) -> float:
    return noise3(x, y, 0.0)


def octave_noise(x: float, y: float, z: float, octaves: int, persistence: float) -> float:
    """Sum ``octaves`` layers of noise3, normalised by the total amplitude.

    Each layer doubles the frequency and scales the amplitude by
    ``persistence``; 0.5 is a good place to start.
    """
    if octaves < 1:
        raise ValueError(f"octaves must be at least 1, received {octaves}")
    total = 0.0
    frequency = 1.0
    amplitude = 1.0
    max_value = 0.0
    for _ in range(octaves):
        total += noise3(x * frequency, y * frequency, z * frequency) * amplitude
        max_value += amplitude
        amplitude *= persistence
        frequency *= 2
    if max_value == 0:
        # Amplitudes cancelled out, e.g. negative persistence over an even octave count.
        return math.nan
    return total / max_value
