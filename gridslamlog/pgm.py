"""Writing a grid of values in [0, 1] as a binary PGM image."""

from __future__ import annotations


def write_pgm(stream, matrix) -> None:
    """Write matrix[x][y] as a binary PGM to a binary stream.

    A value v becomes the grey level 255*|1-v|, so 0 is white and 1 is black;
    the top image row is the largest y.
    """
    xsize = len(matrix)
    ysize = len(matrix[0]) if xsize else 0
    stream.write(f"P5\n{xsize}\n{ysize}\n255\n".encode("ascii"))
    pixels = bytearray()
    for y in range(ysize - 1, -1, -1):
        for column in matrix:
            pixels.append(int(255 * abs(1.0 - column[y])) % 256)
    stream.write(bytes(pixels))