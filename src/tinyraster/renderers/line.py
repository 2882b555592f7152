def line_pixels(p0, p1):
    """
    Integer Bresenham walk between two screen points, endpoints included.
    Depends only on the two endpoints; (p0, p1) and (p1, p0) give the same set.
    """
    x0, y0 = int(p0[0]), int(p0[1])
    x1, y1 = int(p1[0]), int(p1[1])

    steep = abs(x0 - x1) < abs(y0 - y1)
    if steep:
        # transpose, step along y
        x0, y0 = y0, x0
        x1, y1 = y1, x1
    if x0 > x1:
        x0, x1 = x1, x0
        y0, y1 = y1, y0

    dx = x1 - x0
    dy = y1 - y0
    derror2 = abs(dy) * 2
    ystep = 1 if y1 > y0 else -1
    error2 = 0
    y = y0

    out = []
    for x in range(x0, x1 + 1):
        out.append((y, x) if steep else (x, y))
        error2 += derror2
        if error2 > dx:
            y += ystep
            error2 -= dx * 2
    return out

def draw_line(target, p0, p1, color):
    for x, y in line_pixels(p0, p1):
        target.set_pixel(x, y, color)
