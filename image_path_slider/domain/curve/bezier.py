"""3차 베지어 스칼라 공식."""


def cubic_bezier(
    t: float, p0: float, p1: float, p2: float, p3: float,
) -> float:
    """B(t) = (1-t)^3 P0 + 3(1-t)^2 t P1 + 3(1-t) t^2 P2 + t^3 P3."""
    u = 1.0 - t
    return (
        u ** 3 * p0
        + 3 * u ** 2 * t * p1
        + 3 * u * t ** 2 * p2
        + t ** 3 * p3
    )


def cubic_bezier_derivative(
    t: float, p0: float, p1: float, p2: float, p3: float,
) -> float:
    """B'(t) = 3(1-t)^2 (P1-P0) + 6(1-t) t (P2-P1) + 3 t^2 (P3-P2)."""
    u = 1.0 - t
    return (
        3 * u ** 2 * (p1 - p0)
        + 6 * u * t * (p2 - p1)
        + 3 * t ** 2 * (p3 - p2)
    )
