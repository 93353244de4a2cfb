def ema(current: float, previous: float | None, alpha: float) -> float:
    """
    Exponential moving average step.

    Cold start (previous is None) returns current unchanged.
    The caller owns the state and passes the last output back in.
    """
    if previous is None:
        return current

    return alpha * current + (1.0 - alpha) * previous
