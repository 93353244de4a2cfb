NOMINAL = "NOMINAL"
WARNING = "WARNING"
CRITICAL = "CRITICAL"


def amplitude_condition(amplitude: float, warning: float, critical: float) -> str:
    """
    Audit label from the absolute raw amplitude.
    Independent of the smoothed / filtered live state.
    """
    value = abs(amplitude)

    if value >= critical:
        return CRITICAL
    elif value >= warning:
        return WARNING
    return NOMINAL
