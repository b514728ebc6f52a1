import logging

logger: logging.Logger = logging.getLogger(__name__)

def validate_capacity_gb(capacity_gb: int) -> int:
    """
    Validate the capacity in GB of a block device.

    Args:
        capacity_gb: Capacity in GB to validate

    Returns:
        int: Validated capacity in GB

    Raises:
        ValueError: If capacity is not a positive integer
    """
    if isinstance(capacity_gb, bool) or not isinstance(capacity_gb, int) or capacity_gb <= 0:
        raise ValueError('Capacity must be a positive integer')

    return capacity_gb

def validate_name(name: str, type_name: str = "Name") -> str:
    """
    Validate a required, non-blank string parameter.

    Args:
        name: Value to validate
        type_name: Label used in the error message

    Returns:
        str: Validated value

    Raises:
        ValueError: If the value is empty, blank or too long
    """
    if not name or not isinstance(name, str) or not name.strip():
        msg: str = f'{type_name} must be a non-empty string'
        logger.error(msg)
        raise ValueError(msg)

    if len(name) > 255:
        raise ValueError(f'{type_name} must be 255 characters or less')

    return name

def validate_timeout(timeout: int) -> int:
    if isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0:
        raise ValueError('Completion timeout must be a positive number of seconds')
    return timeout
