class EmissionMonitorError(Exception):
    """Base exception for all emission monitoring errors."""
    pass

class VehicleNotFoundError(EmissionMonitorError):
    """Raised when a vehicle id or device id does not resolve to a vehicle."""
    pass

class AlertNotFoundError(EmissionMonitorError):
    """Raised when an alert id does not exist."""
    pass

class DuplicateDeviceError(EmissionMonitorError):
    """Raised when a device id is already bound to another vehicle."""
    pass

class InvalidRequestError(EmissionMonitorError):
    """Raised when a request is missing the fields it needs."""
    pass

class ConfigurationError(EmissionMonitorError):
    """Raised when configuration is invalid."""
    pass
