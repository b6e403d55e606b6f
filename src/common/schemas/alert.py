from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

class Alert(BaseModel):
    """
    Represents a non-compliance alert.
    Corresponds to the alerts table.
    """
    id: int
    vehicle_id: int
    timestamp: datetime
    gas_type: str = Field(..., description="CO2, CO, NOx or PM")
    measured_value: float
    threshold_value: float
    is_active: bool = True

    model_config = ConfigDict(from_attributes=True)
