from pydantic import BaseModel, Field

class SystemStats(BaseModel):
    """
    Fleet-wide counters for the admin dashboard.
    """
    total_owners: int = Field(..., ge=0, description="Distinct owners with at least one vehicle")
    total_vehicles: int = Field(..., ge=0)
    total_readings: int = Field(..., ge=0)
    total_alerts: int = Field(..., ge=0)
    active_alerts: int = Field(..., ge=0)
    recent_readings: int = Field(..., ge=0, description="Readings in the last 24 hours")
