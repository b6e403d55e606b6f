from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

class VehicleCreate(BaseModel):
    """
    Payload for registering a vehicle and its IoT device.
    """
    owner_id: str = Field(..., min_length=1, description="Identity of the owning user")
    make: str = Field(..., min_length=1, description="Manufacturer")
    model: str = Field(..., min_length=1, description="Model name")
    fuel_type: str = Field(..., min_length=1, description="petrol, diesel, hybrid, electric or cng")
    device_id: str = Field(..., min_length=1, description="Unique id of the emission sensor")

class Vehicle(BaseModel):
    """
    Represents a registered vehicle.
    Corresponds to the vehicles table.
    """
    id: int = Field(..., description="Store-assigned vehicle id")
    owner_id: str = Field(..., description="Identity of the owning user")
    make: str
    model: str
    fuel_type: str
    device_id: str = Field(..., description="Unique id of the emission sensor")
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
