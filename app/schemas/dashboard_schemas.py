from pydantic import BaseModel, Field


class DashboardStatsResponse(BaseModel):
    """Portfolio statistics shown on the dashboard"""

    model_config = {"from_attributes": True}

    total_properties: int
    approved_properties: int
    total_units: int
    occupied_units: int
    vacant_units: int
    maintenance_units: int
    occupancy_rate: int = Field(..., description="Occupied units as a percentage of all units")
    rent_collected: float = Field(..., description="Sum of total_paid over active tenants")
    outstanding_balance: float = Field(..., description="Sum of balances over active tenants")
    delayed_payments: int = Field(..., description="Active tenants with a positive balance")
