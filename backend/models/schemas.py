# backend/models/schemas.py
"""
Pydantic Models for API Responses
=================================

Data endpoints return raw store documents (a JSON array), so only the
fixed-shape system and error responses are modelled here.
"""

from pydantic import BaseModel
from typing import Dict, Optional
from enum import Enum


class HealthStatus(str, Enum):
    """Overall service health"""
    HEALTHY = "healthy"
    DEGRADED = "degraded"


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response"""
    error: str


class HelloResponse(BaseModel):
    hello: str = "world"


class AboutResponse(BaseModel):
    info: str = "This is the about page"


class ComponentHealth(BaseModel):
    status: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    """Response for the health check"""
    status: HealthStatus
    components: Dict[str, ComponentHealth]
