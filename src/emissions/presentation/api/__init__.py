"""
API package.
"""
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .dependencies import get_runtime, init_runtime
from .routes import admin, alerts, emissions, vehicles

# Initialize main app
app = FastAPI(title="EcoTrack Emissions API")

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins for development
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(vehicles.app.router, tags=["vehicles"])
app.include_router(emissions.app.router, tags=["emissions"])
app.include_router(alerts.app.router, tags=["alerts"])
app.include_router(admin.app.router, tags=["admin"])

# Initialize shared components with default settings; run_server.py re-initializes from config
init_runtime()

@app.get("/status")
def status():
    return {"status": "running"}

@app.get("/metrics")
def get_metrics(runtime=Depends(get_runtime)):
    return runtime.metrics.get_metrics().to_dict()
