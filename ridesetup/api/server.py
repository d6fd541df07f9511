"""
FastAPI server for the ride setup recommender.

Provides JSON endpoints over the calculation engines and the
suspension catalog. The server is stateless: every request is one
engine call.
"""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from ridesetup import __version__
from ridesetup.catalog.suspension import (
    FORK_DATABASE,
    SHOCK_DATABASE,
    find_spec,
    list_forks,
    list_shocks,
)
from ridesetup.models.inputs import (
    GearSetup,
    RidingDiscipline,
    SurfaceType,
    SuspensionInputs,
    SuspensionSpec,
    TireCasing,
    TirePressureInputs,
    TireType,
    WheelDiameter,
)
from ridesetup.models.outputs import (
    ComparisonResult,
    GearRatio,
    PressureResult,
    SuspensionOutcome,
)
from ridesetup.physics.gearing import DEFAULT_CADENCE_RPM, calculate_gear_ratios, compare_setups
from ridesetup.physics.suspension import calculate_suspension_setup
from ridesetup.physics.tire_pressure import calculate_tire_pressure

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Ride Setup Recommender API",
    description="""
    Tire pressure, suspension baseline and gear ratio calculators.

    **NOTE**: Results are starting points. Always respect the limits
    printed on your rims, tires and suspension.
    """,
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


class GearRatioRequest(BaseModel):
    """Request body for the gear ratio endpoint."""
    setup: GearSetup
    cadence: float = Field(default=DEFAULT_CADENCE_RPM, gt=0, description="Crank RPM")


class CompareRequest(BaseModel):
    """Request body for the drivetrain comparison endpoint."""
    current: GearSetup
    proposed: GearSetup


EXAMPLES = {
    "tire-pressure": TirePressureInputs(
        rider_weight=165,
        equipment_weight=19,
        tire_width_mm=28,
        rim_width_mm=21,
        wheel_diameter=WheelDiameter.ROAD_700C,
        casing=TireCasing.STANDARD,
        surface=SurfaceType.PAVEMENT,
        tire_type=TireType.TUBELESS,
    ),
    "suspension": SuspensionInputs(
        rider_weight=180,
        equipment_weight=5,
        fork=FORK_DATABASE["Fox 34 Float"],
        discipline=RidingDiscipline.TRAIL,
    ),
    "gear-ratios": GearRatioRequest(
        setup=GearSetup(chainrings=[50, 34], cogs=[11, 12, 13, 14, 15, 17, 19, 21, 24, 27, 30, 34]),
    ),
}


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check if the API is running."""
    return HealthResponse(status="healthy", version=__version__)


@app.get("/example/{kind}", tags=["Reference"])
async def get_example(kind: str):
    """Get an example request body for a calculator."""
    example = EXAMPLES.get(kind)
    if example is None:
        raise HTTPException(
            status_code=404,
            detail=f"Unknown example '{kind}'. Options: {', '.join(sorted(EXAMPLES))}",
        )
    return example.model_dump(mode="json", exclude_none=True)


@app.post("/tire-pressure", response_model=PressureResult, tags=["Calculators"])
async def tire_pressure(inputs: TirePressureInputs):
    """
    Recommend front and rear tire pressure.

    Warnings list every safety clamp (hookless ceiling, rim-strike floor)
    that changed the result.
    """
    try:
        return calculate_tire_pressure(inputs)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/suspension", response_model=SuspensionOutcome, tags=["Calculators"])
async def suspension(
    inputs: SuspensionInputs,
    fork_name: Optional[str] = Query(default=None, description="Catalog fork to use"),
    shock_name: Optional[str] = Query(default=None, description="Catalog shock to use"),
):
    """
    Recommend suspension air pressure, sag and rebound.

    Returns status "insufficient_input" when no fork or shock is given.
    Catalog names in the query override specs in the body.
    """
    updates = {}
    if fork_name:
        updates["fork"] = _catalog_spec(fork_name, FORK_DATABASE, "fork")
    if shock_name:
        updates["shock"] = _catalog_spec(shock_name, SHOCK_DATABASE, "shock")
    if updates:
        inputs = inputs.model_copy(update=updates)
    try:
        return calculate_suspension_setup(inputs)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/gear-ratios", response_model=list[GearRatio], tags=["Calculators"])
async def gear_ratios(request: GearRatioRequest):
    """List every gear combination, easiest first."""
    return calculate_gear_ratios(request.setup, request.cadence)


@app.post("/compare", response_model=ComparisonResult, tags=["Calculators"])
async def compare(request: CompareRequest):
    """
    Compare a proposed drivetrain against the current one.

    Positive easiest-gear improvement = easier climbing; positive
    hardest-gear improvement = faster top end.
    """
    return compare_setups(request.current, request.proposed)


@app.get("/catalog/forks", tags=["Catalog"])
async def catalog_forks():
    """List catalog fork names."""
    return {"forks": list_forks()}


@app.get("/catalog/shocks", tags=["Catalog"])
async def catalog_shocks():
    """List catalog shock names."""
    return {"shocks": list_shocks()}


@app.get("/catalog/forks/{name}", response_model=SuspensionSpec, tags=["Catalog"])
async def catalog_fork(name: str):
    """Get one fork's default spec."""
    return _catalog_spec(name, FORK_DATABASE, "fork")


@app.get("/catalog/shocks/{name}", response_model=SuspensionSpec, tags=["Catalog"])
async def catalog_shock(name: str):
    """Get one shock's default spec."""
    return _catalog_spec(name, SHOCK_DATABASE, "shock")


@app.get("/surface-types", tags=["Reference"])
async def list_surface_types():
    """Get list of supported riding surfaces."""
    return {
        "surface_types": [s.value for s in SurfaceType],
        "descriptions": {
            "pavement": "Smooth tarmac",
            "poor_pavement": "Cracked or chip-sealed roads",
            "mixed": "Mix of road and light gravel",
            "gravel_hardpack": "Compacted gravel and dirt roads",
            "gravel_loose": "Loose or chunky gravel",
        },
    }


def _catalog_spec(name: str, database, kind: str) -> SuspensionSpec:
    spec = find_spec(name, database)
    if spec is None:
        logger.info("unknown %s requested: %s", kind, name)
        raise HTTPException(status_code=404, detail=f"Unknown {kind}: {name}")
    return spec
