# main.py
import uvicorn
from typing import List
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from simulator.commands.decoder import decode
from simulator.entities.robot import Robot
from simulator.utils.consts import SERVER_HOST, SERVER_PORT
from simulator.utils.errors import InvalidInputError
from simulator.utils.logger import log_error, log_info, log_warn

app = FastAPI(title="Toy Robot Simulation Server")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class DecodeInput(BaseModel):
    instructions: str

class DecodeOutput(BaseModel):
    instructions: List[str]
    count: int

class SimulationInput(BaseModel):
    x: int
    y: int
    direction: str
    instructions: str

class PathPoint(BaseModel):
    x: int
    y: int
    d: str

class SimulationOutput(BaseModel):
    final: PathPoint
    path: List[PathPoint]
    steps: int


# =============================================================================
# CORE SIMULATION
# =============================================================================

def run_simulation(x: int, y: int, direction: str, instructions: str) -> dict:
    robot = Robot()
    robot.place(x, y, direction)
    robot.evaluate(instructions)

    return {
        "final": robot.state.get_dict(),
        "path": [s.get_dict() for s in robot.history],
        "steps": len(robot.history) - 1,
    }


# =============================================================================
# ENDPOINTS
# =============================================================================

@app.get("/status")
def health_check():
    log_info("/status")
    return {"status": "ok", "message": "Robot simulation server is running"}


@app.post("/decode", response_model=DecodeOutput)
def decode_instructions(input_data: DecodeInput):
    log_info(f"/decode {input_data.instructions!r}")
    try:
        decoded = decode(input_data.instructions)
    except InvalidInputError as e:
        log_warn(f"/decode rejected {input_data.instructions!r}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return {"instructions": [i.value for i in decoded], "count": len(decoded)}


@app.post("/simulate", response_model=SimulationOutput)
def simulate(input_data: SimulationInput):
    """
    Place a fresh robot, run the instruction string and return the final
    state together with every intermediate state (placement first).
    """
    log_info(
        f"/simulate from ({input_data.x}, {input_data.y}, {input_data.direction}) "
        f"with {input_data.instructions!r}"
    )
    try:
        return run_simulation(
            input_data.x,
            input_data.y,
            input_data.direction,
            input_data.instructions,
        )
    except InvalidInputError as e:
        log_warn(f"/simulate rejected input: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        import traceback; traceback.print_exc()
        log_error(f"/simulate failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))


if __name__ == "__main__":
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)
