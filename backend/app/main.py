from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from polysolver import solve_equation

app = FastAPI(title="PolySolver API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class EquationRequest(BaseModel):
    equation: str
    variable: Optional[str] = None
    mode: Optional[str] = None


class StepInfo(BaseModel):
    description: str
    expression: str
    explanation: str


class SolveResponse(BaseModel):
    equation: str
    reduced_form: str
    degree: int
    case: str
    discriminant: Optional[float] = None
    solutions: list[str]
    final_answer: str
    steps: list[StepInfo]
    verification_steps: list[StepInfo]
    error: Optional[str] = None


@app.post("/api/solve", response_model=SolveResponse)
def solve(req: EquationRequest):
    equation = req.equation.strip()
    if not equation:
        raise HTTPException(status_code=400, detail="Equation cannot be empty.")

    try:
        result = solve_equation(equation, variable=req.variable, mode=req.mode)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Solver error: {str(e)}")

    return result
