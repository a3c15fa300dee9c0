from enum import Enum

from pydantic import BaseModel, Field

from .config import DEFAULT_N


class FactorialMethod(str, Enum):
    """Method used to compute a factorial."""
    ITERATIVE = "iterative"
    RECURSIVE = "recursive"


class FactorialRequest(BaseModel):
    """Request model for computing a single factorial.

    Attributes:
        n (int): Non-negative input.
        method (FactorialMethod): Which calculator to use.
    """
    n: int = Field(..., ge=0, description="Input, must be non-negative")
    method: FactorialMethod = Field(default=FactorialMethod.ITERATIVE, description="Computation method")


class FactorialResponse(BaseModel):
    """Response model carrying n! and the method that produced it."""
    n: int = Field(..., description="Input value")
    method: FactorialMethod = Field(..., description="Computation method")
    result: int = Field(..., description="n!")


class ComparisonRequest(BaseModel):
    """Request model for comparing both methods on the same input."""
    n: int = Field(default=DEFAULT_N, ge=0, description="Input, must be non-negative")


class ComparisonResult(BaseModel):
    """Outcome of computing n! with both methods.

    Attributes:
        n (int): Input value.
        iterative (int): Result of the iterative calculator.
        recursive (int): Result of the recursive calculator.
        same (bool): Whether both results are equal.
    """
    n: int = Field(..., description="Input value")
    iterative: int = Field(..., description="Iterative result")
    recursive: int = Field(..., description="Recursive result")
    same: bool = Field(..., description="Whether both results agree")

    def to_line(self) -> str:
        """Render the outcome as ``Same results? true`` or ``Same results? false``."""
        return f"Same results? {str(self.same).lower()}"
