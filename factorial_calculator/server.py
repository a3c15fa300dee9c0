import logging

import uvicorn
from fastapi import FastAPI, HTTPException

from .config import LOG_DIR, LOG_LEVEL, SERVER_HOST, SERVER_PORT
from .container import Container
from .logging_config import setup_logging
from .models import (
    ComparisonRequest,
    ComparisonResult,
    FactorialMethod,
    FactorialRequest,
    FactorialResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Factorial Calculator", description="API for computing and comparing factorials")

# DI Container
container = Container()

calculators = {
    FactorialMethod.ITERATIVE: container.iterative_calculator(),
    FactorialMethod.RECURSIVE: container.recursive_calculator(),
}


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.post("/factorial", response_model=FactorialResponse)
def factorial_endpoint(request: FactorialRequest) -> FactorialResponse:
    """Endpoint for computing n! with the requested method.

    Args:
        request: Request with n (non-negative integer) and the method.

    Returns:
        FactorialResponse: Response with the computed factorial.

    Raises:
        HTTPException: 400 if n is outside the supported domain, 500 otherwise.
    """
    try:
        result = calculators[request.method].compute_factorial(request.n)
        return FactorialResponse(n=request.n, method=request.method, result=result)
    except (ValueError, TypeError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error in factorial endpoint: {type(e).__name__}")
        raise HTTPException(status_code=500, detail="Internal server error")


@app.post("/compare", response_model=ComparisonResult)
def compare_endpoint(request: ComparisonRequest) -> ComparisonResult:
    """Endpoint for comparing the iterative and recursive factorials of n.

    Raises:
        HTTPException: 400 if n is outside the supported domain, 500 otherwise.
    """
    try:
        return container.comparator().compare(request.n)
    except (ValueError, TypeError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error in compare endpoint: {type(e).__name__}")
        raise HTTPException(status_code=500, detail="Internal server error")


def run_server() -> None:
    """Start the API with uvicorn."""
    setup_logging("factorial_calculator", level=LOG_LEVEL, log_dir=LOG_DIR)
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)


if __name__ == "__main__":
    run_server()
