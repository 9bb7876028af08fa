"""API endpoints for the bytecode builder."""

from functools import lru_cache

import structlog
from fastapi import APIRouter, Depends

from executor.builders import get_bytecode_builder
from executor.config import ExecutorConfig, load_config_from_env
from executor.errors import BytecodeBuilderError
from executor.models.request import BuildRequest, BuildResponse
from executor.models.types import bytes_to_hex

logger = structlog.get_logger()

router = APIRouter()


@lru_cache(maxsize=1)
def get_config() -> ExecutorConfig:
    """Dependency provider for the network configuration.

    Override this in tests to inject a custom config:
        app.dependency_overrides[get_config] = lambda: my_config
    """
    return load_config_from_env()


@router.post("/bytecode", response_model_exclude_none=True)
def build_bytecode(
    request: BuildRequest,
    config: ExecutorConfig = Depends(get_config),
) -> BuildResponse:
    """Compile a priced route and its call templates into an executor payload.

    Error Handling:
        - Invalid request schema: 422 Validation Error (Pydantic)
        - Builder error (bad templates, overflow, unknown executor): 400
        - Anything else: logged and re-raised (500)
    """
    legs = request.price_route.legs
    logger.info(
        "received_build_request",
        executor=request.executor.value,
        leg_count=len(legs),
        template_count=len(request.exchange_params),
        has_weth_call_data=request.weth_call_data is not None,
    )

    try:
        builder = get_bytecode_builder(request.executor, config)
        bytecode = builder.build_bytecode(
            request.price_route,
            request.exchange_params,
            request.sender,
            request.weth_call_data,
        )
        executor_address = builder.get_address()
    except BytecodeBuilderError as err:
        logger.warning(
            "bytecode_build_failed",
            executor=request.executor.value,
            error_type=type(err).__name__,
            error=str(err),
        )
        raise
    except Exception:
        logger.exception(
            "bytecode_build_error",
            executor=request.executor.value,
            leg_count=len(legs),
        )
        raise

    return BuildResponse(
        bytecode=bytes_to_hex(bytecode),
        executor=request.executor,
        executor_address=executor_address,
    )
