"""
A/B 实验分配 API

- 前端按页面拉取进行中的实验，以及当前用户/会话被分到的版本
- 传入 userId 时分配是粘性的；不传则每次生成新的 sessionId
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from loguru import logger
from pydantic import ValidationError

from author_pages.api.deps import get_experiment_service
from author_pages.experiments.service import ExperimentService
from author_pages.schemas.experiment_schema import GetExperimentsRequest, GetExperimentsResponse

router = APIRouter()


@router.get("", response_model=GetExperimentsResponse, summary="获取页面的实验分配")
async def get_experiments(
    page: Optional[str] = Query(default=None, description="页面标识，例如 landing、pricing"),
    user_id: Optional[str] = Query(default=None, alias="userId", description="用于稳定分桶的用户 ID"),
    service: ExperimentService = Depends(get_experiment_service),
) -> GetExperimentsResponse:
    if not page or not page.strip():
        logger.warning("Missing required 'page' parameter")
        raise HTTPException(status_code=400, detail="Missing required parameter: 'page'")

    try:
        response = await service.get_experiments(GetExperimentsRequest(page=page, user_id=user_id))
    except ValidationError as exc:
        # 存储里的实验文档不合法，属于服务端数据问题
        logger.error(f"Invalid experiment document on page '{page}': {exc}")
        raise HTTPException(
            status_code=500,
            detail="An error occurred while processing your request",
        ) from exc
    except ValueError as exc:
        logger.warning(f"Invalid experiments request: {exc}")
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        logger.error(f"Failed to assign experiments for page '{page}': {exc}")
        raise HTTPException(
            status_code=500,
            detail="An error occurred while processing your request",
        ) from exc

    logger.info(
        f"Assigned {len(response.experiments)} experiments for session {response.session_id}"
    )
    return response
