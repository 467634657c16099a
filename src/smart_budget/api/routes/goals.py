import asyncio
import datetime as dt
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from smart_budget.api.dependencies import get_store
from smart_budget.api.schemas import ContributionRequest, GoalCreate, GoalView
from smart_budget.logger import get_logger
from smart_budget.models import SavingsGoal, SavingsProjection
from smart_budget.services.savings import (
    InvalidContributionError,
    days_until,
    goal_progress,
    goal_status,
    is_overdue,
    project_goal,
    summarize_cashflow,
)
from smart_budget.storage.base import GoalNotFoundError, Store

logger = get_logger(__name__)

router = APIRouter()


def build_goal_view(
    goal: SavingsGoal,
    projection: SavingsProjection | None = None,
    today: dt.date | None = None,
) -> GoalView:
    return GoalView(
        goal=goal,
        progress=goal_progress(goal),
        status=goal_status(goal),
        days_left=days_until(goal.deadline, today),
        overdue=is_overdue(goal, today),
        projection=projection,
    )


async def _project(goal: SavingsGoal, store: Store) -> SavingsProjection:
    transactions = await asyncio.to_thread(store.list_transactions)
    income = summarize_cashflow(transactions).total_income
    return project_goal(goal, income)


async def _load_goal(goal_id: str, store: Store) -> SavingsGoal:
    try:
        return await asyncio.to_thread(store.get_goal, goal_id)
    except GoalNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Goal not found") from exc


@router.post("/api/goals", response_model=GoalView, status_code=201)
async def create_goal(
    req: GoalCreate,
    store: Annotated[Store, Depends(get_store)],
) -> GoalView:
    goal = SavingsGoal(
        name=req.name,
        target_amount=req.target_amount,
        current_amount=min(req.current_amount, req.target_amount),
        deadline=req.deadline,
        description=req.description,
    )
    await asyncio.to_thread(store.add_goal, goal)
    projection = await _project(goal, store)
    logger.info(
        "[GOALS] Created goal %s '%s': %s by %s (%s)",
        goal.id,
        goal.name,
        goal.target_amount,
        goal.deadline,
        projection.feasibility,
    )
    return build_goal_view(goal, projection)


@router.get("/api/goals", response_model=list[GoalView])
async def list_goals(
    store: Annotated[Store, Depends(get_store)],
) -> list[GoalView]:
    goals = await asyncio.to_thread(store.list_goals)
    return [build_goal_view(goal) for goal in goals]


@router.get("/api/goals/{goal_id}/projection", response_model=SavingsProjection)
async def get_goal_projection(
    goal_id: str,
    store: Annotated[Store, Depends(get_store)],
) -> SavingsProjection:
    goal = await _load_goal(goal_id, store)
    return await _project(goal, store)


@router.post("/api/goals/{goal_id}/contributions", response_model=GoalView)
async def add_goal_contribution(
    goal_id: str,
    req: ContributionRequest,
    store: Annotated[Store, Depends(get_store)],
) -> GoalView:
    try:
        goal = await asyncio.to_thread(store.add_contribution, goal_id, req.amount)
    except GoalNotFoundError as exc:
        raise HTTPException(status_code=404, detail="Goal not found") from exc
    except InvalidContributionError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return build_goal_view(goal)
