"""
API endpoints for analytics events and the admin dashboard.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, status

from buzzhub.core.models.io import AnalyticsCreate, AnalyticsRead, DashboardStats
from buzzhub.server.services.deps import EngagementServiceDep, StorageDep

router = APIRouter(tags=["analytics"])


@router.post(
    "/analytics",
    response_model=AnalyticsRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record Analytics Event",
    description="Record a view, like, share or comment event. Views and shares also bump the post counters.",
    responses={404: {"description": "Post not found"}},
)
async def record_event(data: AnalyticsCreate, engagement: EngagementServiceDep) -> AnalyticsRead:
    return AnalyticsRead.model_validate(await engagement.record_event(data))


@router.get(
    "/posts/{post_id}/analytics",
    response_model=List[AnalyticsRead],
    summary="List Post Analytics",
)
async def list_post_analytics(post_id: int, storage: StorageDep) -> List[AnalyticsRead]:
    return [AnalyticsRead.model_validate(event) for event in await storage.get_analytics_by_post(post_id)]


@router.get(
    "/analytics/dashboard",
    response_model=DashboardStats,
    summary="Dashboard Statistics",
    description="Totals across all posts and active users, plus month-over-month growth.",
)
async def dashboard(storage: StorageDep) -> DashboardStats:
    """
    Admin dashboard summary.

    - **total_posts**: Every post regardless of status.
    - **total_views**: Sum of post views.
    - **total_engagement**: Sum of likes, comments and shares.
    - **active_users**: Users whose account is active.
    """
    return DashboardStats.model_validate(await storage.get_dashboard_stats())
